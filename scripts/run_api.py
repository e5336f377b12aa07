"""Entrypoint to run the Player Service API server.

Example:
    python -m scripts.run_api
    python scripts/run_api.py --host 0.0.0.0 --port 3000 --reload
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

import uvicorn
from loguru import logger

from player_service.api.settings import get_settings
from player_service.core.constants import LOGS_FPATH
from player_service.helpers.logging_helpers import configure_logger


def _port(value: str) -> int:
    """Validate and return a TCP port.

    Args:
        value: Port value provided as a string.

    Returns:
        A valid TCP port number.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in [1, 65535].
    """
    try:
        port = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError("port must be an integer") from e
    if not (1 <= port <= 65535):
        raise argparse.ArgumentTypeError("port must be between 1 and 65535")
    return port


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the API runner.

    Defaults come from `PLAYER_API_*` environment settings.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Player Service API runner")

    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help=f"Host interface to bind the API server to (default: {settings.host}).",
    )
    parser.add_argument(
        "--port",
        type=_port,
        default=settings.port,
        help=f"Port to run the API server on (default: {settings.port}).",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=LOGS_FPATH,
        help="Directory for the rotated log files (default: logs).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show debug logs (-v) on the console.",
    )
    return parser.parse_args(argv)


def _export_settings(args: argparse.Namespace) -> None:
    """Hand host/port to the app, which reads them from the environment."""
    os.environ["PLAYER_API_HOST"] = args.host
    os.environ["PLAYER_API_PORT"] = str(args.port)


def run(args: argparse.Namespace) -> int:
    """Run the FastAPI app with the provided arguments.

    Builds a uvicorn.Server and executes it, handling common exceptions.
    The store lives in process memory, so a single process is served.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Exit code: 0 on clean shutdown, 130 on SIGINT, 1 on error.
    """
    try:
        _export_settings(args)
        logger.debug(f"Starting API ({args.host}:{args.port}) (reload={args.reload})")

        config = uvicorn.Config(
            "player_service.api.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            # Hand logging to Loguru; avoid uvicorn's default dictConfig
            log_config=None,
        )
        server = uvicorn.Server(config)

        # server.run() returns None; a failed startup exits via SystemExit
        server.run()
        return 0

    except KeyboardInterrupt:
        logger.info("Received interrupt. Shutting down...")
        return 130
    except Exception:
        logger.exception("API server crashed")
        return 1


def main() -> None:
    """Main entrypoint for running the API server.

    Parses args, configures logging and exits with the code returned
    from `run(args)`.
    """
    args = parse_args()

    console_level = "DEBUG" if args.verbose > 0 else "INFO"
    try:
        configure_logger("api", console_level=console_level, logs_dir=args.log_dir)
    except Exception as e:
        # Fall back to default Loguru sink but proceed
        logger.warning(f"Failed to configure logger in '{args.log_dir}'; ({e})")

    code = run(args)
    sys.exit(code)


if __name__ == "__main__":
    main()
