"""Logging helpers for Player Service."""

import sys
from pathlib import Path

from loguru import logger

from player_service.core.constants import LOGS_FPATH

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def configure_logger(
    source: str, console_level: str = "ERROR", logs_dir: Path = LOGS_FPATH
) -> Path:
    """Configure Loguru logging.

    Returns:
        Path: The (templated) path of the file sink.
    """
    # Clear any previously added handlers
    logger.remove()

    # Console handler
    logger.add(sink=sys.stderr, level=console_level, format=LOG_FORMAT)

    # File handler — DEBUG+, rotated daily, keep 7 days, zipped
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_path = logs_dir / f"{source}_{'{time:YYYYMMDD}'}.log"

    logger.add(
        sink=str(log_path),
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    logger.debug(
        f"Logger configured for source '{source}'. "
        f"Sinks: stderr (level={console_level}+), file (level=DEBUG+) at '{log_path}'. "
        f"Rotation daily at midnight, retention 7 days, zipped."
    )
    return log_path
