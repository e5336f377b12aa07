"""The main entry point for pytest fixtures.

This will run before any tests are executed when `import pytest` is called.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from loguru import logger

from player_service.api.main import create_app
from player_service.api.services.store import PlayerStore
from player_service.api.settings import Settings
from player_service.helpers.logging_helpers import LOG_FORMAT


def _setup_logging() -> None:
    """Add a file sink to the default pytest console logging."""
    # logs/pytest_YYYYMMDD.log
    logs_dir = Path(__file__).resolve().parent.parent / "logs"
    logs_dir.mkdir(exist_ok=True)
    logfile = logs_dir / f"pytest_{datetime.now():%Y%m%d}.log"

    # Add file sink to existing pytest console handler
    logger.add(
        logfile,
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    # Intercept stdlib logging so everything funnels through Loguru
    class InterceptHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                level = logger.level(record.levelname).name
            except ValueError:
                level = logging.getLevelName(record.levelno)
            logger.opt(depth=6, exception=record.exc_info, colors=False).log(
                level, record.getMessage()
            )

    # Force stdlib logging to go through our intercept handler
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def pytest_configure(config: pytest.Config) -> None:
    """Pytest configuration hook to add a file sink to default pytest logging."""
    _setup_logging()


@pytest.fixture
def settings() -> Settings:
    """Settings pinned to known values, independent of the environment."""
    return Settings(host="localhost", port=3000, cors_allow_all=False)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh application with its own seeded store."""
    return create_app(settings)


@pytest.fixture
def store(app: FastAPI) -> PlayerStore:
    """The store owned by the `app` fixture."""
    return app.state.store


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client with the app lifespan running."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture Loguru messages emitted during a test."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(sink_id)
