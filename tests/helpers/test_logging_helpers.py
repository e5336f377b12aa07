"""Tests for logging helpers."""

from pathlib import Path

import pytest
from loguru import logger

from player_service.helpers.logging_helpers import configure_logger


@pytest.mark.unit
def test_configure_logger_writes_file(tmp_path: Path) -> None:
    """Should create the log dir and send DEBUG records to the file sink."""
    logs_dir = tmp_path / "logs"
    log_path = configure_logger("unit", console_level="INFO", logs_dir=logs_dir)
    try:
        assert logs_dir.is_dir()
        assert log_path.name == "unit_{time:YYYYMMDD}.log"

        logger.debug("file sink check")
        logger.complete()

        files = list(logs_dir.glob("unit_*.log"))
        assert len(files) == 1
        assert "file sink check" in files[0].read_text(encoding="utf-8")
    finally:
        # Drop sinks holding tmp_path files open
        logger.remove()
