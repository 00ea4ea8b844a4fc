"""Tests for CLI main module."""

from pathlib import Path

import pytest
from loguru import logger

from artifact_validator.cli.main import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_quiet_by_default(self) -> None:
        setup_logging()
        assert len(logger._core.handlers) == 0

    def test_verbose_adds_stderr_handler(self) -> None:
        setup_logging(verbose=True)
        assert len(logger._core.handlers) == 1

    def test_log_file_receives_debug_messages(self, tmp_path: Path) -> None:
        log_file = tmp_path / "validator.log"

        setup_logging(log_file=log_file)
        logger.debug("checking {}", "events.jsonl")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "DEBUG" in content
        assert "checking events.jsonl" in content

    def test_verbose_and_log_file(self, tmp_path: Path) -> None:
        setup_logging(verbose=True, log_file=tmp_path / "validator.log")
        assert len(logger._core.handlers) == 2
