"""Tests for logging configuration."""

import logging
import tempfile
from pathlib import Path

import pytest

from mdmend.logging import configure_logging, get_logger
from mdmend.repair.pipeline import repair


@pytest.fixture
def mdmend_logger():
    """Restore a plain console setup after each test."""
    yield logging.getLogger("mdmend")
    configure_logging()


def test_get_logger_hierarchy():
    """Test component loggers live under mdmend."""
    assert get_logger().name == "mdmend"
    assert get_logger("pipeline").name == "mdmend.pipeline"


def test_configure_logging_levels(mdmend_logger):
    """Test verbose wins over quiet and quiet raises the threshold."""
    assert configure_logging().level == logging.INFO
    assert configure_logging(quiet=True).level == logging.WARNING
    assert configure_logging(verbose=True, quiet=True).level == logging.DEBUG


def test_reconfigure_replaces_and_closes_handlers(mdmend_logger):
    """Test a second call drops the first call's handlers and closes its file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        logger = configure_logging(log_file=Path(tmpdir) / "first.log")
        file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

        configure_logging()

        assert file_handler not in logger.handlers
        assert file_handler.stream is None
        assert len(logger.handlers) == 1


def test_file_sink_records_fixer_trace(mdmend_logger):
    """Test a verbose run writes which fixer changed the text."""
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = Path(tmpdir) / "mdmend.log"
        configure_logging(verbose=True, log_file=log_path)

        repair("Hello **world")
        configure_logging()

        text = log_path.read_text(encoding="utf-8")
        assert "mdmend.pipeline" in text
        assert "strong changed content" in text
