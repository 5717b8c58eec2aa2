"""Logging for mdmend: one ``mdmend`` logger tree, configured once per CLI run.

Fixers never log. The pipeline reports which fixer changed the text and the
session reports renders and mode switches, all at DEBUG, so a normal run is
silent and ``-v`` shows the repair trace.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "mdmend"

CONSOLE_FORMAT = "[%(name)s] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``mdmend.<name>``, or the ``mdmend`` root logger."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | str | None = None
) -> logging.Logger:
    """
    Send mdmend records to stderr, and to ``log_file`` when given.

    Calling again replaces (and closes) the handlers from the previous call.
    ``verbose`` wins over ``quiet``.
    """
    level = _level(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(Path(log_file), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
