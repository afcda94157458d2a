"""Logging setup for build-statement runs."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "statement_builder"
_CONSOLE_FORMAT = "[statement-builder] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``statement_builder.<name>``, or the package logger itself."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def _handler(handler: logging.Handler, fmt: str, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route package logs to stderr, plus ``log_file`` when given.

    Safe to call once per ``main()`` invocation: previous handlers are closed
    and replaced. The log file's parent directory must already exist.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_handler(logging.StreamHandler(), _CONSOLE_FORMAT, level))
    if log_file is not None:
        logger.addHandler(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), _FILE_FORMAT, level)
        )
    return logger


__all__ = ["configure_logging", "get_logger"]
