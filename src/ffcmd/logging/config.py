"""Logging setup for the ffcmd command line."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from ffcmd.logging.context import JobContextFilter
from ffcmd.logging.formatters import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from ffcmd.config.models import LoggingConfig

# Parent of every logger in the package
PACKAGE_LOGGER = "ffcmd"


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    """Return a rotating handler for ``config.file``, or None if it cannot be opened."""
    assert config.file is not None
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Route ffcmd's records to a log file, stderr, or both.

    Only the ``ffcmd`` logger is configured; it stops propagating, so an
    application embedding the package keeps its own root handlers. Calling
    this again replaces the handlers installed by the previous call.

    Returns:
        The configured package logger.
    """
    formatter: logging.Formatter
    if config.format.casefold() == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    context_filter = JobContextFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        logger.addHandler(handler)

    logger.setLevel(config.level.upper())
    logger.propagate = False
    return logger
