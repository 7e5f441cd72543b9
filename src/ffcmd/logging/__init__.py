"""Logging for ffcmd.

Text or JSON records, optional file rotation, and job context tagging.
"""

from ffcmd.logging.config import PACKAGE_LOGGER, configure_logging
from ffcmd.logging.context import JobContextFilter, get_job_context, job_context
from ffcmd.logging.formatters import JSONFormatter, TextFormatter

__all__ = [
    "JSONFormatter",
    "JobContextFilter",
    "PACKAGE_LOGGER",
    "TextFormatter",
    "configure_logging",
    "get_job_context",
    "job_context",
]
