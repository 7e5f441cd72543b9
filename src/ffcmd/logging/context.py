"""Job context for structured logging.

Uses contextvars so records logged while a job runs carry its id, even
when several jobs run on different threads.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_job_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "job_id", default=None
)


def get_job_context() -> str | None:
    return _job_id.get()


@contextmanager
def job_context(job_id: str) -> Generator[None, None, None]:
    """Tag log records with ``job_id`` for the duration of the block.

    Example:
        with job_context("transcode-01"):
            logger.info("Starting")  # "[Jtranscode-01] ..." in text format
    """
    token = _job_id.set(job_id)
    try:
        yield
    finally:
        _job_id.reset(token)


class JobContextFilter(logging.Filter):
    """Logging filter that injects the job id into log records.

    Adds ``job_id`` for JSON output and ``job_tag`` ("[J<id>] " or empty)
    for text output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        job_id = get_job_context()
        record.job_id = job_id
        record.job_tag = f"[J{job_id}] " if job_id else ""
        return True  # Never filter out records
