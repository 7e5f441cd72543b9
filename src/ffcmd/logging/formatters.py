"""Formatters for ffcmd log records.

The runner attaches details of the FFmpeg invocation to its records with
``extra=``. Both formatters render those fields after the message instead
of folding them into it, so JSON consumers get them as separate keys.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Run details the runner may attach, in display order
RUN_FIELDS: tuple[str, ...] = ("returncode", "timeout", "command")


def _run_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields = {}
    for name in RUN_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            fields[name] = value
    return fields


class TextFormatter(logging.Formatter):
    """One line per record, with run fields appended as ``key=value``::

        ... WARNING [Jnightly] ffcmd.executor.runner: ffmpeg timed out
            timeout=30 command=ffmpeg -i in.mkv -y out.mp4

    (wrapped here; the record is a single line).
    """

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s %(levelname)s %(job_tag)s%(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        # Records that bypassed JobContextFilter
        if not hasattr(record, "job_tag"):
            record.job_tag = ""
        text = super().format(record)
        details = " ".join(f"{k}={v}" for k, v in _run_fields(record).items())
        if not details:
            return text
        # Keep tracebacks after the details
        head, sep, tail = text.partition("\n")
        return f"{head} {details}{sep}{tail}"


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``time`` (ISO-8601 UTC), ``level``, ``logger``, ``message``, then
    ``job`` and the run fields when present, and ``exception`` last.
    """

    def format(self, record: logging.LogRecord) -> str:
        record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "time": record_time.isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        job_id = getattr(record, "job_id", None)
        if job_id:
            entry["job"] = job_id
        entry.update(_run_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)
