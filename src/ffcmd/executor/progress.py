"""Observing FFmpeg's stderr while it runs.

A StdErrParser registered on the runner is called once per period with
everything FFmpeg has written to stderr so far. ProgressParser is the
bundled implementation: it extracts the latest progress line, e.g.::

    frame= 1234 fps= 30 q=28.0 size=  2048kB time=00:01:23.45 bitrate=5000kbits/s speed=2.0x
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class StdErrParser(Protocol):
    """Periodic observer of FFmpeg's stderr."""

    def period(self) -> float:
        """Seconds between two calls to process()."""
        ...

    def process(self, timestamp: datetime, stderr: str) -> None:
        """Handle a snapshot of the stderr captured so far."""
        ...


@dataclass
class FFmpegProgress:
    """Parsed FFmpeg progress output."""

    frame: int | None = None
    fps: float | None = None
    bitrate: str | None = None
    total_size: int | None = None
    out_time_us: int | None = None  # Output time in microseconds
    speed: str | None = None

    @property
    def out_time_seconds(self) -> float | None:
        if self.out_time_us is not None:
            return self.out_time_us / 1_000_000
        return None

    def get_percent(self, duration_seconds: float | None) -> float:
        """Calculate progress percentage based on duration.

        Args:
            duration_seconds: Total duration of the input in seconds.

        Returns:
            Progress percentage (0.0 to 100.0), or 0.0 if unknown.
        """
        if duration_seconds is None or duration_seconds <= 0:
            return 0.0
        out_time = self.out_time_seconds
        if out_time is None:
            return 0.0
        return min(100.0, (out_time / duration_seconds) * 100)


PROGRESS_PATTERNS = {
    "frame": re.compile(r"frame=\s*(\d+)"),
    "fps": re.compile(r"fps=\s*([\d.]+)"),
    "bitrate": re.compile(r"bitrate=\s*([^\s]+)"),
    "speed": re.compile(r"speed=\s*([^\s]+)"),
}
_TIME_PATTERN = re.compile(r"time=(\d+):(\d+):(\d+)\.(\d+)")
_SIZE_PATTERN = re.compile(r"size=\s*(\d+)kB")


def _convert(key: str, value: str) -> int | float | str | None:
    if key == "frame":
        return int(value)
    if key == "fps":
        try:
            return float(value)
        except ValueError:
            return None
    return value if value != "N/A" else None


def parse_stderr_progress(line: str) -> FFmpegProgress | None:
    """Parse an FFmpeg stderr progress line.

    Returns:
        Parsed FFmpegProgress, or None if the line is not a progress line.
    """
    if "frame=" not in line:
        return None

    result = FFmpegProgress()
    for key, pattern in PROGRESS_PATTERNS.items():
        match = pattern.search(line)
        if match:
            converted = _convert(key, match.group(1))
            if converted is not None:
                setattr(result, key, converted)

    size_match = _SIZE_PATTERN.search(line)
    if size_match:
        result.total_size = int(size_match.group(1)) * 1024

    time_match = _TIME_PATTERN.search(line)
    if time_match:
        hours, minutes, seconds, centiseconds = (int(g) for g in time_match.groups())
        result.out_time_us = (
            hours * 3600 + minutes * 60 + seconds
        ) * 1_000_000 + centiseconds * 10_000

    return result


def last_progress(stderr: str) -> FFmpegProgress | None:
    """Return the most recent progress found in captured stderr."""
    for line in reversed(re.split(r"[\r\n]+", stderr)):
        progress = parse_stderr_progress(line)
        if progress is not None:
            return progress
    return None


class ProgressParser:
    """StdErrParser that reports the latest FFmpegProgress to a callback.

    The callback is only invoked when a progress line is present and it
    differs from the one previously reported.
    """

    def __init__(
        self,
        callback: Callable[[FFmpegProgress], None],
        period: float = 1.0,
    ) -> None:
        self._callback = callback
        self._period = period
        self._last: FFmpegProgress | None = None

    def period(self) -> float:
        return self._period

    def process(self, timestamp: datetime, stderr: str) -> None:
        progress = last_progress(stderr)
        if progress is None or progress == self._last:
            return
        self._last = progress
        self._callback(progress)
