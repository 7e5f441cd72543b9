"""Process layer: runs FFmpeg and observes its stderr.

- runner: FFmpeg subprocess runner with timeout and cancellation
- progress: StdErrParser protocol and the bundled ProgressParser
"""

from ffcmd.executor.progress import (
    FFmpegProgress,
    ProgressParser,
    StdErrParser,
    last_progress,
    parse_stderr_progress,
)
from ffcmd.executor.runner import FFmpeg, StderrBuffer

__all__ = [
    "FFmpeg",
    "FFmpegProgress",
    "ProgressParser",
    "StdErrParser",
    "StderrBuffer",
    "last_progress",
    "parse_stderr_progress",
]
