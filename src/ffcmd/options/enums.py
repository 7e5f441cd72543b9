"""Named values accepted by FFmpeg options.

Fields that take these values are plain strings, so any value FFmpeg
understands can be passed; the enums only name the common ones.
"""

from enum import Enum


class StreamType(str, Enum):
    """Stream specifier media types."""

    AUDIO = "a"
    SUBTITLE = "s"
    VIDEO = "v"
    VIDEO_NOT_THUMBNAIL = "V"  # Video streams that are not attached pictures


class LogLevel(str, Enum):
    """Values for -loglevel."""

    QUIET = "quiet"  # Show nothing at all
    PANIC = "panic"  # Only errors that could crash the process
    FATAL = "fatal"  # Errors after which the process cannot continue
    ERROR = "error"  # All errors, including recoverable ones
    WARNING = "warning"
    INFO = "info"  # FFmpeg's default
    VERBOSE = "verbose"
    DEBUG = "debug"
    TRACE = "trace"


class DeinterlacingMode(str, Enum):
    """Values for -deint."""

    ADAPTIVE = "adaptive"
    BOB = "bob"
    WEAVE = "weave"


class Coder(str, Enum):
    """Values for -coder."""

    AC = "ac"
    CABAC = "cabac"
    CAVLC = "cavlc"
    DEFAULT = "default"
    VLC = "vlc"


class Preset(str, Enum):
    """Values for -preset (x264/x265)."""

    ULTRAFAST = "ultrafast"
    SUPERFAST = "superfast"
    VERYFAST = "veryfast"
    FASTER = "faster"
    FAST = "fast"
    MEDIUM = "medium"
    SLOW = "slow"
    SLOWER = "slower"
    VERYSLOW = "veryslow"


class Profile(str, Enum):
    """Values for -profile (H.264)."""

    BASELINE = "baseline"
    MAIN = "main"
    HIGH = "high"
    HIGH10 = "high10"
    HIGH422 = "high422"
    HIGH444 = "high444"


class Tune(str, Enum):
    """Values for -tune (x264)."""

    ANIMATION = "animation"
    FASTDECODE = "fastdecode"
    FILM = "film"
    GRAIN = "grain"
    STILLIMAGE = "stillimage"
    ZEROLATENCY = "zerolatency"


def option_text(value: str) -> str:
    """Return the FFmpeg text for a plain string or one of the enums above."""
    if isinstance(value, Enum):
        return str(value.value)
    return value
