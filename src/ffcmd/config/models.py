"""Configuration data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True)
class ToolPathsConfig:
    """External tool paths. Unset tools are looked up in PATH."""

    ffmpeg: Path | None = None


@dataclass(frozen=True)
class RunnerConfig:
    """Defaults for running FFmpeg."""

    # Seconds before FFmpeg is killed (None = no limit)
    timeout: float | None = None

    # Seconds between two progress samples
    progress_period: float = 1.0

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.progress_period <= 0:
            raise ValueError(
                f"progress_period must be positive, got {self.progress_period}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        if self.level.casefold() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"level must be one of {sorted(VALID_LOG_LEVELS)}, got {self.level}"
            )
        if self.format.casefold() not in VALID_LOG_FORMATS:
            raise ValueError(
                f"format must be one of {sorted(VALID_LOG_FORMATS)}, got {self.format}"
            )


@dataclass(frozen=True)
class FFCmdConfig:
    """Complete ffcmd configuration."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    runner: RunnerConfig = field(default_factory=RunnerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
