"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (FFCMD_*)
3. Config file (~/.ffcmd/config.toml)
4. Default values

Environment variables:
- FFCMD_CONFIG_PATH: Path to config file
- FFCMD_FFMPEG_PATH: Path to ffmpeg executable
- FFCMD_TIMEOUT: Seconds before a run is killed
- FFCMD_PROGRESS_PERIOD: Seconds between progress samples
- FFCMD_LOG_LEVEL: debug, info, warning or error
- FFCMD_LOG_FILE: Log file path
- FFCMD_LOG_FORMAT: text or json

Example config.toml::

    [tools]
    ffmpeg = "/opt/ffmpeg/bin/ffmpeg"

    [runner]
    timeout = 3600
    progress_period = 0.5

    [logging]
    level = "debug"
"""

from __future__ import annotations

import logging
import shutil
import tomllib
from pathlib import Path
from typing import Any

from ffcmd.config.env import EnvReader
from ffcmd.config.models import (
    FFCmdConfig,
    LoggingConfig,
    RunnerConfig,
    ToolPathsConfig,
)
from ffcmd.errors import ToolNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".ffcmd"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


class ConfigError(ValueError):
    """Raised when a config file cannot be read in strict mode."""


def get_default_config_path(env: EnvReader | None = None) -> Path:
    """Get the config file path, honoring FFCMD_CONFIG_PATH."""
    env = env or EnvReader()
    env_path = env.get_str("FFCMD_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file. If None, uses the default location.
        strict: Raise ConfigError instead of returning an empty dict when
            the file cannot be read or parsed.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise ConfigError(f"Failed to load config file {path}: {e}") from e
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def get_config(
    config_path: Path | None = None,
    *,
    env: EnvReader | None = None,
    ffmpeg_path: Path | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
    log_file: Path | None = None,
    log_format: str | None = None,
) -> FFCmdConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Config file (overrides FFCMD_CONFIG_PATH).
        env: Environment reader; defaults to os.environ.
        ffmpeg_path: CLI override for the ffmpeg binary.
        timeout: CLI override for the run timeout.
        log_level: CLI override for the log level.
        log_file: CLI override for the log file.
        log_format: CLI override for the log format.

    Returns:
        FFCmdConfig with merged configuration.

    Raises:
        ValueError: If a merged value is invalid (e.g. unknown log level).
    """
    env = env or EnvReader()
    file_config = load_config_file(config_path or get_default_config_path(env))

    tools_file = file_config.get("tools", {})
    tools = ToolPathsConfig(
        ffmpeg=_first(
            ffmpeg_path,
            env.get_path("FFCMD_FFMPEG_PATH"),
            Path(tools_file["ffmpeg"]) if tools_file.get("ffmpeg") else None,
        ),
    )

    runner_file = file_config.get("runner", {})
    runner = RunnerConfig(
        timeout=_first(timeout, env.get_float("FFCMD_TIMEOUT"), runner_file.get("timeout")),
        progress_period=_first(
            env.get_float("FFCMD_PROGRESS_PERIOD"),
            runner_file.get("progress_period"),
            RunnerConfig.progress_period,
        ),
    )

    logging_file = file_config.get("logging", {})
    file_log_path = logging_file.get("file")
    logging_config = LoggingConfig(
        level=_first(
            log_level,
            env.get_str("FFCMD_LOG_LEVEL"),
            logging_file.get("level"),
            LoggingConfig.level,
        ),
        file=_first(
            log_file,
            env.get_path("FFCMD_LOG_FILE", must_exist=False),
            Path(file_log_path).expanduser() if file_log_path else None,
        ),
        format=_first(
            log_format,
            env.get_str("FFCMD_LOG_FORMAT"),
            logging_file.get("format"),
            LoggingConfig.format,
        ),
        include_stderr=logging_file.get("include_stderr", False),
        max_bytes=logging_file.get("max_bytes", LoggingConfig.max_bytes),
        backup_count=logging_file.get("backup_count", LoggingConfig.backup_count),
    )

    return FFCmdConfig(tools=tools, runner=runner, logging=logging_config)


def resolve_ffmpeg(tools: ToolPathsConfig | None = None) -> Path:
    """Locate the ffmpeg binary.

    Uses the configured path when set, otherwise searches PATH.

    Raises:
        ToolNotFoundError: If ffmpeg cannot be found.
    """
    if tools is not None and tools.ffmpeg is not None:
        return tools.ffmpeg
    found = shutil.which("ffmpeg")
    if found is None:
        raise ToolNotFoundError(
            "ffmpeg not found in PATH; set FFCMD_FFMPEG_PATH or [tools] ffmpeg"
        )
    return Path(found)
