"""Configuration management for ffcmd.

Precedence: CLI flags, then FFCMD_* environment variables, then the config
file (~/.ffcmd/config.toml), then defaults.
"""

from ffcmd.config.env import EnvReader
from ffcmd.config.loader import (
    ConfigError,
    get_config,
    get_default_config_path,
    load_config_file,
    resolve_ffmpeg,
)
from ffcmd.config.models import (
    FFCmdConfig,
    LoggingConfig,
    RunnerConfig,
    ToolPathsConfig,
)

__all__ = [
    # Models
    "FFCmdConfig",
    "LoggingConfig",
    "RunnerConfig",
    "ToolPathsConfig",
    # Loader
    "ConfigError",
    "EnvReader",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "resolve_ffmpeg",
]
