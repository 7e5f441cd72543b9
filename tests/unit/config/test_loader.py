"""Tests for configuration loading and precedence."""

from pathlib import Path
from unittest.mock import patch

import pytest

from ffcmd.config import (
    ConfigError,
    EnvReader,
    ToolPathsConfig,
    get_config,
    get_default_config_path,
    load_config_file,
    resolve_ffmpeg,
)
from ffcmd.config.models import LoggingConfig, RunnerConfig
from ffcmd.errors import ToolNotFoundError


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    path = temp_dir / "config.toml"
    path.write_text(
        "[tools]\n"
        'ffmpeg = "/opt/ffmpeg/bin/ffmpeg"\n'
        "\n"
        "[runner]\n"
        "timeout = 600\n"
        "progress_period = 0.5\n"
        "\n"
        "[logging]\n"
        'level = "debug"\n'
        'format = "json"\n'
        "max_bytes = 1024\n"
    )
    return path


class TestLoadConfigFile:
    def test_missing_file(self, temp_dir: Path):
        assert load_config_file(temp_dir / "nope.toml") == {}

    def test_valid_file(self, config_file: Path):
        data = load_config_file(config_file)
        assert data["runner"]["timeout"] == 600

    def test_invalid_file_is_ignored(self, temp_dir: Path):
        path = temp_dir / "bad.toml"
        path.write_text("[runner\n")
        assert load_config_file(path) == {}

    def test_invalid_file_strict(self, temp_dir: Path):
        path = temp_dir / "bad.toml"
        path.write_text("[runner\n")
        with pytest.raises(ConfigError, match="Failed to load config file"):
            load_config_file(path, strict=True)


class TestGetDefaultConfigPath:
    def test_env_override(self):
        env = EnvReader({"FFCMD_CONFIG_PATH": "/etc/ffcmd.toml"})
        assert get_default_config_path(env) == Path("/etc/ffcmd.toml")

    def test_default(self):
        assert get_default_config_path(EnvReader({})).name == "config.toml"


class TestGetConfig:
    def test_defaults(self, temp_dir: Path):
        config = get_config(temp_dir / "missing.toml", env=EnvReader({}))
        assert config.tools.ffmpeg is None
        assert config.runner == RunnerConfig()
        assert config.logging == LoggingConfig()

    def test_file_values(self, config_file: Path):
        config = get_config(config_file, env=EnvReader({}))
        assert config.tools.ffmpeg == Path("/opt/ffmpeg/bin/ffmpeg")
        assert config.runner.timeout == 600
        assert config.runner.progress_period == 0.5
        assert config.logging.level == "debug"
        assert config.logging.format == "json"
        assert config.logging.max_bytes == 1024

    def test_env_overrides_file(self, config_file: Path, temp_dir: Path):
        env = EnvReader(
            {
                "FFCMD_FFMPEG_PATH": str(temp_dir),
                "FFCMD_TIMEOUT": "30",
                "FFCMD_PROGRESS_PERIOD": "2",
                "FFCMD_LOG_LEVEL": "warning",
                "FFCMD_LOG_FORMAT": "text",
                "FFCMD_LOG_FILE": str(temp_dir / "ffcmd.log"),
            }
        )
        config = get_config(config_file, env=env)
        assert config.tools.ffmpeg == temp_dir
        assert config.runner.timeout == 30.0
        assert config.runner.progress_period == 2.0
        assert config.logging.level == "warning"
        assert config.logging.format == "text"
        assert config.logging.file == temp_dir / "ffcmd.log"

    def test_arguments_override_env(self, config_file: Path):
        env = EnvReader({"FFCMD_TIMEOUT": "30", "FFCMD_LOG_LEVEL": "warning"})
        config = get_config(
            config_file,
            env=env,
            ffmpeg_path=Path("/usr/local/bin/ffmpeg"),
            timeout=5,
            log_level="error",
            log_format="text",
        )
        assert config.tools.ffmpeg == Path("/usr/local/bin/ffmpeg")
        assert config.runner.timeout == 5
        assert config.logging.level == "error"
        assert config.logging.format == "text"

    def test_config_path_from_env(self, config_file: Path):
        env = EnvReader({"FFCMD_CONFIG_PATH": str(config_file)})
        assert get_config(env=env).runner.timeout == 600

    def test_invalid_level(self, temp_dir: Path):
        with pytest.raises(ValueError, match="level must be one of"):
            get_config(temp_dir / "missing.toml", env=EnvReader({}), log_level="loud")

    def test_invalid_timeout(self, temp_dir: Path):
        with pytest.raises(ValueError, match="timeout must be positive"):
            get_config(temp_dir / "missing.toml", env=EnvReader({}), timeout=0)


class TestResolveFFmpeg:
    def test_configured_path(self):
        tools = ToolPathsConfig(ffmpeg=Path("/opt/ffmpeg"))
        assert resolve_ffmpeg(tools) == Path("/opt/ffmpeg")

    def test_path_lookup(self):
        with patch("ffcmd.config.loader.shutil.which", return_value="/usr/bin/ffmpeg"):
            assert resolve_ffmpeg() == Path("/usr/bin/ffmpeg")

    def test_not_found(self):
        with patch("ffcmd.config.loader.shutil.which", return_value=None):
            with pytest.raises(ToolNotFoundError, match="ffmpeg not found"):
                resolve_ffmpeg(ToolPathsConfig())
