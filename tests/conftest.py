"""Shared test fixtures for ffcmd."""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir: Path):
    """Point FFCMD_CONFIG_PATH at an empty temp location for every test.

    Also strips any FFCMD_* variables from the developer's environment.
    """
    config_path = temp_dir / ".ffcmd" / "config.toml"
    env = {k: v for k, v in os.environ.items() if not k.startswith("FFCMD_")}
    env["FFCMD_CONFIG_PATH"] = str(config_path)
    with patch.dict(os.environ, env, clear=True):
        yield config_path


@pytest.fixture
def restore_ffcmd_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger("ffcmd")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def write_job(temp_dir: Path):
    """Return a helper that writes a job file and returns its path."""

    def _write(content: str, name: str = "job.yaml") -> Path:
        path = temp_dir / name
        path.write_text(content)
        return path

    return _write
