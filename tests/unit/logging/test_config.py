"""Tests for configure_logging."""

import json
import logging
from pathlib import Path

from ffcmd.config.models import LoggingConfig
from ffcmd.logging import (
    PACKAGE_LOGGER,
    JSONFormatter,
    TextFormatter,
    configure_logging,
)
from ffcmd.logging.context import job_context


def flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


class TestConfigureLogging:
    def test_stderr_only(self, restore_ffcmd_logger):
        logger = configure_logging(LoggingConfig(level="debug"))
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert isinstance(logger.handlers[0].formatter, TextFormatter)

    def test_root_logger_is_untouched(self, restore_ffcmd_logger):
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        configure_logging(LoggingConfig(level="debug", format="json"))
        assert root.handlers == handlers
        assert root.level == level

    def test_reconfigure_replaces_handlers(self, restore_ffcmd_logger):
        configure_logging(LoggingConfig())
        logger = configure_logging(LoggingConfig(format="json"))
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_json_file(self, restore_ffcmd_logger, temp_dir: Path):
        log_file = temp_dir / "logs" / "ffcmd.log"
        logger = configure_logging(
            LoggingConfig(level="info", file=log_file, format="json")
        )

        with job_context("abc"):
            logging.getLogger("ffcmd.executor.runner").warning(
                "ffmpeg timed out", extra={"command": "ffmpeg -i x", "timeout": 5}
            )
            logging.getLogger("ffcmd.executor.runner").debug("filtered out")
        flush(logger)

        lines = log_file.read_text().strip().splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["message"] == "ffmpeg timed out"
        assert entry["job"] == "abc"
        assert entry["command"] == "ffmpeg -i x"
        assert entry["timeout"] == 5

    def test_file_with_stderr(self, restore_ffcmd_logger, temp_dir: Path):
        logger = configure_logging(
            LoggingConfig(file=temp_dir / "ffcmd.log", include_stderr=True)
        )
        assert len(logger.handlers) == 2

    def test_unopenable_file_falls_back_to_stderr(
        self, restore_ffcmd_logger, temp_dir: Path, capsys
    ):
        blocker = temp_dir / "not-a-dir"
        blocker.write_text("")
        logger = configure_logging(LoggingConfig(file=blocker / "ffcmd.log"))
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], logging.FileHandler)
        assert "Could not open log file" in capsys.readouterr().err

    def test_text_file_has_job_tag(self, restore_ffcmd_logger, temp_dir: Path):
        log_file = temp_dir / "ffcmd.log"
        logger = configure_logging(LoggingConfig(file=log_file))

        with job_context("7"):
            logging.getLogger("ffcmd.cli.run").warning("tagged")
        flush(logger)

        assert "WARNING [J7] ffcmd.cli.run: tagged" in log_file.read_text()
