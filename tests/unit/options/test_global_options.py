"""Tests for global and log options."""

from ffcmd.options.enums import LogLevel
from ffcmd.options.global_options import GlobalOptions, LogOptions


def emit(options) -> list[str]:
    args: list[str] = []
    options.emit(args)
    return args


class TestLogOptions:
    def test_level(self):
        assert emit(LogOptions(level=LogLevel.ERROR)) == ["-loglevel", "error"]

    def test_repeated_level(self):
        assert emit(LogOptions(level="info", repeated=True)) == [
            "-loglevel",
            "repeat+info",
        ]

    def test_no_level(self):
        assert emit(LogOptions(repeated=True)) == []

    def test_color_environment(self):
        assert LogOptions(color=True).environment() == {"AV_LOG_FORCE_COLOR": "1"}
        assert LogOptions(color=False).environment() == {"AV_LOG_FORCE_NOCOLOR": "1"}
        assert LogOptions().environment() == {}

    def test_color_adds_no_arguments(self):
        assert emit(LogOptions(color=True)) == []


class TestGlobalOptions:
    def test_defaults(self):
        assert emit(GlobalOptions()) == ["-hide_banner"]

    def test_all_fields_in_order(self):
        options = GlobalOptions(
            log=LogOptions(level="warning"),
            overwrite=True,
            no_stats=True,
            report=True,
        )
        assert emit(options) == [
            "-hide_banner", "-loglevel", "warning", "-y", "-nostats", "-report",
        ]  # fmt: skip

    def test_no_overwrite(self):
        assert emit(GlobalOptions(hide_banner=False, overwrite=False)) == ["-n"]

    def test_environment_comes_from_log(self):
        options = GlobalOptions(log=LogOptions(color=False))
        assert options.environment() == {"AV_LOG_FORCE_NOCOLOR": "1"}
        assert GlobalOptions().environment() == {}
