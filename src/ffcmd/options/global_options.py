"""Global and log options."""

from __future__ import annotations

from dataclasses import dataclass

from ffcmd.options.enums import LogLevel, option_text

LOG_FORCE_COLOR_ENV = "AV_LOG_FORCE_COLOR"
LOG_FORCE_NOCOLOR_ENV = "AV_LOG_FORCE_NOCOLOR"


@dataclass(frozen=True)
class LogOptions:
    """Log options.

    Attributes:
        color: Force colored (True) or uncolored (False) log output through
            the environment. None leaves FFmpeg's detection alone.
        level: Value for -loglevel.
        repeated: Prefix the level with ``repeat+`` so repeated lines are
            not collapsed.
    """

    color: bool | None = None
    level: LogLevel | str | None = None
    repeated: bool = False

    def environment(self) -> dict[str, str]:
        if self.color is None:
            return {}
        if self.color:
            return {LOG_FORCE_COLOR_ENV: "1"}
        return {LOG_FORCE_NOCOLOR_ENV: "1"}

    def emit(self, args: list[str]) -> None:
        if self.level:
            value = "repeat+" if self.repeated else ""
            value += option_text(self.level)
            args.extend(["-loglevel", value])


@dataclass(frozen=True)
class GlobalOptions:
    """Options placed before any input.

    Attributes:
        log: Log options.
        hide_banner: Emit -hide_banner.
        overwrite: -y when True, -n when False, nothing when None.
        no_stats: Emit -nostats.
        report: Emit -report, which dumps the full command line and log to
            ``ffmpeg-YYYYMMDD-HHMMSS.log`` in the working directory.
    """

    log: LogOptions | None = None
    hide_banner: bool = True
    overwrite: bool | None = None
    no_stats: bool = False
    report: bool = False

    def environment(self) -> dict[str, str]:
        """Environment variables contributed by these options."""
        if self.log is None:
            return {}
        return self.log.environment()

    def emit(self, args: list[str]) -> None:
        if self.hide_banner:
            args.append("-hide_banner")
        if self.log is not None:
            self.log.emit(args)
        if self.overwrite is not None:
            args.append("-y" if self.overwrite else "-n")
        if self.no_stats:
            args.append("-nostats")
        if self.report:
            args.append("-report")
