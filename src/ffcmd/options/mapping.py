"""Stream mapping (-map) options."""

from __future__ import annotations

from dataclasses import dataclass

from ffcmd.options.streams import StreamSpecifier


@dataclass(frozen=True)
class MapOption:
    """A single -map option.

    When ``name`` is set it is used verbatim (e.g. a complex filter output
    label such as ``[out0]``); otherwise the value is
    ``input_file_id[:stream]``.
    """

    name: str | None = None
    input_file_id: int = 0
    stream: StreamSpecifier | None = None

    def render(self) -> str:
        if self.name:
            return self.name
        value = str(self.input_file_id)
        if self.stream is not None:
            value += ":" + self.stream.render()
        return value

    def emit(self, args: list[str]) -> None:
        args.extend(["-map", self.render()])


def emit_map_options(options: tuple[MapOption, ...], args: list[str]) -> None:
    """Append one -map pair per option, in order."""
    for option in options:
        option.emit(args)
