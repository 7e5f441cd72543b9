"""Stream specifiers and stream-qualified options.

A stream specifier narrows an option to some streams of a file, e.g.
``-b:v:0 2M`` applies a bitrate to the first video stream only.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from ffcmd.errors import FormatError
from ffcmd.options.enums import StreamType, option_text
from ffcmd.options.filters import FilterOptions
from ffcmd.options.numbers import Number

T = TypeVar("T")

Formatter = Callable[[object], str]

# Values accepted in EncodingOptions.customize
PassThroughValue = int | float | str


@dataclass(frozen=True)
class StreamSpecifier:
    """Identifies a stream by media type and/or index, or by a raw name.

    When ``name`` is set it is used verbatim and the other fields are
    ignored.
    """

    name: str | None = None
    type: StreamType | str | None = None
    index: int | None = None

    def render(self) -> str:
        """Render as ``type:index``, ``type``, ``index`` or the raw name."""
        if self.name:
            return self.name
        text = option_text(self.type) if self.type else ""
        if self.index is not None:
            if text:
                text += ":"
            text += str(self.index)
        return text

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class StreamOption(Generic[T]):
    """An option value that can be restricted to a stream."""

    value: T
    stream: StreamSpecifier | None = None

    def render(self, flag: str, formatter: Formatter) -> tuple[str, str]:
        """Render as a ``(flag[:stream], value)`` token pair.

        Raises:
            FormatError: If the formatter rejects the value.
        """
        name = flag
        if self.stream is not None:
            name += ":" + self.stream.render()
        try:
            text = formatter(self.value)
        except FormatError as e:
            raise FormatError(e.reason, flag=flag, value=self.value) from e
        return name, text


def format_text(value: object) -> str:
    """Formatter for string-valued options."""
    if isinstance(value, str):
        return option_text(value)
    raise FormatError("value should be a string", value=value)


def format_number(value: object) -> str:
    """Formatter for shorthand-number options such as bitrates."""
    if not isinstance(value, Number):
        raise FormatError("value should be a Number", value=value)
    text = value.to_text()
    if not text:
        raise FormatError(
            f"unsupported number value {value.value!r}", value=value
        )
    return text


def format_filter(value: object) -> str:
    """Formatter for -filter options."""
    if isinstance(value, FilterOptions):
        return value.render()
    raise FormatError("value should be a FilterOptions", value=value)


def format_pass_through(value: object) -> str:
    """Formatter for arbitrary ``-key value`` pairs.

    Integers render as-is, floats are truncated to integer text and strings
    are used literally. Anything else is rejected.
    """
    if isinstance(value, bool):
        raise FormatError(f"unsupported value kind {type(value).__name__}", value=value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise FormatError(f"unsupported non-finite value {value!r}", value=value)
        return str(int(value))
    if isinstance(value, str):
        return value
    raise FormatError(f"unsupported value kind {type(value).__name__}", value=value)


def render_stream_options(
    flag: str,
    options: tuple[StreamOption, ...] | list[StreamOption],
    formatter: Formatter,
) -> list[str]:
    """Render a repeated stream option, one flag/value pair per entry.

    Raises:
        FormatError: Tagged with the 0-based index of the failing entry.
    """
    args: list[str] = []
    for idx, option in enumerate(options):
        try:
            args.extend(option.render(flag, formatter))
        except FormatError as e:
            raise e.at_index(idx) from e
    return args


def render_pass_through(
    values: Mapping[str, PassThroughValue] | Iterable[tuple[str, PassThroughValue]],
) -> list[str]:
    """Render ``-key value`` pairs in insertion order.

    Accepts a mapping or an iterable of ``(key, value)`` pairs.
    """
    pairs = values.items() if isinstance(values, Mapping) else values
    args: list[str] = []
    for key, value in pairs:
        flag = f"-{key}"
        try:
            args.extend([flag, format_pass_through(value)])
        except FormatError as e:
            raise FormatError(e.reason, flag=flag, value=value) from e
    return args
