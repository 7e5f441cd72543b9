"""Option records and their token rendering."""

from ffcmd.options.decoding import DecodingOptions
from ffcmd.options.encoding import EncodingOptions
from ffcmd.options.enums import (
    Coder,
    DeinterlacingMode,
    LogLevel,
    Preset,
    Profile,
    StreamType,
    Tune,
)
from ffcmd.options.filters import (
    ComplexFilter,
    ComplexFilterOptions,
    FilterOptions,
    Ratio,
    Scale,
)
from ffcmd.options.global_options import GlobalOptions, LogOptions
from ffcmd.options.io import Input, InputOptions, Output, OutputOptions
from ffcmd.options.mapping import MapOption
from ffcmd.options.numbers import Number
from ffcmd.options.streams import (
    StreamOption,
    StreamSpecifier,
    format_filter,
    format_number,
    format_pass_through,
    format_text,
)

__all__ = [
    # Values
    "Number",
    "Ratio",
    "Scale",
    "StreamSpecifier",
    "StreamOption",
    "FilterOptions",
    "ComplexFilter",
    "ComplexFilterOptions",
    # Groups
    "GlobalOptions",
    "LogOptions",
    "DecodingOptions",
    "EncodingOptions",
    "MapOption",
    "InputOptions",
    "OutputOptions",
    "Input",
    "Output",
    # Named values
    "Coder",
    "DeinterlacingMode",
    "LogLevel",
    "Preset",
    "Profile",
    "StreamType",
    "Tune",
    # Formatters
    "format_filter",
    "format_number",
    "format_pass_through",
    "format_text",
]
