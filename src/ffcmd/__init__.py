"""ffcmd - build FFmpeg command lines from typed job descriptions.

Example:
    from ffcmd import EncodingOptions, GlobalOptions, Input, Output, OutputOptions
    from ffcmd import build_args

    args = build_args(
        GlobalOptions(overwrite=True),
        [Input("in.mkv")],
        outputs=[
            Output(
                "out.mp4",
                OutputOptions(encoding=EncodingOptions(crf=23, preset="fast")),
            )
        ],
    )
    # ['-hide_banner', '-y', '-i', 'in.mkv', '-crf', '23', '-preset', 'fast',
    #  '-y', 'out.mp4']
"""

from ffcmd.command import Command, build_args, build_command
from ffcmd.errors import (
    CompositionError,
    FFCmdError,
    FormatError,
    ParseError,
    ProcessCancelledError,
    ProcessError,
    ProcessTimeoutError,
    ToolNotFoundError,
)
from ffcmd.executor import FFmpeg, FFmpegProgress, ProgressParser, StdErrParser
from ffcmd.jobs import Job, JobFileError, load_job
from ffcmd.options import (
    Coder,
    ComplexFilter,
    ComplexFilterOptions,
    DecodingOptions,
    DeinterlacingMode,
    EncodingOptions,
    FilterOptions,
    GlobalOptions,
    Input,
    InputOptions,
    LogLevel,
    LogOptions,
    MapOption,
    Number,
    Output,
    OutputOptions,
    Preset,
    Profile,
    Ratio,
    Scale,
    StreamOption,
    StreamSpecifier,
    StreamType,
    Tune,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Command building
    "Command",
    "build_args",
    "build_command",
    "Job",
    "JobFileError",
    "load_job",
    # Options
    "Coder",
    "ComplexFilter",
    "ComplexFilterOptions",
    "DecodingOptions",
    "DeinterlacingMode",
    "EncodingOptions",
    "FilterOptions",
    "GlobalOptions",
    "Input",
    "InputOptions",
    "LogLevel",
    "LogOptions",
    "MapOption",
    "Number",
    "Output",
    "OutputOptions",
    "Preset",
    "Profile",
    "Ratio",
    "Scale",
    "StreamOption",
    "StreamSpecifier",
    "StreamType",
    "Tune",
    # Running
    "FFmpeg",
    "FFmpegProgress",
    "ProgressParser",
    "StdErrParser",
    # Errors
    "CompositionError",
    "FFCmdError",
    "FormatError",
    "ParseError",
    "ProcessCancelledError",
    "ProcessError",
    "ProcessTimeoutError",
    "ToolNotFoundError",
]
