"""FFmpeg command assembly.

FFmpeg expects its arguments in this order::

    ffmpeg [global_options] {[input_file_options] -i input_url} ...
        [-filter_complex graph] {[output_file_options] output_url} ...

build_args() walks a job in that order and returns the tokens. It performs
no I/O and keeps no state, so it is safe to call from several threads.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ffcmd.errors import CompositionError, FFCmdError
from ffcmd.options.filters import ComplexFilterOptions
from ffcmd.options.global_options import GlobalOptions
from ffcmd.options.io import Input, Output


@dataclass(frozen=True)
class Command:
    """A fully rendered FFmpeg invocation."""

    binary: str
    args: tuple[str, ...]
    env: dict[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> list[str]:
        return [self.binary, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)


def build_args(
    global_options: GlobalOptions,
    inputs: Sequence[Input] = (),
    outputs: Sequence[Output] = (),
    *,
    complex_filter: ComplexFilterOptions | None = None,
) -> list[str]:
    """Build the ordered FFmpeg arguments for a job.

    Args:
        global_options: Options placed first.
        inputs: Inputs in declaration order.
        outputs: Outputs in declaration order.
        complex_filter: Optional filter graph, placed after the inputs.

    Returns:
        Token list, without the binary path.

    Raises:
        CompositionError: If an input or output fails to render; the error
            names the failing entry by its 0-based index.
    """
    args: list[str] = []
    global_options.emit(args)

    for idx, item in enumerate(inputs):
        try:
            item.emit(args)
        except FFCmdError as e:
            raise CompositionError(f"input #{idx}", e) from e

    if complex_filter is not None:
        complex_filter.emit(args)

    for idx, item in enumerate(outputs):
        try:
            item.emit(args)
        except FFCmdError as e:
            raise CompositionError(f"output #{idx}", e) from e

    return args


def build_command(
    binary: str | Path,
    global_options: GlobalOptions,
    inputs: Sequence[Input] = (),
    outputs: Sequence[Output] = (),
    *,
    complex_filter: ComplexFilterOptions | None = None,
) -> Command:
    """Build a Command with its arguments and log environment.

    The environment only holds the variables contributed by the options;
    the runner merges it over the parent environment.
    """
    args = build_args(
        global_options, inputs, outputs, complex_filter=complex_filter
    )
    return Command(
        binary=str(binary),
        args=tuple(args),
        env=global_options.environment(),
    )
