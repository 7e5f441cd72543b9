"""Job description: everything needed for one FFmpeg invocation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ffcmd.command import build_args
from ffcmd.options.filters import ComplexFilterOptions
from ffcmd.options.global_options import GlobalOptions
from ffcmd.options.io import Input, Output


@dataclass(frozen=True)
class Job:
    """A complete job description."""

    global_options: GlobalOptions = field(default_factory=GlobalOptions)
    inputs: tuple[Input, ...] = ()
    complex_filter: ComplexFilterOptions | None = None
    outputs: tuple[Output, ...] = ()

    def build_args(self) -> list[str]:
        """Render the job to FFmpeg arguments (without the binary)."""
        return build_args(
            self.global_options,
            self.inputs,
            self.outputs,
            complex_filter=self.complex_filter,
        )
