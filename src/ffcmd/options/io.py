"""Inputs and outputs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ffcmd.errors import CompositionError, FFCmdError
from ffcmd.options.decoding import DecodingOptions
from ffcmd.options.encoding import EncodingOptions
from ffcmd.options.mapping import MapOption, emit_map_options


@dataclass(frozen=True)
class InputOptions:
    """Options placed before an input's -i."""

    decoding: DecodingOptions | None = None

    def emit(self, args: list[str]) -> None:
        if self.decoding is not None:
            try:
                self.decoding.emit(args)
            except FFCmdError as e:
                raise CompositionError("decoding options", e) from e


@dataclass(frozen=True)
class OutputOptions:
    """Options placed before an output path."""

    map: tuple[MapOption, ...] = ()
    encoding: EncodingOptions | None = None
    format: str | None = None

    def emit(self, args: list[str]) -> None:
        out: list[str] = []
        emit_map_options(self.map, out)
        if self.encoding is not None:
            try:
                self.encoding.emit(out)
            except FFCmdError as e:
                raise CompositionError("encoding options", e) from e
        if self.format:
            out.extend(["-f", self.format])
        args.extend(out)


@dataclass(frozen=True)
class Input:
    """An input file or URL and its options."""

    path: str | Path
    options: InputOptions | None = None

    def emit(self, args: list[str]) -> None:
        out: list[str] = []
        if self.options is not None:
            try:
                self.options.emit(out)
            except FFCmdError as e:
                raise CompositionError("input options", e) from e
        out.extend(["-i", str(self.path)])
        args.extend(out)


@dataclass(frozen=True)
class Output:
    """An output file or URL and its options.

    Outputs are always written with -y so an existing file is replaced.
    """

    path: str | Path
    options: OutputOptions | None = None

    def emit(self, args: list[str]) -> None:
        out: list[str] = []
        if self.options is not None:
            try:
                self.options.emit(out)
            except FFCmdError as e:
                raise CompositionError("output options", e) from e
        out.extend(["-y", str(self.path)])
        args.extend(out)
