"""Encoding options, placed before an output path.

Tokens are emitted in a fixed order that does not depend on the order in
which fields are declared or set.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ffcmd.errors import FormatError
from ffcmd.options.enums import Coder, Preset, Tune, option_text
from ffcmd.options.filters import FilterOptions
from ffcmd.options.numbers import Number
from ffcmd.options.streams import (
    PassThroughValue,
    StreamOption,
    format_filter,
    format_number,
    format_text,
    render_pass_through,
    render_stream_options,
)


def _fixed(value: float, digits: int) -> str:
    return f"{value:.{digits}f}"


@dataclass(frozen=True)
class EncodingOptions:
    """Options applied when writing an output.

    List fields (bitrate, codec, filters, maxrate, minrate, profile) emit one
    flag/value pair per entry, each optionally restricted to a stream.
    ``customize`` holds extra ``-key value`` pairs for options without a
    dedicated field; they are emitted in insertion order. A mapping given
    for it is stored as a tuple of pairs so the options stay hashable.
    """

    audio_samplerate: int | None = None
    audio_channels: int | None = None
    b_frames: int | None = None
    bitrate: tuple[StreamOption[Number], ...] = ()
    b_strategy: int | None = None
    buf_size: Number | None = None
    codec: tuple[StreamOption[str], ...] = ()
    coder: Coder | str | None = None
    constant_quality: float | None = None
    crf: int | None = None
    filters: tuple[StreamOption[FilterOptions], ...] = ()
    framerate: float | None = None
    frame_size: str | None = None
    gop: int | None = None
    keyint_min: int | None = None
    level: float | None = None
    maxrate: tuple[StreamOption[Number], ...] = ()
    minrate: tuple[StreamOption[Number], ...] = ()
    preset: Preset | str | None = None
    profile: tuple[StreamOption[str], ...] = ()
    rate_control: str | None = None
    sc_threshold: int | None = None
    tune: Tune | str | None = None
    max_muxing_queue_size: int | None = None
    hls_time: int | None = None
    hls_list_size: int | None = None
    hls_key_info_file: str | None = None
    hls_segment_filename: str | None = None
    customize: (
        tuple[tuple[str, PassThroughValue], ...]
        | Mapping[str, PassThroughValue]
        | Iterable[tuple[str, PassThroughValue]]
    ) = ()
    remove_audio: bool = False

    def __post_init__(self) -> None:
        pairs = self.customize
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        object.__setattr__(self, "customize", tuple((str(k), v) for k, v in pairs))

    def emit(self, args: list[str]) -> None:
        """Append encoding tokens.

        Nothing is appended if any value fails to render.

        Raises:
            FormatError: Tagged with the flag and, for list fields, the
                index of the failing entry.
        """
        out: list[str] = []
        if self.audio_samplerate is not None:
            out.extend(["-ar", str(self.audio_samplerate)])
        if self.audio_channels is not None:
            out.extend(["-ac", str(self.audio_channels)])
        if self.b_frames is not None:
            out.extend(["-bf", str(self.b_frames)])
        out.extend(render_stream_options("-b", self.bitrate, format_number))
        if self.b_strategy is not None:
            out.extend(["-b_strategy", str(self.b_strategy)])
        if self.buf_size is not None:
            try:
                out.extend(["-bufsize", format_number(self.buf_size)])
            except FormatError as e:
                raise FormatError(e.reason, flag="-bufsize", value=e.value) from e
        out.extend(render_stream_options("-codec", self.codec, format_text))
        if self.coder:
            out.extend(["-coder", option_text(self.coder)])
        if self.constant_quality is not None:
            out.extend(["-cq", _fixed(self.constant_quality, 3)])
        if self.crf is not None:
            out.extend(["-crf", str(self.crf)])
        out.extend(render_stream_options("-filter", self.filters, format_filter))
        if self.framerate is not None:
            out.extend(["-r", _fixed(self.framerate, 3)])
        if self.frame_size:
            out.extend(["-s", self.frame_size])
        if self.gop is not None:
            out.extend(["-g", str(self.gop)])
        if self.keyint_min is not None:
            out.extend(["-keyint_min", str(self.keyint_min)])
        if self.level is not None:
            out.extend(["-level", _fixed(self.level, 1)])
        out.extend(render_stream_options("-maxrate", self.maxrate, format_number))
        out.extend(render_stream_options("-minrate", self.minrate, format_number))
        if self.preset:
            out.extend(["-preset", option_text(self.preset)])
        out.extend(render_stream_options("-profile", self.profile, format_text))
        if self.rate_control:
            out.extend(["-rc", self.rate_control])
        if self.sc_threshold is not None:
            out.extend(["-sc_threshold", str(self.sc_threshold)])
        if self.tune:
            out.extend(["-tune", option_text(self.tune)])
        if self.max_muxing_queue_size is not None:
            out.extend(["-max_muxing_queue_size", str(self.max_muxing_queue_size)])

        # HLS muxer
        if self.hls_time is not None:
            out.extend(["-hls_time", str(self.hls_time)])
        if self.hls_list_size is not None:
            out.extend(["-hls_list_size", str(self.hls_list_size)])
        if self.hls_key_info_file:
            out.extend(["-hls_key_info_file", self.hls_key_info_file])
        if self.hls_segment_filename:
            out.extend(["-hls_segment_filename", self.hls_segment_filename])

        out.extend(render_pass_through(self.customize))
        if self.remove_audio:
            out.append("-an")
        args.extend(out)
