"""Pydantic models for job files.

A job file describes one FFmpeg invocation::

    global:
      overwrite: true
      log: {level: error, repeated: true}
    inputs:
      - path: in.mkv
        decoding: {hardware_acceleration: cuda}
    complex_filter:
      output_num: 2
    outputs:
      - path: out.mp4
        format: mp4
        map: [{name: "[out0]"}]
        encoding:
          bitrate: [{value: 2M, stream: {type: v}}]
          preset: fast
          crf: 23

Stream specifiers are either a raw string ("0:v") or a mapping with
``type`` and ``index``. Shorthand numbers are strings ("2M", "128Ki") or
plain numbers. Option lists accept bare values when no stream is needed.
"""

from __future__ import annotations

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

from ffcmd.errors import ParseError
from ffcmd.options.numbers import Number

VALID_LOG_LEVELS = frozenset(
    {"quiet", "panic", "fatal", "error", "warning", "info", "verbose", "debug", "trace"}
)


def _check_number(value: str | int | float) -> str | int | float:
    if isinstance(value, str):
        try:
            Number.parse(value)
        except ParseError as e:
            raise ValueError(str(e)) from e
    return value


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class StreamSpecifierModel(_Model):
    """Stream specifier as a mapping."""

    name: str | None = None
    type: Literal["a", "s", "v", "V"] | None = None
    index: int | None = Field(default=None, ge=0)


StreamRef = str | StreamSpecifierModel


class TextOptionModel(_Model):
    value: str
    stream: StreamRef | None = None


class NumberOptionModel(_Model):
    value: str | int | float
    stream: StreamRef | None = None

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str | int | float) -> str | int | float:
        return _check_number(v)


class RatioModel(_Model):
    antecedent: int
    consequent: int


class ScaleModel(_Model):
    width: int
    height: int


class FilterOptionsModel(_Model):
    sar: RatioModel | None = None
    scale_npp: ScaleModel | None = None


class FilterOptionModel(_Model):
    value: FilterOptionsModel
    stream: StreamRef | None = None


class LogOptionsModel(_Model):
    color: bool | None = None
    level: str | None = None
    repeated: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str | None) -> str | None:
        if v is not None and v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. "
                f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return v


class GlobalOptionsModel(_Model):
    log: LogOptionsModel | None = None
    hide_banner: bool = True
    overwrite: bool | None = None
    no_stats: bool = False
    report: bool = False


class DecodingOptionsModel(_Model):
    hardware_acceleration: str | None = None
    hardware_acceleration_device: int | None = Field(default=None, ge=0)
    deinterlacing_mode: str | None = None
    duration: str | None = None
    position: str | None = None
    drop_second_field: bool | None = None
    codec: str | TextOptionModel | None = None


class EncodingOptionsModel(_Model):
    audio_samplerate: int | None = Field(default=None, gt=0)
    audio_channels: int | None = Field(default=None, gt=0)
    b_frames: int | None = None
    bitrate: list[str | int | float | NumberOptionModel] = Field(default_factory=list)
    b_strategy: int | None = None
    buf_size: str | int | float | None = None
    codec: list[str | TextOptionModel] = Field(default_factory=list)
    coder: str | None = None
    constant_quality: float | None = None
    crf: int | None = None
    filters: list[FilterOptionsModel | FilterOptionModel] = Field(default_factory=list)
    framerate: float | None = Field(default=None, gt=0)
    frame_size: str | None = None
    gop: int | None = None
    keyint_min: int | None = None
    level: float | None = None
    maxrate: list[str | int | float | NumberOptionModel] = Field(default_factory=list)
    minrate: list[str | int | float | NumberOptionModel] = Field(default_factory=list)
    preset: str | None = None
    profile: list[str | TextOptionModel] = Field(default_factory=list)
    rate_control: str | None = None
    sc_threshold: int | None = None
    tune: str | None = None
    max_muxing_queue_size: int | None = Field(default=None, gt=0)
    hls_time: int | None = None
    hls_list_size: int | None = None
    hls_key_info_file: str | None = None
    hls_segment_filename: str | None = None
    customize: dict[str, StrictInt | StrictFloat | StrictStr] = Field(
        default_factory=dict
    )
    remove_audio: bool = False

    @field_validator("bitrate", "maxrate", "minrate")
    @classmethod
    def validate_numbers(
        cls, v: list[str | int | float | NumberOptionModel]
    ) -> list[str | int | float | NumberOptionModel]:
        for item in v:
            if not isinstance(item, NumberOptionModel):
                _check_number(item)
        return v

    @field_validator("buf_size")
    @classmethod
    def validate_buf_size(cls, v: str | int | float | None) -> str | int | float | None:
        if v is not None:
            _check_number(v)
        return v


class MapOptionModel(_Model):
    name: str | None = None
    input_file_id: int = Field(default=0, ge=0)
    stream: StreamRef | None = None


class InputModel(_Model):
    path: str
    decoding: DecodingOptionsModel | None = None


class OutputModel(_Model):
    path: str
    map: list[str | MapOptionModel] = Field(default_factory=list)
    encoding: EncodingOptionsModel | None = None
    format: str | None = None


class ComplexFilterModel(_Model):
    filters: list[str] = Field(default_factory=list)
    inputs: list[StreamRef] = Field(default_factory=list)
    outputs: list[StreamRef] = Field(default_factory=list)


class ComplexFilterOptionsModel(_Model):
    output_num: int | None = Field(default=None, ge=1)
    chains: list[ComplexFilterModel] = Field(default_factory=list)
    chain_separator: Literal[",", ";"] = ","


class JobModel(_Model):
    """Top-level job file model."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    global_options: GlobalOptionsModel = Field(
        default_factory=GlobalOptionsModel, alias="global"
    )
    inputs: list[InputModel] = Field(default_factory=list)
    complex_filter: ComplexFilterOptionsModel | None = None
    outputs: list[OutputModel] = Field(min_length=1)
