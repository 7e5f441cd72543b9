"""Job file loading and validation.

Job files are YAML (JSON is accepted as well, being a subset of YAML). They
are validated with the pydantic models in ``ffcmd.jobs.schema`` and then
converted to the frozen option dataclasses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ffcmd.jobs.models import Job
from ffcmd.jobs.schema import (
    ComplexFilterOptionsModel,
    DecodingOptionsModel,
    EncodingOptionsModel,
    FilterOptionModel,
    FilterOptionsModel,
    GlobalOptionsModel,
    InputModel,
    JobModel,
    MapOptionModel,
    NumberOptionModel,
    OutputModel,
    StreamSpecifierModel,
    TextOptionModel,
)
from ffcmd.options import (
    ComplexFilter,
    ComplexFilterOptions,
    DecodingOptions,
    EncodingOptions,
    FilterOptions,
    GlobalOptions,
    Input,
    InputOptions,
    LogOptions,
    MapOption,
    Number,
    Output,
    OutputOptions,
    Ratio,
    Scale,
    StreamOption,
    StreamSpecifier,
)


class JobFileError(Exception):
    """Error loading or validating a job file."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


def _format_validation_error(error: ValidationError) -> tuple[str, str | None]:
    """Build a readable message and the first failing field path."""
    messages = []
    first_field: str | None = None
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        if first_field is None:
            first_field = loc
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "Invalid job: " + "; ".join(messages), first_field


def _convert_stream(ref: str | StreamSpecifierModel | None) -> StreamSpecifier | None:
    if ref is None:
        return None
    if isinstance(ref, str):
        return StreamSpecifier(name=ref)
    return StreamSpecifier(name=ref.name, type=ref.type, index=ref.index)


def _convert_number(value: str | int | float) -> Number:
    if isinstance(value, str):
        return Number.parse(value)
    return Number(value)


def _convert_number_option(
    item: str | int | float | NumberOptionModel,
) -> StreamOption[Number]:
    if isinstance(item, NumberOptionModel):
        return StreamOption(_convert_number(item.value), _convert_stream(item.stream))
    return StreamOption(_convert_number(item))


def _convert_text_option(item: str | TextOptionModel) -> StreamOption[str]:
    if isinstance(item, TextOptionModel):
        return StreamOption(item.value, _convert_stream(item.stream))
    return StreamOption(item)


def _convert_filter_options(model: FilterOptionsModel) -> FilterOptions:
    return FilterOptions(
        sar=Ratio(model.sar.antecedent, model.sar.consequent) if model.sar else None,
        scale_npp=(
            Scale(model.scale_npp.width, model.scale_npp.height)
            if model.scale_npp
            else None
        ),
    )


def _convert_filter_option(
    item: FilterOptionsModel | FilterOptionModel,
) -> StreamOption[FilterOptions]:
    if isinstance(item, FilterOptionModel):
        return StreamOption(
            _convert_filter_options(item.value), _convert_stream(item.stream)
        )
    return StreamOption(_convert_filter_options(item))


def _convert_global(model: GlobalOptionsModel) -> GlobalOptions:
    log = None
    if model.log is not None:
        log = LogOptions(
            color=model.log.color, level=model.log.level, repeated=model.log.repeated
        )
    return GlobalOptions(
        log=log,
        hide_banner=model.hide_banner,
        overwrite=model.overwrite,
        no_stats=model.no_stats,
        report=model.report,
    )


def _convert_decoding(model: DecodingOptionsModel) -> DecodingOptions:
    return DecodingOptions(
        hardware_acceleration=model.hardware_acceleration,
        hardware_acceleration_device=model.hardware_acceleration_device,
        deinterlacing_mode=model.deinterlacing_mode,
        duration=model.duration,
        position=model.position,
        drop_second_field=model.drop_second_field,
        codec=_convert_text_option(model.codec) if model.codec is not None else None,
    )


def _convert_encoding(model: EncodingOptionsModel) -> EncodingOptions:
    return EncodingOptions(
        audio_samplerate=model.audio_samplerate,
        audio_channels=model.audio_channels,
        b_frames=model.b_frames,
        bitrate=tuple(_convert_number_option(i) for i in model.bitrate),
        b_strategy=model.b_strategy,
        buf_size=_convert_number(model.buf_size) if model.buf_size is not None else None,
        codec=tuple(_convert_text_option(i) for i in model.codec),
        coder=model.coder,
        constant_quality=model.constant_quality,
        crf=model.crf,
        filters=tuple(_convert_filter_option(i) for i in model.filters),
        framerate=model.framerate,
        frame_size=model.frame_size,
        gop=model.gop,
        keyint_min=model.keyint_min,
        level=model.level,
        maxrate=tuple(_convert_number_option(i) for i in model.maxrate),
        minrate=tuple(_convert_number_option(i) for i in model.minrate),
        preset=model.preset,
        profile=tuple(_convert_text_option(i) for i in model.profile),
        rate_control=model.rate_control,
        sc_threshold=model.sc_threshold,
        tune=model.tune,
        max_muxing_queue_size=model.max_muxing_queue_size,
        hls_time=model.hls_time,
        hls_list_size=model.hls_list_size,
        hls_key_info_file=model.hls_key_info_file,
        hls_segment_filename=model.hls_segment_filename,
        customize=tuple(model.customize.items()),
        remove_audio=model.remove_audio,
    )


def _convert_map(item: str | MapOptionModel) -> MapOption:
    if isinstance(item, str):
        return MapOption(name=item)
    return MapOption(
        name=item.name,
        input_file_id=item.input_file_id,
        stream=_convert_stream(item.stream),
    )


def _convert_input(model: InputModel) -> Input:
    options = None
    if model.decoding is not None:
        options = InputOptions(decoding=_convert_decoding(model.decoding))
    return Input(path=model.path, options=options)


def _convert_output(model: OutputModel) -> Output:
    options = None
    if model.map or model.encoding is not None or model.format:
        options = OutputOptions(
            map=tuple(_convert_map(i) for i in model.map),
            encoding=(
                _convert_encoding(model.encoding)
                if model.encoding is not None
                else None
            ),
            format=model.format,
        )
    return Output(path=model.path, options=options)


def _convert_complex_filter(model: ComplexFilterOptionsModel) -> ComplexFilterOptions:
    return ComplexFilterOptions(
        output_num=model.output_num,
        complex_filters=tuple(
            ComplexFilter(
                filters=tuple(chain.filters),
                input_streams=tuple(_convert_stream(s) for s in chain.inputs),
                output_streams=tuple(_convert_stream(s) for s in chain.outputs),
            )
            for chain in model.chains
        ),
        chain_separator=model.chain_separator,
    )


def load_job_from_dict(data: dict[str, Any]) -> Job:
    """Validate and convert a parsed job document.

    Raises:
        JobFileError: If the document does not describe a valid job.
    """
    if not isinstance(data, dict):
        raise JobFileError("Job file must contain a mapping")
    try:
        model = JobModel.model_validate(data)
    except ValidationError as e:
        message, field = _format_validation_error(e)
        raise JobFileError(message, field) from e

    return Job(
        global_options=_convert_global(model.global_options),
        inputs=tuple(_convert_input(i) for i in model.inputs),
        complex_filter=(
            _convert_complex_filter(model.complex_filter)
            if model.complex_filter is not None
            else None
        ),
        outputs=tuple(_convert_output(o) for o in model.outputs),
    )


def load_job(path: Path) -> Job:
    """Load a job from a YAML or JSON file.

    Raises:
        JobFileError: If the file cannot be read, parsed or validated.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise JobFileError(f"Cannot read job file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise JobFileError(f"Invalid YAML in {path}: {e}") from e

    return load_job_from_dict(data)
