"""Decoding options, placed before an input's -i."""

from __future__ import annotations

from dataclasses import dataclass

from ffcmd.options.enums import DeinterlacingMode, option_text
from ffcmd.options.streams import StreamOption, format_text


@dataclass(frozen=True)
class DecodingOptions:
    """Options applied when reading an input.

    Attributes:
        hardware_acceleration: Value for -hwaccel (e.g. "cuda").
        hardware_acceleration_device: Value for -hwaccel_device; only
            emitted together with hardware_acceleration.
        deinterlacing_mode: Value for -deint.
        duration: Value for -t (e.g. "00:00:10" or "10").
        position: Value for -ss.
        drop_second_field: Value for -drop_second_field.
        codec: Decoder, optionally per stream (-c[:stream]).
    """

    hardware_acceleration: str | None = None
    hardware_acceleration_device: int | None = None
    deinterlacing_mode: DeinterlacingMode | str | None = None
    duration: str | None = None
    position: str | None = None
    drop_second_field: bool | None = None
    codec: StreamOption[str] | None = None

    def emit(self, args: list[str]) -> None:
        """Append decoding tokens.

        Raises:
            FormatError: If the codec value is not a string.
        """
        out: list[str] = []
        if self.hardware_acceleration:
            out.extend(["-hwaccel", self.hardware_acceleration])
            if self.hardware_acceleration_device is not None:
                out.extend(["-hwaccel_device", str(self.hardware_acceleration_device)])
        if self.deinterlacing_mode:
            out.extend(["-deint", option_text(self.deinterlacing_mode)])
        if self.duration:
            out.extend(["-t", self.duration])
        if self.position:
            out.extend(["-ss", self.position])
        if self.drop_second_field is not None:
            out.extend(["-drop_second_field", "1" if self.drop_second_field else "0"])
        if self.codec is not None:
            out.extend(self.codec.render("-c", format_text))
        args.extend(out)
