"""Numbers with unit-prefix shorthand.

FFmpeg accepts numeric option values such as ``2M``, ``128Ki`` or
``1.5MiB``. The suffixes are, from right to left:

- ``B``: the value is in bytes and multiplied by 8
- ``i``: prefixes are powers of 1024 instead of powers of 1000
- ``K``, ``M``, ``G``, ``T``, ``P``: SI prefix of rank 1 to 5
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ffcmd.errors import ParseError

# Prefix letter (casefolded) to exponent
PREFIX_RANKS: dict[str, int] = {"k": 1, "m": 2, "g": 3, "t": 4, "p": 5}


def _is_supported(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Number:
    """A number whose value may be shortened with prefix suffixes."""

    value: int | float
    prefix: str = ""
    binary_multiple: bool = False
    bit_multiple: bool = False

    @classmethod
    def parse(cls, text: str) -> Number:
        """Parse shorthand text such as ``"2M"`` or ``"128KiB"``.

        Raises:
            ParseError: If the text is empty, the prefix is unknown, or the
                remaining text is not a finite number. Whitespace and digit
                separators are rejected.
        """
        original = text
        if "_" in text or any(ch.isspace() for ch in text):
            raise ParseError(f"invalid number shorthand {original!r}", original)
        bit_multiple = False
        binary_multiple = False
        prefix = ""

        if text.endswith("B"):
            bit_multiple = True
            text = text[:-1]
        if text.endswith("i"):
            binary_multiple = True
            text = text[:-1]
        if not text:
            raise ParseError(f"invalid number shorthand {original!r}", original)

        if not text[-1].isdigit():
            prefix = text[-1]
            text = text[:-1]
            if prefix.casefold() not in PREFIX_RANKS:
                raise ParseError(
                    f"invalid unit prefix {prefix!r} in {original!r}", original
                )

        try:
            value = float(text)
        except ValueError as e:
            raise ParseError(
                f"invalid number shorthand {original!r}", original
            ) from e
        if not math.isfinite(value):
            raise ParseError(f"invalid number shorthand {original!r}", original)

        return cls(
            value=value,
            prefix=prefix,
            binary_multiple=binary_multiple,
            bit_multiple=bit_multiple,
        )

    def to_text(self) -> str:
        """Format the number back to shorthand text.

        Returns an empty string when the value is not an int or float.
        """
        if not _is_supported(self.value):
            return ""
        if isinstance(self.value, float):
            text = f"{self.value:.3f}".rstrip("0").removesuffix(".")
        else:
            text = str(self.value)
        text += self.prefix
        if self.binary_multiple:
            text += "i"
        if self.bit_multiple:
            text += "B"
        return text

    def to_float(self) -> float:
        """Expand the shorthand to an absolute magnitude."""
        if not _is_supported(self.value):
            return 0.0
        result = float(self.value)
        if self.bit_multiple:
            result *= 8
        base = 1024.0 if self.binary_multiple else 1000.0
        rank = PREFIX_RANKS.get(self.prefix.casefold(), 0)
        return result * base**rank

    def __str__(self) -> str:
        return self.to_text()
