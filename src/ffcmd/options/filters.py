"""Simple filter expressions and complex filter graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ffcmd.options.streams import StreamSpecifier

# Separator placed between chains of a -filter_complex graph. FFmpeg's own
# filtergraph syntax uses ";"; set chain_separator per graph to get it.
DEFAULT_CHAIN_SEPARATOR = ","


@dataclass(frozen=True)
class Ratio:
    """A ratio rendered as ``antecedent/consequent``."""

    antecedent: int
    consequent: int

    def render(self) -> str:
        return f"{self.antecedent}/{self.consequent}"


@dataclass(frozen=True)
class Scale:
    """A frame size rendered as ``width:height``."""

    width: int
    height: int

    def render(self) -> str:
        return f"{self.width}:{self.height}"


@dataclass(frozen=True)
class FilterOptions:
    """Filters applied through a simple -filter option."""

    sar: Ratio | None = None
    scale_npp: Scale | None = None

    def render(self) -> str:
        """Render as comma-joined ``name=value`` fragments.

        Fragments always appear in the order setsar, scale_npp.
        """
        items: list[str] = []
        if self.sar is not None:
            items.append(f"setsar={self.sar.render()}")
        if self.scale_npp is not None:
            items.append(f"scale_npp={self.scale_npp.render()}")
        return ",".join(items)


@dataclass(frozen=True)
class ComplexFilter:
    """One chain of a complex filter graph.

    Renders as ``[in1][in2]filter1,filter2[out1][out2]``.
    """

    filters: tuple[str, ...] = ()
    input_streams: tuple[StreamSpecifier, ...] = ()
    output_streams: tuple[StreamSpecifier, ...] = ()

    def render(self) -> str:
        text = "".join(f"[{s.render()}]" for s in self.input_streams)
        text += ",".join(self.filters)
        text += "".join(f"[{s.render()}]" for s in self.output_streams)
        return text


def split_filter(count: int) -> ComplexFilter:
    """Build the ``split=N[out0]...[out(N-1)]`` chain."""
    labels = "".join(f"[out{index}]" for index in range(count))
    return ComplexFilter(filters=(f"split={count}{labels}",))


@dataclass(frozen=True)
class ComplexFilterOptions:
    """A complete -filter_complex graph.

    Attributes:
        output_num: When set, a split chain producing this many outputs
            labeled ``out0`` and up is placed before the other chains.
        complex_filters: Chains in declaration order.
        chain_separator: Text placed between rendered chains.
    """

    output_num: int | None = None
    complex_filters: tuple[ComplexFilter, ...] = ()
    chain_separator: str = field(default=DEFAULT_CHAIN_SEPARATOR)

    def chains(self) -> list[ComplexFilter]:
        chains: list[ComplexFilter] = []
        if self.output_num is not None:
            chains.append(split_filter(self.output_num))
        chains.extend(self.complex_filters)
        return chains

    def render(self) -> str:
        """Render the graph; chains that render empty are dropped."""
        rendered = [chain.render() for chain in self.chains()]
        return self.chain_separator.join(text for text in rendered if text)

    def emit(self, args: list[str]) -> None:
        value = self.render()
        if value:
            args.extend(["-filter_complex", value])
