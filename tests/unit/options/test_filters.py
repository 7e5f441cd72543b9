"""Tests for filter expressions and complex filter graphs."""

from ffcmd.options.filters import (
    ComplexFilter,
    ComplexFilterOptions,
    FilterOptions,
    Ratio,
    Scale,
    split_filter,
)
from ffcmd.options.streams import StreamSpecifier


class TestFilterOptions:
    """Tests for FilterOptions.render."""

    def test_empty(self):
        assert FilterOptions().render() == ""

    def test_single(self):
        assert FilterOptions(scale_npp=Scale(1280, 720)).render() == "scale_npp=1280:720"

    def test_fixed_order(self):
        options = FilterOptions(scale_npp=Scale(1920, 1080), sar=Ratio(16, 9))
        assert options.render() == "setsar=16/9,scale_npp=1920:1080"


class TestComplexFilter:
    """Tests for a single filter chain."""

    def test_labels_and_filters(self):
        chain = ComplexFilter(
            filters=("scale=1280:720", "fps=30"),
            input_streams=(StreamSpecifier(name="0:v"),),
            output_streams=(StreamSpecifier(name="v720"), StreamSpecifier(name="x")),
        )
        assert chain.render() == "[0:v]scale=1280:720,fps=30[v720][x]"

    def test_multiple_inputs(self):
        chain = ComplexFilter(
            filters=("overlay",),
            input_streams=(
                StreamSpecifier(type="v", index=0),
                StreamSpecifier(index=1),
            ),
        )
        assert chain.render() == "[v:0][1]overlay"

    def test_empty(self):
        assert ComplexFilter().render() == ""


class TestComplexFilterOptions:
    """Tests for complete filter graphs."""

    def test_split_filter(self):
        assert split_filter(3).render() == "split=3[out0][out1][out2]"

    def test_auto_split_only(self):
        graph = ComplexFilterOptions(output_num=2)
        assert graph.render() == "split=2[out0][out1]"

    def test_auto_split_comes_first(self):
        graph = ComplexFilterOptions(
            output_num=2,
            complex_filters=(ComplexFilter(filters=("null",)),),
        )
        assert graph.render() == "split=2[out0][out1],null"

    def test_chains_joined_with_comma_by_default(self):
        graph = ComplexFilterOptions(
            complex_filters=(
                ComplexFilter(filters=("a",)),
                ComplexFilter(filters=("b",)),
            )
        )
        assert graph.render() == "a,b"

    def test_custom_separator(self):
        graph = ComplexFilterOptions(
            complex_filters=(
                ComplexFilter(filters=("a",)),
                ComplexFilter(filters=("b",)),
            ),
            chain_separator=";",
        )
        assert graph.render() == "a;b"

    def test_empty_chains_are_dropped(self):
        graph = ComplexFilterOptions(
            complex_filters=(
                ComplexFilter(),
                ComplexFilter(filters=("a",)),
                ComplexFilter(),
            )
        )
        assert graph.render() == "a"

    def test_emit(self):
        args: list[str] = []
        ComplexFilterOptions(output_num=2).emit(args)
        assert args == ["-filter_complex", "split=2[out0][out1]"]

    def test_empty_graph_emits_nothing(self):
        args: list[str] = []
        ComplexFilterOptions().emit(args)
        ComplexFilterOptions(complex_filters=(ComplexFilter(),)).emit(args)
        assert args == []

    def test_render_does_not_change_graph(self):
        graph = ComplexFilterOptions(
            output_num=2, complex_filters=(ComplexFilter(filters=("a",)),)
        )
        assert graph.render() == graph.render()
        assert len(graph.complex_filters) == 1
