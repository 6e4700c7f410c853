"""Tests for the top-level API: process(), tokenize(), validate()."""

import pytest

from delimark import (
    BlockMarker,
    CloseDelimiter,
    MarkerCatalog,
    OpenDelimiter,
    Text,
    process,
    tokenize,
    validate,
)


class TestDocumentedExamples:
    """Input/output pairs the pipeline must reproduce exactly."""

    def test_emphasis_pair(self) -> None:
        assert process("_ab_\n") == [
            OpenDelimiter("_"),
            Text("ab"),
            CloseDelimiter("_"),
            Text("\n"),
        ]

    def test_intraword_letters(self) -> None:
        assert process("a_b_c\n") == [
            Text("a"),
            Text("_"),
            Text("b"),
            Text("_"),
            Text("c"),
            Text("\n"),
        ]

    def test_intraword_digits(self) -> None:
        assert all(isinstance(t, Text) for t in process("1_2_3\n"))

    def test_nesting_accepted(self) -> None:
        assert process("__a _b_ c__\n") == [
            OpenDelimiter("__"),
            Text("a "),
            OpenDelimiter("_"),
            Text("b"),
            CloseDelimiter("_"),
            Text(" c"),
            CloseDelimiter("__"),
            Text("\n"),
        ]

    def test_crossing_rejected(self) -> None:
        tokens = process("_a __b_ c__\n")
        assert tokens == [
            Text("_"),
            Text("a "),
            Text("__"),
            Text("b"),
            Text("_"),
            Text(" c"),
            Text("__"),
            Text("\n"),
        ]

    def test_block_marker_at_line_start(self) -> None:
        assert process("# Title\n") == [BlockMarker("# "), Text("Title"), Text("\n")]

    def test_block_marker_after_text(self) -> None:
        assert process("see # here\n") == [Text("see "), Text("# "), Text("here"), Text("\n")]

    def test_no_pairing_across_lines(self) -> None:
        tokens = process("__a\nb__\n")
        assert not any(isinstance(t, (OpenDelimiter, CloseDelimiter)) for t in tokens)

    def test_heading_with_inline_markup(self) -> None:
        tokens = process("## __Big__ _news_")
        assert [type(t) for t in tokens] == [
            BlockMarker,
            OpenDelimiter,
            Text,
            CloseDelimiter,
            Text,
            OpenDelimiter,
            Text,
            CloseDelimiter,
        ]

    def test_adjacent_closer_stays_text(self) -> None:
        assert process("____a__") == [
            OpenDelimiter("__"),
            Text("__"),
            Text("a"),
            CloseDelimiter("__"),
        ]

    def test_list_items(self) -> None:
        tokens = process("- one\n- two\n")
        assert [t for t in tokens if isinstance(t, BlockMarker)] == [
            BlockMarker("- "),
            BlockMarker("- "),
        ]


class TestEscapes:
    """Escapes through the whole pipeline."""

    def test_escaped_marker_stays_text(self) -> None:
        assert process("\\_a_\n") == [
            Text("\\"),
            Text("_"),
            Text("a"),
            Text("_"),
            Text("\n"),
        ]

    def test_escape_neutralizes_only_one_character(self) -> None:
        assert process("\\__a_") == [
            Text("\\"),
            Text("_"),
            OpenDelimiter("_"),
            Text("a"),
            CloseDelimiter("_"),
        ]

    def test_escaped_escape_leaves_marker_active(self) -> None:
        assert process("\\\\_a_") == [
            Text("\\"),
            Text("\\"),
            OpenDelimiter("_"),
            Text("a"),
            CloseDelimiter("_"),
        ]

    def test_escaped_block_marker(self) -> None:
        assert process("\\# x") == [Text("\\"), Text("# x")]

    def test_escaped_block_marker_at_line_start_is_not_block(self) -> None:
        tokens = process("\\- item\n- real\n")
        assert [t for t in tokens if isinstance(t, BlockMarker)] == [BlockMarker("- ")]
        assert tokens[1] == Text("- item")

    def test_trailing_escape(self) -> None:
        assert process("abc  \\") == [Text("abc  "), Text("\\")]


class TestEdgeInputs:
    """Degenerate inputs never fail."""

    @pytest.mark.parametrize(
        "source",
        ["", "\n", "_", "__", "\\", "# ", "- ", "****", "_ _ _", "\\\\\\", "# # #"],
    )
    def test_lossless(self, source: str) -> None:
        assert "".join(t.value for t in process(source)) == source

    def test_empty_source(self) -> None:
        assert process("") == []

    def test_blank_lines(self) -> None:
        assert process("\n\n") == [Text("\n"), Text("\n")]


class TestCustomCatalog:
    """Catalogs are passed explicitly."""

    def test_tilde_pairs(self) -> None:
        catalog = MarkerCatalog.build(block=["> "], paired=["~~"])
        assert process("> ~~gone~~\n", catalog) == [
            BlockMarker("> "),
            OpenDelimiter("~~"),
            Text("gone"),
            CloseDelimiter("~~"),
            Text("\n"),
        ]

    def test_default_markers_not_recognized(self) -> None:
        catalog = MarkerCatalog.build(paired=["~~"])
        assert process("_a_", catalog) == [Text("_a_")]

    def test_custom_escape(self) -> None:
        catalog = MarkerCatalog.build(paired=["*"], escape="!")
        assert process("!*a*", catalog) == [Text("!"), Text("*"), Text("a"), Text("*")]


class TestStagedApi:
    """tokenize() and validate() compose to process()."""

    def test_staged_equals_process(self) -> None:
        source = "# __a__ b\n_c_ \\_d\n"
        assert validate(tokenize(source)) == process(source)

    def test_staged_with_catalog(self) -> None:
        catalog = MarkerCatalog.build(paired=["+"])
        source = "+x+ y"
        assert validate(tokenize(source, catalog), catalog) == process(source, catalog)

    def test_token_coordinates(self) -> None:
        tokens = process("ab\n_c_")
        assert [(t.value, t.lineno, t.col) for t in tokens] == [
            ("ab", 1, 1),
            ("\n", 1, 3),
            ("_", 2, 1),
            ("c", 2, 2),
            ("_", 2, 3),
        ]
