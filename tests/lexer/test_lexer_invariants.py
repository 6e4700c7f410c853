"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from delimark.catalog import DEFAULT_CATALOG
from delimark.lexer import Lexer
from delimark.segments import CandidateSegment, EscapedSegment

MARKUP_ALPHABET = "ab1 _*#-\\\n"


class TestContentPreservation:
    """No character is lost or invented."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_segments_reproduce_source(self, source: str) -> None:
        lines = Lexer().tokenize(source)
        assert "".join(line.text for line in lines) == source

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_markup_heavy_source_reproduced(self, source: str) -> None:
        lines = Lexer().tokenize(source)
        assert "".join(line.text for line in lines) == source

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_offsets_point_at_segment_text(self, source: str) -> None:
        for line in Lexer().tokenize(source):
            for segment in line.segments:
                assert source[segment.offset : segment.offset + len(segment.value)] == segment.value


class TestSegmentShape:
    """Structural guarantees on every line."""

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_no_empty_segments(self, source: str) -> None:
        for line in Lexer().tokenize(source):
            assert all(segment.value for segment in line.segments)

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_newline_only_as_final_segment(self, source: str) -> None:
        lines = Lexer().tokenize(source)
        for line in lines:
            for segment in line.segments[:-1]:
                assert "\n" not in segment.value
        for line in lines[:-1]:
            assert line.segments[-1].value == "\n"

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_line_count(self, source: str) -> None:
        lines = Lexer().tokenize(source)
        expected = source.count("\n") + (0 if source.endswith("\n") or not source else 1)
        assert len(lines) == expected
        assert [line.lineno for line in lines] == list(range(1, len(lines) + 1))

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_candidates_are_catalog_markers(self, source: str) -> None:
        for line in Lexer().tokenize(source):
            for segment in line.segments:
                if isinstance(segment, CandidateSegment):
                    assert segment.value in DEFAULT_CATALOG
                    assert segment.value != DEFAULT_CATALOG.escape

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_escaped_segments_follow_escape(self, source: str) -> None:
        for line in Lexer().tokenize(source):
            for idx, segment in enumerate(line.segments):
                if isinstance(segment, EscapedSegment):
                    assert len(segment.value) == 1
                    assert idx > 0
                    assert line.segments[idx - 1].value == "\\"


class TestDeterminism:
    """Tokenization is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        lexer = Lexer()
        assert lexer.tokenize(source) == lexer.tokenize(source)
