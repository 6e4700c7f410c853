"""Raw segments produced by the lexer.

Segments are the lexer's classification of a line, before validation has
decided which candidate markers are real delimiters. Uses NamedTuples:
- Immutability by default
- Tuple unpacking support
- Low memory footprint for long lines

Thread Safety:
All segments and lines are immutable and safe to share across threads.

Usage:
    from delimark.segments import CandidateSegment, Line, LiteralSegment

    line = Line((CandidateSegment("_"), LiteralSegment("ab"), CandidateSegment("_")))
    match line.segments[0]:
        case CandidateSegment(value=value):
            print(f"candidate marker {value!r}")

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NamedTuple, TypeAlias


class LiteralSegment(NamedTuple):
    """A run of ordinary characters, an escape marker, or a line terminator.

    Attributes:
        value: The characters, verbatim from source.
        offset: Absolute position of the first character in the source.

    """

    value: str
    offset: int = 0

    @property
    def type(self) -> Literal["literal"]:
        """Segment type identifier for dispatch."""
        return "literal"


class CandidateSegment(NamedTuple):
    """A catalog marker literal that may turn out to be markup.

    Attributes:
        value: The marker literal.
        offset: Absolute position of the marker in the source.

    """

    value: str
    offset: int = 0

    @property
    def type(self) -> Literal["candidate"]:
        """Segment type identifier for dispatch."""
        return "candidate"


class EscapedSegment(NamedTuple):
    """The single character following an escape marker.

    Only produced when the character would otherwise start a marker. Never
    eligible for pairing or block validity.

    Attributes:
        value: The neutralized character.
        offset: Absolute position of the character in the source.

    """

    value: str
    offset: int = 0

    @property
    def type(self) -> Literal["escaped"]:
        """Segment type identifier for dispatch."""
        return "escaped"


Segment: TypeAlias = LiteralSegment | CandidateSegment | EscapedSegment


@dataclass(frozen=True, slots=True)
class Line:
    """The ordered segments of one source line.

    Pairing and block validity are decided strictly within a Line.

    Attributes:
        segments: Raw segments in source order, terminator last.
        lineno: Line number (1-indexed).
        offset: Absolute position of the line's first character.

    """

    segments: tuple[Segment, ...]
    lineno: int = 1
    offset: int = 0

    @property
    def text(self) -> str:
        """The line's source text, terminator included."""
        return "".join(segment.value for segment in self.segments)

    def __len__(self) -> int:
        return len(self.segments)


__all__ = [
    "CandidateSegment",
    "EscapedSegment",
    "Line",
    "LiteralSegment",
    "Segment",
]
