"""Source location tracking for tokens.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in the source text.

    Line and column are 1-indexed; offsets are 0-indexed positions into the
    full input string, end exclusive.

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12, end_offset=14)
            >>> str(loc)
            '2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        """Format location as "lineno:col"."""
        return f"{self.lineno}:{self.col_offset}"

