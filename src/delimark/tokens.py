"""Validated token definitions.

The validator emits a flat stream of tokens for a renderer to consume. A
token is one of four finalized variants, decided once during validation:

Token (base)
├── Text            literal content, rendered verbatim
├── OpenDelimiter   paired marker that validly opens
├── CloseDelimiter  paired marker closing the matching OpenDelimiter
└── BlockMarker     line-leading marker

Equality compares kind and value only. Source coordinates ride along for
error messages and debugging but do not take part in comparisons, so
``Text("ab") == Text("ab", lineno=4, col=2)``.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from delimark.location import SourceLocation


class TokenType(Enum):
    """Discriminator for the four token variants."""

    TEXT = auto()
    OPEN_DELIMITER = auto()
    CLOSE_DELIMITER = auto()
    BLOCK_MARKER = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for validated tokens.

    Attributes:
        value: The literal characters from source.
        lineno: Line number (1-indexed, 0 when unknown)
        col: Column of the first character (1-indexed, 0 when unknown)
        offset: Absolute position in source (0-indexed)

    """

    type: ClassVar[TokenType]

    value: str
    lineno: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)
    offset: int = field(default=0, compare=False)

    @property
    def location(self) -> SourceLocation:
        """Source location of this token."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.offset + len(self.value),
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"{type(self).__name__}({val!r}, {self.lineno}:{self.col})"


@dataclass(frozen=True, slots=True, repr=False)
class Text(Token):
    """Literal content."""

    type: ClassVar[TokenType] = TokenType.TEXT


@dataclass(frozen=True, slots=True, repr=False)
class OpenDelimiter(Token):
    """A paired marker confirmed to open a span."""

    type: ClassVar[TokenType] = TokenType.OPEN_DELIMITER


@dataclass(frozen=True, slots=True, repr=False)
class CloseDelimiter(Token):
    """A paired marker confirmed to close the nearest matching open."""

    type: ClassVar[TokenType] = TokenType.CLOSE_DELIMITER


@dataclass(frozen=True, slots=True, repr=False)
class BlockMarker(Token):
    """A block marker confirmed as the first segment of its line."""

    type: ClassVar[TokenType] = TokenType.BLOCK_MARKER


TOKEN_CLASSES: dict[TokenType, type[Token]] = {
    TokenType.TEXT: Text,
    TokenType.OPEN_DELIMITER: OpenDelimiter,
    TokenType.CLOSE_DELIMITER: CloseDelimiter,
    TokenType.BLOCK_MARKER: BlockMarker,
}


__all__ = [
    "TOKEN_CLASSES",
    "BlockMarker",
    "CloseDelimiter",
    "OpenDelimiter",
    "Text",
    "Token",
    "TokenType",
]
