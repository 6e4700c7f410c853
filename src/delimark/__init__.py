"""
delimark — line-scoped markup lexer and delimiter validator

Turns raw markup text into a lossless stream of classified tokens for a
renderer: paired delimiters that properly open and close on one line,
line-leading block markers, and plain text for everything else.

Quick Start:
    >>> from delimark import process
    >>> process("_ab_\\n")
    [OpenDelimiter('_', 1:1), Text('ab', 1:2), CloseDelimiter('_', 1:4), Text('\\n', 1:5)]

    >>> # Custom markers
    >>> from delimark import MarkerCatalog
    >>> catalog = MarkerCatalog.build(block=["> "], paired=["~~"])
    >>> [t.type.name for t in process("> ~~gone~~", catalog)]
    ['BLOCK_MARKER', 'OPEN_DELIMITER', 'TEXT', 'CLOSE_DELIMITER']

Concatenating token values always reproduces the input:
    >>> "".join(t.value for t in process("a_b_c\\n")) == "a_b_c\\n"
    True
"""

from delimark.catalog import DEFAULT_CATALOG, MarkerCatalog, MarkerCategory, MarkerEntry
from delimark.config import ProcessConfig
from delimark.errors import CatalogError, DelimarkError, SerializationError
from delimark.lexer import Lexer
from delimark.location import SourceLocation
from delimark.segments import CandidateSegment, EscapedSegment, Line, LiteralSegment, Segment
from delimark.serialization import from_dict, from_json, to_dict, to_json
from delimark.tokens import (
    BlockMarker,
    CloseDelimiter,
    OpenDelimiter,
    Text,
    Token,
    TokenType,
)
from delimark.validation import Validator

__version__ = "0.1.0"


def tokenize(source: str, catalog: MarkerCatalog | None = None) -> list[Line]:
    """Split source into lines of raw segments.

    Args:
        source: Markup text
        catalog: Marker catalog (DEFAULT_CATALOG if None)

    Returns:
        One Line per source line.
    """
    return Lexer(catalog).tokenize(source)


def validate(
    lines: list[Line],
    catalog: MarkerCatalog | None = None,
    *,
    max_workers: int | None = None,
) -> list[Token]:
    """Resolve raw lines into a flat, validated token stream.

    Args:
        lines: Output of tokenize()
        catalog: Marker catalog (DEFAULT_CATALOG if None)
        max_workers: Validate lines on a thread pool of this size

    Returns:
        Validated tokens in source order.
    """
    return Validator(catalog, max_workers=max_workers).validate(lines)


def process(
    source: str,
    catalog: MarkerCatalog | None = None,
    *,
    max_workers: int | None = None,
) -> list[Token]:
    """Lex and validate source in one step.

    Never raises for any input string: markup that cannot be validated
    comes back as Text.

    Args:
        source: Markup text
        catalog: Marker catalog (DEFAULT_CATALOG if None)
        max_workers: Validate lines on a thread pool of this size

    Returns:
        Validated tokens in source order.

    Example:
        >>> [t.value for t in process("# Hi\\n")]
        ['# ', 'Hi', '\\n']
    """
    lexer = Lexer(catalog)
    return Validator(catalog, max_workers=max_workers).validate(lexer.iter_lines(source))


__all__ = [
    # Pipeline
    "process",
    "tokenize",
    "validate",
    "Lexer",
    "Validator",
    # Configuration
    "DEFAULT_CATALOG",
    "MarkerCatalog",
    "MarkerCategory",
    "MarkerEntry",
    "ProcessConfig",
    # Segments
    "CandidateSegment",
    "EscapedSegment",
    "Line",
    "LiteralSegment",
    "Segment",
    # Tokens
    "BlockMarker",
    "CloseDelimiter",
    "OpenDelimiter",
    "Text",
    "Token",
    "TokenType",
    "SourceLocation",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "CatalogError",
    "DelimarkError",
    "SerializationError",
]
