"""Marker catalog: the set of literals the lexer recognizes as markup.

The catalog is pure configuration. It is built once, validated on
construction, and handed to the Lexer and Validator explicitly.

Entries are partitioned into three categories:
- BLOCK: must be the first segment of a line (e.g. "# ", "- ")
- PAIRED: need a matching close on the same line (e.g. "_", "__")
- ESCAPE: a single character neutralizing the character after it

Thread Safety:
MarkerCatalog and MarkerEntry are frozen and safe to share across threads.
Lookup tables are built once in __post_init__ and never mutated afterward.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from delimark.errors import CatalogError


class MarkerCategory(Enum):
    """How a marker literal participates in validation."""

    BLOCK = auto()
    PAIRED = auto()
    ESCAPE = auto()


@dataclass(frozen=True, slots=True)
class MarkerEntry:
    """A single recognized marker literal."""

    literal: str
    category: MarkerCategory


@dataclass(frozen=True, slots=True)
class MarkerCatalog:
    """Immutable, length-ordered collection of marker entries.

    Entries are stored longest first (stable for equal lengths), so a
    two-character marker wins over its one-character prefix at the same
    position.

    Usage:
            >>> catalog = MarkerCatalog.build(block=["# "], paired=["_", "__"])
            >>> catalog.longest_match("__x", 0).literal
            '__'
            >>> catalog.category_of("# ")
            <MarkerCategory.BLOCK: 1>

    Complexity:
        - category_of(): O(1)
        - longest_match(): O(k) where k = entries sharing the first character

    """

    entries: tuple[MarkerEntry, ...]
    # Lookup tables, derived from entries
    _by_literal: dict[str, MarkerCategory] = field(
        default_factory=dict, init=False, repr=False, compare=False, hash=False
    )
    _by_first_char: dict[str, tuple[MarkerEntry, ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False, hash=False
    )
    _escape: str | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_literal: dict[str, MarkerCategory] = {}
        escape: str | None = None

        for entry in self.entries:
            literal = entry.literal
            if not literal:
                raise CatalogError("marker literal must not be empty", literal)
            if "\n" in literal:
                raise CatalogError("marker literal must not contain a newline", literal)
            if literal in by_literal:
                raise CatalogError("marker literal declared more than once", literal)
            if entry.category is MarkerCategory.ESCAPE:
                if len(literal) != 1:
                    raise CatalogError("escape marker must be exactly one character", literal)
                if escape is not None:
                    raise CatalogError(
                        f"catalog already has escape marker {escape!r}", literal
                    )
                escape = literal
            by_literal[literal] = entry.category

        ordered = tuple(sorted(self.entries, key=lambda e: len(e.literal), reverse=True))
        buckets: dict[str, list[MarkerEntry]] = {}
        for entry in ordered:
            buckets.setdefault(entry.literal[0], []).append(entry)

        # Frozen dataclass: derived tables are written once here
        object.__setattr__(self, "entries", ordered)
        object.__setattr__(self, "_by_literal", by_literal)
        object.__setattr__(
            self, "_by_first_char", {char: tuple(group) for char, group in buckets.items()}
        )
        object.__setattr__(self, "_escape", escape)

    @classmethod
    def build(
        cls,
        *,
        block: Iterable[str] = (),
        paired: Iterable[str] = (),
        escape: str | None = "\\",
    ) -> MarkerCatalog:
        """Create a catalog from literal lists.

        Args:
            block: Line-leading marker literals
            paired: Paired inline marker literals
            escape: Escape character, or None for a catalog without escapes

        Returns:
            New validated MarkerCatalog.

        Raises:
            CatalogError: If the literals do not form a valid catalog.
        """
        entries = [MarkerEntry(literal, MarkerCategory.BLOCK) for literal in block]
        entries.extend(MarkerEntry(literal, MarkerCategory.PAIRED) for literal in paired)
        if escape is not None:
            entries.append(MarkerEntry(escape, MarkerCategory.ESCAPE))
        return cls(tuple(entries))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MarkerCatalog:
        """Create a catalog from a dictionary.

        Recognized keys are "block", "paired" and "escape"; unknown keys are
        silently ignored. A missing "escape" key means the default backslash.

        Example:
            >>> catalog = MarkerCatalog.from_dict({"paired": ["*"], "escape": "!"})
            >>> catalog.escape
            '!'

        """
        return cls.build(
            block=data.get("block", ()),
            paired=data.get("paired", ()),
            escape=data.get("escape", "\\"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Inverse of from_dict()."""
        return {
            "block": [e.literal for e in self.entries if e.category is MarkerCategory.BLOCK],
            "paired": [e.literal for e in self.entries if e.category is MarkerCategory.PAIRED],
            "escape": self._escape,
        }

    @property
    def escape(self) -> str | None:
        """The escape marker literal, or None."""
        return self._escape

    def category_of(self, literal: str) -> MarkerCategory | None:
        """Return the category of a literal, or None if it is not a marker."""
        return self._by_literal.get(literal)

    def longest_match(self, text: str, pos: int) -> MarkerEntry | None:
        """Find the longest marker literal starting at text[pos].

        Args:
            text: Text being scanned
            pos: Position to match at

        Returns:
            The matching entry, or None if no marker starts at pos.
        """
        if pos >= len(text):
            return None
        candidates = self._by_first_char.get(text[pos])
        if candidates is None:
            return None
        for entry in candidates:
            if text.startswith(entry.literal, pos):
                return entry
        return None

    def __contains__(self, literal: object) -> bool:
        return literal in self._by_literal

    def __iter__(self) -> Iterator[MarkerEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_CATALOG: MarkerCatalog = MarkerCatalog.build(
    block=["# ", "## ", "### ", "#### ", "##### ", "###### ", "- "],
    paired=["__", "_", "**", "*"],
    escape="\\",
)


__all__ = [
    "DEFAULT_CATALOG",
    "MarkerCatalog",
    "MarkerCategory",
    "MarkerEntry",
]
