"""Delimiter validation over lexed lines.

Resolves every raw segment into exactly one token. Candidates that cannot
be confirmed as markup degrade to Text carrying their original characters,
so validation never fails.

Each line is validated independently: the pending-open stack and all
adjacency context are line-local. Lines can therefore be fanned out to a
thread pool and gathered back in order.

Thread Safety:
Validator instances hold only immutable configuration. Safe to share
across threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from delimark.catalog import DEFAULT_CATALOG, MarkerCatalog, MarkerCategory
from delimark.segments import CandidateSegment, Line, Segment
from delimark.tokens import TOKEN_CLASSES, Token, TokenType
from delimark.utils.logger import get_logger
from delimark.validation.flanking import FlankingMixin
from delimark.validation.pending import PendingStack

logger = get_logger(__name__)


class Validator(FlankingMixin):
    """Line-scoped delimiter-stack validator.

    Usage:
            >>> from delimark.lexer import Lexer
            >>> lines = Lexer().tokenize("__a _b_ c__\\n")
            >>> [t.type.name for t in Validator().validate(lines)][:3]
            ['OPEN_DELIMITER', 'TEXT', 'OPEN_DELIMITER']

    """

    __slots__ = ("_catalog", "_max_workers")

    def __init__(
        self,
        catalog: MarkerCatalog | None = None,
        *,
        max_workers: int | None = None,
    ) -> None:
        """Initialize validator.

        Args:
            catalog: Marker catalog used to categorize candidates
                (DEFAULT_CATALOG if None)
            max_workers: Validate lines on a thread pool of this size.
                None or 1 validates sequentially.
        """
        self._catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._max_workers = max_workers

    @property
    def catalog(self) -> MarkerCatalog:
        return self._catalog

    def validate(self, lines: Iterable[Line]) -> list[Token]:
        """Validate lines and flatten them into one token stream.

        Args:
            lines: Lines from Lexer.tokenize()

        Returns:
            Tokens in source order, one per input segment.
        """
        lines = list(lines)
        if self._max_workers is not None and self._max_workers > 1 and len(lines) > 1:
            logger.debug("Validating %d lines on %d workers", len(lines), self._max_workers)
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                per_line = list(executor.map(self.validate_line, lines))
        else:
            per_line = [self.validate_line(line) for line in lines]

        return [token for line_tokens in per_line for token in line_tokens]

    def validate_line(self, line: Line) -> list[Token]:
        """Validate a single line.

        Args:
            line: One lexed line.

        Returns:
            Tokens for the line's segments, in order.
        """
        segments = line.segments
        kinds = [TokenType.TEXT] * len(segments)
        stack = PendingStack()

        for idx, segment in enumerate(segments):
            if isinstance(segment, CandidateSegment):
                category = self._catalog.category_of(segment.value)
                if category is MarkerCategory.BLOCK:
                    if idx == 0:
                        kinds[idx] = TokenType.BLOCK_MARKER
                elif category is MarkerCategory.PAIRED:
                    self._resolve_paired(segments, idx, stack)
            if segment.value.strip():
                stack.note_content(idx)

        for match in stack.matches:
            kinds[match.opener_idx] = TokenType.OPEN_DELIMITER
            kinds[match.closer_idx] = TokenType.CLOSE_DELIMITER

        if stack:
            logger.debug(
                "Line %d: %d unclosed delimiter(s) left as text", line.lineno, len(stack)
            )

        return [
            self._make_token(kind, segment, line) for kind, segment in zip(kinds, segments)
        ]

    def _resolve_paired(
        self,
        segments: Sequence[Segment],
        idx: int,
        stack: PendingStack,
    ) -> None:
        """Run one paired candidate through the delimiter stack.

        Matches are recorded on the stack; anything not matched stays Text.
        """
        before = self._left_context(segments, idx)
        after = self._right_context(segments, idx)
        if self._is_intraword(before, after):
            return

        literal = segments[idx].value
        if self._can_close(before):
            depth = stack.find(literal)
            if depth is not None:
                if depth == stack.top_depth and stack.can_close(depth):
                    # Nothing but whitespace inside: stays text, and does not open either
                    if stack.has_content_since(stack.entries[depth].idx):
                        stack.pop_match(idx)
                    return
                # Crossing: closes out of order, so neither side validates
                logger.debug(
                    "Crossing delimiter %r at segment %d left as text", literal, idx
                )
                stack.mark_crossed()
                return

        if self._can_open(after):
            stack.push(literal, idx)

    def _make_token(self, kind: TokenType, segment: Segment, line: Line) -> Token:
        return TOKEN_CLASSES[kind](
            segment.value,
            lineno=line.lineno,
            col=segment.offset - line.offset + 1,
            offset=segment.offset,
        )
