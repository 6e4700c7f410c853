"""Line-scoped greedy lexer with O(n) guaranteed performance.

Splits source into lines, then scans each line left to right against the
marker catalog using longest match. Every character of the source lands in
exactly one segment, so joining segment values reproduces the input.

No regex in the hot path.

Thread Safety:
Lexer instances hold only the immutable catalog. One instance may be shared
across threads; all scanning state is local to a call.

"""

from __future__ import annotations

from collections.abc import Iterator

from delimark.catalog import DEFAULT_CATALOG, MarkerCatalog, MarkerCategory
from delimark.segments import CandidateSegment, EscapedSegment, Line, LiteralSegment, Segment

_NEWLINE = "\n"


class Lexer:
    """Greedy longest-match lexer producing raw per-line segments.

    Each line is scanned independently:
    1. Find the window (line content and its terminator)
    2. Scan the window against the catalog, emitting segments
    3. Emit the terminator as the line's final literal segment

    Usage:
            >>> lexer = Lexer()
            >>> for line in lexer.tokenize("_ab_\\n"):
            ...     print(line.segments)
        (CandidateSegment(value='_', offset=0), LiteralSegment(value='ab', offset=1),
         CandidateSegment(value='_', offset=3), LiteralSegment(value='\\n', offset=4))

    """

    __slots__ = ("_catalog",)

    def __init__(self, catalog: MarkerCatalog | None = None) -> None:
        """Initialize lexer with a marker catalog.

        Args:
            catalog: Markers to recognize (DEFAULT_CATALOG if None)
        """
        self._catalog = catalog if catalog is not None else DEFAULT_CATALOG

    @property
    def catalog(self) -> MarkerCatalog:
        return self._catalog

    def tokenize(self, source: str) -> list[Line]:
        """Tokenize source into raw lines.

        Args:
            source: Markup text with embedded newlines

        Returns:
            One Line per source line, in order.

        Complexity: O(n) where n = len(source)
        """
        return list(self.iter_lines(source))

    def iter_lines(self, source: str) -> Iterator[Line]:
        """Tokenize source lazily, one Line at a time.

        Yields:
            Line objects in source order.
        """
        source_len = len(source)
        pos = 0
        lineno = 1
        while pos < source_len:
            line_end = source.find(_NEWLINE, pos)
            if line_end == -1:
                # Final line without terminator
                yield self._scan_line(source[pos:], "", lineno, pos)
                return
            yield self._scan_line(source[pos:line_end], _NEWLINE, lineno, pos)
            pos = line_end + 1
            lineno += 1

    def _scan_line(self, content: str, terminator: str, lineno: int, base: int) -> Line:
        """Scan one line's content into segments.

        Args:
            content: Line text without its terminator
            terminator: "\\n", or "" for an unterminated final line
            lineno: Line number (1-indexed)
            base: Absolute offset of content[0] in the source

        Returns:
            Line holding the segments, terminator segment last.
        """
        catalog = self._catalog
        segments: list[Segment] = []
        content_len = len(content)
        run_start = 0  # start of the pending literal run
        pos = 0

        while pos < content_len:
            entry = catalog.longest_match(content, pos)
            if entry is None:
                pos += 1
                continue

            if run_start < pos:
                segments.append(LiteralSegment(content[run_start:pos], base + run_start))

            if entry.category is MarkerCategory.ESCAPE:
                # The escape itself stays in the stream as plain text
                segments.append(LiteralSegment(entry.literal, base + pos))
                pos += len(entry.literal)
                run_start = pos
                if pos < content_len:
                    char = content[pos]
                    pos += 1
                    # Neutralized only if the character alone is a marker literal
                    if char in catalog:
                        segments.append(EscapedSegment(char, base + pos - 1))
                        run_start = pos
                    # otherwise char opens the next literal run
            else:
                segments.append(CandidateSegment(entry.literal, base + pos))
                pos += len(entry.literal)
                run_start = pos

        if run_start < content_len:
            segments.append(LiteralSegment(content[run_start:], base + run_start))
        if terminator:
            segments.append(LiteralSegment(terminator, base + content_len))

        return Line(tuple(segments), lineno=lineno, offset=base)
