"""Pending-open stack for delimiter matching.

Tracks tentatively opened delimiters for one line, and records the
confirmed opener/closer pairs. Keeps match state out of the segment
objects, so segments and tokens stay immutable.

Every operation is O(1), so validating a line stays linear in its segment
count however deep the stack grows:
- an index from literal to stack positions answers find() without a scan
- crossing is a single watermark: entries below it can never close again
- content between an opener and a closer is checked against the index of
  the last non-blank segment seen, not by rescanning the span

Thread Safety:
PendingStack instances are single-use per line.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PendingOpen:
    """A tentative opener waiting for its close.

    Attributes:
        literal: The marker literal.
        idx: Index of the opener segment within its line.

    """

    literal: str
    idx: int


@dataclass(frozen=True, slots=True)
class DelimiterMatch:
    """Record of a matched opener-closer pair.

    Attributes:
        opener_idx: Index of the opener segment in the line.
        closer_idx: Index of the closer segment in the line.

    """

    opener_idx: int
    closer_idx: int


@dataclass(slots=True)
class PendingStack:
    """LIFO stack of pending openers plus the matches made so far.

    Usage:
        stack = PendingStack()
        stack.push("_", 0)
        stack.note_content(1)
        depth = stack.find("_")
        if depth == stack.top_depth and stack.can_close(depth):
            stack.pop_match(closer_idx=2)

    Complexity:
        - push(): O(1)
        - pop_match(): O(1)
        - find(): O(1)
        - mark_crossed(): O(1)
        - has_content_since(): O(1)

    """

    entries: list[PendingOpen] = field(default_factory=list)
    matches: list[DelimiterMatch] = field(default_factory=list)
    # literal -> stack positions holding it, bottom to top
    _depths: dict[str, list[int]] = field(default_factory=dict, init=False, repr=False)
    # entries below this position are crossed or buried under crossed ones
    _crossed_below: int = field(default=0, init=False, repr=False)
    _last_content_idx: int = field(default=-1, init=False, repr=False)

    def push(self, literal: str, idx: int) -> None:
        """Record a tentative opener.

        Args:
            literal: Marker literal.
            idx: Segment index within the line.
        """
        self._depths.setdefault(literal, []).append(len(self.entries))
        self.entries.append(PendingOpen(literal, idx))

    @property
    def top_depth(self) -> int:
        """Stack position of the top entry (-1 when empty)."""
        return len(self.entries) - 1

    def find(self, literal: str) -> int | None:
        """Stack position of the topmost entry with this literal.

        Args:
            literal: Marker literal to look for.

        Returns:
            Position (0 = bottom), or None if no entry has this literal.
        """
        depths = self._depths.get(literal)
        return depths[-1] if depths else None

    def can_close(self, depth: int) -> bool:
        """Whether the entry at depth is still allowed to close."""
        return depth >= self._crossed_below

    def pop_match(self, closer_idx: int) -> DelimiterMatch:
        """Pop the top entry and record it as matched with closer_idx.

        Args:
            closer_idx: Segment index of the closing delimiter.

        Returns:
            The recorded DelimiterMatch.
        """
        opener = self.entries.pop()
        self._depths[opener.literal].pop()
        match = DelimiterMatch(opener.idx, closer_idx)
        self.matches.append(match)
        return match

    def mark_crossed(self) -> None:
        """Freeze every entry currently on the stack.

        A crossing close runs into some entry below the top. That entry and
        everything above it are crossed; everything beneath it can never
        reach the top again. Nothing is popped: frozen entries stay pending
        until end of line. Entries pushed later are unaffected.
        """
        self._crossed_below = len(self.entries)

    def note_content(self, idx: int) -> None:
        """Record that segment idx holds something other than whitespace."""
        self._last_content_idx = idx

    def has_content_since(self, opener_idx: int) -> bool:
        """Whether a non-blank segment was noted after opener_idx."""
        return self._last_content_idx > opener_idx

    def __len__(self) -> int:
        return len(self.entries)
