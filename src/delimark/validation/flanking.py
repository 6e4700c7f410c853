"""Flanking rules for paired delimiter candidates.

A candidate's context is the characters touching it:
- left context: last character of the preceding segment ("" if none)
- right context: first character of the following segment ("" if none)

Thread Safety:
All methods are stateless. Safe for concurrent use.

"""

from collections.abc import Sequence

from delimark.charsets import is_whitespace, is_word_char
from delimark.segments import Segment


class FlankingMixin:
    """Mixin for delimiter context and open/close eligibility.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _left_context(self, segments: Sequence[Segment], idx: int) -> str:
        """Last character of the segment before idx, or "" at line start."""
        if idx == 0:
            return ""
        return segments[idx - 1].value[-1:]

    def _right_context(self, segments: Sequence[Segment], idx: int) -> str:
        """First character of the segment after idx, or "" at line end."""
        if idx + 1 >= len(segments):
            return ""
        return segments[idx + 1].value[:1]

    def _is_intraword(self, before: str, after: str) -> bool:
        """Check if the delimiter splits a word.

        Intraword: word characters (letters or digits) on both sides. Such a
        delimiter can neither open nor close.
        """
        return is_word_char(before) and is_word_char(after)

    def _can_open(self, after: str) -> bool:
        """Right context present and not whitespace."""
        return bool(after) and not is_whitespace(after)

    def _can_close(self, before: str) -> bool:
        """Left context present and not whitespace."""
        return bool(before) and not is_whitespace(before)

