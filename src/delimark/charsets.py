"""Character classification for delimiter flanking.

All sets are frozensets for O(1) membership and module-level caching.

Usage:
    from delimark.charsets import is_whitespace, is_word_char

    if is_word_char(before) and is_word_char(after):  # intraword
        ...
"""

import unicodedata

# ASCII whitespace for the fast path
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace.

    Includes ASCII whitespace and Unicode category Zs (space separator).
    Empty string is not whitespace; callers treat it as an absent context.

    """
    if not char:
        return False
    if char in WHITESPACE:
        return True
    return unicodedata.category(char) == "Zs" or char.isspace()


def is_word_char(char: str) -> bool:
    """Check if character is word-constituent (a Unicode letter or digit).

    Underscore is not a word character here: it is a delimiter in the
    default catalog.

    """
    return bool(char) and char.isalnum()
