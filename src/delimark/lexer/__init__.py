"""Lexer for delimark.

Splits markup text into lines of raw segments:

lexer/
├── __init__.py          # Re-exports Lexer
└── core.py              # Lexer class (line windows + greedy scan)

Usage:
    >>> from delimark.lexer import Lexer
    >>> [line.text for line in Lexer().tokenize("# Title\\nbody")]
    ['# Title\\n', 'body']

"""

from delimark.lexer.core import Lexer

__all__ = ["Lexer"]
