"""Logger naming for delimark.

delimark never raises on malformed markup; it degrades to text. Those
degradations (crossing delimiters, openers left unclosed at end of line,
thread-pool fan-out) are reported on loggers under the ``delimark``
namespace, at DEBUG level only.

The library configures no handlers and sets no levels. Enable the output
from the application side:

    import logging
    logging.getLogger("delimark").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for a delimark module.

    Names outside the package namespace get the "delimark." prefix, so
    every record can be filtered from the single "delimark" parent.

    Args:
        name: Module name (typically __name__)

    Example:
        >>> get_logger("delimark.validation.core").name
        'delimark.validation.core'
        >>> get_logger("scratch").name
        'delimark.scratch'
    """
    if not (name == "delimark" or name.startswith("delimark.")):
        name = f"delimark.{name}"
    return logging.getLogger(name)
