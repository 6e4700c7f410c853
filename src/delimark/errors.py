"""Exception classes for delimark.

Processing text never raises: ambiguous or malformed markup degrades to
plain text. Errors only surface while building configuration (an invalid
marker catalog) or while decoding serialized token streams.
"""

from __future__ import annotations


class DelimarkError(Exception):
    """Base exception for all delimark errors.

    Subclass this for specific error categories.
    """

    pass


class CatalogError(DelimarkError):
    """Error when a marker catalog is malformed.

    Raised at catalog construction time, never during tokenization.
    """

    def __init__(self, message: str, literal: str | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Description of the problem
            literal: The offending marker literal (optional)
        """
        self.message = message
        self.literal = literal

        if literal is not None:
            super().__init__(f"Marker {literal!r}: {message}")
        else:
            super().__init__(message)


class SerializationError(DelimarkError):
    """Error while decoding a serialized token stream."""

    pass
