"""Exception classes for streammark.

The parsing functions themselves never raise: every string is valid input
and degrades to literal text. Exceptions exist only at the edges, for
example when deserializing a malformed token tree.
"""

from __future__ import annotations


class StreammarkError(Exception):
    """Base exception for all streammark errors.

    Subclass this for specific error categories.
    """

    pass


class SerializationError(StreammarkError, ValueError):
    """Serialized token data could not be reconstructed.

    Subclasses ValueError so callers that already guard JSON decoding with
    ``except ValueError`` keep working.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize serialization error with an optional location.

        Args:
            message: Error description
            path: Dotted path to the offending entry (e.g. "tokens.2.children.0")
        """
        self.message = message
        self.path = path
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")


__all__ = ["SerializationError", "StreammarkError"]
