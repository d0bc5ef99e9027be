"""
Custom exception classes for the docx_parastyle package.

These exceptions carry the offending key and value so callers building
styles from configuration can report exactly which entry was rejected.
"""

from typing import Any


class DocxStyleError(Exception):
    """Base exception for all docx_parastyle errors."""

    pass


class InvalidStyleError(DocxStyleError):
    """Raised when a style attribute receives a value it cannot hold.

    Only the line height is validated; every other attribute is stored
    verbatim or coerced to its default.

    Attributes:
        key: The style key being set (e.g., "line-height")
        value: The rejected value as supplied by the caller
    """

    def __init__(self, message: str, key: str | None = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        """Append the rejected value to the message."""
        if self.key is None:
            return message
        return f"{message} (got {self.value!r} for '{self.key}')"


class StyleMapError(DocxStyleError):
    """Raised when a style map file cannot be loaded.

    This can occur when:
    - The file is not valid YAML or JSON
    - The top-level document is not a mapping
    - The requested format is not supported

    Attributes:
        path: Path of the style map file (None when not file-based)
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)
