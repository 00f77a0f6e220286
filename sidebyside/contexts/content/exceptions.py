"""Custom exceptions for content context with entry references."""

from pathlib import Path
from typing import Optional


class InvalidContentEntry(ValueError):
    """
    Exception raised when a comparison entry fails load-time validation.

    Attributes:
        message: Error description
        title: Title of the offending entry (if it has one)
        index: Position of the entry in the content file (0-based)
        field: Name of the field that failed validation (e.g., 'variants.vue.code')
    """

    def __init__(
        self,
        message: str,
        title: Optional[str] = None,
        index: Optional[int] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.title = title
        self.index = index
        self.field = field

        # Build enhanced error message
        location = []
        if index is not None:
            location.append(f"entry #{index}")
        if title:
            location.append(f"'{title}'")

        parts = [f"{' '.join(location)}: {message}" if location else message]
        if field:
            parts.append(f"Field: {field}")

        super().__init__("\n".join(parts))


class InvalidContentFile(ValueError):
    """
    Exception raised when a content file is unreadable or malformed at the top level.

    Entry-level problems raise InvalidContentEntry instead.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        parts = [message]
        if path is not None:
            parts.append(f"Content file: {path}")

        super().__init__("\n".join(parts))
