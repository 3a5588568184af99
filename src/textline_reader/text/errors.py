"""Contract errors raised by the text services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .selection import SelectionInfo


class TextLineReaderError(Exception):
    """Base class for caller-misuse errors."""


class InvalidArgumentError(TextLineReaderError, ValueError):
    """Raised when a required argument is missing or malformed."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class UnsupportedOperationError(TextLineReaderError, RuntimeError):
    """Raised when a single-line operation meets a multi-line selection."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        selection_info: Optional["SelectionInfo"] = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.selection_info = selection_info


__all__ = [
    "TextLineReaderError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
]
