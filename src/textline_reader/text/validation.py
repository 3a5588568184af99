"""Argument guards shared across text services."""

from __future__ import annotations

from .errors import InvalidArgumentError


def ensure_text(text: object, *, argument: str = "text") -> str:
    if text is None:
        raise InvalidArgumentError(
            "The text content can not be None.", argument=argument
        )
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"The text content must be a str, got {type(text).__name__}.",
            argument=argument,
        )
    return text


def ensure_offset(value: object, *, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} must be an int, got {type(value).__name__}.",
            argument=argument,
        )
    if value < 0:
        raise InvalidArgumentError(
            f"{argument} must be >= 0, got {value}.", argument=argument
        )
    return value
