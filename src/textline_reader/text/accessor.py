"""Slice ``TextLine`` values out of a buffer."""

from __future__ import annotations

from typing import Sequence

from .line import TextLine
from .ranges import RangeLike


def line_from_range(text: str, line_range: RangeLike) -> TextLine:
    return TextLine(line_range.start, text[line_range.start : line_range.end])


def line_at(text: str, lines: Sequence[RangeLike], index: int) -> TextLine:
    # index is trusted; an invalid one surfaces as IndexError from ``lines``
    return line_from_range(text, lines[index])


__all__ = ["line_at", "line_from_range"]
