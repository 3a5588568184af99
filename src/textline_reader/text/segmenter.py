"""Split a text buffer into contiguous line ranges."""

from __future__ import annotations

from typing import Tuple

from .ranges import TextRange
from .validation import ensure_text

LineRanges = Tuple[TextRange, ...]


def segment_lines(text: str) -> LineRanges:
    """Return one ``TextRange`` per line of ``text``.

    A newline belongs to the line it terminates, so for ``"01\\n34"`` the
    result is ``[0, 3), [3, 5)``. A buffer that ends with ``\\n`` gets no
    trailing empty range; ``"01\\n"`` is a single line. Hosts that do not
    render a terminal newline append a second one (see
    ``pad_trailing_newline``), and ``"01\\n\\n"`` then segments into
    ``[0, 3), [3, 4)``.

    The empty buffer is one empty line, ``[0, 0)``.
    """

    text = ensure_text(text)
    if not text:
        return (TextRange(0, 0),)

    ranges: list[TextRange] = []
    start = 0
    newline = text.find("\n", start)
    while newline != -1:
        ranges.append(TextRange(start, newline + 1))
        start = newline + 1
        newline = text.find("\n", start)

    if start < len(text):
        ranges.append(TextRange(start, len(text)))

    return tuple(ranges)


def pad_trailing_newline(text: str) -> str:
    """Append a second ``\\n`` when ``text`` already ends with one.

    Some editor hosts swallow the final newline of a buffer when rendering,
    so ``"01\\n34\\n"`` looks like two lines. Padding it to
    ``"01\\n34\\n\\n"`` makes the empty third line visible and
    ``segment_lines`` reports it.
    """

    text = ensure_text(text)
    if text.endswith("\n"):
        return text + "\n"
    return text


__all__ = ["LineRanges", "segment_lines", "pad_trailing_newline"]
