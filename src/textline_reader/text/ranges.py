"""Half-open character ranges over a single text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .errors import InvalidArgumentError
from .validation import ensure_offset


# Default for ``end``: a caret at ``start``.
_CARET: Any = object()


class RangeLike(Protocol):
    """Anything exposing integer ``start``/``end`` offsets."""

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...


@dataclass(frozen=True, slots=True)
class TextRange:
    """Immutable ``[start, end)`` interval; ``TextRange(n)`` is a caret at ``n``."""

    start: int
    end: int = _CARET

    def __post_init__(self) -> None:
        start = ensure_offset(self.start, argument="start")
        if self.end is _CARET or self.end is None:
            end = start
        else:
            end = ensure_offset(self.end, argument="end")
        if end < start:
            raise InvalidArgumentError(
                f"end ({end}) must not precede start ({start}).", argument="end"
            )
        object.__setattr__(self, "end", end)

    @property
    def collapsed(self) -> bool:
        return is_collapsed(self)

    def __len__(self) -> int:
        return self.end - self.start

    @classmethod
    def caret(cls, position: int) -> "TextRange":
        return cls(position, position)


def is_collapsed(selection: RangeLike) -> bool:
    """True when the range is a caret (``start == end``)."""

    return selection.start == selection.end


__all__ = ["RangeLike", "TextRange", "is_collapsed"]
