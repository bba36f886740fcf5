"""Windowing over an ordered sequence around a focused index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """A visible window of a longer sequence.

    ``cursor`` is the focused index relative to ``start``; ``first`` and
    ``last`` say whether the window touches either end of the sequence.
    """

    start: int
    end: int
    content: list[T]
    cursor: int | None
    first: bool
    last: bool
    total: int


def paginate(page_size: int, choices: Sequence[T], focus: int | None) -> Page[T]:
    total = len(choices)
    page_size = max(page_size, 1)

    if total <= page_size:
        start, end = 0, total
        cursor = focus
    elif focus is None:
        start, end = 0, page_size
        cursor = None
    elif focus < page_size // 2:
        start, end = 0, page_size
        cursor = focus
    elif total - focus - 1 < page_size // 2:
        start, end = total - page_size, total
        cursor = focus - start
    else:
        above = page_size // 2
        start, end = focus - above, focus + (page_size - above)
        cursor = above

    return Page(
        start=start,
        end=end,
        content=list(choices[start:end]),
        cursor=cursor,
        first=start == 0,
        last=end == total,
        total=total,
    )


def int_log10(n: int) -> int:
    """Number of decimal digits in *n* (``int_log10(0) == 1``)."""
    return len(str(abs(n)))
