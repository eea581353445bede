"""Binary search, lower/upper bound and equal-range over ordered sequences.

All functions assume ``items[lo:hi]`` is ordered by ``less``. That is not
checked: unordered input gives wrong answers, never an exception. A missing
value is reported as ``hi``, the end of the searched range. Bounds must
satisfy ``0 <= lo <= hi <= len(items)``, otherwise InvalidArgumentError.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

from algokit.core.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from algokit.core.types import Less

T = TypeVar("T")


def binary_search(
    items: Sequence[T],
    value: T,
    lo: int = 0,
    hi: int | None = None,
    *,
    less: Less[T] = operator.lt,
) -> int:
    """Position of an element equivalent to value, or hi if absent. O(log n).

    With duplicates, any one of the equal positions may be returned.
    """
    lo, hi = _check_bounds(items, lo, hi)
    end = hi

    while lo < hi:
        mid = lo + (hi - lo) // 2
        if less(items[mid], value):
            lo = mid + 1
        elif less(value, items[mid]):
            hi = mid
        else:
            return mid

    return end


def lower_bound(
    items: Sequence[T],
    value: T,
    lo: int = 0,
    hi: int | None = None,
    *,
    less: Less[T] = operator.lt,
) -> int:
    """First position where value could be inserted keeping order. O(log n)."""
    lo, hi = _check_bounds(items, lo, hi)

    while lo < hi:
        mid = lo + (hi - lo) // 2
        if less(items[mid], value):
            lo = mid + 1
        else:
            hi = mid

    return lo


def upper_bound(
    items: Sequence[T],
    value: T,
    lo: int = 0,
    hi: int | None = None,
    *,
    less: Less[T] = operator.lt,
) -> int:
    """Last position where value could be inserted keeping order. O(log n)."""
    lo, hi = _check_bounds(items, lo, hi)

    while lo < hi:
        mid = lo + (hi - lo) // 2
        if less(value, items[mid]):
            hi = mid
        else:
            lo = mid + 1

    return lo


def equal_range(
    items: Sequence[T],
    value: T,
    lo: int = 0,
    hi: int | None = None,
    *,
    less: Less[T] = operator.lt,
) -> tuple[int, int]:
    """Half-open ``(first, last)`` span of elements equivalent to value.

    The width equals the number of matches. When value is absent both
    bounds are the insertion point. Two independent O(log n) searches.
    """
    return (
        lower_bound(items, value, lo, hi, less=less),
        upper_bound(items, value, lo, hi, less=less),
    )


def _check_bounds(items: Sequence[T], lo: int, hi: int | None) -> tuple[int, int]:
    if lo < 0:
        raise InvalidArgumentError(f"lo must be non-negative, got {lo}")
    if hi is None:
        hi = len(items)
    elif hi > len(items):
        raise InvalidArgumentError(f"hi must not exceed len(items)={len(items)}, got {hi}")
    if lo > hi:
        raise InvalidArgumentError(f"lo must not exceed hi, got lo={lo}, hi={hi}")
    return lo, hi
