"""Top-down merge sort."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from typing import TYPE_CHECKING, TypeVar

from algokit.core.logger import get_logger

if TYPE_CHECKING:
    from algokit.core.types import Less

T = TypeVar("T")

logger = get_logger(__name__)


def merge_sort(items: MutableSequence[T], *, less: Less[T] = operator.lt) -> None:
    """Sort items in place by recursive halving and merging.

    Stable. O(n log n) time in every case, O(n) temporary storage per
    merge, O(log n) recursion depth.
    """
    _merge_sort(items, 0, len(items), less)
    logger.debug("merge_sort ordered %d items", len(items))


def _merge_sort(items: MutableSequence[T], lo: int, hi: int, less: Less[T]) -> None:
    if hi - lo <= 1:
        return

    mid = lo + (hi - lo) // 2
    _merge_sort(items, lo, mid, less)
    _merge_sort(items, mid, hi, less)
    _merge(items, lo, mid, hi, less)


def _merge(items: MutableSequence[T], lo: int, mid: int, hi: int, less: Less[T]) -> None:
    """Merge ordered runs items[lo:mid] and items[mid:hi] back into items[lo:hi]."""
    merged: list[T] = []
    left, right = lo, mid

    while left < mid and right < hi:
        # Right wins only when strictly smaller, so ties keep left-first order.
        if less(items[right], items[left]):
            merged.append(items[right])
            right += 1
        else:
            merged.append(items[left])
            left += 1

    merged.extend(items[left:mid])
    merged.extend(items[right:hi])

    for offset, item in enumerate(merged):
        items[lo + offset] = item
