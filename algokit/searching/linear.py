"""Linear search over any iterable."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from algokit.core.types import Predicate

T = TypeVar("T")


def linear_search(items: Iterable[T], value: object) -> int:
    """Index of the first element equal to value.

    Returns the number of elements scanned (len(items) for a sequence)
    when nothing matches. O(n).
    """
    return linear_search_if(items, lambda item: item == value)


def linear_search_if(items: Iterable[T], predicate: Predicate[T]) -> int:
    """Index of the first element satisfying predicate, or the end position. O(n)."""
    scanned = 0
    for item in items:
        if predicate(item):
            return scanned
        scanned += 1
    return scanned
