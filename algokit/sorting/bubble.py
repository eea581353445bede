"""In-place bubble sort."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from typing import TYPE_CHECKING, TypeVar

from algokit.core.logger import get_logger

if TYPE_CHECKING:
    from algokit.core.types import Less

T = TypeVar("T")

logger = get_logger(__name__)


def bubble_sort(items: MutableSequence[T], *, less: Less[T] = operator.lt) -> None:
    """Sort items in place by repeatedly swapping adjacent out-of-order pairs.

    Stable and adaptive: stops after the first pass without a swap.
    O(n^2) worst case, O(n) on ordered input, O(1) extra space.
    """
    end = len(items)
    passes = 0
    swapped = True

    while swapped and end > 1:
        swapped = False
        for i in range(end - 1):
            if less(items[i + 1], items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        # The largest remaining element is now at end - 1.
        end -= 1
        passes += 1

    logger.debug("bubble_sort ordered %d items in %d passes", len(items), passes)
