"""
Searching algorithms.

Not-found is a position, not an exception: the end of the searched range.

    - linear: linear_search, linear_search_if (any iterable, O(n))
    - binary: binary_search, lower_bound, upper_bound, equal_range
      (ordered sequences, O(log n))
"""

from algokit.searching.binary import binary_search, equal_range, lower_bound, upper_bound
from algokit.searching.linear import linear_search, linear_search_if

__all__ = [
    "binary_search",
    "equal_range",
    "linear_search",
    "linear_search_if",
    "lower_bound",
    "upper_bound",
]
