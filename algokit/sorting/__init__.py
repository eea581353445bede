"""
Sorting algorithms. Both sort a mutable sequence in place and are stable.

    - bubble: bubble_sort (O(n^2), adaptive)
    - merge: merge_sort (O(n log n))
"""

from algokit.sorting.bubble import bubble_sort
from algokit.sorting.merge import merge_sort

__all__ = ["bubble_sort", "merge_sort"]
