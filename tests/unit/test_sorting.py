"""Unit tests for bubble sort and merge sort."""

import array
import random
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass

import pytest

from algokit.sorting import bubble_sort, merge_sort

Sorter = Callable[..., None]

SORTERS = [
    pytest.param(bubble_sort, id="bubble"),
    pytest.param(merge_sort, id="merge"),
]


@dataclass(frozen=True)
class Keyed:
    """Element compared by key only; tag records the original position."""

    key: int
    tag: int


def by_key(a: Keyed, b: Keyed) -> bool:
    return a.key < b.key


@pytest.mark.parametrize("sort", SORTERS)
class TestSorting:
    """Properties shared by both sorts."""

    def test_basic(self, sort: Sorter) -> None:
        data = [64, 34, 25, 12, 22, 11, 90]
        sort(data)
        assert data == [11, 12, 22, 25, 34, 64, 90]

    def test_returns_none(self, sort: Sorter) -> None:
        assert sort([3, 1, 2]) is None

    def test_empty_and_single(self, sort: Sorter) -> None:
        empty: list[int] = []
        sort(empty)
        assert empty == []
        single = [1]
        sort(single)
        assert single == [1]

    def test_reverse_ordered(self, sort: Sorter) -> None:
        data = list(range(10, 0, -1))
        sort(data)
        assert data == list(range(1, 11))

    def test_duplicates(self, sort: Sorter) -> None:
        data = [3, 1, 3, 2, 1, 3]
        sort(data)
        assert data == [1, 1, 2, 3, 3, 3]

    def test_random_is_sorted_permutation(self, sort: Sorter) -> None:
        rng = random.Random(1234)
        for size in (2, 3, 17, 64):
            data = [rng.randint(-50, 50) for _ in range(size)]
            expected = sorted(data)
            sort(data)
            assert data == expected

    def test_idempotent(self, sort: Sorter) -> None:
        data = [5, 2, 9, 2, 7]
        sort(data)
        once = list(data)
        sort(data)
        assert data == once

    def test_stable(self, sort: Sorter) -> None:
        keys = [3, 1, 2, 3, 1, 2, 3, 1]
        data = [Keyed(key, tag) for tag, key in enumerate(keys)]
        sort(data, less=by_key)
        assert [item.key for item in data] == sorted(keys)
        for a, b in zip(data, data[1:]):
            if a.key == b.key:
                assert a.tag < b.tag

    def test_custom_less_descending(self, sort: Sorter) -> None:
        data = [1, 4, 2, 3]
        sort(data, less=lambda a, b: a > b)
        assert data == [4, 3, 2, 1]

    def test_strings(self, sort: Sorter) -> None:
        data = ["pear", "apple", "fig"]
        sort(data)
        assert data == ["apple", "fig", "pear"]

    def test_generic_mutable_sequence(self, sort: Sorter) -> None:
        data: MutableSequence[int] = array.array("i", [4, 1, 3, 2])
        sort(data)
        assert list(data) == [1, 2, 3, 4]


class TestBubbleSort:
    """Behaviour specific to bubble sort."""

    def test_stops_after_clean_pass(self) -> None:
        calls = 0

        def counting_less(a: int, b: int) -> bool:
            nonlocal calls
            calls += 1
            return a < b

        data = list(range(10))
        bubble_sort(data, less=counting_less)
        # One pass over 9 adjacent pairs, no swaps, done.
        assert calls == 9


class TestMergeSort:
    """Behaviour specific to merge sort."""

    def test_large_input(self) -> None:
        rng = random.Random(42)
        data = [rng.random() for _ in range(5_000)]
        expected = sorted(data)
        merge_sort(data)
        assert data == expected

    def test_comparisons_bounded(self) -> None:
        calls = 0

        def counting_less(a: int, b: int) -> bool:
            nonlocal calls
            calls += 1
            return a < b

        data = list(range(1024, 0, -1))
        merge_sort(data, less=counting_less)
        assert data == list(range(1, 1025))
        # n log2 n
        assert calls <= 1024 * 10
