"""Integration tests combining the algorithm families."""

import random

import pytest

from algokit.dynamic_programming import fibonacci
from algokit.graph import bfs, bfs_complete, dfs, dfs_complete, dfs_recursive, from_edges
from algokit.searching import binary_search, equal_range, linear_search
from algokit.sorting import bubble_sort, merge_sort


@pytest.fixture
def shuffled() -> list[int]:
    """A shuffled list of small integers with repeats."""
    rng = random.Random(7)
    data = [rng.randint(0, 20) for _ in range(60)]
    rng.shuffle(data)
    return data


class TestSortThenSearch:
    """Sorted output feeds the binary searches."""

    def test_merge_sort_then_binary_search(self, shuffled: list[int]) -> None:
        merge_sort(shuffled)
        for value in set(shuffled):
            pos = binary_search(shuffled, value)
            assert shuffled[pos] == value
        assert binary_search(shuffled, 99) == len(shuffled)

    def test_bubble_sort_then_equal_range(self, shuffled: list[int]) -> None:
        counts = {value: shuffled.count(value) for value in range(22)}
        bubble_sort(shuffled)
        for value, count in counts.items():
            first, last = equal_range(shuffled, value)
            assert last - first == count

    def test_sorts_agree(self, shuffled: list[int]) -> None:
        a, b = list(shuffled), list(shuffled)
        bubble_sort(a)
        merge_sort(b)
        assert a == b == sorted(shuffled)

    def test_linear_and_binary_agree_on_unique_values(self) -> None:
        data = [fibonacci(n) for n in range(2, 30)]
        for value in data:
            assert linear_search(data, value) == binary_search(data, value)


class TestTraversals:
    """All traversals over one generated graph."""

    @pytest.fixture
    def layered_graph(self):
        """Binary-tree shaped graph on nodes 0..30 plus a detached chain 31 -> 32."""
        edges = [((child - 1) // 2, child) for child in range(1, 31)]
        edges.append((31, 32))
        return from_edges(edges, nodes=range(33))

    def test_bfs_is_level_order(self, layered_graph) -> None:
        assert bfs(layered_graph, 0) == list(range(31))

    def test_depth_first_variants_agree(self, layered_graph) -> None:
        assert dfs(layered_graph, 0) == dfs_recursive(layered_graph, 0)

    def test_dfs_goes_deep_first(self, layered_graph) -> None:
        assert dfs(layered_graph, 0)[:5] == [0, 1, 3, 7, 15]

    def test_complete_variants_cover_all_nodes(self, layered_graph) -> None:
        for traverse in (bfs_complete, dfs_complete):
            order = traverse(layered_graph)
            assert len(order) == 33
            assert set(order) == set(range(33))
            assert order[-2:] == [31, 32]
