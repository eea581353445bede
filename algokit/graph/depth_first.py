"""Depth-first traversal: iterative (explicit stack) and recursive."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, TypeVar

from algokit.core.logger import get_logger

if TYPE_CHECKING:
    from algokit.core.types import Visitor
    from algokit.graph.base import Graph

N = TypeVar("N", bound=Hashable)

logger = get_logger(__name__)


def dfs(graph: Graph[N], start: N, visit: Visitor[N] | None = None) -> list[N]:
    """Visit every node reachable from start in depth-first pre-order.

    Iterative, so deep graphs don't hit the recursion limit.
    Neighbors are visited left to right. O(V + E).
    """
    order: list[N] = []
    _dfs_from(graph, start, set(), order, visit)
    logger.debug("dfs from %r visited %d nodes", start, len(order))
    return order


def dfs_complete(graph: Graph[N], visit: Visitor[N] | None = None) -> list[N]:
    """Depth-first over every component, in the graph's node order. O(V + E)."""
    visited: set[N] = set()
    order: list[N] = []
    components = 0

    for node in graph.get_all_nodes():
        if node not in visited:
            _dfs_from(graph, node, visited, order, visit)
            components += 1

    logger.debug("dfs_complete visited %d nodes in %d components", len(order), components)
    return order


def dfs_recursive(graph: Graph[N], start: N, visit: Visitor[N] | None = None) -> list[N]:
    """Recursive depth-first traversal, same order as dfs().

    Recursion depth grows with the longest path from start; a RecursionError
    propagates to the caller.
    """
    visited: set[N] = set()
    order: list[N] = []

    def walk(node: N) -> None:
        if node in visited:
            return

        visited.add(node)
        order.append(node)
        if visit is not None:
            visit(node)

        for neighbor in graph.get_neighbors(node):
            walk(neighbor)

    walk(start)
    logger.debug("dfs_recursive from %r visited %d nodes", start, len(order))
    return order


def _dfs_from(
    graph: Graph[N],
    start: N,
    visited: set[N],
    order: list[N],
    visit: Visitor[N] | None,
) -> None:
    stack: list[N] = [start]

    while stack:
        current = stack.pop()
        if current in visited:
            continue

        visited.add(current)
        order.append(current)
        if visit is not None:
            visit(current)

        # Reversed so the first neighbor ends on top of the stack.
        neighbors = list(graph.get_neighbors(current))
        for neighbor in reversed(neighbors):
            if neighbor not in visited:
                stack.append(neighbor)
