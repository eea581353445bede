"""Breadth-first traversal with a FIFO frontier."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import TYPE_CHECKING, TypeVar

from algokit.core.logger import get_logger

if TYPE_CHECKING:
    from algokit.core.types import Visitor
    from algokit.graph.base import Graph

N = TypeVar("N", bound=Hashable)

logger = get_logger(__name__)


def bfs(graph: Graph[N], start: N, visit: Visitor[N] | None = None) -> list[N]:
    """Visit every node reachable from start in breadth-first order.

    Returns the nodes in visitation order. O(V + E) in the reachable subgraph.
    """
    order: list[N] = []
    _bfs_from(graph, start, set(), order, visit)
    logger.debug("bfs from %r visited %d nodes", start, len(order))
    return order


def bfs_complete(graph: Graph[N], visit: Visitor[N] | None = None) -> list[N]:
    """Breadth-first over every component, in the graph's node order. O(V + E)."""
    visited: set[N] = set()
    order: list[N] = []
    components = 0

    for node in graph.get_all_nodes():
        if node not in visited:
            _bfs_from(graph, node, visited, order, visit)
            components += 1

    logger.debug("bfs_complete visited %d nodes in %d components", len(order), components)
    return order


def _bfs_from(
    graph: Graph[N],
    start: N,
    visited: set[N],
    order: list[N],
    visit: Visitor[N] | None,
) -> None:
    # Nodes are marked on enqueue so none is queued twice.
    queue: deque[N] = deque([start])
    visited.add(start)

    while queue:
        current = queue.popleft()
        order.append(current)
        if visit is not None:
            visit(current)

        for neighbor in graph.get_neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
