"""Build adjacency list graphs from plain Python data."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

from algokit.graph.base import AdjacencyListGraph

N = TypeVar("N", bound=Hashable)


def from_edges(
    edges: Iterable[tuple[N, N]],
    nodes: Iterable[N] | None = None,
) -> AdjacencyListGraph[N]:
    """Build a graph from ``(source, target)`` pairs.

    Explicit ``nodes`` are registered first, so they fix node order and
    can include isolated nodes. Edge endpoints not listed are appended.
    """
    graph: AdjacencyListGraph[N] = AdjacencyListGraph()

    for node in nodes or ():
        graph.add_node(node)

    for source, target in edges:
        graph.add_edge(source, target)

    return graph


def from_adjacency(adjacency: Mapping[N, Iterable[N]]) -> AdjacencyListGraph[N]:
    """Build a graph from a ``{node: neighbors}`` mapping.

    Node order follows the mapping, then first appearance as a neighbor.
    """
    graph: AdjacencyListGraph[N] = AdjacencyListGraph()

    for node in adjacency:
        graph.add_node(node)

    for node, neighbors in adjacency.items():
        for neighbor in neighbors:
            graph.add_edge(node, neighbor)

    return graph
