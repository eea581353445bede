"""Graph protocol and an adjacency list implementation."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic, Protocol, TypeVar

from algokit.core.exceptions import NodeNotFoundError

N = TypeVar("N", bound=Hashable)


class Graph(Protocol[N]):
    """Protocol for graphs the traversals can walk.

    Nodes must be hashable. Both iterables must be finite.
    """

    def get_all_nodes(self) -> Iterable[N]:
        """Return every node in the graph."""
        ...

    def get_neighbors(self, node: N) -> Iterable[N]:
        """Return the outbound neighbors of a node."""
        ...


class AdjacencyListGraph(Generic[N]):
    """Directed graph backed by insertion-ordered adjacency lists.

    Uses dicts for O(1) node lookup. Parallel edges are kept.
    """

    __slots__ = ("_out", "_in", "_num_edges")

    def __init__(self) -> None:
        self._out: dict[N, list[N]] = {}
        self._in: dict[N, list[N]] = {}
        self._num_edges = 0

    def add_node(self, node: N) -> None:
        """Add a node. No-op if present. O(1)."""
        if node not in self._out:
            self._out[node] = []
            self._in[node] = []

    def add_edge(self, source: N, target: N) -> None:
        """Add a directed edge, adding missing endpoints. O(1)."""
        self.add_node(source)
        self.add_node(target)
        self._out[source].append(target)
        self._in[target].append(source)
        self._num_edges += 1

    def get_all_nodes(self) -> list[N]:
        """All nodes in insertion order. O(V)."""
        return list(self._out)

    def get_neighbors(self, node: N) -> list[N]:
        """Direct successors in edge insertion order. O(out-degree)."""
        try:
            return list(self._out[node])
        except KeyError:
            raise NodeNotFoundError(f"Node not found: {node!r}") from None

    def get_predecessors(self, node: N) -> list[N]:
        """Direct predecessors. O(in-degree)."""
        try:
            return list(self._in[node])
        except KeyError:
            raise NodeNotFoundError(f"Node not found: {node!r}") from None

    def out_degree(self, node: N) -> int:
        """Number of outbound edges. O(1)."""
        return len(self.get_neighbors(node))

    def in_degree(self, node: N) -> int:
        """Number of inbound edges. O(1)."""
        return len(self.get_predecessors(node))

    @property
    def num_nodes(self) -> int:
        return len(self._out)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def __contains__(self, node: object) -> bool:
        return node in self._out

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(nodes={self.num_nodes}, edges={self.num_edges})"
