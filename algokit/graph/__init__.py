"""
Graph structures and traversal algorithms.

Data Structures:
    - Graph: Protocol any caller graph can satisfy (get_all_nodes, get_neighbors)
    - AdjacencyListGraph: Directed graph with O(1) node lookup

Algorithms:
    - breadth_first: bfs, bfs_complete (FIFO frontier)
    - depth_first: dfs, dfs_complete (explicit stack), dfs_recursive

Loading:
    - from_edges(): Build a graph from (source, target) pairs
    - from_adjacency(): Build a graph from a {node: neighbors} mapping
"""

from algokit.graph.base import AdjacencyListGraph, Graph
from algokit.graph.breadth_first import bfs, bfs_complete
from algokit.graph.depth_first import dfs, dfs_complete, dfs_recursive
from algokit.graph.loader import from_adjacency, from_edges

__all__ = [
    "AdjacencyListGraph",
    "Graph",
    "bfs",
    "bfs_complete",
    "dfs",
    "dfs_complete",
    "dfs_recursive",
    "from_adjacency",
    "from_edges",
]
