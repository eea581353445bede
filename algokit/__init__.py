"""
Algokit: classic algorithms as small, generic Python functions.

Algokit collects the textbook routines every course starts with:
- Fibonacci-style linear recurrences
- Breadth-first and depth-first graph traversal
- Linear search, binary search and equal-range
- Bubble sort and merge sort

Usage:
    from algokit.graph import AdjacencyListGraph, bfs
    from algokit.sorting import merge_sort

    graph = AdjacencyListGraph()
    graph.add_edge(0, 1)
    order = bfs(graph, 0)

    data = [5, 3, 1]
    merge_sort(data)
"""

__version__ = "0.1.0"
