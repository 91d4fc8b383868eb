"""
Undirected weighted graphs and classic algorithms over them.

The graph stores one sequence of edge records per vertex; the algorithms
return fresh graphs holding the tree or forest they select:
1. bfs / dfs: traversal trees from a source vertex
2. dijkstra: shortest-path tree from a source vertex
3. prim / kruskal: minimum spanning tree / forest

Main entry point: Graph
"""

from errors import (
    EdgeNotFoundError,
    EmptyPriorityQueueError,
    EmptyQueueError,
    ErrorKind,
    GraphError,
    InvalidArgumentError,
    PriorityIncreaseError,
    PriorityQueueFullError,
    VertexNotInPriorityQueueError,
    VertexOutOfRangeError,
)
from .graph import Graph
from .algorithms import (
    bfs,
    dfs,
    dijkstra,
    dijkstra_distances,
    kruskal,
    prim,
)

__all__ = [
    # Main entry point
    "Graph",
    # Algorithms
    "bfs",
    "dfs",
    "dijkstra",
    "dijkstra_distances",
    "prim",
    "kruskal",
    # Errors
    "ErrorKind",
    "GraphError",
    "InvalidArgumentError",
    "VertexOutOfRangeError",
    "EdgeNotFoundError",
    "EmptyQueueError",
    "EmptyPriorityQueueError",
    "PriorityQueueFullError",
    "VertexNotInPriorityQueueError",
    "PriorityIncreaseError",
]
