"""
Type definitions shared by the graph and its supporting structures.

Vertices are dense integer indices, weights are integers, and priorities are
floats so that unreached vertices can sit in the heap at infinity.
"""

from typing import NamedTuple, TypeAlias

Vertex: TypeAlias = int
Weight: TypeAlias = int
Priority: TypeAlias = float


class Edge(NamedTuple):
    """One adjacency record: the neighbour reached and the edge weight."""

    destination: Vertex
    weight: Weight


class WeightedEdge(NamedTuple):
    """An undirected edge reported once, with both endpoints."""

    source: Vertex
    destination: Vertex
    weight: Weight


__all__ = ["Vertex", "Weight", "Priority", "Edge", "WeightedEdge"]
