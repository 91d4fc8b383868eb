"""
Undirected weighted graph over dense integer vertices.

Each vertex owns one ordered sequence of `Edge` records. Adding an edge
prepends a record to both endpoints, so `neighbors(v)` lists the most recently
added edges first. Parallel edges and self-loops are kept as given.
"""

import logging
from collections import deque
from collections.abc import Iterator

import numpy as np

from errors import EdgeNotFoundError, InvalidArgumentError, VertexOutOfRangeError
from localtypes import Edge, Vertex, Weight, WeightedEdge
from utils.fifo import Queue

logger = logging.getLogger(__name__)


class Graph:
    """
    Adjacency-list graph with a fixed vertex count.

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1, 4)
        >>> g.neighbors(1)
        (Edge(destination=0, weight=4),)
    """

    def __init__(self, num_vertices: int) -> None:
        if not isinstance(num_vertices, int) or num_vertices <= 0:
            raise InvalidArgumentError(
                "num_vertices", num_vertices, "must be a positive integer"
            )
        self._adjacency: list[deque[Edge]] = [
            deque() for _ in range(num_vertices)
        ]

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    def _check_vertex(self, vertex: Vertex) -> None:
        if not isinstance(vertex, int) or not 0 <= vertex < len(self._adjacency):
            raise VertexOutOfRangeError(vertex, len(self._adjacency))

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_edge(self, source: Vertex, destination: Vertex, weight: Weight = 1) -> None:
        """Add an undirected edge. An existing edge between the pair is kept."""
        self._check_vertex(source)
        self._check_vertex(destination)

        self._adjacency[source].appendleft(Edge(destination, weight))
        self._adjacency[destination].appendleft(Edge(source, weight))

    def remove_edge(self, source: Vertex, destination: Vertex) -> None:
        """
        Remove one edge between source and destination.

        The first matching record is dropped from each endpoint; any parallel
        edges stay in place.

        Raises:
            EdgeNotFoundError: Neither endpoint holds a matching record.
        """
        self._check_vertex(source)
        self._check_vertex(destination)

        forward = _index_of(self._adjacency[source], destination)
        if forward is None:
            backward = _index_of(self._adjacency[destination], source)
            if backward is None:
                raise EdgeNotFoundError(source, destination)
            del self._adjacency[destination][backward]
            return

        del self._adjacency[source][forward]
        # A self-loop holds both records in the same sequence
        backward = _index_of(self._adjacency[destination], source)
        if backward is not None:
            del self._adjacency[destination][backward]

    # =========================================================================
    # Queries
    # =========================================================================

    def neighbors(self, vertex: Vertex) -> tuple[Edge, ...]:
        """Edges leaving vertex, most recently added first."""
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def has_edge(self, source: Vertex, destination: Vertex) -> bool:
        self._check_vertex(source)
        self._check_vertex(destination)
        return _index_of(self._adjacency[source], destination) is not None

    def edge_weight(self, source: Vertex, destination: Vertex) -> Weight:
        """Weight of the first record for destination in source's sequence."""
        self._check_vertex(source)
        self._check_vertex(destination)
        for edge in self._adjacency[source]:
            if edge.destination == destination:
                return edge.weight
        raise EdgeNotFoundError(source, destination)

    def edges(self) -> Iterator[WeightedEdge]:
        """
        Yield every edge once, with source < destination.

        Vertices are scanned in ascending order and each sequence in stored
        order. Self-loops are skipped, which keeps them out of `kruskal`.
        """
        for source, sequence in enumerate(self._adjacency):
            for edge in sequence:
                if source < edge.destination:
                    yield WeightedEdge(source, edge.destination, edge.weight)

    def edge_count(self) -> int:
        """Number of edges, self-loops included."""
        # Every edge, self-loops too, holds exactly two records
        return sum(len(sequence) for sequence in self._adjacency) // 2

    def total_weight(self) -> Weight:
        """Sum of edge weights, self-loops included."""
        return sum(
            edge.weight for sequence in self._adjacency for edge in sequence
        ) // 2

    def connected_components(self) -> frozenset[frozenset[Vertex]]:
        """
        Partition the vertices into connected components.

        Isolated vertices form singleton components.
        """
        seen = [False] * self.num_vertices
        components = set()

        for start in range(self.num_vertices):
            # Avoid visiting an already seen component
            if seen[start]:
                continue

            component = {start}
            seen[start] = True
            queue = Queue()
            queue.enqueue(start)
            while not queue.is_empty():
                current = queue.dequeue()
                for edge in self._adjacency[current]:
                    if not seen[edge.destination]:
                        seen[edge.destination] = True
                        component.add(edge.destination)
                        queue.enqueue(edge.destination)

            components.add(frozenset(component))

        logger.debug(f"{len(components)} component(s) over {self.num_vertices} vertices")
        return frozenset(components)

    def is_connected(self) -> bool:
        return len(self.connected_components()) == 1

    def to_adjacency_matrix(self, missing: float = 0.0) -> np.ndarray:
        """
        Dense symmetric matrix of edge weights.

        Parallel edges collapse to the lightest one; pairs without an edge
        hold `missing`. With the default of 0.0 a zero-weight edge looks
        like no edge, so pass `missing=np.inf` when weights can be zero.
        """
        n = self.num_vertices
        matrix = np.full((n, n), np.inf)
        for source, sequence in enumerate(self._adjacency):
            for destination, weight in sequence:
                matrix[source, destination] = min(matrix[source, destination], weight)
        matrix[np.isinf(matrix)] = missing
        return matrix

    # =========================================================================
    # Copying, comparison and display
    # =========================================================================

    def copy(self) -> "Graph":
        """Independent copy sharing no storage with this graph."""
        clone = Graph.__new__(Graph)
        clone._adjacency = [deque(sequence) for sequence in self._adjacency]
        return clone

    def __copy__(self) -> "Graph":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Graph":
        clone = self.copy()
        memo[id(self)] = clone
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, edges={self.edge_count()})"

    def __str__(self) -> str:
        lines = []
        for vertex, sequence in enumerate(self._adjacency):
            records = "".join(
                f"({edge.destination}, weight: {edge.weight}) " for edge in sequence
            )
            lines.append(f"Vertex {vertex} -> {records}")
        return "\n".join(lines)


def _index_of(sequence: deque[Edge], destination: Vertex) -> int | None:
    for index, edge in enumerate(sequence):
        if edge.destination == destination:
            return index
    return None


__all__ = ["Graph"]
