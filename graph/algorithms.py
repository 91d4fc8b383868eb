"""
Traversal, shortest-path and spanning-tree algorithms.

Each function reads a `Graph` and returns a new `Graph` with the same vertex
count holding only the edges the algorithm selected:

    bfs(graph, source)       - Breadth-first tree of source's component
    dfs(graph, source)       - Depth-first tree of source's component
    dijkstra(graph, source)  - Shortest-path tree rooted at source
    prim(graph)              - Minimum spanning tree of vertex 0's component
    kruskal(graph)           - Minimum spanning forest of the whole graph

Vertices the algorithm never reaches are left isolated in the result.
"""

import logging
import math

from errors import VertexOutOfRangeError
from localtypes import Priority, Vertex
from utils.fifo import Queue
from utils.priority_queue import PriorityQueue
from utils.union_find import UnionFind

from .graph import Graph

logger = logging.getLogger(__name__)

NO_PARENT = -1


def _check_source(graph: Graph, source: Vertex) -> None:
    if not isinstance(source, int) or not 0 <= source < graph.num_vertices:
        raise VertexOutOfRangeError(source, graph.num_vertices)


# =============================================================================
# Traversals
# =============================================================================


def bfs(graph: Graph, source: Vertex) -> Graph:
    """
    Breadth-first search tree rooted at source.

    The tree gains the edge (current, adjacent) the first time adjacent is
    discovered, with the weight of the record that discovered it.
    """
    _check_source(graph, source)

    tree = Graph(graph.num_vertices)
    visited = [False] * graph.num_vertices

    visited[source] = True
    queue = Queue()
    queue.enqueue(source)

    while not queue.is_empty():
        current = queue.dequeue()
        for adjacent, weight in graph.neighbors(current):
            if not visited[adjacent]:
                visited[adjacent] = True
                queue.enqueue(adjacent)
                tree.add_edge(current, adjacent, weight)

    logger.debug(f"BFS from {source}: {sum(visited)} vertices reached")
    return tree


def dfs(graph: Graph, source: Vertex) -> Graph:
    """
    Depth-first search tree rooted at source.

    Uses an explicit stack of neighbour iterators, which visits vertices in
    the same order as the recursive formulation without its depth limit.
    """
    _check_source(graph, source)

    tree = Graph(graph.num_vertices)
    visited = [False] * graph.num_vertices

    visited[source] = True
    stack = [(source, iter(graph.neighbors(source)))]

    while stack:
        vertex, pending = stack[-1]
        for adjacent, weight in pending:
            if not visited[adjacent]:
                visited[adjacent] = True
                tree.add_edge(vertex, adjacent, weight)
                stack.append((adjacent, iter(graph.neighbors(adjacent))))
                break
        else:
            stack.pop()

    logger.debug(f"DFS from {source}: {sum(visited)} vertices reached")
    return tree


# =============================================================================
# Shortest paths
# =============================================================================


def _shortest_paths(
    graph: Graph, source: Vertex
) -> tuple[list[Priority], list[Vertex]]:
    """Run Dijkstra's relaxation and return (distance, parent) per vertex."""
    _check_source(graph, source)

    n = graph.num_vertices
    distance: list[Priority] = [math.inf] * n
    parent: list[Vertex] = [NO_PARENT] * n
    distance[source] = 0

    queue = PriorityQueue(n)
    for vertex in range(n):
        queue.insert(vertex, distance[vertex])

    while not queue.is_empty():
        u = queue.extract_min()
        # Everything left in the queue is unreachable
        if math.isinf(distance[u]):
            break

        for v, weight in graph.neighbors(u):
            candidate = distance[u] + weight
            if v in queue and candidate < distance[v]:
                distance[v] = candidate
                parent[v] = u
                queue.decrease_key(v, candidate)
                logger.debug(f"Relaxed {u} -> {v}: distance {candidate}")

    return distance, parent


def dijkstra(graph: Graph, source: Vertex) -> Graph:
    """
    Shortest-path tree rooted at source.

    Each reached vertex i is joined to its predecessor parent[i]. The edge
    weight is looked up again in the input graph and is the first record
    between the two, which need not be the parallel edge that produced the
    shortest distance.
    """
    _, parent = _shortest_paths(graph, source)

    tree = Graph(graph.num_vertices)
    for vertex, predecessor in enumerate(parent):
        if vertex != source and predecessor != NO_PARENT:
            tree.add_edge(predecessor, vertex, graph.edge_weight(predecessor, vertex))

    logger.debug(f"Dijkstra from {source}: {tree.edge_count()} tree edges")
    return tree


def dijkstra_distances(graph: Graph, source: Vertex) -> list[Priority]:
    """Shortest distance from source to every vertex, `math.inf` if unreachable."""
    distance, _ = _shortest_paths(graph, source)
    return distance


# =============================================================================
# Minimum spanning trees
# =============================================================================


def prim(graph: Graph) -> Graph:
    """
    Minimum spanning tree grown from vertex 0.

    Keys are the weight of the lightest edge joining a vertex to the tree.
    Vertices outside vertex 0's component are not spanned.
    """
    n = graph.num_vertices
    key: list[Priority] = [math.inf] * n
    parent: list[Vertex] = [NO_PARENT] * n
    key[0] = 0

    queue = PriorityQueue(n)
    for vertex in range(n):
        queue.insert(vertex, key[vertex])

    while not queue.is_empty():
        u = queue.extract_min()
        if math.isinf(key[u]):
            break

        for v, weight in graph.neighbors(u):
            if v in queue and weight < key[v]:
                key[v] = weight
                parent[v] = u
                queue.decrease_key(v, weight)

    tree = Graph(n)
    for vertex in range(1, n):
        if parent[vertex] != NO_PARENT:
            tree.add_edge(parent[vertex], vertex, key[vertex])

    logger.debug(f"Prim: {tree.edge_count()} edges, total weight {tree.total_weight()}")
    return tree


def kruskal(graph: Graph) -> Graph:
    """
    Minimum spanning forest covering every component.

    Edges are taken in ascending weight order (stable among equal weights)
    and kept unless they would close a cycle.
    """
    n = graph.num_vertices
    candidates = sorted(graph.edges(), key=lambda edge: edge.weight)

    tree = Graph(n)
    components = UnionFind(n)
    for source, destination, weight in candidates:
        if not components.connected(source, destination):
            tree.add_edge(source, destination, weight)
            components.union(source, destination)

    logger.debug(
        f"Kruskal: {tree.edge_count()} of {len(candidates)} edges kept, "
        f"total weight {tree.total_weight()}"
    )
    return tree


__all__ = ["bfs", "dfs", "dijkstra", "dijkstra_distances", "prim", "kruskal"]
