"""Tests for graph/algorithms.py"""

import math
import random

import numpy as np
import pytest
from scipy.sparse.csgraph import csgraph_from_dense
from scipy.sparse.csgraph import dijkstra as csgraph_dijkstra
from scipy.sparse.csgraph import minimum_spanning_tree

from constants import SAMPLE_EDGES, SAMPLE_NUM_VERTICES
from errors import VertexOutOfRangeError
from graph import Graph, bfs, dfs, dijkstra, dijkstra_distances, kruskal, prim

ALGORITHMS_WITH_SOURCE = [bfs, dfs, dijkstra, dijkstra_distances]


def edge_set(tree: Graph) -> set[tuple[int, int, int]]:
    return {(edge.source, edge.destination, edge.weight) for edge in tree.edges()}


def build(n: int, edges) -> Graph:
    g = Graph(n)
    for edge in edges:
        g.add_edge(*edge)
    return g


def random_graph(rng: random.Random, n: int, density: float) -> Graph:
    g = Graph(n)
    for u in range(n):
        for v in range(u + 1, n):
            if rng.random() < density:
                g.add_edge(u, v, rng.randint(1, 20))
    return g


def component_of(g: Graph, vertex: int) -> frozenset[int]:
    return next(c for c in g.connected_components() if vertex in c)


@pytest.fixture
def sample() -> Graph:
    return build(SAMPLE_NUM_VERTICES, SAMPLE_EDGES)


@pytest.fixture
def six() -> Graph:
    """Second fixture graph with a different insertion order."""
    return build(6, [
        (0, 1, 5),
        (0, 2, 3),
        (1, 3, 6),
        (1, 2, 2),
        (2, 4, 4),
        (2, 3, 7),
        (3, 5, 1),
        (4, 5, 8),
    ])


@pytest.fixture
def path_with_isolated() -> Graph:
    """6 vertices, edges (0,1) and (1,2) only."""
    return build(6, [(0, 1), (1, 2)])


class TestSourceValidation:
    @pytest.mark.parametrize("algorithm", ALGORITHMS_WITH_SOURCE)
    @pytest.mark.parametrize("source", [-1, 6, 10])
    def test_out_of_range(self, sample, algorithm, source):
        with pytest.raises(VertexOutOfRangeError) as info:
            algorithm(sample, source)
        assert info.value.vertex == source
        assert info.value.bound == 6

    @pytest.mark.parametrize("algorithm", ALGORITHMS_WITH_SOURCE)
    def test_non_integer_source(self, sample, algorithm):
        with pytest.raises(VertexOutOfRangeError):
            algorithm(sample, 0.0)

    @pytest.mark.parametrize(
        "run",
        [
            lambda g: bfs(g, 0),
            lambda g: dfs(g, 0),
            lambda g: dijkstra(g, 0),
            prim,
            kruskal,
        ],
        ids=["bfs", "dfs", "dijkstra", "prim", "kruskal"],
    )
    def test_input_untouched(self, sample, run):
        before = sample.copy()
        result = run(sample)
        assert sample == before
        assert result.num_vertices == sample.num_vertices

        result.add_edge(0, 5, 100)
        assert sample == before


class TestBFS:
    def test_sample_tree(self, sample):
        tree = bfs(sample, 0)
        assert edge_set(tree) == {
            (0, 2, 3),
            (0, 1, 4),
            (2, 4, 8),
            (2, 3, 7),
            (4, 5, 9),
        }

    def test_tree_properties(self, six):
        tree = bfs(six, 0)
        assert tree.edge_count() == 5
        assert tree.is_connected()
        assert tree.has_edge(0, 1)
        assert tree.has_edge(0, 2)
        assert tree.has_edge(1, 3) or tree.has_edge(2, 3)
        assert tree.has_edge(2, 4)
        assert tree.has_edge(3, 5) or tree.has_edge(4, 5)

    def test_other_source(self, six):
        tree = bfs(six, 3)
        assert tree.has_edge(3, 1)
        assert tree.has_edge(3, 2)
        assert tree.has_edge(3, 5)

    def test_disconnected(self, path_with_isolated):
        tree = bfs(path_with_isolated, 0)
        assert tree.edge_count() == 2
        for vertex in (3, 4, 5):
            assert tree.neighbors(vertex) == ()

    def test_isolated_source(self, path_with_isolated):
        tree = bfs(path_with_isolated, 4)
        assert tree.edge_count() == 0

    def test_hop_distances_preserved(self):
        """Every vertex sits at the same depth in the tree as in the graph."""
        rng = random.Random(3)
        for _ in range(20):
            g = random_graph(rng, rng.randint(1, 12), 0.3)
            unit = build(g.num_vertices, [(u, v) for u, v, _ in g.edges()])
            source = rng.randrange(g.num_vertices)
            tree = bfs(unit, source)
            assert dijkstra_distances(tree, source) == dijkstra_distances(unit, source)


class TestDFS:
    def test_sample_tree(self, sample):
        tree = dfs(sample, 0)
        assert edge_set(tree) == {
            (0, 2, 3),
            (2, 4, 8),
            (4, 5, 9),
            (3, 5, 1),
            (1, 3, 2),
        }

    def test_tree_properties(self, six):
        tree = dfs(six, 0)
        assert tree.edge_count() == 5
        assert tree.is_connected()

    def test_disconnected(self, path_with_isolated):
        tree = dfs(path_with_isolated, 2)
        assert edge_set(tree) == {(1, 2, 1), (0, 1, 1)}
        for vertex in (3, 4, 5):
            assert tree.neighbors(vertex) == ()

    def test_long_path_does_not_recurse(self):
        n = 5000
        g = build(n, [(i, i + 1) for i in range(n - 1)])
        tree = dfs(g, 0)
        assert tree.edge_count() == n - 1

    def test_goes_deep_before_wide(self):
        # Newest neighbour of 0 is 2, so DFS reaches 1 through 2
        g = build(3, [(0, 1), (1, 2), (0, 2)])
        assert edge_set(dfs(g, 0)) == {(0, 2, 1), (1, 2, 1)}
        assert edge_set(bfs(g, 0)) == {(0, 2, 1), (0, 1, 1)}


class TestDijkstra:
    def test_sample_tree(self, sample):
        tree = dijkstra(sample, 0)
        assert edge_set(tree) == {
            (0, 1, 4),
            (0, 2, 3),
            (1, 3, 2),
            (2, 4, 8),
            (3, 5, 1),
        }

    def test_sample_distances(self, sample):
        assert dijkstra_distances(sample, 0) == [0, 4, 3, 6, 11, 7]

    def test_unreachable_vertices_omitted(self):
        g = build(4, [(0, 1, 1)])
        assert dijkstra_distances(g, 0) == [0, 1, math.inf, math.inf]
        tree = dijkstra(g, 0)
        assert edge_set(tree) == {(0, 1, 1)}
        assert tree.neighbors(2) == ()

    def test_parallel_edge_relookup(self):
        """The tree takes the first stored record, not the one that relaxed."""
        g = build(2, [(0, 1, 2), (0, 1, 5)])
        assert dijkstra_distances(g, 0) == [0, 2]
        assert edge_set(dijkstra(g, 0)) == {(0, 1, 5)}

    def test_non_negative_distances(self):
        rng = random.Random(11)
        for _ in range(20):
            g = random_graph(rng, rng.randint(1, 10), 0.4)
            assert all(d >= 0 for d in dijkstra_distances(g, 0))

    def test_matches_scipy(self):
        rng = random.Random(5)
        for _ in range(30):
            g = random_graph(rng, rng.randint(1, 15), 0.25)
            source = rng.randrange(g.num_vertices)
            expected = csgraph_dijkstra(
                g.to_adjacency_matrix(), directed=False, indices=source
            )
            np.testing.assert_allclose(dijkstra_distances(g, source), expected)

    def test_zero_weight_edges_match_scipy(self):
        g = build(4, [(0, 1, 0), (1, 2, 0), (0, 2, 5), (2, 3, 1)])
        adjacency = csgraph_from_dense(
            g.to_adjacency_matrix(missing=np.inf), null_value=np.inf
        )
        expected = csgraph_dijkstra(adjacency, directed=False, indices=0)
        assert dijkstra_distances(g, 0) == [0, 0, 0, 1]
        np.testing.assert_allclose(dijkstra_distances(g, 0), expected)

    def test_tree_edge_count(self):
        rng = random.Random(8)
        for _ in range(20):
            g = random_graph(rng, rng.randint(1, 12), 0.2)
            source = rng.randrange(g.num_vertices)
            tree = dijkstra(g, source)
            assert tree.edge_count() == len(component_of(g, source)) - 1


class TestMinimumSpanningTrees:
    def test_sample_prim(self, sample):
        tree = prim(sample)
        assert edge_set(tree) == {
            (3, 5, 1),
            (1, 3, 2),
            (0, 2, 3),
            (0, 1, 4),
            (3, 4, 6),
        }
        assert tree.total_weight() == 16

    def test_sample_kruskal(self, sample):
        tree = kruskal(sample)
        assert tree.edge_count() == 5
        assert tree.is_connected()
        assert tree.total_weight() == 16

    def test_prim_and_kruskal_agree(self, six):
        assert prim(six).total_weight() == kruskal(six).total_weight()

    def test_prim_spans_only_vertex_zero_component(self):
        g = build(5, [(0, 1, 3), (1, 2, 1), (3, 4, 2)])
        assert edge_set(prim(g)) == {(0, 1, 3), (1, 2, 1)}

    def test_kruskal_spans_every_component(self):
        g = build(5, [(0, 1, 3), (1, 2, 1), (3, 4, 2)])
        tree = kruskal(g)
        assert edge_set(tree) == {(0, 1, 3), (1, 2, 1), (3, 4, 2)}
        assert len(tree.connected_components()) == 2

    def test_kruskal_keeps_lightest_parallel_edge(self):
        g = build(2, [(0, 1, 7), (0, 1, 3)])
        assert edge_set(kruskal(g)) == {(0, 1, 3)}
        assert edge_set(prim(g)) == {(0, 1, 3)}

    def test_kruskal_ignores_self_loops(self):
        g = build(2, [(0, 0, 1), (0, 1, 4)])
        assert edge_set(kruskal(g)) == {(0, 1, 4)}

    def test_single_vertex(self):
        g = Graph(1)
        assert prim(g).edge_count() == 0
        assert kruskal(g).edge_count() == 0

    def test_equal_weight_ties(self):
        g = build(3, [(0, 1, 1), (1, 2, 1), (0, 2, 1)])
        assert prim(g).total_weight() == kruskal(g).total_weight() == 2
        assert kruskal(g).edge_count() == 2

    def test_random_graphs(self):
        rng = random.Random(2024)
        for _ in range(40):
            n = rng.randint(1, 14)
            g = random_graph(rng, n, rng.choice([0.15, 0.3, 0.6]))
            forest = kruskal(g)
            components = g.connected_components()

            assert forest.edge_count() == n - len(components)
            assert forest.connected_components() == components
            assert forest.total_weight() == minimum_spanning_tree(
                g.to_adjacency_matrix()
            ).sum()

            tree = prim(g)
            zero = component_of(g, 0)
            assert tree.edge_count() == len(zero) - 1
            if g.is_connected():
                assert tree.total_weight() == forest.total_weight()
