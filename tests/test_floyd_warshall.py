"""Tests for graphs/floyd_warshall.py"""

import random

import numpy as np
import pytest
from scipy.sparse.csgraph import floyd_warshall as csgraph_floyd_warshall

from constants import INF, NO_NEXT
from graphs.dijkstra import dijkstra
from graphs.floyd_warshall import (
    floyd_warshall,
    floyd_warshall_matrix,
    next_hop_path,
    nodes_affected_by_negative_cycle,
    transitive_closure,
    unreliable_pairs,
)
from utils.graph import edges_to_adjacency, edges_to_csr

DEMO_EDGES = [(0, 1, 3), (0, 3, 5), (1, 0, 2), (1, 3, 4), (2, 1, 1), (3, 2, 2)]


def random_edges(rng: random.Random, n: int, edge_count: int) -> list[tuple[int, int, float]]:
    pairs = sorted((u, v) for u in range(n) for v in range(n) if u != v)
    return [(u, v, rng.randint(1, 15)) for u, v in rng.sample(pairs, edge_count)]


class TestFloydWarshall:
    def test_worked_example(self):
        result = floyd_warshall(4, DEMO_EDGES)
        expected = np.array(
            [
                [0, 3, 7, 5],
                [2, 0, 6, 4],
                [3, 1, 0, 5],
                [5, 3, 2, 0],
            ],
            dtype=float,
        )
        np.testing.assert_array_equal(result.distances, expected)
        assert not result.has_negative_cycle
        assert next_hop_path(result.next_hop, 0, 2) == [0, 3, 2]
        assert next_hop_path(result.next_hop, 2, 0) == [2, 1, 0]

    def test_path_weights_match_distances(self):
        result = floyd_warshall(4, DEMO_EDGES)
        weights = {(u, v): w for u, v, w in DEMO_EDGES}
        for i in range(4):
            for j in range(4):
                path = next_hop_path(result.next_hop, i, j)
                assert path[0] == i and path[-1] == j
                total = sum(weights[u, v] for u, v in zip(path, path[1:]))
                assert total == result.distances[i, j]

    def test_unreachable(self):
        result = floyd_warshall(3, [(0, 1, 1)])
        assert result.distances[1, 0] == INF
        assert result.next_hop[1, 0] == NO_NEXT
        assert next_hop_path(result.next_hop, 1, 0) is None
        assert next_hop_path(result.next_hop, 2, 2) == [2]

    def test_parallel_edges_keep_lightest(self):
        result = floyd_warshall(2, [(0, 1, 5), (0, 1, 2), (0, 1, 7)])
        assert result.distances[0, 1] == 2

    def test_agrees_with_dijkstra_for_every_pair(self):
        rng = random.Random(6)
        n = 10
        edges = random_edges(rng, n, 30)
        result = floyd_warshall(n, edges)
        graph = edges_to_adjacency(edges, undirected=False)
        for source in range(n):
            distances = dijkstra(graph, source).distances
            for target in range(n):
                assert result.distances[source, target] == distances.get(target, INF)

    def test_agrees_with_scipy(self):
        rng = random.Random(10)
        n = 12
        edges = random_edges(rng, n, 40)
        expected = csgraph_floyd_warshall(edges_to_csr(n, edges), directed=True)
        np.testing.assert_allclose(floyd_warshall(n, edges).distances, expected)

    def test_matrix_input(self):
        weights = [
            [0, 4, INF],
            [INF, 0, -2],
            [1, INF, 0],
        ]
        result = floyd_warshall_matrix(weights)
        assert result.distances[0, 2] == 2
        assert result.distances[2, 1] == 5
        assert not result.has_negative_cycle

    def test_non_square_matrix(self):
        with pytest.raises(ValueError, match="square"):
            floyd_warshall_matrix([[0, 1, 2], [1, 0, 3]])

    def test_edge_out_of_range(self):
        with pytest.raises(IndexError):
            floyd_warshall(2, [(0, 2, 1)])

    def test_empty_graph(self):
        result = floyd_warshall(0, [])
        assert result.distances.shape == (0, 0)
        assert not result.has_negative_cycle


class TestNegativeCycles:
    def test_negative_cycle_flagged(self):
        """Same 4-cycle that Bellman-Ford flags from vertex 0."""
        edges = [(0, 1, 1), (1, 2, -1), (2, 3, -1), (3, 1, -1)]
        result = floyd_warshall(4, edges)
        assert result.has_negative_cycle
        assert set(result.negative_cycle_vertices.tolist()) == {1, 2, 3}

    def test_negative_self_loop(self):
        result = floyd_warshall(2, [(1, 1, -1)])
        assert result.has_negative_cycle
        assert result.negative_cycle_vertices.tolist() == [1]

    def test_unreliable_pairs(self):
        """0 feeds the cycle 1 <-> 2, which feeds 3; 4 is isolated."""
        edges = [(0, 1, 1), (1, 2, -2), (2, 1, 1), (2, 3, 1)]
        pairs = unreliable_pairs(floyd_warshall(5, edges))
        assert pairs[0, 3]
        assert pairs[1, 1]
        assert not pairs[3, 0]
        assert not pairs[4].any()
        assert not pairs[:, 0].any()

    def test_affected_nodes(self):
        edges = [(0, 1, 1), (1, 2, -2), (2, 1, 1), (2, 3, 1), (4, 5, 1)]
        assert nodes_affected_by_negative_cycle(6, edges) == {0, 1, 2, 3}

    def test_no_affected_nodes_without_cycle(self):
        assert nodes_affected_by_negative_cycle(4, DEMO_EDGES) == set()


class TestTransitiveClosure:
    def test_chain(self):
        closure = transitive_closure(4, [(0, 1), (1, 2)])
        assert closure[0, 2]
        assert not closure[2, 0]
        assert closure[3, 3]
        assert not closure[0, 3]

    def test_weights_ignored(self):
        closure = transitive_closure(3, [(0, 1, -5), (1, 2, 100)])
        assert closure[0, 2]

    def test_agrees_with_finite_distances(self):
        rng = random.Random(14)
        n = 9
        edges = random_edges(rng, n, 15)
        closure = transitive_closure(n, edges)
        distances = floyd_warshall(n, edges).distances
        np.testing.assert_array_equal(closure, np.isfinite(distances))
