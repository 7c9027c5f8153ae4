"""
Floyd-Warshall all-pairs shortest paths.

Time O(V^3), space O(V^2). For every intermediate vertex k the whole matrix
is relaxed at once with numpy:

    dist[i][j] = min(dist[i][j], dist[i][k] + dist[k][j])

A parallel next_hop matrix keeps the first vertex after i on the best known
i -> j path. A negative entry on the diagonal means the vertex lies on a
negative cycle.
"""

import logging
from dataclasses import dataclass

import numpy as np

from constants import NO_NEXT
from localtypes import EdgeList, Vertex
from utils.graph import weight_matrix

logger = logging.getLogger(__name__)


@dataclass
class FloydWarshallResult:
    """
    distances[i, j] is INF when j is unreachable from i.
    next_hop[i, j] is NO_NEXT in the same case.
    """

    distances: np.ndarray
    next_hop: np.ndarray
    has_negative_cycle: bool

    @property
    def negative_cycle_vertices(self) -> np.ndarray:
        """Indices i with distances[i, i] < 0."""
        return np.flatnonzero(np.diag(self.distances) < 0)


def floyd_warshall_matrix(weights: np.ndarray | list[list[float]]) -> FloydWarshallResult:
    """
    Args:
        weights: V x V direct weights, INF where no edge, 0 on the diagonal.
    """
    distances = np.array(weights, dtype=float)
    if distances.ndim != 2 or distances.shape[0] != distances.shape[1]:
        raise ValueError(f"Expected a square weight matrix, got shape {distances.shape}")
    n = distances.shape[0]

    # Direct edges: the first hop of i -> j is j itself
    next_hop = np.where(np.isfinite(distances), np.arange(n)[np.newaxis, :], NO_NEXT)

    for k in range(n):
        through_k = distances[:, k, np.newaxis] + distances[np.newaxis, k, :]
        improved = through_k < distances
        distances = np.where(improved, through_k, distances)
        next_hop = np.where(improved, next_hop[:, k, np.newaxis], next_hop)

    has_negative_cycle = bool((np.diag(distances) < 0).any())
    if has_negative_cycle:
        logger.debug(
            f"Negative cycle through vertices {np.flatnonzero(np.diag(distances) < 0).tolist()}"
        )
    return FloydWarshallResult(distances, next_hop, has_negative_cycle)


def floyd_warshall(vertex_count: int, edges: EdgeList) -> FloydWarshallResult:
    """All-pairs shortest paths of a directed edge list over [0, vertex_count)."""
    for u, v, _ in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise IndexError(f"Edge ({u}, {v}) out of range [0, {vertex_count})")
    return floyd_warshall_matrix(weight_matrix(vertex_count, edges))


def next_hop_path(next_hop: np.ndarray, u: Vertex, v: Vertex) -> list[Vertex] | None:
    """
    Vertices of the best known u -> v path, both ends included.

    Returns None when v is unreachable, or when the hops loop through a
    negative cycle and never reach v.
    """
    if next_hop[u, v] == NO_NEXT:
        return None

    path = [u]
    current = u
    while current != v:
        current = int(next_hop[current, v])
        path.append(current)
        if len(path) > len(next_hop):
            return None
    return path


def unreliable_pairs(result: FloydWarshallResult) -> np.ndarray:
    """
    Boolean V x V mask of pairs (i, j) whose distance is meaningless because
    some i -> j walk can go around a negative cycle.
    """
    on_cycle = np.diag(result.distances) < 0
    reachable = np.isfinite(result.distances).astype(np.int64)
    # i reaches some cycle vertex k, and k reaches j
    return (reachable[:, on_cycle] @ reachable[on_cycle, :]) > 0


def nodes_affected_by_negative_cycle(vertex_count: int, edges: EdgeList) -> set[Vertex]:
    """
    Vertices with at least one unreliable distance, as source or target:
    those that reach a negative cycle and those reached from one.
    """
    result = floyd_warshall(vertex_count, edges)
    if not result.has_negative_cycle:
        return set()
    pairs = unreliable_pairs(result)
    affected = pairs.any(axis=1) | pairs.any(axis=0)
    return {int(i) for i in np.flatnonzero(affected)}


def transitive_closure(vertex_count: int, edges: EdgeList | list[tuple[Vertex, Vertex]]) -> np.ndarray:
    """
    Warshall's reachability: closure[i, j] is True when j is reachable from i.
    Every vertex reaches itself. Edge weights, if present, are ignored.
    """
    closure = np.eye(vertex_count, dtype=bool)
    for edge in edges:
        closure[edge[0], edge[1]] = True
    for k in range(vertex_count):
        closure |= closure[:, k, np.newaxis] & closure[np.newaxis, k, :]
    return closure
