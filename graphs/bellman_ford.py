"""
Bellman-Ford single-source shortest paths, negative weights allowed.

Time: O(V * E). A shortest path has at most V - 1 edges, so V - 1 rounds of
relaxing every edge settle all distances unless a negative cycle is
reachable; one more round tells the two cases apart.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from constants import INF
from localtypes import Distances, EdgeList, Predecessors, Vertex
from utils.graph import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class BellmanFordResult:
    """
    When has_negative_cycle is set, distances of vertices reachable from the
    cycle are not shortest-path values and must not be trusted.
    """

    source: Vertex
    distances: Distances
    previous: Predecessors
    has_negative_cycle: bool

    def path_to(self, target: Vertex) -> list[Vertex] | None:
        return reconstruct_path(self.previous, self.source, target)


def _relax_all(edges: EdgeList, distances: Distances, previous: Predecessors) -> bool:
    """One pass over every edge; returns whether any distance improved."""
    improved = False
    for u, v, weight in edges:
        distance_u = distances.get(u, INF)
        if distance_u != INF and distance_u + weight < distances.get(v, INF):
            distances[v] = distance_u + weight
            previous[v] = u
            improved = True
    return improved


def _first_relaxable(edges: EdgeList, distances: Distances) -> Vertex | None:
    for u, v, weight in edges:
        distance_u = distances.get(u, INF)
        if distance_u != INF and distance_u + weight < distances.get(v, INF):
            return v
    return None


def bellman_ford(
    vertices: Iterable[Vertex], edges: EdgeList, source: Vertex
) -> BellmanFordResult:
    """
    Shortest distances from source over a directed edge list.

    Args:
        vertices: Every vertex of the graph.
        edges: (from, to, weight) triples; weights may be negative.
        source: Start vertex.

    Returns:
        BellmanFordResult; has_negative_cycle flags a negative cycle
        reachable from source.

    Raises:
        ValueError: If source is not among vertices.
    """
    distances: Distances = {vertex: INF for vertex in vertices}
    if source not in distances:
        raise ValueError(f"Source {source} is not one of the graph's vertices")
    distances[source] = 0
    previous: Predecessors = {}

    for _ in range(len(distances) - 1):
        _relax_all(edges, distances, previous)

    has_negative_cycle = _first_relaxable(edges, distances) is not None
    if has_negative_cycle:
        logger.debug(f"Negative cycle reachable from {source}")

    return BellmanFordResult(source, distances, previous, has_negative_cycle)


def find_negative_cycle(
    vertices: Iterable[Vertex], edges: EdgeList
) -> list[Vertex] | None:
    """
    Vertices of one negative cycle, in edge order, first vertex repeated last.

    All distances start at 0, as if a virtual source had a 0-weight edge to
    every vertex, so a cycle is found wherever it lies in the graph.

    Returns:
        e.g. [1, 2, 3, 1] for the cycle 1 -> 2 -> 3 -> 1, or None.
    """
    distances: Distances = {vertex: 0 for vertex in vertices}
    previous: Predecessors = {}

    for _ in range(len(distances) - 1):
        if not _relax_all(edges, distances, previous):
            return None

    # Relax once more so the returned vertex's predecessor chain is current
    relaxable = _first_relaxable(edges, distances)
    if relaxable is None:
        return None
    _relax_all(edges, distances, previous)

    # V steps back along predecessors is guaranteed to land on the cycle
    current = relaxable
    for _ in range(len(distances)):
        current = previous[current]

    cycle = [current]
    vertex = previous[current]
    while vertex != current:
        cycle.append(vertex)
        vertex = previous[vertex]
    cycle.append(current)
    cycle.reverse()

    logger.debug(f"Negative cycle: {cycle}")
    return cycle
