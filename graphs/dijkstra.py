"""
Dijkstra's single-source shortest paths for non-negative weights.

Time: O((V + E) log V) with a binary heap (heapq). Stale heap entries are
skipped on pop instead of being decreased in place.

Functions:
    dijkstra(graph, source)              - distances and predecessors
    dijkstra_with_steps(graph, source)   - same, plus animation snapshots
    dijkstra_grid(grid, start, goal)     - weighted 4-neighbour grid search
"""

import heapq
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from constants import INF
from localtypes import (
    Cell,
    Distances,
    Grid,
    Predecessors,
    Vertex,
    WeightedGraph,
    as_cell,
)
from utils.graph import reconstruct_path, vertices_of
from utils.grid import entry_cost, is_passable, neighbours, walk_back

from .steps import DijkstraStep, freeze

logger = logging.getLogger(__name__)


@dataclass
class ShortestPaths:
    """Single-source result: INF distance means unreachable."""

    source: Vertex
    distances: Distances
    previous: Predecessors

    def path_to(self, target: Vertex) -> list[Vertex] | None:
        return reconstruct_path(self.previous, self.source, target)


@dataclass
class GridPath:
    path: list[Cell]
    distance: float


def _format(distance: float) -> str:
    return "∞" if distance == INF else f"{distance:g}"


def _dijkstra(
    graph: WeightedGraph, source: Vertex, steps: list[DijkstraStep] | None
) -> ShortestPaths:
    distances: Distances = {vertex: INF for vertex in vertices_of(graph)}
    distances[source] = 0
    previous: Predecessors = {}
    visited: set[Vertex] = set()
    frontier: list[tuple[float, Vertex]] = [(0, source)]

    def record(current: Vertex | None, description: str) -> None:
        if steps is None:
            return
        steps.append(
            DijkstraStep(
                distances=freeze(distances),
                previous=freeze(previous),
                visited=frozenset(visited),
                frontier=tuple(sorted(frontier)),
                current=current,
                description=description,
            )
        )

    record(
        source,
        f"Starting Dijkstra from node {source}. All distances set to ∞ except start.",
    )

    while frontier:
        distance, node = heapq.heappop(frontier)
        if node in visited:
            continue
        visited.add(node)
        record(node, f"Visiting node {node} with distance {_format(distance)}")

        for neighbour, weight in graph.get(node, ()):
            if weight < 0:
                raise ValueError(
                    f"Dijkstra requires non-negative weights, edge {node}->{neighbour} has {weight}"
                )
            if neighbour in visited:
                continue

            candidate = distance + weight
            current = distances.get(neighbour, INF)
            if candidate < current:
                distances[neighbour] = candidate
                previous[neighbour] = node
                heapq.heappush(frontier, (candidate, neighbour))
                record(
                    node,
                    f"Updated distance to {neighbour}: {_format(current)} → {_format(candidate)} via {node}",
                )

    logger.debug(f"Dijkstra from {source} settled {len(visited)}/{len(distances)} vertices")
    record(None, f"Dijkstra complete. Shortest paths from {source} found.")
    return ShortestPaths(source, distances, previous)


def dijkstra(graph: WeightedGraph, source: Vertex) -> ShortestPaths:
    """
    Shortest distances from source to every vertex of graph.

    Args:
        graph: Adjacency map vertex -> [(neighbour, weight), ...].
        source: Start vertex.

    Returns:
        ShortestPaths whose distances cover every vertex named by graph.

    Raises:
        ValueError: If a negative edge weight is relaxed.
    """
    return _dijkstra(graph, source, None)


def dijkstra_with_steps(
    graph: WeightedGraph, source: Vertex
) -> tuple[ShortestPaths, list[DijkstraStep]]:
    steps: list[DijkstraStep] = []
    result = _dijkstra(graph, source, steps)
    return result, steps


def dijkstra_grid(
    grid: Grid, start: Sequence[int], goal: Sequence[int]
) -> GridPath | None:
    """
    Cheapest 4-neighbour route between two cells of a weighted grid.

    Entering a cell costs its value (0 counts as 1); OBSTACLE cells are
    never entered. Stops as soon as the goal is settled.

    Returns:
        The path from start to goal inclusive and its cost, or None if the
        goal is unreachable or either endpoint is blocked.
    """
    start, goal = as_cell(start), as_cell(goal)
    if not (is_passable(grid, start) and is_passable(grid, goal)):
        return None

    distances: dict[Cell, float] = {start: 0}
    came_from: dict[Cell, Cell] = {}
    frontier: list[tuple[float, Cell]] = [(0, start)]

    while frontier:
        distance, cell = heapq.heappop(frontier)
        if distance > distances[cell]:
            continue
        if cell == goal:
            return GridPath(walk_back(came_from, goal), distance)

        for neighbour in neighbours(grid, cell):
            cost = entry_cost(grid, neighbour)
            if cost < 0:
                raise ValueError(f"Negative cell cost {cost} at {neighbour}")
            candidate = distance + cost
            if candidate < distances.get(neighbour, INF):
                distances[neighbour] = candidate
                came_from[neighbour] = cell
                heapq.heappush(frontier, (candidate, neighbour))

    return None
