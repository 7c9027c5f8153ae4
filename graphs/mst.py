"""
Minimum spanning trees of undirected weighted graphs.

Kruskal: scan edges by increasing weight, keep an edge when Union-Find says
its endpoints are still in different trees. O(E log E).

Prim: grow one tree from a start vertex, always taking the lightest edge
leaving it, found with a binary heap. O(E log V).

Both are deterministic: ties on weight are broken by (from, to). On a
disconnected graph they return fewer than V - 1 edges; check
MSTResult.spans before treating the result as a spanning tree.
"""

import heapq
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from localtypes import EdgeList, Vertex, Weight, WeightedEdge
from structures.union_find import UnionFind
from utils.graph import nodes_to_connected_components

from .steps import MSTStep

logger = logging.getLogger(__name__)


@dataclass
class MSTResult:
    edges: list[WeightedEdge] = field(default_factory=list)
    total_weight: Weight = 0

    def spans(self, vertex_count: int) -> bool:
        """Whether the edges connect all vertex_count vertices."""
        return len(self.edges) == max(vertex_count - 1, 0)


def _kruskal(
    vertex_count: int, edges: EdgeList, steps: list[MSTStep] | None
) -> MSTResult:
    ordered = tuple(sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1])))
    forest = UnionFind(vertex_count)
    result = MSTResult()

    def record(current: WeightedEdge | None, description: str) -> None:
        if steps is not None:
            steps.append(
                MSTStep(
                    candidates=ordered,
                    current_edge=current,
                    mst_edges=tuple(result.edges),
                    total_weight=result.total_weight,
                    description=description,
                )
            )

    record(
        None,
        f"Starting Kruskal's algorithm with {len(ordered)} edges, sorted by weight",
    )

    for edge in ordered:
        if len(result.edges) == vertex_count - 1:
            break
        u, v, weight = edge
        if forest.union(u, v):
            result.edges.append(edge)
            result.total_weight += weight
            record(
                edge,
                f"Added edge ({u}, {v}) with weight {weight}. MST now has {len(result.edges)} edges.",
            )
        else:
            record(edge, f"Skipped edge ({u}, {v}) - would form a cycle")

    if not result.spans(vertex_count):
        logger.debug(
            f"Graph is disconnected: {forest.count} components, {len(result.edges)} edges kept"
        )
    record(None, f"MST complete! Total weight: {result.total_weight}")
    return result


def kruskal(vertex_count: int, edges: EdgeList) -> MSTResult:
    """
    Minimum spanning tree (forest if disconnected) of an undirected edge list.

    Args:
        vertex_count: Vertices are [0, vertex_count).
        edges: (u, v, weight) triples, each undirected edge listed once.
    """
    return _kruskal(vertex_count, edges, None)


def kruskal_with_steps(
    vertex_count: int, edges: EdgeList
) -> tuple[MSTResult, list[MSTStep]]:
    steps: list[MSTStep] = []
    result = _kruskal(vertex_count, edges, steps)
    return result, steps


def _prim(
    vertex_count: int,
    adjacency: Mapping[Vertex, Sequence[tuple[Vertex, Weight]]],
    start: Vertex,
    steps: list[MSTStep] | None,
) -> MSTResult:
    result = MSTResult()
    if vertex_count == 0:
        return result
    if not 0 <= start < vertex_count:
        raise IndexError(f"Start vertex {start} out of range [0, {vertex_count})")

    in_tree: set[Vertex] = set()
    # (weight, from, to)
    frontier: list[tuple[Weight, Vertex, Vertex]] = []

    def record(current: WeightedEdge | None, description: str) -> None:
        if steps is not None:
            steps.append(
                MSTStep(
                    candidates=tuple((u, v, w) for w, u, v in sorted(frontier)),
                    current_edge=current,
                    mst_edges=tuple(result.edges),
                    total_weight=result.total_weight,
                    description=description,
                )
            )

    def grow(vertex: Vertex) -> None:
        in_tree.add(vertex)
        for neighbour, weight in adjacency.get(vertex, ()):
            if weight < 0:
                raise ValueError(
                    f"Prim requires non-negative weights, edge {vertex}-{neighbour} has {weight}"
                )
            if neighbour not in in_tree:
                heapq.heappush(frontier, (weight, vertex, neighbour))

    record(None, f"Starting Prim's algorithm from node {start}")
    grow(start)
    record(None, f"Added edges from node {start} to priority queue")

    while frontier and len(result.edges) < vertex_count - 1:
        weight, u, v = heapq.heappop(frontier)
        if v in in_tree:
            record((u, v, weight), f"Skipped edge ({u}, {v}) - node {v} already in MST")
            continue

        result.edges.append((u, v, weight))
        result.total_weight += weight
        grow(v)
        record(
            (u, v, weight),
            f"Added edge ({u}, {v}) with weight {weight}. Added node {v} to MST.",
        )

    if not result.spans(vertex_count):
        components = nodes_to_connected_components(
            range(vertex_count),
            lambda vertex: (neighbour for neighbour, _ in adjacency.get(vertex, ())),
        )
        logger.debug(
            f"Prim reached {len(in_tree)}/{vertex_count} vertices from {start}, "
            f"graph has {len(components)} components"
        )
    record(None, f"MST complete! Total weight: {result.total_weight}")
    return result


def prim(
    vertex_count: int,
    adjacency: Mapping[Vertex, Sequence[tuple[Vertex, Weight]]],
    start: Vertex = 0,
) -> MSTResult:
    """
    Minimum spanning tree of the component containing start.

    Args:
        vertex_count: Vertices are [0, vertex_count).
        adjacency: Undirected adjacency map, each edge present in both
            directions (see utils.graph.edges_to_adjacency).
        start: Root of the grown tree.

    Raises:
        ValueError: If a negative edge weight is met.
    """
    return _prim(vertex_count, adjacency, start, None)


def prim_with_steps(
    vertex_count: int,
    adjacency: Mapping[Vertex, Sequence[tuple[Vertex, Weight]]],
    start: Vertex = 0,
) -> tuple[MSTResult, list[MSTStep]]:
    steps: list[MSTStep] = []
    result = _prim(vertex_count, adjacency, start, steps)
    return result, steps
