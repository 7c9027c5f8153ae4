"""
Functions related to graph representations

Conversions:
    graph_to_edges(graph)                   - adjacency map -> edge list
    edges_to_adjacency(edges, undirected)   - edge list -> adjacency map
    adjacency_to_csr(graph, vertex_count)   - adjacency map -> scipy CSR array
    edges_to_csr(vertex_count, edges)       - edge list -> scipy CSR array
    weight_matrix(vertex_count, edges)      - edge list -> dense numpy matrix

Queries:
    vertices_of(graph)                      - every vertex named by a graph
    reconstruct_path(previous, source, target)
    nodes_to_connected_components(nodes, node_to_neighbours)
"""

from collections import deque
from collections.abc import Callable, Iterable, Mapping
from typing import TypeVar

import numpy as np
from scipy.sparse import csr_array

from constants import INF
from localtypes import EdgeList, Vertex, WeightedEdge, WeightedGraph

T = TypeVar("T")


def nodes_to_connected_components(
    nodes: Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> frozenset[frozenset[T]]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: nodes in the graph.
        node_to_neighbours: Function returning the nodes a given node points to.

    Returns:
        frozenset[frozenset[T]]: set of connected components of the graph
    """

    seen = set()
    components = set()

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        # Avoid visiting an already seen component
        if node in seen:
            continue

        # Add a new connected component
        component = set()
        # Breadth-first traversal
        queue = deque([node])
        while queue:
            current = queue.popleft()

            # Avoid cycles
            if current in seen:
                continue

            component.add(current)
            queue.extend(node_to_neighbours(current))

            # Mark the node as seen
            seen.add(current)

        # Add the completed component
        components.add(frozenset(component))
    return frozenset(components)


def vertices_of(graph: WeightedGraph) -> set[Vertex]:
    """Keys of the adjacency map plus every vertex only reached by an edge."""
    vertices = set(graph.keys())
    for neighbours in graph.values():
        vertices.update(neighbour for neighbour, _ in neighbours)
    return vertices


def reconstruct_path(
    previous: Mapping[Vertex, Vertex], source: Vertex, target: Vertex
) -> list[Vertex] | None:
    """
    Walks predecessor links back from target to source.

    Returns:
        [source, ..., target], or None if target was never reached. Also None
        when the links loop without meeting source, which happens once a
        negative cycle has corrupted the predecessor map.
    """
    if target == source:
        return [source]
    if target not in previous:
        return None

    path = [target]
    current = target
    while current != source:
        if current not in previous or len(path) > len(previous) + 1:
            return None
        current = previous[current]
        path.append(current)

    path.reverse()
    return path


def graph_to_edges(graph: WeightedGraph) -> list[WeightedEdge]:
    return [(u, v, weight) for u, neighbours in graph.items() for v, weight in neighbours]


def edges_to_adjacency(
    edges: EdgeList, undirected: bool = True
) -> dict[Vertex, list[tuple[Vertex, float]]]:
    """Builds an adjacency map; undirected edges are stored in both directions."""
    adjacency: dict[Vertex, list[tuple[Vertex, float]]] = {}
    for u, v, weight in edges:
        adjacency.setdefault(u, []).append((v, weight))
        if undirected:
            adjacency.setdefault(v, []).append((u, weight))
        else:
            adjacency.setdefault(v, [])
    return adjacency


def edges_to_csr(vertex_count: int, edges: EdgeList) -> csr_array:
    """
    Compressed sparse row adjacency: each vertex's out-edges are contiguous.

    Parallel edges are collapsed to the lightest one, since building a CSR
    array from coordinates would otherwise sum them.
    """
    lightest: dict[tuple[Vertex, Vertex], float] = {}
    for u, v, weight in edges:
        if weight < lightest.get((u, v), INF):
            lightest[u, v] = weight

    rows = np.fromiter((u for u, _ in lightest), dtype=np.int64, count=len(lightest))
    cols = np.fromiter((v for _, v in lightest), dtype=np.int64, count=len(lightest))
    data = np.fromiter(lightest.values(), dtype=float, count=len(lightest))
    return csr_array((data, (rows, cols)), shape=(vertex_count, vertex_count))


def adjacency_to_csr(graph: WeightedGraph, vertex_count: int | None = None) -> csr_array:
    if vertex_count is None:
        vertex_count = max(vertices_of(graph), default=-1) + 1
    return edges_to_csr(vertex_count, graph_to_edges(graph))


def weight_matrix(vertex_count: int, edges: EdgeList) -> np.ndarray:
    """
    Dense V x V matrix: 0 on the diagonal, INF where no edge, else the
    lightest direct edge weight. A negative self-loop wins over the 0.
    """
    matrix = np.full((vertex_count, vertex_count), INF)
    np.fill_diagonal(matrix, 0.0)
    for u, v, weight in edges:
        if weight < matrix[u, v]:
            matrix[u, v] = weight
    return matrix
