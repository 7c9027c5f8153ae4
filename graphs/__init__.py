"""
Priority-driven shortest path and spanning tree algorithms.

Modules:
    dijkstra        - Single source, non-negative weights, grid variant
    bellman_ford    - Single source, negative weights, cycle extraction
    astar           - Heuristic grid search and its heuristics
    floyd_warshall  - All pairs, negative cycle analysis, reachability
    mst             - Kruskal and Prim
    steps           - Snapshots recorded by the *_with_steps variants
"""

from .astar import (
    AStarResult,
    a_star,
    a_star_with_steps,
    chebyshev_distance,
    euclidean_distance,
    greedy_best_first,
    manhattan_distance,
)
from .bellman_ford import BellmanFordResult, bellman_ford, find_negative_cycle
from .dijkstra import (
    GridPath,
    ShortestPaths,
    dijkstra,
    dijkstra_grid,
    dijkstra_with_steps,
)
from .floyd_warshall import (
    FloydWarshallResult,
    floyd_warshall,
    floyd_warshall_matrix,
    next_hop_path,
    nodes_affected_by_negative_cycle,
    transitive_closure,
    unreliable_pairs,
)
from .mst import MSTResult, kruskal, kruskal_with_steps, prim, prim_with_steps
from .steps import AStarStep, DijkstraStep, MSTStep

__all__ = [
    "AStarResult",
    "a_star",
    "a_star_with_steps",
    "chebyshev_distance",
    "euclidean_distance",
    "greedy_best_first",
    "manhattan_distance",
    "BellmanFordResult",
    "bellman_ford",
    "find_negative_cycle",
    "GridPath",
    "ShortestPaths",
    "dijkstra",
    "dijkstra_grid",
    "dijkstra_with_steps",
    "FloydWarshallResult",
    "floyd_warshall",
    "floyd_warshall_matrix",
    "next_hop_path",
    "nodes_affected_by_negative_cycle",
    "transitive_closure",
    "unreliable_pairs",
    "MSTResult",
    "kruskal",
    "kruskal_with_steps",
    "prim",
    "prim_with_steps",
    "AStarStep",
    "DijkstraStep",
    "MSTStep",
]
