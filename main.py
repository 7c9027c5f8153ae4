"""
Run the worked examples of every algorithm and data structure.

Each example builds a small input, runs the algorithm and logs the
intermediate results; the returned one-line summary is what a caller would
display.

Usage:
    python main.py --example dijkstra --steps
    python main.py --debug
"""

import logging
from collections.abc import Callable

from constants import DEBUG, INF
from graphs import (
    a_star,
    a_star_with_steps,
    bellman_ford,
    dijkstra,
    dijkstra_with_steps,
    find_negative_cycle,
    floyd_warshall,
    kruskal,
    kruskal_with_steps,
    next_hop_path,
    prim,
    prim_with_steps,
)
from structures import (
    FenwickTree,
    LazySegmentTree,
    LFUCache,
    LRUCache,
    UnionFind,
    count_inversions,
    max_segment_tree,
    min_segment_tree,
    sum_segment_tree,
)
from utils.graph import edges_to_adjacency

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)

DIJKSTRA_GRAPH = {
    0: [(1, 4), (2, 1)],
    1: [(3, 1)],
    2: [(1, 2), (3, 5)],
    3: [],
}

MST_EDGES = [
    (0, 1, 2),
    (0, 3, 6),
    (1, 2, 3),
    (1, 3, 8),
    (1, 4, 5),
    (2, 4, 7),
    (3, 4, 9),
]

# 0 = free, 1 = wall
MAZE = [
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 1, 0],
    [0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0],
]


def _log_steps(descriptions: list[str]) -> None:
    for i, description in enumerate(descriptions):
        logger.info(f"  step {i}: {description}")


def union_find_example(show_steps: bool = False) -> str:
    uf = UnionFind(10)
    logger.info(f"Initial sets: {uf.count}")
    for x, y in [(0, 1), (2, 3), (0, 2), (4, 5), (6, 7), (5, 6)]:
        uf.union(x, y)
    logger.info(f"After unions: {uf.count}")
    logger.info(f"0 and 3 connected: {uf.connected(0, 3)}")
    logger.info(f"0 and 4 connected: {uf.connected(0, 4)}")
    for root, members in uf.sets().items():
        logger.debug(f"  Set {root}: {members}")
    return f"Number of disjoint sets: {uf.count}"


def fenwick_example(show_steps: bool = False) -> str:
    values = [1, 3, 5, 7, 9, 11]
    tree = FenwickTree.from_values(values)
    for i in range(len(values)):
        logger.info(f"  prefix_sum({i}) = {tree.prefix_sum(i)}")
    logger.info(f"  query(1, 3) = {tree.query(1, 3)}")
    tree.update(2, 10)
    logger.info(f"After values[2] += 10: query(0, 5) = {tree.query(0, 5)}")
    logger.info(f"Inversions of [3, 1, 2, 5, 4]: {count_inversions([3, 1, 2, 5, 4])}")
    return f"prefix_sum(5) = {tree.prefix_sum(5)}"


def segment_tree_example(show_steps: bool = False) -> str:
    values = [1, 3, 5, 7, 9, 11]
    trees = {
        "Sum": sum_segment_tree(values),
        "Min": min_segment_tree(values),
        "Max": max_segment_tree(values),
    }
    for name, tree in trees.items():
        tree.update(2, 15)
        logger.info(f"  {name} [1, 4] after values[2] = 15: {tree.query(1, 4)}")

    lazy = LazySegmentTree([1, 2, 3, 4, 5])
    lazy.range_update(1, 3, 10)
    logger.info(f"Lazy: add 10 to [1, 3], sum [0, 4] = {lazy.query(0, 4)}")
    return f"Sum query [1, 4] = {trees['Sum'].query(1, 4)}"


def lru_example(show_steps: bool = False) -> str:
    cache = LRUCache[int, str](3)
    cache.put(1, "one")
    cache.put(2, "two")
    cache.put(3, "three")
    cache.get(1)
    logger.info(f"Keys after get(1): {cache.keys()}")
    cache.put(4, "four")
    logger.info(f"Has 2 after inserting 4: {cache.has(2)}")
    return f"Cache keys: {cache.keys()}"


def lfu_example(show_steps: bool = False) -> str:
    cache = LFUCache[int, str](3)
    cache.put(1, "one")
    cache.put(2, "two")
    cache.put(3, "three")
    cache.get(1)
    cache.get(1)
    cache.get(2)
    logger.info(f"Frequencies: {cache.frequencies()}")
    cache.put(4, "four")
    logger.info(f"Has 3 after inserting 4: {cache.has(3)}")
    cache.put(5, "five")
    logger.info(f"Has 4 after inserting 5: {cache.has(4)}")
    return f"Cache size: {cache.size()}"


def dijkstra_example(show_steps: bool = False) -> str:
    if show_steps:
        result, steps = dijkstra_with_steps(DIJKSTRA_GRAPH, 0)
        _log_steps([step.description for step in steps])
    else:
        result = dijkstra(DIJKSTRA_GRAPH, 0)
    for vertex, distance in sorted(result.distances.items()):
        logger.info(f"  {vertex}: {distance}")
    path = result.path_to(3) or []
    return (
        f"Shortest path 0→3: {' → '.join(map(str, path))} "
        f"(distance: {result.distances[3]})"
    )


def bellman_ford_example(show_steps: bool = False) -> str:
    edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1), (2, 3, 5), (3, 4, 3)]
    result = bellman_ford(range(5), edges, 0)
    logger.info(f"Has negative cycle: {result.has_negative_cycle}")

    cyclic = [(0, 1, 1), (1, 2, -1), (2, 3, -1), (3, 1, -1)]
    flagged = bellman_ford(range(4), cyclic, 0)
    logger.info(f"With cycle 1→2→3→1: has negative cycle = {flagged.has_negative_cycle}")
    logger.info(f"Cycle: {find_negative_cycle(range(4), cyclic)}")
    return f"Shortest path 0→4: {result.distances[4]}"


def a_star_example(show_steps: bool = False) -> str:
    if show_steps:
        result, steps = a_star_with_steps(MAZE, (0, 0), (4, 4))
        _log_steps([step.description for step in steps])
    else:
        result = a_star(MAZE, (0, 0), (4, 4))
    if result is None:
        return "No path found"
    logger.info(f"Nodes explored: {result.nodes_explored}")
    return "A* path: " + " → ".join(f"({r},{c})" for r, c in result.path)


def floyd_warshall_example(show_steps: bool = False) -> str:
    edges = [(0, 1, 3), (0, 3, 5), (1, 0, 2), (1, 3, 4), (2, 1, 1), (3, 2, 2)]
    n = 4
    result = floyd_warshall(n, edges)
    for i in range(n):
        for j in range(n):
            if i != j and result.distances[i, j] != INF:
                path = next_hop_path(result.next_hop, i, j) or []
                logger.info(
                    f"  {i} → {j}: {' → '.join(map(str, path))} (dist: {result.distances[i, j]:g})"
                )
    logger.info(f"Has negative cycle: {result.has_negative_cycle}")
    return f"Distance 0→2: {result.distances[0, 2]:g}"


def mst_example(show_steps: bool = False) -> str:
    adjacency = edges_to_adjacency(MST_EDGES)
    if show_steps:
        kruskal_result, kruskal_steps = kruskal_with_steps(5, MST_EDGES)
        prim_result, prim_steps = prim_with_steps(5, adjacency, 0)
        _log_steps([step.description for step in kruskal_steps + prim_steps])
    else:
        kruskal_result = kruskal(5, MST_EDGES)
        prim_result = prim(5, adjacency, 0)
    logger.info(f"Kruskal's MST: {kruskal_result.edges}")
    logger.info(f"Prim's MST: {prim_result.edges}")
    return f"MST total weight: {kruskal_result.total_weight}"


EXAMPLES: dict[str, Callable[[bool], str]] = {
    "union_find": union_find_example,
    "fenwick": fenwick_example,
    "segment_tree": segment_tree_example,
    "lru": lru_example,
    "lfu": lfu_example,
    "dijkstra": dijkstra_example,
    "bellman_ford": bellman_ford_example,
    "a_star": a_star_example,
    "floyd_warshall": floyd_warshall_example,
    "mst": mst_example,
}


def run_example(name: str, show_steps: bool = False) -> str:
    if name not in EXAMPLES:
        raise ValueError(f"Unknown example {name!r}, expected one of {sorted(EXAMPLES)}")
    logger.info(f"Running example: {name}")
    summary = EXAMPLES[name](show_steps)
    logger.info(summary)
    return summary


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run the worked examples")
    parser.add_argument(
        "--example",
        choices=["all", *EXAMPLES],
        default="all",
        help="Example to run",
    )
    parser.add_argument(
        "--steps", action="store_true", help="Log the recorded animation steps"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug or DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)

    names = list(EXAMPLES) if args.example == "all" else [args.example]
    for name in names:
        run_example(name, show_steps=args.steps)
