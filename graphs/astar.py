"""
A* search on a 4-neighbour obstacle grid with unit step cost.

The frontier is ordered by f(n) = g(n) + h(n): g is the cost so far, h a
caller-supplied estimate of the remaining cost. With an admissible h (never
above the true remaining cost) the returned path is optimal; this is not
checked. The search stops when the goal is popped, which is valid because
every step costs +1.

Heuristics:
    manhattan_distance  - admissible for 4-neighbour moves
    euclidean_distance  - admissible, weaker than Manhattan here
    chebyshev_distance  - admissible, weaker still

Search:
    a_star, a_star_with_steps, greedy_best_first
"""

import heapq
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from constants import INF
from localtypes import Cell, Grid, Heuristic, as_cell
from utils.grid import is_passable, neighbours, walk_back

from .steps import AStarStep, freeze

logger = logging.getLogger(__name__)


def manhattan_distance(a: Cell, b: Cell) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean_distance(a: Cell, b: Cell) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def chebyshev_distance(a: Cell, b: Cell) -> float:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


@dataclass
class AStarResult:
    path: list[Cell]
    distance: float
    nodes_explored: int


def _a_star(
    grid: Grid,
    start: Cell,
    goal: Cell,
    heuristic: Heuristic,
    steps: list[AStarStep] | None,
) -> AStarResult | None:
    if not (is_passable(grid, start) and is_passable(grid, goal)):
        return None

    g_score: dict[Cell, float] = {start: 0}
    f_score: dict[Cell, float] = {start: heuristic(start, goal)}
    came_from: dict[Cell, Cell] = {}
    closed: set[Cell] = set()
    # Ties on f go to the entry closer to the goal
    frontier: list[tuple[float, float, Cell]] = [
        (f_score[start], f_score[start], start)
    ]
    nodes_explored = 0

    def record(current: Cell | None, description: str) -> None:
        if steps is None:
            return
        steps.append(
            AStarStep(
                open_set=tuple(sorted(c for c in g_score if c not in closed)),
                closed_set=frozenset(closed),
                current=current,
                g_score=freeze(g_score),
                f_score=freeze(f_score),
                came_from=freeze(came_from),
                description=description,
            )
        )

    record(
        start,
        f"Starting A* search from ({start.row}, {start.col}) to ({goal.row}, {goal.col})",
    )

    while frontier:
        f, _, current = heapq.heappop(frontier)
        if current in closed or f > f_score[current]:
            continue
        nodes_explored += 1

        if current == goal:
            record(
                current,
                f"Found goal at ({goal.row}, {goal.col})! Path length: {g_score[goal]:g}",
            )
            logger.debug(f"A* reached {goal} after exploring {nodes_explored} cells")
            return AStarResult(walk_back(came_from, goal), g_score[goal], nodes_explored)

        closed.add(current)
        record(current, f"Exploring ({current.row}, {current.col}) with f={f:.1f}")

        tentative = g_score[current] + 1
        for neighbour in neighbours(grid, current):
            if neighbour in closed or tentative >= g_score.get(neighbour, INF):
                continue
            came_from[neighbour] = current
            g_score[neighbour] = tentative
            h = heuristic(neighbour, goal)
            f_score[neighbour] = tentative + h
            heapq.heappush(frontier, (tentative + h, h, neighbour))

    logger.debug(f"A* exhausted {nodes_explored} cells without reaching {goal}")
    record(None, f"No path from ({start.row}, {start.col}) to ({goal.row}, {goal.col})")
    return None


def a_star(
    grid: Grid,
    start: Sequence[int],
    goal: Sequence[int],
    heuristic: Heuristic = manhattan_distance,
) -> AStarResult | None:
    """
    Shortest grid path from start to goal.

    Args:
        grid: 0 for free cells, OBSTACLE for walls.
        start: (row, col) of the start cell.
        goal: (row, col) of the goal cell.
        heuristic: Estimate of the remaining cost between two cells.

    Returns:
        AStarResult with the path (start and goal included), its length and
        the number of cells expanded, or None when the goal is unreachable
        or either endpoint is a wall.
    """
    return _a_star(grid, as_cell(start), as_cell(goal), heuristic, None)


def a_star_with_steps(
    grid: Grid,
    start: Sequence[int],
    goal: Sequence[int],
    heuristic: Heuristic = manhattan_distance,
) -> tuple[AStarResult | None, list[AStarStep]]:
    steps: list[AStarStep] = []
    result = _a_star(grid, as_cell(start), as_cell(goal), heuristic, steps)
    return result, steps


def greedy_best_first(
    grid: Grid,
    start: Sequence[int],
    goal: Sequence[int],
    heuristic: Heuristic = manhattan_distance,
) -> AStarResult | None:
    """
    Expands the cell with the lowest h alone, ignoring the cost so far.

    Usually explores far fewer cells than A* but the path is not guaranteed
    to be shortest. Each cell keeps the parent that discovered it first.
    """
    start, goal = as_cell(start), as_cell(goal)
    if not (is_passable(grid, start) and is_passable(grid, goal)):
        return None

    came_from: dict[Cell, Cell] = {}
    discovered: set[Cell] = {start}
    closed: set[Cell] = set()
    frontier: list[tuple[float, Cell]] = [(heuristic(start, goal), start)]
    nodes_explored = 0

    while frontier:
        _, current = heapq.heappop(frontier)
        if current in closed:
            continue
        closed.add(current)
        nodes_explored += 1

        if current == goal:
            path = walk_back(came_from, goal)
            return AStarResult(path, len(path) - 1, nodes_explored)

        for neighbour in neighbours(grid, current):
            if neighbour not in discovered:
                discovered.add(neighbour)
                came_from[neighbour] = current
                heapq.heappush(frontier, (heuristic(neighbour, goal), neighbour))

    return None
