"""Tests for graphs/astar.py"""

import math
import random
from collections import deque

import pytest

from constants import OBSTACLE
from graphs.astar import (
    a_star,
    a_star_with_steps,
    chebyshev_distance,
    euclidean_distance,
    greedy_best_first,
    manhattan_distance,
)
from localtypes import Cell

MAZE = [
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 1, 0],
    [0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0],
]


def bfs_length(grid, start, goal) -> int | None:
    """Unit-cost shortest path length by plain breadth-first search."""
    height, width = len(grid), len(grid[0])
    if grid[start[0]][start[1]] == OBSTACLE or grid[goal[0]][goal[1]] == OBSTACLE:
        return None
    seen = {tuple(start)}
    queue = deque([(tuple(start), 0)])
    while queue:
        (row, col), length = queue.popleft()
        if (row, col) == tuple(goal):
            return length
        for d_row, d_col in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            r, c = row + d_row, col + d_col
            if 0 <= r < height and 0 <= c < width and grid[r][c] != OBSTACLE and (r, c) not in seen:
                seen.add((r, c))
                queue.append(((r, c), length + 1))
    return None


def assert_valid_path(grid, path, start, goal):
    assert path[0] == tuple(start)
    assert path[-1] == tuple(goal)
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    for row, col in path:
        assert grid[row][col] != OBSTACLE


def random_grid(rng: random.Random, size: int, density: float) -> list[list[int]]:
    grid = [[OBSTACLE if rng.random() < density else 0 for _ in range(size)] for _ in range(size)]
    grid[0][0] = 0
    grid[size - 1][size - 1] = 0
    return grid


class TestHeuristics:
    @pytest.mark.parametrize(
        "heuristic, expected",
        [
            (manhattan_distance, 7),
            (euclidean_distance, 5),
            (chebyshev_distance, 4),
        ],
    )
    def test_values(self, heuristic, expected):
        assert heuristic(Cell(0, 0), Cell(3, 4)) == pytest.approx(expected)

    def test_ordering(self):
        """Chebyshev <= Euclidean <= Manhattan, so all are admissible here."""
        a, b = Cell(2, 7), Cell(5, 1)
        assert chebyshev_distance(a, b) <= euclidean_distance(a, b) <= manhattan_distance(a, b)

    def test_symmetric(self):
        assert manhattan_distance(Cell(1, 2), Cell(4, 0)) == manhattan_distance(Cell(4, 0), Cell(1, 2))


class TestAStar:
    def test_worked_maze(self):
        result = a_star(MAZE, (0, 0), (4, 4))
        assert result is not None
        assert result.distance == 8
        assert len(result.path) == 9
        assert_valid_path(MAZE, result.path, (0, 0), (4, 4))
        assert result.nodes_explored > 0

    def test_start_is_goal(self):
        result = a_star(MAZE, (2, 2), (2, 2))
        assert result.path == [(2, 2)]
        assert result.distance == 0
        assert result.nodes_explored == 1

    def test_blocked_endpoints(self):
        assert a_star(MAZE, (1, 1), (4, 4)) is None
        assert a_star(MAZE, (0, 0), (1, 2)) is None

    def test_out_of_grid_endpoint(self):
        assert a_star(MAZE, (0, 0), (5, 5)) is None

    def test_unreachable(self):
        grid = [
            [0, 1, 0],
            [1, 1, 0],
            [0, 0, 0],
        ]
        assert a_star(grid, (0, 0), (2, 2)) is None

    @pytest.mark.parametrize("heuristic", [manhattan_distance, euclidean_distance, chebyshev_distance])
    def test_matches_bfs(self, heuristic):
        rng = random.Random(8)
        for _ in range(30):
            grid = random_grid(rng, 9, 0.3)
            result = a_star(grid, (0, 0), (8, 8), heuristic)
            expected = bfs_length(grid, (0, 0), (8, 8))
            if expected is None:
                assert result is None
            else:
                assert result.distance == expected
                assert_valid_path(grid, result.path, (0, 0), (8, 8))

    def test_manhattan_explores_no_more_than_zero_heuristic(self):
        """A better informed heuristic never expands more cells on an open grid."""
        grid = [[0] * 10 for _ in range(10)]
        informed = a_star(grid, (0, 0), (9, 9))
        blind = a_star(grid, (0, 0), (9, 9), lambda a, b: 0)
        assert informed.distance == blind.distance == 18
        assert informed.nodes_explored <= blind.nodes_explored


class TestAStarWithSteps:
    def test_result_matches_plain_run(self):
        result, steps = a_star_with_steps(MAZE, (0, 0), (4, 4))
        assert result == a_star(MAZE, (0, 0), (4, 4))
        assert steps[0].description == "Starting A* search from (0, 0) to (4, 4)"

    def test_final_snapshot(self):
        result, steps = a_star_with_steps(MAZE, (0, 0), (4, 4))
        last = steps[-1]
        assert last.current == (4, 4)
        assert last.g_score[(4, 4)] == result.distance
        assert last.description.startswith("Found goal at (4, 4)")

    def test_closed_set_grows(self):
        _, steps = a_star_with_steps(MAZE, (0, 0), (4, 4))
        for before, after in zip(steps, steps[1:]):
            assert before.closed_set <= after.closed_set
            assert not set(after.open_set) & after.closed_set

    def test_f_is_g_plus_h(self):
        _, steps = a_star_with_steps(MAZE, (0, 0), (4, 4))
        last = steps[-1]
        for cell, g in last.g_score.items():
            assert last.f_score[cell] == g + manhattan_distance(cell, Cell(4, 4))

    def test_no_path_snapshot(self):
        grid = [[0, 1, 0]]
        result, steps = a_star_with_steps(grid, (0, 0), (0, 2))
        assert result is None
        assert steps[-1].current is None
        assert steps[-1].description.startswith("No path")


class TestGreedyBestFirst:
    def test_finds_valid_path(self):
        result = greedy_best_first(MAZE, (0, 0), (4, 4))
        assert result is not None
        assert_valid_path(MAZE, result.path, (0, 0), (4, 4))
        assert result.distance == len(result.path) - 1

    def test_never_shorter_than_optimal(self):
        rng = random.Random(12)
        for _ in range(20):
            grid = random_grid(rng, 8, 0.25)
            expected = bfs_length(grid, (0, 0), (7, 7))
            result = greedy_best_first(grid, (0, 0), (7, 7))
            if expected is None:
                assert result is None
            else:
                assert result.distance >= expected
                assert_valid_path(grid, result.path, (0, 0), (7, 7))

    def test_open_grid_is_direct(self):
        grid = [[0] * 6 for _ in range(6)]
        result = greedy_best_first(grid, (0, 0), (5, 5))
        assert result.distance == 10
        assert result.nodes_explored == 11

    def test_blocked_endpoint(self):
        assert greedy_best_first(MAZE, (0, 0), (1, 1)) is None

    def test_euclidean_heuristic(self):
        result = greedy_best_first(MAZE, (0, 0), (4, 4), euclidean_distance)
        assert result.path[-1] == (4, 4)
        assert math.isfinite(result.distance)
