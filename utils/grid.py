r"""
Grid helpers shared by the grid path finders.

A grid is a row-major matrix of ints:
    0          free cell, entering it costs 1
    OBSTACLE   wall, never entered
    other      free cell, entering it costs its value

Cells are addressed as Cell(row, col) and move in the 4-neighbourhood.
"""

from collections.abc import Iterator, Mapping

from constants import GRID_DIRECTIONS, OBSTACLE
from localtypes import Cell, Grid


def proportions(grid: Grid) -> tuple[int, int]:
    """(height, width); an empty grid is 0 x 0."""
    height = len(grid)
    width = len(grid[0]) if height else 0
    return height, width


def in_bounds(grid: Grid, cell: Cell) -> bool:
    height, width = proportions(grid)
    return 0 <= cell.row < height and 0 <= cell.col < width


def is_passable(grid: Grid, cell: Cell) -> bool:
    return in_bounds(grid, cell) and grid[cell.row][cell.col] != OBSTACLE


def entry_cost(grid: Grid, cell: Cell) -> int:
    """Cost of stepping onto cell."""
    value = grid[cell.row][cell.col]
    return 1 if value == 0 else value


def neighbours(grid: Grid, cell: Cell) -> Iterator[Cell]:
    """Passable 4-neighbours of cell, in GRID_DIRECTIONS order."""
    for d_row, d_col in GRID_DIRECTIONS:
        neighbour = Cell(cell.row + d_row, cell.col + d_col)
        if is_passable(grid, neighbour):
            yield neighbour


def walk_back(came_from: Mapping[Cell, Cell], goal: Cell) -> list[Cell]:
    """Follows came_from links from goal to the cell that has none."""
    path = [goal]
    while path[-1] in came_from:
        path.append(came_from[path[-1]])
    path.reverse()
    return path
