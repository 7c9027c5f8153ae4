"""
Type definitions for graph and range-structure operations.

This module contains the custom types used throughout the library,
organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import NamedTuple, TypeVar

# Basic type variables for generic operations
T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Vertices are dense integers in [0, V)
type Vertex = int
type Weight = float

# Graph representations
type Graph = Mapping[Vertex, Sequence[Vertex]]  # vertex -> neighbours
type WeightedGraph = Mapping[
    Vertex, Sequence[tuple[Vertex, Weight]]
]  # vertex -> [(neighbour, weight), ...]
type WeightedEdge = tuple[Vertex, Vertex, Weight]  # (from, to, weight)
type EdgeList = Sequence[WeightedEdge]

# Relaxation state
type Distances = dict[Vertex, Weight]
type Predecessors = dict[Vertex, Vertex]


# Grid coordinates
class Cell(NamedTuple):
    row: int
    col: int


type Grid = Sequence[Sequence[int]]  # grid[row][col] -> 0 free, 1 wall, >1 cost
type Heuristic = Callable[[Cell, Cell], float]

# Range structures
type Combine[T] = Callable[[T, T], T]


def as_cell(position: Sequence[int]) -> Cell:
    """Normalizes a (row, col) pair to a Cell."""
    row, col = position
    return Cell(row, col)


__all__ = [
    # Type variables
    "T",
    "K",
    "V",
    # Graph types
    "Vertex",
    "Weight",
    "Graph",
    "WeightedGraph",
    "WeightedEdge",
    "EdgeList",
    "Distances",
    "Predecessors",
    # Grid types
    "Cell",
    "Grid",
    "Heuristic",
    "as_cell",
    # Range structures
    "Combine",
]
