"""
Snapshots produced by the *_with_steps variants.

Each snapshot is an immutable record of the algorithm state at one
transition, enough to render one animation frame. They carry no behaviour;
the last snapshot of a run always agrees with the returned result.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from localtypes import Cell, Vertex, Weight, WeightedEdge

K = TypeVar("K")
V = TypeVar("V")


def freeze(mapping: Mapping[K, V]) -> Mapping[K, V]:
    """Read-only copy, detached from the live mapping."""
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class DijkstraStep:
    distances: Mapping[Vertex, Weight]
    previous: Mapping[Vertex, Vertex]
    visited: frozenset[Vertex]
    frontier: tuple[tuple[Weight, Vertex], ...]
    current: Vertex | None
    description: str


@dataclass(frozen=True)
class AStarStep:
    open_set: tuple[Cell, ...]
    closed_set: frozenset[Cell]
    current: Cell | None
    g_score: Mapping[Cell, float]
    f_score: Mapping[Cell, float]
    came_from: Mapping[Cell, Cell]
    description: str


@dataclass(frozen=True)
class MSTStep:
    candidates: tuple[WeightedEdge, ...]
    current_edge: WeightedEdge | None
    mst_edges: tuple[WeightedEdge, ...]
    total_weight: Weight
    description: str
