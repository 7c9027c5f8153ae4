"""
Segment trees over a fixed-length sequence.

Nodes live in a flat list of size 4n: node 1 is the root and node k has
children 2k and 2k + 1. Every node covers a contiguous range [start, end]
and stores the combine of that range.

SegmentTree      - generic associative combine with identity, point assignment
LazySegmentTree  - range add with lazy propagation (sum, min or max aggregate)

Factories:
    sum_segment_tree, min_segment_tree, max_segment_tree, gcd_segment_tree
"""

import math
from collections.abc import Sequence
from enum import Enum
from typing import Generic, TypeVar

from constants import INF
from localtypes import Combine

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """
    Range queries for any associative combine with an identity element.

    Example:
        >>> tree = SegmentTree([1, 3, 5], lambda a, b: a + b, 0)
        >>> tree.query(0, 1)
        4
    """

    def __init__(self, values: Sequence[T], combine: Combine[T], identity: T) -> None:
        self._n = len(values)
        self._combine = combine
        self._identity = identity
        self._tree: list[T] = [identity] * (4 * self._n)
        if self._n > 0:
            self._build(values, 1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, values: Sequence[T], node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = values[start]
            return
        mid = (start + end) // 2
        self._build(values, 2 * node, start, mid)
        self._build(values, 2 * node + 1, mid + 1, end)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, i: int, value: T) -> None:
        """Set values[i] = value and recombine its ancestors."""
        if not 0 <= i < self._n:
            raise IndexError(f"Index {i} out of range [0, {self._n})")
        self._update(1, 0, self._n - 1, i, value)

    def _update(self, node: int, start: int, end: int, i: int, value: T) -> None:
        if start == end:
            self._tree[node] = value
            return
        mid = (start + end) // 2
        if i <= mid:
            self._update(2 * node, start, mid, i, value)
        else:
            self._update(2 * node + 1, mid + 1, end, i, value)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def query(self, left: int, right: int) -> T:
        """Combine of values[left..right] inclusive; identity for an empty range."""
        if left > right or self._n == 0:
            return self._identity
        if left < 0 or right >= self._n:
            raise IndexError(f"Range [{left}, {right}] out of [0, {self._n})")
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> T:
        if right < start or end < left:
            return self._identity
        if left <= start and end <= right:
            return self._tree[node]
        mid = (start + end) // 2
        return self._combine(
            self._query(2 * node, start, mid, left, right),
            self._query(2 * node + 1, mid + 1, end, left, right),
        )


def sum_segment_tree(values: Sequence[float]) -> SegmentTree[float]:
    return SegmentTree(values, lambda a, b: a + b, 0)


def min_segment_tree(values: Sequence[float]) -> SegmentTree[float]:
    return SegmentTree(values, min, INF)


def max_segment_tree(values: Sequence[float]) -> SegmentTree[float]:
    return SegmentTree(values, max, -INF)


def gcd_segment_tree(values: Sequence[int]) -> SegmentTree[int]:
    return SegmentTree(values, math.gcd, 0)


class RangeAggregate(Enum):
    """Aggregates that stay exact under a pending range add."""

    SUM = "sum"
    MIN = "min"
    MAX = "max"


class LazySegmentTree:
    """
    Range add and range query in O(log n) each.

    A node's lazy value is a delta already applied to the node's own
    aggregate but not yet to its children. Any descent below a node first
    pushes its delta down, otherwise children would answer with stale
    aggregates.
    """

    def __init__(
        self,
        values: Sequence[float],
        aggregate: RangeAggregate = RangeAggregate.SUM,
    ) -> None:
        self._n = len(values)
        self._aggregate = aggregate

        match aggregate:
            case RangeAggregate.SUM:
                self._combine: Combine[float] = lambda a, b: a + b
                self._identity: float = 0
            case RangeAggregate.MIN:
                self._combine = min
                self._identity = INF
            case RangeAggregate.MAX:
                self._combine = max
                self._identity = -INF

        self._tree: list[float] = [self._identity] * (4 * self._n)
        self._lazy: list[float] = [0] * (4 * self._n)
        if self._n > 0:
            self._build(values, 1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, values: Sequence[float], node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = values[start]
            return
        mid = (start + end) // 2
        self._build(values, 2 * node, start, mid)
        self._build(values, 2 * node + 1, mid + 1, end)
        self._pull(node)

    def _pull(self, node: int) -> None:
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def _apply(self, node: int, start: int, end: int, delta: float) -> None:
        """Add delta to every value under node, deferring the children."""
        if self._aggregate is RangeAggregate.SUM:
            self._tree[node] += delta * (end - start + 1)
        else:
            self._tree[node] += delta
        self._lazy[node] += delta

    def _push_down(self, node: int, start: int, end: int) -> None:
        delta = self._lazy[node]
        if delta == 0:
            return
        mid = (start + end) // 2
        self._apply(2 * node, start, mid, delta)
        self._apply(2 * node + 1, mid + 1, end, delta)
        self._lazy[node] = 0

    def _check_range(self, left: int, right: int) -> None:
        if left < 0 or right >= self._n:
            raise IndexError(f"Range [{left}, {right}] out of [0, {self._n})")

    def range_update(self, left: int, right: int, delta: float) -> None:
        """Add delta to every value in values[left..right] inclusive."""
        if left > right:
            return
        self._check_range(left, right)
        self._range_update(1, 0, self._n - 1, left, right, delta)

    def _range_update(
        self, node: int, start: int, end: int, left: int, right: int, delta: float
    ) -> None:
        if right < start or end < left:
            return
        if left <= start and end <= right:
            self._apply(node, start, end, delta)
            return
        self._push_down(node, start, end)
        mid = (start + end) // 2
        self._range_update(2 * node, start, mid, left, right, delta)
        self._range_update(2 * node + 1, mid + 1, end, left, right, delta)
        self._pull(node)

    def update(self, i: int, value: float) -> None:
        """Set values[i] = value, flushing pending deltas on the way down."""
        self._check_range(i, i)
        self._update(1, 0, self._n - 1, i, value)

    def _update(self, node: int, start: int, end: int, i: int, value: float) -> None:
        if start == end:
            self._tree[node] = value
            self._lazy[node] = 0
            return
        self._push_down(node, start, end)
        mid = (start + end) // 2
        if i <= mid:
            self._update(2 * node, start, mid, i, value)
        else:
            self._update(2 * node + 1, mid + 1, end, i, value)
        self._pull(node)

    def query(self, left: int, right: int) -> float:
        """Aggregate of values[left..right] inclusive; identity for an empty range."""
        if left > right or self._n == 0:
            return self._identity
        self._check_range(left, right)
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> float:
        if right < start or end < left:
            return self._identity
        if left <= start and end <= right:
            return self._tree[node]
        self._push_down(node, start, end)
        mid = (start + end) // 2
        return self._combine(
            self._query(2 * node, start, mid, left, right),
            self._query(2 * node + 1, mid + 1, end, left, right),
        )
