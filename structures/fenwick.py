"""
Fenwick trees (Binary Indexed Trees).

The public API is 0-indexed; storage is 1-indexed so that index i covers
the range (i - lowbit(i), i], where lowbit(i) = i & -i.

Classes:
    FenwickTree            - point update, prefix/range sum, order statistics
    FenwickTree2D          - point update, rectangle sum
    RangeUpdateFenwickTree - range add, point query (difference array)

Functions:
    count_inversions(values) - number of pairs i < j with values[i] > values[j]
"""

from collections.abc import Iterable, Sequence

from typing_extensions import Self


class FenwickTree:
    """
    Prefix sums with O(log n) point updates.

    Raw values are mirrored alongside the tree so that get/set are O(1)/O(log n)
    and the non-negativity precondition of find_first can be checked in O(1).
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Size must be non-negative, got {size}")
        self._n = size
        self._tree: list[float] = [0] * (size + 1)
        self._values: list[float] = [0] * size
        self._negatives = 0

    @classmethod
    def from_values(cls, values: Sequence[float]) -> Self:
        """Builds the tree in O(n) by pushing each node into its parent once."""
        tree = cls(len(values))
        tree._values = list(values)
        tree._negatives = sum(1 for value in values if value < 0)
        for i, value in enumerate(values, start=1):
            tree._tree[i] += value
            parent = i + (i & -i)
            if parent <= tree._n:
                tree._tree[parent] += tree._tree[i]
        return tree

    def __len__(self) -> int:
        return self._n

    def _check(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"Index {i} out of range [0, {self._n})")

    def update(self, i: int, delta: float) -> None:
        """Add delta to the value at index i."""
        self._check(i)
        old = self._values[i]
        new = old + delta
        self._negatives += (new < 0) - (old < 0)
        self._values[i] = new

        i += 1
        while i <= self._n:
            self._tree[i] += delta
            i += i & -i

    def get(self, i: int) -> float:
        self._check(i)
        return self._values[i]

    def set(self, i: int, value: float) -> None:
        """Overwrite the value at index i."""
        self.update(i, value - self.get(i))

    def prefix_sum(self, i: int) -> float:
        """Sum of values[0..i] inclusive. prefix_sum(-1) is 0."""
        if not -1 <= i < self._n:
            raise IndexError(f"Index {i} out of range [-1, {self._n})")
        i += 1
        total: float = 0
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def query(self, left: int, right: int) -> float:
        """Sum of values[left..right] inclusive, 0 for an empty range."""
        if left > right:
            return 0
        self._check(left)
        if left == 0:
            return self.prefix_sum(right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    def find_first(self, target: float) -> int:
        """
        Smallest index i such that prefix_sum(i) >= target.

        Binary lifting over the implicit tree: O(log n). Only meaningful when
        every value is non-negative (prefix sums are then monotone), which is
        the frequency-table use case. Returns len(self) when the total is
        below target.

        Raises:
            ValueError: If some value is negative.
        """
        if self._negatives:
            raise ValueError(
                f"find_first requires non-negative values ({self._negatives} negative)"
            )

        position = 0
        accumulated: float = 0
        step = 1 << (self._n.bit_length() - 1) if self._n else 0
        while step:
            candidate = position + step
            if candidate <= self._n and accumulated + self._tree[candidate] < target:
                position = candidate
                accumulated += self._tree[candidate]
            step >>= 1

        # position is the 1-indexed last slot whose prefix stays below target
        return position


class FenwickTree2D:
    """Rectangle sums over a rows x cols grid with O(log r * log c) updates."""

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = rows
        self._cols = cols
        self._tree: list[list[float]] = [[0] * (cols + 1) for _ in range(rows + 1)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"Cell ({row}, {col}) out of range [0, {self._rows}) x [0, {self._cols})"
            )

    def update(self, row: int, col: int, delta: float) -> None:
        self._check(row, col)
        i = row + 1
        while i <= self._rows:
            j = col + 1
            while j <= self._cols:
                self._tree[i][j] += delta
                j += j & -j
            i += i & -i

    def prefix_sum(self, row: int, col: int) -> float:
        """Sum of the rectangle (0, 0)..(row, col) inclusive."""
        if not (-1 <= row < self._rows and -1 <= col < self._cols):
            raise IndexError(
                f"Cell ({row}, {col}) out of range [-1, {self._rows}) x [-1, {self._cols})"
            )
        total: float = 0
        i = row + 1
        while i > 0:
            j = col + 1
            while j > 0:
                total += self._tree[i][j]
                j -= j & -j
            i -= i & -i
        return total

    def query(self, row1: int, col1: int, row2: int, col2: int) -> float:
        """Sum of the rectangle (row1, col1)..(row2, col2) inclusive."""
        self._check(row1, col1)
        self._check(row2, col2)
        total = self.prefix_sum(row2, col2)
        total -= self.prefix_sum(row1 - 1, col2)
        total -= self.prefix_sum(row2, col1 - 1)
        total += self.prefix_sum(row1 - 1, col1 - 1)
        return total


class RangeUpdateFenwickTree:
    """
    Range add / point query.

    The tree stores the difference array d, where values[i] = d[0] + ... + d[i],
    so adding delta to [l, r] is d[l] += delta, d[r + 1] -= delta.
    """

    def __init__(self, size: int) -> None:
        self._n = size
        # One spare slot absorbs the d[r + 1] write when r is the last index
        self._tree = FenwickTree(size + 1)

    def __len__(self) -> int:
        return self._n

    def range_update(self, left: int, right: int, delta: float) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"Range [{left}, {right}] out of [0, {self._n})")
        self._tree.update(left, delta)
        self._tree.update(right + 1, -delta)

    def point_query(self, i: int) -> float:
        if not 0 <= i < self._n:
            raise IndexError(f"Index {i} out of range [0, {self._n})")
        return self._tree.prefix_sum(i)


def count_inversions(values: Iterable[float]) -> int:
    """
    Number of pairs i < j with values[i] > values[j], in O(n log n).

    Scans right to left, counting how many strictly smaller values were
    already seen, after compressing values to ranks.
    """
    items = list(values)
    rank = {value: i for i, value in enumerate(sorted(set(items)))}
    seen = FenwickTree(len(rank))

    inversions = 0
    for value in reversed(items):
        r = rank[value]
        inversions += int(seen.prefix_sum(r - 1))
        seen.update(r, 1)
    return inversions
