"""Tests for structures/fenwick.py"""

import random

import pytest
from structures.fenwick import (
    FenwickTree,
    FenwickTree2D,
    RangeUpdateFenwickTree,
    count_inversions,
)


class TestFenwickTree:
    def test_worked_example(self):
        tree = FenwickTree.from_values([1, 3, 5, 7, 9, 11])
        assert [tree.prefix_sum(i) for i in range(6)] == [1, 4, 9, 16, 25, 36]
        assert tree.query(1, 3) == 15
        tree.update(2, 10)
        assert tree.query(0, 5) == 46
        assert tree.get(2) == 15

    def test_from_values_matches_updates(self):
        """The O(n) build gives the same tree as n point updates."""
        values = [4, -2, 7, 0, 3, 3, -5, 8, 1]
        built = FenwickTree.from_values(values)
        incremental = FenwickTree(len(values))
        for i, value in enumerate(values):
            incremental.update(i, value)
        for i in range(len(values)):
            assert built.prefix_sum(i) == incremental.prefix_sum(i)

    def test_against_brute_force(self):
        rng = random.Random(3)
        values = [rng.randint(-10, 10) for _ in range(37)]
        tree = FenwickTree.from_values(values)
        for _ in range(200):
            i = rng.randrange(len(values))
            delta = rng.randint(-5, 5)
            values[i] += delta
            tree.update(i, delta)

            left = rng.randrange(len(values))
            right = rng.randrange(left, len(values))
            assert tree.query(left, right) == sum(values[left : right + 1])
            assert tree.prefix_sum(right) == sum(values[: right + 1])

    def test_empty_ranges(self):
        tree = FenwickTree.from_values([1, 2, 3])
        assert tree.prefix_sum(-1) == 0
        assert tree.query(2, 1) == 0

    def test_set(self):
        tree = FenwickTree.from_values([1, 2, 3])
        tree.set(1, 10)
        assert tree.get(1) == 10
        assert tree.query(0, 2) == 14

    @pytest.mark.parametrize("index", [-1, 3])
    def test_update_out_of_range(self, index):
        tree = FenwickTree(3)
        with pytest.raises(IndexError, match="out of range"):
            tree.update(index, 1)

    def test_prefix_sum_out_of_range(self):
        tree = FenwickTree(3)
        with pytest.raises(IndexError):
            tree.prefix_sum(3)

    @pytest.mark.parametrize("index", [-2, -5])
    def test_prefix_sum_below_minus_one(self, index):
        """Only -1 is accepted below zero, as the empty prefix."""
        tree = FenwickTree.from_values([1, 2, 3])
        with pytest.raises(IndexError, match="out of range"):
            tree.prefix_sum(index)


class TestFindFirst:
    def test_frequency_table(self):
        """prefix sums 1, 4, 9, 16, 25, 36"""
        tree = FenwickTree.from_values([1, 3, 5, 7, 9, 11])
        assert tree.find_first(1) == 0
        assert tree.find_first(2) == 1
        assert tree.find_first(4) == 1
        assert tree.find_first(10) == 3
        assert tree.find_first(36) == 5

    def test_zero_values(self):
        tree = FenwickTree.from_values([0, 0, 2, 0, 3])
        assert tree.find_first(1) == 2
        assert tree.find_first(3) == 4

    def test_target_above_total(self):
        tree = FenwickTree.from_values([1, 1, 1])
        assert tree.find_first(4) == 3

    def test_against_linear_scan(self):
        rng = random.Random(5)
        values = [rng.randint(0, 4) for _ in range(23)]
        tree = FenwickTree.from_values(values)
        total = sum(values)
        for target in range(1, total + 2):
            running = 0
            expected = len(values)
            for i, value in enumerate(values):
                running += value
                if running >= target:
                    expected = i
                    break
            assert tree.find_first(target) == expected

    def test_negative_values_rejected(self):
        tree = FenwickTree.from_values([1, -1, 2])
        with pytest.raises(ValueError, match="non-negative"):
            tree.find_first(1)

    def test_negative_cleared_by_update(self):
        """The precondition follows the current values, not the history."""
        tree = FenwickTree.from_values([1, 2, 3])
        tree.update(1, -5)
        with pytest.raises(ValueError):
            tree.find_first(1)
        tree.update(1, 5)
        assert tree.find_first(3) == 1


class TestFenwickTree2D:
    def test_against_brute_force(self):
        rng = random.Random(9)
        rows, cols = 6, 8
        grid = [[0] * cols for _ in range(rows)]
        tree = FenwickTree2D(rows, cols)
        for _ in range(60):
            r, c = rng.randrange(rows), rng.randrange(cols)
            delta = rng.randint(-3, 6)
            grid[r][c] += delta
            tree.update(r, c, delta)

        for _ in range(60):
            r1, r2 = sorted((rng.randrange(rows), rng.randrange(rows)))
            c1, c2 = sorted((rng.randrange(cols), rng.randrange(cols)))
            expected = sum(grid[r][c] for r in range(r1, r2 + 1) for c in range(c1, c2 + 1))
            assert tree.query(r1, c1, r2, c2) == expected

    def test_out_of_range(self):
        tree = FenwickTree2D(2, 2)
        with pytest.raises(IndexError):
            tree.update(2, 0, 1)

    @pytest.mark.parametrize("row, col", [(-2, 0), (-3, 1), (0, -2), (2, 0), (0, 2)])
    def test_prefix_sum_out_of_range(self, row, col):
        tree = FenwickTree2D(2, 2)
        with pytest.raises(IndexError, match="out of range"):
            tree.prefix_sum(row, col)

    def test_empty_prefix(self):
        tree = FenwickTree2D(2, 2)
        tree.update(0, 0, 5)
        assert tree.prefix_sum(-1, 1) == 0
        assert tree.prefix_sum(1, -1) == 0


class TestRangeUpdateFenwickTree:
    def test_range_add(self):
        tree = RangeUpdateFenwickTree(5)
        tree.range_update(1, 3, 10)
        tree.range_update(0, 1, 2)
        assert [tree.point_query(i) for i in range(5)] == [2, 12, 10, 10, 0]

    def test_range_reaching_last_index(self):
        tree = RangeUpdateFenwickTree(4)
        tree.range_update(2, 3, 7)
        assert [tree.point_query(i) for i in range(4)] == [0, 0, 7, 7]

    def test_against_brute_force(self):
        rng = random.Random(13)
        n = 20
        values = [0] * n
        tree = RangeUpdateFenwickTree(n)
        for _ in range(100):
            left = rng.randrange(n)
            right = rng.randrange(left, n)
            delta = rng.randint(-4, 4)
            for i in range(left, right + 1):
                values[i] += delta
            tree.range_update(left, right, delta)
        assert [tree.point_query(i) for i in range(n)] == values

    def test_invalid_range(self):
        tree = RangeUpdateFenwickTree(3)
        with pytest.raises(IndexError):
            tree.range_update(1, 3, 1)


class TestCountInversions:
    @pytest.mark.parametrize(
        "values, expected",
        [
            ([], 0),
            ([1, 2, 3], 0),
            ([3, 2, 1], 3),
            ([3, 1, 2, 5, 4], 3),
            ([2, 2, 1], 2),
        ],
    )
    def test_small_cases(self, values, expected):
        assert count_inversions(values) == expected

    def test_against_quadratic_count(self):
        rng = random.Random(17)
        values = [rng.randint(0, 30) for _ in range(60)]
        expected = sum(
            1
            for i in range(len(values))
            for j in range(i + 1, len(values))
            if values[i] > values[j]
        )
        assert count_inversions(values) == expected
