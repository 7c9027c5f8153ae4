"""
Union-Find (Disjoint Set Union) data structures.

Efficient data structure for tracking disjoint sets of dense integer
elements in [0, n):
- find(x): Which set contains x? - O(α(n)) amortized
- union(x, y): Merge sets containing x and y - O(α(n)) amortized
- connected(x, y): Are x and y in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Variants:
    WeightedUnionFind      - tracks potential differences along the forest
    UnionFindWithRollback  - no path compression, undoable unions
"""

from constants import WEIGHT_TOLERANCE


def _check_index(element: int, n: int) -> None:
    if not 0 <= element < n:
        raise IndexError(f"Element {element} out of range [0, {n})")


class UnionFind:
    """
    Union-Find with path compression and union by rank.

    Example:
        >>> uf = UnionFind(5)
        >>> uf.union(1, 2)
        True
        >>> uf.union(2, 3)
        True
        >>> uf.connected(1, 3)
        True
        >>> uf.count
        3
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n}")
        self._parent: list[int] = list(range(n))
        self._rank: list[int] = [0] * n
        self._size: list[int] = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def find(self, element: int) -> int:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: flattens the tree by pointing all nodes
        along the path directly to the root.
        """
        _check_index(element, len(self._parent))

        # Find root
        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression: point all nodes to root
        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Uses union by rank: attaches the shorter tree under the taller one
        to keep trees balanced.

        Returns False if x and y already were in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        # Attach smaller tree under larger tree
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        elif self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1

        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def set_size(self, element: int) -> int:
        """Number of elements in the set containing element."""
        return self._size[self.find(element)]

    def members(self, element: int) -> list[int]:
        """All elements sharing a set with element, in increasing order."""
        root = self.find(element)
        return [i for i in range(len(self._parent)) if self.find(i) == root]

    def sets(self) -> dict[int, list[int]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[int, list[int]] = {}
        for element in range(len(self._parent)):
            sets.setdefault(self.find(element), []).append(element)
        return sets


class WeightedUnionFind:
    """
    Union-Find storing, for each element, its potential relative to its root.

    union(x, y, w) records value[x] - value[y] = w. Contradictory constraints
    are reported, not applied.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n}")
        self._parent: list[int] = list(range(n))
        # Potential of each element relative to its parent
        self._weight: list[float] = [0.0] * n

    def find(self, element: int) -> tuple[int, float]:
        """Returns (root, potential of element relative to root)."""
        _check_index(element, len(self._parent))

        path = []
        root = element
        while self._parent[root] != root:
            path.append(root)
            root = self._parent[root]

        # Compress from the node closest to the root outwards
        accumulated = 0.0
        for node in reversed(path):
            accumulated += self._weight[node]
            self._weight[node] = accumulated
            self._parent[node] = root

        return root, self._weight[element] if path else 0.0

    def union(self, x: int, y: int, weight: float) -> bool:
        """
        Record value[x] - value[y] = weight.

        Returns whether the constraint is consistent with the known ones.
        """
        root_x, weight_x = self.find(x)
        root_y, weight_y = self.find(y)

        if root_x == root_y:
            return abs(weight_x - weight_y - weight) < WEIGHT_TOLERANCE

        self._parent[root_x] = root_y
        self._weight[root_x] = weight_y - weight_x + weight
        return True

    def relative_weight(self, x: int, y: int) -> float | None:
        """value[x] - value[y], or None if x and y are unrelated."""
        root_x, weight_x = self.find(x)
        root_y, weight_y = self.find(y)
        if root_x != root_y:
            return None
        return weight_x - weight_y


class UnionFindWithRollback:
    """
    Union by rank without path compression, so every union can be undone.

    Useful for offline algorithms that explore and retract merges.
    find is O(log n) since trees stay balanced by rank.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n}")
        self._parent: list[int] = list(range(n))
        self._rank: list[int] = [0] * n
        # (attached root, its previous parent, rank of the new root before union)
        self._history: list[tuple[int, int, int]] = []

    def find(self, element: int) -> int:
        _check_index(element, len(self._parent))
        while self._parent[element] != element:
            element = self._parent[element]
        return element

    def union(self, x: int, y: int) -> bool:
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x

        self._history.append((root_y, self._parent[root_y], self._rank[root_x]))
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def save(self) -> int:
        """Checkpoint to pass to rollback."""
        return len(self._history)

    def rollback(self, checkpoint: int) -> None:
        """Undo every union performed after checkpoint was taken."""
        while len(self._history) > checkpoint:
            attached, previous_parent, previous_rank = self._history.pop()
            new_root = self._parent[attached]
            self._parent[attached] = previous_parent
            self._rank[new_root] = previous_rank
