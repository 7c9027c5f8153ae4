"""
Least Frequently Used cache with O(1) get and put.

Entries are grouped in one doubly-linked list per access frequency. Within a
bucket the front is the most recently used entry, so eviction takes the back
of the lowest-frequency bucket: least frequently used, ties broken by least
recently used.
"""

import logging
from collections.abc import Hashable
from typing import Generic, TypeVar

from .linked_list import LinkedList, Node

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LFUCache(Generic[K, V]):
    """
    Fixed-capacity cache evicting the least frequently used entry.

    Invariant: while the cache is non-empty, min_frequency names a bucket
    holding at least one entry.

    Example:
        >>> cache = LFUCache[int, str](2)
        >>> cache.put(1, "one")
        >>> cache.put(2, "two")
        >>> cache.get(1)
        'one'
        >>> cache.put(3, "three")  # evicts 2, used once
        >>> sorted(cache.frequencies().items())
        [(1, 2), (3, 1)]
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._nodes: dict[K, Node[K, V]] = {}
        self._buckets: dict[int, LinkedList[K, V]] = {}
        self._min_frequency = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def min_frequency(self) -> int:
        """Lowest access frequency present; 0 when empty."""
        return self._min_frequency

    def get(self, key: K, default: V | None = None) -> V | None:
        node = self._nodes.get(key)
        if node is None:
            return default
        self._touch(node)
        return node.value

    def put(self, key: K, value: V) -> None:
        node = self._nodes.get(key)
        if node is not None:
            node.value = value
            self._touch(node)
            return

        if len(self._nodes) >= self._capacity:
            self._evict()

        node = Node(key, value)
        self._nodes[key] = node
        self._bucket(1).push_front(node)
        self._min_frequency = 1

    def has(self, key: K) -> bool:
        return key in self._nodes

    def delete(self, key: K) -> bool:
        """Remove key; returns whether it was present."""
        node = self._nodes.pop(key, None)
        if node is None:
            return False

        frequency = node.frequency
        self._unlink(node)
        if frequency == self._min_frequency and frequency not in self._buckets:
            # Any surviving bucket may be the new minimum, not just frequency + 1
            self._min_frequency = min(self._buckets, default=0)
        return True

    def size(self) -> int:
        return len(self._nodes)

    def clear(self) -> None:
        self._nodes.clear()
        self._buckets.clear()
        self._min_frequency = 0

    def frequencies(self) -> dict[K, int]:
        """Access count of every cached key."""
        return {key: node.frequency for key, node in self._nodes.items()}

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def _bucket(self, frequency: int) -> LinkedList[K, V]:
        bucket = self._buckets.get(frequency)
        if bucket is None:
            bucket = self._buckets[frequency] = LinkedList()
        return bucket

    def _unlink(self, node: Node[K, V]) -> None:
        """Remove node from its bucket, retiring the bucket if it empties."""
        bucket = self._buckets[node.frequency]
        bucket.remove(node)
        if not bucket:
            del self._buckets[node.frequency]

    def _touch(self, node: Node[K, V]) -> None:
        """Move node to the front of the next frequency bucket."""
        old_frequency = node.frequency
        self._unlink(node)
        if old_frequency == self._min_frequency and old_frequency not in self._buckets:
            self._min_frequency = old_frequency + 1

        node.frequency += 1
        self._bucket(node.frequency).push_front(node)

    def _evict(self) -> None:
        bucket = self._buckets[self._min_frequency]
        victim = bucket.pop_back()
        assert victim is not None
        if not bucket:
            del self._buckets[self._min_frequency]
        del self._nodes[victim.key]
        logger.debug(
            f"Evicted key {victim.key!r} used {victim.frequency} time(s)"
        )
