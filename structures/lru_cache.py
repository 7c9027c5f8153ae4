"""
Least Recently Used caches.

LRUCache         - O(1) get/put/delete with a dict + doubly-linked list
LRUCacheWithTTL  - LRUCache whose entries also expire after a time to live
"""

import logging
import time
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from constants import DEFAULT_TTL

from .linked_list import LinkedList, Node

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """
    Fixed-capacity cache evicting the least recently used entry.

    Reading with get counts as a use: it moves the entry to the front.
    has does not.

    Example:
        >>> cache = LRUCache[int, str](2)
        >>> cache.put(1, "one")
        >>> cache.put(2, "two")
        >>> cache.get(1)
        'one'
        >>> cache.put(3, "three")  # evicts 2
        >>> cache.has(2)
        False
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._nodes: dict[K, Node[K, V]] = {}
        self._order: LinkedList[K, V] = LinkedList()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K, default: V | None = None) -> V | None:
        node = self._nodes.get(key)
        if node is None:
            return default
        self._order.move_to_front(node)
        return node.value

    def put(self, key: K, value: V) -> None:
        node = self._nodes.get(key)
        if node is not None:
            node.value = value
            self._order.move_to_front(node)
            return

        node = Node(key, value)
        self._nodes[key] = node
        self._order.push_front(node)

        if len(self._nodes) > self._capacity:
            evicted = self._order.pop_back()
            assert evicted is not None
            del self._nodes[evicted.key]
            logger.debug(f"Evicted least recently used key {evicted.key!r}")

    def has(self, key: K) -> bool:
        return key in self._nodes

    def delete(self, key: K) -> bool:
        """Remove key; returns whether it was present."""
        node = self._nodes.pop(key, None)
        if node is None:
            return False
        self._order.remove(node)
        return True

    def size(self) -> int:
        return len(self._nodes)

    def clear(self) -> None:
        self._nodes.clear()
        self._order.clear()

    def keys(self) -> list[K]:
        """Keys from most to least recently used."""
        return [node.key for node in self._order]

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self._nodes


class LRUCacheWithTTL(Generic[K, V]):
    """
    LRU cache whose entries expire ttl seconds after being written.

    Expired entries are treated as absent and dropped lazily when touched by
    get or has; nothing is purged in the background. They still occupy a slot
    until then, so they take part in LRU eviction like any other entry.
    """

    def __init__(
        self,
        capacity: int,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: LRUCache[K, tuple[V, float]] = LRUCache(capacity)
        self._default_ttl = default_ttl
        self._clock = clock

    def _live(self, key: K) -> tuple[V, float] | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        _, expiry = entry
        if self._clock() > expiry:
            self._cache.delete(key)
            logger.debug(f"Dropped expired key {key!r}")
            return None
        return entry

    def get(self, key: K, default: V | None = None) -> V | None:
        entry = self._live(key)
        return default if entry is None else entry[0]

    def put(self, key: K, value: V, ttl: float | None = None) -> None:
        lifetime = self._default_ttl if ttl is None else ttl
        self._cache.put(key, (value, self._clock() + lifetime))

    def has(self, key: K) -> bool:
        return self._live(key) is not None

    def delete(self, key: K) -> bool:
        return self._cache.delete(key)

    def size(self) -> int:
        """Stored entries, including expired ones not yet touched."""
        return self._cache.size()

    def __len__(self) -> int:
        return self.size()
