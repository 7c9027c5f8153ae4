"""
Intrusive doubly-linked list shared by the LRU and LFU caches.

Head and tail are dummy sentinels, so splicing never special-cases the ends.
The front (next to head) is the most recently inserted entry.
"""

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Node(Generic[K, V]):
    """Cache entry owning its key, value and links."""

    __slots__ = ("key", "value", "frequency", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.frequency = 1
        self.prev: Node[K, V] | None = None
        self.next: Node[K, V] | None = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.value!r}, frequency={self.frequency})"


class LinkedList(Generic[K, V]):
    def __init__(self) -> None:
        sentinel: Any = None
        self._head: Node[K, V] = Node(sentinel, sentinel)
        self._tail: Node[K, V] = Node(sentinel, sentinel)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node[K, V]]:
        """Front to back."""
        node = self._head.next
        while node is not self._tail:
            assert node is not None
            yield node
            node = node.next

    def push_front(self, node: Node[K, V]) -> None:
        first = self._head.next
        assert first is not None
        node.prev = self._head
        node.next = first
        first.prev = node
        self._head.next = node
        self._size += 1

    def remove(self, node: Node[K, V]) -> None:
        assert node.prev is not None and node.next is not None, "Node not linked"
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def move_to_front(self, node: Node[K, V]) -> None:
        self.remove(node)
        self.push_front(node)

    def pop_back(self) -> Node[K, V] | None:
        """Unlink and return the least recent node, or None when empty."""
        if self._size == 0:
            return None
        last = self._tail.prev
        assert last is not None
        self.remove(last)
        return last

    def clear(self) -> None:
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
