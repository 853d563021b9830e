"""A singly linked list of key-value pairs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

Compare = Callable[[Any, Any], int]


def _equal(a: Any, b: Any) -> int:
    return 0 if a == b else 1


class _Node:
    __slots__ = ("key", "data", "next")

    def __init__(self, key: Any, data: Any, next_node: _Node | None = None) -> None:
        self.key = key
        self.data = data
        self.next = next_node


class KeyValueList:
    """An ordered list of ``(key, data)`` pairs in which keys may repeat.

    Lookups take a ``compare`` function called as ``compare(stored_key, key)``
    that returns zero for a match; by default keys match when they are equal.
    """

    def __init__(
        self, pairs: Iterable[tuple[Any, Any]] | Mapping[Any, Any] | None = None
    ) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._count = 0
        if pairs is None:
            return
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, data in pairs:
            self.add_tail(key, data)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def add_head(self, key: Any, data: Any) -> None:
        """Add a pair at the start of the list."""
        node = _Node(key, data, self._head)
        if self._tail is None:
            self._tail = node
        self._head = node
        self._count += 1

    def add_tail(self, key: Any, data: Any) -> None:
        """Add a pair at the end of the list."""
        node = _Node(key, data)
        if self._head is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def add_sorted(self, key: Any, data: Any, compare: Compare) -> None:
        """Insert a pair before the first one for which ``compare(stored, key) >= 0``."""
        prev: _Node | None = None
        curr = self._head
        while curr is not None and compare(curr.key, key) < 0:
            prev, curr = curr, curr.next
        node = _Node(key, data, curr)
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if curr is None:
            self._tail = node
        self._count += 1

    def remove_head(self) -> tuple[Any, Any]:
        """Remove the first pair and return it."""
        if self._head is None:
            raise IndexError("remove from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.key, node.data

    def remove(self, key: Any, compare: Compare = _equal) -> Any:
        """Remove the first pair whose key matches and return its data."""
        prev: _Node | None = None
        curr = self._head
        while curr is not None and compare(curr.key, key) != 0:
            prev, curr = curr, curr.next
        if curr is None:
            raise KeyError(key)
        if prev is None:
            self._head = curr.next
        else:
            prev.next = curr.next
        if curr is self._tail:
            self._tail = prev
        self._count -= 1
        return curr.data

    def clear(self) -> None:
        """Remove every pair."""
        self._head = None
        self._tail = None
        self._count = 0

    def find(self, key: Any, compare: Compare = _equal) -> Any:
        """Return the data of the first matching key, or None."""
        return next(
            (node.data for node in self._nodes() if compare(node.key, key) == 0),
            None,
        )

    def find_all(self, key: Any, compare: Compare = _equal) -> list[Any]:
        """Return the data of every matching key, in list order."""
        return [node.data for node in self._nodes() if compare(node.key, key) == 0]

    def count(self, key: Any, compare: Compare = _equal) -> int:
        """Return how many keys match ``key``."""
        return sum(1 for node in self._nodes() if compare(node.key, key) == 0)

    def values(self) -> list[Any]:
        """Return the data of every pair, in list order."""
        return [node.data for node in self._nodes()]

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for node in self._nodes():
            yield node.key, node.data

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"