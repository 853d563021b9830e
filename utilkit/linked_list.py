"""A singly linked list with head and tail access."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

Compare = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


class LinkedList:
    """A singly linked list that keeps track of its head, tail and length.

    Indices run from 0 to ``len(list) - 1``; negative indices are rejected.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._count = 0
        for item in items or ():
            self.append(item)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self._count:
            raise IndexError(f"index {index} out of range for list of {self._count}")
        return index

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def push(self, data: Any) -> None:
        """Add ``data`` at the start of the list."""
        node = _Node(data, self._head)
        if self._tail is None:
            self._tail = node
        self._head = node
        self._count += 1

    def pop(self) -> Any:
        """Remove the first item and return it."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.data

    def append(self, data: Any) -> None:
        """Add ``data`` at the end of the list."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def insert_at(self, index: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at ``index``.

        ``index`` must name an existing position; use :meth:`append` to add
        at the end.
        """
        index = self._check_index(index)
        if index == 0:
            self.push(data)
            return
        prev = self._node_at(index - 1)
        prev.next = _Node(data, prev.next)
        self._count += 1

    def insert_sorted(self, data: Any, compare: Compare) -> None:
        """Insert ``data`` before the first item for which ``compare(item, data) >= 0``."""
        prev: _Node | None = None
        curr = self._head
        while curr is not None and compare(curr.data, data) < 0:
            prev, curr = curr, curr.next
        node = _Node(data, curr)
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if curr is None:
            self._tail = node
        self._count += 1

    def remove_at(self, index: int) -> Any:
        """Remove the item at ``index`` and return it."""
        index = self._check_index(index)
        if index == 0:
            return self.pop()
        prev = self._node_at(index - 1)
        expired = prev.next
        prev.next = expired.next
        if expired is self._tail:
            self._tail = prev
        self._count -= 1
        return expired.data

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._tail = None
        self._count = 0

    def __getitem__(self, index: int) -> Any:
        return self._node_at(self._check_index(index)).data

    def __setitem__(self, index: int, data: Any) -> None:
        self._node_at(self._check_index(index)).data = data

    def find(self, key: Any, compare: Compare) -> Any:
        """Return the first item for which ``compare(item, key) == 0``, or None."""
        return next((item for item in self if compare(item, key) == 0), None)

    def find_all(self, key: Any, compare: Compare) -> list[Any]:
        """Return every item for which ``compare(item, key) == 0``, in order."""
        return [item for item in self if compare(item, key) == 0]

    def index_of(self, key: Any, compare: Compare) -> int:
        """Return the index of the first matching item, or -1."""
        return next(
            (i for i, item in enumerate(self) if compare(item, key) == 0), -1
        )

    def indices_of(self, key: Any, compare: Compare) -> list[int]:
        """Return the indices of every matching item, in order."""
        return [i for i, item in enumerate(self) if compare(item, key) == 0]

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"