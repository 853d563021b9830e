"""A doubly linked list whose nodes can be held and used directly."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

Compare = Callable[[Any, Any], int]


def _equal(a: Any, b: Any) -> int:
    return 0 if a == b else 1


class DoublyLinkedNode:
    """A node of a :class:`DoublyLinkedList`.

    ``next`` and ``prev`` link to the neighbouring nodes; treat them as
    read-only and change the list only through its methods.
    """

    __slots__ = ("data", "next", "prev", "_owner")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: DoublyLinkedNode | None = None
        self.prev: DoublyLinkedNode | None = None
        self._owner: DoublyLinkedList | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class DoublyLinkedList:
    """A doubly linked list with head and tail access and node handles."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: DoublyLinkedNode | None = None
        self._tail: DoublyLinkedNode | None = None
        self._count = 0
        for item in items or ():
            self.add_tail(item)

    @property
    def head(self) -> DoublyLinkedNode | None:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> DoublyLinkedNode | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def _new_node(self, data: Any) -> DoublyLinkedNode:
        node = DoublyLinkedNode(data)
        node._owner = self
        return node

    def _check_owned(self, node: DoublyLinkedNode | None) -> DoublyLinkedNode:
        if not isinstance(node, DoublyLinkedNode) or node._owner is not self:
            raise ValueError("node does not belong to this list")
        return node

    def _link_before(
        self, successor: DoublyLinkedNode | None, node: DoublyLinkedNode
    ) -> DoublyLinkedNode:
        predecessor = self._tail if successor is None else successor.prev
        node.prev = predecessor
        node.next = successor
        if predecessor is None:
            self._head = node
        else:
            predecessor.next = node
        if successor is None:
            self._tail = node
        else:
            successor.prev = node
        self._count += 1
        return node

    def add_head(self, data: Any) -> DoublyLinkedNode:
        """Add ``data`` at the start of the list and return its node."""
        return self._link_before(self._head, self._new_node(data))

    def add_tail(self, data: Any) -> DoublyLinkedNode:
        """Add ``data`` at the end of the list and return its node."""
        return self._link_before(None, self._new_node(data))

    def insert_before(
        self, node: DoublyLinkedNode | None, data: Any
    ) -> DoublyLinkedNode:
        """Insert ``data`` in front of ``node`` and return the new node.

        A ``node`` of None adds ``data`` as the new tail.
        """
        if node is not None:
            self._check_owned(node)
        return self._link_before(node, self._new_node(data))

    def insert_sorted(self, data: Any, compare: Compare) -> DoublyLinkedNode:
        """Insert ``data`` before the first item for which ``compare(item, data) >= 0``."""
        curr = self._head
        while curr is not None and compare(curr.data, data) < 0:
            curr = curr.next
        return self._link_before(curr, self._new_node(data))

    def remove(self, node: DoublyLinkedNode) -> Any:
        """Unlink ``node`` from the list and return its data."""
        self._check_owned(node)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        node._owner = None
        self._count -= 1
        return node.data

    def clear(self) -> None:
        """Remove every node."""
        for node in list(self.nodes()):
            node.next = node.prev = None
            node._owner = None
        self._head = None
        self._tail = None
        self._count = 0

    def node_at(self, index: int) -> DoublyLinkedNode:
        """Return the node at ``index``, walking from whichever end is nearer."""
        index = operator.index(index)
        if not 0 <= index < self._count:
            raise IndexError(f"index {index} out of range for list of {self._count}")
        from_tail = self._count - index - 1
        if from_tail > index:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(from_tail):
                node = node.prev
        return node

    def find(self, key: Any, compare: Compare = _equal) -> DoublyLinkedNode | None:
        """Return the first node for which ``compare(data, key) == 0``, or None."""
        return next(
            (node for node in self.nodes() if compare(node.data, key) == 0), None
        )

    def nodes(self) -> Iterator[DoublyLinkedNode]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"