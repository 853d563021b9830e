"""An unbalanced binary search tree that counts repeated values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

Compare = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False)
class BinaryTreeNode:
    """A node: its data, how many times it was added, and its children."""

    data: Any
    count: int = 1
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None


class AddResult(Enum):
    """What :meth:`BinaryTree.add` did."""

    ADDED = 1
    REPEATED = 2


class BinaryTree:
    """A binary search tree ordered by ``compare(stored, new)``.

    Smaller values go left, greater values go right, and equal values bump
    the count of the node already holding them.
    """

    def __init__(self, compare: Compare = _natural) -> None:
        self._compare = compare
        self._root: BinaryTreeNode | None = None
        self._size = 0

    @property
    def root(self) -> BinaryTreeNode | None:
        """The root node, or None for an empty tree."""
        return self._root

    def add(self, data: Any) -> AddResult:
        """Add ``data``; report whether a new node was made or a repeat counted."""
        if self._root is None:
            self._root = BinaryTreeNode(data)
            self._size += 1
            return AddResult.ADDED
        node = self._root
        while True:
            result = self._compare(node.data, data)
            if result == 0:
                node.count += 1
                return AddResult.REPEATED
            side = "left" if result > 0 else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, BinaryTreeNode(data))
                self._size += 1
                return AddResult.ADDED
            node = child

    def find(self, key: Any, compare: Compare | None = None) -> Any:
        """Return the stored data matching ``key``, or None.

        ``compare`` is called as ``compare(stored, key)`` and must agree with
        the tree's ordering; it defaults to the tree's own.
        """
        compare = compare or self._compare
        node = self._root
        while node is not None:
            result = compare(node.data, key)
            if result == 0:
                return node.data
            node = node.left if result > 0 else node.right
        return None

    def in_order(self) -> Iterator[Any]:
        """Yield the data from smallest to largest."""
        stack: list[BinaryTreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def pre_order(self) -> Iterator[Any]:
        """Yield each node's data before that of its left, then right, subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[Any]:
        """Yield each node's data after that of its left, then right, subtree."""
        if self._root is None:
            return
        stack = [self._root]
        reversed_order: list[Any] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    def clear(self) -> None:
        """Remove every node."""
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"