"""A general tree whose nodes keep their children newest first."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

Compare = Callable[[Any, Any], int]


class TreeNode:
    """A tree node with data, a parent and any number of children.

    Children are visited from the most recently added to the oldest.
    """

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.parent: TreeNode | None = None
        self._children: list[TreeNode] = []

    def add_child(self, data: Any) -> TreeNode:
        """Add a new child holding ``data`` and return it."""
        child = TreeNode(data)
        child.parent = self
        self._children.append(child)
        return child

    def children(self) -> Iterator[TreeNode]:
        """Yield the children, newest first."""
        return reversed(list(self._children))

    def child_count(self) -> int:
        """Return the number of children."""
        return len(self._children)

    def find(self, key: Any, compare: Compare | None = None) -> TreeNode | None:
        """Return the first node, depth first, whose data matches ``key``.

        With ``compare`` given, a match is ``compare(data, key) == 0``;
        otherwise data and key must be equal.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if compare is None:
                matched = node.data == key
            else:
                matched = compare(node.data, key) == 0
            if matched:
                return node
            stack.extend(node._children)
        return None

    def pre_order(self, depth: int = 0) -> Iterator[tuple[Any, int]]:
        """Yield ``(data, depth)`` for each node before its children."""
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            yield node.data, level
            stack.extend((child, level + 1) for child in node._children)

    def in_order(self, depth: int = 0) -> Iterator[tuple[Any, int]]:
        """Yield ``(data, depth)``, each node once its children are done."""
        for node, level in _in_order_nodes(list(self.children()), depth + 1):
            yield node.data, level
        yield self.data, depth

    def post_order(self, depth: int = 0) -> Iterator[tuple[Any, int]]:
        """Yield ``(data, depth)``: all deeper levels of a sibling group first,
        then the siblings themselves from oldest to newest, then the node."""
        for node, level in _post_order_nodes(list(self.children()), depth + 1):
            yield node.data, level
        yield self.data, depth

    def deepest_nodes(self) -> list[TreeNode]:
        """Return the nodes at the greatest depth below and including this one."""
        visited = list(_post_order_nodes(list(self.children()), 1))
        visited.append((self, 0))
        deepest = max(level for _, level in visited)
        return [node for node, level in reversed(visited) if level == deepest]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


def _in_order_nodes(
    siblings: list[TreeNode], depth: int
) -> Iterator[tuple[TreeNode, int]]:
    for node in siblings:
        yield from _in_order_nodes(list(node.children()), depth + 1)
        yield node, depth


def _post_order_nodes(
    siblings: list[TreeNode], depth: int
) -> Iterator[tuple[TreeNode, int]]:
    for node in siblings:
        yield from _post_order_nodes(list(node.children()), depth + 1)
    for node in reversed(siblings):
        yield node, depth