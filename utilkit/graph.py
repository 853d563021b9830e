"""Directed graphs built from vertices that keep adjacency and reference lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from enum import IntEnum
from typing import Any

from utilkit.doubly_linked_list import DoublyLinkedList, DoublyLinkedNode

Compare = Callable[[Any, Any], int]


def _equal(a: Any, b: Any) -> int:
    return 0 if a == b else 1


def _position(vertices: list[Vertex], target: Vertex) -> int:
    return next((i for i, vertex in enumerate(vertices) if vertex is target), -1)


class VertexState(IntEnum):
    """Where a vertex stands in a traversal."""

    NOT_PASSED = 0
    PASSED = 1
    SKIP = 2


class Vertex:
    """A graph vertex holding data and its outgoing and incoming edges.

    ``level`` and ``state`` are used by :meth:`breadth_first`; a vertex set
    to :attr:`VertexState.SKIP` is walked through without being reported.
    """

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.level = 0
        self.state = VertexState.NOT_PASSED
        self._adjacent: list[Vertex] = []
        self._referrers: list[Vertex] = []
        self._graph: Graph | None = None
        self._graph_node: DoublyLinkedNode | None = None

    def connect(self, other: Vertex) -> None:
        """Add a directed edge from this vertex to ``other``."""
        self._adjacent.insert(0, other)
        other._referrers.insert(0, self)

    def disconnect(self, other: Vertex) -> None:
        """Remove one directed edge from this vertex to ``other``."""
        forward = _position(self._adjacent, other)
        backward = _position(other._referrers, self)
        if forward < 0 or backward < 0:
            raise ValueError("no edge between these vertices")
        del self._adjacent[forward]
        del other._referrers[backward]

    def is_connected(self, other: Vertex) -> bool:
        """True if there is an edge from this vertex to ``other``."""
        return _position(self._adjacent, other) >= 0

    def adjacent(self) -> Iterator[Any]:
        """Yield the data of the vertices this one points to, newest edge first."""
        for vertex in list(self._adjacent):
            yield vertex.data

    def set_adjacent_state(self, state: VertexState | int) -> None:
        """Set the traversal state of every vertex this one points to."""
        state = VertexState(state)
        for vertex in self._adjacent:
            vertex.state = state

    def breadth_first(self, max_level: int = -1) -> Iterator[Any]:
        """Yield vertex data breadth first from this vertex.

        Goes at most ``max_level`` edges deep; a negative ``max_level`` means
        no limit. Traversal states are reset when the iteration ends.
        """
        unbounded = max_level < 0
        level = max_level if unbounded else 0
        queue: deque[Vertex] = deque([self])
        passed: list[Vertex] = [self]
        self.level = level
        try:
            while queue:
                vertex = queue.popleft()
                if vertex.state == VertexState.NOT_PASSED:
                    yield vertex.data
                if not unbounded:
                    level = vertex.level + 1
                if vertex.state != VertexState.PASSED and level <= max_level:
                    for neighbour in vertex._adjacent:
                        neighbour.level = level
                        queue.append(neighbour)
                        passed.append(neighbour)
                vertex.state = VertexState.PASSED
        finally:
            for vertex in passed:
                vertex.state = VertexState.NOT_PASSED
                vertex.level = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class Graph:
    """A collection of vertices; the newest vertex comes first."""

    def __init__(self) -> None:
        self._vertices = DoublyLinkedList()

    def add(self, data: Any) -> Vertex:
        """Create a vertex holding ``data`` and return it."""
        vertex = Vertex(data)
        vertex._graph = self
        vertex._graph_node = self._vertices.add_head(vertex)
        return vertex

    def remove(self, vertex: Vertex) -> Any:
        """Remove ``vertex`` and every edge to or from it; return its data."""
        if not isinstance(vertex, Vertex) or vertex._graph is not self:
            raise ValueError("vertex does not belong to this graph")
        referrers = list(vertex._referrers)
        targets = list(vertex._adjacent)
        for referrer in referrers:
            index = _position(referrer._adjacent, vertex)
            if index >= 0:
                del referrer._adjacent[index]
        for target in targets:
            index = _position(target._referrers, vertex)
            if index >= 0:
                del target._referrers[index]
        vertex._adjacent.clear()
        vertex._referrers.clear()
        self._vertices.remove(vertex._graph_node)
        vertex._graph = None
        vertex._graph_node = None
        return vertex.data

    def find(self, key: Any, compare: Compare = _equal) -> Vertex | None:
        """Return the first vertex for which ``compare(data, key) == 0``, or None."""
        return next(
            (vertex for vertex in self._vertices if compare(vertex.data, key) == 0),
            None,
        )

    def vertices(self) -> Iterator[Vertex]:
        """Yield the vertices, newest first."""
        yield from list(self._vertices)

    def clear(self) -> None:
        """Remove every vertex and edge."""
        for vertex in self._vertices:
            vertex._adjacent.clear()
            vertex._referrers.clear()
            vertex._graph = None
            vertex._graph_node = None
        self._vertices.clear()

    def __iter__(self) -> Iterator[Any]:
        for vertex in list(self._vertices):
            yield vertex.data

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"