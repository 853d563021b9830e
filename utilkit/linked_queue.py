"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class LinkedQueue:
    """A FIFO queue: items are dequeued in the order they were enqueued."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: deque[Any] = deque(items or ())

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"