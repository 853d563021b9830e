"""Searching and sorting helpers for mutable sequences."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


def index_of(value: Any, items: Sequence[T], compare: Compare) -> int:
    """Return the index of the first item equal to ``value``, or -1.

    ``compare`` is called as ``compare(value, item)`` and must return zero
    for a match.
    """
    if items is None:
        raise TypeError("items must be a sequence, not None")
    for index, item in enumerate(items):
        if compare(value, item) == 0:
            return index
    return -1


def insertion_sort(items: MutableSequence[T], compare: Compare) -> None:
    """Sort ``items`` in place with insertion sort.

    Adjacent items are swapped while ``compare(earlier, later) >= 0``.
    """
    for i in range(1, len(items)):
        j = i
        while j > 0 and compare(items[j - 1], items[j]) >= 0:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1