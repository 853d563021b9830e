"""A fixed-type array of numbers or characters."""

from __future__ import annotations

from array import array
from collections.abc import Callable, Iterable, Iterator
from functools import reduce
from typing import Any

from utilkit import arrays

Compare = Callable[[Any, Any], int]

_INTEGER_CODES = frozenset("bBhHiIlLqQ")


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class TypedArray:
    """An array whose items all share one ``array`` typecode and byte size."""

    def __init__(self, typecode: str, items: Iterable[Any] = ()) -> None:
        self._data = array(typecode, items)

    @classmethod
    def from_bytes(cls, typecode: str, data: bytes) -> TypedArray:
        """Build an array from the machine representation of its items."""
        result = cls(typecode)
        result._data.frombytes(data)
        return result

    @property
    def typecode(self) -> str:
        """The ``array`` typecode of the items."""
        return self._data.typecode

    @property
    def itemsize(self) -> int:
        """The size of one item in bytes."""
        return self._data.itemsize

    def to_bytes(self) -> bytes:
        """Return the machine representation of the items."""
        return self._data.tobytes()

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return TypedArray(self.typecode, self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def index_of(self, item: Any, compare: Compare = _natural) -> int:
        """Return the index of the first item matching ``item``, or -1.

        ``compare`` is called as ``compare(item, element)``.
        """
        if item is None:
            raise TypeError("item must not be None")
        return arrays.index_of(item, self._data, compare)

    def insertion_sort(self, compare: Compare = _natural) -> None:
        """Sort the items in place with insertion sort."""
        arrays.insertion_sort(self._data, compare)

    def to_int(self) -> int:
        """Read the items as the decimal digits of one integer, most significant first."""
        if self.typecode not in _INTEGER_CODES:
            raise TypeError(f"to_int needs an integer array, not typecode {self.typecode!r}")
        return reduce(lambda total, digit: total * 10 + digit, self._data, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedArray):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.typecode!r}, {list(self._data)!r})"