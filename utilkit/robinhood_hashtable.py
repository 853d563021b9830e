"""An open-addressing hash table that uses Robin Hood probing."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from utilkit.hashing import djb2_hash
from utilkit.kv_list import _equal

Compare = Callable[[Any, Any], int]
HashFunc = Callable[[Any], int]


class TableFullError(Exception):
    """Every bucket is in use and automatic rehashing is switched off."""


class _Bucket:
    __slots__ = ("key", "data", "psl")

    def __init__(self, key: Any, data: Any) -> None:
        self.key = key
        self.data = data
        self.psl = 0


def _place(buckets: list[_Bucket | None], entry: _Bucket, index: int) -> None:
    """Insert ``entry`` probing from ``index``, displacing richer entries."""
    size = len(buckets)
    while (occupant := buckets[index]) is not None:
        if entry.psl > occupant.psl:
            buckets[index], entry = entry, occupant
        entry.psl += 1
        index = (index + 1) % size
    buckets[index] = entry


class RobinHoodHashTable:
    """A hash table storing ``(key, data)`` pairs in a single bucket array.

    ``max_load`` is the load proportion (0 to 1) at which adding a pair first
    doubles the number of buckets; 0 turns automatic rehashing off, and then
    adding to a full table raises :class:`TableFullError`.
    """

    def __init__(
        self,
        bucket_count: int,
        max_load: float = 0.0,
        hash_func: HashFunc = djb2_hash,
    ) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        if not 0 <= max_load <= 1:
            raise ValueError("max_load must lie between 0 and 1")
        self._buckets: list[_Bucket | None] = [None] * bucket_count
        self._used = 0
        self._max_load = float(max_load)
        self._hash = hash_func

    @property
    def bucket_count(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    @property
    def max_load(self) -> float:
        """Load proportion that triggers a rehash; 0 when rehashing is off."""
        return self._max_load

    def _home(self, key: Any, size: int | None = None) -> int:
        return self._hash(key) % (len(self._buckets) if size is None else size)

    def _locate(self, key: Any, compare: Compare) -> int:
        size = len(self._buckets)
        index = self._home(key)
        probe = 0
        while (bucket := self._buckets[index]) is not None and probe <= bucket.psl:
            if compare(bucket.key, key) == 0:
                return index
            index = (index + 1) % size
            probe += 1
        return -1

    def add(self, key: Any, data: Any) -> None:
        """Add a pair, rehashing to twice the buckets when the load limit is reached."""
        size = len(self._buckets)
        if self._max_load == 0:
            if self._used >= size:
                raise TableFullError("every bucket is in use")
        elif self._used / size >= self._max_load or self._used >= size:
            self.rehash(2 * size)
        _place(self._buckets, _Bucket(key, data), self._home(key))
        self._used += 1

    def remove(self, key: Any, compare: Compare = _equal) -> Any:
        """Remove the pair whose key matches ``key`` and return its data."""
        index = self._locate(key, compare)
        if index < 0:
            raise KeyError(key)
        size = len(self._buckets)
        data = self._buckets[index].data
        previous = index
        index = (index + 1) % size
        while (bucket := self._buckets[index]) is not None and bucket.psl > 0:
            bucket.psl -= 1
            self._buckets[previous] = bucket
            previous = index
            index = (index + 1) % size
        self._buckets[previous] = None
        self._used -= 1
        return data

    def find(self, key: Any, compare: Compare = _equal) -> Any:
        """Return the data stored under ``key``, or None."""
        index = self._locate(key, compare)
        return None if index < 0 else self._buckets[index].data

    def rehash(self, new_count: int) -> None:
        """Move every pair into ``new_count`` buckets.

        ``new_count`` must exceed the current bucket count times the load
        limit (times 1 when rehashing is off).
        """
        limit = self._max_load or 1.0
        if new_count <= limit * len(self._buckets) or new_count < self._used:
            raise ValueError(
                f"new bucket count {new_count} is below the current limit"
            )
        new_buckets: list[_Bucket | None] = [None] * new_count
        for bucket in self._buckets:
            if bucket is not None:
                bucket.psl = 0
                _place(new_buckets, bucket, self._home(bucket.key, new_count))
        self._buckets = new_buckets

    def clear(self) -> None:
        """Remove every pair, keeping the number of buckets."""
        self._buckets = [None] * len(self._buckets)
        self._used = 0

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for bucket in list(self._buckets):
            if bucket is not None:
                yield bucket.key, bucket.data

    def __len__(self) -> int:
        return self._used

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"