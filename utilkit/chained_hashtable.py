"""A hash table that chains colliding pairs in per-bucket lists."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from utilkit.hashing import djb2_hash
from utilkit.kv_list import KeyValueList, _equal

Compare = Callable[[Any, Any], int]
HashFunc = Callable[[Any], int]


class ChainedHashTable:
    """A fixed number of buckets, each a :class:`KeyValueList`.

    Keys may repeat. Lookups take a ``compare`` function called as
    ``compare(stored_key, key)`` that returns zero for a match.
    """

    def __init__(self, bucket_count: int, hash_func: HashFunc = djb2_hash) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self._buckets = [KeyValueList() for _ in range(bucket_count)]
        self._hash = hash_func

    @property
    def bucket_count(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def _bucket(self, key: Any) -> KeyValueList:
        return self._buckets[self._hash(key) % len(self._buckets)]

    def add(self, key: Any, data: Any, compare: Compare | None = None) -> None:
        """Add a pair to its bucket.

        Without ``compare`` the pair goes first in the bucket; with it, the
        pair goes before the first key for which ``compare(stored, key) >= 0``.
        """
        bucket = self._bucket(key)
        if compare is None:
            bucket.add_head(key, data)
        else:
            bucket.add_sorted(key, data, compare)

    def remove(self, key: Any, compare: Compare = _equal) -> Any:
        """Remove the first pair with a matching key and return its data."""
        return self._bucket(key).remove(key, compare)

    def find(self, key: Any, compare: Compare = _equal) -> Any:
        """Return the data of the first matching key, or None."""
        return self._bucket(key).find(key, compare)

    def find_all(self, key: Any, compare: Compare = _equal) -> list[Any]:
        """Return the data of every matching key in the key's bucket."""
        return self._bucket(key).find_all(key, compare)

    def count(self, key: Any, compare: Compare = _equal) -> int:
        """Return how many stored keys match ``key``."""
        return self._bucket(key).count(key, compare)

    def chain_length(self, key: Any) -> int:
        """Return the length of the bucket ``key`` hashes to, whether or not it holds ``key``."""
        return len(self._bucket(key))

    def clear(self) -> None:
        """Remove every pair."""
        for bucket in self._buckets:
            bucket.clear()

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"