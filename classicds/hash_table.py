"""A hash table of integers using separate chaining."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from itertools import chain

DEFAULT_BUCKETS = 10


class ChainedHashTable:
    """Integers placed in bucket ``value % bucket_count``, chained in insertion order.

    Equal values may be stored more than once.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKETS, values: Iterable[int] = ()) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")
        self._buckets: list[list[int]] = [[] for _ in range(bucket_count)]
        for value in values:
            self.insert(value)

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[operator.index(value) % len(self._buckets)]

    def insert(self, value: int) -> None:
        """Add ``value`` at the end of its bucket's chain."""
        self._bucket(value).append(value)

    def remove(self, value: int) -> None:
        """Remove the first stored ``value``; raise KeyError if absent."""
        try:
            self._bucket(value).remove(value)
        except ValueError:
            raise KeyError(value) from None

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._bucket(value)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return sum(map(len, self._buckets))

    def __iter__(self) -> Iterator[int]:
        """Yield values bucket by bucket, each chain in insertion order."""
        return chain.from_iterable(self._buckets)

    def buckets(self) -> list[list[int]]:
        """Return a copy of every bucket's chain."""
        return [list(bucket) for bucket in self._buckets]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.buckets()!r})"