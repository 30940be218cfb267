"""A fixed-capacity double-ended queue kept in a ring buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class DequeFullError(OverflowError):
    """Raised when adding to a deque that has no room left."""


class DequeEmptyError(IndexError):
    """Raised when removing from an empty deque."""


class BoundedDeque(Generic[T]):
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots: list[Optional[T]] = [None] * capacity
        self._left = 0
        self._count = 0

    def _index(self, offset: int) -> int:
        return (self._left + offset) % self.capacity

    def append(self, value: T) -> None:
        """Add ``value`` at the right end; raise DequeFullError if full."""
        if self.is_full():
            raise DequeFullError("deque is full")
        self._slots[self._index(self._count)] = value
        self._count += 1

    def appendleft(self, value: T) -> None:
        """Add ``value`` at the left end; raise DequeFullError if full."""
        if self.is_full():
            raise DequeFullError("deque is full")
        self._left = self._index(-1)
        self._slots[self._left] = value
        self._count += 1

    def pop(self) -> T:
        """Remove and return the rightmost item."""
        if self.is_empty():
            raise DequeEmptyError("deque is empty")
        index = self._index(self._count - 1)
        value = self._slots[index]
        self._slots[index] = None
        self._count -= 1
        return value  # type: ignore[return-value]

    def popleft(self) -> T:
        """Remove and return the leftmost item."""
        if self.is_empty():
            raise DequeEmptyError("deque is empty")
        value = self._slots[self._left]
        self._slots[self._left] = None
        self._left = self._index(1)
        self._count -= 1
        return value  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Yield items from left to right."""
        for offset in range(self._count):
            yield self._slots[self._index(offset)]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"