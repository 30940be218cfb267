"""First-in, first-out queues: circular buffer, linked list and two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when reading or removing from an empty queue."""


class CircularQueue(Generic[T]):
    """A fixed-size ring buffer queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear; raise QueueFullError if full."""
        if self.is_full():
            raise QueueFullError("queue is full")
        rear = (self._front + self._count) % self.capacity
        self._slots[rear] = value
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the front item; raise QueueEmptyError if empty."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        if self._count == 0:
            self._front = 0
        return value  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Yield items from front to rear."""
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.capacity]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


@dataclass(slots=True)
class _Link(Generic[T]):
    value: T
    next: Optional[_Link[T]] = None


class LinkedQueue(Generic[T]):
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Link[T]] = None
        self._tail: Optional[_Link[T]] = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        link = _Link(value)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front item; raise QueueEmptyError if empty."""
        if self._head is None:
            raise QueueEmptyError("dequeue from empty queue")
        link = self._head
        self._head = link.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return link.value

    def front(self) -> T:
        """Return the front item without removing it."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        return self._head.value

    def clear(self) -> None:
        """Discard every item."""
        self._head = self._tail = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield items from front to rear."""
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class TwoStackQueue(Generic[T]):
    """A queue kept in one stack, using a second stack while enqueuing.

    Enqueue costs O(n); dequeue is O(1).
    """

    def __init__(self) -> None:
        self._main: list[T] = []
        self._spare: list[T] = []

    def enqueue(self, value: T) -> None:
        """Add ``value`` so that it comes out after everything already queued."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def dequeue(self) -> T:
        """Remove and return the oldest item; raise QueueEmptyError if empty."""
        if not self._main:
            raise QueueEmptyError("queue is empty")
        return self._main.pop()

    def __len__(self) -> int:
        return len(self._main)