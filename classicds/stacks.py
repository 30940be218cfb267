"""Last-in, first-out stacks: a fixed-capacity array stack and a linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(IndexError):
    """Raised when reading or removing from an empty stack."""


class BoundedStack(Generic[T]):
    """An array-backed stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise StackFullError if the stack is full."""
        if self.is_full():
            raise StackFullError("stack overflow")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raise StackEmptyError if empty."""
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield items from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    below: Optional[_Node[T]] = None


class LinkedStack(Generic[T]):
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node[T]] = None
        self._count = 0

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._count += 1

    def pop(self) -> T:
        """Remove and return the top item; raise StackEmptyError if empty."""
        if self._top is None:
            raise StackEmptyError("pop from empty stack")
        node = self._top
        self._top = node.below
        self._count -= 1
        return node.value

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        """Discard every item."""
        self._top = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Yield items from the top of the stack down to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        items: list[Any] = list(self)
        return f"{type(self).__name__}({items!r})"