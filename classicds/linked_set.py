"""A set kept as a singly linked list, preserving insertion order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class LinkedSet(Generic[T]):
    """An insertion-ordered set of distinct values stored in linked nodes.

    Membership is decided with ``==``, so values need not be hashable.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.add(value)

    def add(self, value: T) -> None:
        """Append ``value`` unless an equal value is already present."""
        if self._head is None:
            self._head = _Node(value)
            self._size = 1
            return
        node = self._head
        while True:
            if node.value == value:
                return
            if node.next is None:
                break
            node = node.next
        node.next = _Node(value)
        self._size += 1

    def remove(self, value: T) -> bool:
        """Remove ``value`` if present; return whether anything was removed."""
        previous: Optional[_Node[T]] = None
        node = self._head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous, node = node, node.next
        return False

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedSet):
            return NotImplemented
        return len(self) == len(other) and all(value in other for value in self)

    __hash__ = None  # type: ignore[assignment]

    def union(self, other: Iterable[T]) -> LinkedSet[T]:
        """Return this set's values followed by the new values of ``other``."""
        result = LinkedSet(self)
        for value in other:
            result.add(value)
        return result

    def intersection(self, other: Iterable[T]) -> LinkedSet[T]:
        """Return the values of ``other`` that are also here, in ``other``'s order."""
        return LinkedSet(value for value in other if value in self)

    def difference(self, other: LinkedSet[T]) -> LinkedSet[T]:
        """Return the values here that are not in ``other``."""
        return LinkedSet(value for value in self if value not in other)

    def contains_all(self, other: Iterable[T]) -> bool:
        """Return True if every value of ``other`` is in this set."""
        return all(value in self for value in other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"