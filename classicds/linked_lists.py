"""Singly linked and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class SinglyLinkedList(Generic[T]):
    """A singly linked list with O(1) append and prepend.

    Positions are counted from 0.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _unlink(self, previous: Optional[_Node[T]], node: _Node[T]) -> T:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return node.value

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: T) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at(self, position: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``position`` (0 to len)."""
        if not 0 <= position <= self._size:
            raise IndexError(f"insert position {position} out of range")
        if position == 0:
            self.prepend(value)
        elif position == self._size:
            self.append(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(value, previous.next)
            self._size += 1

    def remove(self, value: T) -> None:
        """Remove the first element equal to ``value``; raise ValueError if absent."""
        previous: Optional[_Node[T]] = None
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(previous, node)
                return
            previous, node = node, node.next
        raise ValueError(f"{value!r} not in list")

    def remove_first(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("remove from empty list")
        return self._unlink(None, self._head)

    def remove_last(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("remove from empty list")
        previous = self._node_at(self._size - 2) if self._size > 1 else None
        return self._unlink(previous, self._tail)

    def remove_at(self, position: int) -> T:
        """Remove and return the element at ``position``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range")
        if position == 0:
            return self.remove_first()
        previous = self._node_at(position - 1)
        assert previous.next is not None
        return self._unlink(previous, previous.next)

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularLinkedList(Generic[T]):
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        """Add ``value`` after the current last node, closing the ring."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        """Yield each element once, starting from the first."""
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"