"""A binomial min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Optional

_by_degree = attrgetter("degree")


@dataclass(eq=False)
class _BinomialNode:
    key: Any
    degree: int = 0
    child: Optional[_BinomialNode] = None
    sibling: Optional[_BinomialNode] = None
    parent: Optional[_BinomialNode] = None


def _link(first: _BinomialNode, second: _BinomialNode) -> _BinomialNode:
    """Join two trees of equal degree; the smaller key becomes the root."""
    if first.key > second.key:
        first, second = second, first
    second.parent = first
    second.sibling = first.child
    first.child = second
    first.degree += 1
    return first


def _union(first: list[_BinomialNode], second: list[_BinomialNode]) -> list[_BinomialNode]:
    """Merge two root lists by ascending degree; ``first`` wins ties."""
    return list(heapq.merge(first, second, key=_by_degree))


def _adjust(roots: list[_BinomialNode]) -> list[_BinomialNode]:
    """Link neighbouring roots of equal degree until all degrees differ."""
    i = 0
    while i < len(roots):
        if i + 1 >= len(roots) or roots[i].degree < roots[i + 1].degree:
            i += 1
        elif (
            i + 2 < len(roots)
            and roots[i].degree == roots[i + 1].degree == roots[i + 2].degree
        ):
            i += 1
        elif roots[i].degree == roots[i + 1].degree:
            roots[i] = _link(roots[i], roots[i + 1])
            del roots[i + 1]
        else:
            i += 1
    return roots


def _walk(node: Optional[_BinomialNode]) -> Iterator[Any]:
    while node is not None:
        yield node.key
        yield from _walk(node.child)
        node = node.sibling


class BinomialHeap:
    """A min-heap built from binomial trees of distinct degrees."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._roots: list[_BinomialNode] = []
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        self._roots = _adjust(_union(self._roots, [_BinomialNode(key)]))
        self._size += 1

    def _min_root(self) -> _BinomialNode:
        if not self._roots:
            raise IndexError("heap is empty")
        return min(self._roots, key=attrgetter("key"))

    def min(self) -> Any:
        """Return the smallest key; raise IndexError if empty."""
        return self._min_root().key

    def extract_min(self) -> Any:
        """Remove and return the smallest key; raise IndexError if empty."""
        smallest = self._min_root()
        rest = [root for root in self._roots if root is not smallest]
        children: list[_BinomialNode] = []
        node = smallest.child
        while node is not None:
            following = node.sibling
            node.sibling = None
            node.parent = None
            children.append(node)
            node = following
        children.reverse()
        self._roots = _adjust(_union(rest, children))
        self._size -= 1
        return smallest.key

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield keys tree by tree, each node before its children."""
        for root in self._roots:
            yield root.key
            yield from _walk(root.child)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"