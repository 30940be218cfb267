"""Adjacency-list graphs with breadth-first and depth-first traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)


class Graph(Generic[V]):
    """A graph stored as adjacency lists, directed or undirected.

    Vertices may be any hashable values and are kept in the order they were
    first seen. Neighbours are kept in the order their edges were added.
    """

    def __init__(self, vertices: Iterable[V] = (), directed: bool = False) -> None:
        self.directed = directed
        self._adjacent: dict[V, list[V]] = {}
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_vertex(self, vertex: V) -> None:
        """Add ``vertex`` with no edges, if it is not already present."""
        self._adjacent.setdefault(vertex, [])

    def add_edge(self, u: V, v: V) -> None:
        """Add an edge from ``u`` to ``v`` (and back, if undirected)."""
        self.add_vertex(u)
        self.add_vertex(v)
        self._adjacent[u].append(v)
        if not self.directed:
            self._adjacent[v].append(u)

    def neighbors(self, vertex: V) -> list[V]:
        """Return the vertices adjacent to ``vertex``; KeyError if unknown."""
        return list(self._adjacent[vertex])

    def _require(self, vertex: V) -> None:
        if vertex not in self._adjacent:
            raise KeyError(vertex)

    def bfs(self, start: V) -> list[V]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        return list(self.bfs_levels(start))

    def bfs_levels(self, start: V) -> dict[V, int]:
        """Map each vertex reachable from ``start`` to its edge distance.

        The mapping's order is the breadth-first visiting order.
        """
        self._require(start)
        levels: dict[V, int] = {start: 0}
        pending: deque[V] = deque([start])
        while pending:
            current = pending.popleft()
            for nxt in self._adjacent[current]:
                if nxt not in levels:
                    levels[nxt] = levels[current] + 1
                    pending.append(nxt)
        return levels

    def _dfs_from(self, start: V, visited: set[V]) -> list[V]:
        visited.add(start)
        order = [start]
        stack: list[Iterator[V]] = [iter(self._adjacent[start])]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(iter(self._adjacent[nxt]))
                    break
            else:
                stack.pop()
        return order

    def dfs(self, start: V) -> list[V]:
        """Return the vertices reachable from ``start`` in depth-first preorder."""
        self._require(start)
        return self._dfs_from(start, set())

    def dfs_forest(self) -> list[list[V]]:
        """Run depth-first search from every unvisited vertex in turn.

        Returns one preorder list per search tree; together they hold every
        vertex exactly once.
        """
        visited: set[V] = set()
        return [
            self._dfs_from(vertex, visited)
            for vertex in self._adjacent
            if vertex not in visited
        ]

    def adjacency(self) -> dict[V, list[V]]:
        """Return a copy of the adjacency lists."""
        return {vertex: list(nbrs) for vertex, nbrs in self._adjacent.items()}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacent

    def __len__(self) -> int:
        return len(self._adjacent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.adjacency()!r}, directed={self.directed})"