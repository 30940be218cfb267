"""Shortest paths and minimum spanning trees on weighted graphs."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


@dataclass(frozen=True)
class ShortestPaths:
    """Distances from a source and the predecessor of each vertex on its path.

    Unreachable vertices have distance ``math.inf`` and predecessor None.
    """

    distances: dict[Any, float]
    predecessors: dict[Any, Optional[Any]]


class MSTEdge(NamedTuple):
    """A spanning-tree edge joining ``vertex`` to its ``parent``."""

    vertex: Any
    parent: Any
    weight: float


def _vertex_order(vertices: Iterable[Hashable]) -> list[Any]:
    return list(dict.fromkeys(vertices))


def _checked_edges(
    edges: Iterable[tuple[Any, Any, float]], known: set[Any]
) -> list[tuple[Any, Any, float]]:
    result = []
    for u, v, weight in edges:
        for end in (u, v):
            if end not in known:
                raise ValueError(f"edge refers to unknown vertex {end!r}")
        result.append((u, v, weight))
    return result


def bellman_ford(
    vertices: Iterable[Hashable],
    edges: Iterable[tuple[Any, Any, float]],
    source: Hashable,
) -> ShortestPaths:
    """Single-source shortest paths over directed ``(u, v, weight)`` edges.

    Raises KeyError for an unknown source and NegativeCycleError if a
    negative cycle can be reached from it.
    """
    names = _vertex_order(vertices)
    known = set(names)
    if source not in known:
        raise KeyError(source)
    edge_list = _checked_edges(edges, known)

    distance: dict[Any, float] = {v: math.inf for v in names}
    predecessor: dict[Any, Optional[Any]] = {v: None for v in names}
    distance[source] = 0
    for _ in range(len(names) - 1):
        for u, v, weight in edge_list:
            if distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                predecessor[v] = u
    for u, v, weight in edge_list:
        if distance[u] + weight < distance[v]:
            raise NegativeCycleError("negative weight cycle reachable from source")
    return ShortestPaths(distance, predecessor)


def prim_mst(
    vertices: Iterable[Hashable], edges: Iterable[tuple[Any, Any, float]]
) -> list[MSTEdge]:
    """Minimum spanning tree of an undirected graph, grown from the first vertex.

    Returns one edge for every vertex after the first, in vertex order.
    Raises ValueError if the graph is not connected.
    """
    names = _vertex_order(vertices)
    if not names:
        return []
    adjacency: dict[Any, list[tuple[Any, float]]] = {v: [] for v in names}
    for u, v, weight in _checked_edges(edges, set(names)):
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    key: dict[Any, float] = {v: math.inf for v in names}
    parent: dict[Any, Optional[Any]] = {v: None for v in names}
    key[names[0]] = 0
    remaining = dict.fromkeys(names)
    while remaining:
        current = min(remaining, key=key.__getitem__)
        if key[current] == math.inf:
            raise ValueError("graph is not connected")
        del remaining[current]
        for neighbour, weight in adjacency[current]:
            if neighbour in remaining and weight < key[neighbour]:
                key[neighbour] = weight
                parent[neighbour] = current
    return [MSTEdge(v, parent[v], key[v]) for v in names[1:]]