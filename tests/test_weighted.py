import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from classicds.weighted import NegativeCycleError, bellman_ford, prim_mst


def test_bellman_ford_small_graph():
    result = bellman_ford("abc", [("a", "b", 4), ("a", "c", 1), ("c", "b", 2)], "a")
    assert result.distances == {"a": 0, "b": 3, "c": 1}
    assert result.predecessors["b"] == "c"
    assert result.predecessors["a"] is None


def test_bellman_ford_unreachable_is_infinite():
    result = bellman_ford("abc", [("a", "b", 5)], "a")
    assert result.distances["c"] == math.inf
    assert result.predecessors["c"] is None


def test_bellman_ford_negative_edge_without_cycle():
    result = bellman_ford("abc", [("a", "b", 5), ("b", "c", -3)], "a")
    assert result.distances["c"] == result.distances["b"] - 3


def test_bellman_ford_negative_cycle():
    edges = [("a", "b", 1), ("b", "c", -2), ("c", "a", -1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford("abc", edges, "a")


def test_bellman_ford_unknown_source():
    with pytest.raises(KeyError):
        bellman_ford("ab", [("a", "b", 1)], "z")


def test_bellman_ford_unknown_edge_vertex():
    with pytest.raises(ValueError):
        bellman_ford("ab", [("a", "q", 1)], "a")


def test_prim_small_graph():
    edges = [("a", "b", 1), ("b", "c", 2), ("a", "c", 3), ("c", "d", 4)]
    tree = prim_mst("abcd", edges)
    assert [tuple(e) for e in tree] == [("b", "a", 1), ("c", "b", 2), ("d", "c", 4)]


def test_prim_disconnected():
    with pytest.raises(ValueError):
        prim_mst("abc", [("a", "b", 1)])


def test_prim_empty_and_single():
    assert prim_mst([], []) == []
    assert prim_mst(["a"], []) == []


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(1, 8))
    chain = [(i, i + 1, draw(st.integers(0, 20))) for i in range(n - 1)]
    extra = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 20)),
            max_size=12,
        )
    )
    return list(range(n)), chain, chain + extra


@given(connected_graphs())
def test_prim_spanning_tree_invariants(graph):
    vertices, chain, edges = graph
    tree = prim_mst(vertices, edges)
    assert len(tree) == len(vertices) - 1
    assert sorted(e.vertex for e in tree) == vertices[1:]
    available = {(u, v, w) for u, v, w in edges} | {(v, u, w) for u, v, w in edges}
    for edge in tree:
        assert (edge.vertex, edge.parent, edge.weight) in available
    assert sum(e.weight for e in tree) <= sum(w for _, _, w in chain)


@given(connected_graphs())
def test_bellman_ford_distances_are_consistent(graph):
    vertices, _, edges = graph
    result = bellman_ford(vertices, edges, 0)
    d = result.distances
    assert d[0] == 0
    for u, v, w in edges:
        assert d[v] <= d[u] + w
    for v, p in result.predecessors.items():
        if p is not None:
            assert any(a == p and b == v and d[p] + w == d[v] for a, b, w in edges)