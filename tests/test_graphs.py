import pytest
from hypothesis import given
from hypothesis import strategies as st

from classicds.graphs import Graph


def _directed_example():
    g = Graph(directed=True)
    for u, v in [(1, 0), (0, 2), (2, 1), (0, 3), (1, 4)]:
        g.add_edge(u, v)
    return g


def _undirected_example():
    g = Graph()
    for u, v in [(1, 2), (1, 3), (2, 3), (3, 4), (2, 5)]:
        g.add_edge(u, v)
    return g


def test_directed_bfs_order():
    assert _directed_example().bfs(0) == [0, 2, 3, 1, 4]


def test_undirected_dfs_order():
    assert _undirected_example().dfs(1) == [1, 2, 3, 4, 5]


def test_bfs_levels():
    assert _undirected_example().bfs_levels(1) == {1: 0, 2: 1, 3: 1, 4: 2, 5: 2}


def test_directed_edges_go_one_way():
    g = _directed_example()
    assert 0 in g.neighbors(1)
    assert 1 not in g.neighbors(0)


def test_unknown_vertex_raises():
    g = _undirected_example()
    with pytest.raises(KeyError):
        g.neighbors(99)
    with pytest.raises(KeyError):
        g.bfs(99)
    with pytest.raises(KeyError):
        g.dfs(99)


def test_dfs_forest_splits_components():
    comp_a, comp_b = [0, 1], [2, 3]
    g = Graph()
    g.add_edge(*comp_a)
    g.add_edge(*comp_b)
    forest = g.dfs_forest()
    assert sorted(sorted(tree) for tree in forest) == [comp_a, comp_b]


def test_isolated_vertex_is_its_own_tree():
    g = Graph(vertices=["x"])
    g.add_edge("a", "b")
    assert ["x"] in g.dfs_forest()
    assert g.bfs("x") == ["x"]


def test_adjacency_is_a_copy():
    g = _undirected_example()
    adj = g.adjacency()
    adj[1].append(42)
    assert 42 not in g.neighbors(1)


edges_strategy = st.lists(
    st.tuples(st.integers(0, 7), st.integers(0, 7)), min_size=1, max_size=20
)


@given(edges_strategy)
def test_undirected_adjacency_is_symmetric(edges):
    g = Graph()
    for u, v in edges:
        g.add_edge(u, v)
    adj = g.adjacency()
    for u, nbrs in adj.items():
        for v in nbrs:
            assert u in adj[v]


@given(edges_strategy, st.booleans())
def test_bfs_and_dfs_reach_same_vertices(edges, directed):
    g = Graph(directed=directed)
    for u, v in edges:
        g.add_edge(u, v)
    start = edges[0][0]
    bfs, dfs = g.bfs(start), g.dfs(start)
    assert set(bfs) == set(dfs)
    assert len(bfs) == len(set(bfs))
    assert bfs[0] == dfs[0] == start


@given(edges_strategy)
def test_forest_covers_every_vertex_once(edges):
    g = Graph()
    for u, v in edges:
        g.add_edge(u, v)
    flat = [v for tree in g.dfs_forest() for v in tree]
    assert sorted(flat) == sorted(g.adjacency())


@given(edges_strategy)
def test_levels_differ_by_at_most_one_along_edges(edges):
    g = Graph()
    for u, v in edges:
        g.add_edge(u, v)
    levels = g.bfs_levels(edges[0][0])
    for u, v in edges:
        if u in levels:
            assert abs(levels[u] - levels[v]) <= 1