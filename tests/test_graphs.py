import pytest

from exercisekit.graphs import Graph, tree_diameter

EDGES = [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]


def _example_graph():
    g = Graph(6)
    for u, v in EDGES:
        g.add_edge(u, v)
    return g


def test_neighbors_newest_first():
    g = _example_graph()
    assert g.neighbors(0) == [2, 1]


def test_edges_are_symmetric():
    g = _example_graph()
    for u, v in EDGES:
        assert v in g.neighbors(u)
        assert u in g.neighbors(v)


def test_bfs_example_order():
    g = _example_graph()
    assert g.bfs(0) == [0, 2, 1, 4, 3]


def test_bfs_visits_component_once():
    g = _example_graph()
    order = g.bfs(3)
    assert order[0] == 3
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert 5 not in order


def test_bfs_isolated_vertex():
    g = _example_graph()
    assert g.bfs(5) == [5]


def test_bad_vertex_raises():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2)
    with pytest.raises(IndexError):
        g.bfs(-1)


@pytest.mark.parametrize("n", [2, 3, 6, 10])
def test_path_diameter(n):
    edges = [(i, i + 1) for i in range(1, n)]
    assert tree_diameter(n, edges) == n - 1


def test_star_diameter():
    edges = [(1, v) for v in range(2, 8)]
    assert tree_diameter(7, edges) == 2


def test_single_vertex_diameter():
    assert tree_diameter(1, []) == 0


def test_diameter_independent_of_edge_order():
    edges = [(1, 2), (2, 3), (3, 4), (2, 5), (5, 6), (6, 7)]
    assert tree_diameter(7, edges) == tree_diameter(7, list(reversed(edges)))


def test_diameter_rejects_bad_vertex():
    with pytest.raises(ValueError):
        tree_diameter(3, [(1, 4)])
    with pytest.raises(ValueError):
        tree_diameter(0, [])