import pytest

from edgegraph.graph import (
    MAX_VERTICES,
    Edge,
    Graph,
    GraphError,
    TraversalStrategy,
    VertexRangeError,
)


def _graph(n, edges, directed=True):
    g = Graph(n, directed)
    for x, y in edges:
        g.add_edge(x, y)
        if not directed:
            g.add_edge(y, x)
    return g


def test_new_graph_initial_state():
    g = Graph(4, directed=True)
    assert len(g.vertices) == 5
    assert all(v.in_degree == 0 and v.out_degree == 0 for v in g.vertices)
    assert g.parent == [-1] * 5
    assert not any(g.discovered)
    assert not any(g.processed)
    assert list(g.vertex_ids()) == [1, 2, 3, 4]


def test_vertex_count_out_of_range_raises():
    with pytest.raises(VertexRangeError, match="out of range"):
        Graph(-1, directed=True)
    with pytest.raises(VertexRangeError, match="out of range"):
        Graph(MAX_VERTICES + 1, directed=False)
    with pytest.raises(VertexRangeError, match=r"\[0, 4\]"):
        Graph(5, directed=True, max_vertices=4)


def test_max_vertices_is_accepted():
    g = Graph(MAX_VERTICES, directed=True)
    assert g.n == MAX_VERTICES


def test_add_edge_rejects_invalid_vertex():
    g = Graph(4, directed=True)
    with pytest.raises(VertexRangeError, match="Vertex 0"):
        g.add_edge(0, 1)
    with pytest.raises(VertexRangeError, match="Vertex 5"):
        g.add_edge(1, 5)
    assert g.edge_count() == 0


def test_vertex_range_error_is_graph_and_index_error():
    with pytest.raises(IndexError):
        Graph(3, directed=True).neighbors(4)
    assert issubclass(VertexRangeError, GraphError)


def test_edge_multiplicity_kept():
    g = Graph(2, directed=True)
    g.add_edge(1, 2)
    g.add_edge(1, 2)
    assert g.neighbors(1) == [2, 2]
    assert g.vertices[2].in_degree == 2
    assert g.vertices[1].out_degree == 2


def test_undirected_add_edge_leaves_degrees_alone():
    g = Graph(2, directed=False)
    g.add_edge(1, 2)
    assert g.vertices[1].out_degree == 0
    assert g.vertices[2].in_degree == 0
    assert g.neighbors(1) == [2]
    assert g.neighbors(2) == []


def test_edge_weight_is_stored():
    g = Graph(2, directed=True)
    g.add_edge(1, 2, weight=7)
    assert g.vertices[1].edges == [Edge(to=2, weight=7)]


def test_dfs_preorder_follows_adjacency_order():
    g = _graph(5, [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)])
    assert list(g.dfs(1)) == [1, 2, 4, 5, 3]


def test_bfs_level_order():
    g = _graph(5, [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)])
    assert list(g.bfs(1)) == [1, 2, 3, 4, 5]


def test_bfs_never_enqueues_twice():
    g = _graph(4, [(1, 2), (1, 3), (2, 4), (3, 4)], directed=False)
    assert list(g.bfs(1)) == [1, 2, 3, 4]


def test_traversal_covers_disconnected_graph():
    g = _graph(6, [(1, 2), (2, 3), (3, 1), (4, 5), (5, 6)])
    order = list(g.dfs(3))
    assert order == [3, 1, 2, 4, 5, 6]

    g.unvisit()
    order = list(g.bfs(5))
    assert order == [5, 6, 1, 2, 3, 4]
    assert sorted(order) == list(g.vertex_ids())


@pytest.mark.parametrize("start", [None, 0, -3, 7, 1, 4])
@pytest.mark.parametrize("method", ["dfs", "bfs"])
def test_every_vertex_emitted_exactly_once(start, method):
    g = _graph(6, [(1, 2), (2, 1), (3, 3), (6, 4), (4, 6)])
    order = list(getattr(g, method)(start))
    assert sorted(order) == [1, 2, 3, 4, 5, 6]


def test_invalid_start_uses_ascending_scan():
    g = _graph(3, [(2, 1), (3, 2)])
    assert list(g.dfs(0)) == [1, 2, 3]


def test_markers_persist_between_traversals():
    g = _graph(3, [(1, 2), (2, 3)])
    assert list(g.dfs(1)) == [1, 2, 3]
    assert list(g.bfs(1)) == []


def test_unvisit_makes_traversals_repeatable():
    g = _graph(5, [(2, 4), (2, 1), (4, 5), (1, 3)], directed=False)
    first = list(g.dfs(2))
    g.unvisit()
    second = list(g.dfs(2))
    assert first == second == [2, 4, 5, 1, 3]


def test_processed_implies_discovered_after_traversal():
    g = _graph(4, [(1, 2), (2, 3), (3, 1)])
    list(g.bfs(2))
    for v in g.vertex_ids():
        assert g.discovered[v] and g.processed[v]


def test_dfs_marks_processed_after_descendants():
    g = _graph(3, [(1, 2), (2, 3)])
    it = g.dfs(1)
    assert next(it) == 1
    assert next(it) == 2
    assert g.processed[1] is False
    assert next(it) == 3
    list(it)
    assert g.processed[1] is True


def test_traversal_is_lazy():
    g = _graph(2, [(1, 2)])
    it = g.dfs(1)
    assert g.discovered[1] is False
    assert next(it) == 1
    assert g.discovered[1] is True


def test_deep_chain_dfs_does_not_recurse():
    n = 5000
    g = _graph(n, [(i, i + 1) for i in range(1, n)])
    assert list(g.dfs(1)) == list(range(1, n + 1))


def test_walk_visits_only_reachable_vertices():
    g = _graph(3, [(1, 2), (3, 1)])
    assert list(g.walk(1)) == [1, 2]
    assert list(g.walk(3, TraversalStrategy.BFS)) == [3]


def test_walk_rejects_invalid_root():
    g = Graph(3, directed=True)
    with pytest.raises(VertexRangeError):
        g.walk(0)


def test_repr_mentions_kind_and_edges():
    g = _graph(2, [(1, 2)], directed=False)
    assert repr(g) == "Graph(n=2, undirected, edges=2)"
