import pytest

from utilkit.compare import compare_str_ignore_case
from utilkit.graph import Graph, Vertex, VertexState


def _chain(*names):
    vertices = [Vertex(name) for name in names]
    for start, end in zip(vertices, vertices[1:]):
        start.connect(end)
    return vertices


def test_connect_is_directional():
    a, b = Vertex("a"), Vertex("b")
    a.connect(b)
    assert a.is_connected(b)
    assert not b.is_connected(a)


def test_adjacent_lists_newest_edge_first():
    a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
    a.connect(b)
    a.connect(c)
    assert list(a.adjacent()) == ["c", "b"]


def test_disconnect_removes_edge():
    a, b = _chain("a", "b")
    a.disconnect(b)
    assert not a.is_connected(b)
    assert list(a.adjacent()) == []


def test_disconnect_missing_edge_raises():
    a, b = Vertex("a"), Vertex("b")
    with pytest.raises(ValueError):
        a.disconnect(b)


def test_breadth_first_unbounded_follows_chain():
    a, _, _ = _chain("a", "b", "c")
    assert list(a.breadth_first(-1)) == ["a", "b", "c"]


@pytest.mark.parametrize(
    "max_level, expected",
    [(0, ["a"]), (1, ["a", "b"]), (2, ["a", "b", "c"]), (5, ["a", "b", "c"])],
)
def test_breadth_first_respects_max_level(max_level, expected):
    a, _, _ = _chain("a", "b", "c")
    assert list(a.breadth_first(max_level)) == expected


def test_breadth_first_visits_each_vertex_once_in_cycle():
    a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
    a.connect(b)
    b.connect(a)
    a.connect(c)
    c.connect(a)
    result = list(a.breadth_first())
    assert sorted(result) == ["a", "b", "c"]
    assert result[0] == "a"


def test_breadth_first_reports_by_level():
    a, b, c, d = (Vertex(x) for x in "abcd")
    a.connect(b)
    a.connect(c)
    b.connect(d)
    c.connect(d)
    result = list(a.breadth_first())
    assert result[0] == "a"
    assert set(result[1:3]) == {"b", "c"}
    assert result[3:] == ["d"]


def test_states_reset_after_traversal():
    vertices = _chain("a", "b", "c")
    first = list(vertices[0].breadth_first())
    assert all(v.state == VertexState.NOT_PASSED for v in vertices)
    assert all(v.level == 0 for v in vertices)
    assert list(vertices[0].breadth_first()) == first


def test_skip_state_walks_through_without_reporting():
    a, b, _ = _chain("a", "b", "c")
    a.set_adjacent_state(VertexState.SKIP)
    assert b.state == VertexState.SKIP
    assert list(a.breadth_first()) == ["a", "c"]
    assert b.state == VertexState.NOT_PASSED


def test_closing_traversal_early_resets_states():
    vertices = _chain("a", "b", "c")
    walk = vertices[0].breadth_first()
    assert next(walk) == "a"
    walk.close()
    assert all(v.state == VertexState.NOT_PASSED for v in vertices)


def test_graph_iterates_newest_first():
    graph = Graph()
    graph.add(1)
    graph.add(2)
    assert list(graph) == [2, 1]
    assert len(graph) == 2


def test_graph_find():
    graph = Graph()
    graph.add("a")
    b = graph.add("b")
    assert graph.find("b") is b
    assert graph.find("B", compare_str_ignore_case) is b
    assert graph.find("z") is None


def test_graph_remove_drops_edges_both_ways():
    graph = Graph()
    a = graph.add("a")
    b = graph.add("b")
    a.connect(b)
    b.connect(a)
    assert graph.remove(b) == "b"
    assert not a.is_connected(b)
    assert list(a.adjacent()) == []
    assert list(graph) == ["a"]
    assert list(a.breadth_first()) == ["a"]


def test_graph_remove_twice_raises():
    graph = Graph()
    a = graph.add("a")
    graph.remove(a)
    with pytest.raises(ValueError):
        graph.remove(a)


def test_graph_remove_foreign_vertex_raises():
    graph, other = Graph(), Graph()
    vertex = other.add("x")
    with pytest.raises(ValueError):
        graph.remove(vertex)
    assert len(other) == 1


def test_graph_remove_self_loop():
    graph = Graph()
    a = graph.add("a")
    a.connect(a)
    assert graph.remove(a) == "a"
    assert len(graph) == 0


def test_graph_clear():
    graph = Graph()
    a = graph.add("a")
    b = graph.add("b")
    a.connect(b)
    graph.clear()
    assert len(graph) == 0
    assert list(graph) == []
    assert not a.is_connected(b)


def test_graph_vertices_match_data():
    graph = Graph()
    graph.add("a")
    graph.add("b")
    assert [v.data for v in graph.vertices()] == list(graph)