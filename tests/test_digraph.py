import pytest

from estudos.digraph import DiGraph, Edge, Vertex, VertexState


@pytest.fixture
def graph():
    g = DiGraph()
    g.add_vertex(1, "R1", 1)
    g.add_vertex(2, "M1", 3)
    g.add_vertex(3, "_E1", 2)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    return g


def test_vertices_in_stack_order(graph):
    assert [v.id for v in graph.vertices()] == [3, 2, 1]


def test_edges_in_stack_order(graph):
    assert [e.id for e in graph.edges()] == [2, 1]


def test_degrees(graph):
    r1 = graph.vertex(1)
    assert r1.in_degree() == 2
    assert r1.out_degree() == 0
    assert graph.vertex(2).out_degree() == 1
    assert graph.vertex(2).in_degree() == 0


def test_find_label(graph):
    assert graph.find_label("M1") is graph.vertex(2)
    assert graph.find_label("M9") is None


def test_vertex_missing_returns_none(graph):
    assert graph.vertex(42) is None


def test_add_edge_missing_vertex_raises(graph):
    with pytest.raises(KeyError):
        graph.add_edge(9, 1, 42)
    with pytest.raises(KeyError):
        graph.add_edge(9, 42, 1)
    assert len(graph.edges()) == 2


def test_remove_edge_updates_frontiers(graph):
    graph.remove_edge(1)
    assert [e.id for e in graph.edges()] == [2]
    assert graph.vertex(1).in_degree() == 1
    assert graph.vertex(2).out_degree() == 0


def test_remove_missing_edge_raises(graph):
    with pytest.raises(KeyError):
        graph.remove_edge(99)


def test_remove_vertex_removes_incident_edges(graph):
    graph.remove_vertex(1)
    assert graph.vertex(1) is None
    assert graph.edges() == []
    assert graph.vertex(2).out_degree() == 0
    assert graph.vertex(3).out_degree() == 0


def test_remove_missing_vertex_is_ignored(graph):
    graph.remove_vertex(77)
    assert len(graph.vertices()) == 3


def test_edge_structure():
    g = DiGraph()
    g.add_vertex(1, "M1", 3)
    g.add_vertex(2, "R1", 1)
    edge = g.add_edge(5, 1, 2)
    assert edge.structure() == "1:M1 > 2:R1"
    assert edge.describe() == "(id:5 {1,2})"


def test_format_lists_edges_newest_first(graph):
    assert graph.format() == "3:_E1 > 1:R1\n2:M1 > 1:R1\n"


def test_format_empty_graph():
    assert DiGraph().format() == ""


def test_vertex_describe(graph):
    text = graph.vertex(2).describe()
    assert text == (
        "(id:2, rotulo:M1, grau_entrada:0, fronteira_entrada:{ }, "
        "grau_saida:1, fronteira_saida:{ (id:1 {2,1})})"
    )


def test_vertex_defaults_and_state():
    v = Vertex(7, "X", 1)
    assert v.parent is None
    assert v.state is None
    v.state = VertexState.CLOSED
    assert v.state == 3
    assert VertexState.OPEN == 1


def test_edge_links_vertices(graph):
    edge = graph.edges()[0]
    assert isinstance(edge, Edge)
    assert edge in edge.u.out_edges
    assert edge in edge.v.in_edges


def test_returned_lists_are_copies(graph):
    graph.vertices().clear()
    graph.edges().clear()
    assert len(graph.vertices()) == 3
    assert len(graph.edges()) == 2