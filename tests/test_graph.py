from codedrills.graph import NodeNotInGraph, UndirectedGraph


def test_add_edge():
    graph = UndirectedGraph()
    graph.add_edge(("a", "b", 5))
    graph.add_edge(("b", "c", 10))
    graph.add_edge(("c", "a", 7))
    expected_edges = [
        ("a", "b", 5),
        ("b", "a", 5),
        ("c", "a", 7),
        ("a", "c", 7),
        ("b", "c", 10),
        ("c", "b", 10),
    ]
    edges = graph.edges()
    for edge in expected_edges:
        assert edge in edges
    assert len(edges) == 6


def test_add_node_reports_newness():
    graph = UndirectedGraph()
    assert graph.add_node("x") is True
    assert graph.add_node("x") is False
    assert graph.nodes() == {"x"}


def test_contains():
    graph = UndirectedGraph()
    graph.add_edge(("a", "b", 1))
    assert "a" in graph
    assert "b" in graph
    assert "z" not in graph


def test_nodes_after_edges():
    graph = UndirectedGraph()
    graph.add_edge(("p", "q", 2))
    graph.add_edge(("q", "r", 3))
    assert graph.nodes() == {"p", "q", "r"}


def test_isolated_node_has_no_edges():
    graph = UndirectedGraph()
    graph.add_node("lonely")
    assert graph.edges() == []


def test_node_not_in_graph_message():
    error = NodeNotInGraph()
    assert str(error) == "accessing a node that is not in the graph"