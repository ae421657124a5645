import pytest

from codedrills.traversal import AdjacencyGraph


def test_bfs_all_nodes_visited():
    graph = AdjacencyGraph(5)
    for src, dest in [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]:
        graph.add_edge(src, dest)
    assert graph.bfs(0) == [0, 1, 4, 2, 3]


def test_bfs_different_start():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    assert graph.bfs(2) == [2, 1, 0]


def test_bfs_with_cycle():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 0)
    assert graph.bfs(0) == [0, 1, 2]


def test_bfs_single_node():
    graph = AdjacencyGraph(1)
    assert graph.bfs(0) == [0]


def test_dfs_simple():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    assert graph.dfs(0) == [0, 1, 2]


def test_dfs_with_cycle():
    graph = AdjacencyGraph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    graph.add_edge(3, 3)
    assert graph.dfs(0) == [0, 1, 2, 3]


def test_dfs_disconnected_graph():
    graph = AdjacencyGraph(5)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(3, 4)
    assert graph.dfs(0) == [0, 1, 2]
    assert graph.dfs(3) == [3, 4]


def test_dfs_goes_deep_before_wide():
    graph = AdjacencyGraph(5)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    assert graph.dfs(0) == [0, 1, 3, 2, 4]
    assert graph.bfs(0) == [0, 1, 2, 3, 4]


def test_dfs_long_chain_does_not_recurse():
    n = 5000
    graph = AdjacencyGraph(n)
    for i in range(n - 1):
        graph.add_edge(i, i + 1)
    assert graph.dfs(0) == list(range(n))


def test_out_of_range_vertex():
    graph = AdjacencyGraph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 5)