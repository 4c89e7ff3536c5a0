import pytest

from clrsalgo.adjlist import AdjacencyList, EdgeType
from clrsalgo.common import NILVALUE
from clrsalgo.dfs import dfs, edge_type_name

# u=0 v=1 w=2 x=3 y=4 z=5
TEXTBOOK = {0: [1, 3], 1: [4], 2: [4, 5], 3: [1], 4: [3], 5: [5]}


def _graph(adjacency, size):
    graph = AdjacencyList(size)
    for u, targets in adjacency.items():
        for v in reversed(targets):
            graph.insert_weighted(u, v, 0)
    return graph


def test_discovery_and_finish_times():
    result = dfs(_graph(TEXTBOOK, 6))
    assert result.discovery == [1, 2, 9, 4, 3, 10]
    assert result.finish == [8, 7, 12, 5, 6, 11]


def test_parents():
    result = dfs(_graph(TEXTBOOK, 6))
    assert result.parent == [NILVALUE, 0, NILVALUE, 4, 1, 2]


def test_edge_classification():
    graph = _graph(TEXTBOOK, 6)
    result = dfs(graph)
    kinds = {(u, v): t for u, v, t in result.edges}
    assert kinds[(0, 1)] is EdgeType.TREE
    assert kinds[(0, 3)] is EdgeType.FORWARD
    assert kinds[(3, 1)] is EdgeType.BACK
    assert kinds[(2, 4)] is EdgeType.CROSS
    assert kinds[(5, 5)] is EdgeType.BACK
    assert graph.neighbors(0)[1].edge_type is EdgeType.FORWARD
    assert len(result.edges) == sum(len(t) for t in TEXTBOOK.values())


def test_parenthesis_structure():
    result = dfs(_graph(TEXTBOOK, 6))
    times = sorted(result.discovery + result.finish)
    assert times == list(range(1, 13))
    for v in range(6):
        p = result.parent[v]
        if p != NILVALUE:
            assert result.discovery[p] < result.discovery[v] < result.finish[v] < result.finish[p]


def test_custom_order():
    result = dfs(_graph(TEXTBOOK, 6), order=[2, 0, 1, 3, 4, 5])
    assert result.discovery[2] == 1
    assert result.parent[4] == 2


def test_order_out_of_range():
    with pytest.raises(IndexError):
        dfs(AdjacencyList(2), order=[3])


def test_edge_type_name():
    assert edge_type_name(EdgeType.TREE) == "tree edge"
    assert edge_type_name(EdgeType.CROSS) == "cross edge"
    assert edge_type_name(1) == "back edge"


def test_edge_type_name_invalid():
    with pytest.raises(ValueError):
        edge_type_name(7)