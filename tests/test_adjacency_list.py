import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.adjacency_list import AdjacencyList, main


def test_edge_is_undirected():
    graph = AdjacencyList(3)
    graph.add_edge(0, 1)
    assert graph.neighbours(0) == [1]
    assert graph.neighbours(1) == [0]
    assert graph.neighbours(2) == []


def test_neighbours_keep_insertion_order():
    graph = AdjacencyList(4)
    graph.add_edge(0, 3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.neighbours(0) == [3, 1, 2]


def test_self_loop_listed_twice():
    graph = AdjacencyList(3)
    graph.add_edge(2, 2)
    assert graph.neighbours(2) == [2, 2]


@pytest.mark.parametrize("u, v", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_invalid_edge_rejected(u, v):
    graph = AdjacencyList(3)
    with pytest.raises(IndexError):
        graph.add_edge(u, v)
    assert all(graph.neighbours(x) == [] for x in range(3))


def test_invalid_vertex_query():
    with pytest.raises(IndexError):
        AdjacencyList(2).neighbours(2)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        AdjacencyList(-1)


def test_neighbours_is_a_copy():
    graph = AdjacencyList(2)
    graph.add_edge(0, 1)
    graph.neighbours(0).append(99)
    assert graph.neighbours(0) == [1]


def test_format():
    graph = AdjacencyList(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.format() == "0: 1 2\n1: 0\n2: 0"


@given(st.lists(st.tuples(st.integers(0, 5), st.integers(0, 5)), max_size=20))
def test_symmetry(edges):
    graph = AdjacencyList(6)
    for u, v in edges:
        graph.add_edge(u, v)
    assert len(graph) == 6
    for u in range(6):
        for v in range(6):
            assert graph.neighbours(u).count(v) == graph.neighbours(v).count(u)


def test_main_skips_invalid_edge(monkeypatch, capsys):
    replies = iter(["3", "2", "0 1", "5 0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid edge: (5, 0). Skipping..." in out
    assert "0: 1\n1: 0\n2:" in out