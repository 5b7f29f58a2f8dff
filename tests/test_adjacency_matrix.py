import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.adjacency_matrix import AdjacencyMatrix, main


def test_undirected_edge_is_symmetric():
    graph = AdjacencyMatrix(3)
    graph.add_edge(0, 2, 5)
    assert graph.weight(0, 2) == 5
    assert graph.weight(2, 0) == 5


def test_directed_edge_is_one_way():
    graph = AdjacencyMatrix(3, directed=True)
    graph.add_edge(0, 1, 4)
    assert graph.weight(0, 1) == 4
    assert graph.weight(1, 0) == 0


def test_default_weight_is_one():
    graph = AdjacencyMatrix(2)
    graph.add_edge(0, 1)
    assert graph.weight(1, 0) == 1


def test_remove_edge():
    graph = AdjacencyMatrix(2)
    graph.add_edge(0, 1, 9)
    graph.remove_edge(1, 0)
    assert graph.weight(0, 1) == 0
    assert graph.weight(1, 0) == 0


def test_remove_directed_keeps_reverse():
    graph = AdjacencyMatrix(2, directed=True)
    graph.add_edge(0, 1, 2)
    graph.add_edge(1, 0, 3)
    graph.remove_edge(0, 1)
    assert graph.weight(0, 1) == 0
    assert graph.weight(1, 0) == 3


@pytest.mark.parametrize("u, v", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_invalid_vertices(u, v):
    graph = AdjacencyMatrix(2)
    with pytest.raises(IndexError):
        graph.add_edge(u, v, 1)
    with pytest.raises(IndexError):
        graph.remove_edge(u, v)
    with pytest.raises(IndexError):
        graph.weight(u, v)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        AdjacencyMatrix(-2)


def test_format():
    graph = AdjacencyMatrix(2)
    graph.add_edge(0, 1, 7)
    assert graph.format() == "0 7\n7 0"
    assert AdjacencyMatrix(0).format() == ""


@given(st.lists(st.tuples(st.integers(0, 3), st.integers(0, 3), st.integers(1, 50)), max_size=15))
def test_undirected_symmetry(edges):
    graph = AdjacencyMatrix(4)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    assert len(graph) == 4
    for u in range(4):
        for v in range(4):
            assert graph.weight(u, v) == graph.weight(v, u)


def test_main_builds_and_displays(monkeypatch, capsys):
    replies = iter(["2", "0", "1", "0 1 4", "3", "4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Adjacency Matrix:\n0 4\n4 0" in out
    assert "Exiting..." in out


def test_main_reports_invalid_vertex(monkeypatch, capsys):
    replies = iter(["2", "1", "1", "0 5 3", "4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    assert main([]) == 0
    assert "Invalid vertex index!" in capsys.readouterr().out