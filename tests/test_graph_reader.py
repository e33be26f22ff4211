import pytest

from structkit.dense_graph import DenseGraph
from structkit.graph_reader import read_graph, read_graph_lines
from structkit.sparse_graph import SparseGraph

EDGES = [(0, 1), (1, 2), (2, 3), (3, 0), (1, 3)]


def _lines(nodes, edges):
    return [f"{nodes} {len(edges)}\n"] + [f"{a} {b}\n" for a, b in edges]


def test_reads_every_edge_into_sparse_graph():
    graph = read_graph_lines(SparseGraph(4, False), _lines(4, EDGES))
    assert graph.edges == len(EDGES)
    for a, b in EDGES:
        assert graph.has_edge(a, b)
        assert graph.has_edge(b, a)


def test_reads_into_dense_graph():
    graph = read_graph_lines(DenseGraph(4, True), _lines(4, EDGES))
    assert graph.edges == len(EDGES)
    assert all(graph.has_edge(a, b) for a, b in EDGES)


def test_returns_the_same_graph():
    graph = SparseGraph(4, False)
    assert read_graph_lines(graph, _lines(4, EDGES)) is graph


def test_extra_tokens_and_lines_are_ignored():
    lines = ["4 1 trailing\n", "0 2 extra\n", "1 3\n"]
    graph = read_graph_lines(SparseGraph(4, False), lines)
    assert graph.edges == 1
    assert graph.has_edge(0, 2)
    assert not graph.has_edge(1, 3)


def test_node_count_mismatch():
    with pytest.raises(ValueError):
        read_graph_lines(SparseGraph(5, False), _lines(4, EDGES))


def test_missing_header():
    with pytest.raises(ValueError):
        read_graph_lines(SparseGraph(4, False), [])


def test_malformed_header():
    with pytest.raises(ValueError):
        read_graph_lines(SparseGraph(4, False), ["four edges\n"])


def test_too_few_edge_lines():
    lines = _lines(4, EDGES)[:-1]
    with pytest.raises(ValueError):
        read_graph_lines(SparseGraph(4, False), lines)


def test_edge_out_of_range():
    with pytest.raises(ValueError):
        read_graph_lines(SparseGraph(4, False), ["4 1\n", "0 4\n"])


def test_negative_node_in_edge():
    with pytest.raises(ValueError):
        read_graph_lines(SparseGraph(4, False), ["4 1\n", "-1 2\n"])


def test_blank_edge_line():
    with pytest.raises(ValueError):
        read_graph_lines(SparseGraph(4, False), ["4 1\n", "\n"])


def test_read_graph_from_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("".join(_lines(4, EDGES)), encoding="utf-8")
    graph = read_graph(SparseGraph(4, False), path)
    assert graph.render() == read_graph_lines(
        SparseGraph(4, False), _lines(4, EDGES)
    ).render()


def test_read_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_graph(SparseGraph(4, False), tmp_path / "absent.txt")