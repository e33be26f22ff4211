import pytest

from structkit.graph_matrix import NO_ARC, MatrixGraph
from structkit.spanning_trees import Edge, kruskal, prim

M = NO_ARC


@pytest.fixture
def graph():
    return MatrixGraph(
        "123456",
        [
            [0, 6, 1, 5, M, M],
            [6, 0, 5, M, 3, M],
            [1, 5, 0, 5, 6, 4],
            [5, M, 5, 0, M, 2],
            [M, 3, 6, M, 0, 6],
            [M, M, 4, 2, 6, 0],
        ],
    )


def _total(edges):
    return sum(edge.weight for edge in edges)


def test_kruskal_total_weight(graph):
    assert _total(kruskal(graph)) == 15


def test_kruskal_spans_all_vertices(graph):
    edges = kruskal(graph)
    assert len(edges) == len(graph) - 1
    touched = {edge.start for edge in edges} | {edge.end for edge in edges}
    assert touched == set(range(len(graph)))


def test_kruskal_takes_edges_by_ascending_weight(graph):
    weights = [edge.weight for edge in kruskal(graph)]
    assert weights == sorted(weights)


def test_kruskal_edges_are_real_arcs(graph):
    for edge in kruskal(graph):
        assert graph.weight(edge.start, edge.end) == edge.weight
        assert edge.start < edge.end


def test_kruskal_on_disconnected_graph_gives_forest():
    g = MatrixGraph(
        "ABCD",
        [
            [0, 1, M, M],
            [1, 0, M, M],
            [M, M, 0, 2],
            [M, M, 2, 0],
        ],
    )
    assert len(kruskal(g)) == len(g) - 2


def test_prim_first_edge_is_cheapest_from_start(graph):
    assert prim(graph, 0)[0] == Edge(0, 2, 1)


def test_prim_total_matches_kruskal(graph):
    assert _total(prim(graph, 0)) == _total(kruskal(graph))


@pytest.mark.parametrize("start", range(6))
def test_prim_total_independent_of_start(graph, start):
    edges = prim(graph, start)
    assert len(edges) == len(graph) - 1
    assert _total(edges) == _total(kruskal(graph))


def test_prim_edges_grow_from_tree(graph):
    reached = {3}
    for edge in prim(graph, 3):
        assert edge.start in reached
        assert edge.end not in reached
        assert graph.weight(edge.start, edge.end) == edge.weight
        reached.add(edge.end)
    assert reached == set(range(len(graph)))


def test_prim_disconnected_raises():
    g = MatrixGraph("ABC", [[0, 1, M], [1, 0, M], [M, M, 0]])
    with pytest.raises(ValueError):
        prim(g, 0)


def test_prim_start_out_of_range(graph):
    with pytest.raises(IndexError):
        prim(graph, 6)