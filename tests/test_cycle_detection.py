import pytest

from structkit.cycle_detection import has_cycle
from structkit.dense_graph import DenseGraph
from structkit.sparse_graph import SparseGraph

GRAPH_TYPES = [SparseGraph, DenseGraph]


def _graph(graph_type, nodes, edges):
    graph = graph_type(nodes, False)
    for a, b in edges:
        graph.add_edge(a, b)
    return graph


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_triangle_has_cycle(graph_type):
    assert has_cycle(_graph(graph_type, 3, [(0, 1), (1, 2), (2, 0)])) is True


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_tree_has_no_cycle(graph_type):
    edges = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]
    assert has_cycle(_graph(graph_type, 6, edges)) is False


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_graph_without_edges(graph_type):
    assert has_cycle(_graph(graph_type, 4, [])) is False


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_cycle_in_a_later_component(graph_type):
    edges = [(0, 1), (2, 3), (3, 4), (4, 2)]
    assert has_cycle(_graph(graph_type, 5, edges)) is True


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_forest_has_no_cycle(graph_type):
    edges = [(0, 1), (2, 3), (3, 4)]
    assert has_cycle(_graph(graph_type, 5, edges)) is False


def test_adding_an_edge_to_a_tree_creates_a_cycle():
    edges = [(node, node + 1) for node in range(9)]
    graph = _graph(SparseGraph, 10, edges)
    assert has_cycle(graph) is False
    graph.add_edge(9, 3)
    assert has_cycle(graph) is True


def test_long_path_does_not_exhaust_recursion():
    size = 5000
    edges = [(node, node + 1) for node in range(size - 1)]
    assert has_cycle(_graph(SparseGraph, size, edges)) is False