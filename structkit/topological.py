"""Topological ordering of a directed MatrixGraph."""

from __future__ import annotations

from typing import Any

from structkit.graph_matrix import MatrixGraph


def in_degrees(graph: MatrixGraph) -> list[int]:
    """Number of arcs entering each vertex."""
    degrees = [0] * len(graph)
    for start in range(len(graph)):
        for end, _ in graph.arcs_from(start):
            degrees[end] += 1
    return degrees


def topological_sort(graph: MatrixGraph) -> list[Any]:
    """Vertex labels in a topological order, found with a stack.

    Sources are pushed in index order and the most recently pushed vertex
    is taken first. Raise ValueError if the graph has a cycle.
    """
    degrees = in_degrees(graph)
    stack = [vertex for vertex, degree in enumerate(degrees) if degree == 0]
    order: list[int] = []
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for end, _ in graph.arcs_from(vertex):
            degrees[end] -= 1
            if degrees[end] == 0:
                stack.append(end)
    if len(order) != len(graph):
        raise ValueError("graph has a cycle")
    return [graph.vertices[vertex] for vertex in order]