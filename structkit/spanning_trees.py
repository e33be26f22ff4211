"""Minimum spanning trees of a weighted MatrixGraph: Kruskal and Prim."""

from __future__ import annotations

import math
from dataclasses import dataclass
from operator import attrgetter

from structkit.graph_matrix import MatrixGraph


@dataclass(frozen=True)
class Edge:
    """A tree edge between vertex indexes ``start`` and ``end``."""

    start: int
    end: int
    weight: int


def kruskal(graph: MatrixGraph) -> list[Edge]:
    """Edges chosen by Kruskal's method, in the order they were taken.

    Candidate edges come from the upper triangle of the matrix and are
    taken by ascending weight; equal weights keep matrix order. On a
    disconnected graph the result is a spanning forest.
    """
    count = len(graph)
    candidates = [
        Edge(start, end, weight)
        for start in range(count)
        for end, weight in graph.arcs_from(start)
        if end > start
    ]
    candidates.sort(key=attrgetter("weight"))
    component = list(range(count))
    tree: list[Edge] = []
    for edge in candidates:
        start, end = component[edge.start], component[edge.end]
        if start != end:
            tree.append(edge)
            component = [start if label == end else label for label in component]
    return tree


def prim(graph: MatrixGraph, start: int = 0) -> list[Edge]:
    """Edges chosen by Prim's method growing from ``start``, in the order taken.

    Each edge runs from the tree vertex to the newly added one. Ties go
    to the lowest vertex index. Raise ValueError if the graph is not
    connected and IndexError if ``start`` is out of range.
    """
    count = len(graph)
    if not 0 <= start < count:
        raise IndexError(f"vertex index {start} out of range")
    source = [start] * count
    cost: list[float] = [math.inf] * count
    for end, weight in graph.arcs_from(start):
        cost[end] = weight
    in_tree = [False] * count
    in_tree[start] = True

    tree: list[Edge] = []
    for _ in range(count - 1):
        candidates = [
            vertex
            for vertex in range(count)
            if not in_tree[vertex] and cost[vertex] < math.inf
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        nearest = min(candidates, key=cost.__getitem__)
        tree.append(Edge(source[nearest], nearest, int(cost[nearest])))
        in_tree[nearest] = True
        for end, weight in graph.arcs_from(nearest):
            if not in_tree[end] and weight < cost[end]:
                cost[end] = weight
                source[end] = nearest
    return tree