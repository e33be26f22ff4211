"""Single-source (Dijkstra) and all-pairs (Floyd) shortest paths on a MatrixGraph."""

from __future__ import annotations

import math
from dataclasses import dataclass

from structkit.graph_matrix import MatrixGraph


@dataclass
class DijkstraResult:
    """Distances and predecessors from ``source``; unreachable vertices are at inf."""

    source: int
    distances: list[float]
    predecessors: list[int | None]
    settled: list[bool]

    def path_to(self, target: int) -> list[int]:
        """Vertex indexes of the shortest path from the source to ``target``."""
        if not 0 <= target < len(self.distances):
            raise IndexError(f"vertex index {target} out of range")
        if self.distances[target] == math.inf:
            raise ValueError(f"vertex {target} is unreachable")
        path = [target]
        while path[-1] != self.source:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return path


def _check_start(graph: MatrixGraph, start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError(f"vertex index {start} out of range")


def dijkstra(graph: MatrixGraph, start: int) -> DijkstraResult:
    """Shortest distances from ``start``; ties settle the lowest index first."""
    _check_start(graph, start)
    count = len(graph)
    distances: list[float] = [math.inf] * count
    predecessors: list[int | None] = [None] * count
    settled = [False] * count
    for end, weight in graph.arcs_from(start):
        distances[end] = weight
        predecessors[end] = start
    distances[start] = 0
    predecessors[start] = None
    settled[start] = True

    for _ in range(count - 1):
        candidates = [
            vertex
            for vertex, done in enumerate(settled)
            if not done and distances[vertex] < math.inf
        ]
        if not candidates:
            break
        nearest = min(candidates, key=distances.__getitem__)
        settled[nearest] = True
        for end, weight in graph.arcs_from(nearest):
            if not settled[end] and distances[nearest] + weight < distances[end]:
                distances[end] = distances[nearest] + weight
                predecessors[end] = nearest

    return DijkstraResult(start, distances, predecessors, settled)


def floyd(graph: MatrixGraph) -> tuple[list[list[float]], list[list[int | None]]]:
    """All-pairs distances and predecessors.

    ``predecessors[a][b]`` is the vertex before ``b`` on the shortest path
    from ``a``; None on the diagonal and where ``b`` is unreachable.
    """
    count = len(graph)
    distances: list[list[float]] = [[math.inf] * count for _ in range(count)]
    predecessors: list[list[int | None]] = [[None] * count for _ in range(count)]
    for start, row in enumerate(distances):
        row[start] = 0
        for end, weight in graph.arcs_from(start):
            if end != start:
                row[end] = weight
                predecessors[start][end] = start

    for mid in range(count):
        for a in range(count):
            for b in range(count):
                via = distances[a][mid] + distances[mid][b]
                if via < distances[a][b]:
                    distances[a][b] = via
                    predecessors[a][b] = predecessors[mid][b]
    return distances, predecessors