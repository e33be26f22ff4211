"""A graph stored as an adjacency matrix, with depth- and breadth-first walks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

NO_ARC = 32767


class MatrixGraph:
    """Graph over labelled vertices; a matrix entry of 0 or NO_ARC means no arc."""

    def __init__(self, vertices: Iterable[Any], matrix: Sequence[Sequence[int]]) -> None:
        self.vertices = tuple(vertices)
        rows = tuple(tuple(row) for row in matrix)
        if len(rows) != len(self.vertices):
            raise ValueError("matrix must have one row per vertex")
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("matrix must be square")
        self.matrix = rows

    def __len__(self) -> int:
        return len(self.vertices)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise IndexError(f"vertex index {index} out of range")

    def weight(self, start: int, end: int) -> int:
        """The raw matrix entry from ``start`` to ``end``."""
        self._check(start)
        self._check(end)
        return self.matrix[start][end]

    def has_arc(self, start: int, end: int) -> bool:
        return self.weight(start, end) not in (0, NO_ARC)

    def arcs_from(self, index: int) -> Iterator[tuple[int, int]]:
        """Yield ``(end, weight)`` for every arc leaving ``index``, by ascending end."""
        self._check(index)
        for end, weight in enumerate(self.matrix[index]):
            if weight not in (0, NO_ARC):
                yield end, weight

    @property
    def arc_count(self) -> int:
        """Number of arcs counted as undirected edges: matrix arcs halved."""
        return sum(1 for index in range(len(self)) for _ in self.arcs_from(index)) // 2

    def dfs(self, start: int) -> list[Any]:
        """Vertex labels in depth-first order from ``start``."""
        self._check(start)
        visited: set[int] = set()
        order: list[Any] = []

        def visit(index: int) -> None:
            visited.add(index)
            order.append(self.vertices[index])
            for end, _ in self.arcs_from(index):
                if end not in visited:
                    visit(end)

        visit(start)
        return order

    def bfs(self, start: int) -> list[Any]:
        """Vertex labels in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order = [self.vertices[start]]
        queue = deque([start])
        while queue:
            index = queue.popleft()
            for end, _ in self.arcs_from(index):
                if end not in visited:
                    visited.add(end)
                    order.append(self.vertices[end])
                    queue.append(end)
        return order