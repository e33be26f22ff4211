"""An unweighted graph stored as a boolean adjacency matrix."""

from __future__ import annotations

from collections.abc import Iterator


class DenseGraph:
    """Adjacency-matrix graph; adding an existing edge again changes nothing."""

    def __init__(self, nodes: int, directed: bool) -> None:
        if nodes < 0:
            raise ValueError("node count must not be negative")
        self._nodes = nodes
        self._edges = 0
        self.directed = directed
        self._matrix = [[False] * nodes for _ in range(nodes)]

    @property
    def nodes(self) -> int:
        return self._nodes

    @property
    def edges(self) -> int:
        return self._edges

    def __len__(self) -> int:
        return self._nodes

    def _check(self, *indexes: int) -> None:
        for index in indexes:
            if not 0 <= index < self._nodes:
                raise IndexError(f"node index {index} out of range")

    def add_edge(self, start: int, end: int) -> None:
        """Connect ``start`` to ``end`` (and back, when undirected)."""
        if self.has_edge(start, end):
            return
        self._matrix[start][end] = True
        if not self.directed:
            self._matrix[end][start] = True
        self._edges += 1

    def has_edge(self, start: int, end: int) -> bool:
        self._check(start, end)
        return self._matrix[start][end]

    def neighbours(self, node: int) -> Iterator[int]:
        """Iterate over the nodes adjacent to ``node`` in ascending order."""
        self._check(node)
        row = self._matrix[node]
        return (index for index, linked in enumerate(row) if linked)

    def render(self) -> str:
        """The matrix as rows of 1 and 0, each entry followed by a tab."""
        return "".join(
            "".join(f"{int(linked)}\t" for linked in row) + "\n" for row in self._matrix
        )