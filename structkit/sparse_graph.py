"""An unweighted graph stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Iterator


class SparseGraph:
    """Adjacency-list graph; parallel edges are kept and counted."""

    def __init__(self, nodes: int, directed: bool) -> None:
        if nodes <= 0:
            raise ValueError("node count must be positive")
        self._nodes = nodes
        self._edges = 0
        self.directed = directed
        self._adjacent: list[list[int]] = [[] for _ in range(nodes)]

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
        """Connect ``start`` to ``end`` (and back, when undirected and not a loop)."""
        self._check(start, end)
        self._adjacent[start].append(end)
        if start != end and not self.directed:
            self._adjacent[end].append(start)
        self._edges += 1

    def has_edge(self, start: int, end: int) -> bool:
        self._check(start, end)
        return end in self._adjacent[start]

    def neighbours(self, node: int) -> Iterator[int]:
        """Iterate over the nodes adjacent to ``node`` in the order they were added."""
        self._check(node)
        return iter(self._adjacent[node])

    def render(self) -> str:
        """One ``adj <node>:`` line per node listing its neighbours, tab separated."""
        return "".join(
            f"adj {node}:\t" + "".join(f"{end}\t" for end in ends) + "\n"
            for node, ends in enumerate(self._adjacent)
        )