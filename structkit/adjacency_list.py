"""A weighted graph stored as adjacency lists, built from a weight matrix."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

INFINITY = 32767


@dataclass(frozen=True)
class Arc:
    """An arc to the vertex at index ``vertex`` with the given ``weight``."""

    vertex: int
    weight: int


class AdjacencyListGraph:
    """Graph whose arcs are the matrix entries that are neither 0 nor INFINITY.

    Each vertex's arcs are kept newest first, so they come out in
    descending order of the target index.
    """

    def __init__(self, vertices: Iterable[Any], weights: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in weights]
        count = len(rows)
        labels = tuple(vertices)
        if len(labels) < count:
            raise ValueError("fewer vertex labels than matrix rows")
        if any(len(row) != count for row in rows):
            raise ValueError("weight matrix must be square")
        self.vertices = labels[:count]
        self._arcs: list[list[Arc]] = []
        for row in rows:
            arcs: list[Arc] = []
            for end, weight in enumerate(row):
                if weight not in (0, INFINITY):
                    arcs.insert(0, Arc(end, weight))
            self._arcs.append(arcs)

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def arc_count(self) -> int:
        """Number of stored arcs; an undirected edge counts twice."""
        return sum(len(arcs) for arcs in self._arcs)

    def arcs(self, index: int) -> list[Arc]:
        """Arcs leaving the vertex at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self):
            raise IndexError(f"vertex index {index} out of range")
        return list(self._arcs[index])