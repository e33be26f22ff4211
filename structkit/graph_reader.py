"""Load edges into a graph from a plain-text edge list.

The first line holds the node count and the edge count. Each line after
it holds one edge as two node indexes. Tokens after the first two on a
line are ignored.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any, Protocol


class _Graph(Protocol):
    @property
    def nodes(self) -> int: ...

    def add_edge(self, start: int, end: int) -> None: ...


def _two_ints(line: str, what: str) -> tuple[int, int]:
    fields = line.split()
    if len(fields) < 2:
        raise ValueError(f"{what} needs two integers, got {line.strip()!r}")
    try:
        return int(fields[0]), int(fields[1])
    except ValueError:
        raise ValueError(f"{what} needs two integers, got {line.strip()!r}") from None


def read_graph_lines(graph: Any, lines: Iterable[str]) -> Any:
    """Add the edges listed in ``lines`` to ``graph`` and return the graph.

    Raise ValueError if the header is missing or malformed, if its node
    count differs from the graph's, if there are fewer edge lines than
    announced, or if an edge names a node out of range.
    """
    rows = iter(lines)
    try:
        header = next(rows)
    except StopIteration:
        raise ValueError("missing header line") from None
    nodes, edges = _two_ints(header, "header")
    if nodes != graph.nodes:
        raise ValueError(
            f"file describes {nodes} nodes but the graph has {graph.nodes}"
        )
    if edges < 0:
        raise ValueError("edge count must not be negative")

    for number in range(1, edges + 1):
        try:
            line = next(rows)
        except StopIteration:
            raise ValueError(
                f"expected {edges} edges but found only {number - 1}"
            ) from None
        start, end = _two_ints(line, f"edge {number}")
        for index in (start, end):
            if not 0 <= index < nodes:
                raise ValueError(f"edge {number} names node {index} out of range")
        graph.add_edge(start, end)
    return graph


def read_graph(graph: Any, path: str | os.PathLike[str]) -> Any:
    """Add the edges listed in the file at ``path`` to ``graph`` and return it."""
    with open(path, encoding="utf-8") as handle:
        return read_graph_lines(graph, handle)