"""Path finding from one source node: depth-first and breadth-first (shortest)."""

from __future__ import annotations

from collections import deque
from typing import Any


def _check_node(graph: Any, node: int) -> None:
    if not 0 <= node < graph.nodes:
        raise IndexError(f"node index {node} out of range")


def _route(came_from: list[int | None], target: int) -> list[int]:
    route = [target]
    while (previous := came_from[route[-1]]) is not None:
        route.append(previous)
    route.reverse()
    return route


def _render(route: list[int]) -> str:
    return " -> ".join(str(node) for node in route) + "\n"


class PathSearcher:
    """Paths found by a depth-first walk from ``source``."""

    def __init__(self, graph: Any, source: int) -> None:
        _check_node(graph, source)
        self.graph = graph
        self.source = source
        self._visited = [False] * graph.nodes
        self._came_from: list[int | None] = [None] * graph.nodes
        self._visited[source] = True
        stack = [(source, iter(graph.neighbours(source)))]
        while stack:
            node, pending = stack[-1]
            for nxt in pending:
                if not self._visited[nxt]:
                    self._visited[nxt] = True
                    self._came_from[nxt] = node
                    stack.append((nxt, iter(graph.neighbours(nxt))))
                    break
            else:
                stack.pop()

    def has_path(self, target: int) -> bool:
        """Whether ``target`` can be reached from the source."""
        _check_node(self.graph, target)
        return self._visited[target]

    def path(self, target: int) -> list[int]:
        """Node indexes from the source to ``target``; ValueError if unreachable."""
        if not self.has_path(target):
            raise ValueError(f"no path from {self.source} to {target}")
        return _route(self._came_from, target)

    def render_path(self, target: int) -> str:
        """The path as node indexes joined by `` -> `` and ending in a newline."""
        return _render(self.path(target))


class ShortestPathSearcher:
    """Paths with the fewest edges, found by a breadth-first walk from ``source``."""

    def __init__(self, graph: Any, source: int) -> None:
        _check_node(graph, source)
        self.graph = graph
        self.source = source
        self._visited = [False] * graph.nodes
        self._came_from: list[int | None] = [None] * graph.nodes
        self._visited[source] = True
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for nxt in graph.neighbours(node):
                if not self._visited[nxt]:
                    self._visited[nxt] = True
                    self._came_from[nxt] = node
                    queue.append(nxt)

    def has_path(self, target: int) -> bool:
        """Whether ``target`` can be reached from the source."""
        _check_node(self.graph, target)
        return self._visited[target]

    def path(self, target: int) -> list[int]:
        """Node indexes from the source to ``target``; ValueError if unreachable."""
        if not self.has_path(target):
            raise ValueError(f"no path from {self.source} to {target}")
        return _route(self._came_from, target)

    def render_path(self, target: int) -> str:
        """The path as node indexes joined by `` -> `` and ending in a newline."""
        return _render(self.path(target))