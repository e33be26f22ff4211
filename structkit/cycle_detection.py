"""Cycle detection in an undirected graph by depth-first search."""

from __future__ import annotations

from typing import Any


def has_cycle(graph: Any) -> bool:
    """Whether the undirected ``graph`` contains a cycle.

    A neighbour already visited counts as closing a cycle unless it is
    the node the walk came from, so a repeated edge back to the parent
    is not reported, and neither is a self-loop on a walk's start node.
    """
    visited = [False] * graph.nodes
    for root in range(graph.nodes):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, root, iter(graph.neighbours(root)))]
        while stack:
            node, parent, pending = stack[-1]
            for nxt in pending:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, node, iter(graph.neighbours(nxt))))
                    break
                if nxt != parent:
                    return True
            else:
                stack.pop()
    return False