"""A B-tree of a given order that keeps duplicate keys."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class BTreeNode:
    """A B-tree node: sorted keys and, unless a leaf, one more child than keys."""

    keys: list[Any] = field(default_factory=list)
    children: list[BTreeNode] = field(default_factory=list)
    parent: BTreeNode | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class BTree:
    """B-tree where a node splits as soon as it holds ``order`` keys."""

    def __init__(self, order: int = 5) -> None:
        if order < 3:
            raise ValueError("order must be at least 3")
        self.order = order
        self.root = BTreeNode()

    def insert(self, data: Any) -> None:
        """Insert ``data`` into the proper leaf, splitting nodes upward as needed."""
        node = self.root
        while node.children:
            node = node.children[bisect_right(node.keys, data)]
        insort(node.keys, data)
        while len(node.keys) == self.order:
            node = self._split(node)

    def _split(self, node: BTreeNode) -> BTreeNode:
        """Split a full node around its median; return the node the median went to."""
        mid = (self.order + 1) // 2
        median = node.keys[mid - 1]
        left = BTreeNode(node.keys[: mid - 1], node.children[:mid])
        right = BTreeNode(node.keys[mid:], node.children[mid:])
        for half in (left, right):
            for child in half.children:
                child.parent = half

        parent = node.parent
        if parent is None:
            parent = BTreeNode([median], [left, right])
            self.root = parent
        else:
            position = bisect_right(parent.keys, median)
            parent.children[position : position + 1] = [left, right]
            insort(parent.keys, median)
        left.parent = parent
        right.parent = parent
        return parent

    def nodes(self) -> Iterator[BTreeNode]:
        """Yield every node, parent before its children, children left to right."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def render(self) -> str:
        """One line per node in :meth:`nodes` order, each key followed by a space."""
        return "".join(
            "".join(f"{key} " for key in node.keys) + "\n" for node in self.nodes()
        )