"""An unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class BSTNode:
    """A node of a binary search tree."""

    data: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """Binary search tree that ignores duplicate keys."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.root: BSTNode | None = None
        for item in items:
            self.insert(item)

    def insert(self, data: Any) -> bool:
        """Insert ``data``; return False if it was already present."""
        if self.root is None:
            self.root = BSTNode(data)
            return True
        node = self.root
        while True:
            if data == node.data:
                return False
            if data < node.data:
                if node.left is None:
                    node.left = BSTNode(data)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(data)
                    return True
                node = node.right

    def find(self, data: Any) -> BSTNode | None:
        """Return the node holding ``data``, or None."""
        node = self.root
        while node is not None:
            if data == node.data:
                return node
            node = node.left if data < node.data else node.right
        return None

    def __contains__(self, data: Any) -> bool:
        return self.find(data) is not None

    def pre_order(self) -> Iterator[Any]:
        """Yield keys root, left, right."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)