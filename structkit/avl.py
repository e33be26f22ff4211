"""A self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class AVLNode:
    """A node of an AVL tree; a leaf has height 1."""

    data: Any
    height: int = 1
    left: AVLNode | None = None
    right: AVLNode | None = None


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _insert(node: AVLNode | None, data: Any) -> AVLNode:
    if node is None:
        return AVLNode(data)
    if data < node.data:
        node.left = _insert(node.left, data)
        if _height(node.left) - _height(node.right) == 2:
            if data < node.left.data:
                node = _rotate_right(node)
            else:
                node.left = _rotate_left(node.left)
                node = _rotate_right(node)
    elif data > node.data:
        node.right = _insert(node.right, data)
        if _height(node.right) - _height(node.left) == 2:
            if data > node.right.data:
                node = _rotate_left(node)
            else:
                node.right = _rotate_right(node.right)
                node = _rotate_left(node)
    _update(node)
    return node


class AVLTree:
    """AVL tree that ignores duplicate keys."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.root: AVLNode | None = None
        for item in items:
            self.insert(item)

    def insert(self, data: Any) -> None:
        """Insert ``data`` and rebalance."""
        self.root = _insert(self.root, data)

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

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)