"""Binary trees built from a pre-order spec, with recursive and iterative traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

EMPTY_MARK = "#"


@dataclass
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(spec: Iterable[Any]) -> TreeNode | None:
    """Build a tree from its pre-order listing where ``#`` marks an empty subtree.

    Raise ValueError if the listing ends before the tree is complete.
    Anything after a complete tree is ignored.
    """
    symbols = iter(spec)

    def build() -> TreeNode | None:
        try:
            symbol = next(symbols)
        except StopIteration:
            raise ValueError("tree specification ended early") from None
        if symbol == EMPTY_MARK:
            return None
        node = TreeNode(symbol)
        node.left = build()
        node.right = build()
        return node

    return build()


def pre_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data root, left, right."""
    if root is not None:
        yield root.data
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def in_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data left, root, right."""
    if root is not None:
        yield from in_order(root.left)
        yield root.data
        yield from in_order(root.right)


def post_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data left, right, root."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.data


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data level by level, left to right."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.data
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def pre_order_iterative(root: TreeNode | None) -> Iterator[Any]:
    """Pre-order traversal with an explicit stack."""
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            yield node.data
            stack.append(node)
            node = node.left
        else:
            node = stack.pop().right


def in_order_iterative(root: TreeNode | None) -> Iterator[Any]:
    """In-order traversal with an explicit stack."""
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node.data
            node = node.right


def post_order_iterative(root: TreeNode | None) -> Iterator[Any]:
    """Post-order traversal with an explicit stack, marking finished nodes."""
    stack: list[TreeNode] = []
    finished: set[int] = set()
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is not None and id(top.right) not in finished:
            stack.append(top.right)
            node = top.right.left
        else:
            stack.pop()
            finished.add(id(top))
            yield top.data