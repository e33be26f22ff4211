"""Threaded binary trees: in-order, pre-order and post-order threading and walks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

EMPTY_MARK = "#"


@dataclass(eq=False)
class ThreadNode:
    """A binary tree node whose empty child links may be turned into threads."""

    data: Any
    left: ThreadNode | None = field(default=None, repr=False)
    right: ThreadNode | None = field(default=None, repr=False)
    parent: ThreadNode | None = field(default=None, repr=False)
    left_is_thread: bool = False
    right_is_thread: bool = False


def build_thread_tree(spec: Iterable[Any]) -> ThreadNode | None:
    """Build a tree from its pre-order listing where ``#`` marks an empty subtree.

    Every node records its parent. Raise ValueError if the listing ends
    before the tree is complete; anything after a complete tree is ignored.
    """
    symbols = iter(spec)

    def build(parent: ThreadNode | None) -> ThreadNode | None:
        try:
            symbol = next(symbols)
        except StopIteration:
            raise ValueError("tree specification ended early") from None
        if symbol == EMPTY_MARK:
            return None
        node = ThreadNode(symbol, parent=parent)
        node.left = build(node)
        node.right = build(node)
        return node

    return build(None)


def _link(node: ThreadNode, previous: ThreadNode | None) -> None:
    """Thread the empty left link of ``node`` and the empty right link of ``previous``."""
    if node.left is None:
        node.left_is_thread = True
        node.left = previous
    if previous is not None and previous.right is None:
        previous.right_is_thread = True
        previous.right = node


def _close(last: ThreadNode | None) -> None:
    if last is not None:
        last.right_is_thread = True
        last.right = None


def in_thread(root: ThreadNode | None) -> ThreadNode | None:
    """Thread the tree in in-order; return its root."""
    last: ThreadNode | None = None

    def visit(node: ThreadNode | None) -> None:
        nonlocal last
        if node is None:
            return
        visit(node.left)
        _link(node, last)
        last = node
        visit(node.right)

    visit(root)
    _close(last)
    return root


def pre_thread(root: ThreadNode | None) -> ThreadNode | None:
    """Thread the tree in pre-order; return its root."""
    last: ThreadNode | None = None

    def visit(node: ThreadNode | None) -> None:
        nonlocal last
        if node is None:
            return
        _link(node, last)
        last = node
        if not node.left_is_thread:
            visit(node.left)
        if not node.right_is_thread:
            visit(node.right)

    visit(root)
    _close(last)
    return root


def post_thread(root: ThreadNode | None) -> ThreadNode | None:
    """Thread the tree in post-order; return its root."""
    last: ThreadNode | None = None

    def visit(node: ThreadNode | None) -> None:
        nonlocal last
        if node is None:
            return
        visit(node.left)
        visit(node.right)
        _link(node, last)
        last = node

    visit(root)
    return root


def _first_in(node: ThreadNode) -> ThreadNode:
    while not node.left_is_thread:
        node = node.left
    return node


def walk_in_thread(root: ThreadNode | None) -> Iterator[Any]:
    """Yield node data in in-order from a tree threaded by :func:`in_thread`."""
    node = _first_in(root) if root is not None else None
    while node is not None:
        yield node.data
        node = node.right if node.right_is_thread else _first_in(node.right)


def walk_pre_thread(root: ThreadNode | None) -> Iterator[Any]:
    """Yield node data in pre-order from a tree threaded by :func:`pre_thread`."""
    node = root
    while node is not None:
        yield node.data
        if node.right_is_thread or node.left_is_thread:
            node = node.right
        else:
            node = node.left


def _first_post(node: ThreadNode) -> ThreadNode:
    while True:
        while not node.left_is_thread:
            node = node.left
        if not node.right_is_thread and node.right is not None:
            node = node.right
        else:
            return node


def _next_post(node: ThreadNode) -> ThreadNode | None:
    if node.right_is_thread:
        return node.right
    parent = node.parent
    if parent is None:
        return None
    if parent.right is node:
        return parent
    if not parent.right_is_thread and parent.right is not None:
        return _first_post(parent.right)
    return parent


def walk_post_thread(root: ThreadNode | None) -> Iterator[Any]:
    """Yield node data in post-order from a tree threaded by :func:`post_thread`."""
    node = _first_post(root) if root is not None else None
    while node is not None:
        yield node.data
        node = _next_post(node)