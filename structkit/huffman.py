"""Huffman tree built over a flat array of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class HuffmanNode:
    """An entry of the node array; links are indexes into that array."""

    weight: int
    parent: int | None = None
    left: int | None = None
    right: int | None = None


class HuffmanTree:
    """Huffman tree: leaves first, merged nodes appended after them, root last."""

    def __init__(self, weights: Iterable[int]) -> None:
        leaves = list(weights)
        if not leaves:
            raise ValueError("at least one weight is required")
        self.nodes: list[HuffmanNode] = [HuffmanNode(weight) for weight in leaves]
        total = 2 * len(leaves) - 1
        while len(self.nodes) < total:
            first, second = self._two_smallest()
            index = len(self.nodes)
            self.nodes.append(
                HuffmanNode(
                    self.nodes[first].weight + self.nodes[second].weight,
                    left=first,
                    right=second,
                )
            )
            self.nodes[first].parent = index
            self.nodes[second].parent = index

    def _two_smallest(self) -> tuple[int, int]:
        """Indexes of the two lightest parentless nodes; ties go to the lower index."""
        roots = [index for index, node in enumerate(self.nodes) if node.parent is None]
        first = min(roots, key=lambda index: self.nodes[index].weight)
        second = min(
            (index for index in roots if index != first),
            key=lambda index: self.nodes[index].weight,
        )
        return first, second

    @property
    def root(self) -> int:
        """Index of the root node."""
        return len(self.nodes) - 1

    def pre_order(self) -> Iterator[int]:
        """Yield node weights root, left, right."""
        stack = [self.root]
        while stack:
            node = self.nodes[stack.pop()]
            yield node.weight
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)