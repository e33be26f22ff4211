"""First-in, first-out queues: an unbounded linked one and a fixed ring buffer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.next: _Node = self
        self.prev: _Node = self


def _render(values: Iterable[Any]) -> str:
    return "".join(f"{value} -> " for value in values) + "NULL"


class LinkedQueue:
    """Unbounded FIFO queue on a doubly linked ring with a sentinel head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._size = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, data: Any) -> None:
        """Append ``data`` at the rear."""
        node = _Node(data)
        node.next = self._head
        node.prev = self._head.prev
        self._head.prev.next = node
        self._head.prev = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        node = self._head.next
        self._head.next = node.next
        node.next.prev = self._head
        self._size -= 1
        return node.data

    def is_empty(self) -> bool:
        return self._head.next is self._head

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._head:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def render(self) -> str:
        """Items from front to rear joined by `` -> `` and closed with ``NULL``."""
        return _render(self)


class CircularQueue:
    """Bounded FIFO ring buffer.

    One slot is always left free to tell a full queue from an empty one,
    so a queue of ``capacity`` slots holds at most ``capacity - 1`` items.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def is_empty(self) -> bool:
        return self._front == self._rear

    def enqueue(self, data: Any) -> None:
        """Append ``data`` at the rear; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots[self._rear] = data
        self._rear = (self._rear + 1) % self.capacity

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        data = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        return data

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"

    def render(self) -> str:
        """Items from front to rear joined by `` -> `` and closed with ``NULL``."""
        return _render(self)