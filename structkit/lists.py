"""Linked lists: singly, doubly and their circular variants, each with a sentinel head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.next: _Node | None = None
        self.prev: _Node | None = None


class _LinkedList:
    """Behaviour shared by every list kind: size, membership, equality."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._size = 0
        self._link_empty()
        for item in items:
            self.push_back(item)

    def _link_empty(self) -> None:
        """Set up the sentinel for an empty list."""

    def push_back(self, data: Any) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:  # pragma: no cover - overridden
        raise NotImplementedError

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _LinkedList):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _missing(self, data: Any) -> ValueError:
        return ValueError(f"{data!r} is not in the list")


class SinglyLinkedList(_LinkedList):
    """A singly linked list terminated by None."""

    def push_front(self, data: Any) -> None:
        """Insert ``data`` right after the head."""
        node = _Node(data)
        node.next = self._head.next
        self._head.next = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the tail."""
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = _Node(data)
        self._size += 1

    def remove(self, data: Any) -> None:
        """Remove the first node holding ``data``; raise ValueError if absent."""
        previous = self._head
        node = previous.next
        while node is not None:
            if node.data == data:
                previous.next = node.next
                self._size -= 1
                return
            previous, node = node, node.next
        raise self._missing(data)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """One ``node = <value>`` line per element."""
        return "".join(f"node = {value}\n" for value in self)


class DoublyLinkedList(_LinkedList):
    """A doubly linked list terminated by None at both ends."""

    def push_front(self, data: Any) -> None:
        """Insert ``data`` right after the head."""
        node = _Node(data)
        node.next = self._head.next
        node.prev = self._head
        if self._head.next is not None:
            self._head.next.prev = node
        self._head.next = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the tail."""
        last = self._last()
        node = _Node(data)
        node.prev = last
        last.next = node
        self._size += 1

    def remove(self, data: Any) -> None:
        """Remove the first node holding ``data``; raise ValueError if absent."""
        node = self._head.next
        while node is not None:
            if node.data == data:
                node.prev.next = node.next
                if node.next is not None:
                    node.next.prev = node.prev
                self._size -= 1
                return
            node = node.next
        raise self._missing(data)

    def _last(self) -> _Node:
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._last()
        while node is not self._head:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Elements joined by `` -> `` and closed with ``NULL``."""
        return "".join(f"{value} -> " for value in self) + "NULL"


class CircularSinglyLinkedList(_LinkedList):
    """A singly linked list whose last node points back at the head."""

    def _link_empty(self) -> None:
        self._head.next = self._head

    def push_front(self, data: Any) -> None:
        """Insert ``data`` right after the head."""
        node = _Node(data)
        node.next = self._head.next
        self._head.next = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` before the head, closing the ring."""
        last = self._head
        while last.next is not self._head:
            last = last.next
        node = _Node(data)
        node.next = self._head
        last.next = node
        self._size += 1

    def remove(self, data: Any) -> None:
        """Remove the first node holding ``data``; raise ValueError if absent."""
        previous = self._head
        node = previous.next
        while node is not self._head:
            if node.data == data:
                previous.next = node.next
                self._size -= 1
                return
            previous, node = node, node.next
        raise self._missing(data)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._head:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Elements joined by ``->`` and closed with ``NULL``."""
        return "".join(f"{value}->" for value in self) + "NULL"


class CircularDoublyLinkedList(_LinkedList):
    """A doubly linked ring around a sentinel head."""

    def _link_empty(self) -> None:
        self._head.next = self._head
        self._head.prev = self._head

    def _insert_between(self, data: Any, before: _Node, after: _Node) -> None:
        node = _Node(data)
        node.prev = before
        node.next = after
        before.next = node
        after.prev = node
        self._size += 1

    def push_front(self, data: Any) -> None:
        """Insert ``data`` right after the head."""
        self._insert_between(data, self._head, self._head.next)

    def push_back(self, data: Any) -> None:
        """Append ``data`` just before the head."""
        self._insert_between(data, self._head.prev, self._head)

    def remove(self, data: Any) -> None:
        """Remove the first node holding ``data``; raise ValueError if absent."""
        node = self._head.next
        while node is not self._head:
            if node.data == data:
                node.prev.next = node.next
                node.next.prev = node.prev
                self._size -= 1
                return
            node = node.next
        raise self._missing(data)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._head:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._head.prev
        while node is not self._head:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Elements joined by `` -> `` and closed with ``NULL``."""
        return "".join(f"{value} -> " for value in self) + "NULL"