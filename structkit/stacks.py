"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Stack:
    """LIFO stack; iteration runs from the top down."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def push(self, data: Any) -> None:
        """Place ``data`` on top."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def render(self) -> str:
        """Items from top to bottom joined by `` -> `` and closed with ``NULL``."""
        return "".join(f"{value} -> " for value in self) + "NULL"