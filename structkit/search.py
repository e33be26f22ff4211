"""Sequential and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def sequence_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first item equal to ``key``, or -1."""
    return next((index for index, item in enumerate(items) if item == key), -1)


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the sorted ``items``, or -1."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] < key:
            start = mid + 1
        elif items[mid] > key:
            end = mid - 1
        else:
            return mid
    return -1


def binary_search_recursive(
    items: Sequence[Any], key: Any, start: int = 0, end: int | None = None
) -> int:
    """Recursive binary search of ``items[start:end + 1]``; return the index or -1."""
    if end is None:
        end = len(items) - 1
    if start > end:
        return -1
    if start == end:
        return start if items[start] == key else -1
    mid = (start + end) // 2
    if items[mid] < key:
        return binary_search_recursive(items, key, mid + 1, end)
    if items[mid] > key:
        return binary_search_recursive(items, key, start, mid - 1)
    return mid