"""Substring matching by brute force and by the Knuth-Morris-Pratt method."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def force_match(master: Sequence[Any], sub: Sequence[Any]) -> bool:
    """Return True if ``sub`` occurs in ``master``, comparing position by position."""
    i = j = 0
    while i < len(master) and j < len(sub):
        if master[i] == sub[j]:
            i += 1
            j += 1
        else:
            i = i - j + 1
            j = 0
    return j == len(sub)


def kmp_next(pattern: Sequence[Any]) -> list[int]:
    """Build the KMP failure table for ``pattern``; the first entry is -1."""
    if not pattern:
        return []
    table = [0] * len(pattern)
    table[0] = -1
    i, j = 0, -1
    while i < len(pattern) - 1:
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            table[i] = j
        else:
            j = table[j]
    return table


def kmp_match(
    master: Sequence[Any], sub: Sequence[Any], next_table: list[int] | None = None
) -> bool:
    """Return True if ``sub`` occurs in ``master``, using a KMP failure table."""
    if next_table is None:
        next_table = kmp_next(sub)
    if len(next_table) != len(sub):
        raise ValueError("next_table does not belong to the pattern")
    i = j = 0
    while i < len(master) and j < len(sub):
        if j == -1 or master[i] == sub[j]:
            i += 1
            j += 1
        else:
            j = next_table[j]
    return j == len(sub)


def render_chars(text: Sequence[Any]) -> str:
    """Characters joined by `` -> ``, each followed by a space."""
    return "-> ".join(f"{char} " for char in text)