"""Counting sort for non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using a counting sort."""
    items = list(values)
    if len(items) < 2:
        return items
    if min(items) < 0:
        raise ValueError("counting sort requires non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]