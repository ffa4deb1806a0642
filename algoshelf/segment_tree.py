"""Segment tree over a list with point updates and range queries."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Array-backed segment tree of ``2n - 1`` nodes.

    Leaves hold the values at positions ``n - 1`` onward; every inner node
    holds ``combine`` of its two children. ``identity`` must be the neutral
    element of ``combine``.
    """

    def __init__(
        self,
        values: Iterable[T],
        combine: Callable[[T, T], T],
        identity: T,
    ) -> None:
        leaves = list(values)
        if not leaves:
            raise ValueError("a segment tree needs at least one value")
        self._length = len(leaves)
        self._combine = combine
        self._identity = identity
        self._nodes: list[T] = [identity] * (self._length - 1) + leaves
        for index in reversed(range(self._length - 1)):
            self._nodes[index] = combine(
                self._nodes[2 * index + 1], self._nodes[2 * index + 2]
            )

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} outside 0..{self._length - 1}")

    def update(self, index: int, value: T) -> None:
        """Replace the value at ``index`` and refresh its ancestors."""
        self._check_index(index)
        position = index + self._length - 1
        self._nodes[position] = value
        while position > 0:
            position = (position - 1) >> 1
            self._nodes[position] = self._combine(
                self._nodes[2 * position + 1], self._nodes[2 * position + 2]
            )

    def query(self, left: int, right: int) -> T:
        """Combine the values in the inclusive range ``[left, right]``."""
        self._check_index(left)
        self._check_index(right)
        if left > right:
            raise ValueError("left bound is past the right bound")
        result = self._identity
        low = left + self._length - 1
        high = right + self._length - 1
        while low <= high:
            if not low & 1:
                result = self._combine(result, self._nodes[low])
            if high & 1:
                result = self._combine(result, self._nodes[high])
            high = (high >> 1) - 1
            low >>= 1
        return result

    def nodes(self) -> list[T]:
        """Return a copy of every node, root first, leaves last."""
        return list(self._nodes)