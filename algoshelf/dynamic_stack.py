"""A stack whose nominal capacity doubles when full and halves when sparse."""

from __future__ import annotations

from typing import Any


class DynamicStack:
    """LIFO stack that tracks a growing and shrinking capacity."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> int:
        """Push a value and return the index of the new top."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)
        return len(self._items) - 1

    def pop(self) -> Any:
        """Remove and return the top value, shrinking capacity when half empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        value = self._items.pop()
        if self._capacity % 2 == 0 and len(self._items) <= self._capacity // 2:
            self._capacity //= 2
        return value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def capacity(self) -> int:
        """Return the current capacity."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DynamicStack(size={len(self)}, capacity={self._capacity})"