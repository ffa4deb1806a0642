"""Degree counting and the Euler path condition for undirected graphs."""

from __future__ import annotations

from collections.abc import Callable

Adjacency = Callable[[int, int], bool]


def degree(adjacent: Adjacency, vertex_count: int, vertex: int) -> int:
    """Return the number of vertices that ``vertex`` is connected to."""
    return sum(1 for other in range(vertex_count) if adjacent(vertex, other))


def has_euler_path(adjacent: Adjacency, vertex_count: int, start: int, end: int) -> bool:
    """Decide from vertex degrees whether an Euler path can run from start to end."""

    def is_odd(vertex: int) -> bool:
        return degree(adjacent, vertex_count, vertex) % 2 != 0

    if start != end:
        if not is_odd(start) or not is_odd(end):
            return False
    elif is_odd(start):
        return False
    return not any(
        is_odd(vertex) for vertex in range(vertex_count) if vertex not in (start, end)
    )