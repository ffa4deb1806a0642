"""A plain binary tree node and its recursive depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def in_order(node: Node | None) -> Iterator[Any]:
    """Yield data left subtree first, then the node, then the right subtree."""
    if node is None:
        return
    yield from in_order(node.left)
    yield node.data
    yield from in_order(node.right)


def pre_order(node: Node | None) -> Iterator[Any]:
    """Yield the node's data before either subtree."""
    if node is None:
        return
    yield node.data
    yield from pre_order(node.left)
    yield from pre_order(node.right)


def post_order(node: Node | None) -> Iterator[Any]:
    """Yield both subtrees before the node's data."""
    if node is None:
        return
    yield from post_order(node.left)
    yield from post_order(node.right)
    yield node.data