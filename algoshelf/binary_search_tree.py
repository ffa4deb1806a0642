"""An unbalanced binary search tree of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(eq=False)
class _Node:
    data: int
    left: _Node | None = None
    right: _Node | None = None


def _insert(node: _Node | None, value: int) -> _Node:
    if node is None:
        return _Node(value)
    if value > node.data:
        node.right = _insert(node.right, value)
    elif value < node.data:
        node.left = _insert(node.left, value)
    return node


def _max_node(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: _Node | None, value: int) -> _Node | None:
    if node is None:
        return None
    if value > node.data:
        node.right = _delete(node.right, value)
    elif value < node.data:
        node.left = _delete(node.left, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        # Replace with the greatest key of the left subtree.
        predecessor = _max_node(node.left)
        node.data = predecessor.data
        node.left = _delete(node.left, predecessor.data)
    return node


def _height(node: _Node | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def _inorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


class BinarySearchTree:
    """Binary search tree without balancing; duplicates are ignored."""

    def __init__(self) -> None:
        self.root: _Node | None = None

    def insert(self, value: int) -> None:
        self.root = _insert(self.root, value)

    def delete(self, value: int) -> None:
        """Remove ``value`` if present."""
        self.root = _delete(self.root, value)

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if value == node.data:
                return True
            node = node.right if value > node.data else node.left  # type: ignore[operator]
        return False

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return _height(self.root)

    def inorder(self) -> list[int]:
        return list(_inorder(self.root))

    def clear(self) -> None:
        self.root = None


_MENU = (
    "\n\n[1] Insert Node\n[2] Delete Node\n[3] Find a Node\n[4] Get "
    "current Height\n[5] Print Tree in Crescent Order\n[0] Quit"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary search tree menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive binary search tree.")
    parser.parse_args(argv)

    tree = BinarySearchTree()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(_MENU)
            choice = int(next(tokens))
            if choice == 0:
                break
            if choice == 1:
                print("Enter the new node's value:")
                tree.insert(int(next(tokens)))
            elif choice == 2:
                print("Enter the value to be removed:")
                if tree.root is not None:
                    tree.delete(int(next(tokens)))
                else:
                    print("Tree is already empty!")
            elif choice == 3:
                print("Enter the searched value:")
                if int(next(tokens)) in tree:
                    print("The value is in the tree.")
                else:
                    print("The value is not in the tree.")
            elif choice == 4:
                print(f"Current height of the tree is: {tree.height()}")
            elif choice == 5:
                print("".join(f"\t[ {value} ]\t" for value in tree.inorder()))
    except (StopIteration, ValueError):
        pass
    tree.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())