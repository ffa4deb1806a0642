"""A binary search tree with threaded-tree style deletion and an interactive menu."""

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


def _inorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


class ThreadedBinaryTree:
    """Binary search tree of integers; duplicate values are ignored.

    Deleting a node with two children promotes its right child and hangs the
    deleted node's left subtree under the leftmost node of that right child.
    """

    def __init__(self) -> None:
        self.root: _Node | None = None

    def insert(self, value: int) -> None:
        new = _Node(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if value > node.data:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            elif value < node.data:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                return

    def _locate(self, value: int) -> tuple[_Node | None, _Node | None]:
        parent: _Node | None = None
        node = self.root
        while node is not None and node.data != value:
            parent = node
            node = node.right if value > node.data else node.left
        return node, parent

    def delete(self, value: int) -> None:
        """Remove ``value`` if present; a missing value is left alone."""
        node, parent = self._locate(value)
        if node is None:
            return
        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            replacement = node.right
            leftmost = replacement
            while leftmost.left is not None:
                leftmost = leftmost.left
            leftmost.left = node.left
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        node, _ = self._locate(value)
        return node is not None

    def inorder(self) -> list[int]:
        return list(_inorder(self.root))

    def preorder(self) -> list[int]:
        return list(_preorder(self.root))

    def postorder(self) -> list[int]:
        return list(_postorder(self.root))


_MENU = (
    "1. Insert into BT\n"
    "2. Print BT - inorder\n"
    "3. Print BT - preorder\n"
    "4. print BT - postorder\n"
    "5. delete from BT\n"
    "6. search in BT\n"
    "Type 0 to exit"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _line(values: list[int]) -> str:
    return "".join(f"{value}\t" for value in values)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive tree menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive binary threaded tree.")
    parser.parse_args(argv)

    print("BINARY THREADED TREE: ")
    tree = ThreadedBinaryTree()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(_MENU)
            choice = int(next(tokens))
            if choice == 0:
                break
            if choice == 1:
                print("Enter a no:")
                tree.insert(int(next(tokens)))
            elif choice == 2:
                print(_line(tree.inorder()))
            elif choice == 3:
                print(_line(tree.preorder()))
            elif choice == 4:
                print(_line(tree.postorder()))
            elif choice == 5:
                print("Enter a no:")
                tree.delete(int(next(tokens)))
            elif choice == 6:
                print("Enter a no:")
                if int(next(tokens)) in tree:
                    print("Element found.")
                else:
                    print("Element not found.")
    except (StopIteration, ValueError):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())