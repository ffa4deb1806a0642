"""A red-black tree of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO


class Color(IntEnum):
    BLACK = 0
    RED = 1


@dataclass(eq=False)
class RedBlackNode:
    """A tree node; new nodes start red."""

    value: int
    color: Color = Color.RED
    parent: RedBlackNode | None = None
    left: RedBlackNode | None = None
    right: RedBlackNode | None = None


def _color(node: RedBlackNode | None) -> Color:
    return Color.BLACK if node is None else node.color


class RedBlackTree:
    """Self-balancing binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self.root: RedBlackNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _rotate_left(self, x: RedBlackNode) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RedBlackNode) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def insert(self, value: int) -> None:
        parent: RedBlackNode | None = None
        node = self.root
        while node is not None:
            parent = node
            node = node.left if value < node.value else node.right
        new = RedBlackNode(value, parent=parent)
        if parent is None:
            self.root = new
        elif value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._insert_fixup(new)

    def _insert_fixup(self, z: RedBlackNode) -> None:
        while z.parent is not None and z.parent.color is Color.RED:
            parent = z.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.left:
                uncle = grand.right
                if _color(uncle) is Color.RED:
                    assert uncle is not None
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.right:
                    z = parent
                    self._rotate_left(z)
                    parent = z.parent
                    assert parent is not None
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if _color(uncle) is Color.RED:
                    assert uncle is not None
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.left:
                    z = parent
                    self._rotate_right(z)
                    parent = z.parent
                    assert parent is not None
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_left(grand)
        assert self.root is not None
        self.root.color = Color.BLACK

    def _find(self, value: int) -> RedBlackNode | None:
        node = self.root
        while node is not None and node.value != value:
            node = node.right if value > node.value else node.left
        return node

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self._find(value) is not None

    def _transplant(self, old: RedBlackNode, new: RedBlackNode | None) -> None:
        if old.parent is None:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def delete(self, value: int) -> None:
        """Remove one occurrence of ``value``; raise KeyError when absent."""
        z = self._find(value)
        if z is None:
            raise KeyError(value)
        removed_color = z.color
        if z.left is None:
            x, x_parent = z.right, z.parent
            self._transplant(z, z.right)
        elif z.right is None:
            x, x_parent = z.left, z.parent
            self._transplant(z, z.left)
        else:
            y = z.right
            while y.left is not None:
                y = y.left
            removed_color = y.color
            x = y.right
            if y.parent is z:
                x_parent = y
            else:
                x_parent = y.parent
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        self._size -= 1
        if removed_color is Color.BLACK:
            self._delete_fixup(x, x_parent)

    def _delete_fixup(self, x: RedBlackNode | None, parent: RedBlackNode | None) -> None:
        while x is not self.root and _color(x) is Color.BLACK:
            assert parent is not None
            if x is parent.left:
                w = parent.right
                assert w is not None
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    w = parent.right
                    assert w is not None
                if _color(w.left) is Color.BLACK and _color(w.right) is Color.BLACK:
                    w.color = Color.RED
                    x, parent = parent, parent.parent
                    continue
                if _color(w.right) is Color.BLACK:
                    assert w.left is not None
                    w.left.color = Color.BLACK
                    w.color = Color.RED
                    self._rotate_right(w)
                    w = parent.right
                    assert w is not None
                w.color = parent.color
                parent.color = Color.BLACK
                assert w.right is not None
                w.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                w = parent.left
                assert w is not None
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    w = parent.left
                    assert w is not None
                if _color(w.left) is Color.BLACK and _color(w.right) is Color.BLACK:
                    w.color = Color.RED
                    x, parent = parent, parent.parent
                    continue
                if _color(w.left) is Color.BLACK:
                    assert w.right is not None
                    w.right.color = Color.BLACK
                    w.color = Color.RED
                    self._rotate_left(w)
                    w = parent.left
                    assert w is not None
                w.color = parent.color
                parent.color = Color.BLACK
                assert w.left is not None
                w.left.color = Color.BLACK
                self._rotate_right(parent)
            x = self.root
            break
        if x is not None:
            x.color = Color.BLACK

    def inorder(self) -> list[tuple[int, Color]]:
        """Return (value, color) pairs in ascending order of value."""

        def walk(node: RedBlackNode | None) -> Iterator[tuple[int, Color]]:
            if node is not None:
                yield from walk(node.left)
                yield node.value, node.color
                yield from walk(node.right)

        return list(walk(self.root))

    def black_heights(self) -> list[int]:
        """Return the number of black nodes on each root-to-leaf path, left to right."""

        def walk(node: RedBlackNode | None, count: int) -> Iterator[int]:
            if node is None:
                yield count
                return
            if node.color is Color.BLACK:
                count += 1
            yield from walk(node.left, count)
            yield from walk(node.right, count)

        return list(walk(self.root, 0))


_MENU = "1 - Input\n2 - Delete\n3 - Inorder Traversel\n0 - Quit\n\nPlease Enter the Choice - "


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive red-black tree menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive red-black tree.")
    parser.parse_args(argv)

    tree = RedBlackTree()
    tokens = _tokens(sys.stdin)
    try:
        print(_MENU, end="")
        choice = int(next(tokens))
        while choice:
            if choice == 1:
                print("\n\nPlease Enter A Value to insert - ", end="")
                value = int(next(tokens))
                tree.insert(value)
                print(f"\nSuccessfully Inserted {value} in the tree\n")
            elif choice == 2:
                print("\n\nPlease Enter A Value to Delete - ", end="")
                value = int(next(tokens))
                try:
                    tree.delete(value)
                except KeyError:
                    print("Node Not Found!!!")
                else:
                    print(f"\nSuccessfully Deleted {value} from the tree\n")
            elif choice == 3:
                print("\nInorder Traversel - ", end="")
                print("".join(f"{value} c-{int(color)} " for value, color in tree.inorder()))
                print()
            elif tree.root is not None:
                print(f"Root - {tree.root.value}")
            print(_MENU, end="")
            choice = int(next(tokens))
    except (StopIteration, ValueError):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())