"""A self-balancing AVL tree of integer keys with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(eq=False)
class AVLNode:
    """A tree node; a leaf has height 0."""

    key: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 0


def _height(node: AVLNode | None) -> int:
    return -1 if node is None else node.height


def _balance(node: AVLNode | None) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(z: AVLNode) -> AVLNode:
    y = z.left
    assert y is not None
    z.left = y.right
    y.right = z
    _update_height(z)
    _update_height(y)
    return y


def _rotate_left(z: AVLNode) -> AVLNode:
    y = z.right
    assert y is not None
    z.right = y.left
    y.left = z
    _update_height(z)
    _update_height(y)
    return y


def _insert(node: AVLNode | None, key: int) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: AVLNode | None, key: int) -> AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        child = node.left or node.right
        if child is None:
            return None
        node = child
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            assert node.left is not None
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            assert node.right is not None
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _preorder(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _postorder(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


def _render(node: AVLNode | None, level: int, parts: list[str]) -> None:
    if node is None:
        return
    _render(node.right, level + 1, parts)
    parts.append("\n\n" + "\t" * level + str(node.key))
    _render(node.left, level + 1, parts)


class AVLTree:
    """Balanced binary search tree; duplicate keys are ignored."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, key: int) -> None:
        self.root = _insert(self.root, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present; a missing key is left alone."""
        self.root = _delete(self.root, key)

    def find(self, key: int) -> AVLNode | None:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.find(key) is not None

    def preorder(self) -> list[int]:
        return list(_preorder(self.root))

    def inorder(self) -> list[int]:
        return list(_inorder(self.root))

    def postorder(self) -> list[int]:
        return list(_postorder(self.root))

    def render(self) -> str:
        """Draw the tree sideways: right subtree on top, one tab per level."""
        parts: list[str] = []
        _render(self.root, 1, parts)
        return "".join(parts)


_MENU = (
    "\n\nEnter the Step to Run : \n"
    "\t1: Insert a node into AVL tree\n"
    "\t2: Delete a node in AVL tree\n"
    "\t3: Search a node into AVL tree\n"
    "\t4: printPreOrder (Ro L R) Tree\n"
    "\t5: printInOrder (L Ro R) Tree\n"
    "\t6: printPostOrder (L R Ro) Tree\n"
    "\t7: printAVL Tree\n"
    "\t0: EXIT"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _print_tree(tree: AVLTree) -> None:
    print("\n\tPrinting AVL Tree")
    print(tree.render())


def _keys_line(keys: list[int]) -> str:
    return "".join(f"  {key}  " for key in keys)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive AVL tree menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive AVL tree.")
    parser.parse_args(argv)

    tree = AVLTree()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(_MENU)
            choice = int(next(tokens))
            if choice == 1:
                print("\n\tEnter the Number to insert: ", end="")
                key = int(next(tokens))
                if key in tree:
                    print(f"\n\t {key} Already exists in the tree")
                else:
                    _print_tree(tree)
                    tree.insert(key)
                    _print_tree(tree)
            elif choice == 2:
                print("\n\tEnter the Number to Delete: ", end="")
                key = int(next(tokens))
                if key not in tree:
                    print(f"\n\t {key} Does not exist in the tree")
                else:
                    _print_tree(tree)
                    tree.delete(key)
                    _print_tree(tree)
            elif choice == 3:
                print("\n\tEnter the Number to Search: ", end="")
                key = int(next(tokens))
                node = tree.find(key)
                if node is None:
                    print(f"\n\t {key} : Not Found")
                else:
                    print(f"\n\t {key} : Found at height {node.height} ")
                    _print_tree(tree)
            elif choice == 4:
                print("\nPrinting Tree preOrder")
                print(_keys_line(tree.preorder()))
            elif choice == 5:
                print("\nPrinting Tree inOrder")
                print(_keys_line(tree.inorder()))
            elif choice == 6:
                print("\nPrinting Tree PostOrder")
                print(_keys_line(tree.postorder()))
            elif choice == 7:
                print("\nPrinting AVL Tree")
                print(tree.render())
            else:
                break
    except (StopIteration, ValueError):
        pass
    print("\n\t\tExiting, Thank You !!")
    return 0


if __name__ == "__main__":
    sys.exit(main())