import io
import random

import pytest

from algoshelf.avl_tree import AVLNode, AVLTree, main


def _check(node: AVLNode | None) -> int:
    """Return the real height of ``node`` and assert the AVL invariants."""
    if node is None:
        return -1
    left = _check(node.left)
    right = _check(node.right)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    assert abs(left - right) <= 1
    height = max(left, right) + 1
    assert node.height == height
    return height


def test_empty_tree():
    tree = AVLTree()
    assert tree.inorder() == []
    assert tree.render() == ""
    assert tree.find(3) is None
    assert 3 not in tree


@pytest.mark.parametrize("order", [range(1, 50), range(50, 0, -1)])
def test_sorted_insertions_stay_balanced(order):
    tree = AVLTree()
    for key in order:
        tree.insert(key)
        _check(tree.root)
    assert tree.inorder() == sorted(order)


def test_seven_keys_form_perfect_tree():
    tree = AVLTree()
    for key in range(1, 8):
        tree.insert(key)
    assert tree.preorder() == [4, 2, 1, 3, 6, 5, 7]
    assert tree.root.height == 2


def test_three_keys_rotate_to_middle():
    tree = AVLTree()
    for key in (1, 2, 3):
        tree.insert(key)
    assert tree.root.key == 2
    assert tree.postorder() == [1, 3, 2]


def test_duplicates_ignored():
    tree = AVLTree()
    for key in (5, 5, 3, 3, 8):
        tree.insert(key)
    assert tree.inorder() == [3, 5, 8]


def test_find_returns_node():
    tree = AVLTree()
    for key in (10, 20, 30):
        tree.insert(key)
    node = tree.find(30)
    assert node is not None and node.key == 30
    assert 20 in tree
    assert 25 not in tree


def test_random_insert_delete_keeps_invariants():
    rng = random.Random(7)
    tree = AVLTree()
    present: set[int] = set()
    for _ in range(400):
        key = rng.randint(0, 80)
        if rng.random() < 0.6:
            tree.insert(key)
            present.add(key)
        else:
            tree.delete(key)
            present.discard(key)
        _check(tree.root)
        assert tree.inorder() == sorted(present)


def test_delete_missing_is_noop():
    tree = AVLTree()
    for key in (2, 1, 3):
        tree.insert(key)
    tree.delete(99)
    assert tree.inorder() == [1, 2, 3]


def test_delete_all_empties_tree():
    tree = AVLTree()
    keys = list(range(20))
    for key in keys:
        tree.insert(key)
    for key in keys:
        tree.delete(key)
    assert tree.root is None


def test_render_single_node():
    tree = AVLTree()
    tree.insert(5)
    assert tree.render() == "\n\n\t5"


def test_render_lists_every_key_right_first():
    tree = AVLTree()
    for key in (2, 1, 3):
        tree.insert(key)
    lines = [line for line in tree.render().split("\n") if line]
    assert [int(line.strip()) for line in lines] == sorted((1, 2, 3), reverse=True)


def test_main_search(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n10\n1\n10\n3\n10\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "10 Already exists in the tree" in out
    assert "10 : Found at height 0" in out