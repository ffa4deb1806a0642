import io

import pytest

from algoshelf.threaded_tree import ThreadedBinaryTree, main


def _tree(*values):
    tree = ThreadedBinaryTree()
    for value in values:
        tree.insert(value)
    return tree


def test_inorder_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80]
    assert _tree(*values).inorder() == sorted(values)


def test_preorder_and_postorder_follow_insertion_shape():
    tree = _tree(2, 1, 3)
    assert tree.preorder() == [2, 1, 3]
    assert tree.postorder() == [1, 3, 2]


def test_duplicates_ignored():
    tree = _tree(5, 5, 5, 3)
    assert tree.inorder() == [3, 5]


def test_contains():
    tree = _tree(10, 5, 15)
    assert 5 in tree
    assert 7 not in tree
    assert "x" not in tree


def test_delete_leaf():
    tree = _tree(10, 5, 15)
    tree.delete(5)
    assert tree.inorder() == [10, 15]
    assert 5 not in tree


def test_delete_single_child():
    tree = _tree(10, 5, 3)
    tree.delete(5)
    assert tree.preorder() == [10, 3]


def test_delete_two_children_promotes_right_child():
    tree = _tree(50, 30, 70, 60, 80)
    tree.delete(50)
    assert tree.root.data == 70
    assert tree.preorder() == [70, 60, 30, 80]
    assert tree.inorder() == [30, 60, 70, 80]


def test_delete_root_only():
    tree = _tree(1)
    tree.delete(1)
    assert tree.root is None
    assert tree.inorder() == []


def test_delete_missing_is_noop():
    tree = _tree(4, 2, 6)
    tree.delete(99)
    assert tree.inorder() == [2, 4, 6]


@pytest.mark.parametrize("value", [30, 70, 60, 80])
def test_delete_keeps_order(value):
    values = [50, 30, 70, 60, 80, 20]
    tree = _tree(*values)
    tree.delete(value)
    assert tree.inorder() == sorted(v for v in values if v != value)


def test_main_search(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5 1 3 6 5 6 9 2 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Element found." in out
    assert "Element not found." in out
    assert "3\t5\t" in out