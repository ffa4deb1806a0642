import pytest

from algoshelf.traversals import Node, in_order, post_order, pre_order


@pytest.fixture
def tree():
    return Node(1, Node(2, Node(4), Node(5)), Node(3))


def test_in_order(tree):
    assert list(in_order(tree)) == [4, 2, 5, 1, 3]


def test_pre_order(tree):
    assert list(pre_order(tree)) == [1, 2, 4, 5, 3]


def test_post_order(tree):
    assert list(post_order(tree)) == [4, 5, 2, 3, 1]


@pytest.mark.parametrize("walk", [in_order, pre_order, post_order])
def test_empty_tree(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [in_order, pre_order, post_order])
def test_single_node(walk):
    assert list(walk(Node("x"))) == ["x"]


def test_traversals_visit_same_nodes(tree):
    assert sorted(in_order(tree)) == sorted(pre_order(tree)) == sorted(post_order(tree))


def test_pre_starts_and_post_ends_with_root(tree):
    assert next(pre_order(tree)) == tree.data
    assert list(post_order(tree))[-1] == tree.data


def test_in_order_of_search_tree_is_sorted():
    root = Node(50, Node(30, Node(20), Node(40)), Node(70, Node(60), Node(80)))
    values = list(in_order(root))
    assert values == sorted(values)


def test_left_chain_pre_order_is_reverse_of_in_order():
    root = Node(3, Node(2, Node(1)))
    assert list(pre_order(root)) == list(reversed(list(in_order(root))))
    assert list(post_order(root)) == list(in_order(root))