import itertools
import operator

import pytest

from algoshelf.segment_tree import SegmentTree

INT32_MAX = 2**31 - 1
SOURCE_VALUES = [1, 0, 3, 5, 7, 2, 11, 6, -2, 8]


def make_min_tree(values=SOURCE_VALUES):
    return SegmentTree(values, min, INT32_MAX)


def test_range_minimum_queries_from_source():
    tree = make_min_tree()
    assert tree.query(3, 6) == 2
    assert tree.query(8, 9) == -2
    tree.update(5, 12)
    tree.update(8, 12)
    assert tree.query(0, 3) == 0
    assert tree.query(8, 9) == 8


@pytest.mark.parametrize("size", [1, 2, 3, 5, 8, 10])
def test_every_range_matches_min_and_sum(size):
    values = SOURCE_VALUES[:size]
    min_tree = make_min_tree(values)
    sum_tree = SegmentTree(values, operator.add, 0)
    for left, right in itertools.combinations_with_replacement(range(size), 2):
        window = values[left : right + 1]
        assert min_tree.query(left, right) == min(window)
        assert sum_tree.query(left, right) == sum(window)


def test_updates_keep_all_ranges_consistent():
    values = list(SOURCE_VALUES)
    tree = SegmentTree(values, operator.add, 0)
    for index, new in zip(range(len(values)), reversed(values)):
        tree.update(index, new)
        values[index] = new
    for left, right in itertools.combinations_with_replacement(range(len(values)), 2):
        assert tree.query(left, right) == sum(values[left : right + 1])


def test_nodes_layout_root_and_leaves():
    tree = SegmentTree(SOURCE_VALUES, operator.add, 0)
    nodes = tree.nodes()
    assert len(nodes) == 2 * len(SOURCE_VALUES) - 1
    assert nodes[len(SOURCE_VALUES) - 1 :] == SOURCE_VALUES
    assert nodes[0] == sum(SOURCE_VALUES)


def test_nodes_returns_copy():
    tree = make_min_tree()
    nodes = tree.nodes()
    nodes[0] = 999
    assert tree.nodes()[0] == -2


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        SegmentTree([], min, INT32_MAX)


@pytest.mark.parametrize("left,right", [(-1, 3), (0, 10), (10, 10)])
def test_query_out_of_range(left, right):
    with pytest.raises(IndexError):
        make_min_tree().query(left, right)


def test_query_reversed_bounds():
    with pytest.raises(ValueError):
        make_min_tree().query(5, 2)


def test_update_out_of_range():
    with pytest.raises(IndexError):
        make_min_tree().update(10, 0)