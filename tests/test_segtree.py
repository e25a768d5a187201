import random

import pytest

from dpkit.segtree import EMPTY, MaxSegmentTree


def test_fresh_tree_returns_empty():
    tree = MaxSegmentTree(8)
    assert tree.query(0, 8) == EMPTY
    assert len(tree) == 8


def test_empty_range_returns_empty():
    tree = MaxSegmentTree(5)
    tree.update(2, 10)
    assert tree.query(3, 3) == EMPTY


def test_random_operations_match_reference():
    rng = random.Random(7)
    size = 37
    tree = MaxSegmentTree(size)
    reference = [EMPTY] * size
    for _ in range(400):
        if rng.random() < 0.5:
            index = rng.randrange(size)
            value = rng.randrange(-1000, 1000)
            tree.update(index, value)
            reference[index] = value
        else:
            left = rng.randrange(size + 1)
            right = rng.randrange(left, size + 1)
            assert tree.query(left, right) == max(reference[left:right], default=EMPTY)


def test_update_overwrites_value():
    tree = MaxSegmentTree(4)
    tree.update(1, 50)
    tree.update(1, -3)
    assert tree.query(0, 4) == -3


def test_update_out_of_range():
    tree = MaxSegmentTree(3)
    with pytest.raises(IndexError):
        tree.update(3, 1)


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        MaxSegmentTree(0)