import random

import pytest

from dpkit.binary_lifting import BinaryLifting


def _walk(parents, node, k):
    for _ in range(k):
        if node == -1:
            break
        node = parents[node]
    return node


def test_chain_ancestors():
    parents = [-1, 0, 1, 2, 3]
    lifting = BinaryLifting(parents)
    assert lifting.ancestor(4, 0) == 4
    assert lifting.ancestor(4, 4) == 0
    assert lifting.ancestor(4, 5) == -1
    assert lifting.ancestor(4, 1000) == -1


def test_random_tree_matches_walk():
    rng = random.Random(3)
    n = 200
    parents = [-1] + [rng.randrange(i) for i in range(1, n)]
    lifting = BinaryLifting(parents)
    for _ in range(500):
        node = rng.randrange(n)
        k = rng.randrange(0, 300)
        assert lifting.ancestor(node, k) == _walk(parents, node, k)


def test_forest_with_several_roots():
    parents = [-1, 0, -1, 2, 3]
    lifting = BinaryLifting(parents)
    assert lifting.ancestor(4, 2) == 2
    assert lifting.ancestor(4, 3) == -1
    assert lifting.ancestor(1, 1) == 0


def test_invalid_inputs():
    with pytest.raises(ValueError):
        BinaryLifting([-1, 5])
    lifting = BinaryLifting([-1, 0])
    with pytest.raises(IndexError):
        lifting.ancestor(2, 1)
    with pytest.raises(ValueError):
        lifting.ancestor(1, -1)