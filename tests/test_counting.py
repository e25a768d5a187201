import itertools
import random
from functools import reduce

import pytest

from dpkit.counting import GOOD_MOD, WIN_MOD, count_good_subsequences, count_winning_arrays


def _is_good_sequence(seq):
    if not seq:
        return False
    pos = 0
    while pos < len(seq):
        k = seq[pos]
        if k <= 0 or pos + k + 1 > len(seq):
            return False
        pos += k + 1
    return True


def _brute_good(values):
    count = 0
    for r in range(1, len(values) + 1):
        for idx in itertools.combinations(range(len(values)), r):
            if _is_good_sequence([values[i] for i in idx]):
                count += 1
    return count % GOOD_MOD


def _brute_winning(n, k):
    count = 0
    for arr in itertools.product(range(2**k), repeat=n):
        conj = reduce(lambda x, y: x & y, arr)
        xor = reduce(lambda x, y: x ^ y, arr)
        if conj >= xor:
            count += 1
    return count


def test_good_subsequences_match_brute_force():
    rng = random.Random(5)
    for _ in range(60):
        values = [rng.randrange(-1, 4) for _ in range(rng.randrange(1, 9))]
        assert count_good_subsequences(values) == _brute_good(values)


def test_good_subsequences_nonpositive_only():
    assert count_good_subsequences([0, -1, -5, 0]) == 0


def test_good_subsequences_single_element():
    assert count_good_subsequences([3]) == 0


def test_good_subsequences_empty():
    assert count_good_subsequences([]) == 0


def test_winning_arrays_match_brute_force():
    for n in range(1, 4):
        for k in range(1, 4):
            assert count_winning_arrays(n, k) == _brute_winning(n, k)


@pytest.mark.parametrize("k", range(6))
def test_single_element_always_wins(k):
    assert count_winning_arrays(1, k) == pow(2, k, WIN_MOD)


def test_zero_bits_gives_one_array():
    assert count_winning_arrays(6, 0) == 1


def test_large_inputs_stay_in_range():
    result = count_winning_arrays(200000, 200)
    assert 0 <= result < WIN_MOD


def test_invalid_arguments():
    with pytest.raises(ValueError):
        count_winning_arrays(0, 3)
    with pytest.raises(ValueError):
        count_winning_arrays(2, -1)