"""Combinatorial counting problems solved by dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable

GOOD_MOD = 998_244_353
WIN_MOD = 1_000_000_007


def _pascal(rows: int, mod: int) -> list[list[int]]:
    table = [[1]]
    for r in range(1, rows):
        prev = table[-1]
        row = [1]
        row.extend((prev[j] + prev[j - 1]) % mod for j in range(1, r))
        row.append(1)
        table.append(row)
    return table


def count_good_subsequences(values: Iterable[int]) -> int:
    """Count subsequences that split into good arrays, modulo ``GOOD_MOD``.

    A good array starts with ``k > 0`` and has exactly ``k`` further elements.
    """
    values = list(values)
    n = len(values)
    comb = _pascal(n + 1, GOOD_MOD)
    ways = [0] * (n + 1)
    ways[n] = 1
    for i in range(n - 1, -1, -1):
        k = values[i]
        if k <= 0:
            continue
        ways[i] = sum(
            comb[j - i - 1][k] * ways[j] for j in range(i + k + 1, n + 1)
        ) % GOOD_MOD
    return sum(ways[:n]) % GOOD_MOD


def count_winning_arrays(n: int, k: int) -> int:
    """Count arrays of ``n`` values below ``2**k`` whose AND is at least their XOR.

    The count is taken modulo ``WIN_MOD``.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0:
        return 1
    half = pow(2, n - 1, WIN_MOD)
    if n % 2 == 1:
        return pow(half + 1, k, WIN_MOD)
    tie = (half - 1) % WIN_MOD
    total = pow(tie, k, WIN_MOD)
    free_row = pow(2, n, WIN_MOD)
    for bit in range(1, k + 1):
        total += pow(tie, bit - 1, WIN_MOD) * pow(free_row, k - bit, WIN_MOD)
    return total % WIN_MOD