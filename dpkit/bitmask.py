"""Dynamic programming over bitmasks."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from functools import lru_cache

MOD = 1_000_000_007


def connect_two_groups(cost: Sequence[Sequence[int]]) -> int:
    """Cheapest way to connect two groups so every point has an edge.

    ``cost[i][j]`` is the price of joining point ``i`` of the first group
    with point ``j`` of the second.
    """
    rows = [tuple(row) for row in cost]
    if not rows or not rows[0]:
        raise ValueError("cost matrix must be non-empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("cost matrix rows must have equal length")
    cheapest = [min(column) for column in zip(*rows)]
    height = len(rows)

    @lru_cache(maxsize=None)
    def best(i: int, mask: int) -> int:
        if i == height:
            return sum(c for j, c in enumerate(cheapest) if not (mask >> j) & 1)
        return min(c + best(i + 1, mask | (1 << j)) for j, c in enumerate(rows[i]))

    return best(0, 0)


def _next_masks(mask: int, n: int) -> list[int]:
    """Masks of the following column reachable by filling column ``mask``."""
    results: list[int] = []

    def fill(i: int, following: int) -> None:
        if i >= n:
            results.append(following)
            return
        if (mask >> i) & 1:
            fill(i + 1, following)
            return
        fill(i + 1, following | (1 << i))
        if i + 1 < n and not (mask >> (i + 1)) & 1:
            fill(i + 2, following)

    fill(0, 0)
    return results


def count_domino_tilings(n: int, m: int) -> int:
    """Count tilings of an ``n`` by ``m`` grid with 1x2 dominoes, modulo ``MOD``."""
    if n < 0 or m < 0:
        raise ValueError("grid dimensions must be non-negative")
    transitions: dict[int, list[int]] = {}
    ways: dict[int, int] = {0: 1}
    for _ in range(m):
        following: defaultdict[int, int] = defaultdict(int)
        for mask, count in ways.items():
            if mask not in transitions:
                transitions[mask] = _next_masks(mask, n)
            for nxt in transitions[mask]:
                following[nxt] = (following[nxt] + count) % MOD
        ways = following
    return ways.get(0, 0)


def _is_palindrome(mask: int, width: int) -> bool:
    text = format(mask, f"0{width}b")
    return text == text[::-1]


_PALINDROME5 = frozenset(m for m in range(1 << 5) if _is_palindrome(m, 5))
_PALINDROME6 = frozenset(m for m in range(1 << 6) if _is_palindrome(m, 6))


def can_avoid_palindromes(s: str) -> bool:
    """Whether the ``?`` in a binary string can be filled without palindromes of length 5 or 6."""
    if any(ch not in "01?" for ch in s):
        raise ValueError("string may only hold '0', '1' and '?'")
    states = {0}
    for length, ch in enumerate(s, start=1):
        bits = (0, 1) if ch == "?" else (int(ch),)
        following = set()
        for mask in states:
            for bit in bits:
                nxt = ((mask << 1) | bit) & 0b111111
                if length >= 5 and (nxt & 0b11111) in _PALINDROME5:
                    continue
                if length >= 6 and nxt in _PALINDROME6:
                    continue
                following.add(nxt)
        if not following:
            return False
        states = following
    return True