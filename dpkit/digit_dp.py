"""Counting integers in a range by digit dynamic programming."""

from __future__ import annotations

from functools import lru_cache


def _digits(n: int) -> tuple[int, ...]:
    return tuple(int(ch) for ch in str(n))


def _count_with_sum(digits: tuple[int, ...], target: int) -> int:
    """Numbers in ``1..N`` with digit sum ``target`` and digit product divisible by it."""
    length = len(digits)

    @lru_cache(maxsize=None)
    def go(pos: int, digit_sum: int, product: int, tight: bool, started: bool) -> int:
        if digit_sum > target or target - digit_sum > 9 * (length - pos):
            return 0
        if pos == length:
            return int(started and digit_sum == target and product == 0)
        limit = digits[pos] if tight else 9
        total = 0
        for d in range(limit + 1):
            still_tight = tight and d == limit
            if not started and d == 0:
                total += go(pos + 1, 0, product, still_tight, False)
            else:
                total += go(pos + 1, digit_sum + d, product * d % target, still_tight, True)
        return total

    return go(0, 0, 1 % target, True, False)


def _interesting_up_to(n: int) -> int:
    if n <= 0:
        return 0
    digits = _digits(n)
    return sum(_count_with_sum(digits, target) for target in range(1, 9 * len(digits) + 1))


def count_interesting(a: int, b: int) -> int:
    """Count integers in ``[a, b]`` whose digit product is divisible by their digit sum."""
    if a < 0:
        raise ValueError("a must be non-negative")
    if a > b:
        raise ValueError("a must not exceed b")
    return _interesting_up_to(b) - _interesting_up_to(a - 1)


def _no_adjacent_up_to(n: int) -> int:
    """Numbers in ``0..n`` with no two equal neighbouring digits."""
    if n < 0:
        return 0
    digits = _digits(n)
    length = len(digits)

    @lru_cache(maxsize=None)
    def go(pos: int, prev: int, tight: bool, started: bool) -> int:
        if pos == length:
            return 1
        limit = digits[pos] if tight else 9
        total = 0
        for d in range(limit + 1):
            if started and d == prev:
                continue
            total += go(pos + 1, d, tight and d == limit, started or d != 0)
        return total

    return go(0, -1, True, False)


def count_no_adjacent_equal(a: int, b: int) -> int:
    """Count integers in ``[a, b]`` in which no two adjacent digits are equal."""
    if a < 0:
        raise ValueError("a must be non-negative")
    if a > b:
        raise ValueError("a must not exceed b")
    return _no_adjacent_up_to(b) - _no_adjacent_up_to(a - 1)