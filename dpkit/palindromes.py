"""Palindrome counting problems."""

from __future__ import annotations

MOD = 1_000_000_007
DEFAULT_LIMIT = 40005


def _is_palindrome(value: int) -> bool:
    text = str(value)
    return text == text[::-1]


def palindromic_numbers(limit: int = DEFAULT_LIMIT) -> list[int]:
    """Return the positive palindromic integers below ``limit`` in order."""
    return [x for x in range(1, limit) if _is_palindrome(x)]


def palindrome_sum_counts(limit: int = DEFAULT_LIMIT) -> list[int]:
    """For each ``n < limit``, count multisets of palindromes summing to ``n``.

    Counts are taken modulo ``MOD``; the entry for 0 is 1.
    """
    if limit < 1:
        raise ValueError("limit must be positive")
    ways = [1] + [0] * (limit - 1)
    for part in palindromic_numbers(limit):
        for total in range(part, limit):
            ways[total] = (ways[total] + ways[total - part]) % MOD
    return ways


def count_palindrome_sums(n: int) -> int:
    """Count the ways to write ``n`` as an unordered sum of palindromes."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return palindrome_sum_counts(n + 1)[n]


def min_removals_even_pairs(s: str) -> int:
    """Fewest deletions leaving ``s`` as a run of equal-letter pairs."""
    n = len(s)
    kept = [0] * (n + 1)
    next_position: dict[str, int] = {}
    for i, ch in reversed(list(enumerate(s))):
        partner = next_position.get(ch)
        paired = kept[partner + 1] + 2 if partner is not None else 0
        kept[i] = max(kept[i + 1], paired)
        next_position[ch] = i
    return n - kept[0]