"""Subset-sum and knapsack style optimisation problems."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

DEFAULT_COST_LIMIT = 1024


def min_total_cost(a: Iterable[int], b: Iterable[int]) -> int:
    """Minimise the summed pairwise squares of both arrays after swapping.

    Position ``i`` may swap ``a[i]`` with ``b[i]``; the cost of an array is
    the sum of ``(x_i + x_j) ** 2`` over all pairs ``i < j``.
    """
    a, b = list(a), list(b)
    if len(a) != len(b):
        raise ValueError("arrays must have equal length")
    if any(x < 0 for x in a + b):
        raise ValueError("values must be non-negative")
    n = len(a)
    if n <= 1:
        return 0
    base = (n - 2) * sum(x * x for x in a + b)
    total = sum(a) + sum(b)
    reachable = 1
    for x, y in zip(a, b):
        reachable = (reachable << x) | (reachable << y)
    best = min(
        s * s + (total - s) ** 2
        for s in range(total + 1)
        if (reachable >> s) & 1
    )
    return base + best


@lru_cache(maxsize=None)
def _cost_table(limit: int) -> tuple[int, ...]:
    costs = [0] * limit
    if limit > 2:
        costs[2] = 1
    for i in range(3, limit):
        best = None
        for j in range(i - 1, 0, -1):
            x = j // (i - j)
            if x > 0 and j + j // x == i:
                candidate = costs[j] + 1
                if best is None or candidate < best:
                    best = candidate
        costs[i] = best
    return tuple(costs)


def operation_costs(limit: int = DEFAULT_COST_LIMIT) -> list[int]:
    """Fewest ``v += v // x`` steps to reach each value below ``limit`` from 1.

    Index 0 is unused and holds 0.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return list(_cost_table(limit))


def max_coins(targets: Iterable[int], values: Iterable[int], k: int) -> int:
    """Best total of ``values`` whose targets can be reached in ``k`` steps."""
    targets, values = list(targets), list(values)
    if len(targets) != len(values):
        raise ValueError("targets and values must have equal length")
    if k < 0:
        raise ValueError("k must be non-negative")
    table = _cost_table(DEFAULT_COST_LIMIT)
    if any(not 1 <= t < len(table) for t in targets):
        raise ValueError(f"targets must lie in 1..{len(table) - 1}")
    weights = [table[t] for t in targets]
    capacity = min(k, sum(weights))
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for cap in range(capacity, weight - 1, -1):
            best[cap] = max(best[cap], best[cap - weight] + value)
    return best[capacity]