"""Ancestor queries on a rooted forest by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable


class BinaryLifting:
    """Jump tables over a parent array in which roots have parent ``-1``."""

    def __init__(self, parents: Iterable[int]) -> None:
        base = list(parents)
        n = len(base)
        if any(not (p == -1 or 0 <= p < n) for p in base):
            raise ValueError("parents must be -1 or a valid node index")
        levels = max(1, n.bit_length())
        table = [base]
        for _ in range(1, levels):
            previous = table[-1]
            table.append([-1 if p == -1 else previous[p] for p in previous])
        self._table = table

    def __len__(self) -> int:
        return len(self._table[0])

    def ancestor(self, node: int, k: int) -> int:
        """Return the ``k``-th ancestor of ``node``, or -1 if there is none."""
        if not 0 <= node < len(self):
            raise IndexError("node out of range")
        if k < 0:
            raise ValueError("k must be non-negative")
        if k >> len(self._table):
            return -1
        for level, row in enumerate(self._table):
            if (k >> level) & 1:
                node = row[node]
                if node == -1:
                    return -1
        return node