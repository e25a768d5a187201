"""Point-update, range-maximum segment tree."""

from __future__ import annotations

EMPTY = -10**17


class MaxSegmentTree:
    """Segment tree over ``size`` slots answering maxima of half-open ranges.

    Slots that were never set hold ``EMPTY``, which is also the answer for
    a range that covers nothing.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._tree = [EMPTY] * (4 * size)

    def __len__(self) -> int:
        return self.size

    def update(self, index: int, value: int) -> None:
        """Set slot ``index`` to ``value``."""
        if not 0 <= index < self.size:
            raise IndexError("index out of range")
        self._update(index, value, 0, 0, self.size)

    def _update(self, index: int, value: int, node: int, lo: int, hi: int) -> None:
        tree = self._tree
        if hi - lo == 1:
            tree[node] = value
            return
        mid = (lo + hi) // 2
        if index < mid:
            self._update(index, value, 2 * node + 1, lo, mid)
        else:
            self._update(index, value, 2 * node + 2, mid, hi)
        tree[node] = max(tree[2 * node + 1], tree[2 * node + 2])

    def query(self, left: int, right: int) -> int:
        """Return the maximum of slots ``left`` .. ``right - 1``."""
        return self._query(left, right, 0, 0, self.size)

    def _query(self, left: int, right: int, node: int, lo: int, hi: int) -> int:
        if left <= lo and hi <= right:
            return self._tree[node]
        if hi <= left or lo >= right:
            return EMPTY
        mid = (lo + hi) // 2
        return max(
            self._query(left, right, 2 * node + 1, lo, mid),
            self._query(left, right, 2 * node + 2, mid, hi),
        )