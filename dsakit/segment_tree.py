"""Segment tree over integers with range sums and lazy range increments."""

from __future__ import annotations

from typing import Iterable


class SegmentTree:
    """Range-sum queries, point assignment and range increments in O(log n)."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = list(nums)
        if not values:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(values)
        self._tree = [0] * (4 * self._n)
        self._lazy = [0] * (4 * self._n)
        self._build(values, 0, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, values: list[int], ind: int, low: int, high: int) -> None:
        if low == high:
            self._tree[ind] = values[low]
            return
        mid = (low + high) // 2
        self._build(values, 2 * ind + 1, low, mid)
        self._build(values, 2 * ind + 2, mid + 1, high)
        self._tree[ind] = self._tree[2 * ind + 1] + self._tree[2 * ind + 2]

    def _settle(self, ind: int, low: int, high: int) -> None:
        pending = self._lazy[ind]
        if pending:
            self._tree[ind] += (high - low + 1) * pending
            if low != high:
                self._lazy[2 * ind + 1] += pending
                self._lazy[2 * ind + 2] += pending
            self._lazy[ind] = 0

    def _pull(self, ind: int, low: int, high: int) -> None:
        mid = (low + high) // 2
        self._settle(2 * ind + 1, low, mid)
        self._settle(2 * ind + 2, mid + 1, high)
        self._tree[ind] = self._tree[2 * ind + 1] + self._tree[2 * ind + 2]

    def _query(self, ind: int, low: int, high: int, left: int, right: int) -> int:
        self._settle(ind, low, high)
        if left > high or right < low:
            return 0
        if left <= low and high <= right:
            return self._tree[ind]
        mid = (low + high) // 2
        return self._query(2 * ind + 1, low, mid, left, right) + self._query(
            2 * ind + 2, mid + 1, high, left, right
        )

    def _update(self, ind: int, low: int, high: int, index: int, value: int) -> None:
        self._settle(ind, low, high)
        if low == high:
            self._tree[ind] = value
            return
        mid = (low + high) // 2
        if index <= mid:
            self._update(2 * ind + 1, low, mid, index, value)
        else:
            self._update(2 * ind + 2, mid + 1, high, index, value)
        self._pull(ind, low, high)

    def _range_update(
        self, ind: int, low: int, high: int, left: int, right: int, value: int
    ) -> None:
        self._settle(ind, low, high)
        if high < left or right < low:
            return
        if left <= low and high <= right:
            self._tree[ind] += (high - low + 1) * value
            if low != high:
                self._lazy[2 * ind + 1] += value
                self._lazy[2 * ind + 2] += value
            return
        mid = (low + high) // 2
        self._range_update(2 * ind + 1, low, mid, left, right, value)
        self._range_update(2 * ind + 2, mid + 1, high, left, right, value)
        self._tree[ind] = self._tree[2 * ind + 1] + self._tree[2 * ind + 2]

    def query(self, left: int, right: int) -> int:
        """Sum of the values at indices left..right inclusive.

        Indices outside the array contribute nothing.
        """
        return self._query(0, 0, self._n - 1, left, right)

    def update(self, index: int, value: int) -> None:
        """Replace the value at index."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(0, 0, self._n - 1, index, value)

    def range_update(self, left: int, right: int, value: int) -> None:
        """Add value to every element at indices left..right inclusive."""
        self._range_update(0, 0, self._n - 1, left, right, value)