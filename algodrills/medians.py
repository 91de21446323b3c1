"""Medians: of two sorted sequences combined, and of a stream of numbers."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def median_of_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of the two ascending sequences taken together.

    Works by binary search over a partition of the shorter sequence. Two
    empty sequences give 0.0.
    """
    if len(first) > len(second):
        first, second = second, first

    n, m = len(first), len(second)
    if n == 0 and m == 0:
        return 0.0

    lo, hi = 0, n
    half = (n + m + 1) // 2
    while lo <= hi:
        i = (lo + hi) // 2
        j = half - i

        first_left = first[i - 1] if i > 0 else -math.inf
        first_right = first[i] if i < n else math.inf
        second_left = second[j - 1] if j > 0 else -math.inf
        second_right = second[j] if j < m else math.inf

        if first_left <= second_right and second_left <= first_right:
            left_max = max(first_left, second_left)
            if (n + m) % 2 == 1:
                return float(left_max)
            return (left_max + min(first_right, second_right)) / 2
        if first_left > second_right:
            hi = i - 1
        else:
            lo = i + 1

    return 0.0


class MedianFinder:
    """Running median of a stream, kept in two balanced heaps."""

    def __init__(self) -> None:
        # Lower half as a max-heap (values negated), upper half as a min-heap.
        self._lower: list[int] = []
        self._upper: list[int] = []

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def add(self, num: int) -> None:
        """Add ``num`` to the stream."""
        heapq.heappush(self._lower, -num)
        heapq.heappush(self._upper, -heapq.heappop(self._lower))
        if len(self._upper) > len(self._lower):
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def median(self) -> float:
        """Return the median of every number added so far.

        Raises ValueError if nothing has been added.
        """
        if not self._lower:
            raise ValueError("median of an empty stream")
        lower_top = -self._lower[0]
        if len(self._lower) == len(self._upper):
            return (lower_top + self._upper[0]) / 2
        return float(lower_top)