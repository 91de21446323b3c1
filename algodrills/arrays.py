"""Array algorithms: majority vote, maximum sub-array, products and closest pairs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import NamedTuple


class SubarrayMax(NamedTuple):
    """Largest contiguous sum and the inclusive bounds of the sub-array giving it."""

    total: int
    start: int
    end: int


def majority_element(values: Sequence[int]) -> int:
    """Return the majority candidate chosen by Boyer-Moore voting.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("majority_element() requires at least one value")

    candidate = values[0]
    count = 1
    for value in values:
        if value == candidate:
            count += 1
        else:
            count -= 1
        if count == 0:
            count = 1
            candidate = value
    return candidate


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous sub-array, or 0 if empty."""
    if not values:
        return 0

    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray(values: Sequence[int]) -> SubarrayMax:
    """Return the largest contiguous sum with its inclusive start and end indices.

    An empty sequence gives ``SubarrayMax(0, -1, -1)``. Among equal sums the
    earliest sub-array found is kept.
    """
    if not values:
        return SubarrayMax(0, -1, -1)

    best = current = values[0]
    start = end = candidate_start = 0
    for index, value in enumerate(values[1:], start=1):
        if current < 0:
            current = value
            candidate_start = index
        else:
            current += value
        if current > best:
            best = current
            start, end = candidate_start, index
    return SubarrayMax(best, start, end)


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    if not values:
        return []

    result = [1] * len(values)
    for index in range(1, len(values)):
        result[index] = result[index - 1] * values[index - 1]

    suffix = 1
    for index in range(len(values) - 2, -1, -1):
        suffix *= values[index + 1]
        result[index] *= suffix
    return result


def product_except_self_brute_force(values: Sequence[int]) -> list[int]:
    """Quadratic reference version of :func:`product_except_self`."""
    result = []
    for i in range(len(values)):
        product = 1
        for j, value in enumerate(values):
            if i != j:
                product *= value
        result.append(product)
    return result


def closest_pair(values: Sequence[int]) -> tuple[int, int]:
    """Return the two values with the smallest absolute difference, in ascending order.

    Fewer than two values give ``(0, 0)``. Ties keep the smallest pair.
    """
    if len(values) < 2:
        return (0, 0)

    ordered = sorted(values)
    return min(pairwise(ordered), key=lambda pair: abs(pair[1] - pair[0]))