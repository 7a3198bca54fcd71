"""Queries over piles of integers: order, extremes, sorting and quantiles."""

from __future__ import annotations

from collections.abc import Sequence


def is_sorted(values: Sequence[int]) -> bool:
    """True when each element is no greater than the next."""
    return all(a <= b for a, b in zip(values, values[1:]))


def is_reverse_sorted(values: Sequence[int]) -> bool:
    """True when each element is no smaller than the next."""
    return all(a >= b for a, b in zip(values, values[1:]))


def get_max(values: Sequence[int]) -> int:
    """Largest element, or 0 for an empty pile."""
    return max(values, default=0)


def get_min(values: Sequence[int]) -> int:
    """Smallest element, or 0 for an empty pile."""
    return min(values, default=0)


def seek_min_index(values: Sequence[int]) -> int:
    """Position of the first occurrence of the smallest element."""
    if not values:
        raise ValueError("empty pile has no minimum")
    return min(range(len(values)), key=values.__getitem__)


def seek_max_index(values: Sequence[int]) -> int:
    """Position of the first occurrence of the largest element."""
    if not values:
        raise ValueError("empty pile has no maximum")
    return max(range(len(values)), key=values.__getitem__)


def bubble_sort(values: Sequence[int]) -> list[int]:
    """A sorted copy of the pile, leaving the original untouched."""
    result = list(values)
    unsorted = True
    while unsorted:
        unsorted = False
        for index in range(len(result) - 1):
            if result[index] > result[index + 1]:
                result[index], result[index + 1] = result[index + 1], result[index]
                unsorted = True
    return result


def pile_quantile(values: Sequence[int], iq: int) -> int:
    """The ``iq``-th fifth quantile: element at ``iq * len // 5`` once sorted."""
    if not values:
        raise ValueError("empty pile has no quantile")
    index = iq * len(values) // 5
    if not 0 <= index < len(values):
        raise ValueError(f"quantile {iq} is out of range")
    return bubble_sort(values)[index]