"""Sorting strategies that drive the two stacks."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .piles import get_max, get_min, is_reverse_sorted, is_sorted, seek_max_index
from .stacks import Stacks

_U32_MASK = 0xFFFFFFFF


def normalize(values: Iterable[int]) -> list[int]:
    """Replace every value with its rank, 0 for the smallest.

    Equal values receive consecutive ranks in their original order.
    """
    values = list(values)
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for rank, index in enumerate(order):
        ranks[index] = rank
    return ranks


def _small_sort(
    pile: list[int],
    swap: Callable[[], None],
    rotate: Callable[[], None],
    reverse_rotate: Callable[[], None],
) -> None:
    if len(pile) == 2:
        if not is_sorted(pile):
            swap()
        return
    if len(pile) == 3:
        max_index = seek_max_index(pile)
        if max_index == 0:
            rotate()
        if max_index == 1:
            reverse_rotate()
        if pile[0] > pile[1]:
            swap()


def small_sort_a(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds at most three values."""
    _small_sort(stacks.a, stacks.sa, stacks.ra, stacks.rra)


def small_sort_b(stacks: Stacks) -> None:
    """Sort stack ``b`` ascending when it holds at most three values."""
    _small_sort(stacks.b, stacks.sb, stacks.rb, stacks.rrb)


def _bring_min_to_top(stacks: Stacks, low: int) -> None:
    while stacks.a and stacks.a[0] != low:
        stacks.ra()


def little_sort(stacks: Stacks) -> None:
    """Sort a handful of values by inserting ``b`` into a rotating ``a``."""
    while stacks.size_a > 3:
        stacks.pb()
    small_sort_a(stacks)
    small_sort_b(stacks)
    while stacks.b:
        high = get_max(stacks.a)
        low = get_min(stacks.a)
        top_a = stacks.a[0]
        top_b = stacks.b[0]
        if top_b < top_a or (top_b > high and top_a == low):
            stacks.pa()
        stacks.ra()
    _bring_min_to_top(stacks, get_min(stacks.a))


def _bit(value: int, position: int) -> int:
    return ((value & _U32_MASK) >> position) & 1


def _push_zeroes_to_b(stacks: Stacks, position: int) -> None:
    for _ in range(stacks.size_a):
        if _bit(stacks.a[0], position):
            stacks.ra()
        else:
            stacks.pb()


def _push_ones_back_to_a(stacks: Stacks, position: int) -> None:
    for _ in range(stacks.size_b):
        if _bit(stacks.b[0], position):
            stacks.pa()
        else:
            stacks.rb()


def _split_in_order(stacks: Stacks) -> bool:
    """True when emptying ``b`` onto ``a`` would leave ``a`` sorted."""
    if not (is_sorted(stacks.a) and is_reverse_sorted(stacks.b)):
        return False
    if not stacks.a or not stacks.b:
        return True
    return stacks.a[0] > stacks.b[0]


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort across both stacks; values are read as 32-bit unsigned."""
    highest = max((value & _U32_MASK for value in stacks.a), default=0)
    max_bits = highest.bit_length()
    for position in range(max_bits + 1):
        _push_zeroes_to_b(stacks, position)
        if _split_in_order(stacks):
            break
        _push_ones_back_to_a(stacks, position + 1)
    while stacks.b:
        stacks.pa()


def sort(stacks: Stacks) -> None:
    """Keep the extremes in ``a``, park the rest in ``b`` and push them back.

    Each value pushed back is swapped once if it exceeds the one below it;
    finally the minimum is rotated to the top.
    """
    low = get_min(stacks.a)
    high = get_max(stacks.a)
    while stacks.size_a > 3:
        if stacks.a[0] in (low, high):
            stacks.ra()
        else:
            stacks.pb()
    small_sort_a(stacks)
    while stacks.b:
        stacks.pa()
        if len(stacks.a) > 1 and stacks.a[0] > stacks.a[1]:
            stacks.sa()
    _bring_min_to_top(stacks, low)