"""Text renderings of a pile for inspection."""

from __future__ import annotations

from collections.abc import Iterable

from .printf import format_printf


def format_pile(values: Iterable[int]) -> str:
    """The pile from top to bottom, each value followed by a space."""
    body = "".join(format_printf("%d ", value) for value in values)
    return f"TOP:{body}:BOT\n"


def format_bits(num: int) -> str:
    """The 32 bits of ``num``, most significant first."""
    return "".join(str((num >> i) & 1) for i in range(31, -1, -1))


def _format_bit_lines(values: Iterable[int], conversion: str) -> str:
    lines = "".join(
        format_bits(value) + format_printf(":" + conversion + "\n", value)
        for value in values
    )
    return f"TOP:\n{lines}:BOT\n"


def format_pile_bits(values: Iterable[int]) -> str:
    """One line per value: its bits and its signed decimal value."""
    return _format_bit_lines(values, "%d")


def format_pile_unsigned_bits(values: Iterable[int]) -> str:
    """One line per value: its bits and its unsigned 32-bit decimal value."""
    return _format_bit_lines(values, "%u")