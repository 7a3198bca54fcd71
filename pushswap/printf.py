"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_BASE_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_UPPER_HEX = "0123456789ABCDEF"
_LONG_MIN = -(1 << 63)
_U64_MAX = (1 << 64) - 1
_U32_MASK = (1 << 32) - 1


def _signed(value: int, bits: int) -> int:
    """Reinterpret ``value`` as a two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def number_base(number: int, base: int) -> str:
    """Signed representation of ``number`` in ``base`` (2 to 35), lower case."""
    if base < 2 or base >= 36:
        raise ValueError(f"base must be between 2 and 35, got {base}")
    if base == 16 and number == _LONG_MIN:
        return "8000000000000000"
    sign = "-" if number < 0 else ""
    remaining = abs(number)
    digits = []
    while True:
        remaining, digit = divmod(remaining, base)
        digits.append(_BASE_DIGITS[digit])
        if remaining == 0:
            break
    return sign + "".join(reversed(digits))


def hex_upper(number: int) -> str:
    """Upper-case hexadecimal of ``number`` taken as a 32-bit unsigned value."""
    remaining = number & _U32_MASK
    digits = []
    while True:
        remaining, digit = divmod(remaining, 16)
        digits.append(_UPPER_HEX[digit])
        if remaining == 0:
            break
    return "".join(reversed(digits))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects str, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    address = int(value)
    if address & _U64_MAX == _U64_MAX:
        return "0xffffffffffffffff"
    return "0x" + number_base(_signed(address, 64), 16)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": lambda v: number_base(_signed(int(v), 32), 10),
    "i": lambda v: number_base(_signed(int(v), 32), 10),
    "u": lambda v: number_base(int(v) & _U32_MASK, 10),
    "x": lambda v: number_base(int(v) & _U32_MASK, 16),
    "X": lambda v: hex_upper(int(v)),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[tuple[str, int]]:
    """Yield pieces of output together with the count each adds.

    An unknown conversion writes nothing and counts -1; a lone trailing
    '%' ends the output.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    pending = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch, 1
            continue
        conversion = next(chars, None)
        if conversion is None:
            return
        if conversion == "%":
            yield "%", 1
            continue
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            yield "", -1
            continue
        try:
            argument = next(pending)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for conversion %{conversion}"
            ) from None
        text = handler(argument)
        yield text, len(text)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write."""
    return "".join(text for text, _ in _render(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write formatted output to standard output and return the count."""
    total = 0
    out = sys.stdout
    for text, count in _render(fmt, args):
        out.write(text)
        total += count
    return total