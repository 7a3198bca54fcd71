"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import overload

_WHITESPACE = "\t\f\v\r\n "
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    An optional single sign is accepted; parsing stops at the first
    non-digit. Text without digits yields 0.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    value = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
    return sign * value


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(number)


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...


def tolower(c: int | str) -> int | str:
    """Map an upper-case ASCII letter to lower case.

    Integer input is truncated to a byte, except for -1 which is returned
    unchanged. A string input gives a string back.
    """
    return _shift_case(c, "A", "Z", 32)


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...


def toupper(c: int | str) -> int | str:
    """Map a lower-case ASCII letter to upper case.

    Integer input is truncated to a byte, except for -1 which is returned
    unchanged. A string input gives a string back.
    """
    return _shift_case(c, "a", "z", -32)


def _shift_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    if isinstance(c, str):
        code = _code(c)
        return chr(code + delta) if ord(low) <= code <= ord(high) else c
    if c == -1:
        return -1
    code = c & 0xFF
    if ord(low) <= code <= ord(high):
        code += delta
    return code