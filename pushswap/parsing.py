"""Reading the integers given on the command line and validating them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .chars import atoi
from .strings import split, strjoin_tab

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_ALLOWED = frozenset("-0123456789")


class PushSwapError(Exception):
    """Raised when the input is not a list of distinct integers."""


def atol(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign."""
    return atoi(text)


def is_int(text: str) -> bool:
    """True when ``text`` is made of digits and '-' and fits a 32-bit int.

    Texts longer than 11 characters, or empty, are rejected.
    """
    if any(ch not in _ALLOWED for ch in text):
        return False
    if not 0 < len(text) <= 11:
        return False
    if len(text) >= 10:
        return _INT_MIN <= atol(text) <= _INT_MAX
    return True


def check_args(args: Iterable[str]) -> None:
    """Raise :class:`PushSwapError` if any argument is not an integer."""
    for arg in args:
        if not is_int(arg):
            raise PushSwapError("Error")


def parse(args: Sequence[str]) -> list[int]:
    """Integers found in the arguments, each of which may hold several.

    Arguments are joined with spaces and split on spaces; every piece
    must be an integer, or :class:`PushSwapError` is raised.
    """
    joined = strjoin_tab(args, " ")
    if joined is None:
        return []
    words = split(joined, " ")
    if not all(is_int(word) for word in words):
        raise PushSwapError("Error")
    return [atoi(word) for word in words]


def check_unique(values: Iterable[int]) -> None:
    """Raise :class:`PushSwapError` if a value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise PushSwapError("Singletons error")
        seen.add(value)