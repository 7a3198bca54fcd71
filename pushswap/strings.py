"""String helpers: searching, comparing, joining, splitting and trimming."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence

_NUL = "\0"


def _char(c: int | str) -> str:
    """Normalise a character given as an int code or a one-character string.

    Integer codes are truncated to a byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _code_at(text: str, index: int) -> int:
    """Code of the character at ``index``, or 0 past the end of ``text``."""
    return ord(text[index]) if index < len(text) else 0


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    return [word for word in text.split(_char(sep)) if word]


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c`` in ``text``.

    Searching for the NUL character gives the length of ``text``; a
    character that does not occur gives None.
    """
    ch = _char(c)
    if ch == _NUL:
        index = text.find(ch)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c`` in ``text``.

    Searching for the NUL character gives the length of ``text``; a
    character that does not occur gives None.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters of two strings.

    Returns the difference of the first pair of codes that differ, the
    end of a string counting as code 0, or 0 when the prefixes match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for index in range(length):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0 or index == length - 1:
            return a - b
    return 0


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return "".join(text)


def striteri(
    chars: MutableSequence[str] | None, func: Callable[[int, str], str]
) -> None:
    """Replace each character of ``chars`` in place with ``func(index, char)``.

    ``chars`` is a mutable sequence of characters such as a list; None is
    accepted and left alone.
    """
    if chars is None:
        return
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are None.
    """
    if first is None and second is None:
        return None
    if first is None:
        return strdup(second)  # type: ignore[arg-type]
    if second is None:
        return strdup(first)
    return first + second


def strjoin_tab(parts: Iterable[str], sep: str) -> str | None:
    """Join ``parts``, putting ``sep`` before every part, the first included.

    Returns None when there are no parts.
    """
    result: str | None = None
    for part in parts:
        result = strjoin(strjoin(result, sep), part)
    return result


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Room is kept for a terminator, so the result holds at most
    ``size - 1`` characters. Returns the resulting string and the length
    the full concatenation would have had; when ``size`` does not exceed
    the length of ``dest``, ``dest`` is unchanged and the length reported
    is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dest):
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copy, truncated to ``size - 1`` characters (empty when
    ``size`` is 0), and the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strmapi(text: str | None, func: Callable[[int, str], str]) -> str | None:
    """New string made of ``func(index, char)`` for every character.

    Returns None when ``text`` is None.
    """
    if text is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0; a needle that does not fit
    entirely within the searched prefix gives None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text) or length == 0:
        return ""
    return text[start : start + length]