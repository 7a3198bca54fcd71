"""Byte-buffer helpers working on bytearray and memoryview objects."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(buffer: ReadableBuffer | MutableSequence[int], length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length > len(buffer):
        raise ValueError(f"length {length} exceeds buffer size {len(buffer)}")


def bzero(buffer: Buffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    _check_length(buffer, length)
    buffer[:length] = bytes(length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes with ``value`` truncated to a byte."""
    _check_length(buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def memcpy(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(dst, length)
    _check_length(src, length)
    dst[:length] = src[:length]
    return dst


def memmove(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to ``dst``; the regions may overlap."""
    _check_length(dst, length)
    _check_length(src, length)
    dst[:length] = bytes(src[:length])
    return dst


def memchr(data: ReadableBuffer, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``length``."""
    _check_length(data, length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    _check_length(first, length)
    _check_length(second, length)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0