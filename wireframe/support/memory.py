"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _readable(buffer: BytesLike, count: int) -> memoryview:
    """Return a byte view of ``buffer`` checked to hold at least ``count`` bytes."""
    if count < 0:
        raise ValueError("count must not be negative")
    view = memoryview(buffer).cast("B")
    if count > len(view):
        raise ValueError(f"count {count} exceeds buffer length {len(view)}")
    return view


def _writable(buffer: BytesLike, count: int) -> memoryview:
    """Return a writable byte view of ``buffer`` checked to hold ``count`` bytes."""
    view = _readable(buffer, count)
    if view.readonly:
        raise TypeError("buffer is read-only")
    return view


def memset(buffer: BytesLike, value: int, count: int) -> BytesLike:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (as a byte)."""
    view = _writable(buffer, count)
    view[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: BytesLike, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    if count == 0:
        return
    view = _writable(buffer, count)
    view[:count] = bytes(count)


def memcpy(dest: BytesLike, src: BytesLike, count: int) -> BytesLike:
    """Copy ``count`` bytes from ``src`` into ``dest`` and return ``dest``."""
    target = _writable(dest, count)
    source = _readable(src, count)
    target[:count] = source[:count]
    return dest


def memmove(dest: BytesLike, src: BytesLike, count: int) -> BytesLike:
    """Copy ``count`` bytes from ``src`` to ``dest``; the regions may overlap."""
    target = _writable(dest, count)
    source = _readable(src, count)
    target[:count] = bytes(source[:count])
    return dest


def memchr(buffer: BytesLike, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes."""
    if count == 0:
        return None
    view = _readable(buffer, count)
    index = bytes(view[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first unequal pair."""
    if count == 0:
        return 0
    left = _readable(first, count)
    right = _readable(second, count)
    for a, b in zip(left[:count], right[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {total} bytes")
    return bytearray(total)