"""Byte-buffer helpers: fill, copy, search, compare and allocate."""

from __future__ import annotations

from typing import Union

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

WritableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Set the first *n* bytes of *buf* to the low byte of *c*; return *buf*."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def memcpy(dest: WritableBuffer | None, src: ReadableBuffer | None, n: int) -> WritableBuffer | None:
    """Copy *n* bytes from *src* into the start of *dest*; return *dest*.

    When both buffers are None, None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_count(n, dest, src)
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy *n* bytes from *src* into *dest*, correct even when the two overlap."""
    _check_count(n, dest, src)
    if n:
        # Taking a snapshot of the source first makes overlapping views safe.
        dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memchr(buf: ReadableBuffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of *c* among the first *n*, or None."""
    _check_count(n, buf)
    index = bytes(memoryview(buf)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first differing bytes within *n*, or 0 if they match."""
    _check_count(n, a, b)
    left = bytes(memoryview(a)[:n])
    right = bytes(memoryview(b)[:n])
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of *count* elements of *size* bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)