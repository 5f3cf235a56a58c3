"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO

from ftkit.conversions import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _as_char(c: int | str) -> str:
    """Normalise *c* to one character; an int keeps only its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def putchar_fd(c: int | str, stream: TextIO) -> None:
    """Write the character *c* to *stream*."""
    stream.write(_as_char(c))


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write *s* to *stream*; None writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write *s* followed by a newline to *stream*; None writes nothing."""
    if s is None:
        return
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the 32-bit signed integer *n* in decimal to *stream*."""
    stream.write(itoa(n))