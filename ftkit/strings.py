"""String helpers: length, bounded copy and concatenation, search, compare,
slicing, joining, trimming, splitting and per-character mapping."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]

_NUL = "\0"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _char(c: int | str) -> str:
    """Normalise *c*, an int code or a one-character string, to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    if c < 0:
        raise ValueError(f"character code must not be negative, got {c}")
    return chr(c)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Number of characters in *s*."""
    return len(_require_str(s, "s"))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters) and the full
    length of *src*, so a result length >= *size* signals truncation.
    """
    _require_str(src, "src")
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation would
    have had. When *dest* already fills the buffer, it is left unchanged and
    ``size + len(src)`` is returned.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    _check_size(size)
    d_len = min(len(dest), size)
    if size <= d_len:
        return dest, size + len(src)
    room = size - 1 - d_len
    return dest[:d_len] + src[:room], d_len + len(src)


def strchr(s: str, c: int | str) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for the terminator ``"\\0"`` yields ``len(s)``.
    """
    _require_str(s, "s")
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for the terminator ``"\\0"`` yields ``len(s)``.
    """
    _require_str(s, "s")
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first *needle* lying wholly within the first *n* characters
    of *haystack*, or None. An empty needle matches at index 0."""
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    _check_size(n)
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the difference of the first
    differing character codes, or 0. Comparison stops at a terminator."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _check_size(n)
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strdup(s: str) -> str:
    """A copy of *s*."""
    return str(_require_str(s, "s"))


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from index *start*; empty when
    *start* lies at or past the end."""
    _require_str(s, "s")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    _check_size(length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of *s1* and *s2*."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """*s* with every leading and trailing character found in *charset* removed."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """The non-empty words of *s* separated by runs of the character *sep*."""
    _require_str(s, "s")
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from ``f(index, char)`` for every character of *s*."""
    _require_str(s, "s")
    if f is None:
        raise TypeError("strmapi needs a mapping function")
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str],
    f: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``f(index, char)`` for every item of *chars*, in place.

    A non-None return value replaces the item at that index.
    """
    if f is None:
        raise TypeError("striteri needs a function")
    for i, ch in enumerate(list(chars)):
        replacement = f(i, ch)
        if replacement is not None:
            chars[i] = replacement