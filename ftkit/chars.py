"""Character classification and case conversion for ASCII codes."""

from __future__ import annotations

from typing import overload

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]


def _code(c: int | str) -> int:
    """Return the integer code of *c*, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return 65 <= code <= 90


def _is_lower(code: int) -> bool:
    return 97 <= code <= 122


def _is_digit(code: int) -> bool:
    return 48 <= code <= 57


def isalpha(c: int | str) -> bool:
    """True if *c* is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """True if *c* is an ASCII decimal digit."""
    return _is_digit(_code(c))


def isalnum(c: int | str) -> bool:
    """True if *c* is an ASCII letter or digit."""
    code = _code(c)
    return _is_digit(code) or _is_upper(code) or _is_lower(code)


def isascii(c: int | str) -> bool:
    """True if *c* lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True if *c* is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged."""
    code = _code(c)
    result = code - ord("a") + ord("A") if _is_lower(code) else code
    return chr(result) if isinstance(c, str) else result


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged."""
    code = _code(c)
    result = code - ord("A") + ord("a") if _is_upper(code) else code
    return chr(result) if isinstance(c, str) else result