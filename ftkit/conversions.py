"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "INT_MAX", "INT_MIN"]

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = " \f\n\r\t\v"
_DIGITS = "0123456789"


def atoi(s: str) -> int:
    """Parse a leading decimal integer from *s*.

    Leading whitespace and one optional sign are skipped; parsing stops at the
    first non-digit. Values past the 32-bit range saturate at INT_MAX or INT_MIN.
    """
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        digit = ord(ch) - ord("0")
        if result > (INT_MAX - digit) // 10:
            return INT_MAX if sign == 1 else INT_MIN
        result = result * 10 + digit
    return sign * result


def itoa(n: int) -> str:
    """Decimal text of the 32-bit signed integer *n*."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)