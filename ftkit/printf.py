"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

__all__ = ["FormatError", "sprintf", "printf"]

_UINT32 = 1 << 32
_INT32_HALF = 1 << 31
_UINTPTR = 1 << 64


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument."""


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    address = 0 if value is None else _require_int(value, "p") % _UINTPTR
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _signed(value: Any) -> str:
    wrapped = (_require_int(value, "d") + _INT32_HALF) % _UINT32 - _INT32_HALF
    return str(wrapped)


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") % _UINT32)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") % _UINT32, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") % _UINT32, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _pieces(fmt: str, args: Iterable[Any]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone trailing '%' is written as it stands.
            yield "%"
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise FormatError(f"unknown conversion specifier %{spec}")
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        yield convert(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format *args* according to *fmt* and return the text."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format *args* according to *fmt*, write the text to *stream*
    (standard output by default) and return the number of characters written."""
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)