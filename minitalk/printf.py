"""A small printf supporting the conversions %c %s %p %d %i %u %x %X %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_INT_BITS = 32
_PTR_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def _as_int(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return f"0x{int(value) & _PTR_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_as_int(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    text = format(int(value) & _UINT_MASK, "x")
    return text.upper() if spec == "X" else text


def format_message(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions produce nothing and consume no argument. A lone
    ``%`` at the end of the format raises FormatError.
    """
    if fmt is None:
        raise FormatError("format string is missing")
    pieces: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        pieces.append(_convert(spec, arg_iter))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default) and return its length."""
    text = format_message(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)