"""ASCII character classification and case conversion.

Each function accepts either an integer character code or a one-character
string. The classifiers return a bool. The case converters return a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Return True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _like(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _like(c, code)