"""String helpers with C-string semantics.

Text arguments are ordinary Python strings. Where the classic C behaviour
depends on the terminating NUL, a string is treated as ending at its first
``"\\0"``. Functions that would return a pointer into their input instead
return the remainder of the input from that position, or None when nothing
is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_WHITESPACE = frozenset("\t\n\v\f\r ")

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]


def _cstr(text: str) -> str:
    """Cut ``text`` at its first NUL, as a C string would end there."""
    return text.split("\0", 1)[0]


def _wrap_int(value: int) -> int:
    value &= (1 << 32) - 1
    if value > _INT_MAX:
        value -= 1 << 32
    return value


def _as_char(char: CharLike) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected an int or a one-character str, got {type(char).__name__}")
    return chr(char & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps to a 32-bit signed integer.
    """
    text = _cstr(text)
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    text = _cstr(text)
    delimiter = _as_char(sep)
    if delimiter == "\0":
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("strtrim needs both a text and a character set")
    text = _cstr(text)
    charset = _cstr(charset)
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Return the rest of ``haystack`` from the match, ``haystack`` itself for
    an empty needle, or None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    haystack = _cstr(haystack)
    needle = _cstr(needle)
    if not needle:
        return haystack
    if length == 0:
        return None
    position = haystack.find(needle, 0, length)
    return haystack[position:] if position >= 0 else None


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Return the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when the prefixes are equal.
    """
    if n <= 0:
        return 0
    a = _cstr(a)[:n]
    b = _cstr(b)[:n]
    for x, y in zip_longest(a, b, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two byte sequences.

    Return the difference of the first differing bytes, or 0 if they match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left = bytes(memoryview(a)[:n])
    right = bytes(memoryview(b)[:n])
    if len(left) < n or len(right) < n:
        raise ValueError(f"both sequences must hold at least {n} bytes")
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0


def strchr(text: Optional[str], char: CharLike) -> Optional[str]:
    """Return ``text`` from the first occurrence of ``char`` onwards.

    Searching for NUL gives the empty string (the terminator). None is
    returned when ``text`` is None or ``char`` does not occur.
    """
    if text is None:
        return None
    text = _cstr(text)
    target = _as_char(char)
    if target == "\0":
        return ""
    position = text.find(target)
    return text[position:] if position >= 0 else None


def strrchr(text: str, char: CharLike) -> Optional[str]:
    """Return ``text`` from the last occurrence of ``char`` onwards.

    Searching for NUL gives the empty string; None means no occurrence.
    """
    text = _cstr(text)
    target = _as_char(char)
    if target == "\0":
        return ""
    position = text.rfind(target)
    return text[position:] if position >= 0 else None


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent.

    Return None only when both are None.
    """
    if first is None and second is None:
        return None
    if first is None:
        return _cstr(second)
    if second is None:
        return _cstr(first)
    return _cstr(first) + _cstr(second)


def strmapi(text: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Build a new string by applying ``func(index, char)`` to each character."""
    if text is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(text)))