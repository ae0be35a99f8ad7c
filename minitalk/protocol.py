"""Bit-level wire protocol: one byte is sent as eight signals, high bit first.

A zero bit travels as the first user signal, a one bit as the second. A
message ends with a zero byte.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8


class Bit(IntEnum):
    """A single transmitted bit."""

    ZERO = 0
    ONE = 1


def encode_byte(value: int) -> list[Bit]:
    """Return the eight bits of ``value``, most significant first.

    Values from -128 to 255 are accepted; negative values are taken as
    their two's-complement byte.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not -128 <= value <= 255:
        raise ValueError(f"{value} does not fit in a byte")
    value &= 0xFF
    return [Bit((value >> shift) & 1) for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def message_bits(message: Union[str, bytes]) -> Iterator[Bit]:
    """Yield every bit of ``message`` followed by the terminating zero byte.

    Text is sent as UTF-8. The message ends at its first zero byte, if any.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from encode_byte(byte)
    yield from encode_byte(0)


class Decoder:
    """Reassemble bytes from bits, keeping separate senders apart.

    A bit from a sender other than the previous one discards any partly
    received byte.
    """

    def __init__(self) -> None:
        self._sender: Optional[int] = None
        self._value = 0
        self._count = 0

    @property
    def pending_bits(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, sender: int, bit: Union[Bit, int]) -> Optional[int]:
        """Add one bit from ``sender``; return the byte once eight have arrived."""
        bit = Bit(bit)
        if sender != self._sender:
            self._value = 0
            self._count = 0
        self._sender = sender
        self._value = ((self._value << 1) | bit) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value