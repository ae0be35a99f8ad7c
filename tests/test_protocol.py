import pytest

from minitalk.protocol import BITS_PER_BYTE, Bit, Decoder, encode_byte, message_bits


def test_zero_byte_is_all_zero_bits():
    assert encode_byte(0) == [Bit.ZERO] * BITS_PER_BYTE


def test_full_byte_is_all_one_bits():
    assert encode_byte(255) == [Bit.ONE] * BITS_PER_BYTE


def test_high_bit_comes_first():
    assert encode_byte(128)[0] is Bit.ONE
    assert encode_byte(1)[-1] is Bit.ONE
    assert encode_byte(1)[:-1] == [Bit.ZERO] * (BITS_PER_BYTE - 1)


def test_negative_values_use_twos_complement():
    assert encode_byte(-1) == encode_byte(255)
    assert encode_byte(-128) == encode_byte(128)


@pytest.mark.parametrize("value", [256, -129, 1000])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        encode_byte(value)


def test_non_int_rejected():
    with pytest.raises(TypeError):
        encode_byte("a")


def test_every_byte_round_trips():
    decoder = Decoder()
    for value in range(256):
        results = [decoder.feed(1, bit) for bit in encode_byte(value)]
        assert results[:-1] == [None] * (BITS_PER_BYTE - 1)
        assert results[-1] == value


def test_message_bits_append_terminator():
    bits = list(message_bits("ab"))
    assert len(bits) == 3 * BITS_PER_BYTE
    assert bits[-BITS_PER_BYTE:] == encode_byte(0)
    assert bits[:BITS_PER_BYTE] == encode_byte(ord("a"))


def test_message_stops_at_nul():
    assert list(message_bits("ab\0cd")) == list(message_bits("ab"))


def test_message_bits_round_trip_utf8():
    text = "héllo"
    decoder = Decoder()
    received = [b for b in (decoder.feed(7, bit) for bit in message_bits(text)) if b is not None]
    assert bytes(received) == text.encode("utf-8") + b"\0"


def test_sender_change_discards_partial_byte():
    decoder = Decoder()
    for bit in encode_byte(255)[:5]:
        decoder.feed(1, bit)
    assert decoder.pending_bits == 5
    results = [decoder.feed(2, bit) for bit in encode_byte(ord("z"))]
    assert results[-1] == ord("z")
    assert decoder.pending_bits == 0


def test_invalid_bit_rejected():
    with pytest.raises(ValueError):
        Decoder().feed(1, 2)