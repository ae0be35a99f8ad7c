import string

import pytest

from minitalk.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    letters = {ord(ch) for ch in string.ascii_letters}
    for code in ALL_CODES:
        assert is_alpha(code) == (code in letters)


def test_is_digit_matches_ascii_digits():
    digits = {ord(ch) for ch in string.digits}
    for code in ALL_CODES:
        assert is_digit(code) == (code in digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in ALL_CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    printable = {ord(ch) for ch in string.printable if ch not in "\t\n\r\x0b\x0c"}
    for code in ALL_CODES:
        assert is_print(code) == (code in printable)


def test_accepts_strings():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_print("\n") is False


def test_to_upper_on_lowercase():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_upper(ord(lower)) == ord(upper)


def test_to_lower_on_uppercase():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(upper) == lower
        assert to_lower(ord(upper)) == ord(lower)


def test_case_conversion_leaves_others_alone():
    for code in ALL_CODES:
        if not is_alpha(code):
            assert to_upper(code) == code
            assert to_lower(code) == code


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)