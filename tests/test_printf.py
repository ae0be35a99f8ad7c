import io

import pytest

from minitalk.printf import FormatError, format_message, printf


def test_plain_text_passes_through():
    text = "No active process with this PID\n"
    assert format_message(text) == text


def test_string_conversion():
    assert format_message("Server ID: %s", "1234") == "Server ID: 1234"


def test_null_string():
    assert format_message("%s", None) == "(null)"


def test_nil_pointer():
    assert format_message("%p", 0) == "(nil)"
    assert format_message("%p", None) == "(nil)"


def test_pointer_has_hex_prefix_and_round_trips():
    result = format_message("%p", 0xDEADBEEF)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 0xDEADBEEF


def test_char_conversion():
    assert format_message("%c%c", "h", ord("i")) == "hi"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 123456])
def test_decimal_round_trip(n):
    assert int(format_message("%d", n)) == n
    assert format_message("%i", n) == format_message("%d", n)


def test_decimal_wraps_to_int_range():
    assert int(format_message("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_is_non_negative():
    result = int(format_message("%u", -1))
    assert result >= 0
    assert int(format_message("%d", result)) == -1


@pytest.mark.parametrize("n", [0, 15, 255, 4096, 0xABCDEF])
def test_hex_round_trip(n):
    lower = format_message("%x", n)
    upper = format_message("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_percent_literal():
    assert format_message("100%%") == "100%"


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert format_message("a%qb%s", "z") == "abz"


def test_trailing_percent_is_error():
    with pytest.raises(FormatError):
        format_message("oops %")


def test_missing_argument_is_error():
    with pytest.raises(FormatError):
        format_message("%d %d", 1)


def test_missing_format_is_error():
    with pytest.raises(FormatError):
        format_message(None)


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s-%d", "ab", 42, file=buf)
    assert buf.getvalue() == format_message("%s-%d", "ab", 42)
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("Provide The PID with a message please!\n")
    out = capsys.readouterr().out
    assert out == "Provide The PID with a message please!\n"
    assert count == len(out)