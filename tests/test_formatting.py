import io

import pytest

from sigtalk.formatting import format_string, write_formatted


def test_plain_text_passes_through():
    stream = io.StringIO()
    count = write_formatted(stream, "Server PID: ok\n")
    assert stream.getvalue() == "Server PID: ok\n"
    assert count == len("Server PID: ok\n")


def test_decimal_and_integer_conversions():
    assert format_string("%d", 42) == "42"
    assert format_string("%i", -42) == "-42"
    assert format_string("Server PID: %d\n", 1234) == "Server PID: 1234\n"


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", -2147483648) == "-2147483648"
    assert format_string("%d", 2**31) == "-2147483648"


def test_unsigned_wraps_negative_values():
    assert int(format_string("%u", -1)) == 2**32 - 1
    assert format_string("%u", 7) == "7"


@pytest.mark.parametrize("value", [0, 15, 16, 3000, 2**32 - 1])
def test_hex_round_trip(value):
    lower = format_string("%x", value)
    upper = format_string("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_strings_and_null():
    assert format_string("%s", "asas") == "asas"
    assert format_string(" NULL %s NULL ", None) == " NULL (null) NULL "
    assert format_string("%s!", "ab\0cd") == "ab!"


def test_pointer_conversion():
    assert format_string("%p", None) == "(nil)"
    rendered = format_string("%p", 3000)
    assert rendered.startswith("0x")
    assert int(rendered[2:], 16) == 3000


def test_char_conversion_accepts_codes_and_strings():
    assert format_string("%c", "a") == "a"
    assert format_string("%c%c", 65, "B") == "AB"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_space_flag_emits_uncounted_space():
    stream = io.StringIO()
    count = write_formatted(stream, "%   d", 1)
    assert stream.getvalue() == " 1"
    assert count == len(stream.getvalue()) - 1


def test_space_before_percent_emits_nothing_extra():
    assert format_string("% %") == "%"


def test_unknown_conversion_consumes_nothing():
    assert format_string("%z%d", 7) == "7"


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_count_matches_output_length():
    stream = io.StringIO()
    count = write_formatted(stream, "INT: %i STR: %s HEX: %X", 1, "asas", 3000)
    assert count == len(stream.getvalue())


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_non_integer_for_decimal_raises():
    with pytest.raises(TypeError):
        format_string("%d", 1.5)