"""Lenient number parsing and integer formatting."""

from __future__ import annotations

from sigtalk.chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap32(value: int) -> int:
    """Reduce an integer to the 32-bit signed range, wrapping around."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _skip_sign(text: str, pos: int) -> tuple[int, int]:
    """Consume an optional sign at ``pos``; return (sign, new position)."""
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _skip_spaces(text: str) -> int:
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace and any trailing text.

    At most one sign is accepted. Text with no digits parses as 0. The result
    wraps around to the 32-bit signed range.
    """
    sign, pos = _skip_sign(text, _skip_spaces(text))
    result = 0
    while pos < len(text) and is_digit(text[pos]):
        result = result * 10 + int(text[pos])
        pos += 1
    return _wrap32(result * sign)


def parse_long(text: str) -> int:
    """Parse a leading decimal integer, stopping once the value leaves the 32-bit range.

    The digit that pushes the value out of range is still included, so an
    out-of-range result can be detected by the caller.
    """
    sign, pos = _skip_sign(text, _skip_spaces(text))
    result = 0
    while pos < len(text) and is_digit(text[pos]):
        result = result * 10 + int(text[pos])
        if result < INT_MIN or result > INT_MAX:
            break
        pos += 1
    return sign * result


def parse_float(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    No exponent is recognised; parsing stops at the first character that does
    not fit. Text with no digits parses as 0.0.
    """
    sign, pos = _skip_sign(text, _skip_spaces(text))
    result = 0.0
    while pos < len(text) and is_digit(text[pos]):
        result = result * 10 + int(text[pos])
        pos += 1
    if pos < len(text) and text[pos] == ".":
        pos += 1
        decimal = 1.0
        while pos < len(text) and is_digit(text[pos]):
            decimal *= 10
            result = result + int(text[pos]) / decimal
            pos += 1
    return result * sign


def format_int(value: int) -> str:
    """Return the decimal text of a 32-bit signed integer.

    Raises OverflowError for values outside that range.
    """
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    return str(value)