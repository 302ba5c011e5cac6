"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import re
from typing import Any, Iterator, TextIO

_PIECE = re.compile(r"%(?P<spaces> *)(?P<conv>.?)|[^%]+", re.DOTALL)

_INT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _take(args: Iterator[Any], conv: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conv}") from None


def _as_int(value: Any, conv: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{conv} requires an integer, got {type(value).__name__}"
        ) from None


def _signed32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c requires a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(conv: str, args: Iterator[Any]) -> str:
    """Render one conversion; unknown conversions produce nothing and use no argument."""
    if conv == "c":
        return _char(_take(args, conv))
    if conv == "s":
        return _string(_take(args, conv))
    if conv == "p":
        return _pointer(_take(args, conv))
    if conv in ("d", "i"):
        return str(_signed32(_as_int(_take(args, conv), conv)))
    if conv == "u":
        return str(_as_int(_take(args, conv), conv) & _INT_MASK)
    if conv in ("x", "X"):
        digits = format(_as_int(_take(args, conv), conv) & _INT_MASK, "x")
        return digits.upper() if conv == "X" else digits
    if conv == "%":
        return "%"
    return ""


def _render(fmt: str, args: tuple[Any, ...]) -> tuple[str, int]:
    """Return the formatted text and the number of characters counted as written.

    A space emitted for a ``% `` flag is written but not counted.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, not {type(fmt).__name__}")
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    pieces: list[str] = []
    count = 0
    for match in _PIECE.finditer(fmt):
        if not match.group(0).startswith("%"):
            pieces.append(match.group(0))
            count += len(match.group(0))
            continue
        conv = match.group("conv")
        if match.group("spaces") and conv != "%":
            pieces.append(" ")
        text = _convert(conv, remaining)
        pieces.append(text)
        count += len(text)
    return "".join(pieces), count


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the rendered arguments."""
    return _render(fmt, args)[0]


def write_formatted(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream`` and return the count of characters."""
    text, count = _render(fmt, args)
    stream.write(text)
    return count