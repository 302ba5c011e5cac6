"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

from typing import TextIO, Union

from sigtalk.numbers import format_int


def put_char(c: Union[str, int], stream: TextIO) -> None:
    """Write a single character, given as a string or a character code."""
    if isinstance(c, int) and not isinstance(c, bool):
        c = chr(c)
    if not isinstance(c, str):
        raise TypeError(f"expected a character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    stream.write(c)


def put_str(text: str, stream: TextIO) -> None:
    """Write ``text`` up to its first NUL character."""
    stream.write(text.split("\0", 1)[0])


def put_endl(text: str | None, stream: TextIO | None) -> None:
    """Write ``text`` followed by a newline; do nothing if either is missing."""
    if text is None or stream is None:
        return
    put_str(text, stream)
    stream.write("\n")


def put_number(value: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    stream.write(format_int(value))