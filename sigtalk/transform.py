"""Building new strings from old ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

from sigtalk.strings import length


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text[: length(text)]


def _require(text: Optional[str], name: str) -> str:
    if text is None:
        raise TypeError(f"{name} must be a string, got None")
    return _terminated(text)


def substring(text: str, start: int, count: int) -> str:
    """Return at most ``count`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    text = _require(text, "text")
    if start < 0 or count < 0:
        raise ValueError("start and count must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + count]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _require(first, "first") + _require(second, "second")


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    text = _require(text, "text")
    charset = _require(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    text = _require(text, "text")
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("sep must be a single character")
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character."""
    text = _require(text, "text")
    return "".join(func(index, char) for index, char in enumerate(text))


def for_each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each character of ``chars`` in place.

    Iteration stops at the first NUL element. When ``func`` returns a
    character, it replaces the one at that index; None leaves it unchanged.
    """
    for index, char in enumerate(list(chars)):
        if char == "\0":
            break
        result = func(index, char)
        if result is not None:
            chars[index] = result