"""NUL-terminated string helpers: length, bounded copy and search."""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    """Convert a character or code to a single character, as a C char cast does."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise ValueError("expected a single character or an integer code")


def _at(text: str, index: int) -> str:
    """Character at ``index``, or NUL past the end."""
    return text[index] if index < len(text) else "\0"


def length(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(text))


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` characters including the NUL.

    Returns the text that fits and the full length of ``src``. With a size
    of zero nothing is copied.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src = _terminated(src)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had:
    the length of ``src`` plus the smaller of ``size`` and the length of ``dest``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dest = _terminated(dest)
    src = _terminated(src)
    total = len(src) + min(size, len(dest))
    room = max(0, size - 1 - len(dest))
    return dest + src[:room], total


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at the text's length.
    """
    text = _terminated(text)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def find_last_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at the text's length.
    """
    text = _terminated(text)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def compare(first: Optional[str], second: Optional[str], count: int) -> int:
    """Compare two strings, returning the code difference where they stop matching.

    After ``count`` matching characters the comparison still looks at the
    character that follows, so strings equal only in their first ``count``
    characters may compare unequal. A missing string or a count of zero or
    less compares as 0.
    """
    if first is None or second is None or count <= 0:
        return 0
    first = _terminated(first)
    second = _terminated(second)
    pos = 0
    while count > 0 and _at(first, pos) == _at(second, pos) and _at(first, pos) != "\0":
        pos += 1
        count -= 1
    return ord(_at(first, pos)) - ord(_at(second, pos))


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of ``needle`` in ``haystack`` within its first ``limit`` characters, or None.

    An empty needle is found at index 0.
    """
    haystack = _terminated(haystack)
    needle = _terminated(needle)
    if not needle:
        return 0
    for start in range(len(haystack)):
        matched = 0
        while (
            _at(haystack, start + matched) == _at(needle, matched)
            and start + matched < limit
        ):
            if _at(haystack, start + matched) == "\0":
                return start
            matched += 1
        if matched == len(needle):
            return start
    return None