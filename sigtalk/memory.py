"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ByteSource = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: ByteSource) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def fill(buffer: Buffer, value: int, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: Buffer, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, count)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def copy(dest: Buffer, src: ByteSource, count: int) -> Buffer:
    """Copy the first ``count`` bytes of ``src`` into the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def move(
    dest: Optional[Buffer], src: Optional[ByteSource], count: int
) -> Optional[Buffer]:
    """Copy ``count`` bytes from ``src`` to ``dest``; the two may overlap.

    When both are missing, nothing happens and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src must be buffers")
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def find_byte(data: ByteSource, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of ``value``
    among the first ``count`` bytes of ``data``, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(first: ByteSource, second: ByteSource, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0