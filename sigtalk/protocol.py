"""Bit-level encoding of messages carried by two user signals.

Each byte travels most significant bit first. A 0 bit is sent as SIGUSR1
and a 1 bit as SIGUSR2. A message ends with a NUL byte.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Union

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
RECEIVED_SIGNAL = signal.SIGUSR1
ACK_SIGNAL = signal.SIGUSR2

BITS_PER_BYTE = 8

Message = Union[bytes, bytearray, str]


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of ``value``, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range 0..255: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def _payload(message: Message) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return data.split(b"\0", 1)[0]


def encode_message(message: Message) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of a terminating NUL byte.

    Text is encoded as UTF-8. Anything after an embedded NUL is not sent.
    """
    for value in _payload(message) + b"\0":
        yield from encode_byte(value)


class BitDecoder:
    """Collects bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self.value = 0
        self.count = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the completed byte after every eighth bit, else None."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self.value = ((self.value << 1) | bit) & 0xFF
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        completed = self.value
        self.reset()
        return completed

    def reset(self) -> None:
        """Discard any partly collected byte."""
        self.value = 0
        self.count = 0