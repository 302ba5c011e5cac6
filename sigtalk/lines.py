"""Reading a file descriptor one line at a time, with a buffer per descriptor."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 42
DEFAULT_MAX_FD = 16


class LineReader:
    """Reads lines from raw file descriptors, keeping leftover data per descriptor."""

    def __init__(
        self, buffer_size: int = DEFAULT_BUFFER_SIZE, max_fd: int = DEFAULT_MAX_FD
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, newline included, or None at end of input.

        A final line without a newline is returned as it is.
        """
        if fd < 0 or fd > self.max_fd:
            raise ValueError(f"file descriptor {fd} is out of range 0..{self.max_fd}")
        line: Optional[bytes] = None
        pending = self._pending.get(fd, b"")
        while True:
            if not pending:
                pending = os.read(fd, self.buffer_size)
                if not pending:
                    break
            cut = pending.find(b"\n")
            end = len(pending) if cut < 0 else cut + 1
            line = (line or b"") + pending[:end]
            pending = pending[end:]
            if cut >= 0:
                break
        self._pending[fd] = pending
        return line


def iter_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield each line of ``fd`` until end of input."""
    reader = LineReader(buffer_size, max(fd, DEFAULT_MAX_FD))
    while True:
        line = reader.read_line(fd)
        if line is None:
            return
        yield line