"""The receiving side: rebuilds messages from signals and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Optional, Sequence

from sigtalk.formatting import format_string
from sigtalk.protocol import ACK_SIGNAL, ONE_SIGNAL, RECEIVED_SIGNAL, ZERO_SIGNAL, BitDecoder

Notify = Callable[[int, int], None]


class Server:
    """Decodes bits from signals, writes each byte and acknowledges every bit."""

    def __init__(
        self, output: Optional[BinaryIO] = None, notify: Optional[Notify] = None
    ) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.notify = notify if notify is not None else os.kill
        self.decoder = BitDecoder()

    def handle_bit(self, signum: int, sender: int) -> None:
        """Take one bit from ``sender``; a NUL byte ends the message with a newline."""
        completed = self.decoder.feed(1 if signum == ONE_SIGNAL else 0)
        if completed is not None:
            if completed == 0:
                self._write(b"\n")
                self.notify(sender, RECEIVED_SIGNAL)
            else:
                self._write(bytes([completed]))
        self.notify(sender, ACK_SIGNAL)

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        self.output.flush()

    def serve_forever(self) -> None:
        """Announce the process id, then handle incoming signals until interrupted."""
        signals = {ZERO_SIGNAL, ONE_SIGNAL}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        self._write(format_string("Server PID: %d\n", os.getpid()).encode())
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle_bit(info.si_signo, info.si_pid)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until it is interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())