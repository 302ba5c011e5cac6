"""The sending side: transmits a message bit by bit and waits for each acknowledgement."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, Optional, Sequence

from sigtalk.numbers import parse_int
from sigtalk.protocol import (
    ACK_SIGNAL,
    ONE_SIGNAL,
    RECEIVED_SIGNAL,
    ZERO_SIGNAL,
    Message,
    encode_byte,
    encode_message,
)

Notify = Callable[[int, int], None]

_RECEIVED_TEXT = "\033[0;32m✅ Message received!\033[0m\n"
_USAGE_TEXT = (
    "❌ \033[0;31mInvalid Arguments.\033[0m\nUsage:\n "
    "./client [server_pid] [message]\n"
)


def _wait_for_ack() -> None:
    """Block until the server acknowledges a bit, reporting a completed message."""
    signals = {RECEIVED_SIGNAL, ACK_SIGNAL}
    while True:
        info = signal.sigwaitinfo(signals)
        if info.si_signo == RECEIVED_SIGNAL:
            sys.stdout.write(_RECEIVED_TEXT)
            sys.stdout.flush()
        if info.si_signo == ACK_SIGNAL:
            return


class Client:
    """Sends bits to one server process, waiting for an acknowledgement after each."""

    def __init__(
        self,
        pid: int,
        notify: Optional[Notify] = None,
        wait_ack: Optional[Callable[[], None]] = None,
    ) -> None:
        self.pid = pid
        self.notify = notify if notify is not None else os.kill
        if wait_ack is None:
            # Replies must be queued, not delivered, so they can be waited for.
            signal.pthread_sigmask(signal.SIG_BLOCK, {RECEIVED_SIGNAL, ACK_SIGNAL})
            wait_ack = _wait_for_ack
        self.wait_ack = wait_ack

    def _send_bit(self, bit: int) -> None:
        self.notify(self.pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        self.wait_ack()

    def send_byte(self, value: int) -> None:
        """Send the eight bits of ``value``, most significant first."""
        for bit in encode_byte(value):
            self._send_bit(bit)

    def send(self, message: Message) -> None:
        """Send ``message`` followed by its terminating NUL byte."""
        for bit in encode_message(message):
            self._send_bit(bit)


def send_message(pid: int, message: Message) -> None:
    """Send ``message`` to the server with process id ``pid``."""
    Client(pid).send(message)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message given on the command line to the given server."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stdout.write(_USAGE_TEXT)
        return 0
    pid = parse_int(args[0])
    message = os.fsencode(args[1])
    try:
        send_message(pid, message)
    except OSError as error:
        sys.stderr.write(f"cannot signal process {pid}: {error.strerror}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())