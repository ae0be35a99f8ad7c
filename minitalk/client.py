"""Client that sends a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Optional, Sequence, TextIO, Union

from minitalk.printf import printf
from minitalk.protocol import Bit, encode_byte
from minitalk.strutil import atoi

RECEIPT_NOTICE = "\n>>Message recieved!<<\n"
_PAUSE_BEFORE_END = 50e-6


class ProcessNotFoundError(ProcessLookupError):
    """Raised when no process with the given id can be signalled."""


class _SignalWaiter:
    """Block until the server acknowledges a bit with the first user signal.

    The signals are blocked when the waiter is made, so an acknowledgement
    that arrives before the wait starts is not lost.
    """

    def __init__(self, announce_receipt: bool = False, out: Optional[TextIO] = None) -> None:
        self._signals = {signal.SIGUSR1}
        if announce_receipt:
            self._signals.add(signal.SIGUSR2)
        self._out = out
        signal.pthread_sigmask(signal.SIG_BLOCK, self._signals)

    def __call__(self) -> None:
        while signal.sigwait(self._signals) != signal.SIGUSR1:
            out = sys.stdout if self._out is None else self._out
            out.write(RECEIPT_NOTICE)
            out.flush()


class Client:
    """Send bytes to process ``pid``, waiting for an acknowledgement after each bit."""

    def __init__(
        self,
        pid: int,
        send_signal: Optional[Callable[[int, int], None]] = None,
        wait_ack: Optional[Callable[[], None]] = None,
    ) -> None:
        self.pid = pid
        self._send_signal = os.kill if send_signal is None else send_signal
        self._wait_ack = _SignalWaiter() if wait_ack is None else wait_ack

    def send_byte(self, value: int) -> None:
        """Send the eight bits of ``value``, high bit first."""
        for bit in encode_byte(value):
            signum = signal.SIGUSR2 if bit is Bit.ONE else signal.SIGUSR1
            try:
                self._send_signal(self.pid, signum)
            except OSError as exc:
                raise ProcessNotFoundError(f"no active process with id {self.pid}") from exc
            self._wait_ack()

    def send_message(self, message: Union[str, bytes]) -> None:
        """Send ``message`` followed by a terminating zero byte.

        Text is sent as UTF-8; the message ends at its first zero byte.
        """
        data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
        for byte in data.split(b"\0", 1)[0]:
            self.send_byte(byte)
        time.sleep(_PAUSE_BEFORE_END)
        self.send_byte(0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    announce = "--receipt" in args
    args = [arg for arg in args if arg != "--receipt"]
    if len(args) != 2:
        printf("Provide The PID with a message please!\n")
        return 1
    pid, message = atoi(args[0]), args[1]
    client = Client(pid, wait_ack=_SignalWaiter(announce_receipt=announce))
    try:
        client.send_message(message)
    except ProcessNotFoundError:
        printf("No active process with this PID\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())