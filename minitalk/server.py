"""Server that reassembles messages sent bit by bit as user signals."""

from __future__ import annotations

import argparse
import contextlib
import os
import signal
import sys
from typing import BinaryIO, Optional, Sequence

from minitalk.printf import printf
from minitalk.protocol import Bit, Decoder
from minitalk.strutil import itoa


class Server:
    """Decode incoming bits, write completed bytes and acknowledge each bit.

    A zero byte ends a message and is written as a newline. With
    ``confirm_end`` the sender is also told, by the second user signal,
    that its message arrived.
    """

    def __init__(self, output: Optional[BinaryIO] = None, confirm_end: bool = False) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self.confirm_end = confirm_end
        self._decoder = Decoder()

    @staticmethod
    def _notify(sender: int, signum: int) -> None:
        with contextlib.suppress(OSError):
            os.kill(sender, signum)

    def handle(self, sender: int, signum: int) -> Optional[int]:
        """Process one signal from ``sender``; return a completed byte, if any."""
        bit = Bit.ONE if signum == signal.SIGUSR2 else Bit.ZERO
        value = self._decoder.feed(sender, bit)
        if value is not None:
            if value:
                self.output.write(bytes([value]))
            else:
                self.output.write(b"\n")
                if self.confirm_end:
                    self._notify(sender, signal.SIGUSR2)
            self.output.flush()
        self._notify(sender, signal.SIGUSR1)
        return value

    def serve_forever(self) -> None:
        """Wait for user signals and handle each one, never returning."""
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle(info.si_pid, info.si_signo)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Receive messages sent as signals.")
    parser.add_argument(
        "--confirm-end",
        action="store_true",
        help="tell the sender when a whole message has arrived",
    )
    args = parser.parse_args(argv)
    server = Server(confirm_end=args.confirm_end)
    printf("Server ID: %s\n", itoa(os.getpid()))
    sys.stdout.flush()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())