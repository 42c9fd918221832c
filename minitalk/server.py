"""A server that rebuilds messages from SIGUSR1/SIGUSR2 signals and prints them."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import Sequence, TextIO

from minitalk.protocol import BitAssembler


class Server:
    """Collect bits from user signals and print each completed message."""

    def __init__(self, stream: TextIO | None = None, pid: int | None = None) -> None:
        self.stream = stream
        self.pid = os.getpid() if pid is None else pid
        self._assembler = BitAssembler()

    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def greeting(self) -> str:
        """The banner printed when the server starts."""
        return (
            "Welcome to Fafa's server\n"
            f"This server's ID is {self.pid}\n"
            "Server is ready to listen\n"
        )

    def handle_signal(self, signum: int, frame: FrameType | None = None) -> str | None:
        """Take one bit from ``signum``; print and return a completed message."""
        if signum == signal.SIGUSR1:
            bit = 1
        elif signum == signal.SIGUSR2:
            bit = 0
        else:
            return None
        message = self._assembler.feed(bit)
        if message is not None:
            out = self._out()
            out.write(f"Message received : {message.split(chr(0))[0]}\n")
            out.flush()
        return message

    def install(self) -> None:
        """Route SIGUSR1 and SIGUSR2 to this server."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)

    def serve_forever(self) -> None:
        """Print the greeting, install handlers and wait for signals forever."""
        out = self._out()
        out.write(self.greeting())
        out.flush()
        self.install()
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Start a server on this process; runs until interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())