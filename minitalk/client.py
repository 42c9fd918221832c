"""Send a text message to a listening server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Sequence

from minitalk.convert import atoi
from minitalk.printf import printf
from minitalk.protocol import encode_bits

DEFAULT_DELAY = 0.0003
USAGE = "please enter your server pid and only ONE g_message"


def send_message(
    pid: int,
    message: str | bytes,
    delay: float = DEFAULT_DELAY,
    kill: Callable[[int, int], None] | None = None,
) -> None:
    """Signal ``message`` to ``pid``: SIGUSR1 for a one bit, SIGUSR2 for a zero."""
    send = kill if kill is not None else os.kill
    for bit in encode_bits(message):
        send(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        if delay > 0:
            time.sleep(delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client with ``[pid, message]``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf(USAGE)
        return -1
    pid = atoi(args[0])
    if pid <= 0:
        return 1
    send_message(pid, args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())