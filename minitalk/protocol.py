"""Bit-level framing of text messages as carried over SIGUSR1/SIGUSR2.

Each byte of the UTF-8 encoded message is sent most significant bit first,
followed by a NUL byte that ends the message. A one bit travels as SIGUSR1
and a zero bit as SIGUSR2.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

BITS_PER_BYTE = 8
TERMINATOR = 0


def _as_bytes(message: str | bytes) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def encode_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` and its NUL terminator, MSB first."""
    for byte in _as_bytes(message) + bytes([TERMINATOR]):
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


@dataclass
class BitAssembler:
    """Rebuild messages from a stream of bits, one bit at a time."""

    _current: int = 0
    _count: int = 0
    _buffer: bytearray = field(default_factory=bytearray)

    def feed(self, bit: int) -> str | None:
        """Add one bit; return the finished message when a NUL byte completes."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._current = (self._current << 1) | bit
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._current
        self._current = 0
        self._count = 0
        if byte != TERMINATOR:
            self._buffer.append(byte)
            return None
        message = self._buffer.decode("utf-8", errors="replace")
        self._buffer.clear()
        return message

    def reset(self) -> None:
        """Drop any partial byte and partial message."""
        self._current = 0
        self._count = 0
        self._buffer.clear()


def decode_bits(bits: Iterable[int]) -> list[str]:
    """Decode every complete message in ``bits``; a trailing partial one is dropped."""
    assembler = BitAssembler()
    messages = []
    for bit in bits:
        message = assembler.feed(bit)
        if message is not None:
            messages.append(message)
    return messages