"""A small printf with ``%c %s %d %i %u %x %X %p %%`` conversions and stream writers."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

BASE10 = "0123456789"
BASE16_MIN = "0123456789abcdef"
BASE16_MAJ = "0123456789ABCDEF"

INT_MIN = -(1 << 31)
_INT_MIN_TEXT = "-2147483648"


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _digits(n: int, base: str) -> str:
    """Spell a non-negative integer with the digits of ``base``."""
    size = len(base)
    if size < 2:
        raise ValueError(f"a base needs at least two digits, got {base!r}")
    out = []
    while True:
        n, rem = divmod(n, size)
        out.append(base[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def format_int(n: int, base: str = BASE10) -> str:
    """Render a 32-bit signed integer; the minimum int is always spelled in decimal."""
    n = _signed32(n)
    if n == INT_MIN:
        return _INT_MIN_TEXT
    if n < 0:
        return "-" + _digits(-n, base)
    return _digits(n, base)


def format_unsigned(n: int, base: str = BASE10) -> str:
    """Render an integer as a 32-bit unsigned value."""
    return _digits(n & 0xFFFFFFFF, base)


def format_pointer(n: int, base: str = BASE16_MIN) -> str:
    """Render an address as ``0x`` plus digits, or ``(nil)`` for zero."""
    n &= 0xFFFFFFFFFFFFFFFF
    if n == 0:
        return "(nil)"
    return "0x" + _digits(n, base)


def _next_arg(values: Iterator[object], spec: str) -> object:
    try:
        return next(values)
    except StopIteration:
        raise ValueError(f"no argument left for %{spec}") from None


def _as_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, values: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _as_char(_next_arg(values, spec))
    if spec in ("d", "i"):
        return format_int(int(_next_arg(values, spec)), BASE10)
    if spec == "p":
        return format_pointer(int(_next_arg(values, spec)), BASE16_MIN)
    if spec == "s":
        value = _next_arg(values, spec)
        return "(null)" if value is None else str(value)
    if spec == "u":
        return format_unsigned(int(_next_arg(values, spec)), BASE10)
    if spec == "x":
        return format_unsigned(int(_next_arg(values, spec)), BASE16_MIN)
    if spec == "X":
        return format_unsigned(int(_next_arg(values, spec)), BASE16_MAJ)
    # Unknown conversions print nothing and consume no argument.
    return ""


def format_string(fmt: str, *args: object) -> str:
    """Expand ``fmt`` with ``args``; a trailing lone ``%`` is an error."""
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the expanded format to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal to ``stream``."""
    (stream or sys.stdout).write(format_int(n, BASE10))


def put_line(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    (stream or sys.stdout).write(text + "\n")