"""Character classification and number/text conversions with C integer semantics."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\r\f"
_LONG_BITS = 64
_INT_BITS = 32


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _code(c: int | str) -> int:
    """Return the character code for an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _split_number(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign; return (sign, remainder)."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    return sign, stripped


def _leading_digits(text: str):
    for ch in text:
        if not ("0" <= ch <= "9"):
            return
        yield ord(ch) - ord("0")


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit int.

    When the accumulated 64-bit value overflows, -1 is returned for a
    non-negative number and 0 for a negative one. Otherwise the result is
    truncated to 32 bits.
    """
    sign, rest = _split_number(text)
    result = 0
    for digit in _leading_digits(rest):
        nxt = _wrap(result * 10 + digit, _LONG_BITS)
        if result > nxt:
            return -1 if sign > 0 else 0
        result = nxt
    return _wrap(result * sign, _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit long, wrapping on overflow."""
    sign, rest = _split_number(text)
    result = 0
    for digit in _leading_digits(rest):
        result = _wrap(result * 10 + digit, _LONG_BITS)
    return _wrap(result * sign, _LONG_BITS)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126