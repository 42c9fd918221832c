"""String helpers: splitting, searching, comparing, bounded copies and trimming."""

from __future__ import annotations

from typing import Callable

_NUL = "\0"


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _code_at(text: str, index: int) -> int:
    """Character code at ``index``, or 0 past the end like a terminator."""
    return ord(text[index]) if index < len(text) else 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _char(sep)
    return [word for word in text.split(sep) if word]


def find_char(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``; a NUL matches the end of the text."""
    if _char(c) == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``; a NUL matches the end of the text."""
    if _char(c) == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def compare(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    for index in range(max(len(s1), len(s2)) + 1):
        a, b = _code_at(s1, index), _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; 0 when ``n`` is 0."""
    _non_negative("n", n)
    if n == 0:
        return 0
    index = 0
    while (
        index < n - 1
        and _code_at(s1, index) != 0
        and _code_at(s2, index) != 0
        and _code_at(s1, index) == _code_at(s2, index)
    ):
        index += 1
    return _code_at(s1, index) - _code_at(s2, index)


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and the full length of ``src``.
    """
    _non_negative("size", size)
    return src[: max(size - 1, 0)], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had;
    when ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length reported is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def trim(text: str, charset: str | None) -> str:
    """Strip characters of ``charset`` from both ends; ``None`` trims nothing."""
    if charset is None or not charset:
        return text
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text) or length == 0:
        return ""
    return text[start : start + length]