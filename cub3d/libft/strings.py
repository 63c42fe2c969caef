"""Splitting, trimming, searching and comparing text.

Positions are returned as indices and "not found" as ``None``. Searching
for ``"\\0"`` finds the end of the string, which is where the terminator of
a C string sits.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_TERMINATOR = "\0"


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "separator")
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` that is in ``charset``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of the first ``little`` lying wholly in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is no match.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None."""
    _single_char(c, "character")
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == _TERMINATOR else None


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None."""
    _single_char(c, "character")
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def _compare(a: str, b: str) -> int:
    for x, y in zip_longest(a, b, fillvalue=_TERMINATOR):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first pair of character codes that differ,
    the end of a string counting as code 0, or 0 when they match.
    """
    _non_negative(n, "count")
    return _compare(a[:n], b[:n])


def strcmp(a: str, b: str) -> int:
    """Compare ``a`` and ``b`` as :func:`strncmp` does, over their whole length."""
    return _compare(a, b)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each character of ``s`` in order.

    ``s`` is a mutable sequence of characters. When ``func`` returns a string
    it replaces the character in place; ``None`` leaves it unchanged.
    Returns ``s``.
    """
    for index, char in enumerate(s):
        replacement = func(index, char)
        if replacement is not None:
            s[index] = replacement
    return s