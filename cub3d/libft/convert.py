"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")
_OVERFLOW_DIGITS = 20
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0. Twenty or more significant digits
    count as an overflow and give -1 (or 0 when negative); other values wrap
    to a 32-bit signed integer.
    """
    body = text.lstrip(_LEADING_SPACE)
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]
    digits = _DIGITS.match(body).group()
    if len(digits.lstrip("0")) >= _OVERFLOW_DIGITS:
        return 0 if negative else -1
    value = int(digits) if digits else 0
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading '-' when negative."""
    return f"{int(n):d}"