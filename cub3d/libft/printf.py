"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)
_UINT_MASK = 0xFFFFFFFF


def _as_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value)
    return "(nil)" if address == 0 else f"0x{address:x}"


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: str(_as_int32(v)),
    "i": lambda v: str(_as_int32(v)),
    "u": lambda v: str(int(v) & _UINT_MASK),
    "x": lambda v: f"{int(v) & _UINT_MASK:x}",
    "X": lambda v: f"{int(v) & _UINT_MASK:X}",
}


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its directives replaced by the formatted ``args``.

    An unknown directive produces nothing and consumes no argument; a lone
    ``%`` at the end of ``fmt`` is kept as is. Too few arguments raise
    ``TypeError``; extra ones are ignored.
    """
    values: Iterator[Any] = iter(args)

    def replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            return ""
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        return convert(value)

    return _DIRECTIVE.sub(replace, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)