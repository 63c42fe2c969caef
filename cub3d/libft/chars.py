"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code.
The case converters return the same kind of value they were given.
"""

from __future__ import annotations

_SPACE_CODES = frozenset(map(ord, " \t\n\v\f\r"))


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alnum(c: str | int) -> bool:
    """Return True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_ascii(c: str | int) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_digit(c: str | int) -> bool:
    """Return True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_print(c: str | int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """Return True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _code(c) in _SPACE_CODES


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code