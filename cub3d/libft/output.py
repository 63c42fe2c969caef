"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream`` (standard output by default)."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    _target(stream).write(f"{int(n):d}")