"""Operations on NUL-terminated byte strings held in byte buffers.

A string's content runs up to its first zero byte, or to the end of the
buffer when there is none. Writes that would not fit in the destination
buffer raise ``ValueError``.
"""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _content(buf: ReadableBuffer) -> bytes:
    data = bytes(buf)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _write(dest: Buffer, data: bytes, offset: int = 0) -> None:
    """Write ``data`` followed by a terminating zero at ``offset``."""
    end = offset + len(data) + 1
    if end > len(dest):
        raise ValueError(f"destination of {len(dest)} bytes cannot hold {end} bytes")
    dest[offset:end] = data + b"\0"


def strlen(buf: ReadableBuffer) -> int:
    """Return the number of bytes before the terminating zero."""
    return len(_content(buf))


def strdup(buf: ReadableBuffer) -> bytearray:
    """Return a new buffer holding a copy of the string and its terminator."""
    return bytearray(_content(buf) + b"\0")


def strcpy(dest: Buffer, src: ReadableBuffer) -> Buffer:
    """Copy the string in ``src``, terminator included, into ``dest``."""
    _write(dest, _content(src))
    return dest


def strlcpy(dest: Buffer, src: ReadableBuffer, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dest`` and terminate it.

    Returns the length of ``src``; a result of ``size`` or more means the copy
    was truncated. Nothing is written when ``size`` is 0.
    """
    data = _content(src)
    if size <= 0:
        return len(data)
    if size > len(dest):
        raise ValueError(f"size {size} exceeds destination length {len(dest)}")
    _write(dest, data[: size - 1])
    return len(data)


def strlcat(dest: Buffer, src: ReadableBuffer, size: int) -> int:
    """Append ``src`` to the string in ``dest`` so the result fits in ``size`` bytes.

    Returns the length the joined string would have had. When ``dest`` already
    holds ``size`` or more bytes nothing is written and ``len(src) + size`` is
    returned.
    """
    dest_len = strlen(dest)
    data = _content(src)
    if dest_len >= size:
        return len(data) + size
    if size > len(dest):
        raise ValueError(f"size {size} exceeds destination length {len(dest)}")
    _write(dest, data[: size - 1 - dest_len], dest_len)
    return dest_len + len(data)