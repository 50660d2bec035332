"""Byte-buffer operations: filling, copying, searching and comparing.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Buffers that are only read may be any bytes-like object.
A length or offset that reaches past the end of a buffer raises
``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_span(size: int, offset: int, n: int, what: str) -> None:
    """Raise ``ValueError`` unless ``[offset, offset + n)`` lies inside ``size`` bytes."""
    if n < 0:
        raise ValueError(f"negative length: {n}")
    if offset < 0:
        raise ValueError(f"negative offset: {offset}")
    if offset + n > size:
        raise ValueError(
            f"{what}: range {offset}..{offset + n} exceeds buffer of {size} bytes"
        )


def memset(buffer: MutableBuffer, value: int, length: int) -> MutableBuffer:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` and return it.

    Only the low eight bits of ``value`` are used.
    """
    _check_span(len(buffer), 0, length, "memset")
    buffer[:length] = bytes((value & 0xFF,)) * length
    return buffer


def bzero(buffer: MutableBuffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def memcpy(dst: MutableBuffer, src: BytesLike, n: int) -> MutableBuffer:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    if dst is src or n == 0:
        return dst
    _check_span(len(dst), 0, n, "memcpy destination")
    _check_span(len(src), 0, n, "memcpy source")
    dst[:n] = bytes(memoryview(src)[:n])
    return dst


def memmove(
    buffer: MutableBuffer, dst_offset: int, src_offset: int, n: int
) -> MutableBuffer:
    """Copy ``n`` bytes within ``buffer`` from ``src_offset`` to ``dst_offset``.

    The two regions may overlap; the result is as if the source bytes were
    copied out first. Returns ``buffer``.
    """
    if dst_offset == src_offset or n == 0:
        return buffer
    _check_span(len(buffer), dst_offset, n, "memmove destination")
    _check_span(len(buffer), src_offset, n, "memmove source")
    chunk = bytes(memoryview(buffer)[src_offset : src_offset + n])
    buffer[dst_offset : dst_offset + n] = chunk
    return buffer


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` in the first ``n`` bytes.

    Only the low eight bits of ``c`` are used. Returns ``None`` when the
    byte does not occur.
    """
    _check_span(len(data), 0, n, "memchr")
    index = bytes(memoryview(data)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of differing bytes (as
    unsigned values), or 0 when the ranges are equal.
    """
    if n == 0:
        return 0
    left = bytes(memoryview(a)[:n])
    right = bytes(memoryview(b)[:n])
    for x, y in zip(left, right):
        if x != y:
            return x - y
    _check_span(len(a), 0, n, "memcmp first operand")
    _check_span(len(b), 0, n, "memcmp second operand")
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"negative allocation: {count} x {size}")
    return bytearray(count * size)