"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from .numbers import itoa


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``.

    ``c`` is either a one-character string (written as UTF-8) or a byte
    value from 0 to 255.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int):
        if not 0 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        data = bytes((c,))
    else:
        raise TypeError(f"expected a str or int, got {type(c).__name__}")
    _write_all(fd, data)


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, (s + "\n").encode("utf-8"))


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))