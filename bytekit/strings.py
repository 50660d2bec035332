"""Operations on NUL-terminated text.

Text is read the way a terminated string would be: everything from the
first ``"\\0"`` onwards is ignored. Functions that return a position give
an index into the text, or ``None`` where nothing was found. The bounded
copy functions, ``strlcpy`` and ``strlcat``, work on byte buffers
(``bytearray``) holding NUL-terminated data.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
Char = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _cbytes(data: BytesLike) -> bytes:
    """Return ``data`` up to, not including, its first NUL byte."""
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string; integers keep their low eight bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"negative size: {size}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strlcpy(dst: bytearray, src: BytesLike, size: int) -> int:
    """Copy ``src`` into ``dst`` using at most ``size`` bytes, NUL included.

    The copy is truncated to ``size - 1`` bytes and always terminated when
    ``size`` is positive. Returns the length of ``src``, so a result of
    ``size`` or more means the copy was truncated.
    """
    _check_size(size)
    source = _cbytes(src)
    if size == 0:
        return len(source)
    count = min(len(source), size - 1)
    if count + 1 > len(dst):
        raise ValueError(
            f"strlcpy: {count + 1} bytes do not fit in a buffer of {len(dst)}"
        )
    dst[:count] = source[:count]
    dst[count] = 0
    return len(source)


def strlcat(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append ``src`` to the terminated text in ``dst``, within ``size`` bytes.

    Returns the length the full concatenation would have. When ``size`` is
    zero or no larger than the current text, nothing is written and
    ``len(src) + size`` is returned.
    """
    _check_size(size)
    dst_len = len(_cbytes(dst))
    source = _cbytes(src)
    if size == 0 or dst_len >= size:
        return len(source) + size
    count = min(len(source), size - 1 - dst_len)
    end = dst_len + count
    if end + 1 > len(dst):
        raise ValueError(
            f"strlcat: {end + 1} bytes do not fit in a buffer of {len(dst)}"
        )
    dst[dst_len:end] = source[:count]
    dst[end] = 0
    return dst_len + len(source)


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    index = (_cstr(s) + _NUL).find(_char(c))
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first differing character codes, the
    terminator counting as 0, or 0 when the compared parts are equal.
    """
    _check_size(n)
    left = _cstr(s1) + _NUL
    right = _cstr(s2) + _NUL
    for x, y in zip(left[:n], right[:n]):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` first occurs wholly within the first ``length``
    characters of ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    _check_size(length)
    wanted = _cstr(needle)
    if not wanted:
        return 0
    index = _cstr(haystack)[:length].find(wanted)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _cstr(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start beyond the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"negative start: {start}")
    _check_size(length)
    text = _cstr(s)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return _cstr(s).strip(_cstr(charset))


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` at every ``sep``, dropping empty pieces."""
    text = _cstr(s)
    ch = _char(sep)
    if ch == _NUL:
        return [text] if text else []
    return [piece for piece in text.split(ch) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> Optional[str]:
    """Return a string built from ``f(index, char)`` for every character.

    An empty input gives ``None``. ``f`` must return a single character.
    """
    text = _cstr(s)
    if not text:
        return None
    mapped = []
    for index, ch in enumerate(text):
        result = f(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return one character, got {result!r}")
        mapped.append(result)
    return "".join(mapped)


def _is_terminator(item: object) -> bool:
    return item == _NUL or (isinstance(item, int) and item == 0)


def striteri(
    chars: MutableSequence, f: Callable[[int, object], Optional[object]]
) -> None:
    """Call ``f(index, item)`` on each element of ``chars`` before a terminator.

    ``chars`` is a mutable sequence such as a list of characters or a
    ``bytearray``; a ``"\\0"`` or ``0`` element ends it. Whatever ``f``
    returns, other than ``None``, replaces the element in place.
    """
    for index, item in enumerate(chars):
        if _is_terminator(item):
            break
        replacement = f(index, item)
        if replacement is not None:
            chars[index] = replacement