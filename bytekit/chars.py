"""Classification and case conversion of single ASCII characters.

Every function accepts either a character code (an ``int``) or a
one-character string. The predicates look only at the ASCII range, so
letters and digits outside it are not counted.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: Char) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _like(original: Char, code: int) -> Char:
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for ASCII letters ``A``-``Z`` and ``a``-``z``."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for ASCII digits ``0``-``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127 inclusive."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Map a lower-case ASCII letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - _CASE_OFFSET)
    return c


def to_lower(c: Char) -> Char:
    """Map an upper-case ASCII letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + _CASE_OFFSET)
    return c