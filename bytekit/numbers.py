"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789"


def _wrap(value: int) -> int:
    """Reduce ``value`` to the 32-bit two's-complement range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return and space) is skipped, then one optional ``+`` or ``-`` sign is
    read, then ASCII digits up to the first non-digit. Text without digits
    gives 0. Values outside the 32-bit range wrap around.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        digit = _DIGITS.find(ch)
        if digit < 0:
            break
        result = _wrap(result * 10 + digit)
    return _wrap(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    if n == 0:
        return "0"
    digits = []
    magnitude = -n if n < 0 else n
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(_DIGITS[digit])
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))