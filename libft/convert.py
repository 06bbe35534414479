"""Conversion between decimal text and 32-bit integers."""

from __future__ import annotations

from .chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _to_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one optional sign are skipped, then digits are read
    up to the first non-digit. A value that overflows a 64-bit signed integer
    yields -1 when positive and 0 when negative; otherwise the value is
    truncated to a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1

    result = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        result = result * 10 + int(ch)
        if result > _LONG_MAX:
            return -1 if sign == 1 else 0
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    if n == 0:
        return "0"
    magnitude = abs(n)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))