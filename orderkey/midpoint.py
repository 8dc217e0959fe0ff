"""Shortest digit string strictly between two fractional parts."""

from __future__ import annotations

from typing import Optional

from .digits import digit_value
from .errors import OrderViolation, TrailingZero


def midpoint(a: str, b: Optional[str], digits: str) -> str:
    """Return a fraction strictly between ``a`` and ``b``.

    ``a`` may be empty, ``b`` is ``None`` (unbounded) or a non-empty string
    greater than ``a``. Neither may end in the zero digit, and neither does
    the result.
    """
    zero = digits[0]
    if b is not None and a >= b:
        raise OrderViolation(a, b)
    if a.endswith(zero) or (b is not None and b.endswith(zero)):
        raise TrailingZero(a if a.endswith(zero) else b, "trailing zero")

    if b is not None:
        # A missing digit of ``a`` reads as zero. ``b`` never runs out first
        # while the prefix is shared, since it is greater and has no trailing zero.
        n = 0
        while (a[n] if n < len(a) else zero) == b[n]:
            n += 1
        if n > 0:
            return b[:n] + midpoint(a[n:], b[n:], digits)

    digit_a = digit_value(digits, a[0]) if a else 0
    digit_b = digit_value(digits, b[0]) if b is not None else len(digits)
    if digit_b - digit_a > 1:
        # round half up
        return digits[(digit_a + digit_b + 1) // 2]

    # consecutive digits
    if b is not None and len(b) > 1:
        return b[0]
    # b is None or a single digit, e.g. midpoint("49", "5") in base 10
    # is "4" + midpoint("9", None) == "4" + "9" + midpoint("", None) == "495"
    return digits[digit_a] + midpoint(a[1:], None, digits)
