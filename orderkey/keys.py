"""Generate order keys between two existing keys.

Keys are plain strings: store them next to the records they order and sort
by them byte-wise.

    >>> generate_key_between(None, None)
    'a0'
    >>> generate_key_between("a0", "a1")
    'a0V'
"""

from __future__ import annotations

import logging
from typing import Optional

from .digits import BASE_62_DIGITS, check_digits
from .errors import Exhausted, OrderViolation
from .integer import decrement_integer, increment_integer, integer_part
from .midpoint import midpoint
from .validation import smallest_integer, validate_order_key

logger = logging.getLogger(__name__)


def generate_key_between(
    a: Optional[str],
    b: Optional[str],
    digits: str = BASE_62_DIGITS,
) -> str:
    """Return a key strictly between ``a`` and ``b``.

    ``None`` stands for the start (``a``) or the end (``b``) of the list.
    When both are given, ``a`` must sort before ``b``.
    """
    check_digits(digits)
    if a is not None:
        validate_order_key(a, digits)
    if b is not None:
        validate_order_key(b, digits)
    if a is not None and b is not None and a >= b:
        raise OrderViolation(a, b)

    if a is None:
        if b is None:
            return "a" + digits[0]
        ib, fb = integer_part(b)
        if ib == smallest_integer(digits):
            return ib + midpoint("", fb, digits)
        if ib < b:
            return ib
        res = decrement_integer(ib, digits)
        if res is None:
            raise Exhausted("cannot decrement any more", ib)
        if res == smallest_integer(digits):
            # the bare smallest integer is reserved, so step into its fractions
            return res + midpoint("", None, digits)
        return res

    if b is None:
        ia, fa = integer_part(a)
        i = increment_integer(ia, digits)
        if i is None:
            logger.debug("integer %s has no successor, extending fraction", ia)
            return ia + midpoint(fa, None, digits)
        return i

    ia, fa = integer_part(a)
    ib, fb = integer_part(b)
    if ia == ib:
        return ia + midpoint(fa, fb, digits)
    i = increment_integer(ia, digits)
    if i is None:
        raise Exhausted("cannot increment any more", ia)
    if i < b:
        return i
    return ia + midpoint(fa, None, digits)


def generate_n_keys_between(
    a: Optional[str],
    b: Optional[str],
    n: int,
    digits: str = BASE_62_DIGITS,
) -> list[str]:
    """Return ``n`` distinct ascending keys between ``a`` and ``b``.

    With an open end the keys are consecutive integers; between two keys the
    range is split in half recursively so that no key grows much longer than
    a single insertion would produce.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return []
    if n == 1:
        return [generate_key_between(a, b, digits)]

    if b is None:
        c = generate_key_between(a, b, digits)
        result = [c]
        for _ in range(n - 1):
            c = generate_key_between(c, b, digits)
            result.append(c)
        return result

    if a is None:
        c = generate_key_between(a, b, digits)
        result = [c]
        for _ in range(n - 1):
            c = generate_key_between(a, c, digits)
            result.append(c)
        result.reverse()
        return result

    mid = n // 2
    c = generate_key_between(a, b, digits)
    return [
        *generate_n_keys_between(a, c, mid, digits),
        c,
        *generate_n_keys_between(c, b, n - mid - 1, digits),
    ]
