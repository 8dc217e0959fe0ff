from __future__ import annotations

from .digits import BASE_62_DIGITS
from .errors import OrderKeyError, ReservedKey, TrailingZero
from .integer import integer_part


def smallest_integer(digits: str) -> str:
    """The reserved integer at the bottom of the uppercase band."""
    return "A" + digits[0] * 26


def validate_order_key(key: str, digits: str = BASE_62_DIGITS) -> None:
    """Raise an :class:`OrderKeyError` unless ``key`` is well formed.

    Only the bare smallest integer is reserved; followed by any fraction it
    is an ordinary key.
    """
    if key == smallest_integer(digits):
        raise ReservedKey(key)
    _, fraction = integer_part(key)
    if fraction.endswith(digits[0]):
        raise TrailingZero(key)


def is_valid_order_key(key: str, digits: str = BASE_62_DIGITS) -> bool:
    try:
        validate_order_key(key, digits)
    except OrderKeyError:
        return False
    return True
