"""Fractional order keys: strings that sort in list order."""

__version__ = "1.0.0"

from .digits import BASE_10_DIGITS, BASE_62_DIGITS, BASE_95_DIGITS, check_digits
from .errors import (
    Exhausted,
    InvalidAlphabet,
    InvalidDigit,
    InvalidHead,
    MalformedInteger,
    OrderKeyError,
    OrderViolation,
    ReservedKey,
    TrailingZero,
    TruncatedKey,
)
from .keys import generate_key_between, generate_n_keys_between
from .validation import is_valid_order_key, validate_order_key

__all__ = [
    "BASE_10_DIGITS",
    "BASE_62_DIGITS",
    "BASE_95_DIGITS",
    "Exhausted",
    "InvalidAlphabet",
    "InvalidDigit",
    "InvalidHead",
    "MalformedInteger",
    "OrderKeyError",
    "OrderViolation",
    "ReservedKey",
    "TrailingZero",
    "TruncatedKey",
    "check_digits",
    "generate_key_between",
    "generate_n_keys_between",
    "is_valid_order_key",
    "validate_order_key",
]
