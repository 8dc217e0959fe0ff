"""Digit alphabets shared by the integer and fractional parts of a key."""

from __future__ import annotations

from functools import lru_cache

from .errors import InvalidAlphabet, InvalidDigit

BASE_10_DIGITS = "0123456789"
BASE_62_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE_95_DIGITS = "".join(chr(code) for code in range(0x20, 0x7F))


def check_digits(digits: str) -> str:
    """Return ``digits`` unchanged if it is usable as a numeral system.

    The first character is the zero digit; characters must be in strictly
    ascending code point order so that digit order equals string order.
    """
    if len(digits) < 2:
        raise InvalidAlphabet(
            "digit alphabet needs at least two characters", {"digits": digits}
        )
    for prev, cur in zip(digits, digits[1:]):
        if prev >= cur:
            raise InvalidAlphabet(
                f"digits must be in ascending character code order: {prev!r} >= {cur!r}",
                {"digits": digits},
            )
    return digits


@lru_cache(maxsize=32)
def digit_index(digits: str) -> dict[str, int]:
    """Map each digit character to its value."""
    return {ch: i for i, ch in enumerate(digits)}


def digit_value(digits: str, char: str) -> int:
    try:
        return digit_index(digits)[char]
    except KeyError:
        raise InvalidDigit(char, digits) from None
