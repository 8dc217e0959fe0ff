"""Errors raised when order keys or their arguments are malformed."""

from __future__ import annotations

from typing import Any, Optional


class OrderKeyError(ValueError):
    """Base error for order key generation.

    Every failure is a caller precondition violation, so the error is raised
    straight to the caller and never retried.
    """

    code = "order_key_error"

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InvalidAlphabet(OrderKeyError):
    code = "invalid_alphabet"


class InvalidHead(OrderKeyError):
    """The first character of a key is not a letter in ``A-Z`` or ``a-z``."""

    code = "invalid_head"

    def __init__(self, head: str) -> None:
        super().__init__(f"invalid order key head: {head}", {"head": head})


class MalformedInteger(OrderKeyError):
    code = "malformed_integer"

    def __init__(self, integer: str) -> None:
        super().__init__(f"invalid integer part of order key: {integer}", {"integer": integer})


class TruncatedKey(OrderKeyError):
    code = "truncated_key"

    def __init__(self, key: str) -> None:
        super().__init__(f"invalid order key: {key}", {"key": key})


class ReservedKey(OrderKeyError):
    """The smallest integer appeared without a fractional part."""

    code = "reserved_key"

    def __init__(self, key: str) -> None:
        super().__init__(f"invalid order key: {key}", {"key": key})


class TrailingZero(OrderKeyError):
    code = "trailing_zero"

    def __init__(self, value: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"invalid order key: {value}", {"value": value})


class OrderViolation(OrderKeyError):
    code = "order_violation"

    def __init__(self, a: str, b: str) -> None:
        super().__init__(f"{a} >= {b}", {"a": a, "b": b})


class Exhausted(OrderKeyError):
    """No integer exists past the requested boundary."""

    code = "exhausted"

    def __init__(self, message: str, integer: str) -> None:
        super().__init__(message, {"integer": integer})


class InvalidDigit(OrderKeyError):
    code = "invalid_digit"

    def __init__(self, char: str, digits: str) -> None:
        super().__init__(f"invalid digit {char!r} for alphabet", {"char": char, "digits": digits})
