"""Variable-length integer prefix of an order key.

The head character encodes the length of the integer part: ``a``..``z`` give
lengths 2..27 and ``A``..``Z`` give lengths 27..2. Because the uppercase band
sorts before the lowercase band and longer integers sit further from the
``Z``/``a`` boundary, integers of different lengths still compare correctly
as plain strings.
"""

from __future__ import annotations

from typing import Optional

from .digits import digit_value
from .errors import InvalidHead, MalformedInteger, TruncatedKey


def integer_length(head: str) -> int:
    if "a" <= head <= "z":
        return ord(head) - ord("a") + 2
    if "A" <= head <= "Z":
        return ord("Z") - ord(head) + 2
    raise InvalidHead(head)


def integer_part(key: str) -> tuple[str, str]:
    """Split ``key`` into its integer part and its fractional part."""
    if not key:
        raise InvalidHead(key)
    length = integer_length(key[0])
    if length > len(key):
        raise TruncatedKey(key)
    return key[:length], key[length:]


def validate_integer(integer: str) -> None:
    if not integer or len(integer) != integer_length(integer[0]):
        raise MalformedInteger(integer)


def increment_integer(integer: str, digits: str) -> Optional[str]:
    """Return the next integer, or ``None`` past the largest one."""
    validate_integer(integer)
    head = integer[0]
    digs = list(integer[1:])
    carry = True
    i = len(digs) - 1
    while carry and i >= 0:
        d = digit_value(digits, digs[i]) + 1
        if d == len(digits):
            digs[i] = digits[0]
        else:
            digs[i] = digits[d]
            carry = False
        i -= 1

    if not carry:
        return head + "".join(digs)
    if head == "Z":
        return "a" + digits[0]
    if head == "z":
        return None
    h = chr(ord(head) + 1)
    if h > "a":
        digs.append(digits[0])
    else:
        digs.pop()
    return h + "".join(digs)


def decrement_integer(integer: str, digits: str) -> Optional[str]:
    """Return the previous integer, or ``None`` below the smallest one."""
    validate_integer(integer)
    head = integer[0]
    digs = list(integer[1:])
    borrow = True
    i = len(digs) - 1
    while borrow and i >= 0:
        d = digit_value(digits, digs[i]) - 1
        if d == -1:
            digs[i] = digits[-1]
        else:
            digs[i] = digits[d]
            borrow = False
        i -= 1

    if not borrow:
        return head + "".join(digs)
    if head == "a":
        return "Z" + digits[-1]
    if head == "A":
        return None
    h = chr(ord(head) - 1)
    if h < "Z":
        digs.append(digits[-1])
    else:
        digs.pop()
    return h + "".join(digs)
