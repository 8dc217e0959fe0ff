import pytest

from orderkey.digits import BASE_10_DIGITS, BASE_62_DIGITS
from orderkey.errors import InvalidDigit, InvalidHead, MalformedInteger, TruncatedKey
from orderkey.integer import (
    decrement_integer,
    increment_integer,
    integer_length,
    integer_part,
    validate_integer,
)


@pytest.mark.parametrize(
    "head, length",
    [("a", 2), ("b", 3), ("z", 27), ("Z", 2), ("Y", 3), ("A", 27)],
)
def test_integer_length(head, length):
    assert integer_length(head) == length


@pytest.mark.parametrize("head", ["0", "~", " ", "{"])
def test_integer_length_rejects_non_letters(head):
    with pytest.raises(InvalidHead):
        integer_length(head)


def test_integer_part_splits_key():
    assert integer_part("a0V") == ("a0", "V")
    assert integer_part("b12") == ("b12", "")
    assert integer_part("Zz1") == ("Zz", "1")


def test_integer_part_rejects_short_key():
    with pytest.raises(TruncatedKey):
        integer_part("b1")


def test_integer_part_rejects_empty_key():
    with pytest.raises(InvalidHead):
        integer_part("")


def test_validate_integer():
    validate_integer("a0")
    validate_integer("Xzzz")
    with pytest.raises(MalformedInteger):
        validate_integer("a00")
    with pytest.raises(MalformedInteger):
        validate_integer("Y0")


@pytest.mark.parametrize(
    "integer, expected",
    [
        ("a0", "a1"),
        ("a1", "a2"),
        ("az", "b00"),
        ("bzz", "c000"),
        ("Zy", "Zz"),
        ("Zz", "a0"),
        ("Yzz", "Z0"),
        ("Xzzz", "Y00"),
        ("z" * 26 + "y", "z" * 27),
    ],
)
def test_increment_integer(integer, expected):
    assert increment_integer(integer, BASE_62_DIGITS) == expected


def test_increment_largest_integer_has_no_successor():
    assert increment_integer("z" * 27, BASE_62_DIGITS) is None


@pytest.mark.parametrize(
    "integer, expected",
    [
        ("a1", "a0"),
        ("a0", "Zz"),
        ("b00", "az"),
        ("Z0", "Yzz"),
        ("Y00", "Xzzz"),
        ("A" + "0" * 25 + "1", "A" + "0" * 26),
    ],
)
def test_decrement_integer(integer, expected):
    assert decrement_integer(integer, BASE_62_DIGITS) == expected


def test_decrement_smallest_integer_has_no_predecessor():
    assert decrement_integer("A" + "0" * 26, BASE_62_DIGITS) is None


def test_base_10_carry_and_borrow():
    assert increment_integer("a9", BASE_10_DIGITS) == "b00"
    assert increment_integer("Z9", BASE_10_DIGITS) == "a0"
    assert decrement_integer("a0", BASE_10_DIGITS) == "Z9"
    assert decrement_integer("b00", BASE_10_DIGITS) == "a9"


@pytest.mark.parametrize("start", ["Yzy", "Zx", "bzy"])
def test_increment_decrement_are_inverse_across_bands(start):
    integer = start
    steps = []
    for _ in range(5):
        integer = increment_integer(integer, BASE_62_DIGITS)
        steps.append(integer)
    for expected in reversed(steps[:-1]):
        integer = decrement_integer(integer, BASE_62_DIGITS)
        assert integer == expected


def test_unknown_digit_is_rejected():
    with pytest.raises(InvalidDigit):
        increment_integer("a!", BASE_62_DIGITS)
    with pytest.raises(InvalidDigit):
        decrement_integer("aa", BASE_10_DIGITS)


def test_malformed_integer_is_rejected_before_arithmetic():
    with pytest.raises(MalformedInteger):
        increment_integer("a00", BASE_62_DIGITS)
    with pytest.raises(MalformedInteger):
        decrement_integer("b0", BASE_62_DIGITS)
