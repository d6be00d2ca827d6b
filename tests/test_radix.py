"""Tests for the share decoder."""

import pytest

from sharesolve.codec import radix
from sharesolve.errors import InvalidBase, InvalidDigit, InvalidIdentifier, InvalidValue
from sharesolve.share import Share


def _positional(base, digits):
    """Reference positional sum, least significant digit last."""
    total = 0
    for i, ch in enumerate(reversed(digits)):
        total += int(ch, 36) * base**i
    return total


def test_decode_decimal():
    assert radix.decode("1", "10", "4") == 4


def test_decode_binary():
    assert radix.decode(2, 2, "111") == 7


def test_decode_base4():
    assert radix.decode("6", "4", "213") == 39


def test_decode_hex_case_insensitive():
    assert radix.decode(1, 16, "FF") == radix.decode(1, 16, "ff") == 255


def test_decode_base36():
    assert radix.decode(1, 36, "z") == 35
    assert radix.decode(1, 36, "10") == 36


def test_decode_leading_zeros():
    assert radix.decode(1, 10, "0007") == 7
    assert radix.decode(1, 2, "0") == 0


def test_decode_matches_positional_sum():
    cases = [
        (6, "13444211440455345511"),
        (15, "aed7015a346d63"),
        (3, "2122212201122002221120200210011020220200"),
        (12, "45153788322a1255483"),
        (36, "thequickbrownfoxjumpsoverthelazydog"),
    ]
    for base, digits in cases:
        assert radix.decode(1, base, digits) == _positional(base, digits)


def test_decode_large_value_exact():
    assert radix.decode(1, 6, "13444211440455345511") == 995085094601491
    assert radix.decode(10, 7, "1101613130313526312514143") == 220003896831595324801
    assert radix.decode(1, 2, "1" * 200) == 2**200 - 1


def test_invalid_digit_for_base():
    with pytest.raises(InvalidDigit) as exc_info:
        radix.decode("2", "2", "112")
    assert exc_info.value.context["position"] == 2
    assert exc_info.value.context["identifier"] == 2


def test_invalid_digit_outside_alphabet():
    for bad in ("1_0", "-10", "+1", " 10", "1.5", "0x1f", "é"):
        with pytest.raises(InvalidDigit):
            radix.decode(1, 16, bad)


def test_empty_digits():
    with pytest.raises(InvalidDigit):
        radix.decode(1, 10, "")


def test_invalid_base_too_small():
    for base in (1, "1", 0, -2):
        with pytest.raises(InvalidBase):
            radix.decode(1, base, "0")


def test_invalid_base_too_large():
    with pytest.raises(InvalidBase):
        radix.decode(1, 37, "1")


def test_invalid_base_not_numeric():
    for base in ("ten", "", "2.0", None, True):
        with pytest.raises(InvalidBase):
            radix.decode(1, base, "1")


def test_invalid_identifier():
    for ident in ("abc", "", "1.0", "0x10", None, 1.0, False):
        with pytest.raises(InvalidIdentifier):
            radix.decode(ident, 10, "1")


def test_identifier_is_base10_unbounded():
    big = "123456789012345678901234567890"
    assert radix.parse_identifier(big) == int(big)
    assert radix.parse_identifier(" 7 ") == 7
    assert radix.parse_identifier("-3") == -3


def test_decode_share():
    share = radix.decode_share("6", "4", "213")
    assert share == Share(6, 39)
    x, y = share
    assert (x, y) == (6, 39)


def test_error_to_dict_stringifies_ints():
    with pytest.raises(InvalidBase) as exc_info:
        radix.parse_base(99)
    payload = exc_info.value.to_dict()
    assert payload["error"] == "InvalidBase"
    assert payload["context"]["base"] == "99"


def test_parse_value():
    assert radix.parse_value("-42") == -42
    assert radix.parse_value(10**40) == 10**40
    for bad in ("four", "4.0", True, 4.0, None):
        with pytest.raises(InvalidValue):
            radix.parse_value(bad)


def test_decoder_does_not_depend_on_reconstructor():
    assert radix.Share.__module__ == "sharesolve.share"
    assert not hasattr(radix, "lagrange")
