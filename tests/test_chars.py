import string

import pytest

from pushswap.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42abc", -42),
        ("+17", 17),
        ("\t\n\v\f\r 5", 5),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["abc", "--5", "- 5", "", "+"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("number", [0, 7, -7, 1234567, 2147483647, -2147483648])
def test_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_pinned_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


def test_isalpha_letters_only():
    assert all(isalpha(ch) for ch in string.ascii_letters)
    assert not any(isalpha(ch) for ch in string.digits + string.punctuation)


def test_isdigit_digits_only():
    assert all(isdigit(ch) for ch in string.digits)
    assert not any(isdigit(ch) for ch in string.ascii_letters)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) and isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(32) and isprint(126)
    assert not isprint(31)
    assert not isprint(127)


def test_classification_rejects_multichar_string():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_case_mapping_on_strings():
    assert toupper("z") == "Z"
    assert tolower("A") == "a"
    assert tolower("!") == "!"
    for ch in string.ascii_lowercase:
        assert tolower(toupper(ch)) == ch


def test_case_mapping_on_codes():
    assert tolower(ord("Q")) == ord("q")
    assert toupper(ord("q")) == ord("Q")
    assert tolower(-1) == -1
    assert toupper(-1) == -1
    assert toupper(ord("a") + 256) == ord("A")