import string

import pytest

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


@pytest.mark.parametrize("c", CODES)
def test_is_alpha_matches_ascii_letters(c):
    expected = 0 <= c < 128 and chr(c) in string.ascii_letters
    assert is_alpha(c) is expected


@pytest.mark.parametrize("c", CODES)
def test_is_digit_matches_ascii_digits(c):
    expected = 0 <= c < 128 and chr(c) in string.digits
    assert is_digit(c) is expected


@pytest.mark.parametrize("c", CODES)
def test_is_alnum_is_union_of_alpha_and_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


@pytest.mark.parametrize("c", range(0, 128))
def test_is_print_matches_python_printable(c):
    assert is_print(c) == chr(c).isprintable()


def test_is_print_rejects_delete_and_high_codes():
    assert not is_print(127)
    assert not is_print(200)
    assert is_print(ord(" "))


def test_to_upper_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(ord(lower)) == ord(upper)


def test_to_lower_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("c", CODES)
def test_case_conversion_leaves_non_letters_unchanged(c):
    if not is_alpha(c):
        assert to_upper(c) == c
        assert to_lower(c) == c


@pytest.mark.parametrize("c", CODES)
def test_case_conversion_is_idempotent(c):
    assert to_upper(to_upper(c)) == to_upper(c)
    assert to_lower(to_lower(c)) == to_lower(c)


def test_upper_then_lower_round_trip():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ord(ch))) == ord(ch)