import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == chr(code).isdigit()


@pytest.mark.parametrize("code", ASCII)
def test_is_alnum_matches_ascii_alnum(code):
    assert is_alnum(code) == chr(code).isalnum()


@pytest.mark.parametrize("code", ASCII)
def test_is_print_matches_printable(code):
    assert is_print(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", range(128, 300))
def test_high_codes_are_not_classified(code):
    assert not is_alpha(code)
    assert not is_digit(code)
    assert not is_alnum(code)
    assert not is_print(code)
    assert not is_ascii(code)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_accepts_one_character_strings():
    assert is_alpha("q")
    assert is_digit("7")
    assert not is_digit("x")
    assert is_print(" ")
    assert not is_print("\n")


@pytest.mark.parametrize("code", ASCII)
def test_to_lower_matches_str_lower(code):
    assert chr(to_lower(code)) == chr(code).lower()


@pytest.mark.parametrize("code", ASCII)
def test_to_upper_matches_str_upper(code):
    assert chr(to_upper(code)) == chr(code).upper()


@given(st.integers(min_value=-1000, max_value=1000).filter(lambda c: not 0 <= c < 128))
def test_converters_leave_non_ascii_codes_unchanged(code):
    assert to_lower(code) == code
    assert to_upper(code) == code


def test_converters_preserve_string_type():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper("!") == "!"


@given(st.sampled_from([chr(c) for c in ASCII]))
def test_case_round_trip_for_letters(ch):
    if is_alpha(ch):
        assert to_upper(to_lower(ch)) == to_upper(ch)
        assert to_lower(to_upper(ch)) == to_lower(ch)


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)