import pytest

from solong.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII_AND_BEYOND = range(-5, 300)


@pytest.mark.parametrize("code", ASCII_AND_BEYOND)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code).isalpha()
    assert is_alpha(code) is expected


@pytest.mark.parametrize("code", ASCII_AND_BEYOND)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code).isdigit()
    assert is_digit(code) is expected


@pytest.mark.parametrize("code", ASCII_AND_BEYOND)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_AND_BEYOND)
def test_is_ascii_range(code):
    expected = 0 <= code < 128
    assert is_ascii(code) is expected


@pytest.mark.parametrize("code", ASCII_AND_BEYOND)
def test_is_print_matches_printable_ascii(code):
    expected = 0 <= code < 128 and chr(code).isprintable()
    assert is_print(code) is expected


def test_string_characters_accepted():
    assert is_alpha("F") and not is_alpha("4")
    assert is_alnum("4")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("F4")


@pytest.mark.parametrize("ch", [chr(c) for c in range(128)])
def test_case_conversion_matches_str_methods(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(ch) == ch.upper()


def test_case_conversion_keeps_int_form():
    assert to_lower(ord("A")) == ord("a")
    assert to_upper(ord("z")) == ord("Z")
    assert to_upper(200) == 200


def test_case_conversion_round_trip():
    word = "AbcDE"
    lowered = "".join(to_lower(c) for c in word)
    assert "".join(to_upper(c) for c in lowered) == word.upper()


def test_atoi_stops_at_non_digit():
    assert atoi(" -122g") == -122


def test_atoi_skips_all_whitespace_and_plus():
    assert atoi("\t\n\v\f\r +42") == 42


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("- 5") == 0
    assert atoi("") == 0


def test_atoi_only_one_sign():
    assert atoi("--7") == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [0, 5, -9, 123456, -2147483648])
def test_itoa_matches_str(n):
    assert itoa(n) == str(n)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")