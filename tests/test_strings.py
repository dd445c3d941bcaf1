import pytest

from algonotes.strings import (
    INT32_MAX,
    INT32_MIN,
    longest_palindrome,
    reverse_integer,
    zigzag_convert,
)


def test_longest_palindrome_source_example():
    assert longest_palindrome("cbbd") == "bb"


@pytest.mark.parametrize("text", ["babad", "cbbd", "a", "ac", "forgeeksskeegfor", "abacdfgdcaba"])
def test_longest_palindrome_is_palindromic_substring(text):
    result = longest_palindrome(text)
    assert result in text
    assert result == result[::-1]
    assert result


def test_longest_palindrome_whole_string():
    for text in ("racecar", "abba", "z"):
        assert longest_palindrome(text) == text


def test_longest_palindrome_is_maximal():
    text = "babadada"
    result = longest_palindrome(text)
    for i in range(len(text)):
        for j in range(i + len(result) + 1, len(text) + 1):
            piece = text[i:j]
            assert piece != piece[::-1]


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


def test_zigzag_classic():
    assert zigzag_convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@pytest.mark.parametrize("rows", [1, 2, 3, 4, 5, 20])
def test_zigzag_keeps_characters(rows):
    text = "PAYPALISHIRING"
    result = zigzag_convert(text, rows)
    assert sorted(result) == sorted(text)
    assert result[0] == text[0]


def test_zigzag_trivial_rows():
    text = "PAYPALISHIRING"
    assert zigzag_convert(text, 1) == text
    assert zigzag_convert(text, 0) == text
    assert zigzag_convert(text, len(text)) == text


def test_zigzag_two_rows_splits_even_and_odd():
    text = "abcdefg"
    assert zigzag_convert(text, 2) == text[::2] + text[1::2]


@pytest.mark.parametrize("value", [123, 4567, 1, 9, 1463847412, -123, -2147447412])
def test_reverse_integer_round_trip(value):
    assert reverse_integer(reverse_integer(value)) == value


def test_reverse_integer_sign_and_trailing_zeros():
    assert reverse_integer(-123) == -reverse_integer(123)
    assert reverse_integer(1000) == reverse_integer(1)
    assert reverse_integer(0) == 0


@pytest.mark.parametrize("value", [INT32_MIN, INT32_MAX, 1534236469, -1563847412])
def test_reverse_integer_overflow(value):
    assert reverse_integer(value) == 0


@pytest.mark.parametrize("value", [INT32_MAX + 1, INT32_MIN - 1])
def test_reverse_integer_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        reverse_integer(value)