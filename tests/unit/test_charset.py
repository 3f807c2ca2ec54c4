"""Unit tests for numeral charset codecs."""

from __future__ import annotations

import math

import pytest

from codecchain import (
    ConfigurationError,
    FormatError,
    InvalidInputError,
    NumberArrayCharset,
    NumberCharset,
    OutOfRangeError,
)
from codecchain.utils import MAX_SAFE_INTEGER


class TestNumberCharset:
    """Test encoding and decoding numerals."""

    def test_hexadecimal(self, hex_alphabet: str) -> None:
        """Test 255 <-> FF."""
        codec = NumberCharset(hex_alphabet)

        assert codec.encode(255) == "FF"
        assert codec.decode("FF") == 255

    def test_zero_is_first_symbol(self) -> None:
        """Test 0 encodes to the first alphabet symbol."""
        assert NumberCharset("xyz").encode(0) == "x"
        assert NumberCharset("xyz").decode("x") == 0

    def test_custom_alphabet(self) -> None:
        """Test arbitrary symbols act as digits."""
        codec = NumberCharset("ab")

        assert codec.encode(5) == "bab"
        assert codec.decode("bab") == 5

    def test_min_length_pads_with_first_symbol(self) -> None:
        """Test min_length left-pads."""
        codec = NumberCharset("01", min_length=8)

        assert codec.encode(5) == "00000101"
        assert codec.decode("00000101") == 5

    def test_min_length_never_truncates(self) -> None:
        """Test long numerals are kept whole."""
        codec = NumberCharset("0123456789", min_length=2)
        assert codec.encode(12345) == "12345"

    def test_float_is_floored(self) -> None:
        """Test non-integral floats are floored."""
        codec = NumberCharset("0123456789")

        assert codec.encode(42.9) == "42"
        assert codec.encode(7.0) == "7"

    def test_max_safe_integer(self) -> None:
        """Test the largest accepted value round-trips."""
        codec = NumberCharset("0123456789abcdefghijklmnopqrstuvwxyz")
        encoded = codec.encode(MAX_SAFE_INTEGER)

        assert codec.decode(encoded) == MAX_SAFE_INTEGER

    def test_leading_zero_symbols_decode(self, hex_alphabet: str) -> None:
        """Test padded numerals decode to the same value."""
        codec = NumberCharset(hex_alphabet)
        assert codec.decode("000FF") == 255


class TestNumberCharsetErrors:
    """Test numeral charset error handling."""

    def test_duplicate_symbols(self) -> None:
        """Test duplicate symbols fail at construction."""
        with pytest.raises(ConfigurationError, match="unique"):
            NumberCharset("AABBC")

    @pytest.mark.parametrize("alphabet", ["", "A"])
    def test_alphabet_too_short(self, alphabet: str) -> None:
        """Test alphabets need 2 symbols."""
        with pytest.raises(ConfigurationError, match="at least 2"):
            NumberCharset(alphabet)

    def test_wide_code_point(self) -> None:
        """Test symbols above code point 255 are rejected."""
        with pytest.raises(ConfigurationError, match="code point"):
            NumberCharset("01Ā")

    def test_latin1_symbols_allowed(self) -> None:
        """Test symbols up to code point 255 are accepted."""
        codec = NumberCharset("éÿ")
        assert codec.encode(2) == "ÿé"

    @pytest.mark.parametrize("min_length", [0, -1, 1.5, True])
    def test_bad_min_length(self, min_length: object) -> None:
        """Test min_length must be an integer >= 1."""
        with pytest.raises(ConfigurationError, match="Minimum length"):
            NumberCharset("01", min_length=min_length)  # type: ignore[arg-type]

    def test_negative(self) -> None:
        """Test negative numbers are rejected."""
        with pytest.raises(OutOfRangeError, match="negative"):
            NumberCharset("01").encode(-1)

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite(self, value: float) -> None:
        """Test infinities and NaN are rejected."""
        with pytest.raises(OutOfRangeError):
            NumberCharset("01").encode(value)

    def test_above_safe_integer(self) -> None:
        """Test values above 2**53 - 1 are rejected."""
        with pytest.raises(OutOfRangeError, match="larger than"):
            NumberCharset("01").encode(MAX_SAFE_INTEGER + 1)

    @pytest.mark.parametrize("value", ["12", None, [1], True])
    def test_encode_non_number(self, value: object) -> None:
        """Test non-numeric input is rejected."""
        with pytest.raises(InvalidInputError):
            NumberCharset("01").encode(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [12, None, b"FF"])
    def test_decode_non_string(self, value: object) -> None:
        """Test non-string input is rejected."""
        with pytest.raises(InvalidInputError):
            NumberCharset("01").decode(value)  # type: ignore[arg-type]

    def test_decode_empty(self) -> None:
        """Test the empty string cannot be decoded."""
        with pytest.raises(FormatError, match="empty"):
            NumberCharset("01").decode("")

    def test_decode_unknown_symbol(self, hex_alphabet: str) -> None:
        """Test symbols outside the alphabet are rejected."""
        with pytest.raises(FormatError, match="'G' not found in alphabet"):
            NumberCharset(hex_alphabet).decode("FG")


class TestNumberArrayCharset:
    """Test the list form of the numeral codec."""

    def test_round_trip(self) -> None:
        """Test lists of numbers."""
        codec = NumberArrayCharset("0123456789abcdef")

        assert codec.encode([255, 16, 0]) == "ff|10|0"
        assert codec.decode("ff|10|0") == [255, 16, 0]

    def test_single_number(self) -> None:
        """Test one-element lists have no separator."""
        codec = NumberArrayCharset("01")

        assert codec.encode([6]) == "110"
        assert codec.decode("110") == [6]

    def test_empty_list(self) -> None:
        """Test the empty list round-trips through the empty string."""
        codec = NumberArrayCharset("01")

        assert codec.encode([]) == ""
        assert codec.decode("") == []

    def test_custom_separator(self) -> None:
        """Test a different separator."""
        codec = NumberArrayCharset("0123456789", min_length=3, separator="-")
        assert codec.encode([1, 22]) == "001-022"

    def test_empty_chunk(self) -> None:
        """Test empty chunks are rejected."""
        with pytest.raises(FormatError, match="Empty chunk"):
            NumberArrayCharset("01").decode("1||0")

    def test_separator_in_alphabet(self) -> None:
        """Test the separator cannot be a digit."""
        with pytest.raises(ConfigurationError, match="overlaps"):
            NumberArrayCharset("01|")

    def test_encode_non_list(self) -> None:
        """Test non-list input is rejected."""
        with pytest.raises(InvalidInputError):
            NumberArrayCharset("01").encode(5)  # type: ignore[arg-type]
