"""Positional numeral codecs over caller-supplied alphabets.

A number is written in base ``len(alphabet)`` using the alphabet's symbols as
digits, most significant digit first. Alphabets are validated when the codec is
built, so an invalid alphabet never reaches encode/decode.
"""

from __future__ import annotations

import math
from typing import Union

from ..codec.base import Codec
from ..exceptions import ConfigurationError, FormatError, OutOfRangeError
from ..utils.display import describe_value
from ..utils.validation import MAX_SAFE_INTEGER, require_list, require_number, require_str

Number = Union[int, float]


def validate_alphabet(alphabet: str) -> str:
    """Check that ``alphabet`` can serve as a digit set.

    Args:
        alphabet: Candidate digit symbols, lowest value first

    Returns:
        The alphabet, unchanged

    Raises:
        ConfigurationError: If the alphabet has fewer than 2 symbols, a symbol with
            code point above 255, or duplicate symbols
    """
    if not isinstance(alphabet, str):
        raise ConfigurationError(f"Alphabet must be a string: {describe_value(alphabet)}")
    if len(alphabet) < 2:
        raise ConfigurationError("Alphabet must have at least 2 characters")
    for char in alphabet:
        if ord(char) > 255:
            raise ConfigurationError(
                f"Alphabet must contain only characters with code point <= 255: {char!r}"
            )
    if len(set(alphabet)) != len(alphabet):
        duplicates = sorted({char for char in alphabet if alphabet.count(char) > 1})
        raise ConfigurationError(
            f"Alphabet must contain unique characters, duplicated: {''.join(duplicates)!r}"
        )
    return alphabet


class NumberCharset(Codec[Number, str]):
    """Non-negative integer <-> numeral string over a custom alphabet.

    Args:
        alphabet: Digit symbols; symbol ``i`` has digit value ``i``
        min_length: Minimum numeral length, reached by left-padding with
            ``alphabet[0]`` (default 1)

    Raises:
        ConfigurationError: If the alphabet is invalid or ``min_length < 1``

    Examples:
        >>> hex_codec = NumberCharset("0123456789ABCDEF")
        >>> hex_codec.encode(255)
        'FF'
        >>> hex_codec.decode("FF")
        255
        >>> NumberCharset("01", min_length=8).encode(5)
        '00000101'
    """

    def __init__(self, alphabet: str, min_length: int = 1) -> None:
        self.alphabet = validate_alphabet(alphabet)
        if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length < 1:
            raise ConfigurationError(f"Minimum length must be at least 1: {min_length!r}")
        self.min_length = min_length
        self.base = len(alphabet)
        self._index = {char: i for i, char in enumerate(alphabet)}

    def encode(self, value: Number) -> str:
        """Write ``floor(value)`` as a numeral.

        Raises:
            InvalidInputError: If value is not an int or float
            OutOfRangeError: If value is negative, not finite, or above 2**53 - 1
        """
        number = require_number(value, "number")
        if number < 0:
            raise OutOfRangeError(f"Cannot encode negative numbers: {number}")
        if isinstance(number, float) and not math.isfinite(number):
            raise OutOfRangeError(f"Cannot encode non-finite numbers: {number}")
        if number > MAX_SAFE_INTEGER:
            raise OutOfRangeError(
                f"Cannot encode numbers larger than {MAX_SAFE_INTEGER}: {number}"
            )

        quotient = math.floor(number)
        digits: list[str] = []
        while True:
            quotient, remainder = divmod(quotient, self.base)
            digits.append(self.alphabet[remainder])
            if quotient == 0:
                break

        numeral = "".join(reversed(digits))
        return numeral.rjust(self.min_length, self.alphabet[0])

    def decode(self, value: str) -> int:
        """Parse a numeral back into an integer.

        Raises:
            InvalidInputError: If value is not a string
            FormatError: If value is empty or contains a symbol outside the alphabet
        """
        numeral = require_str(value)
        if not numeral:
            raise FormatError("Cannot decode empty string")

        result = 0
        for char in numeral:
            digit = self._index.get(char)
            if digit is None:
                raise FormatError(f"Invalid character {char!r} not found in alphabet")
            result = result * self.base + digit
        return result

    def __repr__(self) -> str:
        return f"NumberCharset({self.alphabet!r}, min_length={self.min_length})"


class NumberArrayCharset(Codec[list[Number], str]):
    """List of non-negative integers <-> separator-joined numerals.

    Each number is encoded with :class:`NumberCharset`; numerals are joined with
    ``separator``, which must not be one of the alphabet's symbols. The empty
    list encodes to the empty string.

    Example:
        >>> codec = NumberArrayCharset("0123456789abcdef")
        >>> codec.encode([255, 16, 0])
        'ff|10|0'
        >>> codec.decode("ff|10|0")
        [255, 16, 0]
    """

    def __init__(self, alphabet: str, min_length: int = 1, separator: str = "|") -> None:
        self.charset = NumberCharset(alphabet, min_length)
        if not isinstance(separator, str) or not separator:
            raise ConfigurationError(
                f"Separator must be a non-empty string: {describe_value(separator)}"
            )
        if any(char in self.charset.alphabet for char in separator):
            raise ConfigurationError(f"Separator {separator!r} overlaps the alphabet")
        self.separator = separator

    def encode(self, value: list[Number]) -> str:
        numbers = require_list(value)
        return self.separator.join(self.charset.encode(number) for number in numbers)

    def decode(self, value: str) -> list[int]:
        text = require_str(value)
        if not text:
            return []

        numbers = []
        for index, chunk in enumerate(text.split(self.separator)):
            if not chunk:
                raise FormatError(f"Empty chunk found in encoded string at index {index}")
            numbers.append(self.charset.decode(chunk))
        return numbers
