"""Conversions between text, bytes and numbers.

Thin codecs over standard library primitives. Each validates its input type
and turns the primitive's failure into a codecchain exception.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional, Union
from urllib.parse import quote, unquote

from ..codec.base import Codec
from ..exceptions import ConfigurationError, FormatError, InvalidInputError, OutOfRangeError
from ..utils.display import describe_value
from ..utils.validation import require_bytes, require_number, require_str

Number = Union[int, float]

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_SAFE = "-_.!~*'()"

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class StringToBytes(Codec[str, bytes]):
    """Text <-> encoded bytes (UTF-8 by default).

    Empty input is rejected in both directions.

    Example:
        >>> StringToBytes().encode("héllo")
        b'h\\xc3\\xa9llo'
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        try:
            "".encode(encoding)
        except LookupError as err:
            raise ConfigurationError(f"Unknown text encoding: {encoding!r}") from err
        self.encoding = encoding

    def encode(self, value: str) -> bytes:
        text = require_str(value)
        if not text:
            raise FormatError("String cannot be empty")
        return text.encode(self.encoding)

    def decode(self, value: bytes) -> str:
        data = require_bytes(value)
        if not data:
            raise FormatError("Buffer cannot be empty")
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as err:
            raise FormatError(f"Buffer is not valid {self.encoding}: {err.reason}") from err

    def __repr__(self) -> str:
        return f"StringToBytes({self.encoding!r})"


class Base64(Codec[str, str]):
    """Text <-> standard base64 of its UTF-8 bytes."""

    def encode(self, value: str) -> str:
        text = require_str(value)
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    def decode(self, value: str) -> str:
        text = require_str(value)
        try:
            return base64.b64decode(text, validate=True).decode("utf-8")
        except (binascii.Error, ValueError) as err:
            raise FormatError(f"Invalid base64 text: {describe_value(text)}") from err

    def __repr__(self) -> str:
        return "Base64()"


class Uri(Codec[str, str]):
    """Text <-> percent-encoded URI component.

    Escapes the same characters as ``encodeURIComponent``.

    Example:
        >>> Uri().encode("a b&c")
        'a%20b%26c'
    """

    def encode(self, value: str) -> str:
        return quote(require_str(value), safe=_URI_SAFE)

    def decode(self, value: str) -> str:
        text = require_str(value)
        try:
            return unquote(text, errors="strict")
        except UnicodeDecodeError as err:
            raise FormatError(f"Malformed URI component: {describe_value(text)}") from err

    def __repr__(self) -> str:
        return "Uri()"


class NumberToChar(Codec[int, str]):
    """Character code (0-255) <-> one-character string.

    Example:
        >>> NumberToChar().encode(65)
        'A'
    """

    def encode(self, value: int) -> str:
        code = require_number(value, "character code")
        if not isinstance(code, int):
            raise InvalidInputError(f"Invalid character code: {describe_value(value)}")
        if not 0 <= code <= 255:
            raise OutOfRangeError(f"Character code out of range 0-255: {code}")
        return chr(code)

    def decode(self, value: str) -> int:
        if not isinstance(value, str) or len(value) != 1:
            raise InvalidInputError(f"Invalid character: {describe_value(value)}")
        code = ord(value)
        if code > 255:
            raise OutOfRangeError(f"Character code out of range 0-255: {code}")
        return code

    def __repr__(self) -> str:
        return "NumberToChar()"


class StringToNumber(Codec[str, Number]):
    """Numeric text <-> number.

    Without a radix, text is parsed as an int when it is one and as a float
    otherwise. With a radix (2-36), text is parsed as an integer in that base
    and numbers are written back in it using lowercase digits.

    Examples:
        >>> StringToNumber().encode("3.5")
        3.5
        >>> StringToNumber(16).encode("ff")
        255
        >>> StringToNumber(16).decode(255)
        'ff'
    """

    def __init__(self, radix: Optional[int] = None) -> None:
        if radix is not None and (
            isinstance(radix, bool) or not isinstance(radix, int) or not 2 <= radix <= 36
        ):
            raise ConfigurationError(f"Radix must be an integer from 2 to 36: {radix!r}")
        self.radix = radix

    def encode(self, value: str) -> Number:
        text = require_str(value)
        try:
            if self.radix is None:
                return _parse_decimal(text)
            return int(text, self.radix)
        except ValueError as err:
            raise FormatError(f"Not a number: {describe_value(text)}") from err

    def decode(self, value: Number) -> str:
        number = require_number(value)
        if self.radix is None:
            return repr(number)
        if isinstance(number, float):
            if not number.is_integer():
                raise InvalidInputError(
                    f"Radix {self.radix} requires an integer: {describe_value(number)}"
                )
            number = int(number)
        return _to_radix(number, self.radix)

    def __repr__(self) -> str:
        return f"StringToNumber({self.radix!r})"


def _parse_decimal(text: str) -> Number:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _to_radix(number: int, radix: int) -> str:
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = []
    while number:
        number, remainder = divmod(number, radix)
        digits.append(_DIGITS[remainder])
    return sign + "".join(reversed(digits))

