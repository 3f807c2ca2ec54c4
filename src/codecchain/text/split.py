"""Splitting text into lists and joining lists into text."""

from __future__ import annotations

from typing import Union

from ..codec.base import Codec
from ..exceptions import ConfigurationError, FormatError
from ..utils.display import describe_value
from ..utils.validation import require_list, require_number, require_str

Number = Union[int, float]


class StringSplit(Codec[str, list[str]]):
    """Text <-> list of parts around a delimiter.

    Example:
        >>> StringSplit(",").encode("a,b,c")
        ['a', 'b', 'c']
    """

    def __init__(self, delimiter: str) -> None:
        if not isinstance(delimiter, str) or not delimiter:
            raise ConfigurationError(
                f"Delimiter must be a non-empty string: {describe_value(delimiter)}"
            )
        self.delimiter = delimiter

    def encode(self, value: str) -> list[str]:
        return require_str(value).split(self.delimiter)

    def decode(self, value: list[str]) -> str:
        parts = require_list(value)
        for index, part in enumerate(parts):
            require_str(part, f"part at index {index}")
        return self.delimiter.join(parts)

    def __repr__(self) -> str:
        return f"StringSplit({self.delimiter!r})"


class ArrayJoin(Codec[list[Number], str]):
    """List of numbers <-> text.

    With the default empty separator every element must be a single digit
    (0-9) and the text is decoded one character per element. With a separator,
    each part is parsed as an int, or as a float when it is not an int.

    Examples:
        >>> ArrayJoin().encode([1, 2, 3])
        '123'
        >>> ArrayJoin(",").decode("1,2.5")
        [1, 2.5]
    """

    def __init__(self, separator: str = "") -> None:
        if not isinstance(separator, str):
            raise ConfigurationError(f"Separator must be a string: {describe_value(separator)}")
        self.separator = separator

    def encode(self, value: list[Number]) -> str:
        numbers = require_list(value)
        for index, number in enumerate(numbers):
            require_number(number, f"number at index {index}")
        return self.separator.join(str(number) for number in numbers)

    def decode(self, value: str) -> list[Number]:
        text = require_str(value)
        if self.separator == "":
            return [_parse_digit(char) for char in text]
        if not text:
            return []
        return [_parse_part(part) for part in text.split(self.separator)]

    def __repr__(self) -> str:
        return f"ArrayJoin({self.separator!r})"


def _parse_digit(char: str) -> int:
    if char not in "0123456789":
        raise FormatError(f"Invalid digit character: {char!r}")
    return int(char)


def _parse_part(part: str) -> Number:
    try:
        return int(part)
    except ValueError:
        pass
    try:
        return float(part)
    except ValueError as err:
        raise FormatError(f"Invalid number part: {describe_value(part)}") from err
