"""Bytes <-> list of byte values."""

from __future__ import annotations

from ..codec.base import Codec
from ..exceptions import OutOfRangeError
from ..utils.validation import require_bytes, require_list, require_number


class BytesToList(Codec[bytes, list[int]]):
    """Bytes-like object <-> list of ints in 0-255.

    Example:
        >>> BytesToList().encode(b"Hi")
        [72, 105]
        >>> BytesToList().decode([72, 105])
        b'Hi'
    """

    def encode(self, value: bytes) -> list[int]:
        return list(require_bytes(value))

    def decode(self, value: list[int]) -> bytes:
        numbers = require_list(value)
        for index, number in enumerate(numbers):
            require_number(number, f"byte at index {index}")
            if not isinstance(number, int) or not 0 <= number <= 255:
                raise OutOfRangeError(f"Byte at index {index} out of range 0-255: {number!r}")
        return bytes(numbers)

    def __repr__(self) -> str:
        return "BytesToList()"
