"""Reversible arithmetic on numbers.

These codecs round-trip within floating-point tolerance only: ``Multiply(1.8)``
followed by its decode can differ from the input in the last bits.
"""

from __future__ import annotations

from typing import Union

from ..codec.base import Codec
from ..exceptions import ConfigurationError, OutOfRangeError
from ..utils.display import describe_value
from ..utils.validation import require_number

Number = Union[int, float]


def _check_constant(value: object, what: str) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{what} must be a number: {describe_value(value)}")
    return value


class Add(Codec[Number, Number]):
    """Add a constant on encode, subtract it on decode.

    Example:
        >>> offset = Add(32)
        >>> offset.encode(25)
        57
        >>> offset.decode(57)
        25
    """

    def __init__(self, addend: Number) -> None:
        self.addend = _check_constant(addend, "Addend")

    def encode(self, value: Number) -> Number:
        return require_number(value) + self.addend

    def decode(self, value: Number) -> Number:
        return require_number(value) - self.addend

    def __repr__(self) -> str:
        return f"Add({self.addend!r})"


class Multiply(Codec[Number, Number]):
    """Multiply by a non-zero constant on encode, divide on decode.

    Raises:
        ConfigurationError: If the multiplier is zero
    """

    def __init__(self, multiplier: Number) -> None:
        self.multiplier = _check_constant(multiplier, "Multiplier")
        if multiplier == 0:
            raise ConfigurationError("Multiplier cannot be zero")

    def encode(self, value: Number) -> Number:
        return require_number(value) * self.multiplier

    def decode(self, value: Number) -> float:
        return require_number(value) / self.multiplier

    def __repr__(self) -> str:
        return f"Multiply({self.multiplier!r})"


class Power(Codec[Number, float]):
    """Raise to a non-zero exponent on encode, take the matching root on decode.

    Even exponents are only invertible on non-negative numbers, so negative
    inputs are rejected in both directions. Odd exponents keep the sign:
    decoding a negative value returns the negative real root.

    Raises:
        ConfigurationError: If the exponent is zero

    Example:
        >>> square = Power(2)
        >>> square.encode(3)
        9
        >>> square.decode(9)
        3.0
    """

    def __init__(self, exponent: Number) -> None:
        self.exponent = _check_constant(exponent, "Exponent")
        if exponent == 0:
            raise ConfigurationError("Exponent cannot be 0")
        self._even = exponent % 2 == 0

    def encode(self, value: Number) -> Number:
        number = require_number(value)
        self._check_sign(number)
        return number**self.exponent

    def decode(self, value: Number) -> float:
        number = require_number(value)
        self._check_sign(number)
        if number < 0:
            return -(abs(number) ** (1 / self.exponent))
        return number ** (1 / self.exponent)

    def _check_sign(self, number: Number) -> None:
        if self._even and number < 0:
            raise OutOfRangeError(
                f"Even exponents ({self.exponent}) require non-negative inputs: {number}"
            )

    def __repr__(self) -> str:
        return f"Power({self.exponent!r})"
