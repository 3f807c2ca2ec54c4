"""Cantor pairing: a bijection between pairs of naturals and naturals.

    pi(x, y) = (x + y)(x + y + 1) / 2 + y

The product ``(x + y)(x + y + 1)`` is always even, so the division is exact.
The inverse is total over the non-negative integers:

    w = floor((sqrt(8z + 1) - 1) / 2)
    t = (w^2 + w) / 2
    y = z - t
    x = w - y

``math.isqrt`` keeps the inverse exact for arbitrarily large ``z``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from ..codec.base import Codec
from ..exceptions import CodecError, FormatError
from ..utils.display import describe_value
from ..utils.validation import require_list, require_natural

Pair = tuple[int, int]


def cantor_pair(x: int, y: int) -> int:
    """Map a pair of non-negative integers to a single non-negative integer."""
    total = x + y
    return total * (total + 1) // 2 + y


def cantor_unpair(z: int) -> Pair:
    """Recover the pair that :func:`cantor_pair` maps to ``z``."""
    w = (math.isqrt(8 * z + 1) - 1) // 2
    t = (w * w + w) // 2
    y = z - t
    x = w - y
    return x, y


class CantorPair(Codec[Sequence[int], Pair]):
    """Ordered pair ``[x, y]`` <-> single integer, via Cantor pairing.

    The mapping is not commutative and is strictly increasing in each argument.

    Examples:
        >>> cantor = CantorPair()
        >>> cantor.encode([1, 2])
        8
        >>> cantor.decode(8)
        (1, 2)
        >>> cantor.encode([0, 5]), cantor.encode([5, 0])
        (20, 15)
    """

    def encode(self, value: Sequence[int]) -> int:
        """Pair two non-negative integers.

        Raises:
            FormatError: If value is not a two-element sequence
            InvalidInputError: If an element is not an integer
            OutOfRangeError: If an element is negative
        """
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
            raise FormatError(f"Invalid number pair: {describe_value(value)}")
        x = require_natural(value[0], "pair element")
        y = require_natural(value[1], "pair element")
        return cantor_pair(x, y)

    def decode(self, value: int) -> Pair:
        """Unpair a non-negative integer.

        Raises:
            InvalidInputError: If value is not an integer
            OutOfRangeError: If value is negative
        """
        return cantor_unpair(require_natural(value, "paired value"))

    def __repr__(self) -> str:
        return "CantorPair()"


class CantorPairArray(Codec[Sequence[Sequence[int]], list[int]]):
    """List of pairs <-> list of integers, element-wise Cantor pairing.

    Order is preserved. A malformed element fails the whole batch with an error
    of the same kind whose message names the element's index.

    Example:
        >>> CantorPairArray().encode([[1, 2], [3, 4], [5, 6]])
        [8, 32, 72]
    """

    def __init__(self) -> None:
        self.pair = CantorPair()

    def encode(self, value: Sequence[Sequence[int]]) -> list[int]:
        pairs = require_list(value)
        return [self._at(index, "pair", self.pair.encode, pair) for index, pair in enumerate(pairs)]

    def decode(self, value: list[int]) -> list[Pair]:
        numbers = require_list(value)
        return [
            self._at(index, "number", self.pair.decode, number)
            for index, number in enumerate(numbers)
        ]

    @staticmethod
    def _at(index: int, what: str, operation: Any, element: Any) -> Any:
        try:
            return operation(element)
        except CodecError as err:
            raise type(err)(
                f"Invalid {what} at index {index}: {describe_value(element)} ({err})"
            ) from err

    def __repr__(self) -> str:
        return "CantorPairArray()"
