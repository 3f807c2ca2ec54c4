"""Input checks shared by the built-in codecs.

Every helper either returns the checked value or raises the matching
codecchain exception with a message naming the offending value.
"""

from __future__ import annotations

import math
from typing import Any

from ..exceptions import InvalidInputError, OutOfRangeError
from .display import describe_value

# Largest integer a 64-bit float represents exactly (2**53 - 1).
MAX_SAFE_INTEGER = 9_007_199_254_740_991


def require_str(value: Any, what: str = "string") -> str:
    """Return ``value`` if it is a ``str``.

    Raises:
        InvalidInputError: If value is not a string
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"Invalid {what}: {describe_value(value)}")
    return value


def require_number(value: Any, what: str = "number") -> int | float:
    """Return ``value`` if it is an ``int`` or ``float``.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Raises:
        InvalidInputError: If value is not numeric
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"Invalid {what}: {describe_value(value)}")
    return value


def require_list(value: Any, what: str = "array") -> list[Any]:
    """Return ``value`` if it is a ``list`` or ``tuple``, as a list.

    Raises:
        InvalidInputError: If value is not a list or tuple
    """
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError(f"Invalid {what}: {describe_value(value)}")
    return list(value)


def require_bytes(value: Any, what: str = "buffer") -> bytes:
    """Return ``value`` as ``bytes`` if it is bytes-like.

    Raises:
        InvalidInputError: If value is not bytes, bytearray or memoryview
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidInputError(f"Invalid {what}: {describe_value(value)}")
    return bytes(value)


def require_natural(value: Any, what: str = "integer") -> int:
    """Return ``value`` as a non-negative ``int``.

    Integral floats (``3.0``) are accepted and converted.

    Raises:
        InvalidInputError: If value is not numeric or not integral
        OutOfRangeError: If value is negative or not finite
    """
    number = require_number(value, what)
    if isinstance(number, float):
        if not math.isfinite(number):
            raise OutOfRangeError(f"{what.capitalize()} must be finite: {number}")
        if not number.is_integer():
            raise InvalidInputError(f"Invalid {what}: {describe_value(value)}")
        number = int(number)
    if number < 0:
        raise OutOfRangeError(f"{what.capitalize()} must be non-negative: {number}")
    return number
