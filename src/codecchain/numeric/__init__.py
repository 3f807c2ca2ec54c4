"""Numeric codecs: numeral charsets, Cantor pairing and reversible arithmetic."""

from __future__ import annotations

from .arithmetic import Add, Multiply, Power
from .cantor import CantorPair, CantorPairArray, cantor_pair, cantor_unpair
from .charset import NumberArrayCharset, NumberCharset, validate_alphabet

__all__ = [
    "NumberCharset",
    "NumberArrayCharset",
    "validate_alphabet",
    "CantorPair",
    "CantorPairArray",
    "cantor_pair",
    "cantor_unpair",
    "Add",
    "Multiply",
    "Power",
]
