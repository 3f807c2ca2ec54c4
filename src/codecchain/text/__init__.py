"""Text codecs: padding, splitting, conversions and serialization."""

from __future__ import annotations

from .clean import StringClean, StringSeparator
from .convert import Base64, NumberToChar, StringToBytes, StringToNumber, Uri
from .json_codec import Json
from .pad import PadEnd, PadStart
from .split import ArrayJoin, StringSplit

__all__ = [
    "PadStart",
    "PadEnd",
    "StringSplit",
    "ArrayJoin",
    "StringToBytes",
    "StringToNumber",
    "NumberToChar",
    "Base64",
    "Uri",
    "Json",
    "StringClean",
    "StringSeparator",
]
