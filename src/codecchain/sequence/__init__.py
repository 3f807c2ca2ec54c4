"""Sequence codecs: chunking, flattening and byte lists."""

from __future__ import annotations

from .buffer import BytesToList
from .chunk import ArrayFlatten, ArraySplit

__all__ = [
    "ArraySplit",
    "ArrayFlatten",
    "BytesToList",
]
