"""Codec interfaces and composition for codecchain.

This module provides the synchronous and asynchronous codec contracts together
with the engine that chains, reverses and composes them.
"""

from __future__ import annotations

from .base import (
    AsyncChainedCodec,
    AsyncCodec,
    AsyncFunctionCodec,
    AsyncReversedCodec,
    ChainedCodec,
    Codec,
    FunctionCodec,
    ReversedCodec,
)
from .pipeline import compose

__all__ = [
    "Codec",
    "AsyncCodec",
    "FunctionCodec",
    "AsyncFunctionCodec",
    "ChainedCodec",
    "AsyncChainedCodec",
    "ReversedCodec",
    "AsyncReversedCodec",
    "compose",
]
