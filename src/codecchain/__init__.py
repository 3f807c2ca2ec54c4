"""codecchain: Invertible Codec Pipelines

A Python library of invertible data transformations ("codecs") that compose into
pipelines. Every codec has an ``encode`` and an exact inverse ``decode``;
chaining codecs yields a codec whose ``decode`` undoes every step in reverse
order, so ``decode(encode(x)) == x`` holds for the whole pipeline.

Key Features:
- Synchronous and asynchronous composition (chain, chain_async, reversed)
- Numeral encoding over arbitrary alphabets
- Cantor pairing of integer pairs, scalar and batch
- Fixed-length padding with a documented ambiguity rule
- Authenticated encryption (AES-GCM) and format-preserving encryption stages
- Eager, descriptive failures instead of silent corruption

Quick Start:
    >>> from codecchain import CantorPairArray, NumberArrayCharset, PadStart, compose
    >>> ids = CantorPairArray().chain(NumberArrayCharset("0123456789ABCDEF"))
    >>> ids.encode([[1, 2], [3, 4]])
    '8|20'
    >>> ids.decode("8|20")
    [(1, 2), (3, 4)]
    >>>
    >>> serial = compose(PadStart(6, "0"))
    >>> serial.encode("42")
    '000042'
"""

from __future__ import annotations

from .codec import (
    AsyncChainedCodec,
    AsyncCodec,
    AsyncFunctionCodec,
    AsyncReversedCodec,
    ChainedCodec,
    Codec,
    FunctionCodec,
    ReversedCodec,
    compose,
)
from .crypto import (
    AesGcm,
    CryptoProvider,
    FormatPreservingCipher,
    KeyDerivationConfig,
    get_crypto_provider,
)
from .exceptions import (
    CodecError,
    ConfigurationError,
    FormatError,
    InvalidInputError,
    OutOfRangeError,
)
from .numeric import (
    Add,
    CantorPair,
    CantorPairArray,
    Multiply,
    NumberArrayCharset,
    NumberCharset,
    Power,
)
from .sequence import ArrayFlatten, ArraySplit, BytesToList
from .text import (
    ArrayJoin,
    Base64,
    Json,
    NumberToChar,
    PadEnd,
    PadStart,
    StringClean,
    StringSeparator,
    StringSplit,
    StringToBytes,
    StringToNumber,
    Uri,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Codec",
    "AsyncCodec",
    "FunctionCodec",
    "AsyncFunctionCodec",
    "ChainedCodec",
    "AsyncChainedCodec",
    "ReversedCodec",
    "AsyncReversedCodec",
    "compose",
    # Numeric codecs
    "NumberCharset",
    "NumberArrayCharset",
    "CantorPair",
    "CantorPairArray",
    "Add",
    "Multiply",
    "Power",
    # Text codecs
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
    # Sequence codecs
    "ArraySplit",
    "ArrayFlatten",
    "BytesToList",
    # Crypto stages
    "AesGcm",
    "FormatPreservingCipher",
    "CryptoProvider",
    "KeyDerivationConfig",
    "get_crypto_provider",
    # Exceptions
    "CodecError",
    "ConfigurationError",
    "InvalidInputError",
    "OutOfRangeError",
    "FormatError",
    # Version
    "__version__",
]
