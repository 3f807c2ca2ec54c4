"""Exception hierarchy for codecchain.

This module defines all custom exceptions raised by the built-in codecs.
All exceptions inherit from CodecError for easy catching of any codecchain-specific error.

Errors raised by delegated stages (``cryptography``, ``ff3``) are not part of this
hierarchy. They propagate through pipelines unchanged.
"""

from __future__ import annotations


class CodecError(Exception):
    """Base exception for all codecchain errors."""

    pass


class ConfigurationError(CodecError):
    """Raised when a codec is constructed with invalid static configuration.

    Raised at construction time, before any data flows.

    Examples:
        - Alphabet shorter than 2 symbols or containing duplicates
        - Non-positive maximum length or chunk size
        - Empty fill string
        - Zero multiplier or exponent
    """

    pass


class InvalidInputError(CodecError):
    """Raised when a value of the wrong type or shape reaches a codec.

    Examples:
        - Non-string passed to a string codec
        - Non-list passed to a batch codec
        - Boolean passed where a number is required
    """

    pass


class OutOfRangeError(CodecError):
    """Raised when a value lies outside the domain a codec can represent.

    Examples:
        - Negative number where a non-negative one is required
        - Number above the exactly representable integer range (2**53 - 1)
        - Character code outside 0-255
    """

    pass


class FormatError(CodecError):
    """Raised when input does not follow the format a codec expects.

    Examples:
        - Symbol not found in the alphabet
        - Pair with the wrong number of elements
        - Empty string where content is required
        - Ciphertext blob too short to hold a nonce and tag
    """

    pass
