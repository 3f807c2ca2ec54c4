"""Format-preserving encryption stage.

Delegates to the ``ff3`` package (NIST FF3-1), installed with the ``fpe``
extra::

    pip install codecchain[fpe]

Ciphertext has the same length as the plaintext and uses only symbols from the
configured alphabet. Library limits apply on top of the optional bounds given
here: ``ff3`` requires ``len(alphabet) ** length >= 1_000_000`` (6 digits for a
decimal alphabet) and rejects symbols outside the alphabet. Its errors
propagate unchanged.
"""

from __future__ import annotations

import logging
import string
from typing import Any, Optional, Union

from ..codec.base import Codec
from ..exceptions import ConfigurationError, OutOfRangeError
from ..utils.display import describe_value
from ..utils.validation import require_str

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

KeyLike = Union[str, bytes]


class FormatPreservingCipher(Codec[str, str]):
    """Text over an alphabet <-> ciphertext over the same alphabet.

    Args:
        key: AES key as a hex string or raw bytes (16, 24 or 32 bytes)
        tweak: Tweak as a hex string or raw bytes (7 bytes for FF3-1, 8 for FF3)
        alphabet: Symbol set of plaintext and ciphertext (default 0-9a-zA-Z)
        min_length: Optional minimum input length
        max_length: Optional maximum input length

    Raises:
        ConfigurationError: If the alphabet has duplicate symbols, the bounds are
            inconsistent, or the ``ff3`` package is not installed

    Example:
        >>> card = FormatPreservingCipher(
        ...     "EF4359D8D580AA4F7F036D6F04FC6A94", "D8E7920AFA330A73", alphabet="0123456789"
        ... )
        >>> token = card.encode("4000001234567899")
        >>> len(token), token.isdigit()
        (16, True)
        >>> card.decode(token)
        '4000001234567899'
    """

    def __init__(
        self,
        key: KeyLike,
        tweak: KeyLike,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> None:
        if not isinstance(alphabet, str) or len(alphabet) < 2:
            raise ConfigurationError(
                f"Alphabet must be a string of at least 2 characters: {describe_value(alphabet)}"
            )
        if len(set(alphabet)) != len(alphabet):
            raise ConfigurationError("Alphabet must contain unique characters")

        for name, bound in (("min_length", min_length), ("max_length", max_length)):
            if bound is not None and (
                isinstance(bound, bool) or not isinstance(bound, int) or bound < 1
            ):
                raise ConfigurationError(f"{name} must be a positive integer: {bound!r}")
        if min_length is not None and max_length is not None and min_length > max_length:
            raise ConfigurationError(
                f"min_length ({min_length}) cannot exceed max_length ({max_length})"
            )

        self.alphabet = alphabet
        self.min_length = min_length
        self.max_length = max_length
        self._cipher = _load_cipher(_to_hex(key, "key"), _to_hex(tweak, "tweak"), alphabet)

    def encode(self, value: str) -> str:
        return self._cipher.encrypt(self._check_length(require_str(value)))

    def decode(self, value: str) -> str:
        return self._cipher.decrypt(self._check_length(require_str(value)))

    def _check_length(self, text: str) -> str:
        if self.min_length is not None and len(text) < self.min_length:
            raise OutOfRangeError(
                f"Input length {len(text)} is below the minimum of {self.min_length}"
            )
        if self.max_length is not None and len(text) > self.max_length:
            raise OutOfRangeError(
                f"Input length {len(text)} exceeds the maximum of {self.max_length}"
            )
        return text

    def __repr__(self) -> str:
        return f"FormatPreservingCipher(alphabet={self.alphabet!r})"


def _to_hex(value: KeyLike, what: str) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, str):
        return value
    raise ConfigurationError(
        f"{what.capitalize()} must be a hex string or bytes: {describe_value(value)}"
    )


def _load_cipher(key_hex: str, tweak_hex: str, alphabet: str) -> Any:
    try:
        from ff3 import FF3Cipher
    except ImportError as err:
        raise ConfigurationError(
            "Format-preserving encryption requires the 'ff3' package "
            "(pip install codecchain[fpe])"
        ) from err

    logger.debug("Creating FF3-1 cipher over a %d-symbol alphabet", len(alphabet))
    return FF3Cipher.withCustomAlphabet(key_hex, tweak_hex, alphabet)
