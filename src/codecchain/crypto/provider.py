"""Process-wide handle to the cryptographic primitives.

The provider wraps the ``cryptography`` package: random bytes, PBKDF2 key
derivation and AES-GCM. One instance is created lazily on first use and shared
for the lifetime of the process. It holds configuration only, so concurrent use
needs no locking once it exists.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..exceptions import ConfigurationError
from ..utils.display import describe_value
from .config import KeyDerivationConfig

logger = logging.getLogger(__name__)

KeyMaterial = Union[str, bytes, bytearray, memoryview]

_HASHES = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


class CryptoProvider:
    """Random bytes, key derivation and AES-GCM behind one small surface.

    Args:
        config: Key derivation parameters (default: ``KeyDerivationConfig()``)

    Example:
        >>> provider = CryptoProvider(KeyDerivationConfig(iterations=1000))
        >>> key = provider.derive_key("correct horse battery staple")
        >>> nonce = provider.random_bytes(12)
        >>> blob = provider.encrypt(key, nonce, b"hello")
        >>> provider.decrypt(key, nonce, blob)
        b'hello'
    """

    def __init__(self, config: Optional[KeyDerivationConfig] = None) -> None:
        self.config = config or KeyDerivationConfig()

    def random_bytes(self, size: int) -> bytes:
        """Return ``size`` cryptographically random bytes."""
        return os.urandom(size)

    def derive_key(self, key_material: KeyMaterial, salt: Optional[bytes] = None) -> bytes:
        """Derive a symmetric key with PBKDF2-HMAC.

        Args:
            key_material: Password text (UTF-8 encoded) or raw bytes
            salt: Salt bytes; ``config.default_salt`` when omitted

        Returns:
            ``config.key_length`` bytes suitable for AES-GCM

        Raises:
            ConfigurationError: If key_material or salt has the wrong type
        """
        if isinstance(key_material, str):
            material = key_material.encode("utf-8")
        elif isinstance(key_material, (bytes, bytearray, memoryview)):
            material = bytes(key_material)
        else:
            raise ConfigurationError(
                f"Key material must be text or bytes: {describe_value(key_material)}"
            )

        if salt is None:
            salt = self.config.default_salt
        elif not isinstance(salt, (bytes, bytearray, memoryview)):
            raise ConfigurationError(f"Salt must be bytes: {describe_value(salt)}")

        logger.debug(
            "Deriving %d-byte key with PBKDF2-%s (%d iterations)",
            self.config.key_length,
            self.config.hash_name,
            self.config.iterations,
        )
        kdf = PBKDF2HMAC(
            algorithm=_HASHES[self.config.hash_name](),
            length=self.config.key_length,
            salt=bytes(salt),
            iterations=self.config.iterations,
        )
        return kdf.derive(material)

    def encrypt(
        self, key: bytes, nonce: bytes, plaintext: bytes, associated_data: Optional[bytes] = None
    ) -> bytes:
        """AES-GCM encrypt; returns ciphertext with the 16-byte tag appended."""
        return AESGCM(key).encrypt(nonce, plaintext, associated_data)

    def decrypt(
        self, key: bytes, nonce: bytes, ciphertext: bytes, associated_data: Optional[bytes] = None
    ) -> bytes:
        """AES-GCM decrypt.

        Raises:
            cryptography.exceptions.InvalidTag: If authentication fails
        """
        return AESGCM(key).decrypt(nonce, ciphertext, associated_data)


_provider: Optional[CryptoProvider] = None
_provider_lock = threading.Lock()


def get_crypto_provider() -> CryptoProvider:
    """Return the process-wide provider, creating it on first call."""
    global _provider
    if _provider is None:
        with _provider_lock:
            if _provider is None:
                logger.debug("Initializing process-wide crypto provider")
                _provider = CryptoProvider()
    return _provider


def _reset_crypto_provider() -> None:
    """Drop the process-wide provider so the next call creates a fresh one.

    Intended for tests.
    """
    global _provider
    with _provider_lock:
        _provider = None
