"""Authenticated encryption stage (AES-GCM).

Wire format of an encoded value::

    [nonce (12 bytes)] [ciphertext] [tag (16 bytes)]

A fresh random nonce is drawn for every encode, so encoding the same text twice
gives different bytes. Decoding tampered data raises
``cryptography.exceptions.InvalidTag``, which is passed through unchanged.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from ..codec.base import AsyncCodec
from ..exceptions import ConfigurationError, FormatError
from ..utils.validation import require_bytes, require_str
from .provider import CryptoProvider, KeyMaterial, get_crypto_provider

NONCE_SIZE = 12
TAG_SIZE = 16


class AesGcm(AsyncCodec[str, bytes]):
    """Text <-> nonce-prefixed AES-GCM ciphertext.

    Build instances with :meth:`create`, which derives the key from key material
    off the event loop. The constructor takes an already derived key.

    Args:
        key: Raw AES key (16, 24 or 32 bytes)
        provider: Crypto provider (default: the process-wide provider)

    Raises:
        ConfigurationError: If the key has an invalid length

    Examples:
        ```python
        import asyncio
        from codecchain import AesGcm, Json

        async def main():
            cipher = await AesGcm.create("a" * 32)
            pipeline = Json().chain_async(cipher)

            blob = await pipeline.encode({"user": 42})
            assert await pipeline.decode(blob) == {"user": 42}

        asyncio.run(main())
        ```
    """

    def __init__(self, key: bytes, provider: Optional[CryptoProvider] = None) -> None:
        if not isinstance(key, (bytes, bytearray)) or len(key) not in (16, 24, 32):
            raise ConfigurationError("AES key must be 16, 24 or 32 bytes")
        self._key = bytes(key)
        self._provider = provider or get_crypto_provider()

    @classmethod
    async def create(
        cls,
        key_material: KeyMaterial,
        salt: Optional[bytes] = None,
        provider: Optional[CryptoProvider] = None,
    ) -> AesGcm:
        """Derive a key from ``key_material`` and build the codec.

        Args:
            key_material: Password text or raw bytes
            salt: Optional salt; the provider's default salt when omitted
            provider: Crypto provider (default: the process-wide provider)
        """
        provider = provider or get_crypto_provider()
        key = await asyncio.to_thread(provider.derive_key, key_material, salt)
        return cls(key, provider)

    async def encode(self, value: str) -> bytes:
        plaintext = require_str(value).encode("utf-8")
        nonce = self._provider.random_bytes(NONCE_SIZE)
        return nonce + self._provider.encrypt(self._key, nonce, plaintext)

    async def decode(self, value: bytes) -> str:
        blob = require_bytes(value)
        if len(blob) < NONCE_SIZE + TAG_SIZE:
            raise FormatError(
                f"Ciphertext too short: need at least {NONCE_SIZE + TAG_SIZE} bytes, "
                f"got {len(blob)} bytes"
            )
        nonce, ciphertext = blob[:NONCE_SIZE], blob[NONCE_SIZE:]
        plaintext = self._provider.decrypt(self._key, nonce, ciphertext)
        return plaintext.decode("utf-8")

    def __repr__(self) -> str:
        return f"AesGcm(<{len(self._key) * 8}-bit key>)"
