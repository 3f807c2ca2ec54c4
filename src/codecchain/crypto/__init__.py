"""Delegated cryptographic stages.

- AesGcm: authenticated encryption (async codec) over the ``cryptography`` package
- FormatPreservingCipher: FF3-1 format-preserving encryption over the ``ff3`` package
- CryptoProvider: process-wide handle to random bytes, PBKDF2 and AES-GCM
"""

from __future__ import annotations

from .aes_gcm import NONCE_SIZE, TAG_SIZE, AesGcm
from .config import KeyDerivationConfig
from .fpe import DEFAULT_ALPHABET, FormatPreservingCipher
from .provider import CryptoProvider, get_crypto_provider

__all__ = [
    "AesGcm",
    "NONCE_SIZE",
    "TAG_SIZE",
    "FormatPreservingCipher",
    "DEFAULT_ALPHABET",
    "CryptoProvider",
    "KeyDerivationConfig",
    "get_crypto_provider",
]
