"""Configuration for key derivation.

This module provides the configuration dataclass used by the crypto provider
when turning caller key material into an AES key.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import ConfigurationError

SUPPORTED_HASHES = ("sha256", "sha384", "sha512")


@dataclass(frozen=True)
class KeyDerivationConfig:
    """PBKDF2 parameters for deriving AES-GCM keys.

    The defaults reproduce the key derivation used by earlier releases, so data
    encrypted with default settings stays decryptable.

    Attributes:
        iterations: PBKDF2 iteration count (default 100000).
            Higher values slow down brute-force attacks and key creation alike.

        key_length: Derived key size in bytes (default 32).
            - 16: AES-128
            - 24: AES-192
            - 32: AES-256

        default_salt: Salt used when the caller supplies none (default eight
            zero bytes). Supplying a per-application salt is recommended.

        hash_name: PBKDF2 PRF hash, one of "sha256", "sha384", "sha512"
            (default "sha256").

    Examples:
        ```python
        from codecchain.crypto import CryptoProvider, KeyDerivationConfig

        # Faster derivation for tests
        provider = CryptoProvider(KeyDerivationConfig(iterations=1000))

        # AES-128 keys with SHA-512 PBKDF2
        provider = CryptoProvider(KeyDerivationConfig(key_length=16, hash_name="sha512"))
        ```
    """

    iterations: int = 100_000
    key_length: int = 32
    default_salt: bytes = bytes(8)
    hash_name: str = "sha256"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise ConfigurationError(f"iterations must be an integer, got {self.iterations!r}")
        if self.iterations < 1:
            raise ConfigurationError(f"iterations must be >= 1, got {self.iterations}")

        if self.key_length not in (16, 24, 32):
            raise ConfigurationError(f"key_length must be 16, 24 or 32, got {self.key_length!r}")

        if not isinstance(self.default_salt, bytes):
            raise ConfigurationError(
                f"default_salt must be bytes, got {type(self.default_salt).__name__}"
            )

        if self.hash_name not in SUPPORTED_HASHES:
            raise ConfigurationError(
                f"hash_name must be one of {', '.join(SUPPORTED_HASHES)}, got {self.hash_name!r}"
            )
