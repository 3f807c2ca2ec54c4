"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from codecchain.crypto import CryptoProvider, KeyDerivationConfig
from codecchain.crypto.provider import _reset_crypto_provider


@pytest.fixture
def hex_alphabet() -> str:
    """Uppercase hexadecimal digit set."""
    return "0123456789ABCDEF"


@pytest.fixture
def fast_provider() -> CryptoProvider:
    """Crypto provider with a low PBKDF2 iteration count for quick tests."""
    return CryptoProvider(KeyDerivationConfig(iterations=1000))


@pytest.fixture
def fresh_provider_state() -> Iterator[None]:
    """Clear the process-wide crypto provider before and after a test."""
    _reset_crypto_provider()
    yield
    _reset_crypto_provider()
