"""End-to-end integration tests."""

from __future__ import annotations

import asyncio

import pytest
from cryptography.exceptions import InvalidTag
from pydantic import BaseModel, Field

from codecchain import (
    Add,
    AesGcm,
    ArrayFlatten,
    BytesToList,
    CantorPairArray,
    CryptoProvider,
    Json,
    Multiply,
    NumberArrayCharset,
    NumberCharset,
    NumberToChar,
    OutOfRangeError,
    PadStart,
    StringToBytes,
    compose,
)


class SessionToken(BaseModel):
    """Token payload carried through the secure pipeline."""

    user_id: int = Field(ge=0)
    scopes: list[str]
    admin: bool = False


class TestEndToEndWorkflow:
    """Test complete pipelines."""

    def test_temperature_workflow(self) -> None:
        """Test Celsius to Fahrenheit and back."""
        # 1. Build the pipeline
        fahrenheit = Multiply(1.8).chain(Add(32))

        # 2. Encode known points
        assert fahrenheit.encode(0) == pytest.approx(32)
        assert fahrenheit.encode(100) == pytest.approx(212)
        assert fahrenheit.encode(-40) == pytest.approx(-40)

        # 3. Reverse gives Fahrenheit to Celsius
        celsius = fahrenheit.reversed()
        assert celsius.encode(212) == pytest.approx(100)

    def test_compact_id_workflow(self) -> None:
        """Test pairs of ids packed into short fixed-width text ids."""
        # 1. Pair (shard, row) ids, then write each as base-36 numerals
        alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        pipeline = CantorPairArray().chain(NumberArrayCharset(alphabet, min_length=4))

        # 2. Encode a batch
        encoded = pipeline.encode([[3, 17], [0, 0], [12, 999]])
        assert encoded.count("|") == 2
        assert all(len(part) >= 4 for part in encoded.split("|"))

        # 3. Decode restores the batch in order
        assert pipeline.decode(encoded) == [(3, 17), (0, 0), (12, 999)]

    def test_serial_number_workflow(self) -> None:
        """Test numbers written as zero-padded hex serials."""
        serial = compose(NumberCharset("0123456789ABCDEF"), PadStart(8, "0"))

        assert serial.encode(48879) == "0000BEEF"
        assert serial.decode("0000BEEF") == 48879

    def test_bytes_workflow(self) -> None:
        """Test text to byte pairs and back."""
        pipeline = compose(StringToBytes(), BytesToList(), ArrayFlatten(2).reversed())

        assert pipeline.encode("Hi!") == [[72, 105], [33]]
        assert pipeline.decode([[72, 105], [33]]) == "Hi!"

    def test_reversed_stage_in_pipeline(self) -> None:
        """Test a reversed codec used as a forward stage."""
        to_char = NumberToChar()
        pipeline = compose(to_char.reversed(), NumberCharset("01", min_length=8))

        assert pipeline.encode("A") == "01000001"
        assert pipeline.decode("01000001") == "A"


class TestSecurePipeline:
    """Test typed payloads through authenticated encryption."""

    def test_model_roundtrip(self, fast_provider: CryptoProvider) -> None:
        """Test model to JSON to AES-GCM and back."""

        async def run() -> SessionToken:
            # 1. Derive the key off the event loop
            cipher = await AesGcm.create("pipeline secret", provider=fast_provider)

            # 2. Build a mixed sync/async pipeline
            pipeline = Json(SessionToken).chain_async(cipher)

            # 3. Encrypt and decrypt
            token = SessionToken(user_id=7, scopes=["read", "write"])
            blob = await pipeline.encode(token)
            assert b"read" not in blob
            return await pipeline.decode(blob)

        assert asyncio.run(run()) == SessionToken(user_id=7, scopes=["read", "write"])

    def test_printable_ciphertext(self, fast_provider: CryptoProvider) -> None:
        """Test ciphertext written as colon-separated hex bytes."""

        async def run() -> None:
            cipher = await AesGcm.create("pipeline secret", provider=fast_provider)
            hex_bytes = NumberArrayCharset("0123456789abcdef", min_length=2, separator=":")
            pipeline = compose(cipher, BytesToList(), hex_bytes)

            text = await pipeline.encode("payload")
            assert len(text.split(":")) == 12 + len("payload") + 16
            assert await pipeline.decode(text) == "payload"

        asyncio.run(run())

    def test_tampered_token(self, fast_provider: CryptoProvider) -> None:
        """Test tampering surfaces the authentication failure."""

        async def run() -> None:
            cipher = await AesGcm.create("pipeline secret", provider=fast_provider)
            pipeline = Json(SessionToken).chain_async(cipher)

            blob = bytearray(await pipeline.encode(SessionToken(user_id=1, scopes=[])))
            blob[-1] ^= 0xFF

            with pytest.raises(InvalidTag):
                await pipeline.decode(bytes(blob))

        asyncio.run(run())


class TestFailurePropagation:
    """Test failures surface from deep inside pipelines."""

    def test_out_of_range_deep_in_pipeline(self) -> None:
        """Test a negative number reaching the numeral stage."""
        pipeline = compose(Add(-100), NumberCharset("0123456789"), PadStart(6, "0"))

        assert pipeline.encode(142) == "000042"
        with pytest.raises(OutOfRangeError):
            pipeline.encode(50)

    def test_bad_batch_element(self) -> None:
        """Test the failing element index reaches the caller."""
        pipeline = CantorPairArray().chain(NumberArrayCharset("0123456789"))

        with pytest.raises(OutOfRangeError, match="index 1"):
            pipeline.encode([[1, 2], [-1, 2]])
