"""Unit tests for sequence codecs."""

from __future__ import annotations

import pytest

from codecchain import (
    ArrayFlatten,
    ArraySplit,
    BytesToList,
    ConfigurationError,
    FormatError,
    InvalidInputError,
    OutOfRangeError,
)


class TestArraySplit:
    """Test chunking."""

    def test_even_split(self) -> None:
        """Test lists that divide evenly."""
        codec = ArraySplit(2)

        assert codec.encode([1, 2, 3, 4]) == [[1, 2], [3, 4]]
        assert codec.decode([[1, 2], [3, 4]]) == [1, 2, 3, 4]

    def test_short_last_chunk(self) -> None:
        """Test the last chunk may be shorter."""
        assert ArraySplit(2).encode([1, 2, 3, 4, 5]) == [[1, 2], [3, 4], [5]]

    def test_default_chunk_size(self) -> None:
        """Test chunk size 1."""
        assert ArraySplit().encode(["a", "b"]) == [["a"], ["b"]]

    def test_empty(self) -> None:
        """Test the empty list."""
        assert ArraySplit(3).encode([]) == []
        assert ArraySplit(3).decode([]) == []

    def test_decode_oversized_chunk(self) -> None:
        """Test a chunk longer than chunk_size names its index."""
        with pytest.raises(FormatError, match="at index 1"):
            ArraySplit(2).decode([[1, 2], [3, 4, 5]])

    def test_decode_non_list_chunk(self) -> None:
        """Test chunks must be lists."""
        with pytest.raises(InvalidInputError, match="chunk at index 0"):
            ArraySplit(2).decode([5])

    @pytest.mark.parametrize("chunk_size", [0, -1, 1.5, True])
    def test_bad_chunk_size(self, chunk_size: object) -> None:
        """Test chunk_size must be a positive integer."""
        with pytest.raises(ConfigurationError, match="Chunk size"):
            ArraySplit(chunk_size)  # type: ignore[arg-type]


class TestArrayFlatten:
    """Test flattening."""

    def test_round_trip(self) -> None:
        """Test flattening and re-chunking."""
        codec = ArrayFlatten(3)

        assert codec.encode([[1, 2, 3], [4]]) == [1, 2, 3, 4]
        assert codec.decode([1, 2, 3, 4]) == [[1, 2, 3], [4]]

    def test_mirror_of_split(self) -> None:
        """Test ArrayFlatten is ArraySplit reversed."""
        split = ArraySplit(2)
        flatten = ArrayFlatten(2)
        chunks = [[1, 2], [3]]

        assert flatten.encode(chunks) == split.decode(chunks)
        assert flatten.decode([1, 2, 3]) == split.encode([1, 2, 3])

    def test_oversized_chunk(self) -> None:
        """Test chunks larger than chunk_size are rejected."""
        with pytest.raises(FormatError, match="exceeds expected 2"):
            ArrayFlatten(2).encode([[1, 2, 3]])


class TestBytesToList:
    """Test byte lists."""

    def test_round_trip(self) -> None:
        """Test bytes <-> ints."""
        codec = BytesToList()

        assert codec.encode(b"Hi\x00\xff") == [72, 105, 0, 255]
        assert codec.decode([72, 105, 0, 255]) == b"Hi\x00\xff"

    def test_bytearray(self) -> None:
        """Test bytes-like input."""
        assert BytesToList().encode(bytearray(b"\x01\x02")) == [1, 2]

    @pytest.mark.parametrize("value", [[256], [-1], [1.0]])
    def test_decode_out_of_range(self, value: list[object]) -> None:
        """Test values that are not bytes."""
        with pytest.raises(OutOfRangeError, match="index 0"):
            BytesToList().decode(value)  # type: ignore[arg-type]

    def test_decode_non_number(self) -> None:
        """Test non-numeric elements."""
        with pytest.raises(InvalidInputError, match="byte at index 1"):
            BytesToList().decode([1, "2"])  # type: ignore[list-item]

    def test_encode_non_bytes(self) -> None:
        """Test non-bytes input."""
        with pytest.raises(InvalidInputError):
            BytesToList().encode("Hi")  # type: ignore[arg-type]
