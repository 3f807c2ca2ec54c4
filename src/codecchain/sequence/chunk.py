"""Fixed-size chunking of lists.

``ArraySplit(n)`` and ``ArrayFlatten(n)`` are mirror images: one splits a flat
list into chunks of ``n`` elements, the other flattens such chunks. The last
chunk may be shorter than ``n``; a chunk longer than ``n`` is rejected because
it could not have been produced by splitting.
"""

from __future__ import annotations

from typing import Any

from ..codec.base import Codec
from ..exceptions import ConfigurationError, FormatError
from ..utils.display import describe_value
from ..utils.validation import require_list


def _check_chunk_size(chunk_size: int) -> int:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size < 1:
        raise ConfigurationError(f"Chunk size must be a positive integer: {chunk_size!r}")
    return chunk_size


def _split(items: list[Any], chunk_size: int) -> list[list[Any]]:
    return [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]


def _flatten(chunks: list[Any], chunk_size: int) -> list[Any]:
    flat: list[Any] = []
    for index, chunk in enumerate(chunks):
        chunk = require_list(chunk, f"chunk at index {index}")
        if len(chunk) > chunk_size:
            raise FormatError(
                f"Chunk size {len(chunk)} exceeds expected {chunk_size} at index {index}: "
                f"{describe_value(chunk)}"
            )
        flat.extend(chunk)
    return flat


class ArraySplit(Codec[list[Any], list[list[Any]]]):
    """Flat list <-> list of chunks of ``chunk_size`` elements.

    Example:
        >>> ArraySplit(2).encode([1, 2, 3, 4, 5])
        [[1, 2], [3, 4], [5]]
    """

    def __init__(self, chunk_size: int = 1) -> None:
        self.chunk_size = _check_chunk_size(chunk_size)

    def encode(self, value: list[Any]) -> list[list[Any]]:
        return _split(require_list(value), self.chunk_size)

    def decode(self, value: list[list[Any]]) -> list[Any]:
        return _flatten(require_list(value), self.chunk_size)

    def __repr__(self) -> str:
        return f"ArraySplit({self.chunk_size})"


class ArrayFlatten(Codec[list[list[Any]], list[Any]]):
    """List of chunks <-> flat list; chunks are validated on encode.

    Example:
        >>> ArrayFlatten(2).encode([[1, 2], [3]])
        [1, 2, 3]
    """

    def __init__(self, chunk_size: int) -> None:
        self.chunk_size = _check_chunk_size(chunk_size)

    def encode(self, value: list[list[Any]]) -> list[Any]:
        return _flatten(require_list(value), self.chunk_size)

    def decode(self, value: list[Any]) -> list[list[Any]]:
        return _split(require_list(value), self.chunk_size)

    def __repr__(self) -> str:
        return f"ArrayFlatten({self.chunk_size})"
