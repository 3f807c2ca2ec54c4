"""Codec interfaces and the composition engine.

A codec pairs a forward transformation (``encode``) with its exact inverse
(``decode``). Codecs compose into pipelines:

- ``a.chain(b)`` encodes with ``a`` then ``b`` and decodes with ``b`` then ``a``
- ``a.chain_async(b)`` does the same when ``b`` must be awaited
- ``a.reversed()`` swaps the two directions

Composition never catches errors: the first failing stage aborts the pipeline
and its exception reaches the caller unchanged.

Design Pattern: Composite
- Codec / AsyncCodec: abstract interfaces
- FunctionCodec / AsyncFunctionCodec: codecs built from two callables
- ChainedCodec / AsyncChainedCodec: two stages run in sequence
- ReversedCodec / AsyncReversedCodec: a stage with its directions swapped
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from ..exceptions import ConfigurationError

TIn = TypeVar("TIn")
TOut = TypeVar("TOut")
TNext = TypeVar("TNext")


class Codec(ABC, Generic[TIn, TOut]):
    """Synchronous invertible transformation between ``TIn`` and ``TOut``.

    Subclasses implement ``encode`` and ``decode`` and must capture all of their
    configuration at construction time. The round-trip law
    ``decode(encode(x)) == x`` must hold for every valid ``x``.

    Examples:
        ```python
        from codecchain import Add, Multiply

        fahrenheit = Multiply(1.8).chain(Add(32))
        fahrenheit.encode(25)    # 77.0
        fahrenheit.decode(77.0)  # 25.0

        celsius = fahrenheit.reversed()
        celsius.encode(77.0)     # 25.0
        ```
    """

    @abstractmethod
    def encode(self, value: TIn) -> TOut:
        """Apply the forward transformation."""

    @abstractmethod
    def decode(self, value: TOut) -> TIn:
        """Apply the inverse transformation."""

    def reversed(self) -> Codec[TOut, TIn]:
        """Return a codec with ``encode`` and ``decode`` swapped."""
        return ReversedCodec(self)

    def chain(self, next_codec: Codec[TOut, TNext]) -> Codec[TIn, TNext]:
        """Compose with a synchronous next stage.

        Args:
            next_codec: Codec whose input type is this codec's output type

        Returns:
            Codec that encodes through ``self`` then ``next_codec``

        Raises:
            ConfigurationError: If next_codec is asynchronous; use ``chain_async``
        """
        if isinstance(next_codec, AsyncCodec):
            raise ConfigurationError(
                f"Cannot chain async stage {next_codec!r} synchronously, use chain_async()"
            )
        return ChainedCodec(self, next_codec)

    def chain_async(self, next_codec: AsyncCodec[TOut, TNext]) -> AsyncCodec[TIn, TNext]:
        """Compose with an asynchronous next stage.

        Args:
            next_codec: Async codec whose input type is this codec's output type

        Returns:
            Async codec that encodes through ``self`` then awaits ``next_codec``
        """
        return AsyncChainedCodec(self, next_codec)


class AsyncCodec(ABC, Generic[TIn, TOut]):
    """Asynchronous invertible transformation between ``TIn`` and ``TOut``.

    Same contract as :class:`Codec`, with awaitable ``encode``/``decode``. Used
    for stages that wait on an external provider (e.g. authenticated encryption).
    """

    @abstractmethod
    async def encode(self, value: TIn) -> TOut:
        """Apply the forward transformation."""

    @abstractmethod
    async def decode(self, value: TOut) -> TIn:
        """Apply the inverse transformation."""

    def reversed(self) -> AsyncCodec[TOut, TIn]:
        """Return an async codec with ``encode`` and ``decode`` swapped."""
        return AsyncReversedCodec(self)

    def chain(self, next_codec: Codec[TOut, TNext]) -> AsyncCodec[TIn, TNext]:
        """Compose with a synchronous next stage."""
        return AsyncChainedCodec(self, next_codec)

    def chain_async(self, next_codec: AsyncCodec[TOut, TNext]) -> AsyncCodec[TIn, TNext]:
        """Compose with an asynchronous next stage."""
        return AsyncChainedCodec(self, next_codec)


AnyCodec = Union[Codec[Any, Any], AsyncCodec[Any, Any]]


class FunctionCodec(Codec[TIn, TOut]):
    """Codec built from a pair of plain functions.

    Example:
        >>> upper = FunctionCodec(str.upper, str.lower)
        >>> upper.encode("abc")
        'ABC'
    """

    def __init__(self, encode: Callable[[TIn], TOut], decode: Callable[[TOut], TIn]) -> None:
        self._encode = encode
        self._decode = decode

    def encode(self, value: TIn) -> TOut:
        return self._encode(value)

    def decode(self, value: TOut) -> TIn:
        return self._decode(value)


class AsyncFunctionCodec(AsyncCodec[TIn, TOut]):
    """Async codec built from a pair of coroutine functions."""

    def __init__(
        self,
        encode: Callable[[TIn], Awaitable[TOut]],
        decode: Callable[[TOut], Awaitable[TIn]],
    ) -> None:
        self._encode = encode
        self._decode = decode

    async def encode(self, value: TIn) -> TOut:
        return await self._encode(value)

    async def decode(self, value: TOut) -> TIn:
        return await self._decode(value)


class ReversedCodec(Codec[TOut, TIn]):
    """Codec with the directions of ``inner`` swapped."""

    def __init__(self, inner: Codec[TIn, TOut]) -> None:
        self.inner = inner

    def encode(self, value: TOut) -> TIn:
        return self.inner.decode(value)

    def decode(self, value: TIn) -> TOut:
        return self.inner.encode(value)

    def reversed(self) -> Codec[TIn, TOut]:
        return self.inner

    def __repr__(self) -> str:
        return f"ReversedCodec({self.inner!r})"


class AsyncReversedCodec(AsyncCodec[TOut, TIn]):
    """Async codec with the directions of ``inner`` swapped."""

    def __init__(self, inner: AsyncCodec[TIn, TOut]) -> None:
        self.inner = inner

    async def encode(self, value: TOut) -> TIn:
        return await self.inner.decode(value)

    async def decode(self, value: TIn) -> TOut:
        return await self.inner.encode(value)

    def reversed(self) -> AsyncCodec[TIn, TOut]:
        return self.inner

    def __repr__(self) -> str:
        return f"AsyncReversedCodec({self.inner!r})"


class ChainedCodec(Codec[TIn, TNext]):
    """Two synchronous stages run in sequence.

    Attributes:
        first: Stage applied first on encode and last on decode
        second: Stage applied last on encode and first on decode
    """

    def __init__(self, first: Codec[TIn, Any], second: Codec[Any, TNext]) -> None:
        self.first = first
        self.second = second

    def encode(self, value: TIn) -> TNext:
        return self.second.encode(self.first.encode(value))

    def decode(self, value: TNext) -> TIn:
        return self.first.decode(self.second.decode(value))

    def stages(self) -> list[Codec[Any, Any]]:
        """Return the flattened list of stages in encode order."""
        return _flatten(self)

    def __repr__(self) -> str:
        return " -> ".join(repr(stage) for stage in self.stages())


class AsyncChainedCodec(AsyncCodec[TIn, TNext]):
    """Two stages, at least one of them asynchronous, run in sequence.

    Each stage is fully awaited before the next one starts.
    """

    def __init__(self, first: AnyCodec, second: AnyCodec) -> None:
        self.first = first
        self.second = second

    async def encode(self, value: TIn) -> TNext:
        intermediate = await _run(self.first.encode, self.first, value)
        return await _run(self.second.encode, self.second, intermediate)

    async def decode(self, value: TNext) -> TIn:
        intermediate = await _run(self.second.decode, self.second, value)
        return await _run(self.first.decode, self.first, intermediate)

    def stages(self) -> list[AnyCodec]:
        """Return the flattened list of stages in encode order."""
        return _flatten(self)

    def __repr__(self) -> str:
        return " -> ".join(repr(stage) for stage in self.stages())


async def _run(method: Callable[[Any], Any], owner: AnyCodec, value: Any) -> Any:
    """Call a stage method, awaiting it when the stage is asynchronous."""
    if isinstance(owner, AsyncCodec):
        return await method(value)
    return method(value)


def _flatten(codec: AnyCodec) -> list[AnyCodec]:
    if isinstance(codec, (ChainedCodec, AsyncChainedCodec)):
        return _flatten(codec.first) + _flatten(codec.second)
    return [codec]
