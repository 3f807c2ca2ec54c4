"""Building pipelines from more than two stages."""

from __future__ import annotations

from typing import Any

from ..exceptions import ConfigurationError
from ..utils.display import describe_value
from .base import AnyCodec, AsyncCodec, Codec


def compose(first: AnyCodec, *rest: AnyCodec) -> AnyCodec:
    """Chain codecs left to right into a single pipeline.

    Synchronous stages are joined with ``chain``. Once an asynchronous stage
    appears, the result is an :class:`AsyncCodec` and must be awaited.

    Args:
        first: First stage (applied first on encode)
        *rest: Following stages, in encode order

    Returns:
        Codec (all stages sync) or AsyncCodec (any stage async)

    Raises:
        ConfigurationError: If a stage is not a codec

    Example:
        >>> from codecchain import CantorPairArray, NumberArrayCharset, compose
        >>> ids = compose(CantorPairArray(), NumberArrayCharset("0123456789abcdef"))
        >>> ids.encode([[1, 2], [3, 4]])
        '8|20'
    """
    pipeline: Any = _check_stage(first)
    for stage in rest:
        stage = _check_stage(stage)
        if isinstance(stage, AsyncCodec):
            pipeline = pipeline.chain_async(stage)
        else:
            pipeline = pipeline.chain(stage)
    return pipeline


def _check_stage(stage: Any) -> AnyCodec:
    if not isinstance(stage, (Codec, AsyncCodec)):
        raise ConfigurationError(f"Pipeline stage is not a codec: {describe_value(stage)}")
    return stage
