"""JSON serialization backed by pydantic.

``pydantic.TypeAdapter`` handles both plain JSON values and pydantic models, so
a pipeline can start from a typed model and get the same model back:

    >>> from pydantic import BaseModel
    >>> class Reading(BaseModel):
    ...     sensor: str
    ...     value: float
    >>> codec = Json(Reading)
    >>> text = codec.encode(Reading(sensor="t1", value=21.5))
    >>> codec.decode(text) == Reading(sensor="t1", value=21.5)
    True

Validation failures on decode raise ``pydantic.ValidationError`` unchanged.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter

from ..codec.base import Codec

T = TypeVar("T")


class Json(Codec[T, str]):
    """Value of type ``T`` <-> JSON text.

    Args:
        type_: Type used to validate decoded JSON (default ``Any``)
    """

    def __init__(self, type_: Any = Any) -> None:
        self.type_ = type_
        self._adapter: TypeAdapter[T] = TypeAdapter(type_)

    def encode(self, value: T) -> str:
        return self._adapter.dump_json(value).decode("utf-8")

    def decode(self, value: str) -> T:
        return self._adapter.validate_json(value)

    def __repr__(self) -> str:
        return f"Json({getattr(self.type_, '__name__', self.type_)!s})"
