"""Rendering of offending values for error messages."""

from __future__ import annotations

from typing import Any

_MAX_DISPLAY = 80


def describe_value(value: Any, limit: int = _MAX_DISPLAY) -> str:
    """Render a value for inclusion in an error message.

    The value's ``repr`` is used and shortened to ``limit`` characters so that a
    large batch or buffer never floods the message.

    Args:
        value: Value to render
        limit: Maximum number of characters to keep (default 80)

    Returns:
        Display string, suffixed with the type name when truncated

    Example:
        >>> describe_value("abc")
        "'abc'"
        >>> describe_value(None)
        'None'
    """
    text = repr(value)
    if len(text) <= limit:
        return text
    return f"{text[: limit - 3]}... ({type(value).__name__})"
