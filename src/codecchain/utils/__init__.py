"""Utility functions for codecchain.

This module provides argument validation and error-message helpers shared by
the built-in codecs.
"""

from __future__ import annotations

from .display import describe_value
from .validation import (
    MAX_SAFE_INTEGER,
    require_bytes,
    require_list,
    require_natural,
    require_number,
    require_str,
)

__all__ = [
    # Display
    "describe_value",
    # Validation
    "MAX_SAFE_INTEGER",
    "require_bytes",
    "require_list",
    "require_natural",
    "require_number",
    "require_str",
]
