"""Separator removal helpers.

``StringClean`` is LOSSY: its decode guesses chunk boundaries and does not
restore the original string in general. It exists for display-oriented
pipelines and is not covered by the round-trip law.

``StringSeparator`` is the invertible alternative: it replaces each separator
with a marker that decode turns back into the separator.
"""

from __future__ import annotations

import re

from ..codec.base import Codec
from ..exceptions import ConfigurationError, FormatError
from ..utils.display import describe_value
from ..utils.validation import require_str

_BASE64_CHARS = re.compile(r"^[A-Za-z0-9+/]+$")


def _check_separator(separator: str) -> str:
    if not isinstance(separator, str) or not separator:
        raise ConfigurationError(
            f"Separator must be a non-empty string: {describe_value(separator)}"
        )
    return separator


class StringClean(Codec[str, str]):
    """Remove separators on encode; re-insert them heuristically on decode.

    Decode splits the text into chunks of 4 characters when it looks like
    base64, of 3 otherwise, and of ``len // 2`` (at least 1) for texts shorter
    than 6 characters, then joins the chunks with the separator.

    Not invertible: ``decode(encode("ab|cdef"))`` returns ``"abcd|ef"``.
    """

    def __init__(self, separator: str = "|") -> None:
        self.separator = _check_separator(separator)

    def encode(self, value: str) -> str:
        return require_str(value).replace(self.separator, "")

    def decode(self, value: str) -> str:
        text = require_str(value)
        if not text:
            return ""

        chunk_size = 4 if _BASE64_CHARS.match(text) else 3
        if len(text) < 6:
            chunk_size = max(1, len(text) // 2)

        chunks = [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]
        return self.separator.join(chunks)

    def __repr__(self) -> str:
        return f"StringClean({self.separator!r})"


class StringSeparator(Codec[str, str]):
    """Replace separators with a reserved marker, and back.

    The marker is ``__SEP_<code>__`` where ``<code>`` is the separator's first
    character code in base 36. Input already containing the marker cannot be
    encoded unambiguously and is rejected.

    Example:
        >>> StringSeparator("|").encode("a|b")
        'a__SEP_3g__b'
    """

    def __init__(self, separator: str = "|") -> None:
        self.separator = _check_separator(separator)
        self.marker = f"__SEP_{_base36(ord(separator[0]))}__"

    def encode(self, value: str) -> str:
        text = require_str(value)
        if self.marker in text:
            raise FormatError(
                f"String contains encoding marker {self.marker!r} which conflicts with "
                f"separator encoding"
            )
        return text.replace(self.separator, self.marker)

    def decode(self, value: str) -> str:
        return require_str(value).replace(self.marker, self.separator)

    def __repr__(self) -> str:
        return f"StringSeparator({self.separator!r})"


def _base36(number: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    result = ""
    while True:
        number, remainder = divmod(number, 36)
        result = digits[remainder] + result
        if number == 0:
            return result
