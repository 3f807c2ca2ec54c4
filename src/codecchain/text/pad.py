"""Fixed-length padding with a repeating fill pattern.

Encoding pads a string up to ``max_length`` with ``fill`` repeated (the last
repetition truncated as needed). Strings already at or beyond ``max_length``
are returned unchanged; nothing is ever truncated.

Decoding strips the fill pattern from the padded side. Content that itself
begins (start variant) or ends (end variant) with fill characters loses them,
e.g. ``PadStart(5, "0")`` decodes ``"00042"`` to ``"42"`` whether the input was
``"42"`` or ``"042"``.

When the whole string matches the fill pattern it cannot be told apart from pure
padding. The resolution is fixed:

- length is a multiple of ``len(fill)``: decode returns ``""``
- otherwise: decode returns the string unchanged

So ``PadStart(4, "ab").decode("abab") == ""`` even if ``"abab"`` was the
original content.
"""

from __future__ import annotations

from ..codec.base import Codec
from ..exceptions import ConfigurationError
from ..utils.display import describe_value
from ..utils.validation import require_str


class _Pad(Codec[str, str]):
    def __init__(self, max_length: int, fill: str) -> None:
        if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
            raise ConfigurationError(f"max_length must be a positive integer: {max_length!r}")
        if not isinstance(fill, str) or not fill:
            raise ConfigurationError(f"fill must be a non-empty string: {describe_value(fill)}")
        self.max_length = max_length
        self.fill = fill

    def _padding(self, length: int) -> str:
        """Return the first ``length`` characters of the repeated fill."""
        repeats = length // len(self.fill) + 1
        return (self.fill * repeats)[:length]

    def _all_padding(self, text: str) -> str:
        if len(text) % len(self.fill) == 0:
            return ""
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.max_length}, {self.fill!r})"


class PadStart(_Pad):
    """Left-pad to a fixed length.

    Args:
        max_length: Target length (positive integer)
        fill: Non-empty fill pattern

    Raises:
        ConfigurationError: If max_length or fill is invalid

    Examples:
        >>> pad = PadStart(5, "0")
        >>> pad.encode("42")
        '00042'
        >>> pad.decode("00042")
        '42'
        >>> PadStart(4, "ab").decode("abab")
        ''
    """

    def encode(self, value: str) -> str:
        text = require_str(value)
        if len(text) >= self.max_length:
            return text
        return self._padding(self.max_length - len(text)) + text

    def decode(self, value: str) -> str:
        text = require_str(value)
        size = len(self.fill)

        # Walk from the left while characters follow the fill pattern
        matched = 0
        while matched < len(text) and text[matched] == self.fill[matched % size]:
            matched += 1

        if matched == len(text):
            return self._all_padding(text)
        return text[matched:]


class PadEnd(_Pad):
    """Right-pad to a fixed length.

    The fill pattern starts right after the content, so decoding strips the
    longest suffix that is a prefix of the repeated fill.

    Examples:
        >>> pad = PadEnd(10, " ")
        >>> pad.encode("hello")
        'hello     '
        >>> pad.decode("hello     ")
        'hello'
    """

    def encode(self, value: str) -> str:
        text = require_str(value)
        if len(text) >= self.max_length:
            return text
        return text + self._padding(self.max_length - len(text))

    def decode(self, value: str) -> str:
        text = require_str(value)
        size = len(self.fill)
        length = len(text)

        # Smallest start index whose suffix is pure fill; len(text) always qualifies.
        # A suffix starting at i follows the fill aligned to phase i % size.
        start = length
        for phase in range(size):
            first = length
            while first > 0 and text[first - 1] == self.fill[(first - 1 - phase) % size]:
                first -= 1
            start = min(start, first + (phase - first) % size)

        if start == 0:
            return self._all_padding(text)
        return text[:start]
