from __future__ import annotations

from ..constants import DEFAULT_ENCODING
from .base import NeedleDelimiter


class CharDelimiter(NeedleDelimiter):
    """Matches the first occurrence of a single code point.

    On a ``str`` haystack the match is one code point wide. On a ``bytes``
    haystack the code point is encoded first, so the match covers its full
    encoded width (two bytes for ``"ß"`` in UTF-8).
    """

    def __init__(self, char: str, *, encoding: str = DEFAULT_ENCODING) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(
                f"CharDelimiter needs exactly one code point, got {char!r}"
            )
        super().__init__(char, encoding)
        self.char = char

    def __repr__(self) -> str:
        return f"CharDelimiter({self.char!r})"
