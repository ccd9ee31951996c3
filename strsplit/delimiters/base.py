from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..types import Text


@runtime_checkable
class Delimiter(Protocol):
    def find_next(self, haystack: Text) -> tuple[int, int] | None:
        """Return the ``(start, end)`` span of the first match, or None."""
        ...


def encode_needle(text: str, encoding: str) -> bytes:
    """Encode ``text`` without the byte order mark some codecs prepend."""
    encoded = text.encode(encoding)
    bom = "".encode(encoding)
    if bom and encoded.startswith(bom):
        return encoded[len(bom) :]
    return encoded


class NeedleDelimiter:
    """Shared search for delimiters that match one fixed needle.

    ``find_from`` searches from ``start`` in the full haystack and reports
    absolute offsets, which lets a split sequence avoid copying the tail.
    A ``str`` needle is encoded only once a ``bytes`` haystack shows up.
    """

    def __init__(self, needle: Text, encoding: str) -> None:
        self.encoding = encoding
        self._needle = needle
        self._encoded: bytes | None = None if isinstance(needle, str) else needle

    def _needle_for(self, haystack: Text) -> Text:
        if isinstance(haystack, str):
            # A bytes needle against a str haystack raises TypeError in find().
            return self._needle
        if self._encoded is None:
            self._encoded = encode_needle(self._needle, self.encoding)
        return self._encoded

    def find_next(self, haystack: Text) -> tuple[int, int] | None:
        return self.find_from(haystack, 0)

    def find_from(self, haystack: Text, start: int) -> tuple[int, int] | None:
        needle = self._needle_for(haystack)
        idx = haystack.find(needle, start)
        if idx < 0:
            return None
        return idx, idx + len(needle)
