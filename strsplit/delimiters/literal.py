from __future__ import annotations

from ..constants import DEFAULT_ENCODING
from ..types import Text
from .base import NeedleDelimiter


class LiteralDelimiter(NeedleDelimiter):
    """Matches the first occurrence of a fixed, non-empty literal."""

    def __init__(self, literal: Text, *, encoding: str = DEFAULT_ENCODING) -> None:
        if not literal:
            # A zero-width match would never advance the split sequence.
            raise ValueError("LiteralDelimiter needs a non-empty literal")
        if not isinstance(literal, str):
            literal = bytes(literal)
        super().__init__(literal, encoding)
        self.literal = literal

    def __repr__(self) -> str:
        return f"LiteralDelimiter({self.literal!r})"
