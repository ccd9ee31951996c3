from __future__ import annotations

from typing import Protocol

from ..types import Segment, Text


class Splitter(Protocol):
    def split(self, text: Text) -> list[Segment]:
        """Split text into segments with offsets into the original text."""
        ...
