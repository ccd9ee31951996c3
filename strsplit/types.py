from __future__ import annotations

from dataclasses import dataclass

Text = str | bytes


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range into a haystack.

    Offsets use the haystack's own units: code points for ``str``,
    bytes for ``bytes``.
    """

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Segment:
    """A produced piece of the haystack with stable offsets into it."""

    text: Text
    start: int
    end: int
    index: int
    # Match that terminated this segment; None for the last one.
    delimiter: Span | None = None

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)
