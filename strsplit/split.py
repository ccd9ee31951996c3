"""Lazy delimiter splitting.

:class:`StrSplit` walks a haystack one delimiter search at a time. Nothing is
scanned at construction; each pull asks the delimiter for the next match in
the unconsumed tail, hands back the text before it and moves past it.

The haystack must stay alive and unchanged while the sequence is in use.
``str`` and ``bytes`` are immutable, so this holds for every supported
haystack. Produced items are slices of the haystack.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from .constants import DEFAULT_ENCODING
from .delimiters import CharDelimiter, Delimiter, as_delimiter
from .types import Segment, Span, Text

logger = logging.getLogger(__name__)

__all__ = ["StrSplit", "iter_segments", "until_char"]


class StrSplit:
    """Single-consumer iterator over the pieces between delimiter matches.

    ``remaining`` is ``None`` once the sequence is exhausted. An empty
    ``remaining`` is a different state: one more (empty) item is still owed,
    which is how a trailing delimiter produces a trailing empty item.
    An empty haystack starts exhausted and produces nothing.

    The sequence keeps the whole haystack and an offset into it. Delimiters
    providing ``find_from(haystack, start)`` search in place; for any other
    matcher the unconsumed tail is sliced off and passed to ``find_next``.
    """

    def __init__(
        self,
        haystack: Text,
        delimiter: Delimiter | Any,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._delimiter = as_delimiter(delimiter, encoding=encoding)
        self._haystack = haystack
        self._exhausted = not haystack
        self._offset = 0
        self._produced = 0
        find_from = getattr(self._delimiter, "find_from", None)
        self._find_from = find_from if callable(find_from) else None

    def __repr__(self) -> str:
        return (
            f"StrSplit(delimiter={self._delimiter!r}, "
            f"remaining={self.remaining!r})"
        )

    @property
    def delimiter(self) -> Delimiter:
        return self._delimiter

    @property
    def remaining(self) -> Text | None:
        if self._exhausted:
            return None
        return self._haystack[self._offset :]

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> StrSplit:
        return self

    def __next__(self) -> Text:
        segment = self.next_segment()
        if segment is None:
            raise StopIteration
        return segment.text

    def _find(self) -> tuple[int, int] | None:
        """Locate the next match as offsets relative to the current tail."""
        start = self._offset
        if self._find_from is not None:
            match = self._find_from(self._haystack, start)
            if match is None:
                return None
            return match[0] - start, match[1] - start
        return self._delimiter.find_next(self._haystack[start:])

    def next_segment(self) -> Segment | None:
        """Advance once, returning the produced item with its offsets.

        Returns None when the sequence is exhausted, and keeps returning
        None on every later call.
        """
        if self._exhausted:
            return None

        haystack = self._haystack
        start = self._offset
        index = self._produced
        self._produced += 1

        match = self._find()
        if match is None:
            self._exhausted = True
            logger.debug("Split sequence exhausted after %d segments", self._produced)
            return Segment(
                text=haystack[start:],
                start=start,
                end=len(haystack),
                index=index,
            )

        delim_start, delim_end = match
        tail_len = len(haystack) - start
        if delim_start < 0 or delim_end < delim_start or delim_end > tail_len:
            raise ValueError(
                f"{self._delimiter!r} returned span ({delim_start}, {delim_end}) "
                f"outside of a haystack of length {tail_len}"
            )
        if delim_end == 0:
            raise ValueError(
                f"{self._delimiter!r} returned an empty match at the start of "
                "the haystack; splitting would never advance"
            )

        self._offset = start + delim_end
        return Segment(
            text=haystack[start : start + delim_start],
            start=start,
            end=start + delim_start,
            index=index,
            delimiter=Span(start + delim_start, start + delim_end),
        )


def iter_segments(
    haystack: Text,
    delimiter: Delimiter | Any,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[Segment]:
    """Yield every segment of ``haystack`` together with its offsets."""
    sequence = StrSplit(haystack, delimiter, encoding=encoding)
    while True:
        segment = sequence.next_segment()
        if segment is None:
            return
        yield segment


def until_char(
    haystack: Text,
    delimiter_char: str,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Text | None:
    """Return everything before the first ``delimiter_char``.

    The whole haystack comes back when the character does not occur.
    None is returned only for an empty haystack. ``encoding`` is used to
    encode the character for a ``bytes`` haystack.
    """
    delimiter = CharDelimiter(delimiter_char, encoding=encoding)
    return next(StrSplit(haystack, delimiter), None)
