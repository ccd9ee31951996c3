from __future__ import annotations

from typing import Any

from ..constants import DEFAULT_ENCODING
from .base import Delimiter
from .char import CharDelimiter
from .literal import LiteralDelimiter

__all__ = ["CharDelimiter", "Delimiter", "LiteralDelimiter", "as_delimiter"]


def as_delimiter(value: Any, *, encoding: str = DEFAULT_ENCODING) -> Delimiter:
    """Turn a plain delimiter value into a matcher.

    Objects that already provide ``find_next`` pass through untouched, a
    one-code-point ``str`` becomes a :class:`CharDelimiter`, and any other
    ``str`` or ``bytes`` becomes a :class:`LiteralDelimiter`.
    """
    if isinstance(value, Delimiter):
        return value
    if isinstance(value, str):
        if len(value) == 1:
            return CharDelimiter(value, encoding=encoding)
        return LiteralDelimiter(value, encoding=encoding)
    if isinstance(value, bytes | bytearray):
        return LiteralDelimiter(bytes(value), encoding=encoding)
    raise TypeError(f"Cannot use {type(value).__name__} as a delimiter")
