"""strsplit - lazy delimiter splitting with pluggable matchers."""

from .delimiters import CharDelimiter, Delimiter, LiteralDelimiter, as_delimiter
from .split import StrSplit, iter_segments, until_char
from .split_config import SplitConfig
from .splitters import DelimiterSplitter, Splitter
from .types import Segment, Span

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "CharDelimiter",
    "Delimiter",
    "DelimiterSplitter",
    "LiteralDelimiter",
    "Segment",
    "Span",
    "SplitConfig",
    "Splitter",
    "StrSplit",
    "as_delimiter",
    "iter_segments",
    "until_char",
]
