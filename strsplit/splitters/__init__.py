from .base import Splitter
from .delimiter import DelimiterSplitter

__all__ = ["DelimiterSplitter", "Splitter"]
