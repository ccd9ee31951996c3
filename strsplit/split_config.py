from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_ENCODING


@dataclass(frozen=True)
class SplitConfig:
    """User-facing configuration for the eager splitter.

    Keep this frozen+hashable so it can be shared between splitters.
    The defaults reproduce the lazy sequence exactly.
    """

    encoding: str = DEFAULT_ENCODING

    # Post-processing toggles
    strip: bool = False
    drop_empty: bool = False
