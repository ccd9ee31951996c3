from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ..delimiters import Delimiter, as_delimiter
from ..split import iter_segments
from ..split_config import SplitConfig
from ..types import Segment, Text

logger = logging.getLogger(__name__)


class DelimiterSplitter:
    def __init__(
        self, delimiter: Delimiter | Any, config: SplitConfig | None = None
    ) -> None:
        self.config = config or SplitConfig()
        self.delimiter = as_delimiter(delimiter, encoding=self.config.encoding)

    def split(self, text: Text) -> list[Segment]:
        cfg = self.config
        segments: list[Segment] = []
        dropped = 0
        for segment in iter_segments(text, self.delimiter):
            if cfg.strip:
                segment = self._strip(segment)
            if cfg.drop_empty and not segment.text:
                dropped += 1
                continue
            if segment.index != len(segments):
                segment = replace(segment, index=len(segments))
            segments.append(segment)

        logger.debug(
            "Split %d units into %d segments (%d dropped)",
            len(text),
            len(segments),
            dropped,
        )
        return segments

    @staticmethod
    def _strip(segment: Segment) -> Segment:
        text = segment.text
        stripped = text.strip()
        if len(stripped) == len(text):
            return segment
        if not stripped:
            # Collapse to an empty segment at the old end.
            return replace(segment, text=stripped, start=segment.end)
        lead = len(text) - len(text.lstrip())
        return replace(
            segment,
            text=stripped,
            start=segment.start + lead,
            end=segment.start + lead + len(stripped),
        )
