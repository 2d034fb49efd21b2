"""Configuration for NDJSON stream ingestion.

The codec itself is stateless and has no settings. This dataclass holds the
per-stream policy used by :mod:`adsbjson.stream`: what to do with blank
lines and with lines that fail to decode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ReaderConfig:
    """Policy for reading a stream of wire lines.

    Attributes:
        skip_blank_lines: Ignore lines that are empty or only whitespace
            (default True). When False, a blank line is decoded like any other
            and fails as malformed JSON.

        strict: Raise the first DecodeError instead of logging it and moving
            on to the next line (default False).

        max_failures: Give up on the stream when more than this many lines
            have failed (default None, no limit). Only meaningful when
            ``strict`` is False. With 0 the first bad line is logged and then
            ends the stream.

    Examples:
        ```python
        from adsbjson import ReaderConfig, iter_messages

        # Tolerate a few corrupt lines from a flaky receiver, then bail out
        config = ReaderConfig(max_failures=10)

        with open("aircraft.jsonl", encoding="utf-8") as fp:
            for message in iter_messages(fp, config):
                ...
        ```
    """

    skip_blank_lines: bool = True
    strict: bool = False
    max_failures: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_failures is not None and self.max_failures < 0:
            raise ValueError(f"max_failures must be >= 0, got {self.max_failures}")
