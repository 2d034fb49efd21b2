"""Reading and writing newline-delimited aircraft JSON.

These helpers sit on top of the codec and apply a ReaderConfig policy to a
whole stream: each line is decoded on its own, and a bad line is logged (or
collected) without stopping the lines after it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from .codec.decoder import decode_line
from .codec.encoder import to_string_newline
from .config import ReaderConfig
from .exceptions import DecodeError
from .models.aircraft import AircraftMessage

logger = logging.getLogger(__name__)

# A line from a text stream, or from a file opened in binary mode
Line = Union[str, bytes]


@dataclass(frozen=True)
class LineFailure:
    """A line that could not be decoded.

    Attributes:
        line_number: 1-based position of the line in the stream
        line: The raw line, terminator included (bytes for binary streams)
        error: Why it failed
    """

    line_number: int
    line: Line
    error: DecodeError


@dataclass
class DecodeReport:
    """Outcome of decoding a whole stream."""

    messages: List[AircraftMessage] = field(default_factory=list)
    failures: List[LineFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.messages) + len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


def _decode_stream(
    lines: Iterable[Line], config: ReaderConfig
) -> Iterator[Union[AircraftMessage, LineFailure]]:
    failures = 0
    for line_number, line in enumerate(lines, 1):
        if config.skip_blank_lines and not line.strip():
            continue

        try:
            message = decode_line(line)
        except DecodeError as e:
            if config.strict:
                raise
            failures += 1
            logger.warning("Skipping line %d: %s", line_number, e)
            yield LineFailure(line_number, line, e)
            if config.max_failures is not None and failures > config.max_failures:
                raise DecodeError(
                    f"Giving up after {failures} failed lines "
                    f"(max_failures={config.max_failures})"
                ) from e
            continue

        yield message


def iter_messages(
    lines: Iterable[Line], config: Optional[ReaderConfig] = None
) -> Iterator[AircraftMessage]:
    """Decode a stream lazily, yielding only the lines that decode.

    Args:
        lines: Wire lines, e.g. an open text file or a binary file whose lines
            are decoded as bytes
        config: Stream policy (defaults to ``ReaderConfig()``)

    Yields:
        Decoded messages in stream order

    Raises:
        DecodeError: On the first bad line when ``config.strict`` is set, or
            once ``config.max_failures`` is exceeded
    """
    for item in _decode_stream(lines, config or ReaderConfig()):
        if isinstance(item, AircraftMessage):
            yield item


def decode_lines(lines: Iterable[Line], config: Optional[ReaderConfig] = None) -> DecodeReport:
    """Decode a whole stream, collecting messages and failures.

    Raises:
        DecodeError: As for :func:`iter_messages`
    """
    report = DecodeReport()
    for item in _decode_stream(lines, config or ReaderConfig()):
        if isinstance(item, LineFailure):
            report.failures.append(item)
        else:
            report.messages.append(item)

    logger.debug("Decoded %d of %d lines", len(report.messages), report.total)
    return report


def write_messages(messages: Iterable[AircraftMessage], fp: TextIO) -> int:
    """Write messages as newline-terminated wire text.

    Returns:
        Number of messages written
    """
    count = 0
    for message in messages:
        fp.write(to_string_newline(message))
        count += 1
    return count
