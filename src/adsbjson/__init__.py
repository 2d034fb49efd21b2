"""adsbjson: ADS-B Aircraft JSON Codec

A Python library for strictly decoding and losslessly re-encoding the
newline-delimited JSON aircraft records produced by readsb/tar1090-style
ADS-B receivers.

Key Features:
- Pydantic-based, immutable message model
- Closed field set: unknown keys are rejected, never ignored
- Explicit Altitude type for the numeric-or-"ground" ``alt_baro`` field
- Round-trip guarantee: ``decode(encode(msg)) == msg``
- Syntax errors worded exactly as the stdlib ``json`` parser words them

Quick Start:
    >>> from adsbjson import decode, encode
    >>>
    >>> msg = decode(line)
    >>> msg.altitude.is_on_ground
    True
    >>> decode(encode(msg)) == msg
    True
"""

from __future__ import annotations

from .codec import (
    decode,
    decode_bytes,
    decode_line,
    encode,
    to_bytes,
    to_bytes_newline,
    to_string,
    to_string_newline,
)
from .config import ReaderConfig
from .exceptions import (
    AdsbJsonError,
    DecodeError,
    DuplicateFieldError,
    EncodeError,
    InvalidEnumValueError,
    MalformedJsonError,
    MissingFieldError,
    SchemaError,
    TypeMismatchError,
    UnknownFieldError,
)
from .models import AircraftMessage, Altitude, NavModes, SilType
from .stream import DecodeReport, LineFailure, decode_lines, iter_messages, write_messages

__version__ = "0.1.0"

__all__ = [
    # Core API
    "AircraftMessage",
    "decode",
    "encode",
    # Codec variants
    "decode_bytes",
    "decode_line",
    "to_string",
    "to_string_newline",
    "to_bytes",
    "to_bytes_newline",
    # Value types
    "Altitude",
    "NavModes",
    "SilType",
    # Exceptions
    "AdsbJsonError",
    "SchemaError",
    "DecodeError",
    "MalformedJsonError",
    "UnknownFieldError",
    "DuplicateFieldError",
    "MissingFieldError",
    "TypeMismatchError",
    "InvalidEnumValueError",
    "EncodeError",
    # Streams
    "ReaderConfig",
    "DecodeReport",
    "LineFailure",
    "decode_lines",
    "iter_messages",
    "write_messages",
    # Version
    "__version__",
]
