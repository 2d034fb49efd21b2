"""JSON wire codec for adsbjson.

This module provides decoding and encoding of newline-delimited ADS-B
aircraft JSON messages.
"""

from __future__ import annotations

from .decoder import decode, decode_bytes, decode_line, decode_object
from .encoder import encode, to_bytes, to_bytes_newline, to_string, to_string_newline
from .schema import FieldSchema, MessageSchema

__all__ = [
    "encode",
    "decode",
    "decode_bytes",
    "decode_line",
    "decode_object",
    "to_string",
    "to_string_newline",
    "to_bytes",
    "to_bytes_newline",
    "MessageSchema",
    "FieldSchema",
]
