"""JSON wire encoder for aircraft messages.

This module provides encode() and the newline/bytes convenience forms.
Every form is built on encode(); the variants only append a line
terminator or change the representation to bytes.
"""

from __future__ import annotations

import logging

from pydantic_core import PydanticSerializationError

from ..exceptions import EncodeError
from ..models.aircraft import AircraftMessage

logger = logging.getLogger(__name__)

NEWLINE = "\n"


def encode(message: AircraftMessage) -> str:
    """Encode a message to compact wire text.

    Keys use wire names in declaration order. Optional fields that are
    ``None`` are left out; ``mlat`` and ``tisb`` are always written, even
    when empty. Barometric altitude is written as an integer or ``"ground"``
    and enums as their lowercase token.

    Args:
        message: Message to encode

    Returns:
        A single-line JSON object with no trailing newline

    Raises:
        EncodeError: If serialisation fails (e.g. a message assembled with
            ``model_construct`` holding values the wire format cannot carry)

    Example:
        >>> encode(AircraftMessage.default())
        '{"now":0.0,"hex":"","type":"","r":"","alt_baro":0,...}'
    """
    try:
        return message.model_dump_json(by_alias=True, exclude_none=True)
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.debug("Failed to encode %r: %s", message, e)
        raise EncodeError(f"Failed to encode {type(message).__name__}: {e}") from e


to_string = encode


def to_string_newline(message: AircraftMessage) -> str:
    """Encode a message and terminate it with ``\\n``."""
    return encode(message) + NEWLINE


def to_bytes(message: AircraftMessage) -> bytes:
    """Encode a message as UTF-8 bytes."""
    return encode(message).encode("utf-8")


def to_bytes_newline(message: AircraftMessage) -> bytes:
    """Encode a message as UTF-8 bytes terminated with ``\\n``."""
    return to_string_newline(message).encode("utf-8")
