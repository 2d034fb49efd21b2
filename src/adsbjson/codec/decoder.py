"""JSON wire decoder for aircraft messages.

This module provides decode() and its bytes/line variants, which turn one
line of wire text into an AircraftMessage or raise a DecodeError subclass
describing the first problem found.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from ..exceptions import (
    DecodeError,
    DuplicateFieldError,
    InvalidEnumValueError,
    MalformedJsonError,
    MissingFieldError,
    TypeMismatchError,
    UnknownFieldError,
)
from ..models.aircraft import AircraftMessage
from .schema import MessageSchema

logger = logging.getLogger(__name__)

ROOT = "<root>"


def decode(text: str) -> AircraftMessage:
    """Decode one JSON object into an AircraftMessage.

    Checks run in a fixed order and the first failure wins:

    1. The text must be well-formed JSON
    2. The top-level value must be an object
    3. Every key must be a known wire field
    4. Every required wire field must be present
    5. Every value must have the right shape for its field

    Args:
        text: A single JSON object (no surrounding array, no second object)

    Returns:
        The decoded message

    Raises:
        MalformedJsonError: If the stdlib JSON parser rejects the text
        TypeMismatchError: If the root is not an object or a value has the wrong shape
        DuplicateFieldError: If a key appears twice in the object
        UnknownFieldError: If an unrecognised key is present
        MissingFieldError: If a required key is absent
        InvalidEnumValueError: If an enum token or ``alt_baro`` value is not recognised

    Example:
        >>> msg = decode('{"now":1600000000.0,"hex":"a1b2c3",...}')
        >>> msg.aircraft_registration
        'N12345'
    """
    return _decode_source(text)


def decode_bytes(data: bytes) -> AircraftMessage:
    """Decode encoded wire bytes.

    The bytes go to ``json.loads`` as they are, so a leading UTF-8 byte-order
    mark is accepted exactly when the stdlib parser accepts it.

    Raises:
        MalformedJsonError: If the bytes cannot be decoded or are not valid JSON
        DecodeError: As for :func:`decode`
    """
    return _decode_source(data)


def decode_line(line: Union[str, bytes]) -> AircraftMessage:
    """Decode one line of an NDJSON stream, ignoring its line terminator.

    Lines read from a binary file are decoded with :func:`decode_bytes`.
    """
    newline, carriage_return = (b"\n", b"\r") if isinstance(line, bytes) else ("\n", "\r")
    if line.endswith(newline):
        line = line[:-1]
        if line.endswith(carriage_return):
            line = line[:-1]
    return _decode_source(line)


def decode_object(document: Any) -> AircraftMessage:
    """Validate an already-parsed JSON value and build the message.

    This is steps 2-5 of :func:`decode`, for callers that parse JSON themselves.
    A plain dict cannot hold repeated keys, so no duplicate check applies here.
    """
    if not isinstance(document, dict):
        raise TypeMismatchError(ROOT, "object", json_kind(document))

    schema = MessageSchema.from_model(AircraftMessage)

    for key in document:
        if key not in schema.wire_names:
            raise UnknownFieldError(key)

    for wire_name in schema.required_wire_names:
        if wire_name not in document:
            raise MissingFieldError(wire_name)

    try:
        return AircraftMessage.model_validate(document)
    except ValidationError as e:
        errors = e.errors()
        logger.debug("Message failed validation with %d error(s): %s", len(errors), errors)
        raise _translate_error(errors[0], schema) from e


def json_kind(value: Any) -> str:
    """Name the JSON kind of a parsed value, as used in diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _translate_error(error: ErrorDetails, schema: MessageSchema) -> DecodeError:
    """Map a Pydantic error onto the decode error taxonomy.

    Args:
        error: First entry of ``ValidationError.errors()``
        schema: Schema of the model that was validated

    Returns:
        The DecodeError to raise
    """
    loc = error["loc"]
    value = error.get("input")
    if not loc:
        return TypeMismatchError(ROOT, "object", json_kind(value))

    field_schema = schema.by_wire_name.get(str(loc[0]))
    if field_schema is None:
        # Keys are checked against the schema before validation
        return UnknownFieldError(str(loc[0]))

    field = field_schema.wire_name
    if error["type"] == "altitude":
        return InvalidEnumValueError(field, value)
    if error["type"] == "enum" and isinstance(value, str):
        return InvalidEnumValueError(field, value)

    # Errors inside an array point at the element, not the array
    expected = field_schema.element_kind if len(loc) > 1 else field_schema.expected_kind
    actual = json_kind(value)
    if actual == "integer" and field_schema.python_type is float:
        # Float fields take integers, so this one did not fit in a float
        actual = "integer out of range"
    return TypeMismatchError(field, expected, actual)


class _KeyCollector:
    """``object_pairs_hook`` that builds dicts and remembers repeated keys.

    Inner objects are completed before the object holding them, so after a
    parse ``duplicates`` describes the top-level object.
    """

    def __init__(self) -> None:
        self.duplicates: List[str] = []

    def __call__(self, pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
        obj: Dict[str, Any] = {}
        duplicates = []
        for key, value in pairs:
            if key in obj:
                duplicates.append(key)
            obj[key] = value
        self.duplicates = duplicates
        return obj


def _decode_source(source: Union[str, bytes]) -> AircraftMessage:
    collector = _KeyCollector()
    try:
        document = json.loads(source, object_pairs_hook=collector)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedJsonError(str(e)) from e

    if isinstance(document, dict) and collector.duplicates:
        raise DuplicateFieldError(collector.duplicates[0])

    return decode_object(document)
