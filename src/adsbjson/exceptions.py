"""Exception hierarchy for adsbjson.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from AdsbJsonError for easy catching of any adsbjson-specific error.
"""

from __future__ import annotations

from typing import Any


class AdsbJsonError(Exception):
    """Base exception for all adsbjson errors."""

    pass


class SchemaError(AdsbJsonError):
    """Raised when a model declares a field the codec cannot describe.

    Examples:
        - Field without a type annotation
        - Union of more than one non-None type
    """

    pass


class DecodeError(AdsbJsonError):
    """Raised when a line of wire text cannot be decoded into a message.

    Decoding is all-or-nothing: the first violation found ends the decode.
    Catch this class to handle every decode failure; catch a subclass to
    tell syntax errors apart from schema violations.
    """

    pass


class MalformedJsonError(DecodeError):
    """Raised when the text is not well-formed JSON.

    The message is exactly the one produced by the stdlib ``json`` parser for
    the same input, so callers can compare it against a generic parse.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownFieldError(DecodeError):
    """Raised when the object contains a key outside the accepted wire fields."""

    def __init__(self, key: str) -> None:
        super().__init__(f"unknown field `{key}`")
        self.key = key


class DuplicateFieldError(DecodeError):
    """Raised when a key appears more than once in the top-level object.

    The stdlib parser keeps the last value for a repeated key; the decoder
    rejects the message instead so no value is dropped silently.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"duplicate field `{key}`")
        self.key = key


class MissingFieldError(DecodeError):
    """Raised when a required wire field is absent."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing field `{name}`")
        self.name = name


class TypeMismatchError(DecodeError):
    """Raised when a value has the wrong JSON shape for its field.

    Examples:
        - A string where a number is expected
        - A float where an integer is expected
        - An integer outside the field's storage range
        - A top-level value that is not an object (field ``<root>``)
    """

    def __init__(self, field: str, expected: str, actual: str) -> None:
        super().__init__(f"invalid type for `{field}`: expected {expected}, got {actual}")
        self.field = field
        self.expected = expected
        self.actual = actual


class InvalidEnumValueError(DecodeError):
    """Raised when an enumerated field carries an unrecognised token.

    Also raised for ``alt_baro`` values that are neither an integer nor the
    literal ``"ground"``.
    """

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"invalid value for `{field}`: {value!r}")
        self.field = field
        self.value = value


class EncodeError(AdsbJsonError):
    """Raised when a message cannot be serialised.

    A well-formed message always serialises; this is reserved for
    resource-class failures and messages built by bypassing validation.
    """

    pass
