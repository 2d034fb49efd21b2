"""Field type helpers and utilities.

This module provides convenience functions and type aliases for declaring
integer fields with the storage ranges used by the feed.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

INT8_MIN = -(2**7)
INT8_MAX = 2**7 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def BoundedInt(*, ge: int | None = None, le: int | None = None, **kwargs: Any) -> FieldInfo:
    """Create a bounded integer field.

    This is a convenience wrapper around Pydantic's Field() that sets both
    ge= and le= constraints.

    Args:
        ge: Minimum value (inclusive)
        le: Maximum value (inclusive)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as field metadata.

    Example:
        >>> class Message(WireModel):
        ...     nic: Annotated[int, BoundedInt(ge=0, le=11)]
    """
    return cast(FieldInfo, Field(ge=ge, le=le, **kwargs))


# Integer codes carried in a signed byte (NIC/NAC/SIL/SDA and friends)
Int8 = Annotated[int, BoundedInt(ge=INT8_MIN, le=INT8_MAX)]

# General integer fields (counts, altitudes, rates)
Int32 = Annotated[int, BoundedInt(ge=INT32_MIN, le=INT32_MAX)]
