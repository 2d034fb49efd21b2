"""Base model class and adsbjson-specific Pydantic configuration.

This module provides the WireModel class that every wire-level message inherits from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Base class for JSON wire messages.

    Attributes are declared with their canonical Python name; where the wire
    name differs it is given as the field alias. Declaration order is the
    order keys are written on encode.

    Example:
        >>> from typing import Optional
        >>> from pydantic import Field
        >>> class Position(WireModel):
        ...     lat: float
        ...     lon: float
        ...     aircraft_type: Optional[str] = Field(default=None, alias="t")
    """

    # ConfigDict for Pydantic v2
    model_config = ConfigDict(
        # No coercion between JSON shapes ("1" is not an int, 1.0 is not an int)
        strict=True,
        # Allow arbitrary types (Altitude is a plain dataclass)
        arbitrary_types_allowed=True,
        # Messages are immutable values
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Construct by attribute name as well as by wire alias
        populate_by_name=True,
        # json.loads accepts NaN/Infinity, so write them back the same way
        ser_json_inf_nan="constants",
    )
