"""Pydantic message modeling for adsbjson.

This module provides the AircraftMessage model, the value types it carries,
and the WireModel base class and field helpers it is built from.
"""

from __future__ import annotations

from .aircraft import AircraftMessage, Altitude, NavModes, SilType
from .base import WireModel
from .fields import BoundedInt, Int8, Int32

__all__ = [
    "AircraftMessage",
    "Altitude",
    "NavModes",
    "SilType",
    "WireModel",
    "BoundedInt",
    "Int8",
    "Int32",
]
