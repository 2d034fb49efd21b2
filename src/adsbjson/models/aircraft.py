"""ADS-B aircraft message model.

This module defines AircraftMessage, the typed representation of one
readsb/tar1090-style ``aircraft`` record, together with the value types
it carries: the polymorphic barometric Altitude and the NavModes and
SilType enumerations.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Annotated, Any, Optional, Union

from pydantic import Field, PlainSerializer, PlainValidator, Strict
from pydantic_core import PydanticCustomError

from ..exceptions import InvalidEnumValueError
from .base import WireModel
from .fields import INT32_MAX, INT32_MIN, Int8, Int32

GROUND = "ground"


class NavModes(enum.Enum):
    """Autopilot modes engaged on the aircraft."""

    ALT_HOLD = "althold"
    AUTOPILOT = "autopilot"
    VNAV = "vnav"
    TCAS = "tcas"

    @classmethod
    def parse(cls, token: str) -> NavModes:
        """Look up a mode by its wire token (case-sensitive)."""
        try:
            return cls(token)
        except ValueError as err:
            raise InvalidEnumValueError("nav_modes", token) from err


class SilType(enum.Enum):
    """Interpretation of the SIL value (probability per hour or unknown)."""

    PER_HOUR = "perhour"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, token: str) -> SilType:
        """Look up a SIL type by its wire token (case-sensitive)."""
        try:
            return cls(token)
        except ValueError as err:
            raise InvalidEnumValueError("sil_type", token) from err

    @classmethod
    def default(cls) -> SilType:
        """Default SIL type for messages built in code.

        Receivers report ``unknown`` when the SIL supplement bit has not been
        seen, so that is the neutral choice.
        """
        return cls.UNKNOWN


@dataclass(frozen=True)
class Altitude:
    """Barometric altitude: either a number of feet or on the ground.

    The two variants are built with :meth:`numeric` and :meth:`ground`.
    ``feet`` is ``None`` exactly when the aircraft is on the ground.

    Example:
        >>> Altitude.from_wire(15000)
        Altitude(feet=15000)
        >>> Altitude.from_wire("ground").is_on_ground
        True
    """

    feet: Optional[int] = None

    @classmethod
    def numeric(cls, feet: int) -> Altitude:
        return cls(feet=feet)

    @classmethod
    def ground(cls) -> Altitude:
        return cls(feet=None)

    @classmethod
    def default(cls) -> Altitude:
        """Zero feet."""
        return cls.numeric(0)

    @property
    def is_on_ground(self) -> bool:
        return self.feet is None

    @classmethod
    def from_wire(cls, value: Any) -> Altitude:
        """Interpret an ``alt_baro`` JSON value.

        The order is fixed:

        1. A JSON integer (never a boolean) within the 32-bit range is a
           numeric altitude.
        2. Otherwise, the exact string ``"ground"`` means on the ground.
        3. Anything else is rejected.

        Raises:
            InvalidEnumValueError: If the value matches neither variant
        """
        if isinstance(value, int) and not isinstance(value, bool):
            if INT32_MIN <= value <= INT32_MAX:
                return cls.numeric(value)
        elif value == GROUND:
            return cls.ground()
        raise InvalidEnumValueError("alt_baro", value)

    def to_wire(self) -> Union[int, str]:
        return GROUND if self.feet is None else self.feet


def _validate_altitude(value: Any) -> Altitude:
    if isinstance(value, Altitude):
        return value
    try:
        return Altitude.from_wire(value)
    except InvalidEnumValueError:
        raise PydanticCustomError(
            "altitude",
            "expected an integer or the string 'ground', got {value!r}",
            {"value": value},
        ) from None


AltitudeField = Annotated[
    Altitude,
    PlainValidator(_validate_altitude),
    PlainSerializer(Altitude.to_wire, return_type=Union[int, str]),
]

# Enum fields are matched by wire token rather than by member instance
SilTypeField = Annotated[SilType, Strict(False)]
NavModesField = Annotated[NavModes, Strict(False)]


class AircraftMessage(WireModel):
    """One aircraft state record from a readsb/tar1090 JSON feed.

    Fields are declared in wire order. Optional fields are ``None`` when the
    receiver did not report them and are left out of the encoded text.

    Example:
        >>> msg = AircraftMessage.from_json(line)
        >>> msg.altitude.is_on_ground
        False
        >>> msg.to_string_newline()
        '{"now":1600000000.0,"hex":"a1b2c3",...}\\n'
    """

    now: float  # Unix timestamp
    hex: str  # ICAO address
    adsb_type: str = Field(alias="type")
    flight: Optional[str] = None  # callsign
    aircraft_registration: str = Field(alias="r")
    aircraft_type: Optional[str] = Field(default=None, alias="t")
    altitude: AltitudeField = Field(alias="alt_baro")
    alt_geom: Optional[Int32] = None
    gs: Optional[float] = None  # ground speed
    track: Optional[float] = None
    baro_rate: Optional[Int32] = None
    geom_rate: Optional[Int32] = None
    squawk: Optional[str] = None
    emergency: Optional[str] = None
    category: Optional[str] = None
    nav_qnh: Optional[float] = None
    nav_altitude_mcp: Optional[Int32] = None
    nav_heading: Optional[float] = None
    true_heading: Optional[float] = None
    nav_modes: Optional[list[NavModesField]] = None
    lat: float
    lon: float
    nic: Int32  # Navigation Integrity Category
    rc: Int32  # Radius of Containment, meters
    seen_pos: Optional[float] = None  # seconds before "now" the position was updated
    seen: float  # seconds before "now" the last message was received
    r_dst: float  # distance from receiver
    r_dir: float
    version: Int32
    nic_baro: Optional[Int8] = None
    nac_p: Int8
    nac_v: Optional[Int8] = None
    sil: Int8
    sil_type: SilTypeField
    gva: Optional[Int8] = None
    sda: Optional[Int8] = None
    alert: Optional[Int8] = None
    spi: Optional[Int8] = None
    mlat: list[str]
    tisb: list[str]
    messages: Int32
    rssi: float
    dbflags: Optional[Int32] = Field(default=None, alias="dbFlags")
    calc_track: Optional[Int32] = None

    @classmethod
    def default(cls) -> AircraftMessage:
        """Build a zero-valued message with every optional field absent."""
        return cls(
            now=0.0,
            hex="",
            adsb_type="",
            aircraft_registration="",
            altitude=Altitude.default(),
            lat=0.0,
            lon=0.0,
            nic=0,
            rc=0,
            seen=0.0,
            r_dst=0.0,
            r_dir=0.0,
            version=0,
            nac_p=0,
            sil=0,
            sil_type=SilType.default(),
            mlat=[],
            tisb=[],
            messages=0,
            rssi=0.0,
        )

    @classmethod
    def from_json(cls, text: str) -> AircraftMessage:
        """Decode one line of wire text. See :func:`adsbjson.codec.decode`."""
        # Import here to avoid circular dependency
        from ..codec.decoder import decode

        return decode(text)

    def to_string(self) -> str:
        """Encode to compact wire text."""
        from ..codec.encoder import to_string

        return to_string(self)

    def to_string_newline(self) -> str:
        """Encode to wire text terminated with ``\\n``."""
        from ..codec.encoder import to_string_newline

        return to_string_newline(self)

    def to_bytes(self) -> bytes:
        """Encode to UTF-8 wire bytes."""
        from ..codec.encoder import to_bytes

        return to_bytes(self)

    def to_bytes_newline(self) -> bytes:
        """Encode to UTF-8 wire bytes terminated with ``\\n``."""
        from ..codec.encoder import to_bytes_newline

        return to_bytes_newline(self)
