"""Unit tests for the message model and its value types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from adsbjson import AircraftMessage, Altitude, InvalidEnumValueError, NavModes, SilType


class TestAltitude:
    """Test the numeric-or-ground altitude type."""

    def test_numeric_from_wire(self) -> None:
        """Integers are numeric altitudes."""
        altitude = Altitude.from_wire(15000)
        assert altitude == Altitude.numeric(15000)
        assert altitude.feet == 15000
        assert altitude.is_on_ground is False

    def test_negative_numeric(self) -> None:
        """Below-sea-level altitudes are valid integers."""
        assert Altitude.from_wire(-325) == Altitude.numeric(-325)

    def test_ground_from_wire(self) -> None:
        """The literal 'ground' means on the ground."""
        altitude = Altitude.from_wire("ground")
        assert altitude == Altitude.ground()
        assert altitude.is_on_ground is True
        assert altitude.feet is None

    @pytest.mark.parametrize("value", ["descending", "Ground", "GROUND", "", "15000"])
    def test_other_strings_rejected(self, value: str) -> None:
        """Only the exact lowercase literal is accepted."""
        with pytest.raises(InvalidEnumValueError) as exc_info:
            Altitude.from_wire(value)
        assert exc_info.value.field == "alt_baro"
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [True, False, 1500.5, 1500.0, None, [], {}])
    def test_other_shapes_rejected(self, value: object) -> None:
        """Booleans, floats, null and containers are not altitudes."""
        with pytest.raises(InvalidEnumValueError):
            Altitude.from_wire(value)

    def test_out_of_range_integer_rejected(self) -> None:
        """Altitudes must fit in 32 bits."""
        with pytest.raises(InvalidEnumValueError):
            Altitude.from_wire(2**31)

    def test_to_wire(self) -> None:
        """Wire form is the integer or the literal."""
        assert Altitude.numeric(36000).to_wire() == 36000
        assert Altitude.ground().to_wire() == "ground"

    def test_default(self) -> None:
        """Default altitude is zero feet, not ground."""
        assert Altitude.default() == Altitude.numeric(0)
        assert not Altitude.default().is_on_ground


class TestEnums:
    """Test NavModes and SilType tokens."""

    def test_nav_mode_tokens(self) -> None:
        """Each mode maps to a fixed lowercase token."""
        assert [mode.value for mode in NavModes] == ["althold", "autopilot", "vnav", "tcas"]

    def test_sil_type_tokens(self) -> None:
        """Both SIL types map to fixed lowercase tokens."""
        assert [sil.value for sil in SilType] == ["perhour", "unknown"]

    def test_parse(self) -> None:
        """Tokens parse to members."""
        assert NavModes.parse("vnav") is NavModes.VNAV
        assert SilType.parse("perhour") is SilType.PER_HOUR

    def test_parse_is_case_sensitive(self) -> None:
        """Tokens must match exactly."""
        with pytest.raises(InvalidEnumValueError) as exc_info:
            NavModes.parse("VNAV")
        assert exc_info.value.field == "nav_modes"

        with pytest.raises(InvalidEnumValueError) as exc_info:
            SilType.parse("PerHour")
        assert exc_info.value.field == "sil_type"

    def test_sil_type_default(self) -> None:
        """Default SIL type is unknown."""
        assert SilType.default() is SilType.UNKNOWN


class TestAircraftMessage:
    """Test direct construction of messages."""

    def test_default(self) -> None:
        """Default message is zero-valued with no optional fields."""
        msg = AircraftMessage.default()

        assert msg.now == 0.0
        assert msg.hex == ""
        assert msg.altitude == Altitude.numeric(0)
        assert msg.sil_type is SilType.UNKNOWN
        assert msg.mlat == []
        assert msg.tisb == []
        assert msg.flight is None
        assert msg.nav_modes is None
        assert msg.dbflags is None

    def test_construct_by_attribute_name(self) -> None:
        """Messages can be built in code with canonical names."""
        msg = AircraftMessage.default().model_copy(
            update={"adsb_type": "adsb_icao", "aircraft_registration": "G-EUPT"}
        )
        assert msg.adsb_type == "adsb_icao"
        assert msg.aircraft_registration == "G-EUPT"

    def test_construct_with_enum_members(self) -> None:
        """Enum members are accepted as well as tokens."""
        msg = AircraftMessage(
            **{
                **AircraftMessage.default().model_dump(),
                "sil_type": SilType.PER_HOUR,
                "nav_modes": [NavModes.TCAS, "vnav"],
                "altitude": Altitude.ground(),
            }
        )
        assert msg.sil_type is SilType.PER_HOUR
        assert msg.nav_modes == [NavModes.TCAS, NavModes.VNAV]
        assert msg.altitude.is_on_ground

    def test_immutable(self) -> None:
        """Messages are frozen values."""
        msg = AircraftMessage.default()
        with pytest.raises(ValidationError):
            msg.hex = "abcdef"  # type: ignore[misc]

    def test_equality(self) -> None:
        """Equality compares every attribute."""
        assert AircraftMessage.default() == AircraftMessage.default()
        changed = AircraftMessage.default().model_copy(update={"flight": "BAW1"})
        assert changed != AircraftMessage.default()

    def test_unknown_keyword_rejected(self) -> None:
        """The field set is closed in code too."""
        with pytest.raises(ValidationError):
            AircraftMessage(**AircraftMessage.default().model_dump(), wind_speed=12)

    def test_int8_bounds(self) -> None:
        """Integrity codes are stored in a signed byte."""
        data = AircraftMessage.default().model_dump()
        with pytest.raises(ValidationError):
            AircraftMessage(**{**data, "nac_p": 128})
        assert AircraftMessage(**{**data, "nac_p": -128}).nac_p == -128
