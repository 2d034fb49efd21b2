"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

DATA_DIR = Path(__file__).parent / "data"

# Minimal message: every required field, no optional ones
MINIMAL_LINE = (
    '{"now":1600000000.0,"hex":"a1b2c3","type":"adsb_icao","r":"N12345",'
    '"alt_baro":"ground","lat":40.0,"lon":-74.0,"nic":8,"rc":186,"seen":0.1,'
    '"r_dst":12.3,"r_dir":45.0,"version":2,"nac_p":9,"sil":3,"sil_type":"perhour",'
    '"mlat":[],"tisb":[],"messages":10,"rssi":-12.3}'
)

# Every field the schema knows, in wire order
FULL_LINE = (
    '{"now":1600000123.4,"hex":"4ca7b1","type":"adsb_icao","flight":"RYR4TX  ",'
    '"r":"EI-DWF","t":"B738","alt_baro":36000,"alt_geom":36625,"gs":452.3,'
    '"track":112.5,"baro_rate":-64,"geom_rate":0,"squawk":"2217","emergency":"none",'
    '"category":"A3","nav_qnh":1013.6,"nav_altitude_mcp":36000,"nav_heading":109.7,'
    '"true_heading":108.2,"nav_modes":["autopilot","vnav","tcas"],"lat":51.47,'
    '"lon":-0.4543,"nic":8,"rc":186,"seen_pos":0.4,"seen":0.2,"r_dst":87.1,'
    '"r_dir":213.9,"version":2,"nic_baro":1,"nac_p":10,"nac_v":1,"sil":3,'
    '"sil_type":"perhour","gva":2,"sda":2,"alert":0,"spi":0,"mlat":[],"tisb":[],'
    '"messages":18734,"rssi":-21.4,"dbFlags":1,"calc_track":112}'
)


@pytest.fixture
def minimal_line() -> str:
    """Wire text with only the required fields."""
    return MINIMAL_LINE


@pytest.fixture
def full_line() -> str:
    """Wire text with every known field present."""
    return FULL_LINE


@pytest.fixture
def minimal_document() -> dict[str, Any]:
    """Parsed form of the minimal message, for building variants."""
    return json.loads(MINIMAL_LINE)


@pytest.fixture
def sample_file() -> Path:
    """NDJSON sample with good and bad lines mixed."""
    return DATA_DIR / "aircraft.jsonl"
