#!/usr/bin/env python3
"""Basic usage example for adsbjson.

This example demonstrates:
1. Decoding a line of receiver output
2. Inspecting the polymorphic altitude
3. Encoding back to wire text
4. Handling a rejected line
"""

from __future__ import annotations

from adsbjson import Altitude, DecodeError, decode, encode

LINE = (
    '{"now":1600000001.2,"hex":"a8f3e2","type":"adsb_icao","flight":"UAL1207 ",'
    '"r":"N66893","t":"B39M","alt_baro":34975,"gs":488.1,"track":271.3,'
    '"nav_modes":["autopilot","althold"],"lat":40.512,"lon":-75.9021,"nic":8,'
    '"rc":186,"seen":0.1,"r_dst":78.4,"r_dir":281.2,"version":2,"nac_p":10,'
    '"sil":3,"sil_type":"perhour","mlat":[],"tisb":[],"messages":5512,"rssi":-18.7}'
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("adsbjson Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Decoding a message...")
    msg = decode(LINE)
    print(f"   ICAO: {msg.hex}  Flight: {(msg.flight or '').strip()}  Reg: {msg.aircraft_registration}")
    print(f"   Type: {msg.aircraft_type}  Source: {msg.adsb_type}")
    print(f"   Position: {msg.lat:.4f}, {msg.lon:.4f}")
    print(f"   Autopilot modes: {[mode.value for mode in msg.nav_modes or []]}")
    print()

    print("2. Reading the altitude...")
    if msg.altitude.is_on_ground:
        print("   On the ground")
    else:
        print(f"   {msg.altitude.feet} ft (barometric)")
    print()

    print("3. Encoding back to wire text...")
    text = encode(msg)
    print(f"   {len(text)} characters, round trip equal: {decode(text) == msg}")
    landed = msg.model_copy(update={"altitude": Altitude.ground(), "gs": None})
    print(f"   After landing: {encode(landed)[:90]}...")
    print()

    print("4. Rejecting a bad line...")
    try:
        decode(LINE.replace('"alt_baro":34975', '"alt_baro":"descending"'))
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
