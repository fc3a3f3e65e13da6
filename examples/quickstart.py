"""sgpkit Quickstart — decode a TLE and compute where the satellite is."""

from datetime import datetime, timezone

from sgpkit import Observer, compute_state, decode_one, look_angles

# ISS (ZARYA) TLE
tle_data = b"""
ISS (ZARYA)
1 25544U 98067A   13165.59097222  .00004759  00000-0  88814-4 0    47
2 25544  51.6478 121.2152 0011003  68.5125 263.9959 15.50783143834295
""".strip()

iss = decode_one(tle_data)
when = datetime(2013, 6, 15, 2, 57, 7, 200000, tzinfo=timezone.utc)

state = compute_state(iss, when)
print(f"Satellite: {iss.title}")
print(f"Latitude:  {state.latitude:.4f}°")
print(f"Longitude: {state.longitude:.4f}°")
print(f"Altitude:  {state.altitude:.1f} km")
print(f"Speed:     {state.speed:.0f} km/h")

# Where to look from Greenwich
look = look_angles(iss, when, Observer(latitude=51.4779, longitude=0.0, altitude=0.046))
print(f"Azimuth:   {look.azimuth:.1f}°  Elevation: {look.elevation:.1f}°  Range: {look.range_km:.0f} km")
