from __future__ import annotations

"""Physical constants and unit factors used by the propagation bridge.

Ellipsoid values follow WGS-72, the model SGP4 element sets are fitted to.
Distances in km, times in seconds unless otherwise noted.
"""

import math

# --- TLE format ---
TLE_LINE_LENGTH: int = 69
"""Exact length of each TLE data line in characters."""

# --- Earth parameters (WGS-72) ---
EARTH_RADIUS_KM: float = 6378.135
"""Equatorial radius of Earth in km."""

EARTH_FLATTENING: float = 1.0 / 298.26
"""Flattening of the reference ellipsoid."""

EARTH_ECCENTRICITY_SQ: float = EARTH_FLATTENING * (2.0 - EARTH_FLATTENING)
"""Square of the first eccentricity of the reference ellipsoid."""

EARTH_ROTATION_PER_SIDEREAL_DAY: float = 1.00273790934
"""Earth rotations per solar day."""

# --- Time ---
SECONDS_PER_DAY: float = 86400.0
SECONDS_PER_HOUR: float = 3600.0

J2000_JD: float = 2451545.0
"""Julian date of the J2000 epoch (2000-01-01T12:00:00)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0

EARTH_ROTATION_RAD_S: float = 2.0 * math.pi * EARTH_ROTATION_PER_SIDEREAL_DAY / SECONDS_PER_DAY
"""Earth rotation rate in rad/s."""

# --- Angles ---
RAD_TO_DEG: float = 180.0 / math.pi
DEG_TO_RAD: float = math.pi / 180.0
