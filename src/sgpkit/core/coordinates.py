"""Conversions from the engine's TEME frame to Earth-referenced coordinates.

All geodetic quantities use the WGS-72 ellipsoid to stay consistent with
the gravity model SGP4 element sets are fitted to.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from sgpkit.utils.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEG_TO_RAD,
    EARTH_ECCENTRICITY_SQ,
    EARTH_FLATTENING,
    EARTH_RADIUS_KM,
    EARTH_ROTATION_RAD_S,
    J2000_JD,
    RAD_TO_DEG,
)

_TWO_PI = 2.0 * math.pi
_LATITUDE_TOLERANCE_RAD = 1e-10
_LATITUDE_MAX_ITERATIONS = 10


@dataclass(frozen=True)
class Observer:
    """A ground station.

    Attributes:
        latitude: Geodetic latitude in degrees.
        longitude: Geodetic longitude in degrees (east positive).
        altitude: Height above the reference ellipsoid in km.
    """

    latitude: float
    longitude: float
    altitude: float = 0.0


@dataclass(frozen=True)
class LookAngles:
    """Topocentric view of a satellite from an observer.

    Attributes:
        azimuth: Azimuth in degrees, clockwise from north (0-360).
        elevation: Elevation above the local horizon in degrees.
        range_km: Slant range in km.
        range_rate_km_s: Rate of change of the slant range in km/s.
    """

    azimuth: float
    elevation: float
    range_km: float
    range_rate_km_s: float


def gmst(jd: float, fr: float) -> float:
    """Greenwich mean sidereal time in radians (0-2pi).

    Args:
        jd: Whole part of the UT1 Julian date, as returned by ``sgp4.api.jday``.
        fr: Fractional part of the Julian date.
    """
    t = ((jd - J2000_JD) + fr) / DAYS_PER_JULIAN_CENTURY
    theta = (
        67310.54841
        + (876600.0 * 3600.0 + 8640184.812866) * t
        + 0.093104 * t * t
        - 6.2e-6 * t * t * t
    )
    return math.radians(theta / 240.0) % _TWO_PI


def _wrap_pi(angle: float) -> float:
    """Wrap an angle in radians into [-pi, pi)."""
    return (angle + math.pi) % _TWO_PI - math.pi


def teme_to_geodetic(position_km: NDArray[np.float64], theta: float) -> tuple[float, float, float]:
    """Convert a TEME position to geodetic latitude, longitude and altitude.

    Args:
        position_km: [x, y, z] TEME position in km.
        theta: Greenwich mean sidereal time in radians.

    Returns:
        Tuple of (latitude_rad, longitude_rad, altitude_km).
    """
    x, y, z = (float(c) for c in position_km)
    lon = _wrap_pi(math.atan2(y, x) - theta)

    r = math.hypot(x, y)
    lat = math.atan2(z, r)
    c = 1.0
    for _ in range(_LATITUDE_MAX_ITERATIONS):
        phi = lat
        sin_phi = math.sin(phi)
        c = 1.0 / math.sqrt(1.0 - EARTH_ECCENTRICITY_SQ * sin_phi * sin_phi)
        lat = math.atan2(z + EARTH_RADIUS_KM * c * EARTH_ECCENTRICITY_SQ * sin_phi, r)
        if abs(lat - phi) < _LATITUDE_TOLERANCE_RAD:
            break

    cos_lat = math.cos(lat)
    if abs(cos_lat) > 1e-9:
        alt = r / cos_lat - EARTH_RADIUS_KM * c
    else:
        # polar axis
        alt = abs(z) - EARTH_RADIUS_KM * c * (1.0 - EARTH_ECCENTRICITY_SQ)
    return lat, lon, alt


def observer_teme(observer: Observer, theta: float) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """TEME position (km) and velocity (km/s) of a ground station.

    Args:
        observer: Ground station.
        theta: Greenwich mean sidereal time in radians.
    """
    lat = observer.latitude * DEG_TO_RAD
    local_theta = (theta + observer.longitude * DEG_TO_RAD) % _TWO_PI

    sin_lat = math.sin(lat)
    c = 1.0 / math.sqrt(1.0 + EARTH_FLATTENING * (EARTH_FLATTENING - 2.0) * sin_lat * sin_lat)
    s = (1.0 - EARTH_FLATTENING) ** 2 * c
    achcp = (EARTH_RADIUS_KM * c + observer.altitude) * math.cos(lat)

    position = np.array([
        achcp * math.cos(local_theta),
        achcp * math.sin(local_theta),
        (EARTH_RADIUS_KM * s + observer.altitude) * sin_lat,
    ], dtype=np.float64)
    velocity = np.array([
        -EARTH_ROTATION_RAD_S * position[1],
        EARTH_ROTATION_RAD_S * position[0],
        0.0,
    ], dtype=np.float64)
    return position, velocity


def topocentric(
    position_km: NDArray[np.float64],
    velocity_km_s: NDArray[np.float64],
    observer: Observer,
    theta: float,
) -> LookAngles:
    """Look angles from an observer to a satellite given in TEME.

    Args:
        position_km: Satellite TEME position in km.
        velocity_km_s: Satellite TEME velocity in km/s.
        observer: Ground station.
        theta: Greenwich mean sidereal time in radians.
    """
    obs_pos, obs_vel = observer_teme(observer, theta)
    rng = np.asarray(position_km, dtype=np.float64) - obs_pos
    rng_rate = np.asarray(velocity_km_s, dtype=np.float64) - obs_vel
    distance = float(np.linalg.norm(rng))

    lat = observer.latitude * DEG_TO_RAD
    local_theta = (theta + observer.longitude * DEG_TO_RAD) % _TWO_PI
    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    sin_theta, cos_theta = math.sin(local_theta), math.cos(local_theta)

    # South-East-Zenith components
    top_s = sin_lat * cos_theta * rng[0] + sin_lat * sin_theta * rng[1] - cos_lat * rng[2]
    top_e = -sin_theta * rng[0] + cos_theta * rng[1]
    top_z = cos_lat * cos_theta * rng[0] + cos_lat * sin_theta * rng[1] + sin_lat * rng[2]

    azimuth = math.atan2(top_e, -top_s) % _TWO_PI
    elevation = math.asin(max(-1.0, min(1.0, top_z / distance)))
    range_rate = float(np.dot(rng, rng_rate)) / distance

    return LookAngles(
        azimuth=azimuth * RAD_TO_DEG,
        elevation=elevation * RAD_TO_DEG,
        range_km=distance,
        range_rate_km_s=range_rate,
    )
