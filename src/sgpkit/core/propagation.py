"""Orbital propagation via SGP4.

Bridges a :class:`~sgpkit.core.tle.TLE` and an absolute instant to the
``sgp4`` engine and converts its TEME output to geodetic coordinates and
speed. Every call builds its own ``Satrec``; nothing is cached or shared
between calls.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Union

import numpy as np
from numpy.typing import NDArray
from sgp4.api import SGP4_ERRORS, WGS72, Satrec, jday

from sgpkit.core.coordinates import LookAngles, Observer, gmst, teme_to_geodetic, topocentric
from sgpkit.core.tle import TLE
from sgpkit.exceptions import InvalidElements, PropagationFailure
from sgpkit.utils.constants import RAD_TO_DEG, SECONDS_PER_HOUR

logger = logging.getLogger(__name__)

Instant = Union[datetime, np.datetime64]

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# datetime64 units finer than a microsecond, in ticks per microsecond
_SUB_MICROSECOND_UNITS = {"ns": 10**3, "ps": 10**6, "fs": 10**9, "as": 10**12}


def _datetime64_to_utc(instant: np.datetime64) -> datetime:
    """Convert a datetime64 (taken as UTC) to an aware datetime.

    Precision finer than a microsecond is truncated, never rounded.
    """
    if np.isnat(instant):
        raise ValueError("instant must not be NaT")
    unit, count = np.datetime_data(instant.dtype)
    if unit in _SUB_MICROSECOND_UNITS:
        ticks = int(instant.astype(np.int64)) * count
        microseconds = ticks // _SUB_MICROSECOND_UNITS[unit]
    else:
        microseconds = int(instant.astype("datetime64[us]").astype(np.int64))
    return _UNIX_EPOCH + timedelta(microseconds=microseconds)


@dataclass(frozen=True)
class Epoch:
    """A UTC calendar instant at microsecond resolution, as fed to SGP4."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    microsecond: int

    @classmethod
    def from_instant(cls, instant: Instant) -> Epoch:
        """Decompose an absolute instant into UTC calendar fields.

        Args:
            instant: A timezone-aware datetime in any zone, or a
                ``numpy.datetime64`` interpreted as UTC. Sub-microsecond
                precision is truncated.

        Raises:
            ValueError: If ``instant`` is a naive datetime or NaT.
            TypeError: If ``instant`` is neither a datetime nor a datetime64.
        """
        if isinstance(instant, np.datetime64):
            utc = _datetime64_to_utc(instant)
        elif isinstance(instant, datetime):
            if instant.tzinfo is None or instant.utcoffset() is None:
                raise ValueError("instant must be timezone-aware")
            utc = instant.astimezone(timezone.utc)
        else:
            raise TypeError(f"Unsupported instant type: {type(instant).__name__}")

        return cls(
            year=utc.year,
            month=utc.month,
            day=utc.day,
            hour=utc.hour,
            minute=utc.minute,
            second=utc.second,
            microsecond=utc.microsecond,
        )

    def jday(self) -> tuple[float, float]:
        """Julian date split into whole and fractional parts."""
        return jday(
            self.year, self.month, self.day, self.hour, self.minute,
            self.second + self.microsecond / 1e6,
        )

    def to_datetime(self) -> datetime:
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute,
            self.second, self.microsecond, tzinfo=timezone.utc,
        )


@dataclass
class StateVector:
    """Position and velocity in TEME frame.

    Attributes:
        position_km: [x, y, z] position in km.
        velocity_km_s: [vx, vy, vz] velocity in km/s.
        epoch: Time of this state vector (UTC).
    """

    position_km: NDArray[np.float64]  # shape (3,)
    velocity_km_s: NDArray[np.float64]  # shape (3,)
    epoch: datetime


@dataclass(frozen=True)
class SatelliteState:
    """Geodetic snapshot of a satellite at one instant.

    Attributes:
        latitude: Geodetic latitude in degrees (-90 to 90).
        longitude: Geodetic longitude in degrees (-180 to 180).
        altitude: Height above the reference ellipsoid in km.
        speed: Magnitude of the inertial velocity in km/h.
    """

    latitude: float
    longitude: float
    altitude: float
    speed: float

    def as_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
            "speed": self.speed,
        }


def _satrec(tle: TLE, gravity: int) -> Satrec:
    """Build a fresh engine instance for ``tle``.

    Raises:
        InvalidElements: If the engine cannot parse or initialize the elements.
    """
    try:
        sat = Satrec.twoline2rv(tle.line1, tle.line2, gravity)
    except ValueError as e:
        logger.warning("SGP4 rejected elements of %r: %s", tle.title, e)
        raise InvalidElements(f"SGP4 rejected elements of {tle.title!r}: {e}") from e

    if sat.error != 0:
        message = SGP4_ERRORS.get(sat.error, f"SGP4 error code {sat.error}")
        logger.warning("SGP4 initialization failed for %r: %s", tle.title, message)
        raise InvalidElements(f"SGP4 initialization failed for {tle.title!r}: {message}")
    return sat


def _run(tle: TLE, epoch: Epoch, gravity: int) -> tuple[StateVector, float, float]:
    """Propagate ``tle`` to ``epoch``; also return the Julian date used."""
    sat = _satrec(tle, gravity)
    jd, fr = epoch.jday()

    error_code, pos, vel = sat.sgp4(jd, fr)
    if error_code != 0:
        message = SGP4_ERRORS.get(error_code, f"SGP4 error code {error_code}")
        logger.warning(
            "SGP4 propagation failed for %r at %s: %s",
            tle.title, epoch.to_datetime().isoformat(), message,
        )
        raise PropagationFailure(
            f"SGP4 propagation failed for {tle.title!r} at "
            f"{epoch.to_datetime().isoformat()}: {message}",
            code=error_code,
        )

    state = StateVector(
        position_km=np.array(pos, dtype=np.float64),
        velocity_km_s=np.array(vel, dtype=np.float64),
        epoch=epoch.to_datetime(),
    )
    return state, jd, fr


def propagate(tle: TLE, instant: Instant, *, gravity: int = WGS72) -> StateVector:
    """Propagate a TLE to one instant and return the raw TEME state.

    Args:
        tle: A validated TLE.
        instant: Timezone-aware datetime or ``numpy.datetime64`` (UTC).
        gravity: ``sgp4.api`` gravity model constant.

    Raises:
        InvalidElements: If the engine rejects the element set.
        PropagationFailure: If SGP4 reports an error at that instant.
    """
    state, _, _ = _run(tle, Epoch.from_instant(instant), gravity)
    return state


def compute_state(tle: TLE, instant: Instant, *, gravity: int = WGS72) -> SatelliteState:
    """Compute the geodetic position and speed of a satellite at an instant.

    Args:
        tle: A validated TLE.
        instant: Timezone-aware datetime or ``numpy.datetime64`` (UTC).
        gravity: ``sgp4.api`` gravity model constant.

    Returns:
        Latitude/longitude in degrees, altitude in km and speed in km/h.

    Raises:
        InvalidElements: If the engine rejects the element set.
        PropagationFailure: If SGP4 reports an error at that instant.
    """
    state, jd, fr = _run(tle, Epoch.from_instant(instant), gravity)
    lat, lon, alt = teme_to_geodetic(state.position_km, gmst(jd, fr))
    speed_km_s = float(np.linalg.norm(state.velocity_km_s))

    logger.debug("Computed state for %r at %s", tle.title, state.epoch.isoformat())
    return SatelliteState(
        latitude=lat * RAD_TO_DEG,
        longitude=lon * RAD_TO_DEG,
        altitude=alt,
        speed=speed_km_s * SECONDS_PER_HOUR,
    )


def compute_states(
    tle: TLE, instants: Iterable[Instant], *, gravity: int = WGS72
) -> list[SatelliteState]:
    """Compute satellite states at several instants, in order.

    The first failing instant aborts the call.
    """
    result = [compute_state(tle, t, gravity=gravity) for t in instants]
    logger.debug("Computed %d states for %r", len(result), tle.title)
    return result


def look_angles(
    tle: TLE, instant: Instant, observer: Observer, *, gravity: int = WGS72
) -> LookAngles:
    """Azimuth, elevation, range and range rate of a satellite from a ground station.

    Raises:
        InvalidElements: If the engine rejects the element set.
        PropagationFailure: If SGP4 reports an error at that instant.
    """
    state, jd, fr = _run(tle, Epoch.from_instant(instant), gravity)
    return topocentric(state.position_km, state.velocity_km_s, observer, gmst(jd, fr))
