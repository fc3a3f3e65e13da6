"""Tests for TEME to geodetic and topocentric conversions."""
from __future__ import annotations

import math

import numpy as np
import pytest

from sgpkit.core.coordinates import (
    LookAngles,
    Observer,
    gmst,
    observer_teme,
    teme_to_geodetic,
    topocentric,
)
from sgpkit.utils.constants import EARTH_FLATTENING, EARTH_RADIUS_KM, EARTH_ROTATION_RAD_S

RE = EARTH_RADIUS_KM


class TestGMST:
    def test_j2000(self) -> None:
        assert math.degrees(gmst(2451545.0, 0.0)) == pytest.approx(280.46061837, abs=1e-6)

    def test_split_julian_date(self) -> None:
        # 2000-01-01T12:00 as returned by sgp4.api.jday
        assert gmst(2451544.5, 0.5) == pytest.approx(gmst(2451545.0, 0.0), abs=1e-12)

    def test_range(self) -> None:
        for fr in np.linspace(0.0, 1.0, 25):
            theta = gmst(2456458.5, float(fr))
            assert 0.0 <= theta < 2 * math.pi

    def test_advances_one_sidereal_day(self) -> None:
        # One solar day turns the Earth slightly more than once.
        delta = (gmst(2456459.5, 0.0) - gmst(2456458.5, 0.0)) % (2 * math.pi)
        assert math.degrees(delta) == pytest.approx(0.9856, abs=1e-3)


class TestTemeToGeodetic:
    def test_equator_prime_meridian(self) -> None:
        lat, lon, alt = teme_to_geodetic(np.array([RE + 400.0, 0.0, 0.0]), 0.0)
        assert lat == pytest.approx(0.0, abs=1e-12)
        assert lon == pytest.approx(0.0, abs=1e-12)
        assert alt == pytest.approx(400.0, abs=1e-9)

    def test_earth_rotation_shifts_longitude(self) -> None:
        _, lon, _ = teme_to_geodetic(np.array([0.0, RE + 400.0, 0.0]), math.pi / 2)
        assert lon == pytest.approx(0.0, abs=1e-12)

    def test_longitude_wraps_to_negative(self) -> None:
        _, lon, _ = teme_to_geodetic(np.array([0.0, RE, 0.0]), math.pi)
        assert lon == pytest.approx(-math.pi / 2, abs=1e-12)

    def test_north_pole(self) -> None:
        polar_radius = RE * (1.0 - EARTH_FLATTENING)
        lat, _, alt = teme_to_geodetic(np.array([0.0, 0.0, polar_radius + 100.0]), 0.0)
        assert lat == pytest.approx(math.pi / 2, abs=1e-12)
        assert alt == pytest.approx(100.0, abs=1e-6)

    def test_geodetic_latitude_exceeds_geocentric(self) -> None:
        position = np.array([5000.0, 0.0, 4000.0])
        lat, _, _ = teme_to_geodetic(position, 0.0)
        assert lat > math.atan2(4000.0, 5000.0)


class TestObserver:
    def test_observer_on_equator(self) -> None:
        pos, vel = observer_teme(Observer(0.0, 0.0, 0.0), 0.0)
        np.testing.assert_allclose(pos, [RE, 0.0, 0.0], atol=1e-9)
        np.testing.assert_allclose(vel, [0.0, EARTH_ROTATION_RAD_S * RE, 0.0], atol=1e-12)

    def test_observer_altitude_in_km(self) -> None:
        pos, _ = observer_teme(Observer(0.0, 90.0, 1.5), 0.0)
        np.testing.assert_allclose(pos, [0.0, RE + 1.5, 0.0], atol=1e-9)

    def test_observer_round_trips_through_geodetic(self) -> None:
        observer = Observer(latitude=45.0, longitude=-30.0, altitude=2.0)
        pos, _ = observer_teme(observer, 1.0)
        lat, lon, alt = teme_to_geodetic(pos, 1.0)
        assert math.degrees(lat) == pytest.approx(45.0, abs=1e-8)
        assert math.degrees(lon) == pytest.approx(-30.0, abs=1e-8)
        assert alt == pytest.approx(2.0, abs=1e-6)


class TestTopocentric:
    observer = Observer(0.0, 0.0, 0.0)

    def _look(self, offset: list[float]) -> LookAngles:
        obs_pos, obs_vel = observer_teme(self.observer, 0.0)
        return topocentric(obs_pos + np.array(offset), obs_vel, self.observer, 0.0)

    def test_zenith(self) -> None:
        look = self._look([500.0, 0.0, 0.0])
        assert look.elevation == pytest.approx(90.0, abs=1e-9)
        assert look.range_km == pytest.approx(500.0, abs=1e-9)
        assert look.range_rate_km_s == pytest.approx(0.0, abs=1e-12)

    def test_north_on_horizon(self) -> None:
        look = self._look([0.0, 0.0, 1000.0])
        assert look.azimuth == pytest.approx(0.0, abs=1e-9)
        assert look.elevation == pytest.approx(0.0, abs=1e-9)

    def test_east_on_horizon(self) -> None:
        look = self._look([0.0, 1000.0, 0.0])
        assert look.azimuth == pytest.approx(90.0, abs=1e-9)

    def test_south_west(self) -> None:
        look = self._look([0.0, -1000.0, -1000.0])
        assert look.azimuth == pytest.approx(225.0, abs=1e-9)

    def test_receding_satellite_has_positive_range_rate(self) -> None:
        obs_pos, obs_vel = observer_teme(self.observer, 0.0)
        look = topocentric(obs_pos + np.array([500.0, 0.0, 0.0]), obs_vel + np.array([2.0, 0.0, 0.0]),
                           self.observer, 0.0)
        assert look.range_rate_km_s == pytest.approx(2.0, abs=1e-12)
