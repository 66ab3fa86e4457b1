"""Tests for great-circle distance."""

import math

import pytest

from coverage_api.lib.geo import EARTH_RADIUS_KM, Coordinate, distance, haversine_km

JOHANNESBURG = Coordinate(-26.2041, 28.0473)
CAPE_TOWN = Coordinate(-33.9249, 18.4241)


class TestHaversine:
    """Tests for haversine_km and distance."""

    def test_same_point_is_zero(self) -> None:
        assert distance(JOHANNESBURG, JOHANNESBURG) == 0.0

    def test_symmetric(self) -> None:
        assert distance(JOHANNESBURG, CAPE_TOWN) == pytest.approx(distance(CAPE_TOWN, JOHANNESBURG))

    def test_johannesburg_to_cape_town(self) -> None:
        assert 1250 < distance(JOHANNESBURG, CAPE_TOWN) < 1300

    def test_one_degree_of_latitude(self) -> None:
        expected = EARTH_RADIUS_KM * math.pi / 180
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected)

    def test_antipodal_points_are_finite(self) -> None:
        d = haversine_km(0.0, 0.0, 0.0, 180.0)
        assert math.isfinite(d)
        assert d == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_pole_to_pole(self) -> None:
        assert haversine_km(90.0, 0.0, -90.0, 0.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_crosses_antimeridian(self) -> None:
        d = haversine_km(0.0, 179.5, 0.0, -179.5)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi / 180, rel=1e-6)

    def test_never_negative(self) -> None:
        assert haversine_km(-26.2041, 28.0473, -26.2041000001, 28.0473) >= 0.0
