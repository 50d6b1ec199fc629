"""Tests for chuk_mcp_topo.core.geodesy."""

import math

import pytest

from chuk_mcp_topo.constants import EARTH_RADIUS_KM
from chuk_mcp_topo.core.geodesy import LocationPoint, distance, haversine_km


# ===========================================================================
# LocationPoint
# ===========================================================================


class TestLocationPoint:
    def test_fields(self):
        p = LocationPoint(51.5, -0.12)
        assert p.lat == 51.5
        assert p.lng == -0.12

    def test_to_list_is_lat_lng(self):
        assert LocationPoint(10.0, 20.0).to_list() == [10.0, 20.0]

    def test_frozen(self):
        p = LocationPoint(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.lat = 3.0

    def test_equality(self):
        assert LocationPoint(1.0, 2.0) == LocationPoint(1.0, 2.0)

    def test_bounds_inclusive(self):
        LocationPoint(90.0, 180.0)
        LocationPoint(-90.0, -180.0)

    def test_latitude_out_of_range(self):
        with pytest.raises(ValueError, match="Latitude"):
            LocationPoint(90.5, 0.0)

    def test_longitude_out_of_range(self):
        with pytest.raises(ValueError, match="Longitude"):
            LocationPoint(0.0, -180.5)


# ===========================================================================
# haversine_km / distance
# ===========================================================================


class TestHaversine:
    def test_same_point_is_zero(self):
        a = LocationPoint(46.5, 7.9)
        assert distance(a, a) == 0.0

    def test_symmetric(self):
        a = LocationPoint(46.5, 7.9)
        b = LocationPoint(45.8, 6.86)
        assert distance(a, b) == pytest.approx(distance(b, a))

    def test_one_degree_longitude_at_equator(self):
        d = distance(LocationPoint(0.0, 0.0), LocationPoint(0.0, 1.0))
        assert d == pytest.approx(111.19, abs=0.01)

    def test_one_degree_latitude(self):
        d = haversine_km(0.0, 0.0, 1.0, 0.0)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)

    def test_antipodal(self):
        d = haversine_km(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi)

    def test_non_negative(self):
        assert haversine_km(-33.9, 151.2, 40.7, -74.0) > 0

    def test_london_paris(self):
        d = haversine_km(51.5074, -0.1278, 48.8566, 2.3522)
        assert 340 < d < 345

    def test_distance_matches_haversine(self):
        a = LocationPoint(10.0, 20.0)
        b = LocationPoint(11.0, 21.0)
        assert distance(a, b) == haversine_km(10.0, 20.0, 11.0, 21.0)
