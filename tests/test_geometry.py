"""Tests for great-circle distance helpers."""

import pytest

from parksense.models.geo import GeoPoint
from parksense.services.geometry import haversine_distance, route_distance

from conftest import straight_line


class TestHaversineDistance:
    """haversine_distance - meters between two points."""

    def test_same_point_is_zero(self) -> None:
        p = GeoPoint(lat=51.5045, lon=-0.13)
        assert haversine_distance(p, p) == 0

    def test_symmetric(self) -> None:
        a = GeoPoint(lat=51.5010, lon=-0.1410)
        b = GeoPoint(lat=51.5060, lon=-0.1290)
        assert haversine_distance(a, b) == pytest.approx(haversine_distance(b, a))

    def test_one_degree_latitude(self) -> None:
        """1 degree latitude ≈ 111.2 km."""
        dist = haversine_distance(GeoPoint(lat=46.0, lon=10.0), GeoPoint(lat=47.0, lon=10.0))
        assert 111_000 < dist < 111_400

    def test_short_park_distance(self) -> None:
        """Across St James's Park is well under a kilometre."""
        west = GeoPoint(lat=51.5025, lon=-0.1395)
        east = GeoPoint(lat=51.5025, lon=-0.1290)
        assert 700 < haversine_distance(west, east) < 750


class TestRouteDistance:
    """route_distance - polyline length."""

    def test_sums_legs(self) -> None:
        assert route_distance(straight_line(4)) == pytest.approx(300.0, abs=1e-6)

    def test_single_point_is_zero(self) -> None:
        assert route_distance(straight_line(1)) == 0.0

    def test_empty_is_zero(self) -> None:
        assert route_distance([]) == 0.0


class TestGeoPoint:
    """GeoPoint model surface."""

    def test_from_lon_lat_swaps_order(self) -> None:
        assert GeoPoint.from_lon_lat([-0.13, 51.5, 12.0]) == GeoPoint(lat=51.5, lon=-0.13)

    def test_only_lat_lon_fields(self) -> None:
        point = GeoPoint(lat=51.5, lon=-0.13)
        assert point.model_dump() == {"lat": 51.5, "lon": -0.13}
        assert not hasattr(point, "as_tuple")
