"""Shared pytest fixtures for parksense tests.

COORDINATE SYSTEM:
    Test trails run due north along the -0.13 meridian from 51.5°N (St
    James's Park). Along a meridian the haversine distance is exactly
    R * Δlat, so points METERS_PER_DEG_LAT apart in latitude are 1 m apart.
"""

import math

import pytest

from parksense.models.geo import GeoPoint
from parksense.models.route import Facility, Route
from parksense.services.graph_builder import build_trail_graph

EARTH_RADIUS_M = 6_371_000
METERS_PER_DEG_LAT = EARTH_RADIUS_M * math.pi / 180

BASE_LAT = 51.5
BASE_LON = -0.13


def point_north(meters: float, lon: float = BASE_LON) -> GeoPoint:
    """Point ``meters`` north of the base latitude."""
    return GeoPoint(lat=BASE_LAT + meters / METERS_PER_DEG_LAT, lon=lon)


def straight_line(count: int, spacing_m: float = 100.0, lon: float = BASE_LON) -> list[GeoPoint]:
    return [point_north(i * spacing_m, lon=lon) for i in range(count)]


@pytest.fixture
def chain_line() -> list[GeoPoint]:
    """Four collinear points 100 m apart."""
    return straight_line(4)


@pytest.fixture
def chain_graph(chain_line):
    return build_trail_graph([chain_line])


@pytest.fixture
def make_route():
    """Factory for routes with sensible required fields."""

    def _make(route_id: str = "r1", distance: float = 1000.0, **kwargs) -> Route:
        return Route(id=route_id, distance=distance, **kwargs)

    return _make


@pytest.fixture
def well_equipped_route(make_route) -> Route:
    return make_route(
        route_id="lakeside",
        distance=1200,
        estimated_time=15,
        difficulty="easy",
        themes=["lake", "birds"],
        facilities=[
            Facility(type="toilet"),
            Facility(type="bench"),
            Facility(type="water"),
        ],
        wildlife_data={"birds": 0.8, "squirrels": 0.6},
        shelter_coverage=0.4,
        shade_coverage=0.6,
        near_water=True,
        vegetation_coverage=0.7,
        start_point=GeoPoint(lat=51.5033, lon=-0.1340),
    )
