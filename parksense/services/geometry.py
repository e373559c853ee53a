import math
from collections.abc import Sequence

from parksense.models.geo import GeoPoint


EARTH_RADIUS_M = 6_371_000


def haversine_distance(coord1: GeoPoint, coord2: GeoPoint) -> float:
    """Calculate distance between two coordinates in meters."""
    lat1, lon1 = math.radians(coord1.lat), math.radians(coord1.lon)
    lat2, lon2 = math.radians(coord2.lat), math.radians(coord2.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def route_distance(points: Sequence[GeoPoint]) -> float:
    """Total length in meters of a polyline through ``points``."""
    total = 0.0
    for i in range(len(points) - 1):
        total += haversine_distance(points[i], points[i + 1])
    return total
