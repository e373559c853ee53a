"""Loading trail geometry from GeoJSON.

Trail lines arrive as GeoJSON ``LineString`` / ``MultiLineString`` features
with longitude-first positions. They are converted to latitude-first
``GeoPoint`` sequences here, so nothing downstream sees raw positions.
"""

import json
import logging

import httpx

from parksense.config import settings
from parksense.models.geo import GeoPoint, ParkBounds


logger = logging.getLogger(__name__)


def park_bounds() -> ParkBounds:
    return ParkBounds(
        min_lat=settings.park_min_lat,
        max_lat=settings.park_max_lat,
        min_lon=settings.park_min_lon,
        max_lon=settings.park_max_lon,
    )


def _feature_lines(feature: dict) -> list[list]:
    geometry = feature.get("geometry") or {}
    geom_type = geometry.get("type")
    coords = geometry.get("coordinates") or []

    if geom_type == "LineString":
        return [coords]
    if geom_type == "MultiLineString":
        return list(coords)
    return []


def parse_trail_lines(geojson: dict, bounds: ParkBounds | None = None) -> list[list[GeoPoint]]:
    """Extract trail lines from a GeoJSON FeatureCollection.

    A line is kept when its first position lies inside ``bounds`` (the
    configured park bounds by default). Lines with fewer than two positions
    are skipped.
    """
    bounds = bounds or park_bounds()
    lines = []
    skipped = 0

    for feature in geojson.get("features", []):
        for coords in _feature_lines(feature):
            if len(coords) < 2:
                skipped += 1
                continue

            points = [GeoPoint.from_lon_lat(c) for c in coords]
            if not bounds.contains(points[0]):
                continue
            lines.append(points)

    if skipped:
        logger.warning("Skipped %d trail line(s) with fewer than 2 coordinates", skipped)
    logger.info("Parsed %d trail lines", len(lines))
    return lines


def load_trail_lines_from_cache() -> list[list[GeoPoint]]:
    """Load trail lines from the local GeoJSON cache file."""
    cache_path = settings.trail_cache_file
    if not cache_path.exists():
        raise FileNotFoundError(f"Trail cache not found at {cache_path}")

    with open(cache_path, encoding="utf-8") as f:
        data = json.load(f)

    return parse_trail_lines(data)


async def fetch_trail_lines_from_url(url: str | None = None) -> list[list[GeoPoint]]:
    """Fetch trail GeoJSON, cache it, and parse it."""
    url = url or settings.trail_geojson_url
    if not url:
        raise ValueError("No trail GeoJSON URL configured")

    async with httpx.AsyncClient() as client:
        response = await client.get(url, timeout=30.0)
        response.raise_for_status()
        data = response.json()

    settings.trail_cache_file.parent.mkdir(parents=True, exist_ok=True)
    with open(settings.trail_cache_file, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return parse_trail_lines(data)
