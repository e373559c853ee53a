"""Point-to-point walking route planning on the trail network."""

import logging
from dataclasses import dataclass, field

from parksense.config import settings
from parksense.models.geo import GeoPoint
from parksense.services.geometry import route_distance
from parksense.services.graph_builder import TrailGraph, find_nearest_node
from parksense.services.path_finder import shortest_path


logger = logging.getLogger(__name__)


@dataclass
class PlannedRoute:
    """A walkable line between two picked points."""
    points: list[GeoPoint]
    distance_m: float
    duration_s: int
    node_ids: list[str] = field(default_factory=list)
    is_fallback: bool = False  # straight line, no trail path found

    @property
    def duration_min(self) -> int:
        return round(self.duration_s / 60)


@dataclass
class RouteVariant:
    name: str
    description: str
    duration_min: int


# name, description, time factor relative to the planned route
VARIANT_PROFILES = [
    ("scenic", "Passes the main sights and gardens, good for a leisurely visit", 1.2),
    ("direct", "Shortest way, gets you there fast", 0.8),
    ("fitness", "Takes in the exercise areas and fitness equipment", 1.5),
]


def walking_time_s(distance_m: float, walking_speed_mps: float | None = None) -> int:
    speed = walking_speed_mps or settings.walking_speed_mps
    return round(distance_m / speed)


def plan_route(
    trail_graph: TrailGraph | None,
    start: GeoPoint,
    end: GeoPoint,
    walking_speed_mps: float | None = None,
) -> PlannedRoute:
    """Plan a walk from ``start`` to ``end``.

    Both points are snapped to their nearest trail nodes and joined by the
    shortest trail path. Without a usable graph or path the result is the
    straight line between the two points, flagged ``is_fallback``.
    """
    if trail_graph is not None and len(trail_graph) > 0:
        start_node = find_nearest_node(start, trail_graph)
        end_node = find_nearest_node(end, trail_graph)
        path = shortest_path(trail_graph, start_node.id, end_node.id)

        if path and len(path) > 1:
            points = [trail_graph.get_node_position(node_id) for node_id in path]
            distance = route_distance(points)
            return PlannedRoute(
                points=points,
                distance_m=distance,
                duration_s=walking_time_s(distance, walking_speed_mps),
                node_ids=path,
            )
        logger.info("No trail path between %s and %s, using straight line",
                    start_node.id, end_node.id)
    else:
        logger.info("No trail network loaded, using straight line")

    points = [start, end]
    distance = route_distance(points)
    return PlannedRoute(
        points=points,
        distance_m=distance,
        duration_s=walking_time_s(distance, walking_speed_mps),
        is_fallback=True,
    )


def route_variants(duration_s: int) -> list[RouteVariant]:
    """Alternative walk styles with times scaled from the planned route."""
    return [
        RouteVariant(name=name, description=description, duration_min=round(duration_s * factor / 60))
        for name, description, factor in VARIANT_PROFILES
    ]
