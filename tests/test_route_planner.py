"""Tests for point-to-point route planning."""

import pytest

from parksense.models.geo import GeoPoint
from parksense.services.graph_builder import build_trail_graph
from parksense.services.route_planner import plan_route, route_variants, walking_time_s

from conftest import point_north, straight_line


class TestPlanRoute:
    """plan_route - snap, solve, derive distance and time."""

    def test_follows_trail(self, chain_graph) -> None:
        start = GeoPoint(lat=point_north(5).lat, lon=-0.1301)
        end = GeoPoint(lat=point_north(295).lat, lon=-0.1299)

        planned = plan_route(chain_graph, start, end, walking_speed_mps=1.4)

        assert not planned.is_fallback
        assert planned.node_ids == ["node_0", "node_1", "node_2", "node_3"]
        assert planned.points[0] == chain_graph.nodes["node_0"].position
        assert planned.distance_m == pytest.approx(300.0, abs=1e-6)
        assert planned.duration_s == round(300 / 1.4)
        assert planned.duration_min == 4

    def test_disconnected_trails_fall_back_to_straight_line(self) -> None:
        graph = build_trail_graph([straight_line(2), straight_line(2, lon=-0.14)])
        start, end = point_north(0), point_north(100, lon=-0.14)

        planned = plan_route(graph, start, end)

        assert planned.is_fallback
        assert planned.points == [start, end]
        assert planned.node_ids == []

    def test_no_graph_falls_back(self) -> None:
        planned = plan_route(None, point_north(0), point_north(140))
        assert planned.is_fallback
        assert planned.distance_m == pytest.approx(140.0, abs=1e-6)
        assert planned.duration_s == 100

    def test_empty_graph_falls_back(self) -> None:
        assert plan_route(build_trail_graph([]), point_north(0), point_north(50)).is_fallback

    def test_both_points_snap_to_same_node(self, chain_graph) -> None:
        planned = plan_route(chain_graph, point_north(1), point_north(2))
        assert planned.is_fallback


class TestRouteVariants:
    """route_variants - scenic, direct and fitness timings."""

    def test_scaled_minutes(self) -> None:
        variants = {v.name: v.duration_min for v in route_variants(600)}
        assert variants == {"scenic": 12, "direct": 8, "fitness": 15}


class TestWalkingTime:
    """walking_time_s - seconds at walking speed."""

    def test_explicit_speed(self) -> None:
        assert walking_time_s(140, 1.4) == 100
        assert walking_time_s(300, 2.0) == 150
