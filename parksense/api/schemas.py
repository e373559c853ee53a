"""Pydantic schemas for API request/response."""

from pydantic import BaseModel, Field

from parksense.models.conditions import Season, Weather
from parksense.models.geo import GeoPoint
from parksense.models.route import Preferences, Route, RouteFilters


class SettingsUpdate(BaseModel):
    walking_speed_mps: float | None = Field(default=None, gt=0)


class SettingsResponse(BaseModel):
    walking_speed_mps: float


class PlanRouteRequest(BaseModel):
    start: GeoPoint
    end: GeoPoint


class RouteVariantInfo(BaseModel):
    name: str
    description: str
    duration_min: int


class PlanRouteResponse(BaseModel):
    points: list[GeoPoint]
    node_ids: list[str]
    distance_m: float
    duration_min: int
    is_fallback: bool  # straight line, no trail path
    variants: list[RouteVariantInfo]


class ScoreRouteRequest(BaseModel):
    route: Route
    preferences: Preferences = Field(default_factory=Preferences)
    weather: Weather | None = None
    season: Season | str | None = None
    hour: int | None = Field(default=None, ge=0, le=23)


class RecommendRequest(BaseModel):
    routes: list[Route]
    filters: RouteFilters = Field(default_factory=RouteFilters)
    user_location: GeoPoint | None = None
    profile: Preferences = Field(default_factory=Preferences)
    weather: Weather | None = None


class TrailStatsResponse(BaseModel):
    num_nodes: int
    num_edges: int
    num_lines: int
    num_components: int
    total_length_m: float


class GraphDataResponse(BaseModel):
    nodes: list[dict]
    edges: list[dict]
