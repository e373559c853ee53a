"""API routes for the ParkSense route engine."""

import logging
from datetime import datetime

import httpx
from fastapi import APIRouter, Depends, Request

from parksense.config import settings
from parksense.models.route import ScoredRoute, ScoreResult
from parksense.services.conditions import build_context
from parksense.services.graph_builder import TrailGraph, build_trail_graph
from parksense.services.recommender import recommend_routes
from parksense.services.route_planner import plan_route, route_variants
from parksense.services.route_scorer import score_route
from parksense.services.trail_loader import fetch_trail_lines_from_url, load_trail_lines_from_cache
from parksense.api.schemas import (
    SettingsUpdate, SettingsResponse,
    PlanRouteRequest, PlanRouteResponse, RouteVariantInfo,
    ScoreRouteRequest, RecommendRequest,
    TrailStatsResponse, GraphDataResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_graph(request: Request) -> TrailGraph:
    """Get the trail graph for this app, building it on first use."""
    trail_graph = getattr(request.app.state, "trail_graph", None)
    if trail_graph is None:
        try:
            lines = load_trail_lines_from_cache()
        except FileNotFoundError as e:
            logger.warning("%s; starting with an empty trail network", e)
            lines = []
        trail_graph = build_trail_graph(lines)
        request.app.state.trail_graph = trail_graph
    return trail_graph


@router.get("/trails/stats", response_model=TrailStatsResponse)
def get_trail_stats(trail_graph: TrailGraph = Depends(get_graph)):
    """Get trail network statistics."""
    stats = trail_graph.get_stats()
    return TrailStatsResponse(
        num_nodes=stats["num_nodes"],
        num_edges=stats["num_edges"],
        num_lines=stats["num_lines"],
        num_components=stats["num_components"],
        total_length_m=round(stats["total_length_m"], 1),
    )


@router.get("/trails/graph", response_model=GraphDataResponse)
def get_trail_graph_data(trail_graph: TrailGraph = Depends(get_graph)):
    """Get trail graph data for map visualization."""
    nodes = []
    for node in trail_graph.nodes.values():
        nodes.append({
            "id": node.id,
            "lat": node.position.lat,
            "lon": node.position.lon,
        })

    edges = []
    for edge in trail_graph.edges:
        edges.append({
            "from": edge.source,
            "to": edge.target,
            "weight": round(edge.weight, 2),
        })

    return GraphDataResponse(nodes=nodes, edges=edges)


@router.post("/trails/sync")
async def sync_trail_data(request: Request):
    """Refresh trail data from the configured GeoJSON URL."""
    try:
        lines = await fetch_trail_lines_from_url()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Trail sync failed: %s", e)
        return {
            "success": False,
            "message": f"Sync failed: {str(e)}",
        }

    request.app.state.trail_graph = build_trail_graph(lines)
    settings.trail_last_sync = datetime.now().isoformat()
    return {
        "success": True,
        "message": f"Synced {len(lines)} trail lines",
        "last_sync": settings.trail_last_sync,
    }


@router.post("/route/plan", response_model=PlanRouteResponse)
def plan_walk(body: PlanRouteRequest, trail_graph: TrailGraph = Depends(get_graph)):
    """Plan a walk between two picked points."""
    planned = plan_route(trail_graph, body.start, body.end, settings.walking_speed_mps)

    return PlanRouteResponse(
        points=planned.points,
        node_ids=planned.node_ids,
        distance_m=round(planned.distance_m, 1),
        duration_min=planned.duration_min,
        is_fallback=planned.is_fallback,
        variants=[
            RouteVariantInfo(name=v.name, description=v.description, duration_min=v.duration_min)
            for v in route_variants(planned.duration_s)
        ],
    )


@router.post("/routes/score", response_model=ScoreResult)
def score_single_route(body: ScoreRouteRequest):
    """Score one route under the given (or current) conditions."""
    context = build_context(body.weather)
    overrides = {}
    if body.season is not None:
        overrides["season"] = body.season
    if body.hour is not None:
        overrides["hour"] = body.hour
    if overrides:
        context = context.model_copy(update=overrides)

    return score_route(body.route, body.preferences, context)


@router.post("/routes/recommend", response_model=list[ScoredRoute])
def recommend(body: RecommendRequest):
    """Get up to two recommended routes."""
    return recommend_routes(
        body.routes,
        body.filters,
        body.user_location,
        body.profile,
        context=build_context(body.weather),
    )


@router.get("/settings", response_model=SettingsResponse)
def get_settings():
    """Get current user settings."""
    return SettingsResponse(
        walking_speed_mps=settings.walking_speed_mps,
    )


@router.put("/settings", response_model=SettingsResponse)
def update_settings(update: SettingsUpdate):
    """Update user settings."""
    if update.walking_speed_mps is not None:
        settings.walking_speed_mps = update.walking_speed_mps

    return get_settings()
