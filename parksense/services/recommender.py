"""Top-2 route recommendation.

Routes are filtered by the user's hard constraints, scored, ranked and
reduced to two picks. If the top two are near-duplicates (similar length
and mostly the same themes) the second pick is swapped for the best-ranked
route that differs from the first.
"""

import logging

from parksense.models.conditions import ScoringContext
from parksense.models.geo import GeoPoint
from parksense.models.route import Preferences, Route, RouteFilters, ScoredRoute
from parksense.services.conditions import build_context
from parksense.services.geometry import haversine_distance
from parksense.services.route_scorer import RouteScorer, create_scorer


logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 2
NEAR_TIE_THRESHOLD = 0.10
FULL_PROXIMITY_RADIUS_M = 5000
SIMILAR_DISTANCE_RATIO = 0.20
SIMILAR_THEME_RATIO = 0.60


def meets_basic_criteria(route: Route, filters: RouteFilters) -> bool:
    """Check a route against every constraint present in ``filters``."""
    if filters.max_distance is not None and route.distance > filters.max_distance:
        return False

    if filters.min_distance is not None and route.distance < filters.min_distance:
        return False

    if (
        filters.max_duration is not None
        and route.estimated_time is not None
        and route.estimated_time > filters.max_duration
    ):
        return False

    if filters.difficulty and route.difficulty != filters.difficulty:
        return False

    if filters.accessible and not route.accessible:
        return False

    return True


def are_routes_similar(route1: Route, route2: Route) -> bool:
    """Two routes are similar when both length and themes nearly match."""
    longest = max(route1.distance, route2.distance)
    distance_ratio = abs(route1.distance - route2.distance) / longest if longest else 0.0

    common = [t for t in route1.themes if t in route2.themes]
    theme_ratio = len(common) / max(len(route1.themes), len(route2.themes), 1)

    return distance_ratio < SIMILAR_DISTANCE_RATIO and theme_ratio > SIMILAR_THEME_RATIO


def _score_candidate(
    scorer: RouteScorer,
    route: Route,
    profile: Preferences,
    context: ScoringContext,
    user_location: GeoPoint | None,
) -> ScoredRoute:
    result = scorer.calculate_score(route, profile, context)

    distance_from_user = None
    distance_score = 0.5
    if user_location is not None and route.start_point is not None:
        distance_from_user = haversine_distance(user_location, route.start_point)
        distance_score = max(0.0, 1 - distance_from_user / FULL_PROXIMITY_RADIUS_M)

    return ScoredRoute(
        route=route,
        score=result.total,
        breakdown=result.breakdown,
        weights=result.weights,
        reasons=result.reasons,
        distance_from_user=distance_from_user,
        distance_score=distance_score,
    )


def rank_routes(scored: list[ScoredRoute]) -> list[ScoredRoute]:
    """Order by score, letting the distance score decide near-ties.

    Adjacent routes whose scores differ by less than NEAR_TIE_THRESHOLD are
    swapped when the lower one has the smaller distance score. A route can
    only move past routes scoring within the threshold of it.
    """
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    for i in range(len(ranked) - 1):
        upper, lower = ranked[i], ranked[i + 1]
        if abs(upper.score - lower.score) < NEAR_TIE_THRESHOLD and lower.distance_score < upper.distance_score:
            ranked[i], ranked[i + 1] = lower, upper
    return ranked


def select_diverse(ranked: list[ScoredRoute]) -> list[ScoredRoute]:
    """Take the top picks, replacing a near-duplicate second pick if possible."""
    top = ranked[:MAX_RECOMMENDATIONS]
    if len(top) == 2 and are_routes_similar(top[0].route, top[1].route):
        for candidate in ranked[2:]:
            if not are_routes_similar(top[0].route, candidate.route):
                top[1] = candidate
                break
    return top


def recommend_routes(
    routes: list[Route],
    filters: RouteFilters | None = None,
    user_location: GeoPoint | None = None,
    profile: Preferences | None = None,
    context: ScoringContext | None = None,
    scorer: RouteScorer | None = None,
) -> list[ScoredRoute]:
    """Recommend up to two routes.

    Args:
        routes: Candidate routes
        filters: Hard constraints; routes violating any are dropped
        user_location: Where the user is now, for the proximity score
        profile: Preferences used for scoring
        context: Shared weather/time/season; built from the wall clock
            and default weather when omitted
        scorer: Scorer to use (a default one when omitted)

    Returns:
        At most two scored routes, best first. Empty when no route passes
        the filters.
    """
    filters = filters or RouteFilters()
    profile = profile or Preferences()

    eligible = [r for r in routes if meets_basic_criteria(r, filters)]
    if not eligible:
        logger.info("No routes left after filtering %d candidates", len(routes))
        return []

    context = context or build_context()
    scorer = scorer or create_scorer()

    scored = [_score_candidate(scorer, r, profile, context, user_location) for r in eligible]
    return select_diverse(rank_routes(scored))
