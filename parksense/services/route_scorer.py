"""Multi-dimensional scoring of candidate park routes.

A route is scored on five independent dimensions, each normalized to [0, 1]:

- environment: how well the route suits the current weather
- wildlife: chance of seeing animals given time of day, season and habitat
- facility: toilets, benches and water points, and whether they are open
- path: surface, gradient, safety and scenery
- personal: closeness to the user's stated distance, duration, difficulty
  and interests

The dimensions are combined with a weight profile that starts from fixed
defaults and is shifted by the user's priority flags. Adjusted weights are
not renormalized, so they may sum to something other than 1.
"""

from parksense.models.conditions import ScoringContext, Season, Weather
from parksense.models.route import (
    Facility,
    Preferences,
    Route,
    ScoreBreakdown,
    ScoreResult,
    WeightProfile,
)


# Hours of day (0-23) when each species is most active
WILDLIFE_ACTIVE_HOURS: dict[str, frozenset[int]] = {
    "birds": frozenset({6, 7, 8, 17, 18, 19}),
    "squirrels": frozenset({8, 9, 10, 15, 16, 17}),
    "ducks": frozenset({7, 8, 9, 16, 17, 18}),
    "swans": frozenset({7, 8, 9, 10, 16, 17, 18}),
}

SEASONAL_MULTIPLIERS: dict[Season, dict[str, float]] = {
    Season.SPRING: {"birds": 1.2, "squirrels": 1.0, "ducks": 1.1, "swans": 0.9},
    Season.SUMMER: {"birds": 1.0, "squirrels": 1.2, "ducks": 0.8, "swans": 0.8},
    Season.AUTUMN: {"birds": 1.1, "squirrels": 1.3, "ducks": 1.0, "swans": 1.0},
    Season.WINTER: {"birds": 0.7, "squirrels": 0.6, "ducks": 1.2, "swans": 1.3},
}

BASIC_FACILITIES = ("toilet", "bench", "water")
UNAVAILABLE_STATUSES = ("closed", "maintenance")

DEFAULT_ROUTE_DISTANCE_M = 1000
DEFAULT_ROUTE_MINUTES = 30


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _default(value: float | None, fallback: float) -> float:
    return fallback if value is None else value


class RouteScorer:
    """Scores routes against user preferences and the current conditions."""

    DEFAULT_WEIGHTS = WeightProfile()

    # Sub-factor weights inside the wildlife and facility dimensions
    WILDLIFE_FACTOR_WEIGHTS = {
        "time": 0.25,
        "season": 0.20,
        "historical": 0.25,
        "recent": 0.15,
        "location": 0.15,
    }
    FACILITY_FACTOR_WEIGHTS = {
        "basic": 0.30,
        "distribution": 0.25,
        "personal": 0.25,
        "status": 0.20,
    }

    MAX_REASONS = 3

    def calculate_score(
        self,
        route: Route,
        preferences: Preferences | None = None,
        context: ScoringContext | None = None,
    ) -> ScoreResult:
        """Score a single route.

        Args:
            route: Route to score (not modified)
            preferences: User preferences; defaults apply when omitted
            context: Weather, hour and season shared across the request

        Returns:
            ScoreResult with the rounded total, per-dimension breakdown,
            the weights applied and up to three reasons
        """
        preferences = preferences or Preferences()
        context = context or ScoringContext()

        weather_score = self.calculate_weather_score(route, context.weather)
        wildlife_score = self.calculate_wildlife_score(route, context.hour, context.season)
        facility_score = self.calculate_facility_score(route, preferences.needs)
        path_score = self.calculate_path_quality(route)
        personal_score = self.calculate_personal_preference(route, preferences)

        weights = self.adjust_weights(preferences)

        total = (
            weather_score * weights.environment
            + wildlife_score * weights.wildlife
            + facility_score * weights.facility
            + path_score * weights.path
            + personal_score * weights.personal
        )

        return ScoreResult(
            total=round(total, 2),
            breakdown=ScoreBreakdown(
                weather=round(weather_score, 2),
                wildlife=round(wildlife_score, 2),
                facility=round(facility_score, 2),
                path=round(path_score, 2),
                personal=round(personal_score, 2),
            ),
            weights=weights,
            reasons=self.generate_reasons(
                weather_score, wildlife_score, facility_score, path_score, personal_score, preferences
            ),
        )

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    def calculate_weather_score(self, route: Route, weather: Weather) -> float:
        score = 0.5

        if weather.precipitation > 0:
            score = _default(route.shelter_coverage, 0.3) * 0.8
            if weather.precipitation > 5:  # heavy rain
                score *= 0.6
            elif weather.precipitation > 2:  # moderate rain
                score *= 0.8

        # Overwrites the rain score when both apply
        if weather.sunny and weather.temperature > 25:
            score = _default(route.shade_coverage, 0.4) * 0.9
            if weather.temperature > 30:
                score *= 0.7

        if 15 <= weather.temperature <= 25 and weather.precipitation == 0:
            score = max(score, 0.8)

        if weather.wind_speed > 15:
            score *= 1 - _default(route.exposure_level, 0.5) * 0.3

        if weather.humidity > 80:
            score *= 0.9

        return _clamp(score)

    # ------------------------------------------------------------------
    # Wildlife
    # ------------------------------------------------------------------

    def calculate_wildlife_score(self, route: Route, hour: int, season: Season | str) -> float:
        w = self.WILDLIFE_FACTOR_WEIGHTS
        time_score = self.get_time_based_probability(hour, route.wildlife_data)
        season_score = self.get_seasonal_probability(season, route.species)
        historical_score = _default(route.wildlife_history, 0.6)
        recent_score = min(1.0, route.recent_sightings / 10)
        location_score = self.calculate_wildlife_location_score(route)

        return (
            time_score * w["time"]
            + season_score * w["season"]
            + historical_score * w["historical"]
            + recent_score * w["recent"]
            + location_score * w["location"]
        )

    def get_time_based_probability(self, hour: int, wildlife_data: dict[str, float]) -> float:
        probability = 0.0
        for species, active_hours in WILDLIFE_ACTIVE_HOURS.items():
            if hour in active_hours:
                probability += wildlife_data.get(species, 0.2)
        return min(1.0, probability)

    def get_seasonal_probability(self, season: Season | str, species: list[str]) -> float:
        try:
            multipliers = SEASONAL_MULTIPLIERS[Season(season)]
        except ValueError:
            multipliers = SEASONAL_MULTIPLIERS[Season.SPRING]

        total = sum(multipliers.get(name, 1.0) * 0.2 for name in species)
        return min(1.0, total)

    def calculate_wildlife_location_score(self, route: Route) -> float:
        score = 0.3
        if route.near_water:
            score += 0.3
        score += _default(route.vegetation_coverage, 0.5) * 0.4
        score += (1 - _default(route.crowd_density, 0.5)) * 0.3
        return min(1.0, score)

    # ------------------------------------------------------------------
    # Facilities
    # ------------------------------------------------------------------

    def calculate_facility_score(self, route: Route, needs: dict[str, bool] | None = None) -> float:
        w = self.FACILITY_FACTOR_WEIGHTS
        facilities = route.facilities

        route_km = max(1.0, (route.distance or DEFAULT_ROUTE_DISTANCE_M) / 1000)
        basic_score = sum(
            min(1.0, (sum(1 for f in facilities if f.type == kind) / route_km) / 2)
            for kind in BASIC_FACILITIES
        ) / len(BASIC_FACILITIES)

        return (
            basic_score * w["basic"]
            + self.calculate_facility_distribution(facilities, route) * w["distribution"]
            + self.calculate_personal_facility_score(facilities, needs) * w["personal"]
            + self.calculate_facility_status(facilities) * w["status"]
        )

    def calculate_facility_distribution(self, facilities: list[Facility], route: Route) -> float:
        """Spacing uniformity along the route.

        Facility positions are not known, so facilities are assumed to be
        evenly spaced: ideal and actual spacing coincide and any non-empty
        list scores 1.
        """
        if not facilities:
            return 0.0

        route_length = route.distance or DEFAULT_ROUTE_DISTANCE_M
        ideal_spacing = route_length / max(1, len(facilities))
        actual_spacing = route_length / len(facilities)

        uniformity = 1 - abs(ideal_spacing - actual_spacing) / ideal_spacing
        return _clamp(uniformity)

    def calculate_personal_facility_score(self, facilities: list[Facility], needs: dict[str, bool] | None) -> float:
        if not needs:
            return 0.5

        wanted = [need for need, required in needs.items() if required]
        if not wanted:
            return 0.5

        available = {f.type for f in facilities}
        return sum(1 for need in wanted if need in available) / len(wanted)

    def calculate_facility_status(self, facilities: list[Facility]) -> float:
        if not facilities:
            return 0.5
        open_count = sum(1 for f in facilities if f.status not in UNAVAILABLE_STATUSES)
        return open_count / len(facilities)

    # ------------------------------------------------------------------
    # Path quality
    # ------------------------------------------------------------------

    def calculate_path_quality(self, route: Route) -> float:
        score = 0.5
        score += _default(route.surface_quality, 0.7) * 0.3
        gradient_score = max(0.0, 1 - _default(route.gradient, 0.05) * 10)
        score += gradient_score * 0.2
        score += _default(route.safety, 0.8) * 0.3
        score += _default(route.scenery, 0.6) * 0.2
        return min(1.0, score)

    # ------------------------------------------------------------------
    # Personal preference
    # ------------------------------------------------------------------

    def calculate_personal_preference(self, route: Route, preferences: Preferences) -> float:
        score = 0.5

        if preferences.preferred_distance:
            distance = route.distance or DEFAULT_ROUTE_DISTANCE_M
            diff = abs(distance - preferences.preferred_distance)
            score += max(0.0, 1 - diff / preferences.preferred_distance) * 0.3

        if preferences.difficulty_level:
            route_difficulty = route.difficulty or "easy"
            score += (1.0 if route_difficulty == preferences.difficulty_level else 0.5) * 0.2

        if preferences.interests and route.themes:
            common = [i for i in preferences.interests if i in route.themes]
            score += len(common) / max(1, len(preferences.interests)) * 0.3

        if preferences.preferred_duration:
            minutes = _default(route.estimated_time, DEFAULT_ROUTE_MINUTES)
            diff = abs(minutes - preferences.preferred_duration)
            score += max(0.0, 1 - diff / preferences.preferred_duration) * 0.2

        return min(1.0, score)

    # ------------------------------------------------------------------
    # Weights and reasons
    # ------------------------------------------------------------------

    def adjust_weights(self, preferences: Preferences | None) -> WeightProfile:
        """Shift the default weights according to the user's priority flags.

        Each flag applies its deltas independently; the result is not
        renormalized.
        """
        weights = self.DEFAULT_WEIGHTS.model_copy()
        if preferences is None:
            return weights

        if preferences.prioritize_wildlife:
            weights.wildlife += 0.15
            weights.environment -= 0.10
            weights.facility -= 0.05

        if preferences.weather_sensitive:
            weights.environment += 0.20
            weights.wildlife -= 0.10
            weights.path -= 0.10

        if preferences.facility_dependent:
            weights.facility += 0.15
            weights.wildlife -= 0.05
            weights.path -= 0.10

        if preferences.prioritize_path_quality:
            weights.path += 0.15
            weights.personal -= 0.05
            weights.environment -= 0.10

        return weights

    def generate_reasons(
        self,
        weather_score: float,
        wildlife_score: float,
        facility_score: float,
        path_score: float,
        personal_score: float,
        preferences: Preferences | None = None,
    ) -> list[str]:
        reasons = []

        if weather_score > 0.8:
            reasons.append("Current weather is ideal for this route")
        elif weather_score < 0.4:
            reasons.append("Weather is so-so, look out for sheltered spots")

        if wildlife_score > 0.7:
            reasons.append("Wildlife is very active, lots to see")
        elif wildlife_score > 0.5:
            reasons.append("Good chance of meeting wildlife")

        if facility_score > 0.8:
            reasons.append("Well served by toilets, benches and water")
        elif facility_score < 0.4:
            reasons.append("Few facilities, come prepared")

        if path_score > 0.8:
            reasons.append("Paths are in good condition and comfortable to walk")
        elif path_score < 0.5:
            reasons.append("Path is somewhat challenging")

        if personal_score > 0.7:
            reasons.append("Matches your personal preferences")

        if preferences is not None:
            if preferences.prioritize_wildlife and wildlife_score > 0.6:
                reasons.append("Recommended for wildlife lovers")
            if preferences.weather_sensitive and weather_score > 0.7:
                reasons.append("Weather-friendly route")

        return reasons[: self.MAX_REASONS]


def score_route(
    route: Route,
    preferences: Preferences | None = None,
    context: ScoringContext | None = None,
) -> ScoreResult:
    """Score a route with a default RouteScorer."""
    return RouteScorer().calculate_score(route, preferences, context)


def create_scorer() -> RouteScorer:
    """Create a route scorer instance."""
    return RouteScorer()
