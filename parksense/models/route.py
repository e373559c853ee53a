from pydantic import BaseModel, Field

from parksense.models.geo import GeoPoint


class Facility(BaseModel):
    type: str  # toilet, bench, water, cafe, ...
    status: str = "open"  # open, closed, maintenance


class Route(BaseModel):
    """A candidate park route and the static attributes the scorer reads.

    Optional attributes are left as ``None`` when unknown; the scorer
    substitutes its documented default for each of them.
    """
    id: str
    name: str = ""
    distance: float = Field(ge=0)  # meters
    estimated_time: float | None = None  # minutes
    difficulty: str | None = None  # easy, moderate, hard
    accessible: bool = False
    themes: list[str] = Field(default_factory=list)
    start_point: GeoPoint | None = None

    facilities: list[Facility] = Field(default_factory=list)

    # Environmental exposure, fractions in [0, 1]
    shelter_coverage: float | None = None
    shade_coverage: float | None = None
    exposure_level: float | None = None

    # Path quality, fractions in [0, 1]
    surface_quality: float | None = None
    gradient: float | None = None  # rise over run, 0.05 = 5%
    safety: float | None = None
    scenery: float | None = None

    # Wildlife
    wildlife_data: dict[str, float] = Field(default_factory=dict)  # species -> base probability
    species: list[str] = Field(default_factory=list)
    wildlife_history: float | None = None
    recent_sightings: int = 0  # sightings in the last 24h

    # Location
    near_water: bool = False
    vegetation_coverage: float | None = None
    crowd_density: float | None = None


class Preferences(BaseModel):
    """Soft preferences used for scoring and weight adjustment."""
    preferred_distance: float | None = Field(default=None, gt=0)  # meters
    preferred_duration: float | None = Field(default=None, gt=0)  # minutes
    difficulty_level: str | None = None
    interests: list[str] | None = None
    needs: dict[str, bool] = Field(default_factory=dict)  # facility type -> required

    prioritize_wildlife: bool = False
    weather_sensitive: bool = False
    facility_dependent: bool = False
    prioritize_path_quality: bool = False


class RouteFilters(BaseModel):
    """Hard constraints; a route violating any present constraint is dropped."""
    max_distance: float | None = Field(default=None, gt=0)
    min_distance: float | None = Field(default=None, ge=0)
    max_duration: float | None = Field(default=None, gt=0)
    difficulty: str | None = None
    accessible: bool = False


class WeightProfile(BaseModel):
    environment: float = 0.30
    wildlife: float = 0.25
    facility: float = 0.20
    path: float = 0.15
    personal: float = 0.10


class ScoreBreakdown(BaseModel):
    weather: float
    wildlife: float
    facility: float
    path: float
    personal: float


class ScoreResult(BaseModel):
    total: float
    breakdown: ScoreBreakdown
    weights: WeightProfile
    reasons: list[str] = Field(default_factory=list)


class ScoredRoute(BaseModel):
    route: Route
    score: float
    breakdown: ScoreBreakdown
    weights: WeightProfile
    reasons: list[str]
    distance_from_user: float | None = None  # meters
    distance_score: float = 0.5
