"""Weather and season inputs for route scoring.

Weather acquisition lives outside this package; callers hand in a reading
or get the configured fallback.
"""

from datetime import datetime

from parksense.config import settings
from parksense.models.conditions import ScoringContext, Season, Weather


def default_weather() -> Weather:
    """Fallback reading used when the caller supplies no weather."""
    return Weather(
        temperature=settings.default_temperature,
        precipitation=settings.default_precipitation,
        wind_speed=settings.default_wind_speed,
        humidity=settings.default_humidity,
        sunny=settings.default_sunny,
    )


def season_for_month(month: int) -> Season:
    if 3 <= month <= 5:
        return Season.SPRING
    if 6 <= month <= 8:
        return Season.SUMMER
    if 9 <= month <= 11:
        return Season.AUTUMN
    return Season.WINTER


def build_context(weather: Weather | None = None, now: datetime | None = None) -> ScoringContext:
    """Assemble the shared scoring context for one request."""
    now = now or datetime.now()
    return ScoringContext(
        weather=weather or default_weather(),
        hour=now.hour,
        season=season_for_month(now.month),
    )
