from enum import Enum

from pydantic import BaseModel, Field


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


class Weather(BaseModel):
    """A single weather reading supplied by the caller."""
    temperature: float = 15.0  # °C
    precipitation: float = 0.0  # mm/h
    wind_speed: float = 5.0  # km/h
    humidity: float = 60.0  # %
    sunny: bool = True


class ScoringContext(BaseModel):
    """Environmental inputs shared by every route scored in one request."""
    weather: Weather = Field(default_factory=Weather)
    hour: int = Field(default=12, ge=0, le=23)
    season: Season | str = Season.SPRING  # unknown names score as spring
