from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    # Paths
    data_dir: Path = Path(__file__).parent.parent / "data"
    trail_cache_file: Path = data_dir / "trails.geojson"

    # Trail data source (GeoJSON FeatureCollection of LineStrings)
    trail_geojson_url: str = ""

    # Park bounds - features whose first coordinate falls outside are dropped
    park_min_lat: float = 51.2
    park_max_lat: float = 51.8
    park_min_lon: float = -0.5
    park_max_lon: float = 0.5

    # Walking pace used for route durations
    walking_speed_mps: float = 1.4

    # Weather used when the caller does not supply a reading
    default_temperature: float = 18.0
    default_precipitation: float = 0.0
    default_wind_speed: float = 8.0
    default_humidity: float = 65.0
    default_sunny: bool = True

    # Track last sync time
    trail_last_sync: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "PARKSENSE_"


settings = Settings()
