from pydantic import BaseModel, ConfigDict


class GeoPoint(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float

    @classmethod
    def from_lon_lat(cls, coord) -> "GeoPoint":
        """Build from a GeoJSON-style ``[lon, lat, ...]`` position."""
        return cls(lat=coord[1], lon=coord[0])


class ParkBounds(BaseModel):
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, point: GeoPoint) -> bool:
        return (
            self.min_lon <= point.lon <= self.max_lon
            and self.min_lat <= point.lat <= self.max_lat
        )
