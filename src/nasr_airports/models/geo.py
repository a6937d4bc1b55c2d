"""
Geographic value models shared by the query layer.
"""

from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from nasr_airports.validators import validate_latitude, validate_longitude


class GeoPoint(BaseModel):
    """
    A WGS84 coordinate in decimal degrees.

    Example:
        >>> GeoPoint(lat=39.5, lon=-98.3)
        GeoPoint(lat=39.5, lon=-98.3)
    """

    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")

    @field_validator('lat')
    @classmethod
    def check_lat(cls, v: float) -> float:
        return validate_latitude(v)

    @field_validator('lon')
    @classmethod
    def check_lon(cls, v: float) -> float:
        return validate_longitude(v)

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"GeoPoint(lat={self.lat}, lon={self.lon})"


class Bounds(BaseModel):
    """
    Axis-aligned map bounds (the visible map viewport).

    Containment is inclusive on every edge and does not wrap across
    the antimeridian.

    Example:
        >>> b = Bounds(south=30, west=-100, north=40, east=-90)
        >>> b.contains(35, -95)
        True
    """

    south: float = Field(..., description="Southern latitude edge")
    west: float = Field(..., description="Western longitude edge")
    north: float = Field(..., description="Northern latitude edge")
    east: float = Field(..., description="Eastern longitude edge")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def check_ordering(self) -> 'Bounds':
        if self.south > self.north:
            raise ValueError(
                f"south ({self.south}) must not be greater than north ({self.north})"
            )
        if self.west > self.east:
            raise ValueError(
                f"west ({self.west}) must not be greater than east ({self.east})"
            )
        return self

    def contains(self, lat: float, lon: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lon <= self.east
