"""
Request models for the query layer.

These Pydantic models provide a type-safe, validated interface for
airport searches against published data.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from nasr_airports.models.geo import Bounds, GeoPoint
from nasr_airports.validators import validate_fuel_types, validate_radius_miles

DEFAULT_CENTER = GeoPoint(lat=39.5, lon=-98.3)
DEFAULT_RADIUS_MILES = 200.0


class AirportSearchRequest(BaseModel):
    """
    Request model for searching published airports.

    Attributes:
        fuels: Fuel keys to match (an airport matches if it has ANY of them)
        mode: 'view' (inside bounds), 'radius' (within radius of center) or 'all'
        center: Search center; distances are measured from here
        radius_miles: Radius for 'radius' mode, in statute miles
        bounds: Visible map bounds, required for 'view' mode
        page: Zero-based list page; results include pages 0..page

    Example:
        >>> request = AirportSearchRequest(
        ...     fuels=['100ll'],
        ...     mode='radius',
        ...     center=GeoPoint(lat=43.98, lon=-88.56),
        ...     radius_miles=50
        ... )

    Raises:
        ValidationError: If any field fails validation
    """

    fuels: List[str] = Field(
        default_factory=list,
        description="Selected fuel keys; an empty selection matches nothing",
        examples=[["100ll", "jet_a"]]
    )

    mode: Literal['view', 'radius', 'all'] = Field(
        default='view',
        description="Spatial search mode"
    )

    center: GeoPoint = Field(
        default=DEFAULT_CENTER,
        description="Search center used for distance sorting and radius mode"
    )

    radius_miles: float = Field(
        default=DEFAULT_RADIUS_MILES,
        description="Search radius in statute miles"
    )

    bounds: Optional[Bounds] = Field(
        default=None,
        description="Visible map bounds for view mode"
    )

    page: int = Field(
        default=0,
        ge=0,
        description="Zero-based list page"
    )

    @field_validator('fuels')
    @classmethod
    def validate_fuels_list(cls, v: List[str]) -> List[str]:
        return validate_fuel_types(v)

    @field_validator('radius_miles')
    @classmethod
    def validate_radius(cls, v: float) -> float:
        return validate_radius_miles(v)

    @model_validator(mode='after')
    def check_view_bounds(self) -> 'AirportSearchRequest':
        if self.mode == 'view' and self.bounds is None:
            raise ValueError("bounds are required for view mode")
        return self

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [{
                "fuels": ["100ll"],
                "mode": "radius",
                "center": {"lat": 43.98, "lon": -88.56},
                "radius_miles": 50,
                "page": 0
            }]
        }
    )
