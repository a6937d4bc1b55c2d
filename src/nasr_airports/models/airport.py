"""
Pydantic model for a published airport record.

Schema Design:
- One record per APT_BASE.csv row
- Field order is the key order of the published JSON
- Fuel availability as a flat {fuel_key: bool} object
"""

from typing import Dict, List
from pydantic import BaseModel, Field, field_validator


class Airport(BaseModel):
    """
    Airport record as published in airports.json.

    Attributes:
        arpt_id: FAA location identifier (trimmed ARPT_ID)
        name: Airport name (ARPT_NAME)
        city: Associated city (CITY)
        state: Two-letter state code (STATE_CODE)
        icao: ICAO-style code, prefix + arpt_id
        lat: Latitude in decimal degrees (LAT_DECIMAL)
        lon: Longitude in decimal degrees (LONG_DECIMAL)
        fuel: Fuel availability flags keyed by fuel type

    Example:
        >>> ap = Airport(
        ...     arpt_id="OSH",
        ...     name="WITTMAN RGNL",
        ...     city="OSHKOSH",
        ...     state="WI",
        ...     icao="KOSH",
        ...     lat=43.984,
        ...     lon=-88.557,
        ...     fuel={"mogas": False, "100ll": True, "jet_a": True}
        ... )
        >>> ap.active_fuels()
        ['100ll', 'jet_a']
    """

    arpt_id: str = Field(
        ...,
        min_length=1,
        description="FAA location identifier",
        examples=["OSH"]
    )

    name: str = Field(
        default="",
        description="Airport name",
        examples=["WITTMAN RGNL"]
    )

    city: str = Field(
        default="",
        description="Associated city",
        examples=["OSHKOSH"]
    )

    state: str = Field(
        default="",
        description="State code",
        examples=["WI"]
    )

    icao: str = Field(
        ...,
        description="ICAO-style code (prefix + arpt_id)",
        examples=["KOSH"]
    )

    lat: float = Field(
        ...,
        description="Latitude in decimal degrees"
    )

    lon: float = Field(
        ...,
        description="Longitude in decimal degrees"
    )

    fuel: Dict[str, bool] = Field(
        default_factory=dict,
        description="Fuel availability flags",
        examples=[{"mogas": False, "100ll": True, "jet_a": True}]
    )

    @field_validator('arpt_id')
    @classmethod
    def strip_arpt_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("arpt_id must not be blank")
        return v

    @property
    def has_fuel(self) -> bool:
        return any(self.fuel.values())

    def active_fuels(self) -> List[str]:
        """Fuel keys flagged as available, in flag order."""
        return [key for key, available in self.fuel.items() if available]

    def to_json_dict(self) -> dict:
        """Convert to the published JSON object."""
        return self.model_dump()

    def __repr__(self) -> str:
        return (
            f"Airport(arpt_id='{self.arpt_id}', "
            f"name='{self.name}', "
            f"state='{self.state}', "
            f"fuels={self.active_fuels()})"
        )
