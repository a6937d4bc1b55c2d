"""
Result models returned by the query layer.
"""

from typing import List
from pydantic import BaseModel, Field

from nasr_airports.models.airport import Airport

AIRNAV_URL = "https://www.airnav.com/airport/K{arpt_id}"


class AirportMatch(BaseModel):
    """
    An airport matched by a search, with its distance from the search center.

    Example:
        >>> match.airnav_url
        'https://www.airnav.com/airport/KOSH'
    """

    airport: Airport
    distance_miles: float = Field(..., ge=0, description="Distance from search center")

    @property
    def airnav_url(self) -> str:
        return AIRNAV_URL.format(arpt_id=self.airport.arpt_id)

    @property
    def fuels(self) -> List[str]:
        return self.airport.active_fuels()

    def __str__(self) -> str:
        return (
            f"{self.airport.name} ({self.airport.arpt_id}) - "
            f"{self.airport.city}, {self.airport.state} - "
            f"Fuel: {', '.join(self.fuels)} - "
            f"{self.distance_miles:.1f} mi"
        )


class SearchPage(BaseModel):
    """
    One rendering of search results.

    Attributes:
        total: Number of airports matching the filters
        pins: Matches to draw on the map (nearest first, capped at MAX_PINS)
        items: List entries for pages 0..page (nearest first)
        page: Current zero-based page
        has_more: True if another page can be loaded
        summary: Result count text, e.g. '(312 within 200mi)'
    """

    total: int
    pins: List[AirportMatch]
    items: List[AirportMatch]
    page: int
    has_more: bool
    summary: str
