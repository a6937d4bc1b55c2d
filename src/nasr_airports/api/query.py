"""
High-level query interface for published airport data.

This module reproduces the map page's search behaviour over an in-memory
list of airports: fuel filtering, spatial modes, nearest-first ordering,
pin capping and incremental list pages.
"""

from pathlib import Path
from typing import List, Optional

from nasr_airports.geo import haversine_miles, radius_bounds
from nasr_airports.models import (
    Airport,
    AirportMatch,
    AirportSearchRequest,
    Bounds,
    GeoPoint,
    SearchPage,
    DEFAULT_CENTER,
    DEFAULT_RADIUS_MILES,
)
from nasr_airports.services.export_service import AirportExportService
from nasr_airports.types import FuelTypes, SearchModes
from nasr_airports.validators import validate_arpt_id, validate_radius_miles

MAX_PINS = 2000
PAGE_SIZE = 80


def _format_miles(miles: float) -> str:
    # Whole numbers print without a decimal point; no exponent notation
    if float(miles).is_integer():
        return str(int(miles))
    return repr(float(miles))


def format_summary(total: int, mode: str, radius_miles: float) -> str:
    """
    Result count text shown next to the list heading.

    Example:
        >>> format_summary(312, 'radius', 200)
        '(312 within 200mi)'
        >>> format_summary(2500, 'all', 200)
        '(2500 total, 2000 shown on map)'
    """
    if mode == SearchModes.ALL:
        mode_text = "total"
    elif mode == SearchModes.RADIUS:
        mode_text = f"within {_format_miles(radius_miles)}mi"
    else:
        mode_text = "in view"

    suffix = f", {MAX_PINS} shown on map" if total > MAX_PINS else ""
    return f"({total} {mode_text}{suffix})"


class AirportQuery:
    """
    Query interface over a list of published airports.

    Example:
        >>> query = AirportQuery.from_json('public/airports.json')
        >>> page = query.search(AirportSearchRequest(
        ...     fuels=['100ll'],
        ...     mode='radius',
        ...     center=GeoPoint(lat=43.98, lon=-88.56),
        ...     radius_miles=50
        ... ))
        >>> page.summary
        '(21 within 50mi)'
        >>> page.items[0].airport.arpt_id
        'OSH'
    """

    def __init__(self, airports: List[Airport]):
        self._airports = list(airports)

    @classmethod
    def from_json(cls, path: Path) -> 'AirportQuery':
        """Load airports from a published airports.json."""
        return cls(AirportExportService().load_airports(Path(path)))

    def __len__(self) -> int:
        return len(self._airports)

    @property
    def airports(self) -> List[Airport]:
        return list(self._airports)

    def find_by_id(self, arpt_id: str) -> Optional[Airport]:
        """
        Find an airport by FAA identifier (case-insensitive).

        Raises:
            ValueError: If arpt_id is not a valid identifier
        """
        code = validate_arpt_id(arpt_id)
        for airport in self._airports:
            if airport.arpt_id.upper() == code:
                return airport
        return None

    def filter(self, request: AirportSearchRequest) -> List[Airport]:
        """
        Apply fuel and spatial filters, preserving data order.

        An empty fuel selection matches nothing.
        """
        if not request.fuels:
            return []

        result = [
            ap for ap in self._airports
            if any(ap.fuel.get(fuel, False) for fuel in request.fuels)
        ]

        if request.mode == SearchModes.ALL:
            return result
        if request.mode == SearchModes.RADIUS:
            return [
                ap for ap in result
                if haversine_miles(request.center, ap) <= request.radius_miles
            ]
        return [ap for ap in result if request.bounds.contains(ap.lat, ap.lon)]

    def search(self, request: AirportSearchRequest) -> SearchPage:
        """
        Filter, sort nearest-first and paginate.

        Returns:
            SearchPage with map pins (capped at MAX_PINS) and list items
            for pages 0..request.page
        """
        matches = [
            AirportMatch(airport=ap, distance_miles=haversine_miles(request.center, ap))
            for ap in self.filter(request)
        ]
        matches.sort(key=lambda m: m.distance_miles)

        total = len(matches)
        end = min((request.page + 1) * PAGE_SIZE, total)

        return SearchPage(
            total=total,
            pins=matches[:MAX_PINS],
            items=matches[:end],
            page=request.page,
            has_more=(request.page + 1) * PAGE_SIZE < total,
            summary=format_summary(total, request.mode, request.radius_miles),
        )


class SearchSession:
    """
    Mutable search state driven by map interactions.

    Mirrors the page's controls: fuel toggles, radius slider, mode buttons,
    map clicks, viewport moves and "load more". Any change that alters the
    result set sends the list back to its first page.

    Example:
        >>> session = SearchSession(query, bounds=initial_bounds)
        >>> session.toggle_fuel('100ll')
        >>> session.click_map(43.98, -88.56)   # switches view -> radius
        >>> session.mode
        'radius'
        >>> session.results().summary
        '(140 within 200mi)'
    """

    def __init__(
        self,
        query: AirportQuery,
        center: GeoPoint = DEFAULT_CENTER,
        radius_miles: float = DEFAULT_RADIUS_MILES,
        bounds: Optional[Bounds] = None,
        show_circle_option: bool = False
    ):
        self._query = query
        self.mode: str = SearchModes.VIEW
        self.center = center
        self.radius_miles = validate_radius_miles(radius_miles)
        self.bounds = bounds
        self.fuels: List[str] = []
        self.page = 0
        self.show_circle_option = show_circle_option

    def toggle_fuel(self, key: str) -> bool:
        """
        Toggle a fuel filter.

        Returns:
            True if the fuel is now selected

        Raises:
            ValueError: If key is not a configured fuel type
        """
        if not FuelTypes.is_valid(key):
            raise ValueError(
                f"Unknown fuel type: {key}. Valid: {FuelTypes.keys()}"
            )
        if key in self.fuels:
            self.fuels.remove(key)
            selected = False
        else:
            self.fuels.append(key)
            selected = True
        self.page = 0
        return selected

    def set_radius(self, miles: float) -> Optional[Bounds]:
        """
        Change the search radius.

        Returns:
            Bounds to zoom the map to when in radius mode, else None
        """
        self.radius_miles = validate_radius_miles(miles)
        self.page = 0
        if self.mode == SearchModes.RADIUS:
            return self.zoom_bounds()
        return None

    def set_mode(self, mode: str) -> None:
        if not SearchModes.is_valid(mode):
            raise ValueError(
                f"Unknown search mode: {mode}. "
                f"Valid: {list(SearchModes.list_available())}"
            )
        self.mode = mode
        self.page = 0

    def click_map(self, lat: float, lon: float) -> Optional[Bounds]:
        """
        Move the search center to a clicked point.

        The list returns to its first page. In view mode a click also
        switches to radius mode.

        Returns:
            Bounds to zoom the map to if the mode switched, else None
        """
        self.center = GeoPoint(lat=lat, lon=lon)
        self.page = 0
        if self.mode == SearchModes.VIEW:
            self.mode = SearchModes.RADIUS
            return self.zoom_bounds()
        return None

    def set_center(self, lat: float, lon: float) -> None:
        """Move the search center (e.g. from geolocation) without changing mode."""
        self.center = GeoPoint(lat=lat, lon=lon)
        self.page = 0

    def move_viewport(self, bounds: Bounds) -> None:
        self.bounds = bounds
        self.page = 0

    def zoom_bounds(self) -> Bounds:
        return radius_bounds(self.center, self.radius_miles)

    @property
    def show_circle(self) -> bool:
        """Whether the radius circle is drawn on the map."""
        return self.mode == SearchModes.RADIUS or (
            self.mode != SearchModes.ALL and self.show_circle_option
        )

    def _request(self, page: Optional[int] = None) -> AirportSearchRequest:
        return AirportSearchRequest(
            fuels=list(self.fuels),
            mode=self.mode,
            center=self.center,
            radius_miles=self.radius_miles,
            bounds=self.bounds,
            page=self.page if page is None else page,
        )

    def results(self) -> SearchPage:
        """
        Search results for the current state.

        Raises:
            ValueError: In view mode before any viewport is known
        """
        if self.mode == SearchModes.VIEW and self.bounds is None:
            raise ValueError("viewport bounds are unknown; call move_viewport() first")
        return self._query.search(self._request())

    def load_more(self) -> bool:
        """
        Advance to the next list page if more results exist.

        Returns:
            True if the page advanced
        """
        if not self.results().has_more:
            return False
        self.page += 1
        return True
