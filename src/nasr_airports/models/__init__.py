"""
Pydantic models for airport records, NASR cycles and search requests.

This module contains type-safe models that integrate validators
and provide clean interfaces for service layer operations.
"""

from nasr_airports.models.airport import Airport
from nasr_airports.models.cycle import NasrCycle
from nasr_airports.models.geo import GeoPoint, Bounds
from nasr_airports.models.requests import (
    AirportSearchRequest,
    DEFAULT_CENTER,
    DEFAULT_RADIUS_MILES,
)
from nasr_airports.models.results import AirportMatch, SearchPage
from nasr_airports.models.manifest import ExportManifest

__all__ = [
    'Airport',
    'NasrCycle',
    'GeoPoint',
    'Bounds',
    'AirportSearchRequest',
    'DEFAULT_CENTER',
    'DEFAULT_RADIUS_MILES',
    'AirportMatch',
    'SearchPage',
    'ExportManifest',
]
