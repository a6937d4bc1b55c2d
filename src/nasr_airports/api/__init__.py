"""
User-facing API interfaces for nasr-airports.

This module provides the update pipeline and the query interfaces for
searching published airport data.
"""

from nasr_airports.api.pipeline import AirportPipeline
from nasr_airports.api.query import AirportQuery, SearchSession, MAX_PINS, PAGE_SIZE

__all__ = [
    'AirportPipeline',
    'AirportQuery',
    'SearchSession',
    'MAX_PINS',
    'PAGE_SIZE'
]
