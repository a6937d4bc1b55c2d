"""
nasr-airports: FAA NASR airport fuel data for a static map.

Main package exports for user-facing API.
"""

from nasr_airports.api import AirportPipeline, AirportQuery, SearchSession
from nasr_airports.types import FuelTypes

__all__ = [
    'AirportPipeline',
    'AirportQuery',
    'SearchSession',
    'FuelTypes',
    'update_airports'
]


def update_airports() -> dict:
    """
    Run the NASR airport update job with configuration from the environment.

    Downloads the newest available APT CSV archive (next cycle, falling back
    to the current cycle), parses APT_BASE.csv and publishes airports.json.

    Returns:
        Pipeline statistics dictionary

    Raises:
        RuntimeError: If no cycle archive could be downloaded

    Example:
        >>> from nasr_airports import update_airports
        >>> stats = update_airports()
        >>> print(f"Published {stats['exported']} airports to {stats['output_path']}")
        Published 19612 airports to public/airports.json
    """
    return AirportPipeline().run()
