"""
Great-circle distance helpers.

Distances are in statute miles to match how pilots and the map UI
express search radii.
"""

import math

from nasr_airports.models.geo import Bounds

EARTH_RADIUS_MILES = 3958.8
METERS_PER_MILE = 1609.34

# Leaflet's equatorial circumference used by LatLng.toBounds()
_EARTH_CIRCUMFERENCE_METERS = 40075017


def haversine_miles(a, b) -> float:
    """
    Haversine distance between two points, in statute miles.

    Args:
        a: Any object with ``lat`` and ``lon`` attributes (degrees)
        b: Any object with ``lat`` and ``lon`` attributes (degrees)

    Example:
        >>> round(haversine_miles(GeoPoint(lat=0, lon=0), GeoPoint(lat=0, lon=1)), 1)
        69.1
    """
    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)

    x = (
        math.sin(d_lat / 2) ** 2
        + math.sin(d_lon / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    )
    return 2 * EARTH_RADIUS_MILES * math.asin(math.sqrt(x))


def radius_bounds(center, radius_miles: float) -> Bounds:
    """
    Bounding box that fits a radius circle around ``center``.

    Uses the same approximation the map widget applies when zooming to the
    search radius (box side = circle diameter).
    """
    size_meters = radius_miles * METERS_PER_MILE * 2
    lat_accuracy = 180 * size_meters / _EARTH_CIRCUMFERENCE_METERS
    cos_lat = math.cos(math.radians(center.lat))
    lon_accuracy = lat_accuracy / cos_lat if cos_lat > 1e-12 else 180.0

    return Bounds(
        south=max(center.lat - lat_accuracy, -90.0),
        west=max(center.lon - lon_accuracy, -180.0),
        north=min(center.lat + lat_accuracy, 90.0),
        east=min(center.lon + lon_accuracy, 180.0),
    )
