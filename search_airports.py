"""
Airport Search Script

Searches a published airports.json the same way the map page does:
fuel filter, radius around a point, nearest first.

Usage:
    python search_airports.py <lat> <lon> [radius_miles] [fuel ...]

Example:
    python search_airports.py 43.98 -88.56 50 100ll jet_a
"""

import sys

from nasr_airports.api import AirportQuery, PAGE_SIZE
from nasr_airports.config import get_app_config
from nasr_airports.models import AirportSearchRequest, GeoPoint
from nasr_airports.types import FuelTypes

if len(sys.argv) < 3:
    print(__doc__)
    sys.exit(2)

lat = float(sys.argv[1])
lon = float(sys.argv[2])
radius = float(sys.argv[3]) if len(sys.argv) > 3 else 200
fuels = sys.argv[4:] or FuelTypes.keys()

config = get_app_config()
query = AirportQuery.from_json(config.output_path)
print(f"Loaded {len(query)} airports from {config.output_path}")

request = AirportSearchRequest(
    fuels=fuels,
    mode='radius',
    center=GeoPoint(lat=lat, lon=lon),
    radius_miles=radius
)
page = query.search(request)

print(f"Fuel: {', '.join(FuelTypes.get_label(f) for f in fuels)} {page.summary}")
print()
for match in page.items:
    print(f"  {match}")
    print(f"    {match.airnav_url}")

if page.has_more:
    print(f"\n  ... showing nearest {PAGE_SIZE} of {page.total}")
