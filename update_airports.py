"""
NASR Airport Update Script

Downloads the newest FAA NASR APT CSV archive and republishes the airport
base records as static JSON for the map page.

Cycle: NEXT 28-day cycle if already posted, otherwise the CURRENT cycle
Source: APT_BASE.csv inside DD_Mon_YYYY_APT_CSV.zip
Output: public/airports.json + public/manifest.json (see .env.example)

Intended to run from cron/CI; exits non-zero if no archive could be
downloaded or parsed.
"""

import logging
import sys
from datetime import datetime

from nasr_airports.api import AirportPipeline
from nasr_airports.config import get_app_config

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

print("=" * 80)
print("NASR AIRPORT UPDATE: APT_BASE.csv -> airports.json")
print("=" * 80)

# === Step 1: Load Configuration ===
print("\n[Step 1] Loading configuration...")
config = get_app_config()
print(f"  ✓ Config loaded")
print(f"    - Source: {config.base_url}")
print(f"    - Anchor cycle: {config.nasr_anchor_date} (every {config.nasr_cycle_length_days} days)")
print(f"    - Work dir: {config.work_dir}")
print(f"    - Output: {config.output_path}")
print(f"    - Fuel only: {config.fuel_only}")

# === Step 2: Run Pipeline ===
print("\n[Step 2] Running pipeline...")
start_time = datetime.now()

try:
    stats = AirportPipeline(config=config).run()
except Exception as e:
    print(f"  ✗ Update failed!")
    print(f"    Error: {e}")
    sys.exit(1)

elapsed = (datetime.now() - start_time).total_seconds()

# === Step 3: Display Results ===
print("\n" + "=" * 80)
print("UPDATE COMPLETE")
print("=" * 80)
print()
print(f"⏱️  Total Time: {elapsed:.1f} seconds")
print()
print("📊 Statistics:")
print(f"    ✓ Cycle: {stats['cycle']}{' (fallback to current)' if stats['fallback_used'] else ''}")
print(f"    ✓ Airports parsed: {stats['parsed']}")
print(f"    ✓ Airports published: {stats['exported']}")
print(f"    ⏭️  Skipped (no fuel): {stats['skipped_no_fuel']}")
print()
print(f"💾 Output: {stats['output_path']}")
print(f"📝 Manifest: {stats['manifest_path']}")
print()
print("=" * 80)
