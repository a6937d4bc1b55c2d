"""
Static JSON export service for the map UI.

Handles all file operations for the published data:
- airports.json (array of airport records, 2-space indented)
- manifest.json (source cycle, counts, checksum)
- Reading a published airports.json back into models
"""

import hashlib
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from nasr_airports.config import get_app_config
from nasr_airports.models import Airport, ExportManifest, NasrCycle

logger = logging.getLogger(__name__)


def write_json(path: Path, payload: Any) -> Path:
    """
    Write ``payload`` as pretty-printed UTF-8 JSON.

    Parent directories are created as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return path


def sha256_file(path: Path) -> str:
    digest = hashlib.sha256()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b''):
            digest.update(chunk)
    return digest.hexdigest()


class AirportExportService:
    """
    Publishes airport records as static JSON.

    Usage:
        >>> service = AirportExportService(output_dir='public')
        >>> path = service.export_airports(airports)
        >>> service.export_manifest(service.build_manifest(airports, cycle))

    Environment Variables (via config facade):
        - OUTPUT_DIR: Publish directory (default: public)
        - OUTPUT_FILENAME: Data file name (default: airports.json)
        - MANIFEST_FILENAME: Manifest file name (default: manifest.json)
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
        output_filename: Optional[str] = None,
        manifest_filename: Optional[str] = None
    ):
        """
        Initialize export service.

        Parameters take precedence over config values.
        """
        config = get_app_config()

        self.output_dir = Path(output_dir or config.output_dir)
        self.output_filename = output_filename or config.output_filename
        self.manifest_filename = manifest_filename or config.manifest_filename

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_filename

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / self.manifest_filename

    def export_airports(self, airports: List[Airport]) -> Path:
        """
        Write airports.json.

        Args:
            airports: Records to publish (written in the given order)

        Returns:
            Path of the written file
        """
        payload = [airport.to_json_dict() for airport in airports]
        path = write_json(self.output_path, payload)
        logger.info(f"Wrote {len(payload)} airports to {path}")
        return path

    def build_manifest(
        self,
        airports: List[Airport],
        cycle: Optional[NasrCycle] = None
    ) -> ExportManifest:
        """
        Build a manifest for airports just written by export_airports().
        """
        fuel_counts: Dict[str, int] = {}
        for airport in airports:
            for key, available in airport.fuel.items():
                fuel_counts[key] = fuel_counts.get(key, 0) + int(available)

        sha256 = sha256_file(self.output_path) if self.output_path.exists() else None

        return ExportManifest(
            cycle_date=cycle.effective_date if cycle else None,
            source_url=cycle.url if cycle else None,
            airport_count=len(airports),
            fuel_counts=fuel_counts,
            sha256=sha256,
            generated_at=datetime.now(timezone.utc),
        )

    def export_manifest(self, manifest: ExportManifest) -> Path:
        path = write_json(self.manifest_path, manifest.model_dump(mode='json'))
        logger.info(f"Wrote manifest to {path}")
        return path

    def load_airports(self, path: Optional[Path] = None) -> List[Airport]:
        """
        Read a published airports.json back into Airport models.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON array
        """
        path = Path(path) if path is not None else self.output_path
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)

        if not isinstance(payload, list):
            raise ValueError(
                f"Expected a JSON array in {path}, got {type(payload).__name__}"
            )

        return [Airport.model_validate(item) for item in payload]
