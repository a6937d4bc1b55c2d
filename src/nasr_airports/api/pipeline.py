"""
High-level pipeline orchestrator for NASR airport data.

AirportPipeline coordinates the complete workflow:
- Compute the NASR cycle and download its archive (via NasrDownloadService)
- Validate the archive and extract APT_BASE.csv
- Parse airport records
- Publish airports.json and manifest.json (via AirportExportService)

Design Philosophy:
- Fail-fast: any error after the single cycle fallback aborts the run
- No partial publish: output is written only after parsing succeeded
- Statistics-based monitoring (returns actionable metrics)
"""

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from nasr_airports.config import get_app_config, get_config, AppConfig
from nasr_airports.models import Airport, NasrCycle
from nasr_airports.parsers import extract_member, parse_airports
from nasr_airports.services.download_service import NasrDownloadService, is_zip_valid
from nasr_airports.services.export_service import AirportExportService

logger = logging.getLogger(__name__)


class AirportPipeline:
    """
    High-level orchestrator for the NASR airport update job.

    Design Principles:
    - Injected services: download and export services are replaceable
    - Linear: compute -> download -> validate -> extract -> parse -> emit
    - Observable: returns statistics for monitoring

    Example:
        pipeline = AirportPipeline()
        stats = pipeline.run()
        print(f"Published {stats['exported']} airports "
              f"from cycle {stats['cycle']}")
    """

    def __init__(
        self,
        download_service: Optional[NasrDownloadService] = None,
        export_service: Optional[AirportExportService] = None,
        config: Optional[AppConfig] = None
    ):
        """
        Initialize pipeline.

        Args:
            download_service: Archive downloader (defaults to NasrDownloadService(config=config))
            export_service: JSON publisher (defaults to AirportExportService())
            config: Application config (defaults to get_app_config())
        """
        self._config = config or get_app_config()
        self._download = download_service or NasrDownloadService(config=self._config)
        self._export = export_service or AirportExportService(
            output_dir=self._config.output_dir,
            output_filename=self._config.output_filename,
            manifest_filename=self._config.manifest_filename
        )
        logger.debug("AirportPipeline initialized")

    def run(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Complete workflow: download -> extract -> parse -> publish.

        Args:
            now: Reference time for cycle computation (defaults to UTC now)

        Returns:
            Statistics dictionary:
            {
                'cycle': '2026-01-22',
                'source_url': 'https://.../22_Jan_2026_APT_CSV.zip',
                'fallback_used': False,
                'parsed': 19600,
                'exported': 19600,
                'skipped_no_fuel': 0,
                'output_path': 'public/airports.json',
                'manifest_path': 'public/manifest.json',
                'elapsed_sec': 12.3
            }

        Raises:
            RuntimeError: If no cycle archive could be downloaded
            ValueError: If the archive or CSV is invalid
            FileNotFoundError: If APT_BASE.csv is missing from the archive
        """
        start_time = time.time()

        result = self._download.fetch_cycle_archive(now)

        stats = self.run_from_archive(result.zip_path, cycle=result.cycle)
        stats['fallback_used'] = result.fallback_used
        stats['elapsed_sec'] = round(time.time() - start_time, 3)

        if not self._config.keep_downloads:
            result.zip_path.unlink(missing_ok=True)

        logger.info("NASR update completed successfully.")
        return stats

    def run_from_archive(
        self,
        zip_path: Path,
        cycle: Optional[NasrCycle] = None
    ) -> Dict[str, Any]:
        """
        Extract, parse and publish from an already downloaded archive.

        Args:
            zip_path: Path to an APT CSV archive
            cycle: Source cycle, recorded in the manifest if given

        Returns:
            Statistics dictionary (see run())

        Raises:
            ValueError: If zip_path is not a valid ZIP archive
        """
        start_time = time.time()
        zip_path = Path(zip_path)

        if not is_zip_valid(zip_path):
            raise ValueError(f"Not a valid ZIP archive: {zip_path}")

        csv_path = extract_member(
            zip_path,
            member_name=self._config.apt_base_member,
            dest_dir=Path(self._config.work_dir)
        )

        try:
            logger.info(f"Parsing CSV: {csv_path}")
            airports = parse_airports(
                csv_path,
                fuel_types=get_config().keywords(),
                icao_prefix=self._config.icao_prefix
            )
        finally:
            csv_path.unlink(missing_ok=True)

        published = self._select(airports)

        output_path = self._export.export_airports(published)
        manifest = self._export.build_manifest(published, cycle)
        manifest_path = self._export.export_manifest(manifest)

        stats = {
            'cycle': cycle.effective_date.isoformat() if cycle else None,
            'source_url': cycle.url if cycle else None,
            'fallback_used': False,
            'parsed': len(airports),
            'exported': len(published),
            'skipped_no_fuel': len(airports) - len(published),
            'output_path': str(output_path),
            'manifest_path': str(manifest_path),
            'elapsed_sec': round(time.time() - start_time, 3),
        }

        logger.info(
            f"Published {stats['exported']} of {stats['parsed']} airports "
            f"(skipped {stats['skipped_no_fuel']} without fuel)"
        )
        return stats

    def _select(self, airports: List[Airport]) -> List[Airport]:
        if not self._config.fuel_only:
            return airports
        return [airport for airport in airports if airport.has_fuel]
