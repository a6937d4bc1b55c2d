"""
Business logic layer services for nasr-airports.

This module contains service classes that implement core business logic:
- CycleService: NASR 28-day cycle arithmetic and archive URLs
- NasrDownloadService: Archive download with next -> current fallback
- AirportExportService: Static JSON publishing
"""

from nasr_airports.services.cycle_service import CycleService, format_zip_name
from nasr_airports.services.download_service import (
    NasrDownloadService,
    DownloadResult,
    download,
    is_zip_valid
)
from nasr_airports.services.export_service import AirportExportService, write_json

__all__ = [
    'CycleService',
    'format_zip_name',
    'NasrDownloadService',
    'DownloadResult',
    'download',
    'is_zip_valid',
    'AirportExportService',
    'write_json'
]
