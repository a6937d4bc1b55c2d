"""
Export manifest model.

Written next to airports.json so consumers can tell which NASR cycle the
published data came from.
"""

from datetime import date, datetime
from typing import Dict, Optional
from pydantic import BaseModel, Field


class ExportManifest(BaseModel):
    """
    Metadata describing a published airports.json.

    Example:
        >>> manifest.model_dump(mode='json')['cycle_date']
        '2026-01-22'
    """

    cycle_date: Optional[date] = Field(
        default=None,
        description="Effective date of the source NASR cycle"
    )

    source_url: Optional[str] = Field(
        default=None,
        description="URL the archive was downloaded from"
    )

    airport_count: int = Field(
        ...,
        ge=0,
        description="Number of airports in the data file"
    )

    fuel_counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Number of airports per fuel key"
    )

    sha256: Optional[str] = Field(
        default=None,
        description="SHA-256 of the published data file"
    )

    generated_at: datetime = Field(
        ...,
        description="UTC timestamp of the export"
    )
