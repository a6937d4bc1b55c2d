"""
NASR cycle model.
"""

from datetime import date
from pydantic import BaseModel, Field


class NasrCycle(BaseModel):
    """
    A single NASR 28-day publication cycle.

    Attributes:
        effective_date: Cycle effective date
        zip_name: Archive file name (DD_Mon_YYYY_APT_CSV.zip)
        url: Full download URL of the archive

    Example:
        >>> cycle.zip_name
        '22_Jan_2026_APT_CSV.zip'
    """

    effective_date: date = Field(..., description="Cycle effective date")
    zip_name: str = Field(..., description="Archive file name")
    url: str = Field(..., description="Archive download URL")

    model_config = {
        "frozen": True
    }

    def __str__(self) -> str:
        return f"NASR cycle {self.effective_date.isoformat()} ({self.zip_name})"
