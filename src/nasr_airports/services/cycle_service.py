"""
NASR Cycle Service

The FAA publishes NASR data on a fixed 28-day cycle. Every cycle
effective date is the anchor date plus a whole number of cycle lengths,
so the next and current cycles can be computed without asking the server.
"""

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
import logging

from nasr_airports.config import get_app_config, AppConfig
from nasr_airports.models import NasrCycle

logger = logging.getLogger(__name__)

# English abbreviations regardless of process locale
_MONTH_ABBR = (
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
)


def format_zip_name(effective_date: date) -> str:
    """
    Archive file name for a cycle effective date.

    Example:
        >>> format_zip_name(date(2026, 1, 22))
        '22_Jan_2026_APT_CSV.zip'
    """
    return (
        f"{effective_date.day:02d}_"
        f"{_MONTH_ABBR[effective_date.month - 1]}_"
        f"{effective_date.year}_APT_CSV.zip"
    )


class CycleService:
    """
    Service for NASR cycle date arithmetic and archive URLs.

    Usage:
        service = CycleService()
        next_cycle = service.build_cycle(service.compute_next_cycle())
        print(next_cycle.url)
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize cycle service.

        Args:
            config: Application config (defaults to get_app_config())
        """
        config = config or get_app_config()
        self.anchor_date: date = config.nasr_anchor_date
        self.cycle_length_days: int = config.nasr_cycle_length_days
        self.base_url: str = config.base_url

    @property
    def cycle_length(self) -> timedelta:
        return timedelta(days=self.cycle_length_days)

    def compute_next_cycle(self, now: Optional[datetime] = None) -> date:
        """
        Effective date of the cycle after the one containing ``now``.

        Args:
            now: Reference time (defaults to current UTC time). Naive
                 datetimes are treated as UTC.

        Returns:
            Effective date strictly after the current cycle's start

        Example:
            >>> service.compute_next_cycle(datetime(2026, 1, 1, tzinfo=timezone.utc))
            datetime.date(2026, 1, 22)
        """
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        anchor = datetime.combine(self.anchor_date, time.min, tzinfo=timezone.utc)
        days_since_anchor = (now - anchor).total_seconds() / 86400

        # floor keeps dates before the anchor on the correct cycle
        n = math.floor(days_since_anchor / self.cycle_length_days) + 1

        return self.anchor_date + timedelta(days=n * self.cycle_length_days)

    def compute_current_cycle(self, now: Optional[datetime] = None) -> date:
        """Effective date of the cycle containing ``now``."""
        return self.previous_cycle(self.compute_next_cycle(now))

    def previous_cycle(self, effective_date: date) -> date:
        return effective_date - self.cycle_length

    def format_zip_url(self, effective_date: date) -> str:
        """
        Full archive URL for a cycle effective date.

        Example:
            >>> service.format_zip_url(date(2026, 1, 22))
            'https://nfdc.faa.gov/webContent/28DaySub/extra/22_Jan_2026_APT_CSV.zip'
        """
        return self.base_url + format_zip_name(effective_date)

    def build_cycle(self, effective_date: date) -> NasrCycle:
        return NasrCycle(
            effective_date=effective_date,
            zip_name=format_zip_name(effective_date),
            url=self.format_zip_url(effective_date),
        )
