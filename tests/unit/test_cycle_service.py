"""
Unit tests for CycleService

Tests NASR 28-day cycle arithmetic and archive URL formatting against
the default anchor (25 Dec 2025).
"""

import pytest
from datetime import date, datetime, timedelta, timezone

from nasr_airports.config import AppConfig
from nasr_airports.services.cycle_service import CycleService, format_zip_name


BASE_URL = "https://nfdc.faa.gov/webContent/28DaySub/extra/"


@pytest.fixture
def service():
    return CycleService(AppConfig(
        nasr_base_url=BASE_URL,
        nasr_anchor_date=date(2025, 12, 25),
        nasr_cycle_length_days=28,
    ))


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# ============================================================================
# NEXT / CURRENT CYCLE
# ============================================================================

class TestComputeNextCycle:

    def test_within_first_cycle(self, service):
        assert service.compute_next_cycle(utc(2026, 1, 1)) == date(2026, 1, 22)

    def test_exactly_on_anchor(self, service):
        """On an effective date, the next cycle is the following one."""
        assert service.compute_next_cycle(utc(2025, 12, 25)) == date(2026, 1, 22)

    def test_last_minute_of_cycle(self, service):
        assert service.compute_next_cycle(utc(2026, 1, 21, 23, 59)) == date(2026, 1, 22)

    def test_on_next_effective_date(self, service):
        assert service.compute_next_cycle(utc(2026, 1, 22)) == date(2026, 2, 19)

    def test_many_cycles_later(self, service):
        # 2026-10-16 is in the cycle starting 2026-10-01 (anchor + 10 cycles)
        assert service.compute_next_cycle(utc(2026, 10, 16)) == date(2026, 10, 29)

    def test_before_anchor(self, service):
        """Dates before the anchor still land on the right cycle."""
        assert service.compute_next_cycle(utc(2025, 12, 20)) == date(2025, 12, 25)

    def test_naive_datetime_treated_as_utc(self, service):
        assert service.compute_next_cycle(datetime(2026, 1, 1)) == date(2026, 1, 22)

    def test_timezone_aware_input_converted(self, service):
        # 2026-01-21 20:00 at UTC-5 is 2026-01-22 01:00 UTC
        eastern = timezone(timedelta(hours=-5))
        now = datetime(2026, 1, 21, 20, 0, tzinfo=eastern)

        assert service.compute_next_cycle(now) == date(2026, 2, 19)

    def test_defaults_to_now(self, service):
        result = service.compute_next_cycle()
        today = datetime.now(timezone.utc).date()

        assert today < result <= today + timedelta(days=28)

    def test_next_is_always_anchor_aligned(self, service):
        for offset in range(0, 200, 7):
            result = service.compute_next_cycle(utc(2026, 1, 1) + timedelta(days=offset))
            assert (result - date(2025, 12, 25)).days % 28 == 0


class TestCurrentAndPreviousCycle:

    def test_current_cycle(self, service):
        assert service.compute_current_cycle(utc(2026, 1, 1)) == date(2025, 12, 25)

    def test_previous_cycle(self, service):
        assert service.previous_cycle(date(2026, 1, 22)) == date(2025, 12, 25)

    def test_custom_cycle_length(self):
        service = CycleService(AppConfig(
            nasr_anchor_date=date(2026, 1, 1),
            nasr_cycle_length_days=56,
        ))

        assert service.compute_next_cycle(utc(2026, 1, 10)) == date(2026, 2, 26)


# ============================================================================
# URL FORMATTING
# ============================================================================

class TestFormatting:

    def test_zip_name(self):
        assert format_zip_name(date(2026, 1, 22)) == "22_Jan_2026_APT_CSV.zip"

    def test_zip_name_zero_pads_day(self):
        assert format_zip_name(date(2026, 2, 5)) == "05_Feb_2026_APT_CSV.zip"

    @pytest.mark.parametrize("month,abbr", [
        (3, 'Mar'), (5, 'May'), (6, 'Jun'), (9, 'Sep'), (12, 'Dec'),
    ])
    def test_zip_name_month_abbreviations(self, month, abbr):
        assert format_zip_name(date(2026, month, 1)) == f"01_{abbr}_2026_APT_CSV.zip"

    def test_format_zip_url(self, service):
        assert service.format_zip_url(date(2026, 1, 22)) == (
            "https://nfdc.faa.gov/webContent/28DaySub/extra/22_Jan_2026_APT_CSV.zip"
        )

    def test_format_zip_url_without_trailing_slash(self):
        service = CycleService(AppConfig(nasr_base_url="https://example.test/extra"))

        assert service.format_zip_url(date(2025, 12, 25)) == (
            "https://example.test/extra/25_Dec_2025_APT_CSV.zip"
        )

    def test_build_cycle(self, service):
        cycle = service.build_cycle(date(2025, 12, 25))

        assert cycle.effective_date == date(2025, 12, 25)
        assert cycle.zip_name == "25_Dec_2025_APT_CSV.zip"
        assert cycle.url == BASE_URL + "25_Dec_2025_APT_CSV.zip"
