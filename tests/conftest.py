"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from datekit import GregorianCalendar, reset_calendar_config, use_calendar

# Wednesday
FIXED_NOW = datetime(2025, 7, 30, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def calendar() -> GregorianCalendar:
    """UTC calendar, Sunday-first weeks, Saturday/Sunday weekend, frozen clock."""
    return GregorianCalendar("UTC", clock=lambda: FIXED_NOW)


@pytest.fixture
def iso_calendar() -> GregorianCalendar:
    """UTC calendar with ISO 8601 week numbering."""
    return GregorianCalendar(
        "UTC", first_weekday=2, minimum_days_in_first_week=4, clock=lambda: FIXED_NOW
    )


@pytest.fixture(autouse=True)
def pinned_calendar(calendar):
    """Inject the frozen calendar for every test and reset module config.

    The default calendar is built from a module-level singleton config that
    persists across tests, so each test starts from defaults.
    """
    reset_calendar_config()
    with use_calendar(calendar):
        yield calendar
    reset_calendar_config()
