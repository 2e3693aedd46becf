"""Tests for period boundaries."""

from datetime import datetime, timezone

import pytest

from datekit import (
    DateArithmeticError,
    GregorianCalendar,
    Offset,
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    first_day_of_month,
    last_day_of_month,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def mid_july():
    """Saturday Jul 26, 2025 15:30:45 UTC."""
    return utc(2025, 7, 26, 15, 30, 45)


class TestDayBoundaries:
    """Test start_of_day / end_of_day."""

    def test_start_of_day(self, mid_july):
        assert start_of_day(mid_july) == utc(2025, 7, 26)

    def test_end_of_day(self, mid_july):
        assert end_of_day(mid_july) == utc(2025, 7, 26, 23, 59, 59)

    def test_end_of_day_is_one_second_before_next_start(self, mid_july):
        """end_of_day + 1s is the start of the next day."""
        next_start = start_of_day(mid_july) + Offset(days=1)

        assert end_of_day(mid_july) == next_start - Offset(seconds=1)

    def test_day_follows_calendar_timezone(self, mid_july):
        """Tokyo's day containing 15:30 UTC starts at 15:00 UTC."""
        tokyo = GregorianCalendar("Asia/Tokyo")

        assert start_of_day(mid_july, calendar=tokyo) == utc(2025, 7, 26, 15)

    def test_dst_day_end(self):
        """The spring-forward day in Amsterdam is 23 hours long."""
        amsterdam = GregorianCalendar("Europe/Amsterdam")
        dt = amsterdam.localize(datetime(2025, 3, 30, 12))

        start = start_of_day(dt, calendar=amsterdam)
        end = end_of_day(dt, calendar=amsterdam)

        assert start.astimezone(timezone.utc) == utc(2025, 3, 29, 23)
        assert end.astimezone(timezone.utc) == utc(2025, 3, 30, 21, 59, 59)


class TestWeekBoundaries:
    """Test start_of_week / end_of_week."""

    def test_sunday_first_week(self, mid_july):
        """US weeks run Sunday to Saturday."""
        assert start_of_week(mid_july) == utc(2025, 7, 20)
        assert end_of_week(mid_july) == utc(2025, 7, 26, 23, 59, 59)

    def test_monday_first_week(self, mid_july, iso_calendar):
        """ISO weeks run Monday to Sunday."""
        assert start_of_week(mid_july, calendar=iso_calendar) == utc(2025, 7, 21)
        assert end_of_week(mid_july, calendar=iso_calendar) == utc(2025, 7, 27, 23, 59, 59)

    def test_week_crossing_new_year(self):
        """Dec 31, 2024 belongs to the week starting Sunday Dec 29."""
        assert start_of_week(utc(2024, 12, 31, 8)) == utc(2024, 12, 29)
        assert end_of_week(utc(2024, 12, 31, 8)) == utc(2025, 1, 4, 23, 59, 59)


class TestMonthBoundaries:
    """Test month start/end and first/last day."""

    def test_start_and_end_of_month(self, mid_july):
        assert start_of_month(mid_july) == utc(2025, 7, 1)
        assert end_of_month(mid_july) == utc(2025, 7, 31, 23, 59, 59)

    def test_first_day_of_month(self, mid_july):
        first = first_day_of_month(mid_july)

        assert (first.year, first.month, first.day) == (2025, 7, 1)

    def test_last_day_of_month(self, mid_july):
        """July has 31 days."""
        assert last_day_of_month(mid_july) == utc(2025, 7, 31)

    def test_last_day_of_february(self):
        """February ends on the 29th in leap years."""
        assert last_day_of_month(utc(2024, 2, 15)).day == 29
        assert last_day_of_month(utc(2025, 2, 15)).day == 28

    def test_end_of_december(self):
        """The month end rolls into the next year correctly."""
        assert end_of_month(utc(2025, 12, 5)) == utc(2025, 12, 31, 23, 59, 59)


class TestYearBoundaries:
    """Test start_of_year / end_of_year."""

    def test_start_and_end_of_year(self, mid_july):
        assert start_of_year(mid_july) == utc(2025, 1, 1)
        assert end_of_year(mid_july) == utc(2025, 12, 31, 23, 59, 59)

    def test_last_supported_year_raises(self):
        """The end of year 9999 needs the start of year 10000."""
        with pytest.raises(DateArithmeticError):
            end_of_year(utc(9999, 6, 1))
