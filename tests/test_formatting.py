"""Tests for pattern formatting."""

from datetime import datetime, timezone

from datekit import DateFormat, GregorianCalendar, date_format, format_date, make_date


class TestFormatDate:
    """Test format_date."""

    def test_patterns(self):
        dt = make_date(2025, 7, 26, 15, 30, 45)

        assert format_date(dt, "%Y-%m-%d") == "2025-07-26"
        assert format_date(dt, "%H:%M:%S") == "15:30:45"
        assert format_date(dt, "%A") == "Saturday"

    def test_calendar_timezone(self):
        """The instant is shown in the calendar's zone."""
        tokyo = GregorianCalendar("Asia/Tokyo")
        dt = datetime(2025, 7, 26, 20, tzinfo=timezone.utc)

        assert format_date(dt, "%Y-%m-%d %H:%M", calendar=tokyo) == "2025-07-27 05:00"


class TestDateFormat:
    """Test reusable formatters."""

    def test_reuse(self):
        iso_day = date_format("%Y-%m-%d")

        assert isinstance(iso_day, DateFormat)
        assert iso_day.format(make_date(2025, 1, 2)) == "2025-01-02"
        assert iso_day(make_date(2025, 12, 31)) == "2025-12-31"

    def test_bound_calendar(self):
        hour = date_format("%H", calendar=GregorianCalendar("Asia/Tokyo"))

        assert hour(datetime(2025, 7, 26, 0, tzinfo=timezone.utc)) == "09"
