"""Pattern-based date formatting in the calendar's time zone.

Patterns are ``strftime`` patterns (``"%Y-%m-%d"``); they are passed through
unchanged after the instant is converted to the calendar's zone.
"""

from dataclasses import dataclass
from datetime import datetime

from datekit.calendar import Calendar
from datekit.config import get_calendar


def format_date(dt: datetime, pattern: str, calendar: Calendar | None = None) -> str:
    calendar = calendar or get_calendar()
    return calendar.localize(dt).strftime(pattern)


@dataclass(frozen=True)
class DateFormat:
    """Reusable pattern formatter.

    Example:
        iso_day = date_format("%Y-%m-%d")
        iso_day.format(make_date(2025, 7, 26))  # "2025-07-26"
    """

    pattern: str
    calendar: Calendar | None = None

    def format(self, dt: datetime) -> str:
        return format_date(dt, self.pattern, self.calendar)

    def __call__(self, dt: datetime) -> str:
        return self.format(dt)


def date_format(pattern: str, calendar: Calendar | None = None) -> DateFormat:
    return DateFormat(pattern, calendar)
