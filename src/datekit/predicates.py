"""Yes/no checks on instants.

The ``is_this_*`` predicates read the calendar clock on every call, so two
calls straddling a period boundary can disagree.
"""

from datetime import datetime

from datekit.calendar import Calendar
from datekit.components import Unit
from datekit.config import get_calendar


def is_after(dt: datetime, other: datetime) -> bool:
    return dt > other


def is_before(dt: datetime, other: datetime) -> bool:
    return dt < other


def is_same_day(dt: datetime, other: datetime, calendar: Calendar | None = None) -> bool:
    calendar = calendar or get_calendar()
    return calendar.is_same(dt, other, Unit.DAY)


def is_today(dt: datetime, calendar: Calendar | None = None) -> bool:
    calendar = calendar or get_calendar()
    return calendar.is_in_today(dt)


def is_tomorrow(dt: datetime, calendar: Calendar | None = None) -> bool:
    calendar = calendar or get_calendar()
    return calendar.is_in_tomorrow(dt)


def is_yesterday(dt: datetime, calendar: Calendar | None = None) -> bool:
    calendar = calendar or get_calendar()
    return calendar.is_in_yesterday(dt)


def is_this_week(dt: datetime, calendar: Calendar | None = None) -> bool:
    calendar = calendar or get_calendar()
    return calendar.is_same(dt, calendar.now(), Unit.WEEK_OF_YEAR)


def is_this_month(dt: datetime, calendar: Calendar | None = None) -> bool:
    calendar = calendar or get_calendar()
    return calendar.is_same(dt, calendar.now(), Unit.MONTH)


def is_this_year(dt: datetime, calendar: Calendar | None = None) -> bool:
    calendar = calendar or get_calendar()
    return calendar.is_same(dt, calendar.now(), Unit.YEAR)


def is_weekend(dt: datetime, calendar: Calendar | None = None) -> bool:
    """Check whether dt falls on a weekend day of the calendar."""
    calendar = calendar or get_calendar()
    return calendar.is_in_weekend(dt)
