"""Start and end instants of the day, week, month and year containing a date.

Start boundaries are rebuilt from the coarser fields of the date (year and
month for the start of a month). End boundaries advance the start by one unit
and step back one second, so ``end_of_day`` is 23:59:59 on the same day.

Every function raises ``DateArithmeticError`` if the calendar cannot
represent an intermediate result, which does not happen for dates inside the
supported year range.
"""

from datetime import datetime

from datekit.arithmetic import require
from datekit.calendar import Calendar
from datekit.components import Offset, Unit
from datekit.config import get_calendar

_ONE_SECOND_BACK = Offset(seconds=-1)


def _start_from(calendar: Calendar, dt: datetime, units: tuple[Unit, ...], name: str) -> datetime:
    return require(calendar.date_from(calendar.components(units, dt)), name)


def _end_from(calendar: Calendar, start: datetime, period: Offset, name: str) -> datetime:
    next_start = require(calendar.add(start, period), name)
    return require(calendar.add(next_start, _ONE_SECOND_BACK), name)


def start_of_day(dt: datetime, calendar: Calendar | None = None) -> datetime:
    calendar = calendar or get_calendar()
    return require(calendar.start_of_day(dt), "start_of_day")


def end_of_day(dt: datetime, calendar: Calendar | None = None) -> datetime:
    calendar = calendar or get_calendar()
    return _end_from(calendar, start_of_day(dt, calendar), Offset(days=1), "end_of_day")


def start_of_week(dt: datetime, calendar: Calendar | None = None) -> datetime:
    """Midnight on the calendar's first weekday of the week containing dt."""
    calendar = calendar or get_calendar()
    return _start_from(
        calendar, dt, (Unit.YEAR_FOR_WEEK_OF_YEAR, Unit.WEEK_OF_YEAR), "start_of_week"
    )


def end_of_week(dt: datetime, calendar: Calendar | None = None) -> datetime:
    calendar = calendar or get_calendar()
    return _end_from(calendar, start_of_week(dt, calendar), Offset(weeks=1), "end_of_week")


def start_of_month(dt: datetime, calendar: Calendar | None = None) -> datetime:
    calendar = calendar or get_calendar()
    return _start_from(calendar, dt, (Unit.YEAR, Unit.MONTH), "start_of_month")


def end_of_month(dt: datetime, calendar: Calendar | None = None) -> datetime:
    calendar = calendar or get_calendar()
    return _end_from(calendar, start_of_month(dt, calendar), Offset(months=1), "end_of_month")


def start_of_year(dt: datetime, calendar: Calendar | None = None) -> datetime:
    calendar = calendar or get_calendar()
    return _start_from(calendar, dt, (Unit.YEAR,), "start_of_year")


def end_of_year(dt: datetime, calendar: Calendar | None = None) -> datetime:
    calendar = calendar or get_calendar()
    return _end_from(calendar, start_of_year(dt, calendar), Offset(years=1), "end_of_year")


def first_day_of_month(dt: datetime, calendar: Calendar | None = None) -> datetime:
    """Same instant as ``start_of_month``."""
    return start_of_month(dt, calendar)


def last_day_of_month(dt: datetime, calendar: Calendar | None = None) -> datetime:
    """Midnight on the last day of the month containing dt."""
    calendar = calendar or get_calendar()
    return require(
        calendar.add(first_day_of_month(dt, calendar), Offset(months=1, days=-1)),
        "last_day_of_month",
    )
