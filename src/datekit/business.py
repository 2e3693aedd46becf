"""Business-day navigation.

A business day is any day the calendar does not classify as a weekend day.
The day-stepping loops assume the calendar has at least one business day per
week; a calendar whose every weekday is a weekend day would never terminate.
"""

from datetime import datetime
from typing import Iterator

from datekit.arithmetic import require
from datekit.calendar import Calendar
from datekit.components import Constraint, Offset
from datekit.config import get_calendar

_ONE_DAY = Offset(days=1)
_ONE_DAY_BACK = Offset(days=-1)


def _step(calendar: Calendar, dt: datetime, direction: int) -> datetime:
    return require(
        calendar.add(dt, _ONE_DAY if direction > 0 else _ONE_DAY_BACK), "day_step"
    )


def next_weekday(dt: datetime, calendar: Calendar | None = None) -> datetime:
    """First business day strictly after dt, keeping the time of day."""
    calendar = calendar or get_calendar()
    current = _step(calendar, dt, 1)
    while calendar.is_in_weekend(current):
        current = _step(calendar, current, 1)
    return current


def if_weekend_then_next_workday(dt: datetime, calendar: Calendar | None = None) -> datetime:
    """Roll a weekend date forward to the next business day; business days pass through."""
    calendar = calendar or get_calendar()
    current = calendar.localize(dt)
    while calendar.is_in_weekend(current):
        current = _step(calendar, current, 1)
    return current


def if_weekend_then_previous_workday(dt: datetime, calendar: Calendar | None = None) -> datetime:
    """Roll a weekend date back to the previous business day; business days pass through."""
    calendar = calendar or get_calendar()
    current = calendar.localize(dt)
    while calendar.is_in_weekend(current):
        current = _step(calendar, current, -1)
    return current


def adding_business_days(
    dt: datetime, business_days: int, calendar: Calendar | None = None
) -> datetime:
    """Shift dt by N business days, skipping weekend days.

    Negative values move backward. Zero returns dt unchanged, even when dt
    itself falls on a weekend.
    """
    calendar = calendar or get_calendar()
    current = calendar.localize(dt)
    if business_days == 0:
        return current
    direction = 1 if business_days > 0 else -1
    remaining = abs(business_days)
    while remaining > 0:
        current = _step(calendar, current, direction)
        if not calendar.is_in_weekend(current):
            remaining -= 1
    return current


def business_days(
    start_dt: datetime, end_dt: datetime, calendar: Calendar | None = None
) -> Iterator[datetime]:
    """Generate business days in range [start_dt, end_dt], one day apart."""
    calendar = calendar or get_calendar()
    current = calendar.localize(start_dt)
    end = calendar.localize(end_dt)
    while current <= end:
        if not calendar.is_in_weekend(current):
            yield current
        current = _step(calendar, current, 1)


def _occurrence(
    dt: datetime, weekday: int, backward: bool, calendar: Calendar | None
) -> datetime:
    if not 1 <= weekday <= 7:
        raise ValueError(f"Weekday code must be in 1..7; got {weekday}")
    calendar = calendar or get_calendar()
    match = calendar.next_date_matching(dt, Constraint(weekday=weekday), backward=backward)
    return require(
        match, "previous_occurrence" if backward else "next_occurrence", weekday=weekday
    )


def next_occurrence(dt: datetime, weekday: int, calendar: Calendar | None = None) -> datetime:
    """Start of the nearest day strictly after dt's day falling on weekday (1 = Sunday)."""
    return _occurrence(dt, weekday, False, calendar)


def previous_occurrence(dt: datetime, weekday: int, calendar: Calendar | None = None) -> datetime:
    """Start of the nearest day strictly before dt's day falling on weekday (1 = Sunday)."""
    return _occurrence(dt, weekday, True, calendar)
