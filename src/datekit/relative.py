"""Natural-language relative time ("3 days ago", "in 2 hours", "yesterday")."""

from datetime import datetime

from datekit.calendar import Calendar
from datekit.components import Unit
from datekit.config import get_calendar

# Checked in order; the first positive unit wins
_RELATIVE_UNITS: tuple[tuple[Unit, str], ...] = (
    (Unit.YEAR, "year"),
    (Unit.MONTH, "month"),
    (Unit.WEEK_OF_YEAR, "week"),
    (Unit.DAY, "day"),
    (Unit.HOUR, "hour"),
    (Unit.MINUTE, "minute"),
    (Unit.SECOND, "second"),
)

# Seconds at or below this render as "just now" / "now"
_NOW_THRESHOLD_SECONDS = 10


def _largest_unit(
    start: datetime, end: datetime, calendar: Calendar
) -> tuple[Unit, str, int] | None:
    diff = calendar.difference(start, end, [unit for unit, _ in _RELATIVE_UNITS])
    for unit, name in _RELATIVE_UNITS:
        value = diff.value(unit) or 0
        if value > 0:
            return unit, name, value
    return None


def _quantity(value: int, name: str) -> str:
    return f"1 {name}" if value == 1 else f"{value} {name}s"


def time_ago_since(
    dt: datetime, reference: datetime | None = None, calendar: Calendar | None = None
) -> str:
    """Describe how long before reference (default now) dt is, e.g. "2 hours ago".

    Units are truncated, so 90 seconds is "1 minute ago". A dt after the
    reference reads as "just now".
    """
    calendar = calendar or get_calendar()
    reference = reference if reference is not None else calendar.now()
    largest = _largest_unit(dt, reference, calendar)
    if largest is None:
        return "just now"
    unit, name, value = largest
    if unit is Unit.SECOND and value <= _NOW_THRESHOLD_SECONDS:
        return "just now"
    return f"{_quantity(value, name)} ago"


def time_until(
    dt: datetime, reference: datetime | None = None, calendar: Calendar | None = None
) -> str:
    """Describe how long after reference (default now) dt is, e.g. "in 3 days"."""
    calendar = calendar or get_calendar()
    reference = reference if reference is not None else calendar.now()
    largest = _largest_unit(reference, dt, calendar)
    if largest is None:
        return "now"
    unit, name, value = largest
    if unit is Unit.SECOND and value <= _NOW_THRESHOLD_SECONDS:
        return "now"
    return f"in {_quantity(value, name)}"


def relative_formatted(dt: datetime, calendar: Calendar | None = None) -> str:
    """Describe dt relative to now.

    Same-day instants within a minute of now read "now"; other same-day
    instants use the ago/until wording. Otherwise yesterday and tomorrow get
    their own words before falling back to ago/until.
    """
    calendar = calendar or get_calendar()
    dt = calendar.localize(dt)
    now = calendar.now()
    if calendar.is_same(dt, now, Unit.DAY):
        if abs(dt.timestamp() - now.timestamp()) < 60:
            return "now"
    elif calendar.is_in_yesterday(dt):
        return "yesterday"
    elif calendar.is_in_tomorrow(dt):
        return "tomorrow"

    if dt < now:
        return time_ago_since(dt, now, calendar)
    return time_until(dt, now, calendar)
