"""Date construction and offset arithmetic through the active calendar."""

from datetime import datetime
from typing import Iterable

from datekit.calendar import Calendar
from datekit.components import NORMALIZED_UNITS, Constraint, Offset, Unit
from datekit.config import get_calendar
from datekit.logging import get_logger

_log = get_logger(__name__)

_CONSTRUCTION_UNITS = (
    Unit.YEAR, Unit.MONTH, Unit.DAY, Unit.HOUR, Unit.MINUTE, Unit.SECOND,
)


class DateArithmeticError(ArithmeticError):
    """Raised when the calendar cannot represent the result of an operation."""
    pass


def require(value: datetime | None, operation: str, **context) -> datetime:
    """Return value, raising DateArithmeticError if the calendar produced nothing."""
    if value is None:
        _log.error("date_arithmetic_failed", operation=operation, **context)
        raise DateArithmeticError(f"Calendar could not compute {operation}")
    return value


def make_date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    calendar: Calendar | None = None,
) -> datetime | None:
    """Build an instant from calendar fields.

    Returns None when any field is out of range or when the calendar would
    roll the fields over into a different date (February 30, a wall time
    skipped by a DST transition).
    """
    calendar = calendar or get_calendar()
    if not 1 <= month <= 12 or day < 1:
        return None
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        return None

    requested = Constraint(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second
    )
    result = calendar.date_from(requested)
    if result is None:
        _log.debug("date_rejected", year=year, month=month, day=day, reason="unrepresentable")
        return None
    if calendar.components(_CONSTRUCTION_UNITS, result) != requested:
        _log.debug("date_rejected", year=year, month=month, day=day, reason="rolled_over")
        return None
    return result


def adding(
    dt: datetime, offset: Offset, calendar: Calendar | None = None
) -> datetime | None:
    """Add offset to dt, None if the result cannot be represented."""
    calendar = calendar or get_calendar()
    return calendar.add(dt, offset)


def subtracting(
    dt: datetime, offset: Offset, calendar: Calendar | None = None
) -> datetime | None:
    """Subtract offset from dt, None if the result cannot be represented."""
    calendar = calendar or get_calendar()
    return calendar.add(dt, offset.negated())


def add(dt: datetime, offset: Offset, calendar: Calendar | None = None) -> datetime:
    """Add offset to dt.

    Raises:
        DateArithmeticError: If the calendar cannot represent the result.
    """
    return require(adding(dt, offset, calendar), "add", offset=offset.nonzero())


def subtract(dt: datetime, offset: Offset, calendar: Calendar | None = None) -> datetime:
    """Subtract offset from dt.

    Raises:
        DateArithmeticError: If the calendar cannot represent the result.
    """
    return require(subtracting(dt, offset, calendar), "subtract", offset=offset.nonzero())


def combine(
    first: Offset, second: Offset, calendar: Calendar | None = None
) -> Offset:
    """Apply first then second to now and re-derive the combined offset.

    The result is calendar-normalized rather than a field-wise sum: seven days
    come back as one week, and month-end clamping applies. An empty offset is
    returned if either step cannot be represented.
    """
    calendar = calendar or get_calendar()
    now = calendar.now()
    intermediate = calendar.add(now, first)
    if intermediate is None:
        return Offset()
    final = calendar.add(intermediate, second)
    if final is None:
        return Offset()
    return calendar.difference(now, final, NORMALIZED_UNITS)


def scale(offset: Offset, factor: int, calendar: Calendar | None = None) -> Offset:
    """Multiply every present field by factor, then normalize through now."""
    calendar = calendar or get_calendar()
    scaled = Offset(**{name: value * factor for name, value in offset.nonzero().items()})
    now = calendar.now()
    final = calendar.add(now, scaled)
    if final is None:
        return Offset()
    return calendar.difference(now, final, NORMALIZED_UNITS)


def difference(
    start: datetime,
    end: datetime,
    units: Iterable[Unit] = NORMALIZED_UNITS,
    calendar: Calendar | None = None,
) -> Offset:
    calendar = calendar or get_calendar()
    return calendar.difference(start, end, units)


def component(dt: datetime, unit: Unit, calendar: Calendar | None = None) -> int:
    calendar = calendar or get_calendar()
    return calendar.component(unit, dt)


def days_between(
    start: datetime, end: datetime, calendar: Calendar | None = None
) -> int:
    """Signed number of calendar days from the day of start to the day of end."""
    calendar = calendar or get_calendar()
    first = require(calendar.start_of_day(start), "start_of_day")
    second = require(calendar.start_of_day(end), "start_of_day")
    return calendar.difference(first, second, (Unit.DAY,)).days


def age(
    birth: datetime, at: datetime | None = None, calendar: Calendar | None = None
) -> int:
    """Whole years elapsed from birth to at (defaults to now)."""
    calendar = calendar or get_calendar()
    reference = at if at is not None else calendar.now()
    return calendar.difference(birth, reference, (Unit.YEAR,)).years
