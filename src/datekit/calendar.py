"""Calendar implementations for datekit date handling."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, tzinfo
from enum import IntEnum
from typing import Callable, Iterable

from dateutil import rrule, tz
from dateutil.relativedelta import relativedelta

from datekit.components import Constraint, Offset, Unit
from datekit.logging import get_logger

_log = get_logger(__name__)


class Weekday(IntEnum):
    """Weekday codes, Sunday first."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def python_weekday(self) -> int:
        """Same day as ``date.weekday()`` numbers it (Monday = 0)."""
        return (self.value + 5) % 7


# Fields that must agree for two instants to share a period
_GRANULARITY_FIELDS: dict[Unit, tuple[Unit, ...]] = {
    Unit.YEAR: (Unit.YEAR,),
    Unit.QUARTER: (Unit.YEAR, Unit.QUARTER),
    Unit.MONTH: (Unit.YEAR, Unit.MONTH),
    Unit.WEEK_OF_YEAR: (Unit.YEAR_FOR_WEEK_OF_YEAR, Unit.WEEK_OF_YEAR),
    Unit.DAY: (Unit.YEAR, Unit.MONTH, Unit.DAY),
    Unit.HOUR: (Unit.YEAR, Unit.MONTH, Unit.DAY, Unit.HOUR),
    Unit.MINUTE: (Unit.YEAR, Unit.MONTH, Unit.DAY, Unit.HOUR, Unit.MINUTE),
    Unit.SECOND: (
        Unit.YEAR, Unit.MONTH, Unit.DAY, Unit.HOUR, Unit.MINUTE, Unit.SECOND,
    ),
}

_MONTH_UNITS: dict[Unit, int] = {Unit.YEAR: 12, Unit.QUARTER: 3, Unit.MONTH: 1}

_DAY_UNITS: dict[Unit, timedelta] = {
    Unit.WEEK_OF_YEAR: timedelta(weeks=1),
    Unit.DAY: timedelta(days=1),
}

_ELAPSED_UNITS: dict[Unit, timedelta] = {
    Unit.HOUR: timedelta(hours=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.SECOND: timedelta(seconds=1),
    Unit.MICROSECOND: timedelta(microseconds=1),
}

_MATCHABLE_UNITS = frozenset({Unit.MONTH, Unit.DAY, Unit.WEEKDAY})

# Long enough for any month/day/weekday combination to recur (Feb 29 on a Monday)
_MATCH_WINDOW = relativedelta(years=28)
_WEEKDAY_WINDOW = relativedelta(weeks=1)


class Calendar(ABC):
    """Abstract base class for calendars.

    Subclasses provide the field-level primitives. Day boundaries and the
    today/tomorrow/yesterday checks are derived from them.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current instant in the calendar's time zone."""
        pass

    @abstractmethod
    def localize(self, dt: datetime) -> datetime:
        """Express dt in the calendar's time zone. Naive values are wall-clock."""
        pass

    @abstractmethod
    def add(self, dt: datetime, offset: Offset) -> datetime | None:
        """Apply offset to dt, None if the result cannot be represented."""
        pass

    @abstractmethod
    def difference(
        self, start: datetime, end: datetime, units: Iterable[Unit]
    ) -> Offset:
        """Decompose end - start into the given units, largest first."""
        pass

    @abstractmethod
    def component(self, unit: Unit, dt: datetime) -> int:
        """Extract a single calendar field from dt."""
        pass

    @abstractmethod
    def date_from(self, constraint: Constraint) -> datetime | None:
        """Build the earliest instant with the given fields, None if impossible."""
        pass

    @abstractmethod
    def is_in_weekend(self, dt: datetime) -> bool:
        """Check whether dt falls on one of the calendar's weekend days."""
        pass

    @abstractmethod
    def next_date_matching(
        self, dt: datetime, constraint: Constraint, backward: bool = False
    ) -> datetime | None:
        """Start of the nearest day strictly after (or before) dt matching constraint."""
        pass

    def components(self, units: Iterable[Unit], dt: datetime) -> Constraint:
        return Constraint.from_units({unit: self.component(unit, dt) for unit in units})

    def is_same(self, a: datetime, b: datetime, granularity: Unit) -> bool:
        """Check whether a and b fall in the same period of the given unit."""
        if granularity not in _GRANULARITY_FIELDS:
            raise ValueError(f"Unsupported granularity: {granularity.name}")
        return all(
            self.component(unit, a) == self.component(unit, b)
            for unit in _GRANULARITY_FIELDS[granularity]
        )

    def start_of_day(self, dt: datetime) -> datetime | None:
        return self.date_from(
            self.components((Unit.YEAR, Unit.MONTH, Unit.DAY), dt)
        )

    def is_in_today(self, dt: datetime) -> bool:
        return self.is_same(dt, self.now(), Unit.DAY)

    def is_in_tomorrow(self, dt: datetime) -> bool:
        tomorrow = self.add(self.now(), Offset(days=1))
        return tomorrow is not None and self.is_same(dt, tomorrow, Unit.DAY)

    def is_in_yesterday(self, dt: datetime) -> bool:
        yesterday = self.add(self.now(), Offset(days=-1))
        return yesterday is not None and self.is_same(dt, yesterday, Unit.DAY)


class GregorianCalendar(Calendar):
    """Gregorian calendar in a fixed time zone.

    Args:
        timezone: IANA zone name, a tzinfo, or None for the system zone.
        first_weekday: Weekday code weeks start on (1 = Sunday).
        weekend: Weekday codes treated as weekend days.
        minimum_days_in_first_week: Days of the new year the first week of
            the year must contain (1 for US numbering, 4 for ISO 8601).
        clock: Callable returning the current instant. Defaults to the
            system clock; tests pass a fixed one.
    """

    def __init__(
        self,
        timezone: str | tzinfo | None = "UTC",
        first_weekday: int = Weekday.SUNDAY,
        weekend: Iterable[int] = (Weekday.SATURDAY, Weekday.SUNDAY),
        minimum_days_in_first_week: int = 1,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if isinstance(timezone, tzinfo):
            self._tz = timezone
        elif timezone is None:
            self._tz = tz.tzlocal()
        else:
            zone = tz.gettz(timezone)
            if zone is None:
                raise ValueError(f"Unknown time zone: {timezone!r}")
            self._tz = zone
        self._timezone_name = timezone if isinstance(timezone, str) else None

        weekend = frozenset(Weekday(code) for code in weekend)
        self._first_weekday = Weekday(first_weekday)
        self._weekend = weekend
        if not 1 <= minimum_days_in_first_week <= 7:
            raise ValueError(
                "minimum_days_in_first_week must be in 1..7; "
                f"got {minimum_days_in_first_week}"
            )
        self._minimum_days = minimum_days_in_first_week
        self._clock = clock

    @property
    def timezone(self) -> tzinfo:
        return self._tz

    @property
    def first_weekday(self) -> Weekday:
        return self._first_weekday

    @property
    def weekend(self) -> frozenset[Weekday]:
        return self._weekend

    @property
    def minimum_days_in_first_week(self) -> int:
        return self._minimum_days

    def now(self) -> datetime:
        if self._clock is not None:
            return self.localize(self._clock())
        return datetime.now(self._tz)

    def localize(self, dt: datetime) -> datetime:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=self._tz)
        return dt.astimezone(self._tz)

    def add(self, dt: datetime, offset: Offset) -> datetime | None:
        local = self.localize(dt)
        try:
            wall = local.replace(tzinfo=None) + relativedelta(
                years=offset.years or 0,
                months=(offset.months or 0) + 3 * (offset.quarters or 0),
                weeks=offset.weeks or 0,
                days=offset.days or 0,
            )
            elapsed = timedelta(
                hours=offset.hours or 0,
                minutes=offset.minutes or 0,
                seconds=offset.seconds or 0,
                microseconds=offset.microseconds or 0,
            )
            result = self._attach(wall).astimezone(tz.UTC) + elapsed
            return result.astimezone(self._tz)
        except (OverflowError, ValueError):
            _log.debug("calendar_add_failed", dt=dt.isoformat(), offset=offset.nonzero())
            return None

    def difference(
        self, start: datetime, end: datetime, units: Iterable[Unit]
    ) -> Offset:
        """Decompose end - start into units, largest first.

        Years through days count on wall-clock time. Smaller units count
        elapsed time from there, the way ``add`` applies them.
        """
        a = self.localize(start)
        b = self.localize(end)
        sign = 1
        if b.astimezone(tz.UTC) < a.astimezone(tz.UTC):
            a, b, sign = b, a, -1
        a_wall = a.replace(tzinfo=None)
        b_wall = b.replace(tzinfo=None)
        b_utc = b.astimezone(tz.UTC)

        total_months = 0
        days = timedelta(0)
        elapsed = timedelta(0)
        values: dict[Unit, int] = {}
        for unit in units:
            cursor = a_wall + relativedelta(months=total_months) + days
            if unit in _MONTH_UNITS:
                step = _MONTH_UNITS[unit]
                n = ((b_wall.year - cursor.year) * 12 + b_wall.month - cursor.month) // step
                while n > 0 and self._overshoots(
                    a_wall + relativedelta(months=total_months + n * step) + days, b_utc
                ):
                    n -= 1
                n = max(n, 0)
                total_months += n * step
            elif unit in _DAY_UNITS:
                step = _DAY_UNITS[unit]
                n = max((b_wall - cursor) // step, 0)
                while n > 0 and self._overshoots(cursor + n * step, b_utc):
                    n -= 1
                days += n * step
            elif unit in _ELAPSED_UNITS:
                step = _ELAPSED_UNITS[unit]
                origin = self._attach(cursor).astimezone(tz.UTC) + elapsed
                n = max((b_utc - origin) // step, 0)
                elapsed += n * step
            else:
                raise ValueError(f"Unit {unit.name} cannot be used in a difference")
            values[unit] = sign * n
        return Offset.from_units(values)

    def component(self, unit: Unit, dt: datetime) -> int:
        local = self.localize(dt)
        day = local.date()
        if unit is Unit.YEAR:
            return local.year
        if unit is Unit.QUARTER:
            return (local.month - 1) // 3 + 1
        if unit is Unit.MONTH:
            return local.month
        if unit is Unit.DAY:
            return local.day
        if unit is Unit.DAY_OF_YEAR:
            return day.timetuple().tm_yday
        if unit is Unit.HOUR:
            return local.hour
        if unit is Unit.MINUTE:
            return local.minute
        if unit is Unit.SECOND:
            return local.second
        if unit is Unit.MICROSECOND:
            return local.microsecond
        if unit is Unit.WEEKDAY:
            return _weekday_code(day)
        if unit is Unit.WEEKDAY_ORDINAL:
            return (local.day - 1) // 7 + 1
        if unit is Unit.WEEK_OF_MONTH:
            lead = self._days_into_week(day.replace(day=1))
            week = (local.day - 1 + lead) // 7 + 1
            return week - 1 if 7 - lead < self._minimum_days else week
        if unit is Unit.WEEK_OF_YEAR:
            return self._week_of_year(day)[1]
        if unit is Unit.YEAR_FOR_WEEK_OF_YEAR:
            return self._week_of_year(day)[0]
        raise ValueError(f"Unsupported unit: {unit}")

    def date_from(self, constraint: Constraint) -> datetime | None:
        try:
            if constraint.year_for_week_of_year is not None and constraint.week_of_year is not None:
                ordinal = self._week_one_start(constraint.year_for_week_of_year)
                ordinal += 7 * (constraint.week_of_year - 1)
                if constraint.weekday is not None:
                    ordinal += (constraint.weekday - self._first_weekday) % 7
                day = date.fromordinal(ordinal)
            elif constraint.year is not None and constraint.day_of_year is not None:
                day = date(constraint.year, 1, 1) + timedelta(days=constraint.day_of_year - 1)
                if day.year != constraint.year:
                    return None
            elif constraint.year is not None:
                day = date(
                    constraint.year,
                    constraint.month if constraint.month is not None else 1,
                    constraint.day if constraint.day is not None else 1,
                )
            else:
                return None
            wall = datetime(
                day.year,
                day.month,
                day.day,
                constraint.hour or 0,
                constraint.minute or 0,
                constraint.second or 0,
                constraint.microsecond or 0,
            )
            return self._attach(wall)
        except (OverflowError, ValueError):
            return None

    def is_in_weekend(self, dt: datetime) -> bool:
        return self.component(Unit.WEEKDAY, dt) in self._weekend

    def next_date_matching(
        self, dt: datetime, constraint: Constraint, backward: bool = False
    ) -> datetime | None:
        present = constraint.present()
        unsupported = set(present) - _MATCHABLE_UNITS
        if unsupported or not present:
            raise ValueError(
                "Matching supports month, day and weekday fields only; "
                f"got {sorted(unit.value for unit in present)}"
            )
        if not constraint.is_valid():
            raise ValueError(f"Constraint out of range: {constraint}")

        kwargs = {}
        if constraint.month is not None:
            kwargs["bymonth"] = constraint.month
        if constraint.day is not None:
            kwargs["bymonthday"] = constraint.day
        if constraint.weekday is not None:
            kwargs["byweekday"] = Weekday(constraint.weekday).python_weekday

        day_start = self.start_of_day(dt)
        if day_start is None:
            return None
        anchor = day_start.replace(tzinfo=None)
        window = _WEEKDAY_WINDOW if set(present) == {Unit.WEEKDAY} else _MATCH_WINDOW
        try:
            if backward:
                rule = rrule.rrule(
                    rrule.DAILY, dtstart=anchor - window, until=anchor, **kwargs
                )
                match = rule.before(anchor)
            else:
                rule = rrule.rrule(
                    rrule.DAILY, dtstart=anchor, until=anchor + window, **kwargs
                )
                match = rule.after(anchor)
            if match is None:
                return None
            return self._attach(match)
        except (OverflowError, ValueError):
            return None

    def _attach(self, wall: datetime) -> datetime:
        """Attach the calendar zone to a wall-clock time, shifting out of DST gaps."""
        return wall.replace(tzinfo=self._tz).astimezone(tz.UTC).astimezone(self._tz)

    def _days_into_week(self, day: date) -> int:
        return (_weekday_code(day) - self._first_weekday) % 7

    def _overshoots(self, wall: datetime, limit: datetime) -> bool:
        return self._attach(wall).astimezone(tz.UTC) > limit

    def _days_into_week(self, day: date) -> int:
        return (_weekday_code(day) - self._first_weekday) % 7

    def _week_one_start(self, year: int) -> int:
        """Ordinal of the first day of week 1, possibly before year 1."""
        jan1 = _jan1_ordinal(year)
        lead = (_ordinal_weekday_code(jan1) - self._first_weekday) % 7
        start = jan1 - lead
        if 7 - lead < self._minimum_days:
            start += 7
        return start

    def _week_of_year(self, day: date) -> tuple[int, int]:
        ordinal = day.toordinal()
        year = day.year
        if ordinal >= self._week_one_start(year + 1):
            year += 1
        elif ordinal < self._week_one_start(year):
            year -= 1
        return year, (ordinal - self._week_one_start(year)) // 7 + 1

    def __repr__(self) -> str:
        zone = self._timezone_name or repr(self._tz)
        return (
            f"GregorianCalendar(timezone={zone!r}, "
            f"first_weekday={self._first_weekday.name}, "
            f"weekend={sorted(day.name for day in self._weekend)}, "
            f"minimum_days_in_first_week={self._minimum_days})"
        )


def _weekday_code(day: date) -> int:
    return day.isoweekday() % 7 + 1


def _jan1_ordinal(year: int) -> int:
    """Proleptic Gregorian ordinal of January 1, defined outside 1..9999."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + 1


def _ordinal_weekday_code(ordinal: int) -> int:
    # Ordinal 1 is Monday, January 1 of year 1
    return ordinal % 7 + 1
