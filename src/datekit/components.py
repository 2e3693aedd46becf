"""Calendar field sets: offsets to apply and constraints to match."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datekit.calendar import Calendar


class Unit(Enum):
    """Calendar field tags shared by offsets and constraints."""

    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK_OF_YEAR = "week_of_year"
    YEAR_FOR_WEEK_OF_YEAR = "year_for_week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    WEEKDAY = "weekday"
    WEEKDAY_ORDINAL = "weekday_ordinal"
    DAY = "day"
    DAY_OF_YEAR = "day_of_year"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MICROSECOND = "microsecond"


# Offset field name for each unit that can be added to an instant
_OFFSET_FIELDS: dict[Unit, str] = {
    Unit.YEAR: "years",
    Unit.QUARTER: "quarters",
    Unit.MONTH: "months",
    Unit.WEEK_OF_YEAR: "weeks",
    Unit.DAY: "days",
    Unit.HOUR: "hours",
    Unit.MINUTE: "minutes",
    Unit.SECOND: "seconds",
    Unit.MICROSECOND: "microseconds",
}

# Units an offset combination is re-derived over, largest first
NORMALIZED_UNITS: tuple[Unit, ...] = (
    Unit.YEAR,
    Unit.MONTH,
    Unit.WEEK_OF_YEAR,
    Unit.DAY,
    Unit.HOUR,
    Unit.MINUTE,
    Unit.SECOND,
    Unit.MICROSECOND,
)


@dataclass(frozen=True, eq=False)
class Offset:
    """Amount of calendar time to add to an instant.

    Absent fields contribute nothing, so ``Offset(days=1, hours=0)`` and
    ``Offset(days=1)`` are equal. Calendar fields (years through days) are
    applied to wall-clock time; time fields are applied as elapsed time.

    Offsets support operators. ``instant + offset`` and ``instant - offset``
    go through the active calendar and raise ``DateArithmeticError`` when the
    result cannot be represented. ``offset + offset``, ``offset - offset`` and
    ``offset * n`` apply the operands to "now" and re-derive the offset from
    the result, so combined offsets come back calendar-normalized (seven days
    come back as one week).
    """

    years: int | None = None
    quarters: int | None = None
    months: int | None = None
    weeks: int | None = None
    days: int | None = None
    hours: int | None = None
    minutes: int | None = None
    seconds: int | None = None
    microseconds: int | None = None

    @classmethod
    def from_units(cls, values: dict[Unit, int]) -> "Offset":
        """Build an offset from a unit-keyed mapping."""
        kwargs = {}
        for unit, value in values.items():
            if unit not in _OFFSET_FIELDS:
                raise ValueError(f"Unit {unit.name} cannot be used as an offset")
            kwargs[_OFFSET_FIELDS[unit]] = value
        return cls(**kwargs)

    def value(self, unit: Unit) -> int | None:
        """Get the raw value for a unit, None if absent."""
        if unit not in _OFFSET_FIELDS:
            raise ValueError(f"Unit {unit.name} cannot be used as an offset")
        return getattr(self, _OFFSET_FIELDS[unit])

    def nonzero(self) -> dict[str, int]:
        """Nonzero fields by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name)
        }

    def negated(self) -> "Offset":
        """Offset with every present field negated."""
        return Offset(**{
            f.name: -getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        })

    def __neg__(self) -> "Offset":
        return self.negated()

    def __bool__(self) -> bool:
        return bool(self.nonzero())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self.nonzero() == other.nonzero()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.nonzero().items())))

    def __add__(self, other):
        if isinstance(other, Offset):
            from datekit.arithmetic import combine
            return combine(self, other)
        if isinstance(other, datetime):
            from datekit.arithmetic import add
            return add(other, self)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, datetime):
            from datekit.arithmetic import add
            return add(other, self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Offset):
            from datekit.arithmetic import combine
            return combine(self, other.negated())
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, datetime):
            from datekit.arithmetic import subtract
            return subtract(other, self)
        return NotImplemented

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        from datekit.arithmetic import scale
        return scale(self, factor)

    __rmul__ = __mul__


ZERO = Offset()


@dataclass(frozen=True)
class Constraint:
    """Calendar fields an instant must match. Absent fields are unconstrained."""

    year: int | None = None
    quarter: int | None = None
    month: int | None = None
    day: int | None = None
    day_of_year: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int | None = None
    weekday: int | None = None
    weekday_ordinal: int | None = None
    week_of_month: int | None = None
    week_of_year: int | None = None
    year_for_week_of_year: int | None = None

    @classmethod
    def from_units(cls, values: dict[Unit, int]) -> "Constraint":
        return cls(**{unit.value: value for unit, value in values.items()})

    def value(self, unit: Unit) -> int | None:
        return getattr(self, unit.value)

    def present(self) -> dict[Unit, int]:
        """Constrained fields keyed by unit."""
        return {
            unit: getattr(self, unit.value)
            for unit in Unit
            if getattr(self, unit.value) is not None
        }

    def as_offset(self) -> Offset:
        """Reinterpret the offset-capable fields as amounts to add."""
        return Offset.from_units({
            unit: value
            for unit, value in self.present().items()
            if unit in _OFFSET_FIELDS
        })

    def is_valid(self) -> bool:
        from datekit.validation import is_valid
        return is_valid(self)

    def is_valid_for(self, calendar: "Calendar") -> bool:
        from datekit.validation import is_valid_for
        return is_valid_for(self, calendar)
