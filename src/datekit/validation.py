"""Calendar field validation utilities."""

from datekit.calendar import Calendar
from datekit.components import Constraint

# Inclusive bounds checked when a field is present
_FIELD_RANGES: dict[str, tuple[int, int]] = {
    "month": (1, 12),
    "day": (1, 31),
    "day_of_year": (1, 366),
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "weekday": (1, 7),
    "quarter": (1, 4),
}


def is_valid(constraint: Constraint) -> bool:
    """Range-check the present fields of constraint.

    Checks:
    1. month 1-12, day 1-31, hour 0-23, minute 0-59, second 0-59
    2. weekday 1-7, quarter 1-4, day_of_year 1-366

    Absent fields pass. Cross-field rules (February 30) are not checked here;
    use ``make_date`` for those.
    """
    for name, (low, high) in _FIELD_RANGES.items():
        value = getattr(constraint, name)
        if value is not None and not low <= value <= high:
            return False
    return True


def is_valid_for(constraint: Constraint, calendar: Calendar) -> bool:
    """Range-check constraint, then check calendar can apply it as an offset to now.

    This accepts field sets that cannot name an absolute date, as long as the
    calendar can add them.
    """
    if not is_valid(constraint):
        return False
    return calendar.add(calendar.now(), constraint.as_offset()) is not None
