"""datekit - Ergonomic date arithmetic, boundaries and relative time on top of datetime."""

from datekit.arithmetic import (
    DateArithmeticError,
    add,
    adding,
    age,
    combine,
    component,
    days_between,
    difference,
    make_date,
    scale,
    subtract,
    subtracting,
)
from datekit.boundaries import (
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    first_day_of_month,
    last_day_of_month,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)
from datekit.business import (
    adding_business_days,
    business_days,
    if_weekend_then_next_workday,
    if_weekend_then_previous_workday,
    next_occurrence,
    next_weekday,
    previous_occurrence,
)
from datekit.calendar import Calendar, GregorianCalendar, Weekday
from datekit.components import ZERO, Constraint, Offset, Unit
from datekit.config import (
    CalendarConfig,
    configure_calendar,
    get_calendar,
    get_calendar_config,
    reset_calendar_config,
    reset_calendar_context,
    set_calendar_context,
    use_calendar,
)
from datekit.duration import formatted_duration
from datekit.formatting import DateFormat, date_format, format_date
from datekit.logging import configure_logging, get_logger
from datekit.predicates import (
    is_after,
    is_before,
    is_same_day,
    is_this_month,
    is_this_week,
    is_this_year,
    is_today,
    is_tomorrow,
    is_weekend,
    is_yesterday,
)
from datekit.relative import relative_formatted, time_ago_since, time_until
from datekit.utils import element_at
from datekit.validation import is_valid, is_valid_for

__all__ = [
    # Calendar
    "Calendar",
    "GregorianCalendar",
    "Weekday",
    # Field sets
    "Constraint",
    "Offset",
    "Unit",
    "ZERO",
    # Config
    "CalendarConfig",
    "configure_calendar",
    "get_calendar",
    "get_calendar_config",
    "reset_calendar_config",
    "reset_calendar_context",
    "set_calendar_context",
    "use_calendar",
    # Logging
    "configure_logging",
    "get_logger",
    # Arithmetic
    "DateArithmeticError",
    "add",
    "adding",
    "age",
    "combine",
    "component",
    "days_between",
    "difference",
    "make_date",
    "scale",
    "subtract",
    "subtracting",
    # Boundaries
    "end_of_day",
    "end_of_month",
    "end_of_week",
    "end_of_year",
    "first_day_of_month",
    "last_day_of_month",
    "start_of_day",
    "start_of_month",
    "start_of_week",
    "start_of_year",
    # Predicates
    "is_after",
    "is_before",
    "is_same_day",
    "is_this_month",
    "is_this_week",
    "is_this_year",
    "is_today",
    "is_tomorrow",
    "is_weekend",
    "is_yesterday",
    # Business days
    "adding_business_days",
    "business_days",
    "if_weekend_then_next_workday",
    "if_weekend_then_previous_workday",
    "next_occurrence",
    "next_weekday",
    "previous_occurrence",
    # Formatting
    "DateFormat",
    "date_format",
    "format_date",
    "formatted_duration",
    "relative_formatted",
    "time_ago_since",
    "time_until",
    # Validation and helpers
    "element_at",
    "is_valid",
    "is_valid_for",
]
__version__ = "0.1.0"
