"""Module-level configuration and calendar injection for datekit."""

import contextvars
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator

from datekit.calendar import Calendar, GregorianCalendar, Weekday
from datekit.logging import get_logger

_log = get_logger(__name__)


@dataclass
class CalendarConfig:
    """Settings for the calendar used when none is passed or injected."""

    timezone: str | None = "UTC"  # None = system local zone
    first_weekday: int = Weekday.SUNDAY
    weekend: tuple[int, ...] = (Weekday.SATURDAY, Weekday.SUNDAY)
    minimum_days_in_first_week: int = 1


# Module-level singleton
_calendar_config: CalendarConfig | None = None
_config_lock = threading.Lock()

# Calendar injected for the current context, wins over the config
_current_calendar: contextvars.ContextVar[Calendar | None] = contextvars.ContextVar(
    "calendar", default=None
)


def get_calendar_config() -> CalendarConfig:
    """Get the global calendar configuration singleton."""
    global _calendar_config
    if _calendar_config is None:
        with _config_lock:
            if _calendar_config is None:
                _calendar_config = CalendarConfig()
    return _calendar_config


def configure_calendar(
    timezone: str | None = None,
    first_weekday: int | None = None,
    weekend: tuple[int, ...] | list[int] | None = None,
    minimum_days_in_first_week: int | None = None,
    use_local_timezone: bool = False,
) -> None:
    """Configure the default calendar.

    Args:
        timezone: IANA time zone name for the default calendar.
        first_weekday: Weekday code weeks start on (1 = Sunday).
        weekend: Weekday codes treated as weekend days.
        minimum_days_in_first_week: 1 for US week numbering, 4 for ISO 8601.
        use_local_timezone: Use the system time zone instead of a named one.

    Example:
        from datekit import configure_calendar, Weekday

        # ISO weeks in Amsterdam
        configure_calendar(
            timezone="Europe/Amsterdam",
            first_weekday=Weekday.MONDAY,
            minimum_days_in_first_week=4,
        )
    """
    # Invalid zones and weekday codes raise before the config changes
    config = get_calendar_config()
    candidate = CalendarConfig(
        timezone=None if use_local_timezone else (timezone or config.timezone),
        first_weekday=first_weekday or config.first_weekday,
        weekend=tuple(weekend) if weekend is not None else config.weekend,
        minimum_days_in_first_week=(
            minimum_days_in_first_week or config.minimum_days_in_first_week
        ),
    )
    _build_calendar(candidate)

    with _config_lock:
        config.timezone = candidate.timezone
        config.first_weekday = candidate.first_weekday
        config.weekend = candidate.weekend
        config.minimum_days_in_first_week = candidate.minimum_days_in_first_week
    _log.info(
        "calendar_configured",
        timezone=config.timezone,
        first_weekday=int(config.first_weekday),
        weekend=[int(day) for day in config.weekend],
    )


def reset_calendar_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calendar_config
    with _config_lock:
        _calendar_config = CalendarConfig()


def get_calendar() -> Calendar:
    """Resolve the calendar for the current call.

    An injected calendar (see ``use_calendar``) takes precedence; otherwise a
    calendar is built from the module configuration.
    """
    injected = _current_calendar.get()
    if injected is not None:
        return injected
    return _build_calendar(get_calendar_config())


def set_calendar_context(calendar: Calendar | None) -> contextvars.Token:
    """Set the injected calendar and return token for reset."""
    return _current_calendar.set(calendar)


def reset_calendar_context(token: contextvars.Token) -> None:
    """Reset injected calendar using token."""
    _current_calendar.reset(token)


@contextmanager
def use_calendar(calendar: Calendar) -> Generator[Calendar, None, None]:
    """Inject a calendar for the duration of the block.

    Example:
        fixed = GregorianCalendar("UTC", clock=lambda: datetime(2025, 7, 26, 12))
        with use_calendar(fixed):
            assert relative_formatted(datetime(2025, 7, 25, 12)) == "yesterday"
    """
    token = set_calendar_context(calendar)
    try:
        yield calendar
    finally:
        reset_calendar_context(token)


def _build_calendar(config: CalendarConfig) -> GregorianCalendar:
    return GregorianCalendar(
        timezone=config.timezone,
        first_weekday=config.first_weekday,
        weekend=config.weekend,
        minimum_days_in_first_week=config.minimum_days_in_first_week,
    )
