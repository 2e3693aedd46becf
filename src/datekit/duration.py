"""Elapsed durations as plain seconds."""

MINUTE = 60.0
HOUR = 3600.0
DAY = 86400.0
WEEK = 604800.0


def minutes(n: float) -> float:
    return n * MINUTE


def hours(n: float) -> float:
    return n * HOUR


def days(n: float) -> float:
    return n * DAY


def weeks(n: float) -> float:
    return n * WEEK


def as_minutes(seconds: float) -> float:
    return seconds / MINUTE


def as_hours(seconds: float) -> float:
    return seconds / HOUR


def as_days(seconds: float) -> float:
    return seconds / DAY


def as_weeks(seconds: float) -> float:
    return seconds / WEEK


def formatted_duration(seconds: float) -> str:
    """Compact label for an elapsed time: "45s", "12m", "3.5h", "2.0d", "1.3w".

    Each bucket starts at its unit, so exactly 60 seconds is "1m" and exactly
    one hour is "1.0h".
    """
    if seconds < MINUTE:
        return f"{seconds:.0f}s"
    if seconds < HOUR:
        return f"{as_minutes(seconds):.0f}m"
    if seconds < DAY:
        return f"{as_hours(seconds):.1f}h"
    if seconds < WEEK:
        return f"{as_days(seconds):.1f}d"
    return f"{as_weeks(seconds):.1f}w"
