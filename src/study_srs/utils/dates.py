"""Date helpers for study_srs.

All scheduling is date-granular: due dates are normalized to the start of a
calendar day and comparisons are made on calendar days. Naive datetimes are
interpreted as UTC.
"""

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

__all__ = [
    "Clock",
    "add_days",
    "calendar_day",
    "ensure_aware",
    "start_of_day",
    "utc_now",
]

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current time in UTC."""
    return datetime.now(UTC)


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (MongoDB returns naive UTC values)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def start_of_day(value: datetime) -> datetime:
    """Zero the time-of-day, keeping the timezone."""
    return ensure_aware(value).replace(hour=0, minute=0, second=0, microsecond=0)


def add_days(now: datetime, days: int) -> datetime:
    """Return the start of the calendar day ``days`` after ``now``."""
    return start_of_day(ensure_aware(now) + timedelta(days=days))


def calendar_day(value: datetime, reference: datetime) -> date:
    """Calendar day of ``value`` as seen in the timezone of ``reference``."""
    reference = ensure_aware(reference)
    return ensure_aware(value).astimezone(reference.tzinfo).date()
