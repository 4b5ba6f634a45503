"""Due-set selection and statistics for study_srs.

All comparisons are made on calendar days in the timezone of ``now``, so
an item normalized to midnight is due for the whole of that day. These
functions are read-only over the item collection.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from study_srs.config import SchedulingDefaults, get_default_scheduling
from study_srs.models.item import ReviewItemDTO
from study_srs.models.review import SRStatisticsDTO
from study_srs.utils.dates import calendar_day, utc_now

__all__ = [
    "calculate_statistics",
    "due_items",
    "retention_rate",
    "upcoming_items",
]


def due_items(
    items: Iterable[ReviewItemDTO],
    limit: int | None = None,
    now: datetime | None = None,
    defaults: SchedulingDefaults | None = None,
) -> list[ReviewItemDTO]:
    """Get active items due today or earlier, most overdue first.

    Ties keep input order (sorted() is stable).

    Args:
        items: All of a user's items
        limit: Maximum number of items (default: max_daily_reviews)
        now: Current time (default: current UTC time)
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        Due items sorted by due date ascending, truncated to limit
    """
    now = now or utc_now()
    if limit is None:
        limit = (defaults or get_default_scheduling()).max_daily_reviews
    today = calendar_day(now, now)

    due = [
        item
        for item in items
        if item.is_active and calendar_day(item.next_review_date, now) <= today
    ]
    due.sort(key=lambda item: item.next_review_date)
    return due[: max(0, limit)]


def upcoming_items(
    items: Iterable[ReviewItemDTO],
    within_days: int | None = None,
    now: datetime | None = None,
    defaults: SchedulingDefaults | None = None,
) -> list[ReviewItemDTO]:
    """Get active items due after today and within ``within_days`` days.

    Args:
        items: All of a user's items
        within_days: Look-ahead window (default: upcoming_window_days)
        now: Current time (default: current UTC time)
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        Upcoming items sorted by due date ascending
    """
    now = now or utc_now()
    if within_days is None:
        within_days = (defaults or get_default_scheduling()).upcoming_window_days
    today = calendar_day(now, now)
    horizon = today + timedelta(days=within_days)

    upcoming = [
        item
        for item in items
        if item.is_active and today < calendar_day(item.next_review_date, now) <= horizon
    ]
    upcoming.sort(key=lambda item: item.next_review_date)
    return upcoming


def retention_rate(item: ReviewItemDTO) -> int:
    """Percentage of an item's reviews marked correct (0 before any review)."""
    if item.total_reviews == 0:
        return 0
    return _round_percent(item.correct_reviews, item.total_reviews)


def calculate_statistics(
    items: Sequence[ReviewItemDTO],
    now: datetime | None = None,
    defaults: SchedulingDefaults | None = None,
) -> SRStatisticsDTO:
    """Aggregate statistics over a user's items in a single pass.

    Overdue items count towards both due_today and due_this_week.
    Items never reviewed are left out of the retention denominator.

    Args:
        items: All of a user's items
        now: Current time (default: current UTC time)
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        SRStatisticsDTO (all zeros for an empty collection)
    """
    now = now or utc_now()
    defaults = defaults or get_default_scheduling()
    today = calendar_day(now, now)
    week_end = today + timedelta(days=defaults.week_window_days)

    active = due_today = due_this_week = reviewed_today = 0
    total_reviews = reviewed_total = reviewed_correct = 0

    for item in items:
        total_reviews += item.total_reviews
        if item.has_reviews:
            reviewed_total += item.total_reviews
            reviewed_correct += item.correct_reviews
        if item.last_review_date is not None and calendar_day(item.last_review_date, now) == today:
            reviewed_today += 1
        if not item.is_active:
            continue
        active += 1
        due_day = calendar_day(item.next_review_date, now)
        if due_day <= today:
            due_today += 1
        if due_day <= week_end:
            due_this_week += 1

    average_retention = (
        _round_percent(reviewed_correct, reviewed_total) if reviewed_total > 0 else 0
    )

    return SRStatisticsDTO(
        total_items=len(items),
        active_items=active,
        due_today=due_today,
        due_this_week=due_this_week,
        average_retention=average_retention,
        total_reviews=total_reviews,
        reviewed_today=reviewed_today,
    )


def _round_percent(part: int, whole: int) -> int:
    # Half-up, matching how percentages are shown elsewhere in the app
    return min(100, int(100 * part / whole + 0.5))
