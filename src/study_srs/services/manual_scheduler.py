"""Manual interval override for study_srs."""

from datetime import datetime

from study_srs.config import SchedulingDefaults, get_default_scheduling
from study_srs.errors import InvalidInputError
from study_srs.models.review import ManualReviewResult
from study_srs.utils.dates import add_days, utc_now

__all__ = [
    "manual_review",
]


def manual_review(
    days: int,
    now: datetime | None = None,
    defaults: SchedulingDefaults | None = None,
) -> ManualReviewResult:
    """Schedule the next review ``days`` from now, bypassing both algorithms.

    Always recorded as correct. Ease factor, repetitions and pattern step
    are left to the caller, who keeps them unchanged.

    Raises:
        InvalidInputError: If days is not a positive integer or exceeds
            ``defaults.max_interval_days``
    """
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise InvalidInputError(f"Manual interval must be a positive number of days, got {days!r}")

    max_days = (defaults or get_default_scheduling()).max_interval_days
    if days > max_days:
        raise InvalidInputError(f"Manual interval must be at most {max_days} days, got {days}")

    now = now or utc_now()
    return ManualReviewResult(
        new_interval=days,
        next_review_date=add_days(now, days),
    )
