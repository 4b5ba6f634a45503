"""Fixed-pattern scheduler for study_srs.

Remembering advances one step through the pattern and stays on the last
step once the pattern is exhausted. Forgetting restarts from the first
step. There is no ease factor in this model.
"""

from datetime import datetime

from study_srs.config import SchedulingDefaults, get_default_scheduling
from study_srs.errors import InvalidInputError
from study_srs.logging import get_logger
from study_srs.models.review import PatternReviewResult
from study_srs.utils.dates import add_days, utc_now

__all__ = [
    "next_pattern_review",
]

logger = get_logger(__name__)


def next_pattern_review(
    current_step: int,
    intervals: list[int],
    remembered: bool,
    now: datetime | None = None,
    defaults: SchedulingDefaults | None = None,
) -> PatternReviewResult:
    """Calculate the next step of a fixed review pattern.

    Args:
        current_step: Index of the step just completed (0-based)
        intervals: Resolved pattern (see resolve_intervals)
        remembered: Whether the learner recalled the topic
        now: Review time (default: current UTC time)
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        New step, its interval and the start-of-day due date

    Raises:
        InvalidInputError: If intervals is empty or holds a value outside
            1..defaults.max_interval_days
    """
    if not intervals:
        raise InvalidInputError("Review pattern must contain at least one interval")
    if any(days < 1 for days in intervals):
        raise InvalidInputError(f"Review pattern intervals must be positive: {intervals}")
    max_days = (defaults or get_default_scheduling()).max_interval_days
    if any(days > max_days for days in intervals):
        raise InvalidInputError(f"Review pattern intervals must be at most {max_days} days")

    last_step = len(intervals) - 1
    current_step = min(max(0, current_step), last_step)

    new_step = min(current_step + 1, last_step) if remembered else 0
    new_interval = intervals[new_step]
    now = now or utc_now()

    logger.debug(
        "pattern_review_calculated",
        remembered=remembered,
        current_step=current_step,
        new_step=new_step,
        new_interval=new_interval,
    )

    return PatternReviewResult(
        new_interval=new_interval,
        new_step=new_step,
        next_review_date=add_days(now, new_interval),
        is_correct=remembered,
    )
