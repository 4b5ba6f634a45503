"""SM-2 adaptive scheduler for study_srs.

Classic SuperMemo-2:

    EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)),  EF' >= 1.3
    q < 3:  repetitions = 0, interval = 1
    q >= 3: repetitions += 1, interval = 1, 6, then round(interval * EF')

Intervals never exceed ``SchedulingDefaults.max_interval_days``.

The interval table (1 day, 6 days) for the first two successes is part of
the algorithm and must not change.
"""

import math
from datetime import datetime

from study_srs.config import SchedulingDefaults, get_default_scheduling
from study_srs.domain.quality import CORRECT_THRESHOLD, ReviewQuality
from study_srs.errors import InvalidInputError
from study_srs.logging import get_logger
from study_srs.models.review import SM2ReviewResult
from study_srs.utils.dates import add_days, utc_now

__all__ = [
    "next_ease_factor",
    "next_review",
    "validate_quality",
]

logger = get_logger(__name__)


def next_review(
    ease_factor: float,
    interval: int,
    repetitions: int,
    quality: int,
    now: datetime | None = None,
    defaults: SchedulingDefaults | None = None,
) -> SM2ReviewResult:
    """Calculate the next SM-2 schedule.

    Args:
        ease_factor: Current ease factor
        interval: Current interval in days
        repetitions: Consecutive successful repetitions so far
        quality: Grade 0-5 (see ReviewQuality)
        now: Review time (default: current UTC time)
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        New ease factor, interval, repetitions and start-of-day due date

    Raises:
        InvalidInputError: If quality is outside 0-5
    """
    grade = validate_quality(quality)
    defaults = defaults or get_default_scheduling()
    now = now or utc_now()

    # Stored values outside the domain are clamped rather than rejected
    ease_factor = max(defaults.min_ease_factor, ease_factor)
    interval = min(max(1, interval), defaults.max_interval_days)
    repetitions = max(0, repetitions)

    new_ease_factor = next_ease_factor(ease_factor, grade, defaults.min_ease_factor)
    is_correct = grade >= CORRECT_THRESHOLD

    if not is_correct:
        new_repetitions = 0
        new_interval = 1
    else:
        new_repetitions = repetitions + 1
        if new_repetitions == 1:
            new_interval = 1
        elif new_repetitions == 2:
            new_interval = 6
        else:
            new_interval = min(
                defaults.max_interval_days,
                max(1, _round_half_up(interval * new_ease_factor)),
            )

    result = SM2ReviewResult(
        new_ease_factor=new_ease_factor,
        new_interval=new_interval,
        new_repetitions=new_repetitions,
        next_review_date=add_days(now, new_interval),
        is_correct=is_correct,
    )

    logger.debug(
        "sm2_review_calculated",
        quality=int(grade),
        ease_factor=ease_factor,
        new_ease_factor=new_ease_factor,
        new_interval=new_interval,
        new_repetitions=new_repetitions,
    )
    return result


def next_ease_factor(ease_factor: float, quality: int, floor: float = 1.3) -> float:
    """Apply the SM-2 ease factor update, floored and rounded to 2 decimals."""
    penalty = 5 - quality
    updated = ease_factor + (0.1 - penalty * (0.08 + penalty * 0.02))
    return max(floor, round(updated, 2))


def validate_quality(quality: int) -> ReviewQuality:
    """Convert a raw grade to ReviewQuality.

    Raises:
        InvalidInputError: If quality is not an integer in 0-5
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidInputError(f"Quality must be an integer between 0 and 5, got {quality!r}")
    try:
        return ReviewQuality(quality)
    except ValueError:
        raise InvalidInputError(
            f"Quality must be between 0 and 5, got {quality}"
        ) from None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
