"""Display helpers for study_srs."""

from study_srs.domain.quality import ReviewQuality
from study_srs.errors import InvalidInputError

__all__ = [
    "format_interval",
    "quality_label",
]


def format_interval(days: int) -> str:
    """Render a day count for display.

    0 -> "Today", 1 -> "Tomorrow", 2-6 -> "n days", 7-29 -> whole weeks,
    30 and above -> whole months. 7 and 30 start their tier.

    Raises:
        InvalidInputError: If days is negative
    """
    if days < 0:
        raise InvalidInputError(f"Interval cannot be negative, got {days}")
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days < 7:
        return f"{days} days"
    if days < 30:
        return _plural(days // 7, "week")
    return _plural(days // 30, "month")


def quality_label(quality: int) -> str:
    """Display label for a grade, "Unknown" outside 0-5."""
    try:
        return ReviewQuality(quality).label
    except ValueError:
        return "Unknown"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"
