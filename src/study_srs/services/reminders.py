"""Review reminder preparation for study_srs.

Decides whether a user should get a reminder now, which items it covers,
and renders a plain text digest. Delivery (e-mail, push) is left to the
host application.
"""

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from study_srs.config import SchedulingDefaults, get_default_scheduling
from study_srs.logging import get_logger
from study_srs.models.item import ReviewItemDTO
from study_srs.models.reminder import ReminderDigest
from study_srs.models.settings import UserSRSettingsDTO
from study_srs.utils.dates import calendar_day, ensure_aware

__all__ = [
    "build_reminder_digest",
    "group_by_curriculum",
    "is_reminder_due",
    "select_reminder_items",
]

logger = get_logger(__name__)

UNCATEGORIZED = "Uncategorized"


def is_reminder_due(
    settings: UserSRSettingsDTO,
    now: datetime,
    defaults: SchedulingDefaults | None = None,
) -> bool:
    """Check whether a reminder should go out for this user now.

    Reminders must be enabled, weekends are skipped unless allowed, and
    the local hour must be within ``reminder_hour_tolerance`` of the
    configured reminder hour.

    Args:
        settings: User settings
        now: Current time
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        True if a reminder is due
    """
    if not settings.email_reminders_enabled:
        return False

    defaults = defaults or get_default_scheduling()
    local_now = ensure_aware(now).astimezone(_zone(settings.timezone))

    if local_now.weekday() >= 5 and not settings.weekend_reminders:
        return False

    return abs(local_now.hour - settings.reminder_hour) <= defaults.reminder_hour_tolerance


def select_reminder_items(
    items: Iterable[ReviewItemDTO],
    settings: UserSRSettingsDTO,
    now: datetime,
    limit: int | None = None,
    defaults: SchedulingDefaults | None = None,
) -> list[ReviewItemDTO]:
    """Get active, not yet reminded items due within the reminder window.

    Args:
        items: All of a user's items
        settings: User settings (reminder_days_before widens the window)
        now: Current time
        limit: Maximum number of items (default: reminder_batch_limit)
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        Items sorted by due date ascending
    """
    if limit is None:
        limit = (defaults or get_default_scheduling()).reminder_batch_limit
    cutoff = calendar_day(now, now) + timedelta(days=settings.reminder_days_before)

    selected = [
        item
        for item in items
        if item.is_active
        and not item.email_reminder_sent
        and calendar_day(item.next_review_date, now) <= cutoff
    ]
    selected.sort(key=lambda item: item.next_review_date)
    return selected[:limit]


def group_by_curriculum(
    items: Iterable[ReviewItemDTO],
) -> dict[str, list[ReviewItemDTO]]:
    """Group items by curriculum display name, keeping first-seen order."""
    groups: dict[str, list[ReviewItemDTO]] = {}
    for item in items:
        groups.setdefault(item.curriculum_name or UNCATEGORIZED, []).append(item)
    return groups


def build_reminder_digest(
    username: str,
    due: Sequence[ReviewItemDTO],
    upcoming: Sequence[ReviewItemDTO],
    max_upcoming_groups: int = 5,
    max_upcoming_per_group: int = 3,
) -> ReminderDigest:
    """Render a plain text reminder.

    Args:
        username: Greeting name
        due: Items due now
        upcoming: Items due later this week
        max_upcoming_groups: Curricula listed in the upcoming section
        max_upcoming_per_group: Topics listed per upcoming curriculum

    Returns:
        ReminderDigest with subject and body
    """
    due_count = len(due)
    upcoming_count = len(upcoming)

    if due_count > 0:
        subject = f"You have {_topics(due_count)} to review today!"
    else:
        subject = f"{_topics(upcoming_count)} coming up for review"

    lines = [f"Hi {username}!", ""]
    if due_count > 0:
        lines.append(f"You have {_topics(due_count)} due for review today.")
    if upcoming_count > 0:
        lines.append(f"You have {_topics(upcoming_count)} coming up for review this week.")

    if due_count > 0:
        lines += ["", "Topics due:"]
        for curriculum, items in group_by_curriculum(due).items():
            lines.append(f"{curriculum}:")
            lines += [_topic_line(item) for item in items]

    if upcoming_count > 0:
        lines += ["", "Upcoming reviews:"]
        groups = list(group_by_curriculum(upcoming).items())[:max_upcoming_groups]
        for curriculum, items in groups:
            lines.append(f"{curriculum}:")
            lines += [_topic_line(item) for item in items[:max_upcoming_per_group]]

    lines += ["", "Happy studying!"]

    logger.debug("reminder_digest_built", due_count=due_count, upcoming_count=upcoming_count)

    return ReminderDigest(
        subject=subject,
        text="\n".join(lines),
        due_item_ids=[item.item_id for item in due],
        due_count=due_count,
        upcoming_count=upcoming_count,
    )


def _topics(count: int) -> str:
    return f"{count} topic" if count == 1 else f"{count} topics"


def _topic_line(item: ReviewItemDTO) -> str:
    if item.subject_name:
        return f"  - {item.topic_name} ({item.subject_name})"
    return f"  - {item.topic_name}"


def _zone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("unknown_timezone", timezone=name, fallback="UTC")
        return UTC
