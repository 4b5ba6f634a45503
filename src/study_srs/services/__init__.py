"""Service layer for study_srs.

This module exports the scheduling engine entry points.
"""

from study_srs.services.formatting import format_interval, quality_label
from study_srs.services.manual_scheduler import manual_review
from study_srs.services.pattern_resolver import (
    parse_custom_intervals,
    resolve_intervals,
    serialize_intervals,
)
from study_srs.services.pattern_scheduler import next_pattern_review
from study_srs.services.reminders import (
    build_reminder_digest,
    is_reminder_due,
    select_reminder_items,
)
from study_srs.services.review_service import ReviewService
from study_srs.services.selector import (
    calculate_statistics,
    due_items,
    retention_rate,
    upcoming_items,
)
from study_srs.services.sm2_scheduler import next_review

__all__ = [
    "ReviewService",
    "build_reminder_digest",
    "calculate_statistics",
    "due_items",
    "format_interval",
    "is_reminder_due",
    "manual_review",
    "next_pattern_review",
    "next_review",
    "parse_custom_intervals",
    "quality_label",
    "resolve_intervals",
    "retention_rate",
    "select_reminder_items",
    "serialize_intervals",
    "upcoming_items",
]
