"""Utility functions for study_srs.

This module contains internal utility functions.
"""

from study_srs.utils.dates import (
    Clock,
    add_days,
    calendar_day,
    ensure_aware,
    start_of_day,
    utc_now,
)
from study_srs.utils.hashing import generate_item_id, hash_text, stable_hash

__all__ = [
    "Clock",
    "add_days",
    "calendar_day",
    "ensure_aware",
    "generate_item_id",
    "hash_text",
    "stable_hash",
    "start_of_day",
    "utc_now",
]
