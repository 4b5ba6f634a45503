"""Interval pattern resolution for study_srs.

This is the only place that reads the serialized interval format. Custom
lists are stored either as a JSON array ("[1,4,7]") or comma separated
("1, 4, 7"). Anything unusable degrades to the default pattern instead of
raising, so a corrupt document never blocks a review.
"""

import json
from typing import Any

from study_srs.config import SchedulingDefaults, get_default_scheduling
from study_srs.logging import get_logger
from study_srs.models.pattern import get_pattern

__all__ = [
    "parse_custom_intervals",
    "resolve_intervals",
    "serialize_intervals",
]

logger = get_logger(__name__)


def resolve_intervals(
    pattern_id: str | None,
    custom_intervals: str | None = None,
    defaults: SchedulingDefaults | None = None,
) -> list[int]:
    """Resolve a pattern id into a concrete list of day offsets.

    Preset ids return their fixed list. "custom" and unknown ids parse
    ``custom_intervals``; an empty parse result falls back to
    ``defaults.default_intervals``.

    Args:
        pattern_id: Preset id, "custom", or anything else
        custom_intervals: Serialized custom interval list
        defaults: Scheduling defaults (default: loaded from env)

    Returns:
        Non-empty ordered list of positive day counts
    """
    defaults = defaults or get_default_scheduling()
    pattern = get_pattern(pattern_id)
    if pattern is not None and not pattern.is_custom:
        return list(pattern.intervals)

    if pattern is None and pattern_id is not None:
        logger.warning("unknown_pattern_id", pattern_id=pattern_id)

    intervals = parse_custom_intervals(custom_intervals, max_days=defaults.max_interval_days)
    if intervals:
        return intervals

    logger.debug(
        "custom_intervals_fallback",
        pattern_id=pattern_id,
        raw=custom_intervals,
    )
    return list(defaults.default_intervals)


def parse_custom_intervals(text: str | None, max_days: int | None = None) -> list[int]:
    """Parse a serialized interval list, keeping only positive integers.

    Args:
        text: JSON array or comma separated day counts
        max_days: Entries above this many days are dropped (default: no limit)

    Returns:
        Parsed intervals in their original order (possibly empty)
    """
    if not text or not text.strip():
        return []

    stripped = text.strip()
    entries: list[Any]
    if stripped.startswith("["):
        try:
            decoded = json.loads(stripped)
        except ValueError:
            decoded = None
        if isinstance(decoded, list):
            entries = decoded
        else:
            entries = stripped.strip("[]").split(",")
    else:
        entries = stripped.split(",")

    intervals: list[int] = []
    for entry in entries:
        value = _to_positive_int(entry)
        if value is not None and (max_days is None or value <= max_days):
            intervals.append(value)
    return intervals


def serialize_intervals(intervals: list[int]) -> str:
    """Serialize intervals in the canonical JSON array form."""
    return json.dumps([int(days) for days in intervals], separators=(",", ":"))


def _to_positive_int(entry: Any) -> int | None:
    if isinstance(entry, bool):
        return None
    if isinstance(entry, int):
        value = entry
    elif isinstance(entry, float):
        if not entry.is_integer():
            return None
        value = int(entry)
    elif isinstance(entry, str):
        try:
            value = int(entry.strip())
        except ValueError:
            return None
    else:
        return None
    return value if value > 0 else None
