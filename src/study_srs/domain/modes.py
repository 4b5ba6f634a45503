"""Review mode and item status enums for study_srs."""

from enum import StrEnum

__all__ = [
    "CUSTOM_PATTERN_ID",
    "ItemStatus",
    "ReviewMode",
]

CUSTOM_PATTERN_ID = "custom"
"""Reserved pattern id that defers to a serialized custom interval list"""


class ReviewMode(StrEnum):
    """Scheduling strategy of a review item.

    Stamped once at creation; items of the same user may differ.
    """

    SM2 = "sm2"
    """Adaptive SuperMemo-2 scheduling driven by a 0-5 grade"""

    CUSTOM = "custom"
    """Fixed day-offset pattern driven by remembered/forgot"""


class ItemStatus(StrEnum):
    """Lifecycle status of a review item. Only active items are scheduled."""

    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    ARCHIVED = "archived"
