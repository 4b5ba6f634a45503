"""Public DTO models for study_srs.

This module exports all public data transfer objects.
"""

from study_srs.models.item import ReviewItemDTO, TopicRef
from study_srs.models.pattern import PRESET_PATTERNS, ReviewPattern, get_pattern
from study_srs.models.reminder import ReminderDigest
from study_srs.models.review import (
    ManualReviewResult,
    PatternReviewResult,
    ReviewOption,
    ReviewOutcome,
    SM2ReviewResult,
    SRStatisticsDTO,
)
from study_srs.models.settings import UserSRSettingsDTO

__all__ = [
    "PRESET_PATTERNS",
    "ManualReviewResult",
    "PatternReviewResult",
    "ReminderDigest",
    "ReviewItemDTO",
    "ReviewOption",
    "ReviewOutcome",
    "ReviewPattern",
    "SM2ReviewResult",
    "SRStatisticsDTO",
    "TopicRef",
    "UserSRSettingsDTO",
    "get_pattern",
]
