"""Internal domain types for study_srs."""

from study_srs.domain.modes import CUSTOM_PATTERN_ID, ItemStatus, ReviewMode
from study_srs.domain.quality import CORRECT_THRESHOLD, ReviewQuality
from study_srs.domain.state import PatternState, SchedulingState, SM2State

__all__ = [
    "CORRECT_THRESHOLD",
    "CUSTOM_PATTERN_ID",
    "ItemStatus",
    "PatternState",
    "ReviewMode",
    "ReviewQuality",
    "SM2State",
    "SchedulingState",
]
