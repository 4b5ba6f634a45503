"""study_srs - Spaced repetition scheduling for study topics.

This package provides:
- SM-2 adaptive scheduling driven by a 0-5 quality grade
- Fixed review patterns (preset or custom day sequences)
- Manual interval overrides
- Due/upcoming selection and review statistics
- Review reminder digests
- An async orchestrator over a pluggable storage backend (MongoDB included)

The engine functions are pure: they take the current item fields, the
review signal and the current time, and return new values.

Example usage:
    from study_srs import ReviewQuality, next_review, resolve_intervals

    result = next_review(ease_factor=2.5, interval=6, repetitions=1,
                         quality=ReviewQuality.GOOD)
    intervals = resolve_intervals("custom", "1, 3, 7")

    from study_srs import MongoReviewRepository, StudyReviews

    async with StudyReviews(storage_class=MongoReviewRepository) as sr:
        due = await sr.get_due_items(user_id)
"""

__version__ = "0.1.0"

from study_srs.config import SchedulingDefaults, StudySRSConfig
from study_srs.domain.modes import ItemStatus, ReviewMode
from study_srs.domain.quality import ReviewQuality
from study_srs.errors import (
    InvalidInputError,
    ItemNotFoundError,
    ItemOwnershipError,
    StudySRSError,
)

# Implementations
from study_srs.infra.mongo.repositories import MongoReviewRepository
from study_srs.interfaces.storage import ReviewStorageInterface
from study_srs.models import (
    PRESET_PATTERNS,
    ReviewItemDTO,
    ReviewOutcome,
    SRStatisticsDTO,
    TopicRef,
    UserSRSettingsDTO,
)
from study_srs.orchestrator import StudyReviews
from study_srs.services import (
    ReviewService,
    calculate_statistics,
    due_items,
    format_interval,
    manual_review,
    next_pattern_review,
    next_review,
    resolve_intervals,
    upcoming_items,
)

__all__ = [  # noqa: RUF022
    # Orchestrator
    "StudyReviews",
    "ReviewService",
    # Engine
    "next_review",
    "next_pattern_review",
    "manual_review",
    "resolve_intervals",
    "due_items",
    "upcoming_items",
    "calculate_statistics",
    "format_interval",
    # Types
    "ItemStatus",
    "PRESET_PATTERNS",
    "ReviewItemDTO",
    "ReviewMode",
    "ReviewOutcome",
    "ReviewQuality",
    "SRStatisticsDTO",
    "TopicRef",
    "UserSRSettingsDTO",
    # Config
    "SchedulingDefaults",
    "StudySRSConfig",
    # Errors
    "InvalidInputError",
    "ItemNotFoundError",
    "ItemOwnershipError",
    "StudySRSError",
    # Storage
    "MongoReviewRepository",
    "ReviewStorageInterface",
]
