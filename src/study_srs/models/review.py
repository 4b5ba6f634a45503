"""Review result models for study_srs.

Scheduler outputs are plain values; ``ReviewOutcome`` bundles the
updated item copy produced by the dispatch layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from study_srs.models.item import ReviewItemDTO

__all__ = [
    "ManualReviewResult",
    "PatternReviewResult",
    "ReviewOption",
    "ReviewOutcome",
    "SM2ReviewResult",
    "SRStatisticsDTO",
]


class SM2ReviewResult(BaseModel, frozen=True):
    """Next SM-2 scheduling parameters."""

    new_ease_factor: float = Field(ge=1.3)
    new_interval: int = Field(ge=1, description="Days")
    new_repetitions: int = Field(ge=0)
    next_review_date: datetime
    is_correct: bool


class PatternReviewResult(BaseModel, frozen=True):
    """Next fixed-pattern scheduling parameters."""

    new_interval: int = Field(ge=1, description="Days")
    new_step: int = Field(ge=0)
    next_review_date: datetime
    is_correct: bool


class ManualReviewResult(BaseModel, frozen=True):
    """User-chosen interval. Always counted as correct."""

    new_interval: int = Field(ge=1, description="Days")
    next_review_date: datetime
    is_correct: bool = True


class ReviewOutcome(BaseModel, frozen=True):
    """Result of applying one review to an item.

    Attributes:
        item: Updated copy of the item, ready to persist
        is_correct: Whether the review counted as correct
        interval: New interval in days
        next_review_date: New due date
    """

    item: ReviewItemDTO
    is_correct: bool
    interval: int
    next_review_date: datetime


class SRStatisticsDTO(BaseModel, frozen=True):
    """Aggregate view over a user's review items.

    Attributes:
        total_items: All items regardless of status
        active_items: Items with status active
        due_today: Active items due today or overdue
        due_this_week: Active items due within the week window (overdue included)
        average_retention: round(100 * correct / total) over reviewed items, 0 if none
        total_reviews: Sum of review counts
        reviewed_today: Items whose last review happened today
    """

    total_items: int = 0
    active_items: int = 0
    due_today: int = 0
    due_this_week: int = 0
    average_retention: int = Field(default=0, ge=0, le=100)
    total_reviews: int = 0
    reviewed_today: int = 0


class ReviewOption(BaseModel, frozen=True):
    """One possible answer to a review and the interval it would produce.

    Exactly one of ``quality`` (SM-2 items) or ``remembered`` (pattern
    items) is set.
    """

    label: str
    interval: int = Field(ge=1, description="Days")
    quality: int | None = None
    remembered: bool | None = None
