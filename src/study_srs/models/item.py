"""Review item models for study_srs.

These models represent a topic attached to a user's review queue and
its scheduling state. The engine never mutates them; it returns updated
copies for the host to persist.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from study_srs.domain.modes import ItemStatus, ReviewMode
from study_srs.domain.state import PatternState, SchedulingState, SM2State
from study_srs.utils.dates import ensure_aware

__all__ = [
    "ReviewItemDTO",
    "TopicRef",
]


class TopicRef(BaseModel, frozen=True):
    """Studied topic and its hierarchical context.

    Attributes:
        topic_id: Topic being studied
        subject_id: Subject the topic belongs to
        curriculum_id: Curriculum the subject belongs to
        topic_name: Display name of the topic
        subject_name: Display name of the subject
        curriculum_name: Display name of the curriculum
    """

    topic_id: str
    subject_id: str
    curriculum_id: str
    topic_name: str
    subject_name: str | None = None
    curriculum_name: str | None = None


class ReviewItemDTO(BaseModel, frozen=True):
    """Persisted review item.

    SM-2 fields are meaningful only when ``review_mode`` is sm2, pattern
    fields only when it is custom. Display names are denormalized for
    presentation.

    Attributes:
        item_id: Deterministic item ID (hash of user_id + topic_id)
        user_id: Owner of the item
        topic_id / subject_id / curriculum_id: Studied concept and its context
        topic_name / subject_name / curriculum_name: Display names
        review_mode: Scheduler that processes this item
        ease_factor: SM-2 ease factor (floor 1.3)
        interval: Days between the last review and the due date
        repetitions: SM-2 consecutive-success counter
        pattern_id: Preset pattern id or "custom"
        custom_intervals: Serialized interval list used when pattern_id is "custom"
        current_step: Index into the resolved pattern
        next_review_date: Due date (start of a calendar day)
        last_review_date: Time of the last review, None before the first one
        total_reviews: Lifetime review count
        correct_reviews: Lifetime count of reviews marked correct
        status: Lifecycle status
        email_reminder_sent: Whether a reminder went out for the current due date
        created_at: Creation time
        schema_version: Schema version for forward compatibility
    """

    item_id: str = Field(description="Hash of user_id + topic_id")
    user_id: str
    topic_id: str
    subject_id: str
    curriculum_id: str
    topic_name: str
    subject_name: str | None = None
    curriculum_name: str | None = None

    review_mode: ReviewMode = Field(default=ReviewMode.SM2)

    ease_factor: float = Field(default=2.5, ge=1.3)
    interval: int = Field(default=1, ge=1, description="Days")
    repetitions: int = Field(default=0, ge=0)

    pattern_id: str | None = Field(default=None)
    custom_intervals: str | None = Field(default=None, description="Serialized day list")
    current_step: int = Field(default=0, ge=0)

    next_review_date: datetime
    last_review_date: datetime | None = None

    total_reviews: int = Field(default=0, ge=0)
    correct_reviews: int = Field(default=0, ge=0)
    status: ItemStatus = Field(default=ItemStatus.ACTIVE)
    email_reminder_sent: bool = False
    created_at: datetime | None = None
    schema_version: int = Field(default=1)

    @field_validator("next_review_date", "last_review_date", "created_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_aware(value) if value is not None else None

    @property
    def is_active(self) -> bool:
        return self.status == ItemStatus.ACTIVE

    @property
    def has_reviews(self) -> bool:
        return self.total_reviews > 0

    def scheduling_state(self) -> SchedulingState:
        """Project the item onto the state shape of its review mode."""
        if self.review_mode == ReviewMode.CUSTOM:
            return PatternState(
                pattern_id=self.pattern_id,
                custom_intervals=self.custom_intervals,
                current_step=self.current_step,
            )
        return SM2State(
            ease_factor=self.ease_factor,
            interval=self.interval,
            repetitions=self.repetitions,
        )
