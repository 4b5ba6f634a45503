"""Review dispatch service for study_srs.

This module is the single point that selects a scheduler for an item.
It turns scheduler results into updated item copies and never touches
storage; persisting the returned item is the caller's job.
"""

from datetime import datetime

from study_srs.config import SchedulingDefaults, get_default_scheduling
from study_srs.domain.modes import CUSTOM_PATTERN_ID, ItemStatus, ReviewMode
from study_srs.domain.quality import ReviewQuality
from study_srs.domain.state import PatternState, SM2State
from study_srs.errors import InvalidInputError
from study_srs.logging import get_logger
from study_srs.models.item import ReviewItemDTO, TopicRef
from study_srs.models.review import ReviewOption, ReviewOutcome
from study_srs.models.settings import UserSRSettingsDTO
from study_srs.services.manual_scheduler import manual_review
from study_srs.services.pattern_resolver import resolve_intervals
from study_srs.services.pattern_scheduler import next_pattern_review
from study_srs.services.sm2_scheduler import next_review
from study_srs.utils.dates import Clock, add_days, utc_now
from study_srs.utils.hashing import generate_item_id

__all__ = [
    "ReviewService",
]

logger = get_logger(__name__)


class ReviewService:
    """Applies reviews to items according to their review mode.

    Example:
        service = ReviewService()

        item = service.create_item(user_id, topic, settings)
        outcome = service.review(item, quality=ReviewQuality.GOOD)
        await storage.save_item(outcome.item)
    """

    def __init__(
        self,
        defaults: SchedulingDefaults | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize service.

        Args:
            defaults: Scheduling defaults (default: loaded from env)
            clock: Source of the current time
        """
        self._defaults = defaults or get_default_scheduling()
        self._clock = clock

    @property
    def defaults(self) -> SchedulingDefaults:
        return self._defaults

    def default_settings(self, user_id: str) -> UserSRSettingsDTO:
        """Settings for a user who never saved any."""
        return UserSRSettingsDTO.defaults_for(user_id, self._defaults)

    def create_item(
        self,
        user_id: str,
        topic: TopicRef,
        settings: UserSRSettingsDTO | None = None,
        now: datetime | None = None,
    ) -> ReviewItemDTO:
        """Attach a topic to the review queue using the user's current settings.

        Custom-mode items start on the first step of the selected pattern;
        SM-2 items start with the configured initial interval. The custom
        interval string is copied only for the "custom" pattern.

        Args:
            user_id: Owner of the new item
            topic: Topic and its context
            settings: User settings (default: configured defaults)
            now: Creation time (default: clock)

        Returns:
            New ReviewItemDTO, not yet persisted
        """
        settings = settings or self.default_settings(user_id)
        now = now or self._clock()

        pattern_id: str | None = None
        custom_intervals: str | None = None
        first_interval = self._defaults.initial_interval

        if settings.review_mode == ReviewMode.CUSTOM:
            pattern_id = settings.selected_pattern_id
            if pattern_id == CUSTOM_PATTERN_ID:
                custom_intervals = settings.custom_intervals
            intervals = resolve_intervals(pattern_id, custom_intervals, self._defaults)
            first_interval = intervals[0]

        return ReviewItemDTO(
            item_id=generate_item_id(user_id, topic.topic_id),
            user_id=user_id,
            topic_id=topic.topic_id,
            subject_id=topic.subject_id,
            curriculum_id=topic.curriculum_id,
            topic_name=topic.topic_name,
            subject_name=topic.subject_name,
            curriculum_name=topic.curriculum_name,
            review_mode=settings.review_mode,
            ease_factor=self._defaults.initial_ease_factor,
            interval=first_interval,
            repetitions=0,
            pattern_id=pattern_id,
            custom_intervals=custom_intervals,
            current_step=0,
            next_review_date=add_days(now, first_interval),
            status=ItemStatus.ACTIVE,
            created_at=now,
        )

    def resolve_item_intervals(
        self,
        item: ReviewItemDTO,
        settings: UserSRSettingsDTO | None = None,
    ) -> list[int]:
        """Resolve the pattern of a custom-mode item.

        Items without a pattern id or custom list inherit them from the
        user's settings.
        """
        settings = settings or self.default_settings(item.user_id)
        pattern_id = item.pattern_id or settings.selected_pattern_id
        custom_intervals = item.custom_intervals or settings.custom_intervals
        return resolve_intervals(pattern_id, custom_intervals, self._defaults)

    def review(
        self,
        item: ReviewItemDTO,
        quality: int | None = None,
        remembered: bool | None = None,
        settings: UserSRSettingsDTO | None = None,
        now: datetime | None = None,
    ) -> ReviewOutcome:
        """Apply one review to an item.

        SM-2 items take a 0-5 ``quality``; pattern items take
        ``remembered``.

        Args:
            item: Item being reviewed
            quality: Grade for SM-2 items
            remembered: Recall signal for pattern items
            settings: User settings used to fill in a missing pattern
            now: Review time (default: clock)

        Returns:
            ReviewOutcome holding the updated item copy

        Raises:
            InvalidInputError: If the signal required by the item's mode is missing
                or out of range
        """
        now = now or self._clock()
        state = item.scheduling_state()

        if isinstance(state, SM2State):
            if quality is None:
                raise InvalidInputError(f"SM-2 item {item.item_id} requires a quality grade")
            sm2 = next_review(
                state.ease_factor,
                state.interval,
                state.repetitions,
                quality,
                now=now,
                defaults=self._defaults,
            )
            updated = self._record(
                item,
                now,
                sm2.is_correct,
                ease_factor=sm2.new_ease_factor,
                interval=sm2.new_interval,
                repetitions=sm2.new_repetitions,
                next_review_date=sm2.next_review_date,
            )
            return ReviewOutcome(
                item=updated,
                is_correct=sm2.is_correct,
                interval=sm2.new_interval,
                next_review_date=sm2.next_review_date,
            )

        if isinstance(state, PatternState):
            if remembered is None:
                raise InvalidInputError(
                    f"Pattern item {item.item_id} requires a remembered/forgot answer"
                )
            intervals = self.resolve_item_intervals(item, settings)
            step = next_pattern_review(
                state.current_step, intervals, remembered, now=now, defaults=self._defaults
            )
            updated = self._record(
                item,
                now,
                step.is_correct,
                interval=step.new_interval,
                current_step=step.new_step,
                next_review_date=step.next_review_date,
            )
            return ReviewOutcome(
                item=updated,
                is_correct=step.is_correct,
                interval=step.new_interval,
                next_review_date=step.next_review_date,
            )

        raise InvalidInputError(f"Unsupported review mode: {item.review_mode}")

    def manual(
        self,
        item: ReviewItemDTO,
        days: int,
        now: datetime | None = None,
    ) -> ReviewOutcome:
        """Reschedule an item by an explicit number of days.

        Works for both modes and leaves ease factor, repetitions and
        pattern step untouched.

        Raises:
            InvalidInputError: If days is not a positive integer within
                max_interval_days
        """
        now = now or self._clock()
        result = manual_review(days, now=now, defaults=self._defaults)
        updated = self._record(
            item,
            now,
            result.is_correct,
            interval=result.new_interval,
            next_review_date=result.next_review_date,
        )
        return ReviewOutcome(
            item=updated,
            is_correct=result.is_correct,
            interval=result.new_interval,
            next_review_date=result.next_review_date,
        )

    def preview(
        self,
        item: ReviewItemDTO,
        settings: UserSRSettingsDTO | None = None,
        now: datetime | None = None,
    ) -> list[ReviewOption]:
        """Interval each possible answer would produce, without applying it."""
        now = now or self._clock()
        state = item.scheduling_state()

        if isinstance(state, PatternState):
            intervals = self.resolve_item_intervals(item, settings)
            return [
                ReviewOption(
                    label=label,
                    remembered=remembered,
                    interval=next_pattern_review(
                        state.current_step,
                        intervals,
                        remembered,
                        now=now,
                        defaults=self._defaults,
                    ).new_interval,
                )
                for label, remembered in (("Forgot", False), ("Remembered", True))
            ]

        return [
            ReviewOption(
                label=grade.label,
                quality=int(grade),
                interval=next_review(
                    state.ease_factor,
                    state.interval,
                    state.repetitions,
                    grade,
                    now=now,
                    defaults=self._defaults,
                ).new_interval,
            )
            for grade in ReviewQuality
        ]

    @staticmethod
    def _record(
        item: ReviewItemDTO,
        now: datetime,
        is_correct: bool,
        **changes: object,
    ) -> ReviewItemDTO:
        updated = item.model_copy(
            update={
                **changes,
                "last_review_date": now,
                "total_reviews": item.total_reviews + 1,
                "correct_reviews": item.correct_reviews + (1 if is_correct else 0),
                "email_reminder_sent": False,
            }
        )
        logger.debug(
            "review_recorded",
            item_id=item.item_id,
            review_mode=str(item.review_mode),
            is_correct=is_correct,
            next_review_date=updated.next_review_date.isoformat(),
        )
        return updated
