"""StudyReviews orchestrator for high-level review operations.

This module provides the main entry point for the study_srs package.
It loads items from storage, runs them through the scheduling engine
and persists the returned copies.
"""

from datetime import datetime
from typing import Any

from study_srs.config import StudySRSConfig
from study_srs.domain.modes import ItemStatus
from study_srs.errors import ItemNotFoundError, ItemOwnershipError
from study_srs.interfaces.storage import ReviewStorageInterface
from study_srs.logging import get_logger
from study_srs.models.item import ReviewItemDTO, TopicRef
from study_srs.models.reminder import ReminderDigest
from study_srs.models.review import ReviewOption, ReviewOutcome, SRStatisticsDTO
from study_srs.models.settings import UserSRSettingsDTO
from study_srs.services.reminders import (
    build_reminder_digest,
    is_reminder_due,
    select_reminder_items,
)
from study_srs.services.review_service import ReviewService
from study_srs.services.selector import calculate_statistics, due_items, upcoming_items
from study_srs.utils.dates import Clock, utc_now
from study_srs.utils.hashing import generate_item_id

__all__ = ["StudyReviews"]

logger = get_logger(__name__)


class StudyReviews:
    """Main orchestrator for a user's spaced repetition queue.

    Accepts a storage implementation class. Config is loaded from .env
    automatically. For custom implementations, set config_class = None
    and pass storage_custom_config.

    Submitting two reviews for the same item concurrently is not guarded
    here; callers must serialize them.

    Example:
        async with StudyReviews(storage_class=MongoReviewRepository) as sr:
            item = await sr.add_topic(user_id, topic)
            due = await sr.get_due_items(user_id)
            outcome = await sr.submit_review(user_id, due[0].item_id, quality=4)
    """

    def __init__(
        self,
        storage_class: type[ReviewStorageInterface],
        *,
        storage_custom_config: dict[str, Any] | None = None,
        config: StudySRSConfig | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize StudyReviews with a storage implementation class.

        Args:
            storage_class: Storage implementation class
            storage_custom_config: Custom config dict if storage_class.config_class is None
            config: Configuration (default: loaded from .env)
            clock: Source of the current time
        """
        self._config = config or StudySRSConfig()
        self._storage_class = storage_class
        self._storage_custom_config = storage_custom_config
        self._clock = clock

        self._storage: ReviewStorageInterface | None = None
        self._reviews = ReviewService(self._config.scheduling, clock=clock)

        self._connected = False

    async def _instantiate_storage(self) -> ReviewStorageInterface:
        """Instantiate the storage class.

        If config_class is set, instantiate config (loads from .env).
        If config_class is None, use the custom config dict.
        """
        cls = self._storage_class
        config_class = getattr(cls, "config_class", None)

        if config_class is None:
            if self._storage_custom_config is None:
                raise ValueError(
                    f"{cls.__name__} has config_class=None but no custom_config provided"
                )
            storage = await cls.from_dict(self._storage_custom_config)  # type: ignore[attr-defined]
        else:
            storage = await cls.from_config(config_class())  # type: ignore[attr-defined]
        return storage  # type: ignore[no-any-return]

    async def _connect(self) -> None:
        """Initialize storage."""
        if self._connected:
            return
        self._storage = await self._instantiate_storage()
        self._connected = True
        logger.info("study_reviews_connected")

    async def _disconnect(self) -> None:
        """Close storage."""
        if self._storage and hasattr(self._storage, "close"):
            await self._storage.close()
        self._connected = False
        logger.info("study_reviews_disconnected")

    async def __aenter__(self) -> "StudyReviews":
        """Async context manager entry - connects automatically."""
        await self._connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit - disconnects automatically."""
        await self._disconnect()

    def _ensure_connected(self) -> ReviewStorageInterface:
        if not self._connected or self._storage is None:
            raise RuntimeError(
                "StudyReviews not connected. Use 'async with StudyReviews(...) as sr:'"
            )
        return self._storage

    @property
    def storage(self) -> ReviewStorageInterface:
        """Connected storage instance."""
        return self._ensure_connected()

    @property
    def review_service(self) -> ReviewService:
        return self._reviews

    # === SETTINGS ===

    async def get_settings(self, user_id: str) -> UserSRSettingsDTO:
        """Get a user's settings, or the configured defaults if none are saved."""
        storage = self._ensure_connected()
        settings = await storage.get_settings(user_id)
        return settings or self._reviews.default_settings(user_id)

    async def update_settings(self, settings: UserSRSettingsDTO) -> UserSRSettingsDTO:
        """Save a user's settings. Existing items keep their stamped mode and pattern."""
        storage = self._ensure_connected()
        await storage.save_settings(settings)
        logger.info(
            "settings_updated",
            user_id=settings.user_id,
            review_mode=str(settings.review_mode),
            pattern_id=settings.selected_pattern_id,
        )
        return settings

    # === ITEMS ===

    async def add_topic(self, user_id: str, topic: TopicRef) -> ReviewItemDTO:
        """Attach a topic to the user's review queue.

        Adding a topic twice returns the existing item unchanged.

        Args:
            user_id: Owner of the item
            topic: Topic and its context

        Returns:
            The new or existing ReviewItemDTO
        """
        storage = self._ensure_connected()

        existing = await storage.get_item(generate_item_id(user_id, topic.topic_id))
        if existing is not None:
            logger.debug("topic_already_tracked", user_id=user_id, topic_id=topic.topic_id)
            return existing

        settings = await self.get_settings(user_id)
        item = self._reviews.create_item(user_id, topic, settings, now=self._clock())
        await storage.save_item(item)

        logger.info(
            "topic_added",
            user_id=user_id,
            item_id=item.item_id,
            review_mode=str(item.review_mode),
            first_interval=item.interval,
        )
        return item

    async def get_item(self, user_id: str, item_id: str) -> ReviewItemDTO:
        """Get one of the user's items.

        Raises:
            ItemNotFoundError: If the item does not exist
            ItemOwnershipError: If the item belongs to another user
        """
        storage = self._ensure_connected()
        item = await storage.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        if item.user_id != user_id:
            raise ItemOwnershipError(item_id, user_id)
        return item

    async def set_item_status(
        self,
        user_id: str,
        item_id: str,
        status: ItemStatus,
    ) -> ReviewItemDTO:
        """Pause, complete, archive or reactivate an item."""
        storage = self._ensure_connected()
        item = await self.get_item(user_id, item_id)
        updated = item.model_copy(update={"status": status})
        await storage.save_item(updated)
        logger.info("item_status_changed", item_id=item_id, status=str(status))
        return updated

    async def remove_item(self, user_id: str, item_id: str) -> bool:
        """Remove an item from the user's queue."""
        storage = self._ensure_connected()
        await self.get_item(user_id, item_id)
        deleted = await storage.delete_item(item_id)
        logger.info("item_removed", item_id=item_id, deleted=deleted)
        return deleted

    # === REVIEWS ===

    async def submit_review(
        self,
        user_id: str,
        item_id: str,
        quality: int | None = None,
        remembered: bool | None = None,
    ) -> ReviewOutcome:
        """Apply a review and persist the updated item.

        Args:
            user_id: Reviewing user (must own the item)
            item_id: Item reviewed
            quality: Grade 0-5 for SM-2 items
            remembered: Recall signal for pattern items

        Returns:
            ReviewOutcome with the persisted item

        Raises:
            ItemNotFoundError: If the item does not exist
            ItemOwnershipError: If the item belongs to another user
            InvalidInputError: If the review signal is missing or out of range
        """
        storage = self._ensure_connected()
        item = await self.get_item(user_id, item_id)
        settings = await self.get_settings(user_id)

        outcome = self._reviews.review(
            item,
            quality=quality,
            remembered=remembered,
            settings=settings,
            now=self._clock(),
        )
        await storage.save_item(outcome.item)

        logger.info(
            "review_submitted",
            user_id=user_id,
            item_id=item_id,
            review_mode=str(item.review_mode),
            is_correct=outcome.is_correct,
            interval=outcome.interval,
        )
        return outcome

    async def submit_manual_review(
        self,
        user_id: str,
        item_id: str,
        days: int,
    ) -> ReviewOutcome:
        """Reschedule an item by an explicit number of days and persist it.

        Raises:
            ItemNotFoundError: If the item does not exist
            ItemOwnershipError: If the item belongs to another user
            InvalidInputError: If days is not a positive integer within max_interval_days
        """
        storage = self._ensure_connected()
        item = await self.get_item(user_id, item_id)

        outcome = self._reviews.manual(item, days, now=self._clock())
        await storage.save_item(outcome.item)

        logger.info("manual_review_submitted", user_id=user_id, item_id=item_id, days=days)
        return outcome

    async def preview_review(self, user_id: str, item_id: str) -> list[ReviewOption]:
        """Interval each possible answer would produce for an item."""
        item = await self.get_item(user_id, item_id)
        settings = await self.get_settings(user_id)
        return self._reviews.preview(item, settings, now=self._clock())

    # === VIEWS ===

    async def get_due_items(
        self,
        user_id: str,
        limit: int | None = None,
    ) -> list[ReviewItemDTO]:
        """Get the user's due items, capped at max_daily_reviews by default."""
        storage = self._ensure_connected()
        items = await storage.get_items_for_user(user_id)
        if limit is None:
            limit = (await self.get_settings(user_id)).max_daily_reviews
        return due_items(items, limit=limit, now=self._clock(), defaults=self._config.scheduling)

    async def get_upcoming_items(
        self,
        user_id: str,
        within_days: int | None = None,
    ) -> list[ReviewItemDTO]:
        """Get the user's items due after today within the look-ahead window."""
        storage = self._ensure_connected()
        items = await storage.get_items_for_user(user_id)
        return upcoming_items(
            items,
            within_days=within_days,
            now=self._clock(),
            defaults=self._config.scheduling,
        )

    async def get_statistics(self, user_id: str) -> SRStatisticsDTO:
        """Get aggregate statistics over the user's items."""
        storage = self._ensure_connected()
        items = await storage.get_items_for_user(user_id)
        return calculate_statistics(items, now=self._clock(), defaults=self._config.scheduling)

    # === REMINDERS ===

    async def prepare_reminder(
        self,
        user_id: str,
        username: str,
        now: datetime | None = None,
    ) -> ReminderDigest | None:
        """Build a reminder digest if one is due for the user now.

        Returns None when reminders are off, outside the reminder hour, on a
        skipped weekend, or when nothing is due. Delivering the digest and
        then calling ``mark_reminders_sent`` is up to the caller.
        """
        storage = self._ensure_connected()
        now = now or self._clock()
        settings = await self.get_settings(user_id)

        if not is_reminder_due(settings, now, self._config.scheduling):
            return None

        items = await storage.get_items_for_user(user_id)
        due = select_reminder_items(items, settings, now, defaults=self._config.scheduling)
        if not due:
            logger.debug("no_items_for_reminder", user_id=user_id)
            return None

        upcoming = upcoming_items(
            items,
            within_days=self._config.scheduling.upcoming_window_days,
            now=now,
        )
        digest = build_reminder_digest(username, due, upcoming)
        logger.info("reminder_prepared", user_id=user_id, due_count=digest.due_count)
        return digest

    async def mark_reminders_sent(self, user_id: str, item_ids: list[str]) -> int:
        """Flag items as reminded so the next run skips them.

        Returns:
            Number of items updated
        """
        storage = self._ensure_connected()
        updated = 0
        for item_id in item_ids:
            item = await self.get_item(user_id, item_id)
            if item.email_reminder_sent:
                continue
            await storage.save_item(item.model_copy(update={"email_reminder_sent": True}))
            updated += 1
        logger.info("reminders_marked_sent", user_id=user_id, updated_count=updated)
        return updated
