"""MongoDB repositories for study_srs.

This module provides the review storage implementation for MongoDB.
"""

from typing import Any, Self

from study_srs.config import MongoSettings
from study_srs.infra.mongo.client import MongoClient
from study_srs.interfaces.storage import ReviewStorageInterface
from study_srs.logging import get_logger
from study_srs.models.item import ReviewItemDTO
from study_srs.models.settings import UserSRSettingsDTO

__all__ = [
    "MongoReviewRepository",
]

logger = get_logger(__name__)


class MongoReviewRepository(ReviewStorageInterface):
    """MongoDB implementation of ReviewStorageInterface.

    Items are stored one document per item, keyed by ``item_id``;
    settings one document per user, keyed by ``user_id``.
    """

    config_class = MongoSettings

    def __init__(self, client: MongoClient) -> None:
        """Initialize repository with MongoDB client.

        Args:
            client: Connected MongoClient instance
        """
        self._client = client
        self._owns_client = False

    @classmethod
    async def from_config(cls, config: MongoSettings) -> Self:
        """Factory method for StudyReviews instantiation.

        Creates a MongoClient, connects, creates indexes, and returns repository.

        Args:
            config: MongoDB settings

        Returns:
            Connected MongoReviewRepository instance
        """
        client = MongoClient(config)
        await client.connect()
        await client.create_indexes()

        instance = cls(client)
        instance._owns_client = True
        return instance

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        """Factory method for custom config dict.

        Args:
            config: Dictionary with MongoDB settings

        Returns:
            Connected MongoReviewRepository instance
        """
        settings = MongoSettings(**config)
        return await cls.from_config(settings)

    async def close(self) -> None:
        """Close owned resources."""
        if self._owns_client and self._client:
            await self._client.disconnect()

    # Review item operations
    async def save_item(self, item: ReviewItemDTO) -> str:
        """Save or replace a review item."""
        doc = self._item_to_doc(item)
        await self._client.review_items.replace_one(
            {"item_id": item.item_id},
            doc,
            upsert=True,
        )
        return item.item_id

    async def get_item(self, item_id: str) -> ReviewItemDTO | None:
        """Get a review item by ID."""
        doc = await self._client.review_items.find_one({"item_id": item_id})
        return self._doc_to_item(doc) if doc else None

    async def get_items_for_user(self, user_id: str) -> list[ReviewItemDTO]:
        """Get all review items of a user."""
        cursor = self._client.review_items.find({"user_id": user_id})
        return [self._doc_to_item(doc) async for doc in cursor]

    async def delete_item(self, item_id: str) -> bool:
        """Delete a review item."""
        result = await self._client.review_items.delete_one({"item_id": item_id})
        return result.deleted_count > 0

    # Settings operations
    async def save_settings(self, settings: UserSRSettingsDTO) -> None:
        """Save or replace a user's settings."""
        await self._client.settings.replace_one(
            {"user_id": settings.user_id},
            settings.model_dump(mode="json"),
            upsert=True,
        )

    async def get_settings(self, user_id: str) -> UserSRSettingsDTO | None:
        """Get a user's settings."""
        doc = await self._client.settings.find_one({"user_id": user_id})
        if not doc:
            return None
        doc.pop("_id", None)
        return UserSRSettingsDTO.model_validate(doc)

    # Document mappers
    @staticmethod
    def _item_to_doc(item: ReviewItemDTO) -> dict[str, Any]:
        return {
            "item_id": item.item_id,
            "user_id": item.user_id,
            "topic_id": item.topic_id,
            "subject_id": item.subject_id,
            "curriculum_id": item.curriculum_id,
            "topic_name": item.topic_name,
            "subject_name": item.subject_name,
            "curriculum_name": item.curriculum_name,
            "review_mode": str(item.review_mode),
            "ease_factor": item.ease_factor,
            "interval": item.interval,
            "repetitions": item.repetitions,
            "pattern_id": item.pattern_id,
            "custom_intervals": item.custom_intervals,
            "current_step": item.current_step,
            "next_review_date": item.next_review_date,
            "last_review_date": item.last_review_date,
            "total_reviews": item.total_reviews,
            "correct_reviews": item.correct_reviews,
            "status": str(item.status),
            "email_reminder_sent": item.email_reminder_sent,
            "created_at": item.created_at,
            "schema_version": item.schema_version,
        }

    @staticmethod
    def _doc_to_item(doc: dict[str, Any]) -> ReviewItemDTO:
        # Documents written before a field existed fall back to the item defaults
        ease_factor = doc.get("ease_factor")
        return ReviewItemDTO(
            item_id=doc["item_id"],
            user_id=doc["user_id"],
            topic_id=doc["topic_id"],
            subject_id=doc.get("subject_id", ""),
            curriculum_id=doc.get("curriculum_id", ""),
            topic_name=doc.get("topic_name", ""),
            subject_name=doc.get("subject_name"),
            curriculum_name=doc.get("curriculum_name"),
            review_mode=doc.get("review_mode") or "sm2",
            ease_factor=max(1.3, 2.5 if ease_factor is None else ease_factor),
            interval=max(1, doc.get("interval") or 1),
            repetitions=max(0, doc.get("repetitions") or 0),
            pattern_id=doc.get("pattern_id"),
            custom_intervals=doc.get("custom_intervals"),
            current_step=max(0, doc.get("current_step") or 0),
            next_review_date=doc["next_review_date"],
            last_review_date=doc.get("last_review_date"),
            total_reviews=doc.get("total_reviews") or 0,
            correct_reviews=doc.get("correct_reviews") or 0,
            status=doc.get("status") or "active",
            email_reminder_sent=bool(doc.get("email_reminder_sent")),
            created_at=doc.get("created_at"),
            schema_version=doc.get("schema_version") or 1,
        )
