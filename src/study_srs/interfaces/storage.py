"""Storage interface for study_srs.

This module defines the Protocol for persisting review items and
per-user settings. The engine itself never calls it; the orchestrator
does.
"""

from typing import ClassVar, Protocol, runtime_checkable

from study_srs.models.item import ReviewItemDTO
from study_srs.models.settings import UserSRSettingsDTO

__all__ = [
    "ReviewStorageInterface",
]


@runtime_checkable
class ReviewStorageInterface(Protocol):
    """Contract for persistent storage of review items and settings.

    Implementations must apply ``save_item`` atomically per item. Two
    concurrent reviews of the same item are not merged; the last write wins.
    """

    config_class: ClassVar[type | None] = None

    # Review item operations
    async def save_item(self, item: ReviewItemDTO) -> str:
        """Insert or replace a review item.

        Args:
            item: Item to save

        Returns:
            Item ID
        """
        ...

    async def get_item(self, item_id: str) -> ReviewItemDTO | None:
        """Get a review item by ID.

        Args:
            item_id: Item ID to retrieve

        Returns:
            ReviewItemDTO if found, None otherwise
        """
        ...

    async def get_items_for_user(self, user_id: str) -> list[ReviewItemDTO]:
        """Get all review items of a user, in insertion order.

        Args:
            user_id: Owner to filter by

        Returns:
            List of the user's items (any status)
        """
        ...

    async def delete_item(self, item_id: str) -> bool:
        """Delete a review item.

        Args:
            item_id: Item ID to delete

        Returns:
            True if an item was deleted
        """
        ...

    # Settings operations
    async def save_settings(self, settings: UserSRSettingsDTO) -> None:
        """Insert or replace a user's settings.

        Args:
            settings: Settings to save
        """
        ...

    async def get_settings(self, user_id: str) -> UserSRSettingsDTO | None:
        """Get a user's settings.

        Args:
            user_id: Owner of the settings

        Returns:
            UserSRSettingsDTO if saved, None otherwise
        """
        ...
