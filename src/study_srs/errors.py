"""Exception types for study_srs.

The scheduling engine only raises ``InvalidInputError``, and only for
programmer errors (a grade outside 0-5, a non-positive manual interval).
Malformed persisted configuration never raises; it degrades to defaults.
"""

__all__ = [
    "InvalidInputError",
    "ItemNotFoundError",
    "ItemOwnershipError",
    "StudySRSError",
]


class StudySRSError(Exception):
    """Base class for all study_srs errors."""


class InvalidInputError(StudySRSError, ValueError):
    """Out-of-domain input rejected at a function boundary."""


class ItemNotFoundError(StudySRSError, KeyError):
    """Requested review item does not exist."""

    def __init__(self, item_id: str) -> None:
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"Review item not found: {self.item_id}"


class ItemOwnershipError(StudySRSError, PermissionError):
    """Review item belongs to a different user."""

    def __init__(self, item_id: str, user_id: str) -> None:
        super().__init__(f"User {user_id} does not own review item {item_id}")
        self.item_id = item_id
        self.user_id = user_id
