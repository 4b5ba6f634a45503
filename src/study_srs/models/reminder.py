"""Reminder digest model for study_srs."""

from pydantic import BaseModel, Field

__all__ = [
    "ReminderDigest",
]


class ReminderDigest(BaseModel, frozen=True):
    """Rendered review reminder, ready to hand to a delivery channel.

    Attributes:
        subject: Message subject line
        text: Plain text body
        due_item_ids: Items covered by this reminder (to mark as reminded)
        due_count: Number of due items
        upcoming_count: Number of upcoming items mentioned
    """

    subject: str
    text: str
    due_item_ids: list[str] = Field(default_factory=list)
    due_count: int = 0
    upcoming_count: int = 0
