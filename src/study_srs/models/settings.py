"""Per-user spaced repetition settings for study_srs."""

from pydantic import BaseModel, Field

from study_srs.config import SchedulingDefaults
from study_srs.domain.modes import ReviewMode

__all__ = [
    "UserSRSettingsDTO",
]


class UserSRSettingsDTO(BaseModel, frozen=True):
    """User's review preferences (one per user).

    The review mode and pattern apply to items created from now on;
    existing items keep what was stamped on them.

    Attributes:
        user_id: Owner of the settings
        review_mode: Mode stamped on newly created items
        selected_pattern_id: Pattern stamped on newly created custom items
        custom_intervals: User's serialized custom pattern
        email_reminders_enabled: Whether reminder digests are prepared
        reminder_time: Local reminder time as "HH:MM"
        timezone: IANA timezone name for reminder_time and weekends
        max_daily_reviews: Cap on the due list shown per session
        weekend_reminders: Whether reminders go out on Saturday/Sunday
        reminder_days_before: Include items due this many days ahead
        schema_version: Schema version for forward compatibility
    """

    user_id: str
    review_mode: ReviewMode = Field(default=ReviewMode.CUSTOM)
    selected_pattern_id: str = Field(default="standard")
    custom_intervals: str | None = Field(default="[1,4,7,14,30,60,120]")
    email_reminders_enabled: bool = True
    reminder_time: str = Field(default="09:00", pattern=r"^\d{1,2}:\d{2}$")
    timezone: str = "UTC"
    max_daily_reviews: int = Field(default=20, ge=1)
    weekend_reminders: bool = True
    reminder_days_before: int = Field(default=0, ge=0)
    schema_version: int = Field(default=1)

    @classmethod
    def defaults_for(
        cls,
        user_id: str,
        defaults: SchedulingDefaults,
    ) -> "UserSRSettingsDTO":
        """Settings used for a user who never saved any."""
        return cls(
            user_id=user_id,
            review_mode=ReviewMode(defaults.default_review_mode),
            selected_pattern_id=defaults.default_pattern_id,
            custom_intervals=defaults.default_custom_intervals,
            max_daily_reviews=defaults.max_daily_reviews,
        )

    @property
    def reminder_hour(self) -> int:
        return int(self.reminder_time.split(":", 1)[0])
