"""Configuration management for study_srs.

This module provides typed configuration classes using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.

``SchedulingDefaults`` is the single source of fallback values used by the
scheduling engine. Engine functions accept it as an optional argument so that
callers and tests can inject their own values.
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "LoggingSettings",
    "MongoSettings",
    "SchedulingDefaults",
    "StudySRSConfig",
    "get_default_scheduling",
]


class LoggingSettings(BaseSettings):
    """Log output settings read when study_srs is first imported."""

    model_config = SettingsConfigDict(
        env_prefix="STUDY_SRS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = False


class MongoSettings(BaseSettings):
    """MongoDB connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="STUDY_SRS_MONGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    uri: SecretStr = SecretStr("mongodb://localhost:27017")
    database: str = "study_srs"
    collection_prefix: str = ""


class SchedulingDefaults(BaseSettings):
    """Default values for the scheduling engine.

    Attributes:
        initial_ease_factor: Ease factor stamped on new SM-2 items
        min_ease_factor: Floor for the SM-2 ease factor (never below 1.3)
        initial_interval: First interval (days) for new SM-2 items
        default_intervals: Fallback fixed pattern when a custom one is unusable
        max_interval_days: Longest interval any scheduler may produce
        max_daily_reviews: Display cap on the due list
        upcoming_window_days: Look-ahead window for upcoming items
        week_window_days: Window used for the "due this week" statistic
        default_review_mode: Review mode for users without settings
        default_pattern_id: Pattern for users without settings
        default_custom_intervals: Serialized custom pattern for users without settings
        reminder_batch_limit: Maximum items included in one reminder
        reminder_hour_tolerance: Hours around the reminder time that still count
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDY_SRS_SCHEDULING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_ease_factor: float = Field(default=2.5, ge=1.3)
    min_ease_factor: float = Field(default=1.3, ge=1.3)
    initial_interval: int = Field(default=1, ge=1)
    default_intervals: list[int] = Field(default_factory=lambda: [1, 4, 7, 14, 30])
    max_interval_days: int = Field(default=36500, ge=1)
    max_daily_reviews: int = Field(default=20, ge=1)
    upcoming_window_days: int = Field(default=7, ge=1)
    week_window_days: int = Field(default=7, ge=1)
    default_review_mode: str = "custom"
    default_pattern_id: str = "standard"
    default_custom_intervals: str = "[1,4,7,14,30,60,120]"
    reminder_batch_limit: int = Field(default=50, ge=1)
    reminder_hour_tolerance: int = Field(default=1, ge=0)


class StudySRSConfig(BaseSettings):
    """Main configuration aggregating all settings.

    Example usage:
        config = StudySRSConfig()
        mongo_uri = config.mongo.uri.get_secret_value()
        floor = config.scheduling.min_ease_factor
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mongo: MongoSettings = MongoSettings()
    scheduling: SchedulingDefaults = SchedulingDefaults()


_default_scheduling: SchedulingDefaults | None = None


def get_default_scheduling() -> SchedulingDefaults:
    """Get the process-wide scheduling defaults (loaded once from env)."""
    global _default_scheduling
    if _default_scheduling is None:
        _default_scheduling = SchedulingDefaults()
    return _default_scheduling
