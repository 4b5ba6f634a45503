"""Shared test fixtures for study_srs.

This module provides pytest fixtures used across all tests. Every
time-dependent test uses the fixed ``NOW`` below (a Wednesday afternoon).
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from study_srs.config import SchedulingDefaults
from study_srs.domain.modes import ReviewMode
from study_srs.models.item import ReviewItemDTO, TopicRef
from study_srs.models.settings import UserSRSettingsDTO
from study_srs.services.review_service import ReviewService
from study_srs.utils.dates import start_of_day

NOW = datetime(2026, 3, 11, 14, 30, tzinfo=UTC)
TODAY = start_of_day(NOW)


def days_from_today(days: int) -> datetime:
    """Start of the calendar day ``days`` after the fixed now."""
    return TODAY + timedelta(days=days)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def defaults() -> SchedulingDefaults:
    """Scheduling defaults independent of the environment."""
    return SchedulingDefaults(
        initial_ease_factor=2.5,
        min_ease_factor=1.3,
        initial_interval=1,
        default_intervals=[1, 4, 7, 14, 30],
        max_interval_days=36500,
        max_daily_reviews=20,
        upcoming_window_days=7,
        week_window_days=7,
        default_review_mode="custom",
        default_pattern_id="standard",
        default_custom_intervals="[1,4,7,14,30,60,120]",
        reminder_batch_limit=50,
        reminder_hour_tolerance=1,
    )


@pytest.fixture
def review_service(defaults: SchedulingDefaults) -> ReviewService:
    return ReviewService(defaults, clock=lambda: NOW)


@pytest.fixture
def make_item() -> Callable[..., ReviewItemDTO]:
    """Factory for review items; keyword arguments override fields."""
    counter = 0

    def _make(**overrides: Any) -> ReviewItemDTO:
        nonlocal counter
        counter += 1
        fields: dict[str, Any] = {
            "item_id": f"item-{counter}",
            "user_id": "user-1",
            "topic_id": f"topic-{counter}",
            "subject_id": "subject-1",
            "curriculum_id": "curriculum-1",
            "topic_name": f"Topic {counter}",
            "subject_name": "Biology",
            "curriculum_name": "A-Level",
            "review_mode": ReviewMode.SM2,
            "next_review_date": TODAY,
        }
        fields.update(overrides)
        return ReviewItemDTO(**fields)

    return _make


@pytest.fixture
def sample_topic() -> TopicRef:
    return TopicRef(
        topic_id="topic-krebs",
        subject_id="subject-bio",
        curriculum_id="curriculum-alevel",
        topic_name="Krebs cycle",
        subject_name="Biology",
        curriculum_name="A-Level",
    )


@pytest.fixture
def sm2_settings() -> UserSRSettingsDTO:
    return UserSRSettingsDTO(user_id="user-1", review_mode=ReviewMode.SM2)


@pytest.fixture
def pattern_settings() -> UserSRSettingsDTO:
    return UserSRSettingsDTO(
        user_id="user-1",
        review_mode=ReviewMode.CUSTOM,
        selected_pattern_id="standard",
    )

