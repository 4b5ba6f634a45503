"""Unit tests for reminder preparation."""

from collections.abc import Callable
from datetime import timedelta

import pytest

from study_srs.config import SchedulingDefaults
from study_srs.domain.modes import ItemStatus
from study_srs.models.item import ReviewItemDTO
from study_srs.models.settings import UserSRSettingsDTO
from study_srs.services.reminders import (
    build_reminder_digest,
    group_by_curriculum,
    is_reminder_due,
    select_reminder_items,
)
from tests.conftest import NOW, days_from_today

ItemFactory = Callable[..., ReviewItemDTO]

SATURDAY = NOW + timedelta(days=3)


@pytest.fixture
def settings() -> UserSRSettingsDTO:
    return UserSRSettingsDTO(user_id="user-1", reminder_time="14:00")


class TestIsReminderDue:
    """Tests for is_reminder_due."""

    def test_due_at_reminder_hour(
        self, settings: UserSRSettingsDTO, defaults: SchedulingDefaults
    ) -> None:
        assert is_reminder_due(settings, NOW, defaults) is True

    def test_disabled(self, settings: UserSRSettingsDTO, defaults: SchedulingDefaults) -> None:
        disabled = settings.model_copy(update={"email_reminders_enabled": False})

        assert is_reminder_due(disabled, NOW, defaults) is False

    @pytest.mark.parametrize(
        ("reminder_time", "expected"),
        [("13:00", True), ("15:30", True), ("12:00", False), ("16:00", False)],
    )
    def test_hour_tolerance(
        self,
        reminder_time: str,
        expected: bool,
        defaults: SchedulingDefaults,
    ) -> None:
        settings = UserSRSettingsDTO(user_id="user-1", reminder_time=reminder_time)

        assert is_reminder_due(settings, NOW, defaults) is expected

    def test_weekend_skipped_when_disabled(
        self, settings: UserSRSettingsDTO, defaults: SchedulingDefaults
    ) -> None:
        weekdays_only = settings.model_copy(update={"weekend_reminders": False})

        assert SATURDAY.weekday() == 5
        assert is_reminder_due(weekdays_only, SATURDAY, defaults) is False
        assert is_reminder_due(settings, SATURDAY, defaults) is True

    def test_unknown_timezone_falls_back_to_utc(
        self, settings: UserSRSettingsDTO, defaults: SchedulingDefaults
    ) -> None:
        broken = settings.model_copy(update={"timezone": "Mars/Olympus_Mons"})

        assert is_reminder_due(broken, NOW, defaults) is True


class TestSelectReminderItems:
    """Tests for select_reminder_items."""

    def test_selects_due_unreminded_active(
        self,
        make_item: ItemFactory,
        settings: UserSRSettingsDTO,
        defaults: SchedulingDefaults,
    ) -> None:
        items = [
            make_item(item_id="today", next_review_date=days_from_today(0)),
            make_item(item_id="overdue", next_review_date=days_from_today(-2)),
            make_item(item_id="tomorrow", next_review_date=days_from_today(1)),
            make_item(item_id="sent", email_reminder_sent=True),
            make_item(item_id="paused", status=ItemStatus.PAUSED),
        ]

        result = select_reminder_items(items, settings, NOW, defaults=defaults)

        assert [item.item_id for item in result] == ["overdue", "today"]

    def test_days_before_widens_window(
        self,
        make_item: ItemFactory,
        settings: UserSRSettingsDTO,
        defaults: SchedulingDefaults,
    ) -> None:
        early = settings.model_copy(update={"reminder_days_before": 1})
        items = [
            make_item(item_id="tomorrow", next_review_date=days_from_today(1)),
            make_item(item_id="in-2", next_review_date=days_from_today(2)),
        ]

        result = select_reminder_items(items, early, NOW, defaults=defaults)

        assert [item.item_id for item in result] == ["tomorrow"]

    def test_limit(
        self,
        make_item: ItemFactory,
        settings: UserSRSettingsDTO,
        defaults: SchedulingDefaults,
    ) -> None:
        items = [make_item() for _ in range(4)]

        assert len(select_reminder_items(items, settings, NOW, limit=2, defaults=defaults)) == 2


class TestDigest:
    """Tests for build_reminder_digest and group_by_curriculum."""

    def test_group_by_curriculum(self, make_item: ItemFactory) -> None:
        items = [
            make_item(item_id="a", curriculum_name="GCSE"),
            make_item(item_id="b", curriculum_name=None),
            make_item(item_id="c", curriculum_name="GCSE"),
        ]

        groups = group_by_curriculum(items)

        assert list(groups) == ["GCSE", "Uncategorized"]
        assert [item.item_id for item in groups["GCSE"]] == ["a", "c"]

    def test_due_digest(self, make_item: ItemFactory) -> None:
        due = [
            make_item(item_id="a", topic_name="Krebs cycle"),
            make_item(item_id="b", topic_name="Osmosis", subject_name=None),
        ]
        upcoming = [make_item(item_id="c", topic_name="Mitosis")]

        digest = build_reminder_digest("Sam", due, upcoming)

        assert digest.subject == "You have 2 topics to review today!"
        assert digest.due_item_ids == ["a", "b"]
        assert digest.due_count == 2
        assert digest.upcoming_count == 1
        assert digest.text.startswith("Hi Sam!")
        assert "You have 1 topic coming up for review this week." in digest.text
        assert "A-Level:" in digest.text
        assert "  - Krebs cycle (Biology)" in digest.text
        assert "  - Osmosis\n" in digest.text
        assert "Upcoming reviews:" in digest.text
        assert digest.text.endswith("Happy studying!")

    def test_upcoming_only_digest(self, make_item: ItemFactory) -> None:
        digest = build_reminder_digest("Sam", [], [make_item()])

        assert digest.subject == "1 topic coming up for review"
        assert "Topics due:" not in digest.text

    def test_upcoming_section_is_capped(self, make_item: ItemFactory) -> None:
        upcoming = [
            make_item(topic_name=f"Topic {n}", curriculum_name=f"C{n % 3}") for n in range(12)
        ]

        digest = build_reminder_digest(
            "Sam", [], upcoming, max_upcoming_groups=2, max_upcoming_per_group=1
        )

        assert "C0:" in digest.text
        assert "C1:" in digest.text
        assert "C2:" not in digest.text
        assert digest.text.count("  - ") == 2
        assert digest.upcoming_count == 12
