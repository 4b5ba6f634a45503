"""Integration tests for full review cycles."""

import json
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from study_srs.config import SchedulingDefaults, StudySRSConfig
from study_srs.domain.modes import ReviewMode
from study_srs.models.item import ReviewItemDTO, TopicRef
from study_srs.models.settings import UserSRSettingsDTO
from study_srs.orchestrator import StudyReviews
from study_srs.services.formatting import format_interval
from study_srs.services.selector import calculate_statistics, due_items
from tests.conftest import NOW
from tests.mocks.mock_storage import InMemoryReviewStorage

# Path to fixtures
FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class SteppingClock:
    """Clock the test moves forward by hand."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int) -> None:
        self.now += timedelta(days=days)


def _study_reviews(
    defaults: SchedulingDefaults,
    clock: SteppingClock,
    settings: UserSRSettingsDTO,
) -> StudyReviews:
    return StudyReviews(
        InMemoryReviewStorage,
        storage_custom_config={"settings": [settings]},
        config=StudySRSConfig(scheduling=defaults),
        clock=clock,
    )


class TestSM2Lifecycle:
    """An SM-2 item reviewed on each due date."""

    @pytest.mark.asyncio
    async def test_grades_drive_intervals(
        self, defaults: SchedulingDefaults, sample_topic: TopicRef
    ) -> None:
        clock = SteppingClock(NOW)
        settings = UserSRSettingsDTO(user_id="user-1", review_mode=ReviewMode.SM2)

        intervals: list[int] = []
        ease_factors: list[float] = []
        async with _study_reviews(defaults, clock, settings) as sr:
            item = await sr.add_topic("user-1", sample_topic)
            assert item.interval == 1

            for quality in (4, 4, 5, 2, 4, 4, 3):
                clock.advance(item.interval)
                assert [due.item_id for due in await sr.get_due_items("user-1")] == [
                    item.item_id
                ]
                outcome = await sr.submit_review("user-1", item.item_id, quality=quality)
                item = outcome.item
                intervals.append(outcome.interval)
                ease_factors.append(item.ease_factor)

            stats = await sr.get_statistics("user-1")

        assert intervals == [1, 6, 16, 1, 1, 6, 13]
        assert ease_factors == pytest.approx([2.5, 2.5, 2.6, 2.28, 2.28, 2.28, 2.14])
        assert item.repetitions == 3
        assert item.total_reviews == 7
        assert item.correct_reviews == 6
        assert stats.average_retention == 86
        assert stats.due_today == 0
        assert format_interval(item.interval) == "1 week"


class TestPatternLifecycle:
    """A fixed-pattern item walked through the standard pattern."""

    @pytest.mark.asyncio
    async def test_walk_with_forget(
        self, defaults: SchedulingDefaults, sample_topic: TopicRef
    ) -> None:
        clock = SteppingClock(NOW)
        settings = UserSRSettingsDTO(user_id="user-1", selected_pattern_id="standard")

        steps: list[tuple[int, int]] = []
        async with _study_reviews(defaults, clock, settings) as sr:
            item = await sr.add_topic("user-1", sample_topic)

            for remembered in (True, True, True, False, True):
                clock.advance(item.interval)
                outcome = await sr.submit_review("user-1", item.item_id, remembered=remembered)
                item = outcome.item
                steps.append((item.current_step, outcome.interval))

        assert steps == [(1, 4), (2, 7), (3, 14), (0, 1), (1, 4)]
        assert item.total_reviews == 5
        assert item.correct_reviews == 4

    @pytest.mark.asyncio
    async def test_last_step_repeats(
        self, defaults: SchedulingDefaults, sample_topic: TopicRef
    ) -> None:
        clock = SteppingClock(NOW)
        settings = UserSRSettingsDTO(user_id="user-1", selected_pattern_id="exam-prep")

        async with _study_reviews(defaults, clock, settings) as sr:
            item = await sr.add_topic("user-1", sample_topic)
            for _ in range(9):
                clock.advance(item.interval)
                item = (await sr.submit_review("user-1", item.item_id, remembered=True)).item

        assert item.current_step == 6
        assert item.interval == 14

    @pytest.mark.asyncio
    async def test_settings_change_does_not_touch_existing_items(
        self, defaults: SchedulingDefaults, sample_topic: TopicRef
    ) -> None:
        clock = SteppingClock(NOW)
        settings = UserSRSettingsDTO(user_id="user-1", selected_pattern_id="weekly")

        async with _study_reviews(defaults, clock, settings) as sr:
            item = await sr.add_topic("user-1", sample_topic)
            await sr.update_settings(settings.model_copy(update={"review_mode": ReviewMode.SM2}))
            clock.advance(item.interval)
            outcome = await sr.submit_review("user-1", item.item_id, remembered=True)

        assert outcome.item.review_mode == ReviewMode.CUSTOM
        assert outcome.interval == 14


class TestExportedQueue:
    """A stored queue loaded from an exported fixture."""

    def test_fixture_queue(self, defaults: SchedulingDefaults) -> None:
        documents = json.loads((FIXTURES_DIR / "review_items.json").read_text())
        items = [ReviewItemDTO.model_validate(doc) for doc in documents]

        due = due_items(items, now=NOW, defaults=defaults)
        stats = calculate_statistics(items, now=NOW, defaults=defaults)

        assert [item.topic_name for item in due] == ["Photosynthesis", "Krebs cycle"]
        assert stats.total_items == 4
        assert stats.active_items == 3
        assert stats.due_today == 2
        assert stats.due_this_week == 3
        assert stats.average_retention == 75
