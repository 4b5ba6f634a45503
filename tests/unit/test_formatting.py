"""Unit tests for display helpers."""

import pytest

from study_srs.domain.quality import ReviewQuality
from study_srs.errors import InvalidInputError
from study_srs.services.formatting import format_interval, quality_label


class TestFormatInterval:
    """Tests for format_interval."""

    @pytest.mark.parametrize(
        ("days", "expected"),
        [
            (0, "Today"),
            (1, "Tomorrow"),
            (2, "2 days"),
            (6, "6 days"),
            (7, "1 week"),
            (13, "1 week"),
            (14, "2 weeks"),
            (29, "4 weeks"),
            (30, "1 month"),
            (59, "1 month"),
            (60, "2 months"),
            (365, "12 months"),
        ],
    )
    def test_tiers(self, days: int, expected: str) -> None:
        assert format_interval(days) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            format_interval(-1)


class TestQualityLabel:
    """Tests for quality_label."""

    def test_labels(self) -> None:
        assert [quality_label(q) for q in range(6)] == [
            "Complete blackout",
            "Incorrect",
            "Hard",
            "Difficult",
            "Good",
            "Perfect",
        ]

    @pytest.mark.parametrize("quality", [-1, 6, 42])
    def test_unknown(self, quality: int) -> None:
        assert quality_label(quality) == "Unknown"

    def test_enum_properties(self) -> None:
        assert ReviewQuality.DIFFICULT.is_correct
        assert not ReviewQuality.HARD.is_correct
        assert ReviewQuality.PERFECT.label == "Perfect"
