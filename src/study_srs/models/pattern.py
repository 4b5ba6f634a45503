"""Review pattern catalog for study_srs.

Patterns are fixed sequences of day offsets stepped through on success
and restarted on failure. The catalog is static configuration.
"""

from pydantic import BaseModel, Field

from study_srs.domain.modes import CUSTOM_PATTERN_ID

__all__ = [
    "PRESET_PATTERNS",
    "ReviewPattern",
    "get_pattern",
]


class ReviewPattern(BaseModel, frozen=True):
    """Named interval sequence.

    Attributes:
        id: Pattern identifier stored on items
        name: Display name
        description: One-line description
        intervals: Positive day offsets; empty for the reserved "custom" pattern
    """

    id: str
    name: str
    description: str
    intervals: tuple[int, ...] = Field(default=())

    @property
    def is_custom(self) -> bool:
        return self.id == CUSTOM_PATTERN_ID


PRESET_PATTERNS: tuple[ReviewPattern, ...] = (
    ReviewPattern(
        id="standard",
        name="Standard (1-4-7-14-30)",
        description="Classic spaced repetition pattern",
        intervals=(1, 4, 7, 14, 30, 60, 120),
    ),
    ReviewPattern(
        id="aggressive",
        name="Aggressive (1-2-4-7-14)",
        description="More frequent reviews for difficult material",
        intervals=(1, 2, 4, 7, 14, 30, 60),
    ),
    ReviewPattern(
        id="relaxed",
        name="Relaxed (1-7-14-30-60)",
        description="Longer intervals for easier material",
        intervals=(1, 7, 14, 30, 60, 90, 180),
    ),
    ReviewPattern(
        id="exam-prep",
        name="Exam Prep (1-2-3-5-7)",
        description="Intensive review for upcoming exams",
        intervals=(1, 2, 3, 5, 7, 10, 14),
    ),
    ReviewPattern(
        id="weekly",
        name="Weekly (7-14-21-28)",
        description="Review once a week pattern",
        intervals=(7, 14, 21, 28, 35, 42, 56),
    ),
    ReviewPattern(
        id=CUSTOM_PATTERN_ID,
        name="Custom",
        description="Create your own pattern",
    ),
)

_BY_ID: dict[str, ReviewPattern] = {pattern.id: pattern for pattern in PRESET_PATTERNS}


def get_pattern(pattern_id: str | None) -> ReviewPattern | None:
    """Look up a catalog pattern by id."""
    if pattern_id is None:
        return None
    return _BY_ID.get(pattern_id)
