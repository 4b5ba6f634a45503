"""Review quality grades for study_srs.

SM-2 items are graded on a 0-5 ordinal scale after the learner
reveals the answer.
"""

from enum import IntEnum

__all__ = [
    "CORRECT_THRESHOLD",
    "ReviewQuality",
]

CORRECT_THRESHOLD = 3


class ReviewQuality(IntEnum):
    """SM-2 quality grade."""

    BLACKOUT = 0
    """Complete blackout, no recall"""

    INCORRECT = 1
    """Incorrect response, but remembered upon seeing the answer"""

    HARD = 2
    """Incorrect response, but the answer felt familiar"""

    DIFFICULT = 3
    """Correct response with significant difficulty"""

    GOOD = 4
    """Correct response after some hesitation"""

    PERFECT = 5
    """Perfect response with no hesitation"""

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_correct(self) -> bool:
        return self >= CORRECT_THRESHOLD


_LABELS: dict[ReviewQuality, str] = {
    ReviewQuality.BLACKOUT: "Complete blackout",
    ReviewQuality.INCORRECT: "Incorrect",
    ReviewQuality.HARD: "Hard",
    ReviewQuality.DIFFICULT: "Difficult",
    ReviewQuality.GOOD: "Good",
    ReviewQuality.PERFECT: "Perfect",
}
