"""Per-item scheduling state for study_srs.

A review item carries either SM-2 state or fixed-pattern state, selected
by its review mode. ``SchedulingState`` is the tagged union of the two;
``ReviewService`` dispatches on it in exactly one place.
"""

from dataclasses import dataclass
from typing import Literal

from study_srs.domain.modes import ReviewMode

__all__ = [
    "PatternState",
    "SM2State",
    "SchedulingState",
]


@dataclass(frozen=True)
class SM2State:
    """Scheduling state of an SM-2 item."""

    ease_factor: float
    interval: int
    repetitions: int
    mode: Literal[ReviewMode.SM2] = ReviewMode.SM2


@dataclass(frozen=True)
class PatternState:
    """Scheduling state of a fixed-pattern item.

    ``pattern_id`` and ``custom_intervals`` may be None on items created
    before the user picked a pattern; the user's settings fill them in.
    """

    pattern_id: str | None
    custom_intervals: str | None
    current_step: int
    mode: Literal[ReviewMode.CUSTOM] = ReviewMode.CUSTOM


SchedulingState = SM2State | PatternState
