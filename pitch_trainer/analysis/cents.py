"""Cents deviation and on-pitch feedback."""

import math
from enum import Enum
from typing import Optional

from ..core.constants import CENTS_PER_OCTAVE, ON_PITCH_TOLERANCE_CENTS


class PitchFeedback(Enum):
    """How a detected pitch compares to its target."""

    ON_PITCH = "on_pitch"
    SHARP = "sharp"  # too high
    FLAT = "flat"  # too low
    NO_PITCH = "no_pitch"


def cents_difference(detected: Optional[float], target: Optional[float]) -> float:
    """
    Interval from target to detected in cents.

    Positive = sharp (too high), negative = flat (too low).
    Returns 0.0 when either frequency is missing or non-positive, so callers
    can pass a placeholder target before one is chosen.
    """
    if detected is None or target is None or detected <= 0 or target <= 0:
        return 0.0
    return CENTS_PER_OCTAVE * math.log2(detected / target)


def classify_cents(
    cents: Optional[float],
    tolerance: float = ON_PITCH_TOLERANCE_CENTS,
) -> PitchFeedback:
    """Map a cents deviation to feedback; within +/- tolerance is on pitch."""
    if cents is None:
        return PitchFeedback.NO_PITCH
    if abs(cents) <= tolerance:
        return PitchFeedback.ON_PITCH
    return PitchFeedback.SHARP if cents > 0 else PitchFeedback.FLAT
