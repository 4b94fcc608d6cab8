"""Analysis layer - pitch estimation and pitch comparison.

- Fundamental frequency detection (autocorrelation)
- Cents deviation and on/off-pitch feedback
"""

from .pitch import PitchDetector, DetectorConfig, detect_pitch
from .cents import PitchFeedback, cents_difference, classify_cents

__all__ = [
    "PitchDetector",
    "DetectorConfig",
    "detect_pitch",
    "PitchFeedback",
    "cents_difference",
    "classify_cents",
]
