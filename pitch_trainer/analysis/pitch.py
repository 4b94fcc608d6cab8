"""Fundamental frequency estimation for monophonic voice.

Pipeline per analysis window:
    1. RMS gate (reject quiet buffers)
    2. Raw autocorrelation over all lags
    3. Coarse period = strongest lag inside the voice period window
    4. Parabolic interpolation for sub-sample lag precision
    5. Range check on the resulting frequency

Every rejection returns None ("no pitch"); no value is ever guessed or
clamped to the range boundary.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.constants import (
    DEFAULT_MAX_FREQUENCY,
    DEFAULT_MIN_FREQUENCY,
    DEFAULT_SILENCE_THRESHOLD,
)


@dataclass
class DetectorConfig:
    """Configuration for PitchDetector.

    Attributes:
        silence_threshold: RMS at or below which a buffer is silent (default: 0.01)
        min_frequency: Lowest accepted fundamental in Hz (default: 60)
        max_frequency: Highest accepted fundamental in Hz (default: 1000)
    """

    silence_threshold: float = DEFAULT_SILENCE_THRESHOLD
    min_frequency: float = DEFAULT_MIN_FREQUENCY
    max_frequency: float = DEFAULT_MAX_FREQUENCY


def autocorrelate(audio: np.ndarray) -> np.ndarray:
    """
    Raw (unnormalized) autocorrelation for lags 0..N-1.

    r[lag] = sum(x[i] * x[i + lag] for i in range(N - lag))
    """
    n = len(audio)
    return np.correlate(audio, audio, mode="full")[n - 1:]


def parabolic_vertex(values: np.ndarray, index: int) -> float:
    """
    Sub-sample peak position from a parabola through three neighbours.

    Returns index unchanged at the array edges or when the three points
    are collinear.
    """
    if index <= 0 or index >= len(values) - 1:
        return float(index)

    y1, y2, y3 = values[index - 1], values[index], values[index + 1]
    a = (y1 + y3 - 2 * y2) / 2
    b = (y3 - y1) / 2
    if a == 0:
        return float(index)
    return index - b / (2 * a)


class PitchDetector:
    """Autocorrelation pitch detector for a single dominant voice."""

    def __init__(
        self,
        silence_threshold: float = DEFAULT_SILENCE_THRESHOLD,
        min_frequency: float = DEFAULT_MIN_FREQUENCY,
        max_frequency: float = DEFAULT_MAX_FREQUENCY,
    ):
        """
        Initialize PitchDetector.

        Args:
            silence_threshold: RMS at or below which no pitch is reported
            min_frequency: Lowest accepted fundamental (Hz)
            max_frequency: Highest accepted fundamental (Hz)
        """
        if silence_threshold < 0:
            raise ValueError(f"silence_threshold must be >= 0, got {silence_threshold}")
        if not 0 < min_frequency < max_frequency:
            raise ValueError(
                f"Need 0 < min_frequency < max_frequency, "
                f"got {min_frequency} and {max_frequency}"
            )

        self.silence_threshold = silence_threshold
        self.min_frequency = min_frequency
        self.max_frequency = max_frequency

    @classmethod
    def from_config(cls, config: DetectorConfig) -> "PitchDetector":
        return cls(
            silence_threshold=config.silence_threshold,
            min_frequency=config.min_frequency,
            max_frequency=config.max_frequency,
        )

    def period_range(self, sr: float):
        """(min_period, max_period) in samples for a sample rate."""
        return int(sr // self.max_frequency), int(sr // self.min_frequency)

    def detect(self, audio, sr: float) -> Optional[float]:
        """
        Estimate the fundamental frequency of one analysis window.

        Args:
            audio: Mono samples in [-1, 1]
            sr: Sample rate in Hz

        Returns:
            Frequency in Hz, or None if there is no trustworthy pitch
        """
        if sr <= 0:
            raise ValueError(f"Sample rate must be positive, got {sr}")

        audio = np.asarray(audio, dtype=np.float64)
        if audio.ndim != 1:
            raise ValueError(f"Expected a 1-D buffer, got shape {audio.shape}")

        n = len(audio)
        if n == 0 or not np.all(np.isfinite(audio)):
            return None

        # Too quiet to trust
        rms = float(np.sqrt(np.mean(audio**2)))
        if rms <= self.silence_threshold:
            return None

        correlations = autocorrelate(audio)
        min_period, max_period = self.period_range(sr)

        # No decline after lag 0: DC, clipping or no short-lag structure
        head = correlations[:min_period]
        steps = np.diff(head)
        if not np.any(steps < 0):
            return None

        last_lag = min(max_period, n - 1)
        if min_period > last_lag:
            return None

        peak_lag = min_period + int(np.argmax(correlations[min_period:last_lag + 1]))
        peak_value = correlations[peak_lag]

        # Climbing back to the peak value before min_period means the fundamental
        # is above max_frequency and peak_lag is only a multiple of its period.
        below = np.nonzero(head < peak_value)[0]
        if below.size > 0 and head[below[0]:].max() >= peak_value:
            return None

        refined_lag = parabolic_vertex(correlations, peak_lag)
        if refined_lag <= 0:
            return None

        frequency = sr / refined_lag
        if frequency < self.min_frequency or frequency > self.max_frequency:
            return None

        return float(frequency)


def detect_pitch(audio, sr: float, **kwargs) -> Optional[float]:
    """Detect pitch with a one-off PitchDetector (kwargs go to its constructor)."""
    return PitchDetector(**kwargs).detect(audio, sr)
