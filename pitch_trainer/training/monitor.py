"""Live pitch monitoring against a target note."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import numpy as np

from ..analysis import PitchDetector, PitchFeedback, cents_difference, classify_cents
from ..core import Note, frequency_to_note
from ..core.constants import DEFAULT_HOP_LENGTH, DEFAULT_TARGET_NOTE, ON_PITCH_TOLERANCE_CENTS


@dataclass
class PitchReading:
    """Result of analysing one buffer."""

    frequency: Optional[float]  # None = no pitch
    note: Optional[Note]  # Nearest note to the detected frequency
    cents: Optional[float]  # Deviation from the target
    feedback: PitchFeedback
    time: float = 0.0  # Buffer start in seconds

    @property
    def has_pitch(self) -> bool:
        return self.frequency is not None


class PitchMonitor:
    """
    Session object for a driving loop (capture callback, timer, file reader).

    Holds the target note and detector settings; every buffer is analysed
    independently by the stateless detector.
    """

    def __init__(
        self,
        target: str = DEFAULT_TARGET_NOTE,
        detector: Optional[PitchDetector] = None,
        tolerance_cents: float = ON_PITCH_TOLERANCE_CENTS,
    ):
        self.detector = detector or PitchDetector()
        self.tolerance_cents = tolerance_cents
        self.set_target(target)

    def set_target(self, name: str) -> None:
        """Change the target note (raises NoteParseError on bad names)."""
        self.target = Note.from_name(name)

    def process(self, audio: np.ndarray, sr: int, time: float = 0.0) -> PitchReading:
        """Analyse one buffer and compare it to the target."""
        frequency = self.detector.detect(audio, sr)
        if frequency is None:
            return PitchReading(
                frequency=None,
                note=None,
                cents=None,
                feedback=PitchFeedback.NO_PITCH,
                time=time,
            )

        cents = cents_difference(frequency, self.target.frequency)
        return PitchReading(
            frequency=frequency,
            note=frequency_to_note(frequency),
            cents=cents,
            feedback=classify_cents(cents, self.tolerance_cents),
            time=time,
        )

    def run(
        self,
        frames: Iterable[np.ndarray],
        sr: int,
        hop_length: int = DEFAULT_HOP_LENGTH,
    ) -> Iterator[PitchReading]:
        """Yield a reading per buffer; buffers are hop_length samples apart."""
        for index, frame in enumerate(frames):
            yield self.process(frame, sr, time=index * hop_length / sr)
