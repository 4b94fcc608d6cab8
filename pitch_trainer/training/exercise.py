"""Melody exercise: sing a short sequence of scale degrees in time.

A MelodyExercise turns (root note, tempo, scale degrees) into target
frequencies, one per beat. Detected frequencies are recorded against the
note whose beat they fall in, and each note is scored by the mean cents
deviation of its samples.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from ..analysis import PitchFeedback, cents_difference, classify_cents
from ..core import Note, degree_label, scale_degree_to_frequency
from ..core.constants import DEFAULT_ROOT_NOTE, DEFAULT_TEMPO, ON_PITCH_TOLERANCE_CENTS


@dataclass
class ExerciseNote:
    """One note of the exercise, as a scale degree of the root."""

    degree: int = 1
    sharp: bool = False
    octave_offset: int = 0  # +1 up, -1 down

    @property
    def label(self) -> str:
        return degree_label(self.degree, self.sharp, self.octave_offset)


@dataclass
class NoteResult:
    """Score for one exercise note."""

    index: int
    label: str
    target_frequency: float
    samples: int
    mean_cents: Optional[float]  # None if nothing was sung
    feedback: PitchFeedback


def _default_notes() -> List[ExerciseNote]:
    return [ExerciseNote(degree) for degree in (1, 3, 5, 8)]


@dataclass
class MelodyExercise:
    """Configuration and recorded samples of one exercise attempt."""

    root: str = DEFAULT_ROOT_NOTE
    tempo: float = DEFAULT_TEMPO  # BPM, one note per beat
    notes: List[ExerciseNote] = field(default_factory=_default_notes)
    tolerance_cents: float = ON_PITCH_TOLERANCE_CENTS

    def __post_init__(self):
        if self.tempo <= 0:
            raise ValueError(f"Tempo must be positive, got {self.tempo}")
        if not self.notes:
            raise ValueError("Exercise needs at least one note")

        self.root_note = Note.from_name(self.root)
        self._targets = [
            scale_degree_to_frequency(
                note.degree, self.root_note.frequency, note.sharp, note.octave_offset
            )
            for note in self.notes
        ]
        self._samples: List[List[float]] = [[] for _ in self.notes]

    @property
    def beat_duration(self) -> float:
        """Seconds per note."""
        return 60.0 / self.tempo

    @property
    def total_duration(self) -> float:
        return self.beat_duration * len(self.notes)

    def target_frequencies(self) -> List[float]:
        return list(self._targets)

    def labels(self) -> List[str]:
        return [note.label for note in self.notes]

    def note_index_at(self, elapsed: float) -> Optional[int]:
        """Index of the note being sung at elapsed seconds, or None outside."""
        if elapsed < 0:
            return None
        index = int(elapsed // self.beat_duration)
        return index if index < len(self.notes) else None

    def record(self, frequency: Optional[float], elapsed: float) -> Optional[float]:
        """
        Store a detected frequency for the note sung at elapsed seconds.

        Returns:
            Cents from that note's target, or None if nothing was stored
        """
        index = self.note_index_at(elapsed)
        if frequency is None or index is None:
            return None

        self._samples[index].append(frequency)
        return cents_difference(frequency, self._targets[index])

    def record_all(self, frequencies: Sequence[Optional[float]], times: Sequence[float]) -> None:
        for frequency, elapsed in zip(frequencies, times):
            self.record(frequency, elapsed)

    def results(self) -> List[NoteResult]:
        results = []
        for index, (note, target, samples) in enumerate(
            zip(self.notes, self._targets, self._samples)
        ):
            if samples:
                mean_cents = float(
                    np.mean([cents_difference(f, target) for f in samples])
                )
            else:
                mean_cents = None

            results.append(
                NoteResult(
                    index=index,
                    label=note.label,
                    target_frequency=target,
                    samples=len(samples),
                    mean_cents=mean_cents,
                    feedback=classify_cents(mean_cents, self.tolerance_cents),
                )
            )
        return results

    def all_on_pitch(self) -> bool:
        """True when every note was sung and averaged within tolerance."""
        return all(r.feedback == PitchFeedback.ON_PITCH for r in self.results())

    def reset(self) -> None:
        """Drop recorded samples for a new attempt."""
        self._samples = [[] for _ in self.notes]
