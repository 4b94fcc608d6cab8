"""Training layer - session objects driven by a capture or file loop.

- PitchMonitor: per-buffer feedback against a single target note
- MelodyExercise: timed scale-degree sequence scored per note
"""

from .monitor import PitchMonitor, PitchReading
from .exercise import MelodyExercise, ExerciseNote, NoteResult

__all__ = [
    "PitchMonitor",
    "PitchReading",
    "MelodyExercise",
    "ExerciseNote",
    "NoteResult",
]
