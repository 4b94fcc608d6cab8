"""Pitch Trainer - Live pitch detection for vocal training.

Architecture Layers:
    1. core/      - Notes, equal-temperament conversions, catalog, scale degrees
    2. analysis/  - Fundamental frequency detection, cents and feedback
    3. input/     - Recording loading and framing
    4. training/  - Session objects (single-note monitor, melody exercise)
"""

__version__ = "0.1.0"

# Core types
from .core import (
    Note,
    NoteParseError,
    note_to_frequency,
    frequency_to_note,
    get_available_notes,
    scale_degree_to_frequency,
)

# Analysis layer
from .analysis import (
    PitchDetector,
    DetectorConfig,
    detect_pitch,
    PitchFeedback,
    cents_difference,
    classify_cents,
)

# Input layer
from .input import AudioLoader

# Training layer
from .training import PitchMonitor, PitchReading, MelodyExercise, ExerciseNote

__all__ = [
    # Core
    "Note",
    "NoteParseError",
    "note_to_frequency",
    "frequency_to_note",
    "get_available_notes",
    "scale_degree_to_frequency",
    # Analysis
    "PitchDetector",
    "DetectorConfig",
    "detect_pitch",
    "PitchFeedback",
    "cents_difference",
    "classify_cents",
    # Input
    "AudioLoader",
    # Training
    "PitchMonitor",
    "PitchReading",
    "MelodyExercise",
    "ExerciseNote",
]
