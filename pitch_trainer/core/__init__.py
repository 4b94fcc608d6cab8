"""Core types and constants for Pitch Trainer."""

from .note import (
    Note,
    NoteParseError,
    note_to_frequency,
    note_to_midi,
    frequency_to_note,
    midi_to_frequency,
    midi_to_note_name,
)
from .catalog import get_available_notes
from .scale import scale_degree_to_frequency, degree_label
from .constants import (
    PITCH_NAMES,
    A4_FREQUENCY,
    A4_MIDI,
    DEFAULT_SR,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_TARGET_NOTE,
)

__all__ = [
    "Note",
    "NoteParseError",
    "note_to_frequency",
    "note_to_midi",
    "frequency_to_note",
    "midi_to_frequency",
    "midi_to_note_name",
    "get_available_notes",
    "scale_degree_to_frequency",
    "degree_label",
    "PITCH_NAMES",
    "A4_FREQUENCY",
    "A4_MIDI",
    "DEFAULT_SR",
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_TARGET_NOTE",
]
