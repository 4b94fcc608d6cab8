"""Note data class and equal-temperament conversions."""

import math
import re
from dataclasses import dataclass

from .constants import A4_FREQUENCY, A4_MIDI, PITCH_NAMES, SEMITONES_PER_OCTAVE

# Letter, optional sharp, integer octave (e.g. 'C4', 'A#3', 'C-1')
_NOTE_PATTERN = re.compile(r"([A-G]#?)(-?\d+)", re.IGNORECASE | re.ASCII)


class NoteParseError(ValueError):
    """Raised when a string is not a valid note name."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Invalid note name: {name!r} (expected e.g. 'C4' or 'A#3')"
        )


@dataclass(frozen=True)
class Note:
    """A pitch on the equal-tempered chromatic scale."""

    name: str  # e.g. 'A4', 'C#3'
    frequency: float  # Hz
    midi: int  # MIDI note number

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return self.midi % SEMITONES_PER_OCTAVE

    @property
    def octave(self) -> int:
        return self.midi // SEMITONES_PER_OCTAVE - 1

    @classmethod
    def from_name(cls, name: str) -> "Note":
        """Build a Note from its name, e.g. Note.from_name('A4')."""
        midi = note_to_midi(name)
        return cls(
            name=midi_to_note_name(midi),
            frequency=midi_to_frequency(midi),
            midi=midi,
        )

    @classmethod
    def from_midi(cls, midi: int) -> "Note":
        midi = int(midi)
        return cls(
            name=midi_to_note_name(midi),
            frequency=midi_to_frequency(midi),
            midi=midi,
        )


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def note_to_midi(name: str) -> int:
    """
    Parse a note name into its MIDI number.

    Args:
        name: Note name such as 'C4', 'A#3' or 'c#2'

    Returns:
        MIDI note number (C4 = 60)

    Raises:
        NoteParseError: If the name does not match letter + optional '#' + octave
    """
    match = _NOTE_PATTERN.fullmatch(name) if isinstance(name, str) else None
    if match is None:
        raise NoteParseError(name)

    pitch = match.group(1).upper()
    # E# and B# are not in the sharps-only name table
    if pitch not in PITCH_NAMES:
        raise NoteParseError(name)

    octave = int(match.group(2))
    return (octave + 1) * SEMITONES_PER_OCTAVE + PITCH_NAMES.index(pitch)


def midi_to_frequency(midi: int) -> float:
    """Convert MIDI pitch to frequency (Hz)."""
    return A4_FREQUENCY * (2 ** ((midi - A4_MIDI) / SEMITONES_PER_OCTAVE))


def midi_to_note_name(midi: int) -> str:
    """Get note name (e.g., 'C4', 'A#3') for a MIDI pitch."""
    octave = (midi // SEMITONES_PER_OCTAVE) - 1
    return f"{PITCH_NAMES[midi % SEMITONES_PER_OCTAVE]}{octave}"


def note_to_frequency(name: str) -> float:
    """
    Convert a note name (e.g. 'C4', 'A#3') to its frequency in Hz.

    Raises:
        NoteParseError: If the name is malformed ('H3', 'C', 'Db4', ...)
    """
    return midi_to_frequency(note_to_midi(name))


def frequency_to_note(frequency: float) -> Note:
    """
    Find the nearest equal-tempered note to a frequency.

    The returned Note carries the exact frequency of that note, not the
    input frequency.

    Args:
        frequency: Frequency in Hz, must be positive and finite

    Returns:
        Nearest Note

    Raises:
        ValueError: If frequency is not a positive finite number
    """
    if not (frequency > 0) or not math.isfinite(frequency):
        raise ValueError(f"Frequency must be positive, got {frequency}")

    midi = _round_half_away_from_zero(
        SEMITONES_PER_OCTAVE * math.log2(frequency / A4_FREQUENCY) + A4_MIDI
    )
    return Note.from_midi(midi)
