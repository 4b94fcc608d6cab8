"""Tests for the note catalog and scale degrees."""

import pytest

from pitch_trainer.core import (
    NoteParseError,
    degree_label,
    get_available_notes,
    note_to_frequency,
    scale_degree_to_frequency,
)
from pitch_trainer.core.constants import DEFAULT_TARGET_NOTE


class TestAvailableNotes:

    def test_default_range(self):
        notes = get_available_notes()
        assert len(notes) == 49
        assert notes[0].name == "C2"
        assert notes[-1].name == "C6"

    def test_ascending(self):
        notes = get_available_notes()
        assert all(a.frequency < b.frequency for a, b in zip(notes, notes[1:]))
        assert all(b.midi - a.midi == 1 for a, b in zip(notes, notes[1:]))

    def test_excludes_above_c6(self):
        names = [n.name for n in get_available_notes()]
        assert "C#6" not in names
        assert "B5" in names

    def test_frequencies_match_converter(self):
        for note in get_available_notes():
            assert note.frequency == note_to_frequency(note.name)

    def test_default_target_in_catalog(self):
        assert DEFAULT_TARGET_NOTE in [n.name for n in get_available_notes()]

    def test_custom_range(self):
        notes = get_available_notes("A3", "A4")
        assert [n.name for n in notes][0] == "A3"
        assert len(notes) == 13

    def test_single_note_range(self):
        assert [n.name for n in get_available_notes("E4", "E4")] == ["E4"]

    def test_reversed_range_rejected(self):
        with pytest.raises(ValueError):
            get_available_notes("C6", "C2")

    def test_bad_name_rejected(self):
        with pytest.raises(NoteParseError):
            get_available_notes("X2", "C6")


class TestScaleDegrees:

    @pytest.fixture
    def c4(self):
        return note_to_frequency("C4")

    def test_root(self, c4):
        assert scale_degree_to_frequency(1, c4) == pytest.approx(c4)

    def test_major_degrees(self, c4):
        assert scale_degree_to_frequency(3, c4) == pytest.approx(note_to_frequency("E4"))
        assert scale_degree_to_frequency(5, c4) == pytest.approx(note_to_frequency("G4"))
        assert scale_degree_to_frequency(7, c4) == pytest.approx(note_to_frequency("B4"))

    def test_octave_and_beyond(self, c4):
        assert scale_degree_to_frequency(8, c4) == pytest.approx(2 * c4)
        assert scale_degree_to_frequency(10, c4) == pytest.approx(note_to_frequency("E5"))

    def test_sharp(self, c4):
        assert scale_degree_to_frequency(4, c4, sharp=True) == pytest.approx(note_to_frequency("F#4"))

    def test_octave_offset(self, c4):
        assert scale_degree_to_frequency(5, c4, octave_offset=-1) == pytest.approx(note_to_frequency("G3"))
        assert scale_degree_to_frequency(1, c4, octave_offset=1) == pytest.approx(2 * c4)

    def test_invalid_degree(self, c4):
        with pytest.raises(ValueError):
            scale_degree_to_frequency(0, c4)

    def test_invalid_root(self):
        with pytest.raises(ValueError):
            scale_degree_to_frequency(1, 0.0)

    def test_labels(self):
        assert degree_label(1) == "1"
        assert degree_label(4, sharp=True) == "#4"
        assert degree_label(5, octave_offset=1) == "5↑"
        assert degree_label(1, octave_offset=-1) == "1↓"
