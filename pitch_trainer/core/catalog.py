"""Selectable note range for target pickers."""

from typing import List

from .constants import CATALOG_END, CATALOG_START
from .note import Note, note_to_midi


def get_available_notes(start: str = CATALOG_START, end: str = CATALOG_END) -> List[Note]:
    """
    List every chromatic note from start to end inclusive, ascending.

    The default range C2-C6 covers most vocal ranges (49 notes).

    Raises:
        NoteParseError: If start or end is not a valid note name
        ValueError: If end is below start
    """
    first = note_to_midi(start)
    last = note_to_midi(end)
    if last < first:
        raise ValueError(f"Catalog end {end} is below start {start}")

    return [Note.from_midi(midi) for midi in range(first, last + 1)]
