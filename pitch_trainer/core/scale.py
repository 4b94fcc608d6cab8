"""Major-scale degrees relative to a root note."""

from .constants import SEMITONES_PER_OCTAVE

# Semitone offsets of the major scale degrees 1-7
MAJOR_SCALE = [0, 2, 4, 5, 7, 9, 11]


def degree_to_semitones(degree: int, sharp: bool = False, octave_offset: int = 0) -> int:
    """
    Semitone distance of a scale degree above the root.

    Degrees are 1-based; 8 is the octave above the root, 9 the second
    above the octave, and so on.
    """
    if degree < 1:
        raise ValueError(f"Scale degree must be >= 1, got {degree}")

    octaves, step = divmod(degree - 1, len(MAJOR_SCALE))
    semitones = MAJOR_SCALE[step] + (octaves + octave_offset) * SEMITONES_PER_OCTAVE
    if sharp:
        semitones += 1
    return semitones


def scale_degree_to_frequency(
    degree: int,
    root_frequency: float,
    sharp: bool = False,
    octave_offset: int = 0,
) -> float:
    """
    Frequency of a major-scale degree above a root.

    Args:
        degree: 1-based scale degree
        root_frequency: Frequency of degree 1 in Hz
        sharp: Raise the degree by a semitone
        octave_offset: Shift by whole octaves (+1 up, -1 down)

    Returns:
        Frequency in Hz
    """
    if root_frequency <= 0:
        raise ValueError(f"Root frequency must be positive, got {root_frequency}")

    semitones = degree_to_semitones(degree, sharp, octave_offset)
    return root_frequency * (2 ** (semitones / SEMITONES_PER_OCTAVE))


def degree_label(degree: int, sharp: bool = False, octave_offset: int = 0) -> str:
    """Display label for a degree, e.g. '#4', '5↑', '1↓'."""
    label = f"#{degree}" if sharp else str(degree)
    if octave_offset > 0:
        label += "↑" * octave_offset
    elif octave_offset < 0:
        label += "↓" * -octave_offset
    return label
