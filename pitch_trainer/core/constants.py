"""Global constants for Pitch Trainer."""

# Pitch names (sharps only)
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Tuning reference (12-tone equal temperament)
A4_FREQUENCY = 440.0
A4_MIDI = 69
SEMITONES_PER_OCTAVE = 12
CENTS_PER_OCTAVE = 1200.0

# Audio processing defaults
DEFAULT_SR = 44100
DEFAULT_BUFFER_SIZE = 2048
DEFAULT_HOP_LENGTH = 1024

# Pitch detection defaults (human voice)
DEFAULT_SILENCE_THRESHOLD = 0.01  # RMS
DEFAULT_MIN_FREQUENCY = 60.0  # Hz
DEFAULT_MAX_FREQUENCY = 1000.0  # Hz

# Feedback
ON_PITCH_TOLERANCE_CENTS = 10.0

# Note catalog range (covers most vocal ranges)
CATALOG_START = "C2"
CATALOG_END = "C6"
DEFAULT_TARGET_NOTE = "A3"

# Melody exercise defaults
DEFAULT_ROOT_NOTE = "C4"
DEFAULT_TEMPO = 60.0  # BPM, one note per beat
