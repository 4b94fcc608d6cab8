"""Synthetic signals and WAV files for testing."""

import os

import numpy as np
from scipy.io import wavfile


def generate_sine_wave(
    freq: float,
    duration: float = None,
    sr: int = 44100,
    amplitude: float = 0.5,
    n_samples: int = None,
) -> np.ndarray:
    """Generate a sine wave at given frequency (by duration or sample count)."""
    if n_samples is None:
        n_samples = int(sr * duration)
    t = np.arange(n_samples) / sr
    return (amplitude * np.sin(2 * np.pi * freq * t)).astype(np.float32)


def generate_voice_like(
    freq: float,
    n_samples: int = 2048,
    sr: int = 44100,
    amplitude: float = 0.5,
) -> np.ndarray:
    """Generate a harmonic tone with decaying overtones."""
    t = np.arange(n_samples) / sr
    harmonics = [(1, 1.0), (2, 0.5), (3, 0.3), (4, 0.15)]
    tone = sum(a * np.sin(2 * np.pi * freq * k * t) for k, a in harmonics)
    tone = tone / np.max(np.abs(tone)) * amplitude
    return tone.astype(np.float32)


def generate_note_sequence(
    frequencies: list, durations: list, sr: int = 44100, amplitude: float = 0.5
) -> np.ndarray:
    """Generate a sequence of notes."""
    audio = []
    for freq, dur in zip(frequencies, durations):
        note = generate_sine_wave(freq, dur, sr, amplitude)
        # Apply simple envelope to avoid clicks
        envelope = np.ones_like(note)
        attack = int(0.01 * sr)
        release = int(0.01 * sr)
        envelope[:attack] = np.linspace(0, 1, attack)
        envelope[-release:] = np.linspace(1, 0, release)
        audio.append(note * envelope)
    return np.concatenate(audio)


def save_wav(filepath, audio: np.ndarray, sr: int = 44100):
    """Save audio as 16-bit WAV file."""
    audio_16bit = (np.clip(audio, -1, 1) * 32767).astype(np.int16)
    wavfile.write(str(filepath), sr, audio_16bit)
    return filepath


def main():
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    os.makedirs(examples_dir, exist_ok=True)

    sr = 44100
    # Sustained A3 (220 Hz), 2 seconds
    save_wav(os.path.join(examples_dir, "sustained_a3.wav"), generate_sine_wave(220.0, 2.0, sr), sr)
    # C4 major arpeggio, one note per second (degrees 1 3 5 8 at 60 BPM)
    arpeggio = generate_note_sequence([261.63, 329.63, 392.00, 523.25], [1.0] * 4, sr)
    save_wav(os.path.join(examples_dir, "arpeggio_c4.wav"), arpeggio, sr)
    print(f"Created examples in {examples_dir}")


if __name__ == "__main__":
    main()
