"""Audio loading and framing utilities."""

import warnings
from pathlib import Path
from typing import Optional, Tuple

import librosa
import numpy as np

from ..core.constants import DEFAULT_BUFFER_SIZE, DEFAULT_HOP_LENGTH, DEFAULT_SR


class AudioLoader:
    """Loads recordings and cuts them into fixed-size analysis buffers."""

    SUPPORTED_FORMATS = {".wav", ".mp3", ".flac", ".ogg", ".m4a"}

    def __init__(
        self,
        target_sr: int = DEFAULT_SR,
        mono: bool = True,
        normalize: bool = False,
    ):
        """
        Initialize AudioLoader.

        Args:
            target_sr: Target sample rate for resampling
            mono: Convert to mono if True
            normalize: Peak-normalize amplitude if True. Off by default since
                it changes what the detector's silence gate sees.
        """
        self.target_sr = target_sr
        self.mono = mono
        self.normalize = normalize

    def load(self, path: str) -> Tuple[np.ndarray, int]:
        """
        Load audio file and preprocess.

        Args:
            path: Path to audio file

        Returns:
            Tuple of (audio array, sample rate)

        Raises:
            ValueError: If file format not supported
            FileNotFoundError: If file doesn't exist
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {sorted(self.SUPPORTED_FORMATS)}"
            )

        audio, sr = librosa.load(
            str(path),
            sr=self.target_sr,
            mono=self.mono,
        )

        if self.normalize:
            audio = self._normalize(audio)

        return audio, sr

    def _normalize(self, audio: np.ndarray) -> np.ndarray:
        """Normalize audio to [-1, 1] range using peak normalization."""
        peak = np.abs(audio).max()
        if peak > 0:
            audio = audio / peak
        return audio

    def frames(
        self,
        audio: np.ndarray,
        frame_length: int = DEFAULT_BUFFER_SIZE,
        hop_length: int = DEFAULT_HOP_LENGTH,
    ) -> np.ndarray:
        """
        Cut audio into analysis buffers.

        Args:
            audio: Mono audio array
            frame_length: Samples per buffer
            hop_length: Samples between buffer starts

        Returns:
            Array of shape [n_frames, frame_length]
        """
        if frame_length <= 0 or hop_length <= 0:
            raise ValueError("frame_length and hop_length must be positive")

        audio = np.asarray(audio, dtype=np.float32)
        if len(audio) < frame_length:
            warnings.warn(
                f"Audio has {len(audio)} samples, shorter than one "
                f"{frame_length}-sample frame; zero-padding"
            )
            audio = np.pad(audio, (0, frame_length - len(audio)))

        framed = librosa.util.frame(
            audio, frame_length=frame_length, hop_length=hop_length
        )
        # librosa puts frames on the last axis
        return np.ascontiguousarray(framed.T)

    def frame_times(
        self,
        n_frames: int,
        sr: Optional[int] = None,
        hop_length: int = DEFAULT_HOP_LENGTH,
    ) -> np.ndarray:
        """Start time in seconds of each frame."""
        sr = sr or self.target_sr
        return librosa.frames_to_time(
            np.arange(n_frames), sr=sr, hop_length=hop_length
        )

    def get_duration(self, audio: np.ndarray, sr: Optional[int] = None) -> float:
        """Get duration in seconds."""
        sr = sr or self.target_sr
        return len(audio) / sr
