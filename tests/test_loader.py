"""Tests for AudioLoader."""

import numpy as np
import pytest

from pitch_trainer.input import AudioLoader

from generate_test_audio import generate_sine_wave, save_wav


class TestAudioLoader:

    @pytest.fixture
    def wav_file(self, tmp_path):
        audio = generate_sine_wave(220.0, duration=1.0, sr=44100)
        return save_wav(tmp_path / "a3.wav", audio, 44100)

    def test_load(self, wav_file):
        loader = AudioLoader()
        audio, sr = loader.load(str(wav_file))

        assert sr == 44100
        assert audio.ndim == 1
        assert len(audio) == 44100
        assert loader.get_duration(audio, sr) == pytest.approx(1.0)
        # Not normalized by default
        assert np.abs(audio).max() == pytest.approx(0.5, abs=0.01)

    def test_load_resamples(self, wav_file):
        audio, sr = AudioLoader(target_sr=22050).load(str(wav_file))
        assert sr == 22050
        assert abs(len(audio) - 22050) <= 1

    def test_load_normalized(self, wav_file):
        audio, _ = AudioLoader(normalize=True).load(str(wav_file))
        assert np.abs(audio).max() == pytest.approx(1.0)

    def test_normalize(self):
        loader = AudioLoader()
        audio = np.array([0.5, -0.5, 0.25, -0.25])
        normalized = loader._normalize(audio)

        assert np.abs(normalized).max() == 1.0

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("not audio")
        with pytest.raises(ValueError):
            AudioLoader().load(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AudioLoader().load(str(tmp_path / "missing.wav"))

    def test_frames(self):
        audio = np.arange(10000, dtype=np.float32)
        frames = AudioLoader().frames(audio, frame_length=2048, hop_length=1024)

        assert frames.shape == (1 + (10000 - 2048) // 1024, 2048)
        np.testing.assert_array_equal(frames[1], audio[1024:3072])

    def test_short_audio_is_padded(self):
        audio = np.ones(100, dtype=np.float32)
        with pytest.warns(UserWarning):
            frames = AudioLoader().frames(audio, frame_length=2048, hop_length=1024)

        assert frames.shape == (1, 2048)
        assert frames[0, :100].sum() == 100
        assert frames[0, 100:].sum() == 0

    def test_invalid_frame_settings(self):
        with pytest.raises(ValueError):
            AudioLoader().frames(np.zeros(4096), frame_length=0)

    def test_frame_times(self):
        times = AudioLoader().frame_times(3, sr=44100, hop_length=1024)
        assert times == pytest.approx([0.0, 1024 / 44100, 2048 / 44100])
