"""
Shared pytest fixtures for lazywav tests.

This module provides small audio files written with soundfile so that
every sample value is known in advance.
"""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

# ==============================================================================
# Audio Fixtures
# ==============================================================================


@pytest.fixture
def sample_rate() -> int:
    """Standard sample rate for tests."""
    return 8000


@pytest.fixture
def audio_dir(tmp_path: Path) -> Path:
    """Temporary directory for audio files."""
    directory = tmp_path / "audio"
    directory.mkdir()
    return directory


@pytest.fixture
def write_wav(audio_dir: Path, sample_rate: int) -> Callable[..., Path]:
    """Factory fixture writing a WAV file into ``audio_dir``."""

    def _write(
        name: str,
        data: np.ndarray,
        samplerate: int | None = None,
        subtype: str = "PCM_16",
    ) -> Path:
        """
        Write test audio data.

        Args:
            name: File name inside the audio directory.
            data: Samples, (frames,) or (frames, channels).
            samplerate: Sample rate; defaults to the ``sample_rate`` fixture.
            subtype: libsndfile sample encoding.

        Returns:
            Path of the written file.
        """
        path = audio_dir / name
        sf.write(str(path), data, samplerate or sample_rate, subtype=subtype)
        return path

    return _write


@pytest.fixture
def mono_data() -> tuple[np.ndarray, np.ndarray]:
    """Two mono signals of 10 frames with distinguishable values."""
    first = np.arange(0, 10, dtype=np.int16)
    second = np.arange(100, 110, dtype=np.int16)
    return first, second


@pytest.fixture
def stereo_data() -> tuple[np.ndarray, np.ndarray]:
    """Two stereo signals of 10 frames; right channel is the negated left."""
    left = np.arange(0, 10, dtype=np.int16)
    first = np.column_stack([left, -left])
    left = np.arange(100, 110, dtype=np.int16)
    second = np.column_stack([left, -left])
    return first, second


@pytest.fixture
def mono_files(
    write_wav: Callable[..., Path], mono_data: tuple[np.ndarray, np.ndarray]
) -> tuple[Path, Path]:
    """Two mono WAV files of 10 frames each."""
    first, second = mono_data
    return write_wav("f1.wav", first), write_wav("f2.wav", second)


@pytest.fixture
def stereo_files(
    write_wav: Callable[..., Path], stereo_data: tuple[np.ndarray, np.ndarray]
) -> tuple[Path, Path]:
    """Two stereo WAV files of 10 frames each."""
    first, second = stereo_data
    return write_wav("s1.wav", first), write_wav("s2.wav", second)
