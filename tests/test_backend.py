"""
Tests for the soundfile decode backend.

Tests header reads, windowed decodes, dtype mapping and the
translation of decoder failures into lazywav errors.
"""
from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import numpy as np
import pytest

from lazywav.audio.backend import (
    native_dtype,
    read_frames,
    read_frames_into,
    read_info,
    read_strided,
)
from lazywav.core.exceptions import AudioFormatError, AudioLoadError


class TestNativeDtype:
    """Tests for subtype to dtype mapping."""

    @pytest.mark.parametrize(
        ("subtype", "expected"),
        [
            ("PCM_16", np.int16),
            ("PCM_U8", np.int16),
            ("PCM_S8", np.int16),
            ("PCM_24", np.int32),
            ("PCM_32", np.int32),
            ("FLOAT", np.float32),
            ("DOUBLE", np.float64),
            ("VORBIS", np.float64),
            ("pcm_16", np.int16),
        ],
    )
    def test_mapping(self, subtype: str, expected: type) -> None:
        assert native_dtype(subtype) == np.dtype(expected)


class TestReadInfo:
    """Tests for header-only reads."""

    def test_mono(self, mono_files: tuple[Path, Path]) -> None:
        info = read_info(mono_files[0])

        assert info.samplerate == 8000
        assert info.frames == 10
        assert info.channels == 1
        assert info.shape == (10,)
        assert info.dtype == np.int16
        assert info.format == "WAV"
        assert info.subtype == "PCM_16"

    def test_stereo(self, stereo_files: tuple[Path, Path]) -> None:
        info = read_info(stereo_files[0])
        assert info.shape == (10, 2)

    def test_explicit_dtype(self, mono_files: tuple[Path, Path]) -> None:
        assert read_info(mono_files[0], dtype="float32").dtype == np.float32

    def test_pcm24_native(self, write_wav) -> None:
        path = write_wav("deep.wav", np.zeros(4, dtype=np.int32), subtype="PCM_24")
        assert read_info(path).dtype == np.int32

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(AudioLoadError, match="not found") as exc_info:
            read_info(tmp_path / "missing.wav")
        assert exc_info.value.file_path == str(tmp_path / "missing.wav")

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(AudioLoadError, match="Not a regular file"):
            read_info(tmp_path)

    def test_malformed(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.wav"
        path.write_bytes(b"RIFF\x00\x00garbage")

        with pytest.raises(AudioFormatError, match="header"):
            read_info(path)


class TestReadFrames:
    """Tests for windowed decoding."""

    def test_window_is_2d(self, mono_files: tuple[Path, Path]) -> None:
        block = read_frames(mono_files[0], 3, 7, np.int16)

        assert block.shape == (4, 1)
        np.testing.assert_array_equal(block[:, 0], [3, 4, 5, 6])

    def test_stereo_window(self, stereo_files: tuple[Path, Path], stereo_data) -> None:
        block = read_frames(stereo_files[1], 0, 3, "int16")
        np.testing.assert_array_equal(block, stereo_data[1][:3])

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(AudioLoadError):
            read_frames(tmp_path / "missing.wav", 0, 1, np.int16)

    def test_read_into(self, mono_files: tuple[Path, Path]) -> None:
        out = np.zeros(3, dtype=np.int16)

        written = read_frames_into(mono_files[1], out, 7)

        assert written == 3
        np.testing.assert_array_equal(out, [107, 108, 109])


class TestReadStrided:
    """Tests for stepped decoding."""

    def test_selects_every_step(self, mono_files: tuple[Path, Path]) -> None:
        block = read_strided(mono_files[0], 1, 10, 3, np.int16)

        assert block.shape == (3, 1)
        np.testing.assert_array_equal(block[:, 0], [1, 4, 7])

    def test_across_chunks(self, mono_files: tuple[Path, Path]) -> None:
        """Chunk boundaries keep the stride."""
        with patch("lazywav.audio.backend.CHUNK_FRAMES", 4):
            block = read_strided(mono_files[1], 0, 10, 2, np.int16)
        np.testing.assert_array_equal(block[:, 0], [100, 102, 104, 106, 108])

    def test_stereo(self, stereo_files: tuple[Path, Path], stereo_data) -> None:
        block = read_strided(stereo_files[0], 0, 10, 4, "int16")
        np.testing.assert_array_equal(block, stereo_data[0][::4])

    def test_rescales_to_dtype(self, mono_files: tuple[Path, Path]) -> None:
        block = read_strided(mono_files[0], 0, 4, 2, np.float32)
        np.testing.assert_allclose(block[:, 0], [0.0, 2 / 32768])

    def test_empty(self, mono_files: tuple[Path, Path]) -> None:
        block = read_strided(mono_files[0], 5, 5, 2, np.int16)
        assert block.shape == (0, 1)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(AudioLoadError):
            read_strided(tmp_path / "missing.wav", 0, 4, 2, np.int16)
