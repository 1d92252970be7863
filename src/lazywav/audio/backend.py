"""
Decode backend built on soundfile (libsndfile).

This module is the only place that touches audio files on disk. It
reads header metadata without decoding samples and decodes exactly
the requested frame window by seeking inside the file, so callers can
treat files as lazy arrays.

Every call opens, reads and closes the file; no handle is kept between
calls. Thread safety is that of libsndfile: independent calls on
different handles do not share state, but no locking is provided here.

Example:
    >>> from lazywav.audio.backend import read_info, read_frames
    >>> info = read_info("recording.wav")
    >>> block = read_frames("recording.wav", 100, 200, info.dtype)
    >>> block.shape
    (100, 1)
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import soundfile as sf

from lazywav.core.exceptions import AudioFormatError, AudioLoadError
from lazywav.core.types import AudioInfo

logger = logging.getLogger(__name__)

# libsndfile subtype -> numpy container for "native" decoding.
# Integer PCM is read left-aligned into the container.
NATIVE_DTYPES: dict[str, str] = {
    "PCM_S8": "int16",
    "PCM_U8": "int16",
    "PCM_16": "int16",
    "PCM_24": "int32",
    "PCM_32": "int32",
    "FLOAT": "float32",
    "DOUBLE": "float64",
}

# Upper bound on frames decoded at once by strided reads.
CHUNK_FRAMES = 65536


def native_dtype(subtype: str) -> np.dtype:
    """
    Map a libsndfile subtype to the numpy dtype used for native reads.

    Args:
        subtype: Subtype name such as "PCM_16" or "FLOAT".

    Returns:
        The matching numpy dtype; float64 for compressed or unknown subtypes.
    """
    return np.dtype(NATIVE_DTYPES.get(subtype.upper(), "float64"))


def _check_exists(path: Path) -> None:
    if not path.exists():
        raise AudioLoadError(f"Audio file not found: {path}", file_path=str(path))
    if not path.is_file():
        raise AudioLoadError(f"Not a regular file: {path}", file_path=str(path))


def read_info(path: Path | str, dtype: str = "native") -> AudioInfo:
    """
    Read header metadata of an audio file without decoding samples.

    Args:
        path: Path to the audio file.
        dtype: Element type for later reads, or "native" to follow the
            file's sample encoding.

    Returns:
        AudioInfo describing the file.

    Raises:
        AudioLoadError: If the file is missing or cannot be opened.
        AudioFormatError: If the header is malformed or unsupported.
    """
    path = Path(path)
    _check_exists(path)

    try:
        info = sf.info(str(path))
    except RuntimeError as e:
        raise AudioFormatError(
            f"Failed to read audio header: {e}", file_path=str(path)
        ) from e
    except OSError as e:
        raise AudioLoadError(
            f"Failed to open audio file: {e}", file_path=str(path)
        ) from e

    element_type = native_dtype(info.subtype) if dtype == "native" else np.dtype(dtype)
    logger.debug(
        f"Header of {path}: {info.frames} frames, {info.channels} channels, "
        f"{info.samplerate} Hz, {info.subtype} -> {element_type}"
    )
    try:
        return AudioInfo(
            path=str(path),
            samplerate=info.samplerate,
            frames=info.frames,
            channels=info.channels,
            dtype=element_type,
            format=info.format,
            subtype=info.subtype,
        )
    except ValueError as e:
        raise AudioFormatError(
            f"Invalid audio header: {e}", file_path=str(path)
        ) from e


def read_frames(
    path: Path | str,
    start: int,
    stop: int,
    dtype: np.dtype | str,
) -> np.ndarray:
    """
    Decode frames [start, stop) of an audio file.

    Only the requested window is decoded; libsndfile seeks to ``start``.

    Args:
        path: Path to the audio file.
        start: First frame to decode.
        stop: One past the last frame to decode.
        dtype: Element type of the returned samples.

    Returns:
        Array of shape (stop - start, channels).

    Raises:
        AudioLoadError: If the file cannot be opened.
        AudioFormatError: If decoding fails.
    """
    path = Path(path)
    _check_exists(path)
    logger.debug(f"Reading frames [{start}, {stop}) from {path}")
    try:
        data, _ = sf.read(
            str(path),
            start=start,
            stop=stop,
            dtype=np.dtype(dtype).name,
            always_2d=True,
        )
    except RuntimeError as e:
        raise AudioFormatError(
            f"Failed to decode audio file: {e}", file_path=str(path)
        ) from e
    except OSError as e:
        raise AudioLoadError(
            f"Failed to open audio file: {e}", file_path=str(path)
        ) from e
    return data


def read_strided(
    path: Path | str,
    start: int,
    stop: int,
    step: int,
    dtype: np.dtype | str,
) -> np.ndarray:
    """
    Decode every ``step``-th frame of [start, stop).

    The file is opened once and read in chunks of at most CHUNK_FRAMES
    frames, each strided before the next is read. When ``step`` exceeds
    CHUNK_FRAMES every selected frame is decoded on its own, so frames
    between selections are skipped by seeking.

    Args:
        path: Path to the audio file.
        start: First selected frame.
        stop: Frame bound; selected frames are < stop.
        step: Stride between selected frames.
        dtype: Element type of the returned samples.

    Returns:
        Array of shape (len(range(start, stop, step)), channels).

    Raises:
        AudioLoadError: If the file cannot be opened.
        AudioFormatError: If decoding fails.
    """
    path = Path(path)
    _check_exists(path)
    logger.debug(f"Reading frames [{start}, {stop}) step {step} from {path}")
    name = np.dtype(dtype).name
    per_chunk = max(1, CHUNK_FRAMES // step)
    try:
        with sf.SoundFile(str(path)) as f:
            blocks = []
            for first in range(start, stop, per_chunk * step):
                last = min(stop, first + (per_chunk - 1) * step + 1)
                f.seek(first)
                blocks.append(f.read(last - first, dtype=name, always_2d=True)[::step])
            if not blocks:
                return np.empty((0, f.channels), dtype=name)
    except RuntimeError as e:
        raise AudioFormatError(
            f"Failed to decode audio file: {e}", file_path=str(path)
        ) from e
    except OSError as e:
        raise AudioLoadError(
            f"Failed to open audio file: {e}", file_path=str(path)
        ) from e
    return np.concatenate(blocks, axis=0)


def read_frames_into(path: Path | str, out: np.ndarray, start: int) -> int:
    """
    Decode frames starting at ``start`` directly into ``out``.

    Args:
        path: Path to the audio file.
        out: Preallocated C-contiguous array, 1-D for mono files or
            (frames, channels) otherwise; its dtype selects the decoded
            element type.
        start: First frame to decode.

    Returns:
        Number of frames written.

    Raises:
        AudioLoadError: If the file cannot be opened.
        AudioFormatError: If decoding fails.
    """
    path = Path(path)
    _check_exists(path)
    logger.debug(f"Reading {len(out)} frames at {start} from {path} into buffer")
    try:
        data, _ = sf.read(str(path), start=start, out=out, always_2d=True)
    except RuntimeError as e:
        raise AudioFormatError(
            f"Failed to decode audio file: {e}", file_path=str(path)
        ) from e
    except OSError as e:
        raise AudioLoadError(
            f"Failed to open audio file: {e}", file_path=str(path)
        ) from e
    return len(data)
