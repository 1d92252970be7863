"""
Lazy single-file audio arrays.

A LazyAudioFile reads the header of one audio file when it is created
and decodes samples from disk on every index access, restricted to the
requested frames. No decoded data is kept.

Example:
    >>> from lazywav.audio.lazy_file import LazyAudioFile
    >>> f1 = LazyAudioFile("recordings/f1.wav")
    >>> f1[0]
    >>> f1[0:5]
    >>> f1.shape
    (48000,)
    >>> f1.samplerate
    8000
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from lazywav.audio import backend
from lazywav.audio.base import AudioArray
from lazywav.core.config import DEFAULT_CONFIG, ReaderConfig
from lazywav.core.types import AudioInfo, FrameSpan

logger = logging.getLogger(__name__)


class LazyAudioFile(AudioArray):
    """
    One audio file on disk presented as a lazy array.

    Shape, sample rate and element type are read once from the file
    header. Each access opens the file, decodes only the requested
    frames and closes it again, so repeated reads of the same range hit
    the disk each time.

    Indexing is 0-based:
    - ``f[i]``: sample i (mono) or all channels of frame i
    - ``f[i, c]``: sample i of channel c
    - ``f[a:b]``: frames a..b-1 as (n,) or (n, channels)
    - ``f[:]`` / ``f.read()``: the whole file

    Attributes:
        path: Location of the file.
        info: Header metadata.

    Example:
        >>> f = LazyAudioFile("stereo.wav")
        >>> f.shape
        (44100, 2)
        >>> f[100]
        array([ 12, -40], dtype=int16)
    """

    __slots__ = ("_info",)

    def __init__(self, path: Path | str, config: ReaderConfig | None = None) -> None:
        """
        Open an audio file lazily.

        Args:
            path: Path to the audio file.
            config: Reader configuration; only ``dtype`` is used here.

        Raises:
            AudioLoadError: If the file is missing or cannot be opened.
            AudioFormatError: If the header is malformed.
        """
        config = config or DEFAULT_CONFIG
        self._info = backend.read_info(path, dtype=config.dtype)

    @property
    def info(self) -> AudioInfo:
        return self._info

    @property
    def path(self) -> str:
        return self._info.path

    @property
    def shape(self) -> tuple[int, ...]:
        return self._info.shape

    @property
    def samplerate(self) -> float:
        return self._info.samplerate

    @property
    def dtype(self) -> np.dtype:
        return self._info.dtype

    def _read_block(self, span: FrameSpan, dtype: np.dtype | None = None) -> np.ndarray:
        dtype = self.dtype if dtype is None else dtype
        if span.step == 1:
            return backend.read_frames(self.path, span.start, span.stop, dtype)
        return backend.read_strided(self.path, span.start, span.stop, span.step, dtype)

    def read_into(self, out: np.ndarray, start: int = 0) -> np.ndarray:
        self._check_into(out, start)
        if len(out):
            backend.read_frames_into(self.path, out, start)
        return out

    def __repr__(self) -> str:
        return (
            f"LazyAudioFile(dtype={self.dtype}, ndim={self.ndim}, "
            f"shape={self.shape}, samplerate={self.samplerate}): {self.path}"
        )
