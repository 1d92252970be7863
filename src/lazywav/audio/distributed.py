"""
Many audio files presented as one concatenated lazy array.

A DistributedAudioFile holds an ordered, flat list of LazyAudioFile
members that share one sample rate and one channel layout. Global
frame indices are routed to the members that hold them through the
prefix boundaries in ``offsets``; a range that crosses member
boundaries is read piecewise, one restricted read per overlapping
member, and stitched along the frame axis.

Nothing is cached: every access decodes from disk, and only the
frames inside the requested window are read.

Example:
    >>> from lazywav.audio.distributed import DistributedAudioFile
    >>> df = DistributedAudioFile("recordings/")
    >>> df[0]
    >>> df[0:12]
    >>> df[:]
    >>> df.shape, len(df), df.samplerate
"""

from __future__ import annotations

import logging
import os
from bisect import bisect_right
from collections.abc import Iterable
from itertools import accumulate
from pathlib import Path

import numpy as np

from lazywav.audio.base import AudioArray
from lazywav.audio.lazy_file import LazyAudioFile
from lazywav.core.config import DEFAULT_CONFIG, ReaderConfig
from lazywav.core.exceptions import (
    AudioIndexError,
    ChannelMismatchError,
    NoAudioFilesError,
    SampleRateMismatchError,
)
from lazywav.core.types import FrameSpan

logger = logging.getLogger(__name__)


# ==============================================================================
# Discovery
# ==============================================================================


def discover_audio_files(
    folder: Path | str, config: ReaderConfig | None = None
) -> list[Path]:
    """
    List the audio files of a folder in lexicographic order.

    Args:
        folder: Folder to scan.
        config: Reader configuration selecting extensions and recursion.

    Returns:
        Sorted list of matching file paths.

    Raises:
        NoAudioFilesError: If the folder is missing or holds no matching files.
    """
    config = config or DEFAULT_CONFIG
    folder = Path(folder)
    if not folder.is_dir():
        raise NoAudioFilesError(f"Not a directory: {folder}", folder=str(folder))

    candidates = folder.rglob("*") if config.recursive else folder.iterdir()
    files = sorted(
        (p for p in candidates if p.is_file() and config.matches(p)),
        key=lambda p: p.relative_to(folder).as_posix(),
    )
    if not files:
        extensions = ", ".join(config.extensions)
        raise NoAudioFilesError(
            f"Found no audio files ({extensions}) in the specified path: {folder}",
            folder=str(folder),
        )
    logger.debug(f"Discovered {len(files)} audio files in {folder}")
    return files


def _flatten(arrays: Iterable[AudioArray]) -> list[LazyAudioFile]:
    files: list[LazyAudioFile] = []
    for array in arrays:
        if isinstance(array, DistributedAudioFile):
            files.extend(array.files)
        elif isinstance(array, LazyAudioFile):
            files.append(array)
        else:
            raise TypeError(
                f"Cannot concatenate {type(array).__name__}; "
                "expected LazyAudioFile or DistributedAudioFile"
            )
    return files


# ==============================================================================
# Distributed Audio File
# ==============================================================================


class DistributedAudioFile(AudioArray):
    """
    An ordered sequence of audio files presented as one lazy array.

    All members share one sample rate and one channel layout; the frame
    axis is the concatenation of the members' frame axes. Indexing is
    0-based and routed to the members, as for LazyAudioFile.

    Attributes:
        files: Flat tuple of member files, in order.
        offsets: Prefix boundaries; member k holds global frames
            ``offsets[k]:offsets[k + 1]``.

    Example:
        >>> df = DistributedAudioFile([f1, f2])
        >>> len(df) == len(f1) + len(f2)
        True
        >>> df[len(f1)] == f2[0]
        True
    """

    __slots__ = ("_files", "_samplerate", "_offsets", "_dtype")

    def __init__(
        self,
        source: Path | str | Iterable[AudioArray],
        samplerate: float | None = None,
        config: ReaderConfig | None = None,
    ) -> None:
        """
        Build a concatenated array from a folder or from existing arrays.

        Args:
            source: A folder to scan, or an ordered sequence of
                LazyAudioFile / DistributedAudioFile instances. Nested
                concatenations are flattened.
            samplerate: Expected shared sample rate; defaults to the
                first member's.
            config: Reader configuration used when scanning a folder.

        Raises:
            NoAudioFilesError: If there are no members.
            SampleRateMismatchError: If members disagree on sample rate.
            ChannelMismatchError: If members disagree on channel layout.
        """
        if isinstance(source, (str, os.PathLike)):
            folder = Path(source)
            paths = discover_audio_files(folder, config)
            files = [LazyAudioFile(p, config) for p in paths]
            logger.info(f"Opened {len(files)} audio files from {folder}")
        else:
            files = _flatten(source)
            if not files:
                raise NoAudioFilesError("Cannot build a DistributedAudioFile from no files")

        fs = files[0].samplerate if samplerate is None else samplerate
        rates = [f.samplerate for f in files]
        if any(rate != fs for rate in rates):
            distinct = sorted(set(rates) | {fs})
            raise SampleRateMismatchError(
                f"Audio files have different sample rates: {distinct}",
                samplerates=distinct,
            )

        trailing = files[0].shape[1:]
        if any(f.shape[1:] != trailing for f in files):
            shapes = [f.shape[1:] for f in files]
            logger.error(
                "Creating distributed audio file failed: members have different "
                "numbers of channels"
            )
            raise ChannelMismatchError(
                f"Audio files have different channel layouts: {sorted(set(shapes))}",
                shapes=shapes,
            )

        self._files = tuple(files)
        self._samplerate = fs
        self._offsets = tuple(accumulate((len(f) for f in files), initial=0))
        self._dtype = np.result_type(*(f.dtype for f in files))

    @classmethod
    def from_directory(
        cls, folder: Path | str, config: ReaderConfig | None = None
    ) -> DistributedAudioFile:
        """
        Build a concatenated array from every audio file in a folder.

        Args:
            folder: Folder to scan.
            config: Reader configuration.

        Returns:
            DistributedAudioFile over the folder's files in lexicographic order.
        """
        return cls(Path(folder), config=config)

    # ==========================================================================
    # Metadata
    # ==========================================================================

    @property
    def files(self) -> tuple[LazyAudioFile, ...]:
        return self._files

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self._files]

    @property
    def offsets(self) -> tuple[int, ...]:
        return self._offsets

    @property
    def samplerate(self) -> float:
        return self._samplerate

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def shape(self) -> tuple[int, ...]:
        return (self._offsets[-1], *self._files[0].shape[1:])

    # ==========================================================================
    # Routing
    # ==========================================================================

    def locate(self, index: int) -> tuple[int, int]:
        """
        Find the member holding a global frame.

        Args:
            index: Global 0-based frame index.

        Returns:
            (member position, local frame index within that member).

        Raises:
            AudioIndexError: If ``index`` is out of bounds.
        """
        if index < 0 or index >= len(self):
            raise AudioIndexError(
                f"Index {index} out of bounds for axis of length {len(self)}",
                index=index,
                length=len(self),
            )
        # Empty members share their start offset with the next member;
        # bisect_right skips past them.
        k = bisect_right(self._offsets, index) - 1
        return k, index - self._offsets[k]

    def _pieces(self, span: FrameSpan) -> list[tuple[LazyAudioFile, FrameSpan]]:
        """Split a global window into local windows of overlapping members."""
        first, _ = self.locate(span.start)
        pieces = []
        for k in range(first, len(self._files)):
            lo, hi = self._offsets[k], self._offsets[k + 1]
            if lo >= span.stop:
                break
            clipped = span.clip(lo, hi)
            if clipped is not None:
                pieces.append((self._files[k], clipped.shift(lo)))
        return pieces

    def _read_block(self, span: FrameSpan, dtype: np.dtype | None = None) -> np.ndarray:
        dtype = self._dtype if dtype is None else dtype
        pieces = self._pieces(span)
        logger.debug(
            f"Routing frames [{span.start}, {span.stop}) to {len(pieces)} member(s)"
        )
        # Members decode straight into the shared dtype so libsndfile
        # rescales mixed encodings consistently.
        blocks = [member._read_block(local, dtype) for member, local in pieces]
        if len(blocks) == 1:
            return blocks[0]
        return np.concatenate(blocks, axis=0)

    def read_into(self, out: np.ndarray, start: int = 0) -> np.ndarray:
        self._check_into(out, start)
        if not len(out):
            return out
        pos = 0
        for member, local in self._pieces(FrameSpan(start, start + len(out))):
            member.read_into(out[pos : pos + local.length], local.start)
            pos += local.length
        return out

    def __repr__(self) -> str:
        return (
            f"DistributedAudioFile(dtype={self.dtype}, ndim={self.ndim}) with "
            f"{len(self._files)} files, {self.size} total datapoints and "
            f"samplerate {self.samplerate}"
        )


# ==============================================================================
# Concatenation
# ==============================================================================


def concatenate(*arrays: AudioArray) -> DistributedAudioFile:
    """
    Concatenate audio arrays along the frame axis.

    Accepts any mix of LazyAudioFile and DistributedAudioFile; the
    result's members are always a flat list, left to right.

    Args:
        *arrays: Arrays to concatenate, in order.

    Returns:
        A DistributedAudioFile over all member files.

    Raises:
        NoAudioFilesError: If no arrays are given.
        SampleRateMismatchError: If the arrays have different sample rates.
        ChannelMismatchError: If the arrays have different channel layouts.

    Example:
        >>> df = concatenate(f1, f2, DistributedAudioFile("more/"))
        >>> df = f1 + f2
    """
    return DistributedAudioFile(arrays)
