"""
Abstract base class for lazy audio arrays.

This module defines the capability set shared by a single lazily read
file and a concatenation of files: shape metadata, indexing and whole
array materialization. Subclasses only need to describe their layout
and decode a FrameSpan into a (frames, channels) block.

Example:
    >>> class MyArray(AudioArray):
    ...     @property
    ...     def shape(self) -> tuple[int, ...]:
    ...         return (10,)
    ...     ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from lazywav.audio.indexing import normalize_key, shape_result
from lazywav.core.exceptions import AudioIndexError
from lazywav.core.types import FrameSpan


class AudioArray(ABC):
    """
    Abstract base for arrays backed by audio files on disk.

    The first axis is frames; multi-channel arrays have a second axis
    of channels. Indexing with an integer, a slice, or a
    (frame, channel) tuple decodes only the requested frames.

    Subclasses must implement:
    - shape: Array shape
    - samplerate: Shared sample rate
    - dtype: Element type of decoded samples
    - _read_block: Decode a FrameSpan
    - read_into: Decode into a preallocated buffer
    """

    __slots__ = ()

    @property
    @abstractmethod
    def shape(self) -> tuple[int, ...]:
        """Array shape: (frames,) or (frames, channels)."""
        ...

    @property
    @abstractmethod
    def samplerate(self) -> float:
        """Sample rate in Hz."""
        ...

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """Element type of decoded samples."""
        ...

    @abstractmethod
    def _read_block(self, span: FrameSpan, dtype: np.dtype | None = None) -> np.ndarray:
        """
        Decode the frames selected by ``span``.

        Args:
            span: A window already validated against the array bounds.
            dtype: Element type to decode into; the decoder rescales
                samples to it. Defaults to this array's dtype.

        Returns:
            Array of shape (span.count, channels).
        """
        ...

    @abstractmethod
    def read_into(self, out: np.ndarray, start: int = 0) -> np.ndarray:
        """
        Decode frames ``start:start + len(out)`` into ``out``.

        Args:
            out: Preallocated C-contiguous array with this array's
                trailing shape.
            start: First frame to decode.

        Returns:
            ``out``, filled.
        """
        ...

    # ==========================================================================
    # Shape metadata
    # ==========================================================================

    @property
    def ndim(self) -> int:
        """Number of dimensions (1 for mono, 2 for multi-channel)."""
        return len(self.shape)

    @property
    def channels(self) -> int:
        """Number of channels."""
        return self.shape[1] if self.ndim > 1 else 1

    @property
    def size(self) -> int:
        """Total number of samples across all channels."""
        return int(np.prod(self.shape))

    @property
    def duration_seconds(self) -> float:
        """Duration in seconds."""
        return len(self) / self.samplerate

    def dim(self, axis: int) -> int:
        """
        Size of one axis.

        Args:
            axis: 0-based axis number.

        Returns:
            The axis size, or 1 for axes beyond ``ndim``.
        """
        if axis < 0:
            raise ValueError("axis must be non-negative")
        return self.shape[axis] if axis < self.ndim else 1

    def __len__(self) -> int:
        return self.shape[0]

    # ==========================================================================
    # Reading
    # ==========================================================================

    def _empty_block(self) -> np.ndarray:
        return np.empty((0, self.channels), dtype=self.dtype)

    def __getitem__(self, key: Any) -> Any:
        normalized = normalize_key(key, len(self), self.channels, self.ndim)
        if normalized.span.is_empty:
            block = self._empty_block()
        else:
            block = self._read_block(normalized.span)
        return shape_result(block, normalized, self.ndim)

    def read(self) -> np.ndarray:
        """Decode the whole array."""
        return self[:]

    def _check_into(self, out: np.ndarray, start: int) -> None:
        if out.shape[1:] != self.shape[1:]:
            raise ValueError(
                f"Buffer shape {out.shape} does not match trailing shape "
                f"{self.shape[1:]}"
            )
        if start < 0 or start + len(out) > len(self):
            raise AudioIndexError(
                f"Range {start}:{start + len(out)} out of bounds for axis of "
                f"length {len(self)}",
                index=slice(start, start + len(out)),
                length=len(self),
            )

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> np.ndarray:
        if copy is False:
            raise ValueError(
                "Unable to avoid copy while creating an array: samples are "
                "decoded from disk"
            )
        data = self.read()
        if dtype is not None:
            data = data.astype(dtype, copy=False)
        return data

    # ==========================================================================
    # Concatenation
    # ==========================================================================

    def __add__(self, other: object) -> Any:
        if not isinstance(other, AudioArray):
            return NotImplemented
        from lazywav.audio.distributed import concatenate

        return concatenate(self, other)
