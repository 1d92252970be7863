"""
Core type definitions for lazywav.

This module defines the small immutable value types shared by the
decode backend and the array views:

- AudioInfo: header metadata of one audio file
- FrameSpan: a half-open, stepped window over the frame axis
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# ==============================================================================
# Audio Metadata
# ==============================================================================


@dataclass(frozen=True)
class AudioInfo:
    """
    Header metadata of an audio file.

    Read once from the file header without decoding any samples.

    Attributes:
        path: Location of the file.
        samplerate: Sample rate in Hz.
        frames: Number of frames (samples per channel).
        channels: Number of interleaved channels.
        dtype: Element type used when decoding samples.
        format: Container format reported by the decoder (e.g. "WAV").
        subtype: Sample encoding reported by the decoder (e.g. "PCM_16").

    Example:
        >>> info = AudioInfo(
        ...     path="a.wav", samplerate=8000, frames=10, channels=1,
        ...     dtype=np.dtype("int16"),
        ... )
        >>> info.shape
        (10,)
    """

    path: str
    samplerate: float
    frames: int
    channels: int
    dtype: np.dtype
    format: str = ""
    subtype: str = ""

    def __post_init__(self) -> None:
        """Validate header values."""
        if self.samplerate <= 0:
            raise ValueError("samplerate must be positive")
        if self.frames < 0:
            raise ValueError("frames must be non-negative")
        if self.channels < 1:
            raise ValueError("channels must be at least 1")

    @property
    def shape(self) -> tuple[int, ...]:
        """Array shape: (frames,) for mono, (frames, channels) otherwise."""
        if self.channels == 1:
            return (self.frames,)
        return (self.frames, self.channels)

    @property
    def duration_seconds(self) -> float:
        """Duration of the file in seconds."""
        return self.frames / self.samplerate


# ==============================================================================
# Frame Windows
# ==============================================================================


@dataclass(frozen=True)
class FrameSpan:
    """
    A half-open window [start, stop) over the frame axis.

    Attributes:
        start: First frame of the window.
        stop: One past the last frame of the window.
        step: Stride between selected frames (positive).
    """

    start: int
    stop: int
    step: int = 1

    def __post_init__(self) -> None:
        """Validate window bounds."""
        if self.start < 0:
            raise ValueError("start must be non-negative")
        if self.stop < self.start:
            raise ValueError("stop must not precede start")
        if self.step < 1:
            raise ValueError("step must be positive")

    @property
    def length(self) -> int:
        """Number of frames covered by the window."""
        return self.stop - self.start

    @property
    def count(self) -> int:
        """Number of frames selected once the step is applied."""
        return -(-self.length // self.step)

    @property
    def is_empty(self) -> bool:
        """Whether the window selects no frames."""
        return self.count == 0

    def shift(self, offset: int) -> FrameSpan:
        """Translate the window by ``-offset`` frames (global to local)."""
        return FrameSpan(self.start - offset, self.stop - offset, self.step)

    def clip(self, lo: int, hi: int) -> FrameSpan | None:
        """
        Intersect the window with [lo, hi), keeping the step phase.

        The returned span starts on the first frame >= lo that the
        original window would select, so concatenating the clipped
        pieces of adjacent intervals reproduces the original selection.

        Args:
            lo: Start of the interval.
            hi: End of the interval.

        Returns:
            The clipped span, or None if no selected frame falls in [lo, hi).
        """
        first = max(lo, self.start)
        misalign = (first - self.start) % self.step
        if misalign:
            first += self.step - misalign
        last = min(hi, self.stop)
        if first >= last:
            return None
        return FrameSpan(first, last, self.step)
