"""
lazywav - audio files on disk as lazy arrays.

Index into one audio file, or a whole folder of them, as if it were a
numpy array, decoding only the samples you ask for.

This package provides:
- LazyAudioFile: one file as a lazy array
- DistributedAudioFile: many files concatenated into one lazy array
- concatenate / ``+``: combine arrays of either kind

Example:
    >>> from lazywav import LazyAudioFile, DistributedAudioFile
    >>> f1 = LazyAudioFile("recordings/f1.wav")
    >>> f1[0:5]
    >>> df = f1 + LazyAudioFile("recordings/f2.wav")
    >>> df = DistributedAudioFile("recordings/")
    >>> df[:]
"""
from __future__ import annotations

from lazywav.audio import (
    AudioArray,
    DistributedAudioFile,
    LazyAudioFile,
    concatenate,
    discover_audio_files,
)
from lazywav.core import ReaderConfig

__version__ = "0.1.0"
__author__ = "lazywav Team"

__all__ = [
    "__version__",
    "__author__",
    "AudioArray",
    "LazyAudioFile",
    "DistributedAudioFile",
    "ReaderConfig",
    "concatenate",
    "discover_audio_files",
]
