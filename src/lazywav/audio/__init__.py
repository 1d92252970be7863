"""
Lazy audio arrays.

This module provides the single-file and multi-file lazy arrays,
folder discovery, and the soundfile decode backend they read through.
"""

from __future__ import annotations

from lazywav.audio.backend import native_dtype, read_frames, read_info, read_strided
from lazywav.audio.base import AudioArray
from lazywav.audio.distributed import (
    DistributedAudioFile,
    concatenate,
    discover_audio_files,
)
from lazywav.audio.lazy_file import LazyAudioFile

__all__ = [
    # Arrays
    "AudioArray",
    "LazyAudioFile",
    "DistributedAudioFile",
    "concatenate",
    "discover_audio_files",
    # Backend
    "read_info",
    "read_frames",
    "read_strided",
    "native_dtype",
]
