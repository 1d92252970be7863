"""
Core types and configuration for lazywav.

This module provides the foundational types, configuration
and exceptions used throughout the package.
"""

from __future__ import annotations

from lazywav.core.config import (
    DEFAULT_CONFIG,
    ReaderConfig,
    load_config,
    load_config_from_yaml,
    save_config_to_yaml,
)
from lazywav.core.exceptions import (
    AudioError,
    AudioFormatError,
    AudioIndexError,
    AudioLoadError,
    ChannelMismatchError,
    ConfigurationError,
    InconsistentAudioError,
    LazyWavError,
    NoAudioFilesError,
    SampleRateMismatchError,
)
from lazywav.core.types import AudioInfo, FrameSpan

__all__ = [
    # Configuration
    "ReaderConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "load_config_from_yaml",
    "save_config_to_yaml",
    # Exceptions
    "LazyWavError",
    "ConfigurationError",
    "AudioError",
    "AudioLoadError",
    "AudioFormatError",
    "NoAudioFilesError",
    "InconsistentAudioError",
    "SampleRateMismatchError",
    "ChannelMismatchError",
    "AudioIndexError",
    # Types
    "AudioInfo",
    "FrameSpan",
]
