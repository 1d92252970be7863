"""
Custom exception hierarchy for lazywav.

This module defines the exception classes used throughout the package.
All lazywav-specific exceptions inherit from LazyWavError for easy catching.

Exception Hierarchy:
    LazyWavError (base)
    ├── ConfigurationError
    └── AudioError
        ├── AudioLoadError
        ├── AudioFormatError
        ├── NoAudioFilesError
        ├── InconsistentAudioError
        │   ├── SampleRateMismatchError
        │   └── ChannelMismatchError
        └── AudioIndexError
"""

from __future__ import annotations


class LazyWavError(Exception):
    """
    Base exception for all lazywav errors.

    Example:
        >>> try:
        ...     df = DistributedAudioFile("recordings/")
        ... except LazyWavError as e:
        ...     logger.error(f"lazywav error: {e}")
    """

    def __init__(self, message: str, *args: object) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            *args: Additional arguments passed to Exception.
        """
        self.message = message
        super().__init__(message, *args)


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(LazyWavError):
    """
    Error in configuration loading or validation.

    Example:
        >>> raise ConfigurationError("extensions must not be empty")
    """

    pass


# ==============================================================================
# Audio Errors
# ==============================================================================


class AudioError(LazyWavError):
    """
    Base class for audio-related errors.

    Raised for any errors related to opening, decoding or
    indexing audio files.
    """

    pass


class AudioLoadError(AudioError):
    """
    Error opening an audio file.

    Raised when an audio file is missing or cannot be read from disk.

    Attributes:
        file_path: Path to the audio file that failed to load.
    """

    def __init__(self, message: str, file_path: str | None = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            file_path: Path to the failed audio file.
        """
        self.file_path = file_path
        super().__init__(message)


class AudioFormatError(AudioError):
    """
    Error with the audio header or encoding.

    Raised when a file exists but its header is malformed or
    the decoder does not recognise it.

    Attributes:
        file_path: Path to the offending audio file.
    """

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        super().__init__(message)


class NoAudioFilesError(AudioError):
    """
    No audio files were found where some were expected.

    Attributes:
        folder: Folder that was searched, if any.
    """

    def __init__(self, message: str, folder: str | None = None) -> None:
        self.folder = folder
        super().__init__(message)


class InconsistentAudioError(AudioError, ValueError):
    """
    Audio files that cannot be presented as one array.

    Raised eagerly at construction when members disagree on
    sample rate or on their non-first-axis dimensions.
    """

    pass


class SampleRateMismatchError(InconsistentAudioError):
    """
    Members have different sample rates.

    Attributes:
        samplerates: Distinct sample rates encountered, in member order.
    """

    def __init__(self, message: str, samplerates: list[float] | None = None) -> None:
        self.samplerates = samplerates or []
        super().__init__(message)


class ChannelMismatchError(InconsistentAudioError):
    """
    Members have different channel layouts.

    Attributes:
        shapes: Trailing shapes encountered, in member order.
    """

    def __init__(
        self, message: str, shapes: list[tuple[int, ...]] | None = None
    ) -> None:
        self.shapes = shapes or []
        super().__init__(message)


class AudioIndexError(AudioError, IndexError):
    """
    Index or range outside the bounds of an audio array.

    Attributes:
        index: The offending index or slice.
        length: Length of the first axis that was indexed.
    """

    def __init__(
        self,
        message: str,
        index: object | None = None,
        length: int | None = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            index: The offending index or slice.
            length: Length of the indexed axis.
        """
        self.index = index
        self.length = length
        super().__init__(message)
