"""
Configuration models for lazywav.

This module provides the Pydantic model controlling how audio files
are discovered and decoded, plus YAML loading and saving.

Example:
    >>> from lazywav.core.config import ReaderConfig, load_config
    >>> config = ReaderConfig(extensions=[".wav", ".flac"], dtype="float32")
    >>> config.extensions
    ['.wav', '.flac']
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

DTypeName = Literal["native", "int16", "int32", "float32", "float64"]

# ==============================================================================
# Reader Configuration
# ==============================================================================


class ReaderConfig(BaseModel):
    """
    Settings for discovering and decoding audio files.

    Attributes:
        extensions: File extensions treated as audio during folder discovery.
            Matching is case-insensitive.
        dtype: Element type used when decoding. "native" follows the
            sample encoding stored in each file's header.
        recursive: Whether folder discovery descends into sub-folders.

    Example:
        >>> config = ReaderConfig(extensions=["WAV"])
        >>> config.extensions
        ['.wav']
    """

    extensions: list[str] = Field(default_factory=lambda: [".wav"])
    dtype: DTypeName = Field(default="native")
    recursive: bool = Field(default=False)

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Lower-case extensions and make sure each has a leading dot."""
        if not v:
            raise ValueError("extensions must not be empty")
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext or ext == ".":
                raise ValueError("extensions must not contain empty entries")
            if not ext.startswith("."):
                ext = "." + ext
            if ext not in normalized:
                normalized.append(ext)
        return normalized

    def matches(self, path: Path) -> bool:
        """Whether ``path`` has one of the configured extensions."""
        return path.suffix.lower() in self.extensions


DEFAULT_CONFIG = ReaderConfig()


# ==============================================================================
# Config Loading Functions
# ==============================================================================


def load_config(path: Path | str | None = None) -> ReaderConfig:
    """
    Load a reader configuration, falling back to the defaults.

    Args:
        path: Path to a YAML file, or None for the default configuration.

    Returns:
        ReaderConfig instance.

    Raises:
        ConfigurationError: If the YAML file is missing or invalid.

    Example:
        >>> config = load_config()
        >>> config = load_config("configs/reader.yaml")
    """
    from lazywav.core.exceptions import ConfigurationError

    if path is None:
        return DEFAULT_CONFIG

    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    return load_config_from_yaml(path)


def load_config_from_yaml(path: Path) -> ReaderConfig:
    """
    Load a reader configuration from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        ReaderConfig instance.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ConfigurationError: If YAML is invalid.
    """
    from lazywav.core.exceptions import ConfigurationError

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return ReaderConfig(**data)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except Exception as e:
        raise ConfigurationError(f"Failed to parse config {path}: {e}") from e


def save_config_to_yaml(config: ReaderConfig, path: Path) -> None:
    """
    Save a reader configuration to a YAML file.

    Args:
        config: The configuration to save.
        path: Path to save the YAML file.
    """
    with open(path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
