"""
lazywav Command Line Interface.

This module provides the CLI entry point for inspecting audio files
and folders as lazy arrays.

Example:
    >>> # Run from command line
    >>> lazywav --help
    >>> lazywav info recordings/
    >>> lazywav files recordings/
    >>> lazywav read recordings/ --start 9 --stop 12
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from lazywav import __version__
from lazywav.audio.base import AudioArray
from lazywav.core.exceptions import LazyWavError


def _open(path: Path, config_path: Path | None) -> AudioArray:
    """Open a file or folder as a lazy array."""
    from lazywav.audio.distributed import DistributedAudioFile
    from lazywav.audio.lazy_file import LazyAudioFile
    from lazywav.core.config import load_config

    config = load_config(config_path)
    if path.is_dir():
        return DistributedAudioFile(path, config=config)
    return LazyAudioFile(path, config=config)


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML reader configuration",
)


@click.group()
@click.version_option(version=__version__, prog_name="lazywav")
@click.option("--verbose", "-v", is_flag=True, help="Log every disk read")
def cli(verbose: bool) -> None:
    """Treat audio files on disk as lazy arrays.

    Inspect single files or whole folders of audio files and read
    sample ranges without loading entire files.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@config_option
def info(path: Path, config_path: Path | None) -> None:
    """Show shape, sample rate and element type of a file or folder."""
    from lazywav.audio.distributed import DistributedAudioFile

    try:
        array = _open(path, config_path)
    except LazyWavError as e:
        raise click.ClickException(str(e)) from e

    click.echo(repr(array))
    click.echo(f"  Shape: {array.shape}")
    click.echo(f"  Sample rate: {array.samplerate} Hz")
    click.echo(f"  Element type: {array.dtype}")
    click.echo(f"  Duration: {array.duration_seconds:.2f}s")
    if isinstance(array, DistributedAudioFile):
        click.echo(f"  Files: {len(array.files)}")


@cli.command()
@click.argument(
    "folder", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@config_option
def files(folder: Path, config_path: Path | None) -> None:
    """List the files of a folder in concatenation order."""
    from lazywav.audio.distributed import DistributedAudioFile
    from lazywav.core.config import load_config

    try:
        array = DistributedAudioFile(folder, config=load_config(config_path))
    except LazyWavError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{len(array.files)} files, {len(array)} frames:")
    for member, offset in zip(array.files, array.offsets):
        click.echo(f"  [{offset}] {len(member)} frames  {member.path}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option("--start", "-s", type=int, default=0, help="First frame (0-based)")
@click.option("--stop", "-e", type=int, default=None, help="One past the last frame")
@click.option("--channel", type=int, default=None, help="Only print this channel")
@config_option
def read(
    path: Path,
    start: int,
    stop: int | None,
    channel: int | None,
    config_path: Path | None,
) -> None:
    """Print decoded samples of a frame range, one frame per line."""
    try:
        array = _open(path, config_path)
        key = slice(start, stop) if channel is None else (slice(start, stop), channel)
        if channel is not None and array.ndim == 1:
            if channel != 0:
                raise click.BadParameter(
                    f"mono audio has no channel {channel}", param_hint="--channel"
                )
            key = slice(start, stop)
        data = array[key]
    except LazyWavError as e:
        raise click.ClickException(str(e)) from e

    for frame in data:
        if data.ndim > 1:
            click.echo(" ".join(str(v) for v in frame))
        else:
            click.echo(str(frame))


def main() -> int:
    """
    Main entry point for the lazywav CLI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        cli()
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
