"""
Index normalization for lazy audio arrays.

Translates the keys accepted by ``__getitem__`` (integers, slices,
Ellipsis and (frame, channel) tuples) into a FrameSpan over the
frame axis plus a channel selector, checking bounds before any data
is read.

Indices are 0-based. Negative indices are rejected rather than
wrapped, and slices are not clamped: a stop past the end raises
AudioIndexError.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any

import numpy as np

from lazywav.core.exceptions import AudioIndexError
from lazywav.core.types import FrameSpan


@dataclass(frozen=True)
class NormalizedKey:
    """
    A validated indexing key.

    Attributes:
        span: Frames to read.
        scalar_frame: Whether the frame axis was indexed by an integer,
            which drops that axis from the result.
        channel: Channel selector applied to the decoded block.
    """

    span: FrameSpan
    scalar_frame: bool
    channel: Any


def _as_int(value: Any) -> int | None:
    if isinstance(value, (bool, np.bool_)):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def resolve_frame(index: Any, length: int) -> FrameSpan | int:
    """
    Resolve a frame-axis key against an axis of ``length`` frames.

    Args:
        index: An integer or a slice.
        length: Number of frames in the axis.

    Returns:
        The integer frame for scalar keys, a FrameSpan for slices.

    Raises:
        AudioIndexError: If the key falls outside [0, length).
        TypeError: If the key is neither an integer nor a slice.
    """
    i = _as_int(index)
    if i is not None:
        if i < 0 or i >= length:
            raise AudioIndexError(
                f"Index {i} out of bounds for axis of length {length}",
                index=i,
                length=length,
            )
        return i

    if isinstance(index, slice):
        start = 0 if index.start is None else _as_int(index.start)
        stop = length if index.stop is None else _as_int(index.stop)
        step = 1 if index.step is None else _as_int(index.step)
        if start is None or stop is None or step is None:
            raise TypeError(f"Slice bounds must be integers, got {index!r}")
        if step < 1:
            raise AudioIndexError(
                f"Slice step must be positive, got {step}", index=index, length=length
            )
        if start < 0 or stop > length or start > stop:
            raise AudioIndexError(
                f"Range {start}:{stop} out of bounds for axis of length {length}",
                index=index,
                length=length,
            )
        return FrameSpan(start, stop, step)

    raise TypeError(
        f"Frames must be indexed by an integer or a slice, got {type(index).__name__}"
    )


def normalize_key(key: Any, length: int, channels: int, ndim: int) -> NormalizedKey:
    """
    Validate an indexing key for an array of the given layout.

    Args:
        key: The key passed to ``__getitem__``.
        length: Number of frames.
        channels: Number of channels.
        ndim: 1 for mono arrays, 2 for multi-channel arrays.

    Returns:
        NormalizedKey ready for reading.

    Raises:
        AudioIndexError: If the key is out of bounds or has too many parts.
    """
    parts = key if isinstance(key, tuple) else (key,)
    if any(part is Ellipsis for part in parts):
        if len(parts) != 1:
            raise TypeError("Ellipsis is only supported on its own")
        parts = (slice(None),)
    if not parts or len(parts) > ndim:
        raise AudioIndexError(
            f"Too many indices for array: array is {ndim}-dimensional, "
            f"but {len(parts)} were indexed",
            index=key,
            length=length,
        )

    frame = resolve_frame(parts[0], length)
    channel: Any = slice(None)
    if len(parts) == 2:
        channel = parts[1]
        c = _as_int(channel)
        if c is not None:
            if c < 0 or c >= channels:
                raise AudioIndexError(
                    f"Channel {c} out of bounds for {channels} channels",
                    index=c,
                    length=channels,
                )
            channel = c
        elif not isinstance(channel, slice):
            raise TypeError(
                "Channels must be indexed by an integer or a slice, "
                f"got {type(channel).__name__}"
            )

    if isinstance(frame, FrameSpan):
        return NormalizedKey(span=frame, scalar_frame=False, channel=channel)
    return NormalizedKey(span=FrameSpan(frame, frame + 1), scalar_frame=True, channel=channel)


def shape_result(block: np.ndarray, key: NormalizedKey, ndim: int) -> Any:
    """
    Turn a decoded (frames, channels) block into the indexed result.

    Mono arrays drop the channel axis. Integer frame keys drop the frame
    axis, so a multi-channel array indexed by one frame yields all
    channels of that frame as a 1-D array.

    Args:
        block: Decoded samples of shape (frames, channels).
        key: The key the block was read for.
        ndim: Dimensionality of the indexed array.

    Returns:
        A numpy scalar or array.
    """
    if ndim == 1:
        data = block[:, 0]
    else:
        data = block[:, key.channel]
    if key.scalar_frame:
        return data[0]
    return data
