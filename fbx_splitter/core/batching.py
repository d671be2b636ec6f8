"""Partitioning of the candidate list into bounded output batches."""

from __future__ import annotations

import os
from typing import List

from ..models import DEFAULT_BATCH_SIZE, Chunk
from .exceptions import ConfigurationError

BATCH_INDEX_WIDTH = 7


def batch_output_path(output_path: str, start: int) -> str:
    """Insert ``_<start>`` (zero padded) between the stem and the extension.

    ``out/scene.fbx`` with ``start=5000`` becomes ``out/scene_0005000.fbx``.
    """

    base, extension = os.path.splitext(output_path)
    return f"{base}_{start:0{BATCH_INDEX_WIDTH}d}{extension}"


def plan_chunks(
    count: int,
    output_path: str,
    *,
    max_size: int = DEFAULT_BATCH_SIZE,
    split: bool = False,
) -> List[Chunk]:
    """Return the chunks covering ``count`` candidates, in order.

    Without ``split`` there is always exactly one chunk written to
    ``output_path`` unchanged. With ``split`` every chunk holds at most
    ``max_size`` candidates and an empty candidate list yields no chunks.
    """

    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
        raise ConfigurationError(f"Batch size must be a positive integer, got {max_size!r}")
    if count < 0:
        raise ConfigurationError(f"Candidate count cannot be negative, got {count}")

    if not split:
        return [Chunk(index=0, start=0, end=count, output_path=output_path)]

    chunks: List[Chunk] = []
    for index, start in enumerate(range(0, count, max_size)):
        end = min(start + max_size, count)
        chunks.append(
            Chunk(
                index=index,
                start=start,
                end=end,
                output_path=batch_output_path(output_path, start),
            )
        )
    return chunks
