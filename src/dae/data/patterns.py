"""Batch conversion and toy pattern sets."""
from __future__ import annotations

from typing import Sequence

import torch
from torch import Tensor

DTYPE = torch.float64


def as_batch(vectors: Sequence[Sequence[float]] | Tensor, width: int, *, name: str = "batch") -> Tensor:
    """Convert ``vectors`` into a ``(n, width)`` tensor, rejecting bad shapes."""

    if not isinstance(vectors, Tensor):
        if len(vectors) == 0:
            raise ValueError(f"{name} must not be empty")
        if isinstance(vectors[0], Tensor):
            try:
                vectors = torch.stack([torch.as_tensor(v, dtype=DTYPE) for v in vectors])
            except RuntimeError as exc:
                raise ValueError(f"{name} vectors must share one length: {exc}") from exc
    batch = torch.as_tensor(vectors, dtype=DTYPE)
    if batch.dim() != 2:
        raise ValueError(f"{name} must be a sequence of vectors, got shape {tuple(batch.shape)}")
    if batch.size(0) == 0:
        raise ValueError(f"{name} must not be empty")
    if batch.size(1) != width:
        raise ValueError(f"{name} vectors must have length {width}, got {batch.size(1)}")
    return batch


def block_patterns(num_input: int, num_blocks: int, *, repeat: int = 1) -> Tensor:
    """Patterns lighting one contiguous block of ``num_input // num_blocks`` features each.

    The last block absorbs any remainder. The ``num_blocks`` patterns are
    repeated ``repeat`` times, giving ``num_blocks * repeat`` rows.
    """

    if num_blocks <= 0 or num_blocks > num_input:
        raise ValueError("num_blocks must be in [1, num_input]")
    if repeat <= 0:
        raise ValueError("repeat must be positive")
    width = num_input // num_blocks
    patterns = torch.zeros(num_blocks, num_input, dtype=DTYPE)
    for block in range(num_blocks):
        begin = block * width
        end = num_input if block == num_blocks - 1 else begin + width
        patterns[block, begin:end] = 1.0
    return patterns.repeat(repeat, 1)


__all__ = ["DTYPE", "as_batch", "block_patterns"]
