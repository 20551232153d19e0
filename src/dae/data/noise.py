"""Corruption processes used to build noisy training inputs."""
from __future__ import annotations

from typing import Optional, Sequence

import torch
from torch import Tensor

from .patterns import DTYPE


def _to_tensor(batch: Sequence[Sequence[float]] | Tensor) -> Tensor:
    return torch.as_tensor(batch, dtype=DTYPE).clone()


def masking_noise(
    batch: Sequence[Sequence[float]] | Tensor,
    rate: float,
    generator: Optional[torch.Generator] = None,
) -> Tensor:
    """Zero each element independently with probability ``rate``."""

    if not 0.0 <= rate <= 1.0:
        raise ValueError("rate must be in [0, 1]")
    corrupted = _to_tensor(batch)
    mask = torch.rand(corrupted.shape, generator=generator, dtype=DTYPE) < rate
    corrupted[mask] = 0.0
    return corrupted


def gaussian_noise(
    batch: Sequence[Sequence[float]] | Tensor,
    std: float,
    generator: Optional[torch.Generator] = None,
) -> Tensor:
    """Add zero-mean Gaussian noise with standard deviation ``std``."""

    if std < 0.0:
        raise ValueError("std must be non-negative")
    corrupted = _to_tensor(batch)
    if std == 0.0:
        return corrupted
    return corrupted + std * torch.randn(corrupted.shape, generator=generator, dtype=DTYPE)


def salt_and_pepper_noise(
    batch: Sequence[Sequence[float]] | Tensor,
    rate: float,
    *,
    low: float = 0.0,
    high: float = 1.0,
    generator: Optional[torch.Generator] = None,
) -> Tensor:
    """Replace a ``rate`` fraction of elements by ``low`` or ``high`` with equal odds."""

    if not 0.0 <= rate <= 1.0:
        raise ValueError("rate must be in [0, 1]")
    corrupted = _to_tensor(batch)
    hit = torch.rand(corrupted.shape, generator=generator, dtype=DTYPE) < rate
    salt = torch.rand(corrupted.shape, generator=generator, dtype=DTYPE) < 0.5
    corrupted[hit & salt] = high
    corrupted[hit & ~salt] = low
    return corrupted


__all__ = ["gaussian_noise", "masking_noise", "salt_and_pepper_noise"]
