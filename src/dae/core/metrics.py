"""Reconstruction error metrics."""
from __future__ import annotations

from typing import Union

import torch
from torch import Tensor

Number = Union[float, Tensor]


def mean_squared_error(output: Number, answer: Number) -> Number:
    """Squared difference between a produced value and its answer.

    Works on scalars as well as elementwise on tensors.
    """

    return (output - answer) ** 2


def reconstruction_error(outputs: Tensor, targets: Tensor) -> float:
    """Mean of :func:`mean_squared_error` across every sample and dimension."""

    if outputs.shape != targets.shape:
        raise ValueError(
            f"Shape mismatch: outputs {tuple(outputs.shape)} vs targets {tuple(targets.shape)}"
        )
    if outputs.numel() == 0:
        raise ValueError("Cannot compute the error of an empty batch")
    return float(torch.mean(mean_squared_error(outputs, targets)))


__all__ = ["mean_squared_error", "reconstruction_error"]
