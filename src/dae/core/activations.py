"""Activation functions available to neurons."""
from __future__ import annotations

from enum import IntEnum

import torch
from torch import Tensor


class ActivationType(IntEnum):
    """Activation selector; integer values follow the historic layer codes."""

    IDENTITY = 0
    SIGMOID = 1
    TANH = 2
    RELU = 3

    @classmethod
    def parse(cls, value: "ActivationType | int | str") -> "ActivationType":
        """Resolve an enum member from a member, its code or its name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key == "RECTIFIED_LINEAR":
                key = "RELU"
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown activation type: {value!r}") from None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown activation type: {value!r}") from None


def activate(kind: ActivationType, net: Tensor) -> Tensor:
    """Apply the activation ``kind`` to the pre-activation ``net``."""

    if kind is ActivationType.IDENTITY:
        return net
    if kind is ActivationType.SIGMOID:
        return torch.sigmoid(net)
    if kind is ActivationType.TANH:
        return torch.tanh(net)
    if kind is ActivationType.RELU:
        return torch.clamp(net, min=0.0)
    raise ValueError(f"Unknown activation type: {kind!r}")


def derivative(kind: ActivationType, net: Tensor, activated: Tensor) -> Tensor:
    """Derivative of the activation at ``net``; ``activated`` is ``activate(kind, net)``."""

    if kind is ActivationType.IDENTITY:
        return torch.ones_like(net)
    if kind is ActivationType.SIGMOID:
        return activated * (1.0 - activated)
    if kind is ActivationType.TANH:
        return 1.0 - activated * activated
    if kind is ActivationType.RELU:
        return (net > 0).to(net.dtype)
    raise ValueError(f"Unknown activation type: {kind!r}")


__all__ = ["ActivationType", "activate", "derivative"]
