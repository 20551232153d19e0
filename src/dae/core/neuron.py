"""Single neuron with a local delta-rule update."""
from __future__ import annotations

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from .activations import ActivationType, activate, derivative


class Neuron:
    """One computational unit owning a weight vector over its inputs.

    Weights are drawn uniformly from ``[-1/sqrt(fan_in), 1/sqrt(fan_in)]`` and
    the bias starts at zero. ``output`` never mutates state; ``update`` and
    ``backpropagate`` each perform exactly one weight step and return the
    local delta so that callers can propagate it further.
    """

    def __init__(
        self,
        num_input: int,
        activation: ActivationType | int | str = ActivationType.IDENTITY,
        *,
        learning_rate: float = 0.1,
        generator: Optional[torch.Generator] = None,
        dtype: torch.dtype = torch.float64,
    ) -> None:
        if num_input <= 0:
            raise ValueError("num_input must be positive")
        if learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        self.num_input = num_input
        self.activation = ActivationType.parse(activation)
        self.learning_rate = learning_rate
        limit = 1.0 / math.sqrt(num_input)
        self._weights = (torch.rand(num_input, generator=generator, dtype=dtype) * 2.0 - 1.0) * limit
        self._bias = torch.zeros((), dtype=dtype)

    @property
    def weights(self) -> Tensor:
        return self._weights.clone()

    @property
    def bias(self) -> float:
        return float(self._bias)

    def output(self, x: Tensor) -> float:
        """Return the activated response to ``x``."""

        _, activated = self._forward(x)
        return float(activated)

    def update(self, x: Tensor, target: float) -> float:
        """Move the output for ``x`` one step towards ``target``."""

        net, activated = self._forward(x)
        delta = (target - activated) * derivative(self.activation, net, activated)
        self._apply(x, delta)
        return float(delta)

    def backpropagate(self, x: Tensor, error: float) -> float:
        """Take one step for a hidden unit given the error signal from above."""

        net, activated = self._forward(x)
        delta = error * derivative(self.activation, net, activated)
        self._apply(x, delta)
        return float(delta)

    def _forward(self, x: Tensor) -> Tuple[Tensor, Tensor]:
        if x.shape != self._weights.shape:
            raise ValueError(
                f"Expected input of length {self.num_input}, got shape {tuple(x.shape)}"
            )
        net = torch.dot(self._weights, x) + self._bias
        return net, activate(self.activation, net)

    def _apply(self, x: Tensor, delta: Tensor) -> None:
        step = self.learning_rate * float(delta)
        self._weights.add_(x, alpha=step)
        self._bias.add_(step)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"Neuron(num_input={self.num_input}, activation={self.activation.name.lower()}, "
            f"learning_rate={self.learning_rate})"
        )


__all__ = ["Neuron"]
