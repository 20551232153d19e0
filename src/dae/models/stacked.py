"""Greedy layer-wise stack of denoising autoencoders."""
from __future__ import annotations

import logging
from typing import List, Sequence

from torch import Tensor

from ..data.patterns import as_batch
from .autoencoder import DenoisingAutoencoder, LearnResult

logger = logging.getLogger(__name__)


class StackedDenoisingAutoencoder:
    """Chain of :class:`DenoisingAutoencoder` stages.

    Stage ``i + 1`` consumes the middle-layer output of stage ``i``. Stages
    are trained one after the other; a stage never updates its predecessors.
    Keyword overrides are forwarded to every stage.
    """

    def __init__(self, num_input: int, compression_rates: Sequence[float], **overrides) -> None:
        if not compression_rates:
            raise ValueError("compression_rates must contain at least one rate")
        seed = overrides.pop("seed", None)
        self.stages: List[DenoisingAutoencoder] = []
        width = num_input
        for index, rate in enumerate(compression_rates):
            stage_seed = None if seed is None else seed + index
            stage = DenoisingAutoencoder(width, rate, seed=stage_seed, **overrides)
            self.stages.append(stage)
            width = stage.get_current_middle_neuron_num()
        self.num_input = num_input

    @property
    def output_size(self) -> int:
        return self.stages[-1].get_current_middle_neuron_num()

    def learn(
        self,
        input: Sequence[Sequence[float]] | Tensor,
        noisy_input: Sequence[Sequence[float]] | Tensor,
    ) -> List[LearnResult]:
        """Train every stage in order and return their results."""

        clean = as_batch(input, self.num_input, name="input")
        noisy = as_batch(noisy_input, self.num_input, name="noisy_input")
        results: List[LearnResult] = []
        for index, stage in enumerate(self.stages):
            result = stage.learn(clean, noisy)
            logger.info("stage %d: %s", index, result.message)
            results.append(result)
            if index + 1 < len(self.stages):
                clean = stage.get_middle_output(clean)
                noisy = stage.get_middle_output(noisy)
        return results

    @property
    def success(self) -> bool:
        return all(stage.success for stage in self.stages)

    def encode(self, batch: Sequence[Sequence[float]] | Tensor) -> Tensor:
        """Representation produced by the last stage for ``batch``."""

        encoded = as_batch(batch, self.num_input)
        for stage in self.stages:
            encoded = stage.get_middle_output(encoded)
        return encoded

    def __len__(self) -> int:
        return len(self.stages)


__all__ = ["StackedDenoisingAutoencoder"]
