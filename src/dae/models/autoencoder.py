"""Two-layer denoising autoencoder with thread-partitioned neuron layers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

import torch
from torch import Tensor
from tqdm.auto import tqdm

from ..core.metrics import mean_squared_error
from ..core.neuron import Neuron
from ..core.parallel import parallel_for
from ..data.patterns import DTYPE, as_batch
from .config import AutoencoderConfig

logger = logging.getLogger(__name__)


@dataclass
class LearnResult:
    """Outcome of :meth:`DenoisingAutoencoder.learn`."""

    converged: bool
    trials: int
    error: float
    error_history: list[float] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.converged:
            return f"Converged after {self.trials} trials (error={self.error:.6f})"
        return f"Did not converge within {self.trials} trials (error={self.error:.6f})"

    def __str__(self) -> str:
        return self.message


class DenoisingAutoencoder:
    """Single hidden layer autoencoder trained to undo input corruption.

    Training propagates the noisy vector through both layers while the error
    is measured against the clean vector. Every layer evaluation and every
    layer update is split into contiguous neuron ranges that run on separate
    worker threads; each worker only writes the slots of its own range.
    """

    def __init__(self, num_input: int, compression_rate: float, **overrides) -> None:
        self.config = AutoencoderConfig(num_input=num_input, compression_rate=compression_rate, **overrides)
        self.input_neuron_num = self.config.num_input
        self.middle_neuron_num = self.config.middle_neuron_num
        self.output_neuron_num = self.config.output_neuron_num
        self.num_thread: int = self.config.num_thread  # type: ignore[assignment]
        self.success = True

        generator = torch.Generator()
        if self.config.seed is not None:
            generator.manual_seed(self.config.seed)
        else:
            generator.seed()
        self.middle_neurons: List[Neuron] = [
            Neuron(
                self.input_neuron_num,
                self.config.middle_layer_type,
                learning_rate=self.config.learning_rate,
                generator=generator,
                dtype=DTYPE,
            )
            for _ in range(self.middle_neuron_num)
        ]
        self.output_neurons: List[Neuron] = [
            Neuron(
                self.middle_neuron_num,
                self.config.output_layer_type,
                learning_rate=self.config.learning_rate,
                generator=generator,
                dtype=DTYPE,
            )
            for _ in range(self.output_neuron_num)
        ]

        self.h = torch.zeros(self.middle_neuron_num, dtype=DTYPE)
        self.o = torch.zeros(self.output_neuron_num, dtype=DTYPE)
        self.learned_h = torch.zeros(self.middle_neuron_num, dtype=DTYPE)
        self.learned_o = torch.zeros(self.output_neuron_num, dtype=DTYPE)

    @classmethod
    def from_config(cls, config: AutoencoderConfig) -> "DenoisingAutoencoder":
        return cls(
            config.num_input,
            config.compression_rate,
            middle_layer_type=config.middle_layer_type,
            output_layer_type=config.output_layer_type,
            max_trial=config.max_trial,
            max_gap=config.max_gap,
            learning_rate=config.learning_rate,
            num_thread=config.num_thread,
            seed=config.seed,
            show_progress=config.show_progress,
        )

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def learn(
        self,
        input: Sequence[Sequence[float]] | Tensor,
        noisy_input: Sequence[Sequence[float]] | Tensor,
    ) -> LearnResult:
        """Train until the reconstruction error drops under ``max_gap``.

        ``input`` holds the clean targets and ``noisy_input`` their corrupted
        counterparts, aligned by index. At most ``max_trial`` update trials
        are performed; running out of trials is reported through the
        returned :class:`LearnResult` and :attr:`success`, not raised.
        """

        clean = as_batch(input, self.input_neuron_num, name="input")
        noisy = as_batch(noisy_input, self.input_neuron_num, name="noisy_input")
        if clean.size(0) != noisy.size(0):
            raise ValueError(
                f"input and noisy_input must have the same length, got {clean.size(0)} and {noisy.size(0)}"
            )

        max_trial = self.config.max_trial
        history: List[float] = []
        trials = 0
        self.success = False
        progress = tqdm(total=max_trial, desc="learn", leave=False) if self.config.show_progress else None
        try:
            while True:
                error = self._learning_error(clean, noisy)
                history.append(error)
                logger.debug("trial %d/%d: error=%.6f", trials, max_trial, error)
                if progress is not None:
                    progress.set_postfix(error=f"{error:.4f}")
                if error < self.config.max_gap:
                    self.success = True
                    break
                if trials >= max_trial:
                    break
                for clean_vec, noisy_vec in zip(clean, noisy):
                    self._learn_sample(clean_vec, noisy_vec)
                trials += 1
                if progress is not None:
                    progress.update(1)
        finally:
            if progress is not None:
                progress.close()

        result = LearnResult(converged=self.success, trials=trials, error=error, error_history=history)
        if self.success:
            logger.info(result.message)
        else:
            logger.warning(result.message)
        return result

    def _learning_error(self, clean: Tensor, noisy: Tensor) -> float:
        total = 0.0
        for clean_vec, noisy_vec in zip(clean, noisy):
            self._forward(noisy_vec, self.learned_h, self.learned_o)
            total += float(torch.sum(mean_squared_error(self.learned_o, clean_vec)))
        return total / clean.numel()

    def _learn_sample(self, clean_vec: Tensor, noisy_vec: Tensor) -> None:
        self._forward(noisy_vec, self.learned_h, self.learned_o)
        output_weights = torch.stack([neuron.weights for neuron in self.output_neurons])
        deltas = torch.zeros(self.output_neuron_num, dtype=DTYPE)
        learned_h = self.learned_h.clone()

        def out_learn(begin: int, end: int) -> None:
            for k in range(begin, end):
                deltas[k] = self.output_neurons[k].update(learned_h, float(clean_vec[k]))

        parallel_for(self.output_neuron_num, self.num_thread, out_learn)

        errors = deltas @ output_weights

        def middle_learn(begin: int, end: int) -> None:
            for j in range(begin, end):
                self.middle_neurons[j].backpropagate(noisy_vec, float(errors[j]))

        parallel_for(self.middle_neuron_num, self.num_thread, middle_learn)

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def out(self, input: Sequence[float] | Tensor, show_result: bool = False) -> Tensor:
        """Reconstruct ``input``; ``show_result`` logs the layer outputs."""

        x = self._as_vector(input)
        self._forward(x, self.h, self.o)
        if show_result:
            logger.info("middle output: %s", self.h.tolist())
            logger.info("reconstruction: %s", self.o.tolist())
        return self.o.clone()

    def get_middle_output(self, noisy_input: Sequence[Sequence[float]] | Tensor) -> Tensor:
        """Middle-layer representation of every vector in ``noisy_input``."""

        batch = as_batch(noisy_input, self.input_neuron_num, name="noisy_input")
        middle = torch.empty(batch.size(0), self.middle_neuron_num, dtype=DTYPE)
        for index, x in enumerate(batch):
            self._middle_forward(x, self.h)
            middle[index] = self.h
        return middle

    def get_current_middle_neuron_num(self) -> int:
        return self.middle_neuron_num

    def _forward(self, x: Tensor, h: Tensor, o: Tensor) -> None:
        self._middle_forward(x, h)

        def out_forward(begin: int, end: int) -> None:
            for k in range(begin, end):
                o[k] = self.output_neurons[k].output(h)

        parallel_for(self.output_neuron_num, self.num_thread, out_forward)

    def _middle_forward(self, x: Tensor, h: Tensor) -> None:
        def middle_forward(begin: int, end: int) -> None:
            for j in range(begin, end):
                h[j] = self.middle_neurons[j].output(x)

        parallel_for(self.middle_neuron_num, self.num_thread, middle_forward)

    def _as_vector(self, values: Sequence[float] | Tensor) -> Tensor:
        x = torch.as_tensor(values, dtype=DTYPE)
        if x.shape != (self.input_neuron_num,):
            raise ValueError(
                f"Expected a vector of length {self.input_neuron_num}, got shape {tuple(x.shape)}"
            )
        return x


__all__ = ["DenoisingAutoencoder", "LearnResult"]
