"""Configuration dataclasses for the denoising autoencoder."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.activations import ActivationType
from ..core.parallel import default_num_threads

MAX_TRIAL = 300
MAX_GAP = 0.1


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(slots=True)
class AutoencoderConfig:
    """Configuration controlling the autoencoder shape and training loop.

    Parameters
    ----------
    num_input:
        Number of features in every input vector. The output layer has the
        same width because the network reconstructs its input.
    compression_rate:
        Fraction of ``num_input`` used as the middle-layer width, in
        ``(0, 1]``. The width is rounded half-up and must be at least one.
    middle_layer_type:
        Activation used by middle neurons. Accepts an
        :class:`ActivationType`, its integer code or its name.
    output_layer_type:
        Activation used by output neurons. Identity by default so that
        reconstructions are not range-limited.
    max_trial:
        Upper bound on the number of update trials performed by ``learn``.
    max_gap:
        Aggregate mean squared error under which training counts as
        converged.
    learning_rate:
        Step size used by every neuron's local update.
    num_thread:
        Number of workers per fan-out. ``None`` resolves to the number of
        processing units reported by the host.
    seed:
        Optional seed for weight initialisation.
    show_progress:
        Display a progress bar over training trials.
    """

    num_input: int
    compression_rate: float
    middle_layer_type: ActivationType = ActivationType.IDENTITY
    output_layer_type: ActivationType = ActivationType.IDENTITY
    max_trial: int = MAX_TRIAL
    max_gap: float = MAX_GAP
    learning_rate: float = 0.1
    num_thread: int | None = None
    seed: int | None = None
    show_progress: bool = False

    def __post_init__(self) -> None:
        if self.num_input <= 0:
            raise ValueError("num_input must be positive")
        if not 0.0 < self.compression_rate <= 1.0:
            raise ValueError("compression_rate must be in (0, 1]")
        if self.middle_neuron_num < 1:
            raise ValueError(
                f"compression_rate {self.compression_rate} leaves no middle neurons "
                f"for num_input={self.num_input}"
            )
        self.middle_layer_type = ActivationType.parse(self.middle_layer_type)
        self.output_layer_type = ActivationType.parse(self.output_layer_type)
        if self.max_trial <= 0:
            raise ValueError("max_trial must be positive")
        if self.max_gap <= 0:
            raise ValueError("max_gap must be positive")
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if self.num_thread is None:
            self.num_thread = default_num_threads()
        elif self.num_thread <= 0:
            raise ValueError("num_thread must be positive")

    @property
    def middle_neuron_num(self) -> int:
        return round_half_up(self.num_input * self.compression_rate)

    @property
    def output_neuron_num(self) -> int:
        return self.num_input


__all__ = ["AutoencoderConfig", "MAX_GAP", "MAX_TRIAL", "round_half_up"]
