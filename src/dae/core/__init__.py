"""Core building blocks: activations, neurons, metrics and thread fan-out."""

from .activations import ActivationType, activate, derivative
from .metrics import mean_squared_error, reconstruction_error
from .neuron import Neuron
from .parallel import default_num_threads, parallel_for, partition

__all__ = [
    "ActivationType",
    "Neuron",
    "activate",
    "default_num_threads",
    "derivative",
    "mean_squared_error",
    "parallel_for",
    "partition",
    "reconstruction_error",
]
