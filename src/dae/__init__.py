"""Denoising autoencoder engine.

This package provides a two-layer denoising autoencoder whose neuron
computations are fanned out across worker threads, together with:
- a stacked pipeline that chains autoencoder stages greedily,
- corruption helpers for producing noisy training inputs, and
- small plotting utilities for the training error curve.
"""

__all__ = [
    "core",
    "data",
    "models",
    "utils",
]
