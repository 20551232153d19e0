"""Autoencoder models and their configuration."""

from .autoencoder import DenoisingAutoencoder, LearnResult
from .config import MAX_GAP, MAX_TRIAL, AutoencoderConfig
from .stacked import StackedDenoisingAutoencoder

__all__ = [
    "AutoencoderConfig",
    "DenoisingAutoencoder",
    "LearnResult",
    "MAX_GAP",
    "MAX_TRIAL",
    "StackedDenoisingAutoencoder",
]
