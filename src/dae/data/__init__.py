"""Input batches, toy patterns and corruption helpers."""

from .noise import gaussian_noise, masking_noise, salt_and_pepper_noise
from .patterns import DTYPE, as_batch, block_patterns

__all__ = [
    "DTYPE",
    "as_batch",
    "block_patterns",
    "gaussian_noise",
    "masking_noise",
    "salt_and_pepper_noise",
]
