"""Plotting utilities for training convergence."""

from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt


def plot_error_history(errors: Sequence[float], tolerance: Optional[float] = None):
    """Plot the reconstruction error recorded at every training trial."""

    fig = plt.figure()
    plt.plot(range(1, len(errors) + 1), errors, label="error")
    if tolerance is not None:
        plt.axhline(tolerance, linestyle="--", color="gray", label="tolerance")
        plt.legend()
    plt.xlabel("Trial")
    plt.ylabel("Mean squared error")
    plt.title("Reconstruction Error")
    plt.tight_layout()
    return fig
