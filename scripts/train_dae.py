#!/usr/bin/env python3
"""Train a (stacked) denoising autoencoder on toy block patterns."""
from __future__ import annotations

import argparse
import logging
from typing import List

import torch

from dae.core.activations import ActivationType
from dae.data.noise import gaussian_noise, masking_noise
from dae.data.patterns import block_patterns
from dae.models.stacked import StackedDenoisingAutoencoder


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--num-input", type=int, default=8)
    p.add_argument("--blocks", type=int, default=2)
    p.add_argument("--repeat", type=int, default=4)
    p.add_argument("--rates", type=float, nargs="+", default=[0.5])
    p.add_argument("--activation", choices=[kind.name.lower() for kind in ActivationType], default="identity")
    p.add_argument("--noise", choices=["none", "masking", "gaussian"], default="none")
    p.add_argument("--noise-level", type=float, default=0.1)
    p.add_argument("--learning-rate", type=float, default=0.1)
    p.add_argument("--max-trial", type=int, default=300)
    p.add_argument("--max-gap", type=float, default=0.1)
    p.add_argument("--threads", type=int, default=None)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--progress", action="store_true")
    p.add_argument("--plot", type=str, default=None, help="Save the first stage's error curve to this path")
    p.add_argument("--log-level", default="INFO")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    generator = torch.Generator().manual_seed(args.seed)

    clean = block_patterns(args.num_input, args.blocks, repeat=args.repeat)
    if args.noise == "masking":
        noisy = masking_noise(clean, args.noise_level, generator=generator)
    elif args.noise == "gaussian":
        noisy = gaussian_noise(clean, args.noise_level, generator=generator)
    else:
        noisy = clean.clone()

    model = StackedDenoisingAutoencoder(
        args.num_input,
        args.rates,
        middle_layer_type=args.activation,
        learning_rate=args.learning_rate,
        max_trial=args.max_trial,
        max_gap=args.max_gap,
        num_thread=args.threads,
        seed=args.seed,
        show_progress=args.progress,
    )
    results = model.learn(clean, noisy)
    summary: List[dict] = [
        {"stage": index, "converged": result.converged, "trials": result.trials, "error": round(result.error, 6)}
        for index, result in enumerate(results)
    ]
    for row in summary:
        print(row)
    print({"encoded_shape": tuple(model.encode(clean).shape)})

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from dae.utils.visualization import plot_error_history

        fig = plot_error_history(results[0].error_history, tolerance=args.max_gap)
        fig.savefig(args.plot)


if __name__ == "__main__":
    main()
