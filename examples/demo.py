#!/usr/bin/env python3
"""
Demo of multinomial sampling.

Draws repeated samples and compares each category's empirical share of
the draws with its normalized weight.

Usage:
    python3 examples/demo.py --n 1000 --weights 0.3 0.3 0.4 --samples 2000 --seed 7
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from distr import Params


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Multinomial sampling demo")
    parser.add_argument("--n", type=int, default=1000, help="draws per sample")
    parser.add_argument(
        "--weights", type=float, nargs="+", default=[0.3, 0.3, 0.4],
        help="raw category weights",
    )
    parser.add_argument("--samples", type=int, default=2000, help="number of samples")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible run")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = Params(n=args.n, weights=tuple(args.weights),
                        num_samples=args.samples, seed=args.seed)
        dist = params.build()
    except ValueError as e:
        # MultinomialError included
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("=" * 60)
    print("Multinomial Sampling Demo")
    print("=" * 60)
    print(f"\nParameters: {params}")

    rng = params.rng()
    totals = [0] * dist.num_categories
    start = time.time()
    for _, counts in zip(range(params.num_samples), dist.sample_iter(rng)):
        for i, c in enumerate(counts):
            totals[i] += c
    elapsed = time.time() - start

    draws = params.n * params.num_samples
    print(f"\n{'category':>8}  {'weight':>8}  {'empirical':>9}")
    for i, (w, t) in enumerate(zip(dist.weights, totals)):
        share = t / draws if draws else 0.0
        print(f"{i:>8}  {w:>8.4f}  {share:>9.4f}")

    print(f"\n{params.num_samples} samples in {elapsed*1000:.2f}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
