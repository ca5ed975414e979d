#!/usr/bin/env python3
"""
Benchmark the randomized shuffles for uniformity.

Shuffles a small canonical deck many times with each randomized kind, counts how often
every arrangement comes up, and runs a chi-square test against the uniform distribution.
"""

from __future__ import annotations

import argparse
import math
from pathlib import Path

import matplotlib.pyplot as plt

from deck import MIN_DECK_SIZE
from logging_utils import setup_logging
from shuffler import ShuffleKind
from simulation import permutation_frequencies, uniformity_test

NUM_RUNS_DEFAULT = 60_000
SIZE_DEFAULT = 4
MAX_SIZE = 7  # 5040 arrangements
ALPHA = 0.01


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Chi-square uniformity test for the randomized shuffles.",
    )
    p.add_argument(
        "-n",
        "--size",
        type=int,
        default=SIZE_DEFAULT,
        metavar="N",
        help=f"Deck size (default: {SIZE_DEFAULT})",
    )
    p.add_argument(
        "-r",
        "--runs",
        type=int,
        default=NUM_RUNS_DEFAULT,
        metavar="N",
        help=f"Number of shuffles per kind (default: {NUM_RUNS_DEFAULT})",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the random engine")
    p.add_argument("--no-show", action="store_true", help="Save the plot without opening a window")
    args = p.parse_args()
    if not MIN_DECK_SIZE <= args.size <= MAX_SIZE:
        p.error(f"--size must be between {MIN_DECK_SIZE} and {MAX_SIZE}")
    if args.runs < 1:
        p.error("--runs must be positive")
    return args


def main() -> None:
    setup_logging()
    args = parse_args()
    kinds = [k for k in ShuffleKind if k.is_random]
    n_arrangements = math.factorial(args.size)
    expected = args.runs / n_arrangements

    print(f"Uniformity: {args.runs} shuffles of a {args.size}-item deck ({n_arrangements} arrangements)")
    print(f"  Expected count per arrangement: {expected:.1f}\n")

    fig, axes = plt.subplots(1, len(kinds), figsize=(10, 4), sharey=True)
    for ax, kind in zip(axes, kinds):
        freqs = permutation_frequencies(kind, args.size, args.runs, seed=args.seed)
        chi2, p_value = uniformity_test(freqs, args.size)
        verdict = "consistent with uniform" if p_value >= ALPHA else "NOT uniform"
        print(f"{kind.value}:")
        print(f"  Arrangements seen: {len(freqs)} / {n_arrangements}")
        print(f"  Chi-square = {chi2:.2f}, p = {p_value:.4f} ({verdict} at alpha={ALPHA})")

        counts = sorted(freqs.values())
        ax.bar(range(len(counts)), counts, width=1.0, edgecolor="black", alpha=0.8)
        ax.axhline(expected, color="red", linestyle="--", label=f"Expected = {expected:.1f}")
        ax.set_xlabel("Arrangement (sorted by count)")
        ax.set_ylabel("Count")
        ax.set_title(f"{kind.value} (n={args.runs})\nχ² = {chi2:.1f}, p = {p_value:.3f}")
        ax.legend()

    plt.tight_layout()
    out_path = Path(__file__).resolve().parent / f"uniformity_{args.size}.png"
    plt.savefig(out_path, dpi=150)
    print(f"\nPlots saved to {out_path}")
    if not args.no_show:
        plt.show()


if __name__ == "__main__":
    main()
