#!/usr/bin/env python3
"""
Benchmark: how many perfect riffle shuffles restore a deck, for a range of deck sizes.

Each count is measured by shuffling until the deck is sorted, then checked against
the order computed from the permutation's cycles.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from deck import MIN_DECK_SIZE
from logging_utils import setup_logging
from shuffler import RIFFLE_KINDS, ShuffleKind
from simulation import permutation_order, restoration_counts

MIN_SIZE_DEFAULT = MIN_DECK_SIZE
MAX_SIZE_DEFAULT = 64
HIGHLIGHT_SIZE = 52


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Shuffles needed to restore a deck with each riffle shuffle, by deck size.",
    )
    p.add_argument(
        "--min-size",
        type=int,
        default=MIN_SIZE_DEFAULT,
        metavar="N",
        help=f"Smallest deck size (default: {MIN_SIZE_DEFAULT})",
    )
    p.add_argument(
        "--max-size",
        type=int,
        default=MAX_SIZE_DEFAULT,
        metavar="N",
        help=f"Largest deck size (default: {MAX_SIZE_DEFAULT})",
    )
    p.add_argument("--no-show", action="store_true", help="Save the plot without opening a window")
    args = p.parse_args()
    if args.min_size < MIN_DECK_SIZE:
        p.error(f"--min-size must be at least {MIN_DECK_SIZE}")
    if args.max_size < args.min_size:
        p.error("--max-size must not be below --min-size")
    return args


def main() -> None:
    setup_logging()
    args = parse_args()
    sizes = range(args.min_size, args.max_size + 1)

    counts_by_kind: dict[ShuffleKind, dict[int, int]] = {}
    for kind in RIFFLE_KINDS:
        counts = restoration_counts(kind, sizes)
        mismatched = [n for n, c in counts.items() if c != permutation_order(kind, n)]
        if mismatched:
            raise SystemExit(f"{kind.value}: restore count disagrees with cycle order for sizes {mismatched}")
        counts_by_kind[kind] = counts

    print(f"Shuffles to restore, deck sizes {args.min_size}..{args.max_size}\n")
    header = "  size " + "".join(f"{k.value:>9}" for k in RIFFLE_KINDS)
    print(header)
    for n in sizes:
        print(f"  {n:>4} " + "".join(f"{counts_by_kind[k][n]:>9}" for k in RIFFLE_KINDS))

    if args.min_size <= HIGHLIGHT_SIZE <= args.max_size:
        print(f"\n  {HIGHLIGHT_SIZE}-card deck:")
        for kind in RIFFLE_KINDS:
            print(f"    {kind.value}: {counts_by_kind[kind][HIGHLIGHT_SIZE]}")

    fig, axes = plt.subplots(1, 2, figsize=(10, 4), sharey=True)
    for ax, pair in zip(axes, [(ShuffleKind.OUTSHUFFLE, ShuffleKind.INV_OUTSHUFFLE),
                               (ShuffleKind.INSHUFFLE, ShuffleKind.INV_INSHUFFLE)]):
        forward, inverse = pair
        xs = list(counts_by_kind[forward])
        ax.plot(xs, [counts_by_kind[forward][n] for n in xs], marker="o", markersize=3, label=forward.value)
        ax.plot(xs, [counts_by_kind[inverse][n] for n in xs], linestyle="--", color="red", label=inverse.value)
        ax.set_xlabel("Deck size")
        ax.set_ylabel("Shuffles to restore")
        ax.set_title(f"{forward.value} vs {inverse.value}")
        ax.legend()

    plt.tight_layout()
    out_path = Path(__file__).resolve().parent / f"restore_counts_{args.min_size}_{args.max_size}.png"
    plt.savefig(out_path, dpi=150)
    print(f"\nPlot saved to {out_path}")
    if not args.no_show:
        plt.show()


if __name__ == "__main__":
    main()
