#!/usr/bin/env python3
"""
CLI for the card shuffler: build a deck, shuffle it, or count shuffles to restore it.

uv run main.py --size 52 --kind out --restore
uv run main.py --size 10 --kind in --times 3
"""

from __future__ import annotations

import argparse

from deck import MIN_DECK_SIZE
from logging_utils import setup_logging
from shuffler import CardShuffler, DeckNotRestoredError, ShuffleKind

DEFAULT_SIZE = 52
DEFAULT_KIND = ShuffleKind.OUTSHUFFLE
DEFAULT_TIMES = 1


def print_deck(label: str, cards: list) -> None:
    print(f"  {label}: {' '.join(str(c) for c in cards)}")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Shuffle a deck of 0..N-1 and track when it returns to sorted order.",
    )
    p.add_argument(
        "-n",
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        metavar="N",
        help=f"Number of items in the deck (default: {DEFAULT_SIZE})",
    )
    p.add_argument(
        "-k",
        "--kind",
        type=ShuffleKind,
        default=DEFAULT_KIND,
        choices=list(ShuffleKind),
        metavar="KIND",
        help=f"Shuffle kind: {', '.join(k.value for k in ShuffleKind)} (default: {DEFAULT_KIND.value})",
    )
    p.add_argument(
        "-t",
        "--times",
        type=int,
        default=DEFAULT_TIMES,
        metavar="N",
        help=f"Number of shuffles to apply (default: {DEFAULT_TIMES})",
    )
    p.add_argument(
        "-r",
        "--restore",
        action="store_true",
        help="Shuffle until the deck is sorted again and report how many shuffles it took",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the randomized shuffles")
    p.add_argument(
        "--max-shuffles",
        type=int,
        default=None,
        metavar="N",
        help="Give up restoring after N shuffles",
    )
    args = p.parse_args()
    if args.size < MIN_DECK_SIZE:
        p.error(f"--size must be at least {MIN_DECK_SIZE}")
    if args.times < 0:
        p.error("--times must not be negative")
    if args.max_shuffles is not None and args.max_shuffles < 1:
        p.error("--max-shuffles must be positive")
    return args


def main() -> None:
    setup_logging()
    args = parse_args()
    shuffler = CardShuffler(seed=args.seed)
    shuffler.generate(args.size)
    kind = args.kind

    print(f"=== {args.size}-item deck, {kind.value} shuffle (seed {shuffler.seed}) ===\n")
    print_deck("Start", shuffler.get_deck())

    if args.restore:
        try:
            count = shuffler.restore_to_identity(kind, max_shuffles=args.max_shuffles)
        except DeckNotRestoredError as e:
            raise SystemExit(f"Gave up: {e}")
        print(f"\nRestored after {count} shuffle(s).")
        return

    for i in range(1, args.times + 1):
        shuffler.apply(kind)
        print_deck(f"#{i}", shuffler.get_deck())
    print(f"\nRestored: {'yes' if shuffler.is_restored() else 'no'}")


if __name__ == "__main__":
    main()
