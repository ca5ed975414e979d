"""
Simulation: run shuffles over many decks and measure them.

Restoration counts come from actually shuffling until the deck is sorted again;
permutation_order gives the same number from the cycle structure, so one can
check the other.
"""

from __future__ import annotations

import math
from collections import Counter
from itertools import permutations
from typing import Iterable, Optional

from scipy import stats

from shuffler import CardShuffler, ShuffleKind


def permutation_of(kind: ShuffleKind, size: int) -> list[int]:
    """Where each position's item comes from after one shuffle of a canonical deck."""
    if kind.is_random:
        raise ValueError(f"{kind.value} is randomized; it has no fixed permutation")
    shuffler = CardShuffler(seed=0)
    if not shuffler.generate(size):
        raise ValueError(f"deck size {size} is too small")
    shuffler.apply(kind)
    return shuffler.get_deck()


def cycle_lengths(perm: list[int]) -> list[int]:
    seen = [False] * len(perm)
    lengths: list[int] = []
    for start in range(len(perm)):
        if seen[start]:
            continue
        length = 0
        i = start
        while not seen[i]:
            seen[i] = True
            i = perm[i]
            length += 1
        lengths.append(length)
    return lengths


def permutation_order(kind: ShuffleKind, size: int) -> int:
    """Number of shuffles that bring a deck back: lcm of the cycle lengths."""
    return math.lcm(*cycle_lengths(permutation_of(kind, size)))


def restoration_counts(kind: ShuffleKind, sizes: Iterable[int]) -> dict[int, int]:
    """Deck size -> shuffles needed to restore it, measured by shuffling."""
    shuffler = CardShuffler()
    counts: dict[int, int] = {}
    for size in sizes:
        if not shuffler.generate(size):
            continue
        counts[size] = shuffler.restore_to_identity(kind)
    return counts


def permutation_frequencies(
    kind: ShuffleKind,
    size: int,
    runs: int,
    *,
    seed: Optional[int] = None,
) -> Counter[tuple[int, ...]]:
    """Shuffle a fresh canonical deck `runs` times and count each arrangement seen."""
    shuffler = CardShuffler(seed=seed)
    if not shuffler.generate(size):
        raise ValueError(f"deck size {size} is too small")
    counts: Counter[tuple[int, ...]] = Counter()
    for _ in range(runs):
        shuffler.reset()
        shuffler.apply(kind)
        counts[tuple(shuffler.get_deck())] += 1
    return counts


def uniformity_test(frequencies: Counter[tuple[int, ...]], size: int) -> tuple[float, float]:
    """
    Chi-square goodness of fit against all size! arrangements being equally likely.

    Arrangements never seen count as zero. Returns (statistic, p-value).
    """
    observed = [frequencies.get(p, 0) for p in permutations(range(size))]
    result = stats.chisquare(observed)
    return float(result.statistic), float(result.pvalue)
