"""Tests for the simulation helpers: cycle-based orders and the uniformity check."""

import math

import pytest

from shuffler import RIFFLE_KINDS, CardShuffler, ShuffleKind
from simulation import (
    cycle_lengths,
    permutation_frequencies,
    permutation_of,
    permutation_order,
    restoration_counts,
    uniformity_test,
)

RANDOM_KINDS = [ShuffleKind.STL_SHUFFLE, ShuffleKind.FISHER_YATES]


def test_permutation_of_outshuffle():
    assert permutation_of(ShuffleKind.OUTSHUFFLE, 5) == [0, 3, 1, 4, 2]


def test_permutation_of_rejects_random_kinds_and_small_decks():
    with pytest.raises(ValueError):
        permutation_of(ShuffleKind.FISHER_YATES, 10)
    with pytest.raises(ValueError):
        permutation_of(ShuffleKind.OUTSHUFFLE, 2)


def test_cycle_lengths():
    assert cycle_lengths([0, 1, 2]) == [1, 1, 1]
    assert sorted(cycle_lengths([1, 2, 0, 4, 3])) == [2, 3]


def test_permutation_order_52():
    assert permutation_order(ShuffleKind.OUTSHUFFLE, 52) == 8
    assert permutation_order(ShuffleKind.INSHUFFLE, 52) == 52


@pytest.mark.parametrize("kind", RIFFLE_KINDS)
def test_restoration_counts_match_cycle_order(kind):
    counts = restoration_counts(kind, range(3, 70))
    assert sorted(counts) == list(range(3, 70))
    for size, count in counts.items():
        assert count == permutation_order(kind, size), size


def test_restoration_counts_skip_small_sizes():
    counts = restoration_counts(ShuffleKind.OUTSHUFFLE, [0, 2, 4])
    assert counts == {4: 2}


def test_inverse_has_same_order_as_forward():
    for size in range(3, 40):
        assert permutation_order(ShuffleKind.INV_OUTSHUFFLE, size) == permutation_order(ShuffleKind.OUTSHUFFLE, size)
        assert permutation_order(ShuffleKind.INV_INSHUFFLE, size) == permutation_order(ShuffleKind.INSHUFFLE, size)


def test_permutation_frequencies_counts_every_run():
    freqs = permutation_frequencies(ShuffleKind.FISHER_YATES, 4, 500, seed=1)
    assert sum(freqs.values()) == 500
    assert all(sorted(arrangement) == [0, 1, 2, 3] for arrangement in freqs)


def test_permutation_frequencies_deterministic_kind():
    freqs = permutation_frequencies(ShuffleKind.INSHUFFLE, 6, 10)
    assert freqs == {(3, 0, 4, 1, 5, 2): 10}


@pytest.mark.parametrize("kind", RANDOM_KINDS)
@pytest.mark.parametrize("size", [3, 4])
def test_random_shuffles_are_uniform(kind, size):
    runs = 600 * math.factorial(size)
    freqs = permutation_frequencies(kind, size, runs, seed=2024)
    assert len(freqs) == math.factorial(size)
    _, p_value = uniformity_test(freqs, size)
    assert p_value > 1e-4


def test_uniformity_test_flags_a_fixed_shuffle():
    freqs = permutation_frequencies(ShuffleKind.OUTSHUFFLE, 4, 1200)
    chi2, p_value = uniformity_test(freqs, 4)
    assert chi2 > 1000
    assert p_value < 1e-10


def test_position_counts_are_flat_for_fisher_yates():
    # every item should land in every position about equally often
    size, runs = 8, 16_000
    shuffler = CardShuffler(seed=99)
    shuffler.generate(size)
    hits = [[0] * size for _ in range(size)]
    for _ in range(runs):
        shuffler.reset()
        shuffler.apply(ShuffleKind.FISHER_YATES)
        for pos, item in enumerate(shuffler.get_deck()):
            hits[item][pos] += 1
    expected = runs / size
    for row in hits:
        for count in row:
            assert abs(count - expected) < 0.15 * expected
