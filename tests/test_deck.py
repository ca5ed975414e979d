"""Tests for the deck model and the shuffle strategies working directly on a Deck."""

import random

import pytest

from deck import (
    MIN_DECK_SIZE,
    Deck,
    FisherYatesStrategy,
    InverseRiffleShuffleStrategy,
    RiffleShuffleStrategy,
    WashShuffleStrategy,
    is_sorted,
    make_deck,
)


@pytest.mark.parametrize("size", [3, 4, 5, 52, 101])
def test_generate_builds_canonical_deck(size):
    deck = Deck()
    cards = deck.generate(size)
    assert cards == list(range(size))
    assert deck.size == size
    assert deck.is_odd == (size % 2 == 1)
    assert deck.is_restored()


@pytest.mark.parametrize("size", [-1, 0, 1, 2])
def test_generate_undersized_gives_empty_deck(size):
    deck = Deck()
    assert deck.generate(size) == []
    assert len(deck) == 0
    assert deck.size == 0


def test_undersized_generate_replaces_previous_deck():
    deck = Deck()
    deck.generate(10)
    deck.generate(MIN_DECK_SIZE - 1)
    assert deck.cards == []
    assert not deck.is_odd


def test_generate_returns_a_copy():
    deck = Deck()
    cards = deck.generate(5)
    cards.reverse()
    assert deck.cards == [0, 1, 2, 3, 4]


def test_reset_restores_canonical_order_at_same_size():
    deck = Deck()
    deck.generate(7)
    deck.cards.reverse()
    assert not deck.is_restored()
    deck.reset()
    assert deck.cards == list(range(7))
    assert deck.is_odd


def test_custom_item_factory():
    deck = Deck(lambda i: f"card-{i:03d}")
    deck.generate(12)
    assert deck.cards[0] == "card-000"
    assert deck.cards[-1] == "card-011"
    assert deck.is_restored()


def test_make_deck_and_is_sorted():
    assert make_deck(2) == []
    assert make_deck(4) == [0, 1, 2, 3]
    assert is_sorted([0, 1, 1, 5])
    assert not is_sorted([1, 0, 2])
    assert is_sorted([])


def test_riffle_strategies_ignore_the_random_engine():
    rng = random.Random(3)
    state = rng.getstate()
    deck = Deck()
    deck.generate(9)
    for strategy in [
        RiffleShuffleStrategy(),
        RiffleShuffleStrategy(inshuffle=True),
        InverseRiffleShuffleStrategy(),
        InverseRiffleShuffleStrategy(inshuffle=True),
    ]:
        strategy.shuffle(deck, rng)
    assert rng.getstate() == state


@pytest.mark.parametrize("strategy", [WashShuffleStrategy(), FisherYatesStrategy()])
def test_random_strategies_use_the_given_engine(strategy):
    a, b = Deck(), Deck()
    a.generate(30)
    b.generate(30)
    strategy.shuffle(a, random.Random(11))
    strategy.shuffle(b, random.Random(11))
    assert a.cards == b.cards
    assert sorted(a.cards) == list(range(30))
