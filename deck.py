"""
Deck creation (canonical sorted order) and shuffle strategies.

Canonical deck order: item(0), item(1), ..., item(N-1), ascending.
Every strategy permutes the deck in place and only reads its size and parity;
no strategy adds, removes or duplicates an item.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Protocol, TypeVar

from logging_utils import get_logger

log = get_logger("deck")

# deck must have at least 3 items
MIN_DECK_SIZE = 3


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


def make_deck(size: int, item: Callable[[int], T] = int) -> list[T]:
    """Canonical ascending deck, or an empty list when size < MIN_DECK_SIZE."""
    if size < MIN_DECK_SIZE:
        return []
    return [item(i) for i in range(size)]


def is_sorted(items: list[Any]) -> bool:
    """True if items are in non-decreasing order."""
    return all(a <= b for a, b in zip(items, items[1:]))


class Deck(Generic[T]):
    """Mutable sequence of items that is always a permutation of the canonical deck."""

    def __init__(self, item: Callable[[int], T] = int):
        self._item = item
        self.cards: list[T] = []
        self.size = 0
        self.is_odd = False

    def generate(self, size: int) -> list[T]:
        """
        Replace the deck with a canonical deck of the given size.

        An undersized request leaves an empty deck and returns an empty list.
        """
        if size < MIN_DECK_SIZE:
            log.warning("Deck size %d is below the minimum of %d; deck is empty", size, MIN_DECK_SIZE)
            self.cards = []
            self.size = 0
            self.is_odd = False
            return []
        self.cards = make_deck(size, self._item)
        self.size = size
        self.is_odd = size % 2 == 1
        log.debug("Generated deck of %d items (odd=%s)", size, self.is_odd)
        return list(self.cards)

    def reset(self) -> list[T]:
        return self.generate(self.size)

    def is_restored(self) -> bool:
        return is_sorted(self.cards)

    def __len__(self) -> int:
        return len(self.cards)


class DeckShuffleStrategy(ABC):
    """Base class for how to shuffle a deck (in-place)."""

    @abstractmethod
    def shuffle(self, deck: Deck[Any], rng: random.Random) -> None:
        """
        Shuffle the deck in place.

        :param deck: deck whose cards are permuted
        :param rng: random engine; deterministic strategies never consult it
        """
        ...


class WashShuffleStrategy(DeckShuffleStrategy):
    """Uniform random permutation using the library shuffle."""

    def shuffle(self, deck: Deck[Any], rng: random.Random) -> None:
        rng.shuffle(deck.cards)


class FisherYatesStrategy(DeckShuffleStrategy):
    """
    Explicit Fisher-Yates: walk from the last position down to 1, swapping
    each position with a uniformly drawn position at or below it.
    """

    def shuffle(self, deck: Deck[Any], rng: random.Random) -> None:
        cards = deck.cards
        for i in range(deck.size - 1, 0, -1):
            j = rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]


class RiffleShuffleStrategy(DeckShuffleStrategy):
    """
    Perfect riffle: cut the deck into two halves and interleave them exactly.

    Out-shuffle keeps the top card on top (first half leads, first half is the
    larger one on an odd deck). In-shuffle lets the second half lead (second
    half is the larger one on an odd deck).
    """

    def __init__(self, *, inshuffle: bool = False):
        self.inshuffle = inshuffle

    def first_half_size(self, deck: Deck[Any]) -> int:
        if self.inshuffle:
            return deck.size // 2
        return (deck.size + 1) // 2

    def shuffle(self, deck: Deck[Any], rng: random.Random) -> None:
        cards = deck.cards
        half1 = self.first_half_size(deck)
        half2 = deck.size - half1
        first, second = cards[:half1], cards[half1:]
        for i in range(min(half1, half2)):
            if self.inshuffle:
                cards[2 * i], cards[2 * i + 1] = second[i], first[i]
            else:
                cards[2 * i], cards[2 * i + 1] = first[i], second[i]
        # odd deck: the interleave leaves the last position open
        if deck.is_odd:
            if self.inshuffle:
                cards[-1] = second[half2 - 1]
            else:
                cards[-1] = first[half1 - 1]


class InverseRiffleShuffleStrategy(DeckShuffleStrategy):
    """
    Undo a perfect riffle in one pass: deinterleave the deck into its even and
    odd offsets (A and B), then stack the halves back.

        inverse in,  N even:  B A
        inverse in,  N odd:   B A y   (y = last item, unchanged)
        inverse out, N even:  A B
        inverse out, N odd:   x B A   (x = first item, unchanged; offsets from 1)
    """

    def __init__(self, *, inshuffle: bool = False):
        self.inshuffle = inshuffle

    def shuffle(self, deck: Deck[Any], rng: random.Random) -> None:
        cards = deck.cards
        if self.inshuffle:
            # odd deck: the bottom card never moves
            stop = deck.size - 1 if deck.is_odd else deck.size
            region = cards[:stop]
            cards[:stop] = region[1::2] + region[0::2]
        elif deck.is_odd:
            # odd deck: the top card never moves
            region = cards[1:]
            cards[1:] = region[1::2] + region[0::2]
        else:
            cards[:] = cards[0::2] + cards[1::2]
