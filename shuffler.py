"""Shuffle engine: one deck, one random engine, six shuffle kinds."""

from __future__ import annotations

import random
import time
from enum import Enum
from typing import Callable, Generic, Optional

from deck import (
    Deck,
    DeckShuffleStrategy,
    FisherYatesStrategy,
    InverseRiffleShuffleStrategy,
    RiffleShuffleStrategy,
    T,
    WashShuffleStrategy,
)
from logging_utils import get_logger

log = get_logger("shuffler")

# Budget for restoring with a randomized kind when the caller gives none.
# A 10-item deck has 3,628,800 arrangements, so larger decks will not converge.
DEFAULT_RANDOM_RESTORE_LIMIT = 10_000_000


class ShuffleKind(str, Enum):
    STL_SHUFFLE = "stl"
    FISHER_YATES = "fisher-yates"
    OUTSHUFFLE = "out"
    INSHUFFLE = "in"
    INV_OUTSHUFFLE = "inv-out"
    INV_INSHUFFLE = "inv-in"

    @property
    def is_random(self) -> bool:
        return self in (ShuffleKind.STL_SHUFFLE, ShuffleKind.FISHER_YATES)


RIFFLE_KINDS = [k for k in ShuffleKind if not k.is_random]

STRATEGIES: dict[ShuffleKind, DeckShuffleStrategy] = {
    ShuffleKind.STL_SHUFFLE: WashShuffleStrategy(),
    ShuffleKind.FISHER_YATES: FisherYatesStrategy(),
    ShuffleKind.OUTSHUFFLE: RiffleShuffleStrategy(),
    ShuffleKind.INSHUFFLE: RiffleShuffleStrategy(inshuffle=True),
    ShuffleKind.INV_OUTSHUFFLE: InverseRiffleShuffleStrategy(),
    ShuffleKind.INV_INSHUFFLE: InverseRiffleShuffleStrategy(inshuffle=True),
}


class DeckNotRestoredError(RuntimeError):
    """Raised when a restore runs out of its shuffle budget."""

    def __init__(self, kind: ShuffleKind, shuffles: int):
        super().__init__(f"deck not restored after {shuffles} {kind.value} shuffles")
        self.kind = kind
        self.shuffles = shuffles


class CardShuffler(Generic[T]):
    """
    Owns one deck and the random engine used by the randomized shuffles.

    The engine is seeded once, at construction, from the wall clock unless a
    seed is given. Instances share no state.
    """

    def __init__(self, seed: Optional[int] = None, *, item: Callable[[int], T] = int):
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._rng = random.Random(seed)
        self._deck: Deck[T] = Deck(item)

    @property
    def size(self) -> int:
        return self._deck.size

    @property
    def is_odd(self) -> bool:
        return self._deck.is_odd

    def generate(self, size: int) -> list[T]:
        return self._deck.generate(size)

    def get_deck(self) -> list[T]:
        return list(self._deck.cards)

    def reset(self) -> None:
        self._deck.reset()

    def is_restored(self) -> bool:
        return self._deck.is_restored()

    def apply(self, kind: ShuffleKind) -> None:
        """Shuffle the deck in place. An empty deck is left alone."""
        if not self._deck.cards:
            log.warning("Ignoring %s shuffle on an empty deck", kind.value)
            return
        STRATEGIES[kind].shuffle(self._deck, self._rng)

    def restore_to_identity(self, kind: ShuffleKind, max_shuffles: Optional[int] = None) -> int:
        """
        Shuffle until the deck is back in canonical order.

        Returns the number of shuffles performed, counting the first one as 1.
        Riffle kinds always come back, so they run uncapped unless max_shuffles
        is given. Randomized kinds fall back to DEFAULT_RANDOM_RESTORE_LIMIT.

        :raises DeckNotRestoredError: the budget ran out first
        """
        if max_shuffles is None and kind.is_random:
            max_shuffles = DEFAULT_RANDOM_RESTORE_LIMIT
        if max_shuffles is not None and max_shuffles < 1:
            raise ValueError(f"max_shuffles must be positive, got {max_shuffles}")

        shuffles = 0
        while True:
            shuffles += 1
            self.apply(kind)
            if self.is_restored():
                break
            if max_shuffles is not None and shuffles >= max_shuffles:
                raise DeckNotRestoredError(kind, shuffles)
        log.debug("Restored %d-item deck after %d %s shuffles", self.size, shuffles, kind.value)
        return shuffles
