"""Deal fixed-size hands from a fresh shuffled copy of a deck."""

from random import Random
from typing import Callable

from countsight.cards import Deck, Hand
from countsight.shuffle import shuffle

# Signature shared by deal() and any substitute dealer given to the drill
Dealer = Callable[[Deck, int], Hand]


def deal(deck: Deck, count: int, rng: Random | None = None) -> Hand:
    """
    Deal ``count`` cards from a shuffled copy of ``deck``.

    Every call starts from the complete deck, modelling a continuous
    shuffle rather than a depleting shoe. Asking for more cards than the
    deck holds returns the whole shuffled deck; a count of zero returns an
    empty hand.

    Args:
        deck: Source cards (left untouched)
        count: Number of cards wanted
        rng: Random number generator for the shuffle

    Returns:
        The dealt hand, at most ``len(deck)`` cards long
    """
    if count < 0:
        raise ValueError("count must not be negative")
    return tuple(shuffle(deck, rng)[:count])
