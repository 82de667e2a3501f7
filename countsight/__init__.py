"""CountSight Hi-Lo drill engine - 100% UI-agnostic."""

from countsight.cards import Card, Deck, Hand, Rank, Suit, generate_deck
from countsight.counting import evaluate, value_of
from countsight.dealer import deal
from countsight.shuffle import shuffle

__all__ = [
    "Card",
    "Deck",
    "Hand",
    "Rank",
    "Suit",
    "deal",
    "evaluate",
    "generate_deck",
    "shuffle",
    "value_of",
]
