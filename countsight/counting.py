"""Hi-Lo card counting values."""

from types import MappingProxyType
from typing import Iterable, Mapping

from countsight.cards import Card, Rank

# Tag values:
#     2-6: +1 (low cards)
#     7-9: 0  (neutral)
#     10-A: -1 (high cards)
_TAG_VALUES: Mapping[Rank, int] = MappingProxyType(
    {
        Rank.TWO: 1,
        Rank.THREE: 1,
        Rank.FOUR: 1,
        Rank.FIVE: 1,
        Rank.SIX: 1,
        Rank.SEVEN: 0,
        Rank.EIGHT: 0,
        Rank.NINE: 0,
        Rank.TEN: -1,
        Rank.JACK: -1,
        Rank.QUEEN: -1,
        Rank.KING: -1,
        Rank.ACE: -1,
    }
)

SYSTEM_NAME = "Hi-Lo"


def tag_values() -> Mapping[Rank, int]:
    """Return the read-only rank to tag mapping."""
    return _TAG_VALUES


def value_of(rank: Rank) -> int:
    """Return the Hi-Lo tag (+1, 0 or -1) for a rank."""
    return _TAG_VALUES[rank]


def evaluate(cards: Iterable[Card]) -> int:
    """
    Calculate the running count of a group of cards.

    Args:
        cards: Cards to count, in any order

    Returns:
        The sum of the Hi-Lo tags (0 for no cards)
    """
    return sum(value_of(card.rank) for card in cards)


def full_deck_sum() -> int:
    """
    Sum of tag values over a full 52-card deck.

    Each rank appears 4 times in a deck (once per suit); Hi-Lo is a
    balanced system so this is 0.
    """
    return sum(tag * 4 for tag in _TAG_VALUES.values())
