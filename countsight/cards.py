"""Card model and deck generation - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto


class Suit(Enum):
    """Card suits."""

    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def is_red(self) -> bool:
        """Check if this suit is drawn in red."""
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(Enum):
    """Card ranks, valued by pip (face cards and ace above ten)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]


_RANK_ALIASES: dict[str, Rank] = {str(rank): rank for rank in Rank}
_RANK_ALIASES["T"] = Rank.TEN

_SUIT_ALIASES: dict[str, Suit] = {
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', '10h'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str, suit_str = s[:-1], s[-1]
        if rank_str not in _RANK_ALIASES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_ALIASES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_ALIASES[rank_str], _SUIT_ALIASES[suit_str])


# A full 52-card set; never mutated, draws work on shuffled copies
Deck = tuple[Card, ...]

# The cards dealt for a single round
Hand = tuple[Card, ...]

DECK_SIZE = len(Suit) * len(Rank)


def generate_deck() -> Deck:
    """Return all 52 cards in suit-major order (unshuffled)."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def parse_cards(text: str) -> Hand:
    """Parse a whitespace separated list of card strings, e.g. '2H KS 9d'."""
    return tuple(Card.from_string(token) for token in text.split())
