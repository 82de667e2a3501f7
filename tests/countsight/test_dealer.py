"""Tests for dealing hands."""

from random import Random

import pytest

from countsight.dealer import deal


class TestDeal:
    """Tests for deal()."""

    @pytest.mark.parametrize("count", [0, 1, 3, 6, 9, 12, 52])
    def test_hand_length(self, deck, rng, count):
        """The hand has exactly the requested number of cards."""
        assert len(deal(deck, count, rng)) == count

    def test_cards_come_from_deck(self, deck, rng):
        """Every dealt card belongs to the deck."""
        assert set(deal(deck, 12, rng)) <= set(deck)

    def test_no_duplicates_within_hand(self, deck, rng):
        """Cards are drawn without replacement."""
        for _ in range(50):
            hand = deal(deck, 20, rng)
            assert len(set(hand)) == len(hand)

    def test_deck_not_depleted(self, deck, rng):
        """Repeated deals always start from the full deck."""
        before = tuple(deck)
        for _ in range(10):
            deal(deck, 12, rng)
        assert deck == before
        assert len(deck) == 52

    def test_repeated_deals_may_repeat_cards(self, deck):
        """Consecutive deals are independent of each other."""
        rng = Random(5)
        hands = [set(deal(deck, 12, rng)) for _ in range(20)]
        assert any(hands[0] & other for other in hands[1:])

    def test_count_larger_than_deck(self, deck, rng):
        """Asking for too many cards returns the whole shuffled deck."""
        hand = deal(deck, 60, rng)
        assert len(hand) == 52
        assert set(hand) == set(deck)

    def test_zero_cards(self, deck, rng):
        """A zero-card deal is empty."""
        assert deal(deck, 0, rng) == ()

    def test_negative_count_raises(self, deck, rng):
        """Negative counts are a programming error."""
        with pytest.raises(ValueError):
            deal(deck, -1, rng)

    def test_returns_tuple(self, deck, rng):
        """Hands are immutable tuples."""
        assert isinstance(deal(deck, 3, rng), tuple)
