"""Tests for the Fisher-Yates shuffle."""

from collections import Counter
from random import Random

from hypothesis import given, strategies as st

from countsight.shuffle import shuffle


class TestShuffle:
    """Tests for shuffle()."""

    def test_empty_input(self):
        """An empty sequence shuffles to an empty list."""
        assert shuffle([]) == []

    def test_single_element(self, rng):
        """A single element stays put."""
        assert shuffle(["x"], rng) == ["x"]

    def test_input_not_mutated(self, deck, rng):
        """The input sequence is left untouched."""
        items = list(deck)
        shuffle(items, rng)
        assert items == list(deck)

    def test_returns_new_list(self, rng):
        """Shuffle always returns a fresh list."""
        items = [1, 2, 3]
        result = shuffle(items, rng)
        assert result is not items

    def test_changes_order(self, deck):
        """A seeded shuffle of a deck differs from the original order."""
        shuffled = shuffle(deck, Random(42))
        assert shuffled != list(deck)
        assert sorted(shuffled, key=repr) == sorted(deck, key=repr)

    def test_reproducible_with_seed(self, deck):
        """Same seed, same permutation."""
        assert shuffle(deck, Random(7)) == shuffle(deck, Random(7))

    def test_accepts_tuples_and_strings(self, rng):
        """Works over any sequence type."""
        assert sorted(shuffle((3, 1, 2), rng)) == [1, 2, 3]
        assert sorted(shuffle("abc", rng)) == ["a", "b", "c"]

    def test_no_positional_bias(self):
        """Each element lands in each position about equally often."""
        rng = Random(1234)
        trials = 8000
        positions = {item: Counter() for item in range(4)}
        for _ in range(trials):
            for index, item in enumerate(shuffle(range(4), rng)):
                positions[item][index] += 1

        expected = trials / 4
        for counts in positions.values():
            for index in range(4):
                assert abs(counts[index] - expected) < expected * 0.1

    def test_all_permutations_reachable(self):
        """All 3! orderings of three items show up."""
        rng = Random(99)
        seen = {tuple(shuffle("abc", rng)) for _ in range(600)}
        assert len(seen) == 6

    @given(st.lists(st.integers()), st.integers(min_value=0))
    def test_preserves_multiset(self, items, seed):
        """Shuffling keeps exactly the same elements."""
        assert Counter(shuffle(items, Random(seed))) == Counter(items)
