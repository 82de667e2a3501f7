"""Unbiased Fisher-Yates shuffle."""

from random import Random
from typing import Sequence, TypeVar

T = TypeVar("T")

_default_rng = Random()


def shuffle(items: Sequence[T], rng: Random | None = None) -> list[T]:
    """
    Return a uniformly random permutation of ``items``.

    The input is copied, never mutated. Walks from the last index down to
    the second, swapping each position with a uniformly chosen index in
    ``[0, i]``, so each of the n! orderings is equally likely.

    Args:
        items: Sequence to permute (any element type, may be empty)
        rng: Random number generator (module default if not provided)

    Returns:
        A new list holding the same elements in random order
    """
    rng = rng or _default_rng
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
