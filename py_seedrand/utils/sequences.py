"""Sequence helpers driven by a [0, 1) random source."""

import math
from typing import Callable, MutableSequence, Optional, Sequence, TypeVar

from .random import get_prng

T = TypeVar("T")


def _default_source() -> Callable[[], float]:
    return get_prng().next


def choice(seq: Sequence[T], random: Optional[Callable[[], float]] = None) -> T:
    """Choose a random element from a non-empty sequence."""
    if not seq:
        raise IndexError("Cannot choose from an empty sequence")
    random = random or _default_source()
    return seq[math.floor(random() * len(seq))]


def shuffle(
    seq: MutableSequence[T], random: Optional[Callable[[], float]] = None
) -> MutableSequence[T]:
    """
    Shuffle ``seq`` in place (Fisher-Yates, walking down from the end).

    Returns:
        The same sequence, for chaining
    """
    random = random or _default_source()
    for i in range(len(seq) - 1, 0, -1):
        j = math.floor(random() * (i + 1))
        seq[i], seq[j] = seq[j], seq[i]
    return seq
