"""
Counter-based 32-bit state stepping.

Both generators advance their state by a fixed odd increment and derive
the output word from the new state through a bijective bit mixer. The odd
increment makes the state sequence a single cycle of length 2^32, and the
additive form lets ``advance`` jump any number of steps in O(1).
"""

from enum import Enum
from typing import Tuple

import numpy as np

from ..exceptions import UnknownDistributionError
from .uint32 import MASK, as_uint32_array, imul

MULBERRY32_INCREMENT = 0x6D2B79F5
SPLITMIX32_INCREMENT = 0x9E3779B9


def mulberry32_mix(state: int) -> int:
    t = imul(state ^ (state >> 15), state | 1)
    t = ((t + imul(t ^ (t >> 7), t | 61)) & MASK) ^ t
    return (t ^ (t >> 14)) & MASK


def splitmix32_mix(state: int) -> int:
    t = imul(state ^ (state >> 16), 0x21F0AAAD)
    t = imul(t ^ (t >> 15), 0x735A2D97)
    return (t ^ (t >> 15)) & MASK


def mulberry32_mix_array(states: np.ndarray) -> np.ndarray:
    t = as_uint32_array(states)
    t = (t ^ (t >> np.uint32(15))) * (t | np.uint32(1))
    t = (t + (t ^ (t >> np.uint32(7))) * (t | np.uint32(61))) ^ t
    return t ^ (t >> np.uint32(14))


def splitmix32_mix_array(states: np.ndarray) -> np.ndarray:
    t = as_uint32_array(states)
    t = (t ^ (t >> np.uint32(16))) * np.uint32(0x21F0AAAD)
    t = (t ^ (t >> np.uint32(15))) * np.uint32(0x735A2D97)
    return t ^ (t >> np.uint32(15))


class Algorithm(Enum):
    """State stepping algorithm used by a generator."""

    MULBERRY32 = "mulberry32"
    SPLITMIX32 = "splitmix32"

    @classmethod
    def parse(cls, name) -> "Algorithm":
        """Look up an algorithm by member or case-insensitive name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise UnknownDistributionError(
                "algorithm", str(name), [member.value for member in cls]
            ) from None

    @property
    def increment(self) -> int:
        return _INCREMENTS[self]

    def mix(self, state: int) -> int:
        """Output word for an already advanced state."""
        return _SCALAR_MIXERS[self](state)

    def mix_array(self, states) -> np.ndarray:
        """Vectorised ``mix`` over an array of advanced states."""
        return _ARRAY_MIXERS[self](states)

    def advance(self, state: int, steps: int = 1) -> int:
        """State after ``steps`` draws; negative steps rewind."""
        return (state + steps * self.increment) & MASK

    def step(self, state: int) -> Tuple[int, int]:
        """
        Advance one step.

        Returns:
            Tuple of (new state, output word)
        """
        state = (state + self.increment) & MASK
        return state, self.mix(state)

    def states_after(self, state: int, count: int) -> np.ndarray:
        """The next ``count`` states following ``state``, as ``uint32``."""
        offsets = np.arange(1, count + 1, dtype=np.uint32)
        return offsets * np.uint32(self.increment) + np.uint32(state & MASK)


_INCREMENTS = {
    Algorithm.MULBERRY32: MULBERRY32_INCREMENT,
    Algorithm.SPLITMIX32: SPLITMIX32_INCREMENT,
}

_SCALAR_MIXERS = {
    Algorithm.MULBERRY32: mulberry32_mix,
    Algorithm.SPLITMIX32: splitmix32_mix,
}

_ARRAY_MIXERS = {
    Algorithm.MULBERRY32: mulberry32_mix_array,
    Algorithm.SPLITMIX32: splitmix32_mix_array,
}
