"""
Seeded pseudo-random number generator.

A direct port of a 32-bit JavaScript generator: seeds are hashed from
strings with MurmurHash3 and numbers are produced by a counter-based
mixer (Mulberry32 by default). For a given seed and call sequence the
output is bit-for-bit identical across runs and platforms.

Instances are not thread-safe. Use one generator per thread or worker.
"""

from typing import Optional, Union

import numpy as np
import structlog

from . import distributions
from .algorithms import Algorithm
from .murmur_seed import generate_seed
from .rounding import Rounding
from .string_generator import DEFAULT_STRING_LENGTH, generate_string
from .uint32 import TWO_POW_32, to_unit_float, uint32

logger = structlog.get_logger()


class SeededRandom:
    """
    Deterministic generator owning a 32-bit (seed, state) pair.

    Every draw advances ``state`` by exactly one step. ``state`` can be read
    and overwritten to fork or rewind a stream; ``seed`` records where the
    stream started.
    """

    def __init__(
        self,
        seed: Optional[Union[int, str]] = None,
        rounding: Union[Rounding, str] = Rounding.TRUNCATE,
        algorithm: Union[Algorithm, str] = Algorithm.MULBERRY32,
    ):
        """
        Initialize with a seed number or string.

        Args:
            seed: 32-bit seed, a string to hash into one, or None to derive
                a seed from system entropy
            rounding: Rounding policy for every integer draw
            algorithm: State stepping algorithm
        """
        self.rounding = Rounding.parse(rounding)
        self.algorithm = Algorithm.parse(algorithm)
        self.call_count = 0

        if seed is None:
            seed = generate_seed()
            # Only way to replay an entropy-seeded run
            logger.info("Generated random seed", seed=seed, algorithm=self.algorithm.value)
        else:
            seed = generate_seed(seed) if isinstance(seed, str) else uint32(seed)
            logger.debug("Seeded generator", seed=seed, algorithm=self.algorithm.value)

        self._seed = seed
        self._state = seed

    def __repr__(self):
        return (
            f"{type(self).__name__}(seed={self._seed}, state={self._state}, "
            f"rounding={self.rounding.value}, algorithm={self.algorithm.value})"
        )

    @staticmethod
    def generate_seed(text: Optional[str] = None) -> int:
        return generate_seed(text)

    @staticmethod
    def generate_string(count: int = DEFAULT_STRING_LENGTH) -> str:
        return generate_string(count)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = uint32(value)

    def get_state(self) -> int:
        return self._state

    def set_state(self, value: int) -> None:
        self.state = value

    def clone(self) -> "SeededRandom":
        """Independent generator positioned at the same point of the same stream."""
        twin = type(self).__new__(type(self))
        twin.rounding = self.rounding
        twin.algorithm = self.algorithm
        twin.call_count = self.call_count
        twin._seed = self._seed
        twin._state = self._state
        return twin

    def jump(self, steps: int) -> None:
        """Skip ``steps`` draws without computing them (negative rewinds)."""
        self._state = self.algorithm.advance(self._state, steps)

    def next(self, min: float = 0.0, max: float = 1.0) -> float:
        """
        Generate next random number in [min, max).

        ``min`` and ``max`` may be given in either order; equal bounds
        always return ``min``.
        """
        self.call_count += 1
        self._state, word = self.algorithm.step(self._state)
        return to_unit_float(word) * (max - min) + min

    def next_array(self, count: int, min: float = 0.0, max: float = 1.0) -> np.ndarray:
        """
        Vectorised block of ``count`` draws.

        Equivalent to calling ``next(min, max)`` ``count`` times, including
        the state left behind afterwards.
        """
        count = int(count)
        if count <= 0:
            return np.empty(0, dtype=np.float64)

        states = self.algorithm.states_after(self._state, count)
        words = self.algorithm.mix_array(states)
        self._state = int(states[-1])
        self.call_count += count
        return words.astype(np.float64) / TWO_POW_32 * (max - min) + min

    def next_int(self, min: float = 0, max: float = 1, max_inclusive: bool = False) -> int:
        return distributions.next_int(self, min, max, max_inclusive)

    def next_boolean(self, probability_true: float = 0.5) -> bool:
        return distributions.next_boolean(self, probability_true)

    def next_sign(self, probability_positive: float = 0.5) -> int:
        return distributions.next_sign(self, probability_positive)

    def next_normal(
        self, mean: float = 0.0, std_dev: float = 1.0, skewness: float = 0.0
    ) -> float:
        return distributions.next_normal(self, mean, std_dev, skewness)

    def next_normal_int(
        self, mean: float = 0.0, std_dev: float = 1.0, skewness: float = 0.0
    ) -> int:
        return distributions.next_normal_int(self, mean, std_dev, skewness)

    def next_triangular(
        self, min: float = 0.0, max: float = 1.0, mode: Optional[float] = None
    ) -> float:
        return distributions.next_triangular(self, min, max, mode)

    def next_bounded_normal(
        self,
        min: float = 0.0,
        max: float = 1.0,
        max_attempts: int = distributions.DEFAULT_MAX_ATTEMPTS,
    ) -> float:
        return distributions.next_bounded_normal(self, min, max, max_attempts)

    def next_bounded_normal_int(
        self,
        min: float = 0.0,
        max: float = 1.0,
        max_attempts: int = distributions.DEFAULT_MAX_ATTEMPTS,
    ) -> int:
        return distributions.next_bounded_normal_int(self, min, max, max_attempts)

    def random(self) -> float:
        """Uniform float in [0, 1), for callers expecting ``random.random``."""
        return self.next()
