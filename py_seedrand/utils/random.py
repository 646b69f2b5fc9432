"""
Process-wide shared generator.

Convenience draws for code that does not want to thread a generator
through its calls. Anything that must be reproducible should call
``set_random_seed`` first or, better, own a ``SeededRandom``.
"""

from typing import Optional, Union

from ..config import settings
from ..core.engine import SeededRandom

# Global PRNG instance
_prng = None


def set_random_seed(seed: Optional[Union[int, str]] = None) -> SeededRandom:
    """
    Replace the shared generator with a freshly seeded one.

    Args:
        seed: Seed number or string, None for a random seed

    Returns:
        The new shared generator
    """
    global _prng

    _prng = SeededRandom(
        seed,
        rounding=settings.default_rounding,
        algorithm=settings.default_algorithm,
    )
    return _prng


def get_prng() -> SeededRandom:
    """
    Get the shared generator, creating it on first use.

    Returns:
        SeededRandom instance
    """
    if _prng is None:
        return set_random_seed(settings.default_seed)
    return _prng


def next_float(min: float = 0.0, max: float = 1.0) -> float:
    """Uniform float in [min, max) from the shared generator."""
    return get_prng().next(min, max)


def next_int(min: float = 0, max: float = 1, max_inclusive: bool = False) -> int:
    return get_prng().next_int(min, max, max_inclusive)


def next_boolean(probability_true: float = 0.5) -> bool:
    return get_prng().next_boolean(probability_true)


def next_sign(probability_positive: float = 0.5) -> int:
    return get_prng().next_sign(probability_positive)


def next_normal(mean: float = 0.0, std_dev: float = 1.0, skewness: float = 0.0) -> float:
    return get_prng().next_normal(mean, std_dev, skewness)


def next_triangular(min: float = 0.0, max: float = 1.0, mode: Optional[float] = None) -> float:
    return get_prng().next_triangular(min, max, mode)


def next_normal_int(mean: float = 0.0, std_dev: float = 1.0, skewness: float = 0.0) -> int:
    return get_prng().next_normal_int(mean, std_dev, skewness)


def next_bounded_normal(min: float = 0.0, max: float = 1.0) -> float:
    """Bounded normal draw, retrying up to ``settings.bounded_normal_max_attempts`` times."""
    return get_prng().next_bounded_normal(min, max, settings.bounded_normal_max_attempts)


def next_bounded_normal_int(min: float = 0.0, max: float = 1.0) -> int:
    return get_prng().next_bounded_normal_int(min, max, settings.bounded_normal_max_attempts)
