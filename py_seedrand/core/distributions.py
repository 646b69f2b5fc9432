"""
Distribution transforms over a seeded generator.

Every function takes the generator as its first argument and consumes its
uniform ``next()`` output; nothing here keeps state of its own. Ranges are
not validated: inverted or empty ranges produce whatever the arithmetic
gives, including ``inf`` and ``nan``.
"""

import math
from typing import Optional

import numpy as np
import structlog

from ..exceptions import SamplingExhaustedError

logger = structlog.get_logger()

DEFAULT_MAX_ATTEMPTS = 1000


def next_int(rng, min: float = 0, max: float = 1, max_inclusive: bool = False) -> int:
    """Integer in [min, max) or [min, max] using the generator's rounding policy."""
    return rng.rounding.apply(rng.next(min, max + (1 if max_inclusive else 0)))


def next_boolean(rng, probability_true: float = 0.5) -> bool:
    return rng.next() < probability_true


def next_sign(rng, probability_positive: float = 0.5) -> int:
    return 1 if next_boolean(rng, probability_positive) else -1


def _nonzero_uniform(rng) -> float:
    u = 0.0
    while u == 0.0:
        u = rng.next()
    return u


def _box_muller(rng):
    u = _nonzero_uniform(rng)
    v = _nonzero_uniform(rng)
    r = math.sqrt(-2.0 * math.log(u))
    theta = 2.0 * math.pi * v
    return r * math.cos(theta), r * math.sin(theta)


def next_normal(
    rng, mean: float = 0.0, std_dev: float = 1.0, skewness: float = 0.0
) -> float:
    """
    Normally distributed value via the Box-Muller transform.

    A non-zero ``skewness`` applies the skew-normal transform to the pair of
    variates Box-Muller produces. The result is unbounded.

    Args:
        rng: Generator to draw from (two draws, more if one is exactly 0)
        mean: Location
        std_dev: Scale
        skewness: Shape parameter, 0 for a symmetric normal

    Returns:
        Normal (or skew-normal) variate
    """
    x, y = _box_muller(rng)
    if skewness == 0:
        return x * std_dev + mean

    correlation = skewness / math.sqrt(1 + skewness * skewness)
    k = x * correlation + y * math.sqrt(1 - correlation * correlation)
    z = k if x >= 0 else -k
    return z * std_dev + mean


def next_normal_int(
    rng, mean: float = 0.0, std_dev: float = 1.0, skewness: float = 0.0
) -> int:
    return rng.rounding.apply(next_normal(rng, mean, std_dev, skewness))


def next_triangular(
    rng, min: float = 0.0, max: float = 1.0, mode: Optional[float] = None
) -> float:
    """
    Triangular variate by inverse transform of a single draw.

    ``mode`` defaults to the midpoint. With ``max == min`` or a mode outside
    the range the result is ``nan`` or ``inf`` instead of an error.
    """
    if mode is None:
        mode = (min + max) / 2
    w = rng.next()

    lo, hi, mo = np.float64(min), np.float64(max), np.float64(mode)
    with np.errstate(divide="ignore", invalid="ignore"):
        inflection = (mo - lo) / (hi - lo)
        if w < inflection:
            return float(lo + np.sqrt(w * (hi - lo) * (mo - lo)))
        return float(hi - np.sqrt((1 - w) * (hi - lo) * (hi - mo)))


def next_bounded_normal(
    rng, min: float = 0.0, max: float = 1.0, max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> float:
    """
    Bounded normal variate by rejection sampling.

    A standard normal is squeezed to ``z / 10 + 0.5`` and redrawn until it
    lands in [0, 1], then scaled as ``num * max + min``. This is not the same
    distribution as ``next_normal``: the tails are cut off.

    Raises:
        SamplingExhaustedError: No draw accepted within ``max_attempts``
    """
    for _ in range(max_attempts):
        x, _y = _box_muller(rng)
        num = x / 10 + 0.5
        if 0 <= num <= 1:
            return num * max + min

    logger.warning(
        "Bounded normal sampling exhausted",
        attempts=max_attempts,
        min=min,
        max=max,
    )
    raise SamplingExhaustedError(max_attempts, min, max)


def next_bounded_normal_int(
    rng, min: float = 0.0, max: float = 1.0, max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> int:
    return rng.rounding.apply(next_bounded_normal(rng, min, max, max_attempts))
