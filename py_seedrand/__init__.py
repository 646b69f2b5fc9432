"""
py_seedrand: deterministic, seedable 32-bit pseudo-random numbers.
"""

from .core import Algorithm, Rounding, SeededRandom, generate_seed, generate_string
from .exceptions import SamplingExhaustedError, SeedRandError, UnknownDistributionError

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "Rounding",
    "SeededRandom",
    "generate_seed",
    "generate_string",
    "SamplingExhaustedError",
    "SeedRandError",
    "UnknownDistributionError",
]
