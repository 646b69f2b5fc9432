"""
String to 32-bit seed hashing.

Uses the MurmurHash3 block mixing and avalanche finalizer over character
codes so that seeds derived from text are stable across processes and
match the JavaScript generator this library reproduces.
"""

from typing import Optional

from .string_generator import generate_string
from .uint32 import MASK, imul, rotl

# MurmurHash3 constants
FNV_OFFSET = 2166136261
C1 = 3432918353
C2 = 461845907
N = 3864292196
FMIX1 = 2246822507
FMIX2 = 3266489909


def fmix32(h: int) -> int:
    """MurmurHash3 32-bit avalanche finalizer."""
    h ^= h >> 16
    h = imul(h, FMIX1)
    h ^= h >> 13
    h = imul(h, FMIX2)
    h ^= h >> 16
    return h & MASK


def generate_seed(text: Optional[str] = None) -> int:
    """
    Hash a string into a 32-bit unsigned seed.

    Args:
        text: Seed text. A random string is generated when omitted.

    Returns:
        Seed in [0, 2^32)
    """
    if text is None:
        text = generate_string()

    h = FNV_OFFSET
    for char in text:
        k = rotl(imul(ord(char), C1), 15)
        h ^= imul(k, C2)
        h = rotl(h, 13)
        h = (imul(h, 5) + N) & MASK

    h ^= len(text)
    return fmix32(h)
