"""
Fixed-width 32-bit integer arithmetic.

Python integers never overflow, so every operation that the generators
rely on wrapping for is spelled out here with explicit masking. The array
variants work on NumPy ``uint32`` arrays, where wrapping is native.
"""

import numpy as np

MASK = 0xFFFFFFFF
TWO_POW_32 = 4294967296.0


def uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & MASK


def imul(a: int, b: int) -> int:
    """32-bit truncating multiplication."""
    return ((a & MASK) * (b & MASK)) & MASK


def rotl(x: int, r: int) -> int:
    """Rotate a 32-bit word left by ``r`` bits."""
    x &= MASK
    return ((x << r) | (x >> (32 - r))) & MASK


def as_uint32_array(values) -> np.ndarray:
    """Coerce to a ``uint32`` array, wrapping out-of-range integers."""
    arr = np.asarray(values)
    if arr.dtype == np.uint32:
        return arr
    return (arr.astype(np.int64) & MASK).astype(np.uint32)


def to_unit_float(word: int) -> float:
    """Map a 32-bit word onto [0, 1)."""
    return word / TWO_POW_32
