"""
Core generator functionality.
"""

from .algorithms import Algorithm
from .engine import SeededRandom
from .murmur_seed import generate_seed
from .rounding import Rounding
from .string_generator import generate_string

__all__ = ['Algorithm', 'SeededRandom', 'generate_seed', 'Rounding', 'generate_string']
