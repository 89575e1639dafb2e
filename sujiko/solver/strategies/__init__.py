"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .lexicographic import LexicographicStrategy
from .vectorized import VectorizedStrategy

__all__ = [
    "LexicographicStrategy",
    "VectorizedStrategy",
]
