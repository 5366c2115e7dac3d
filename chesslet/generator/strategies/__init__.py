"""
Strategies Package - Concrete generation strategy implementations.

Import this module to register all built-in strategies.
"""

from .random_sampling import RandomSamplingStrategy
from .hill_climbing import HillClimbingStrategy

__all__ = [
    "RandomSamplingStrategy",
    "HillClimbingStrategy",
]
