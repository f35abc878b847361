"""
Crossover source contracts and implementations.
"""

from .base import CrossoverSource
from .replay import ReplayCrossoverSource

__all__ = ["CrossoverSource", "ReplayCrossoverSource"]
