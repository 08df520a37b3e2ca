"""
Domain models and value objects.

Contains the immutable value objects for integer sequences and matrices.
"""

from src.core.domain.sequences import IntMatrix, IntSequence

__all__ = [
    "IntSequence",
    "IntMatrix",
]
