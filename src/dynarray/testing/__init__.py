"""Testing utilities for dynarray."""

from .comparators import CountingComparator

__all__ = [
    "CountingComparator",
]
