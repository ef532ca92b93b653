"""Core types shared across the dynarray package.

These types define the contract between the container, the sorting
routines, and anything that drives them (CLI, benchmarks, tests).
"""

from enum import Enum
from typing import Any, Callable, TypeVar

T = TypeVar("T")

# A compare function in the classic three-way style: negative when a < b,
# zero when equal, positive when a > b.
Comparator = Callable[[Any, Any], int]


class SortAlgorithm(Enum):
    """Sorting strategy used by a DynamicArray."""
    BUILTIN = "builtin"  # Interpreter sort driven by cmp_to_key
    QUICK = "quick"      # Hand-written Lomuto quicksort


class IndexOutOfRangeError(IndexError):
    """Raised when an index argument falls outside the permitted bounds.

    Attributes:
        index: The offending index.
        size: The container size at the time of the call.
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")


class ComparatorError(RuntimeError):
    """Raised by test comparators that are configured to fail."""
