"""dynarray - a hand-built generic dynamic array.

Usage:
    from dynarray import DynamicArray, natural_order

    numbers = DynamicArray()
    for n in (34, 7, 23):
        numbers.append(n)
    numbers.quick_sort(natural_order)
"""

from .array_list import DynamicArray
from .interfaces import Comparator, IndexOutOfRangeError, SortAlgorithm
from .sorting import natural_order, reverse_order

__version__ = "0.1.0"

__all__ = [
    "DynamicArray",
    "Comparator",
    "IndexOutOfRangeError",
    "SortAlgorithm",
    "natural_order",
    "reverse_order",
]
