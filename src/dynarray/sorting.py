"""Sorting routines for the occupied prefix of a backing store.

Both strategies sort ``elements[0:size]`` in place and leave the unused
tail of the store alone.
"""

import functools
from typing import Any

from .interfaces import Comparator


def natural_order(a: Any, b: Any) -> int:
    """Three-way compare using the elements' own ordering."""
    return (a > b) - (a < b)


def reverse_order(a: Any, b: Any) -> int:
    """Three-way compare that inverts natural ordering."""
    return natural_order(b, a)


def builtin_sort(elements: list, size: int, comparator: Comparator) -> None:
    """Sort ``elements[0:size]`` with the interpreter's stable sort."""
    if size < 2:
        return
    elements[0:size] = sorted(elements[0:size], key=functools.cmp_to_key(comparator))


def quick_sort(elements: list, low: int, high: int, comparator: Comparator) -> None:
    """Sort ``elements[low:high + 1]`` in place with Lomuto quicksort.

    The smaller partition is sorted recursively and the larger one is
    handled by the loop, which keeps stack depth logarithmic even for the
    already-sorted and reverse-sorted inputs that give O(n^2) time.
    """
    while low < high:
        pivot_index = partition(elements, low, high, comparator)
        if pivot_index - low < high - pivot_index:
            quick_sort(elements, low, pivot_index - 1, comparator)
            low = pivot_index + 1
        else:
            quick_sort(elements, pivot_index + 1, high, comparator)
            high = pivot_index - 1


def partition(elements: list, low: int, high: int, comparator: Comparator) -> int:
    """Partition around ``elements[high]`` and return the pivot's final index.

    Elements that compare equal to the pivot are moved to its left.
    """
    pivot = elements[high]
    i = low - 1

    for j in range(low, high):
        if comparator(elements[j], pivot) <= 0:
            i += 1
            swap(elements, i, j)

    swap(elements, i + 1, high)
    return i + 1


def swap(elements: list, i: int, j: int) -> None:
    elements[i], elements[j] = elements[j], elements[i]
