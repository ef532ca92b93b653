"""Generic dynamic array backed by a manually managed slot list.

The container deliberately avoids leaning on list growth semantics:
the backing store is a fixed-length list of slots that is reallocated
(doubled) when full, and ``size`` tracks the occupied prefix.
"""

import logging
from typing import Generic, Iterator, Optional

from .interfaces import Comparator, IndexOutOfRangeError, SortAlgorithm, T
from .sorting import builtin_sort, quick_sort

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
DEFAULT_GROWTH_FACTOR = 2


class DynamicArray(Generic[T]):
    """A resizable, index-addressable sequence.

    Operations: append, insert_at, get_at, remove_at, clear, size,
    is_empty, sort_with_comparator, quick_sort.
    Time: amortized O(1) append, O(n) insert/remove.

    Usage:
        names: DynamicArray[str] = DynamicArray()
        names.append("Aston")
        names.insert_at(0, "Lesson")
        names.quick_sort(natural_order)
        print(names)  # [Aston, Lesson]
    """
    __slots__ = ("_elements", "_size", "_growth_factor")

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        growth_factor: int = DEFAULT_GROWTH_FACTOR,
    ) -> None:
        for name, value in (("capacity", capacity), ("growth_factor", growth_factor)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        if growth_factor < 2:
            raise ValueError(f"growth_factor must be >= 2, got {growth_factor}")
        self._elements: list[Optional[T]] = [None] * capacity
        self._size: int = 0
        self._growth_factor = growth_factor

    @property
    def capacity(self) -> int:
        """Allocated length of the backing store."""
        return len(self._elements)

    def append(self, element: T) -> None:
        """Add ``element`` at the end."""
        self._ensure_capacity()
        self._elements[self._size] = element
        self._size += 1

    def insert_at(self, index: int, element: T) -> None:
        """Insert ``element`` at ``index``, shifting later elements right.

        Args:
            index: Position in ``[0, size]``; ``size`` appends.
            element: Value to insert.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, size]``.
        """
        if index < 0 or index > self._size:
            raise IndexOutOfRangeError(index, self._size)
        self._ensure_capacity()
        for i in range(self._size, index, -1):
            self._elements[i] = self._elements[i - 1]
        self._elements[index] = element
        self._size += 1

    def get_at(self, index: int) -> T:
        """Return the element at ``index`` without removing it.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, size)``.
        """
        self._check_index(index)
        return self._elements[index]  # type: ignore[return-value]

    def remove_at(self, index: int) -> T:
        """Remove and return the element at ``index``.

        Later elements shift left by one and the vacated tail slot is
        reset so the array stops referencing the moved value.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, size)``.
        """
        self._check_index(index)
        removed = self._elements[index]
        for i in range(index, self._size - 1):
            self._elements[i] = self._elements[i + 1]
        self._size -= 1
        self._elements[self._size] = None
        return removed  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove every element. Capacity is kept."""
        for i in range(self._size):
            self._elements[i] = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def sort_with_comparator(self, comparator: Comparator) -> None:
        """Sort in place with the built-in (stable, O(n log n)) sort."""
        logger.debug(f"Sorting {self._size} elements with {SortAlgorithm.BUILTIN.value} sort")
        builtin_sort(self._elements, self._size, comparator)

    def quick_sort(self, comparator: Comparator) -> None:
        """Sort in place with Lomuto-partition quicksort.

        The pivot is always the last element of a range, so sorted and
        reverse-sorted input take O(n^2) comparisons.
        """
        logger.debug(f"Sorting {self._size} elements with {SortAlgorithm.QUICK.value} sort")
        quick_sort(self._elements, 0, self._size - 1, comparator)

    def sort(self, comparator: Comparator, algorithm: SortAlgorithm = SortAlgorithm.BUILTIN) -> None:
        """Sort using the requested strategy."""
        if algorithm == SortAlgorithm.QUICK:
            self.quick_sort(comparator)
        else:
            self.sort_with_comparator(comparator)

    def _ensure_capacity(self) -> None:
        if self._size < len(self._elements):
            return
        old_capacity = len(self._elements)
        new_capacity = old_capacity * self._growth_factor
        grown: list[Optional[T]] = [None] * new_capacity
        grown[:self._size] = self._elements[:self._size]
        self._elements = grown
        logger.debug(f"Growing backing store: {old_capacity} -> {new_capacity}")

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(index, self._size)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._elements[i]  # type: ignore[misc]

    def __str__(self) -> str:
        return "[" + ", ".join(str(self._elements[i]) for i in range(self._size)) + "]"

    def __repr__(self) -> str:
        return f"DynamicArray(size={self._size}, capacity={self.capacity}, elements={self})"
