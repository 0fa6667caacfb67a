"""
DynamicArray - Resizable indexed array.
"""

import logging
from typing import Any

from balanced_trees.interfaces.indexed_list import IndexedList, SkippingIterator
from balanced_trees.models.exceptions import OutOfBoundsError

logger = logging.getLogger(__name__)


class DynamicArray(IndexedList):
    """
    Array-backed IndexedList that grows and shrinks automatically.

    The backing store is a fixed-capacity slot list:
    - Capacity doubles when an insert finds it full
    - Capacity halves when only a quarter is in use (never below the
      initial capacity)
    """

    # Default number of slots allocated up front
    DEFAULT_INITIAL_CAPACITY = 16

    def __init__(
        self,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        min_index: int = 0,
    ) -> None:
        """
        Initialize an empty array.

        Args:
            initial_capacity: Number of slots to allocate. Must be positive.
            min_index: Logical index of the first element.
        """
        if initial_capacity <= 0:
            raise ValueError(
                f"initial_capacity must be positive, got {initial_capacity}"
            )

        self._initial_capacity = initial_capacity
        self._array: list[Any] = [None] * initial_capacity
        self._min = min_index
        self._size = 0

    @property
    def min_index(self) -> int:
        return self._min

    @property
    def capacity(self) -> int:
        return len(self._array)

    def size(self) -> int:
        return self._size

    def add(self, element: Any) -> None:
        """Append an element. Amortized O(1)"""
        self._ensure_capacity()
        self._array[self._size] = element
        self._size += 1

    def prepend(self, element: Any) -> None:
        """
        Insert an element at the front. O(N)

        The minimum index moves down by one, so every existing element keeps
        its index.
        """
        self._ensure_capacity()
        self._array[1:self._size + 1] = self._array[0:self._size]
        self._array[0] = element
        self._size += 1
        self._min -= 1

    def remove(self, index: int, shift_forwards: bool = False) -> Any:
        """Remove the element at index and close the gap. O(N)"""
        self._check_index(index)

        offset = index - self._min
        result = self._array[offset]
        self._array[offset:self._size - 1] = self._array[offset + 1:self._size]
        self._size -= 1
        self._array[self._size] = None

        if shift_forwards:
            self._min += 1

        if self._size <= self.capacity // 4 and self.capacity > self._initial_capacity:
            self._resize(max(self.capacity // 2, self._initial_capacity))

        return result

    def swap(self, index: int, other_index: int) -> None:
        self._check_index(index)
        self._check_index(other_index)

        i = index - self._min
        j = other_index - self._min
        self._array[i], self._array[j] = self._array[j], self._array[i]

    def get(self, index: int) -> Any:
        self._check_index(index)
        return self._array[index - self._min]

    def index_of(self, element: Any, n: int = 0) -> int | None:
        """Find the n-th index holding element. O(N)"""
        if n < 0:
            # -1 is the last occurrence, so convert to a skip count
            remaining = -n - 1
            offsets = range(self._size - 1, -1, -1)
        else:
            remaining = n
            offsets = range(self._size)

        for offset in offsets:
            if self._array[offset] == element:
                if remaining == 0:
                    return offset + self._min
                remaining -= 1

        return None

    def iterator(self) -> SkippingIterator:
        return _DynamicArrayIterator(self)

    def _check_index(self, index: int) -> None:
        """Raise OutOfBoundsError, reporting the actual list bounds."""
        if index < self._min or index > self.max_index:
            raise OutOfBoundsError(index, self._min, self.max_index)

    def _ensure_capacity(self) -> None:
        if self._size == self.capacity:
            self._resize(self.capacity * 2)

    def _resize(self, new_capacity: int) -> None:
        logger.debug(f"Resizing array from {self.capacity} to {new_capacity} slots")
        resized: list[Any] = [None] * new_capacity
        resized[:self._size] = self._array[:self._size]
        self._array = resized

    def __repr__(self) -> str:
        items = ", ".join(repr(e) for e in self._array[:self._size])
        return f"DynamicArray([{items}], min_index={self._min})"


class _DynamicArrayIterator(SkippingIterator):
    """Skipping iterator over a DynamicArray in index order."""

    def __init__(self, array: DynamicArray) -> None:
        self._array = array
        self._offset = 0

    def __iter__(self) -> "_DynamicArrayIterator":
        return self

    def __next__(self) -> Any:
        if self._offset >= self._array.size():
            raise StopIteration

        element = self._array.get(self._offset + self._array.min_index)
        self._offset += 1
        return element

    def skip(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"skip amount must be >= 0, got {amount}")
        self._offset = min(self._offset + amount, self._array.size())
