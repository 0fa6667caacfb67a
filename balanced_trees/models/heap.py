"""
Array-backed binary heaps.
"""

import operator
from collections.abc import Callable
from typing import Any

from balanced_trees.interfaces.heap import Heap
from balanced_trees.interfaces.indexed_list import SkippingIterator
from balanced_trees.models.dynamic_array import DynamicArray
from balanced_trees.models.exceptions import EmptyCollectionError


class BinaryHeap(Heap):
    """
    Binary heap stored level by level in a DynamicArray.

    The element at slot 0 has the highest priority; the children of slot i
    live at 2i + 1 and 2i + 2.

    >>> by_length = BinaryHeap(lambda a, b: len(a) > len(b))
    >>> for word in ["fig", "banana", "kiwi"]:
    ...     by_length.add(word)
    >>> by_length.top()
    'banana'
    """

    def __init__(
        self,
        outranks: Callable[[Any, Any], bool],
        initial_capacity: int = DynamicArray.DEFAULT_INITIAL_CAPACITY,
    ) -> None:
        """
        Initialize an empty heap.

        Args:
            outranks: ``outranks(a, b)`` is True when a must sit above b.
                Must be a strict order (False for equal priorities).
            initial_capacity: Number of slots for the backing array.
        """
        self._outranks = outranks
        self._elements = DynamicArray(initial_capacity)

    def add(self, element: Any) -> None:
        """Insert an element. O(log N)"""
        self._elements.add(element)
        self._sift_up(self.size() - 1)

    def top(self) -> Any | None:
        return None if self._elements.is_empty() else self._elements.get(0)

    def remove(self) -> Any:
        """Pop the highest priority element. O(log N)"""
        if self._elements.is_empty():
            raise EmptyCollectionError("Cannot remove element from heap as heap is empty.")

        last = self.size() - 1
        self._elements.swap(0, last)
        result = self._elements.remove(last)

        if not self._elements.is_empty():
            self._sift_down(0)

        return result

    def contains(self, element: Any) -> bool:
        """Linear scan; the heap order does not help equality search. O(N)"""
        return self._elements.contains(element)

    def size(self) -> int:
        return self._elements.size()

    # Nothing is assumed about how the priority relates to the natural
    # order here. Blind search the array.

    def find_min(self) -> Any | None:
        return _smallest(self._elements)

    def find_max(self) -> Any | None:
        return _largest(self._elements)

    def _leaves(self) -> SkippingIterator:
        """Iterate over the leaf slots only; the lowest priority lives there."""
        iterator = self._elements.iterator()
        iterator.skip(self.size() // 2)
        return iterator

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._outranks(self._elements.get(index), self._elements.get(parent)):
                break

            self._elements.swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        n = self.size()
        while (left := 2 * index + 1) < n:
            best = left
            right = left + 1
            if right < n and self._outranks(self._elements.get(right), self._elements.get(left)):
                best = right

            if not self._outranks(self._elements.get(best), self._elements.get(index)):
                break

            self._elements.swap(index, best)
            index = best

    def validate(self) -> None:
        """
        Verify that no child outranks its parent.
        Raises ``AssertionError`` on the first violation.
        """
        for index in range(1, self.size()):
            parent = (index - 1) // 2
            assert not self._outranks(
                self._elements.get(index), self._elements.get(parent)
            ), f"Heap property violated at slot {index}"

    def __repr__(self) -> str:
        items = ", ".join(repr(e) for e in self._elements)
        return f"{type(self).__name__}([{items}])"


def _smallest(elements) -> Any | None:
    smallest = None
    for element in elements:
        if smallest is None or element < smallest:
            smallest = element
    return smallest


def _largest(elements) -> Any | None:
    largest = None
    for element in elements:
        if largest is None or element > largest:
            largest = element
    return largest


class MinHeap(BinaryHeap):
    """Heap where the smallest element has the highest priority."""

    def __init__(self, initial_capacity: int = DynamicArray.DEFAULT_INITIAL_CAPACITY) -> None:
        super().__init__(operator.lt, initial_capacity)

    def find_min(self) -> Any | None:
        return self.top()

    def find_max(self) -> Any | None:
        return _largest(self._leaves())


class MaxHeap(BinaryHeap):
    """Heap where the largest element has the highest priority."""

    def __init__(self, initial_capacity: int = DynamicArray.DEFAULT_INITIAL_CAPACITY) -> None:
        super().__init__(operator.gt, initial_capacity)

    def find_max(self) -> Any | None:
        return self.top()

    def find_min(self) -> Any | None:
        return _smallest(self._leaves())
