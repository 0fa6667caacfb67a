"""
IndexedList and SkippingIterator abstract base classes.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class SkippingIterator(Iterator[Any]):
    """
    Iterator that can jump forward over elements.
    """

    @abstractmethod
    def skip(self, amount: int) -> None:
        """
        Advance the cursor without yielding.

        Skipping past the end is allowed and leaves the iterator exhausted.

        Args:
            amount: Number of elements to skip. Must not be negative.
        """
        pass


class IndexedList(ABC):
    """
    Variable-size ordered container with indexed access.

    Indices are logical: the first element lives at ``min_index``, which
    need not be zero. Allows duplicates.
    """

    @abstractmethod
    def add(self, element: Any) -> None:
        """Append an element."""
        pass

    @abstractmethod
    def prepend(self, element: Any) -> None:
        """Insert an element before the first element."""
        pass

    @abstractmethod
    def remove(self, index: int, shift_forwards: bool = False) -> Any:
        """
        Remove the element at the given index and close the gap.

        Args:
            index: The index to remove.
            shift_forwards: If True the minimum index increases, otherwise
                the maximum index decreases.

        Returns:
            The removed element.

        Raises:
            OutOfBoundsError: If the index is outside the list.
        """
        pass

    @abstractmethod
    def swap(self, index: int, other_index: int) -> None:
        """
        Swap the elements at two indices.

        Raises:
            OutOfBoundsError: If either index is outside the list.
        """
        pass

    @abstractmethod
    def get(self, index: int) -> Any:
        """
        Return the element at the given index.

        Raises:
            OutOfBoundsError: If the index is outside the list.
        """
        pass

    @abstractmethod
    def index_of(self, element: Any, n: int = 0) -> int | None:
        """
        Find the n-th index holding an element.

        In the list ``[0, 4, 6, 9, 4, 3, 4]`` (min index 0),
        ``index_of(4, 0) == 1``, ``index_of(4, 1) == 4`` and
        ``index_of(4, 2) == 6``. Negative n searches from the end, so
        ``index_of(4, -1) == 6``.

        Args:
            element: The element to search for.
            n: Number of matching occurrences to skip first.

        Returns:
            The index, or None if there is no such occurrence.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""
        pass

    @property
    @abstractmethod
    def min_index(self) -> int:
        """Lowest index in the list."""
        pass

    @abstractmethod
    def iterator(self) -> SkippingIterator:
        """Return a skipping iterator over the elements in index order."""
        pass

    @property
    def max_index(self) -> int:
        """Highest index in the list (min_index - 1 when empty)."""
        return self.min_index + self.size() - 1

    def contains(self, element: Any) -> bool:
        return self.index_of(element) is not None

    def last_index_of(self, element: Any) -> int | None:
        return self.index_of(element, -1)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()
