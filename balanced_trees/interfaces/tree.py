"""
Tree abstract base class for ordered element collections.
"""

from abc import ABC, abstractmethod
from typing import Any


class Tree(ABC):
    """
    Abstract base class for collections of totally ordered elements.

    Elements must support a consistent three-way order via ``<`` and ``==``.
    Duplicates are allowed.

    Implementations:
    - SimpleBinarySearchTree: No balancing
    - AVLTree: Height balanced
    - RedBlackTree: Color balanced
    - SplayTree: Amortized, recently accessed elements near the root
    - MinHeap / MaxHeap: Array-backed binary heaps
    """

    @abstractmethod
    def add(self, element: Any) -> None:
        """
        Add an element to the collection.

        Args:
            element: The element to add.
        """
        pass

    @abstractmethod
    def contains(self, element: Any) -> bool:
        """
        Check whether an element equal to the given one is stored.

        Args:
            element: The element to look for.

        Returns:
            True if found, False otherwise.
        """
        pass

    @abstractmethod
    def find_min(self) -> Any | None:
        """
        Return the smallest element.

        Returns:
            The minimum element, or None if the collection is empty.
        """
        pass

    @abstractmethod
    def find_max(self) -> Any | None:
        """
        Return the largest element.

        Returns:
            The maximum element, or None if the collection is empty.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored elements.

        Time complexity: O(1)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()
