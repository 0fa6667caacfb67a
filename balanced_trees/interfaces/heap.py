"""
Heap abstract base class for priority-ordered collections.
"""

from abc import abstractmethod
from typing import Any

from balanced_trees.interfaces.tree import Tree


class Heap(Tree):
    """
    Abstract base class for heaps.

    A heap stores elements by priority and gives efficient access to the
    highest priority element.
    """

    @abstractmethod
    def top(self) -> Any | None:
        """
        Peek at the highest priority element.

        Returns:
            The highest priority element, or None if the heap is empty.
        """
        pass

    @abstractmethod
    def remove(self) -> Any:
        """
        Remove and return the highest priority element.

        Returns:
            The element that had the highest priority.

        Raises:
            EmptyCollectionError: If the heap is empty.
        """
        pass
