"""
Data structure models.
"""

from balanced_trees.models.dynamic_array import DynamicArray
from balanced_trees.models.exceptions import EmptyCollectionError, OutOfBoundsError
from balanced_trees.models.heap import BinaryHeap, MaxHeap, MinHeap

__all__ = [
    "BinaryHeap",
    "DynamicArray",
    "EmptyCollectionError",
    "MaxHeap",
    "MinHeap",
    "OutOfBoundsError",
]
