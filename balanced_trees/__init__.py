"""
Self-balancing binary search trees and supporting collections.

This package provides:
- AVLTree - Height balanced, O(log N) insert and lookup
- RedBlackTree - Color balanced, O(log N) insert and lookup
- SplayTree - Amortized balance, recently accessed elements at the root
- SimpleBinarySearchTree - No balancing
- BinaryHeap - Array-backed binary heap with a caller-supplied priority
- MinHeap / MaxHeap - Preset binary heaps
- DynamicArray - Resizable indexed array
"""

from balanced_trees.models import (
    BinaryHeap,
    DynamicArray,
    EmptyCollectionError,
    MaxHeap,
    MinHeap,
    OutOfBoundsError,
)
from balanced_trees.models.sortedcontainers import (
    AVLTree,
    RedBlackTree,
    SimpleBinarySearchTree,
    SplayTree,
)

__all__ = [
    "AVLTree",
    "BinaryHeap",
    "DynamicArray",
    "EmptyCollectionError",
    "MaxHeap",
    "MinHeap",
    "OutOfBoundsError",
    "RedBlackTree",
    "SimpleBinarySearchTree",
    "SplayTree",
]
