"""
Abstract base classes for the data structures.
"""

from balanced_trees.interfaces.heap import Heap
from balanced_trees.interfaces.indexed_list import IndexedList, SkippingIterator
from balanced_trees.interfaces.tree import Tree

__all__ = ["Heap", "IndexedList", "SkippingIterator", "Tree"]
