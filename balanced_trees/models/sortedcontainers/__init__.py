"""
Binary search tree implementations.
"""

from balanced_trees.models.sortedcontainers.avl_tree import AVLTree
from balanced_trees.models.sortedcontainers.binary_search_tree import (
    BinarySearchTree,
    SimpleBinarySearchTree,
)
from balanced_trees.models.sortedcontainers.red_black_tree import Color, RedBlackTree
from balanced_trees.models.sortedcontainers.splay_tree import SplayTree

__all__ = [
    "AVLTree",
    "BinarySearchTree",
    "Color",
    "RedBlackTree",
    "SimpleBinarySearchTree",
    "SplayTree",
]
