"""
Red-Black Tree implementation.

Optimized for write-heavy workloads with O(log N) operations.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from balanced_trees.models.sortedcontainers.binary_search_tree import BinarySearchTree, Node

logger = logging.getLogger(__name__)


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RedBlackNode(Node):
    """Node in the Red-Black Tree. New nodes start red."""

    color: Color = Color.RED

    def sibling(self, child: "RedBlackNode") -> "RedBlackNode | None":
        """Return the other child of this node, or None if child is not ours."""
        if self.right is child:
            return self.left
        if self.left is child:
            return self.right
        return None

    def __str__(self) -> str:
        return f"{super().__str__()} ({self.color.name.lower()})"


def _is_black(node: RedBlackNode | None) -> bool:
    """Absent children count as black."""
    return node is None or node.color == Color.BLACK


class RedBlackTree(BinarySearchTree):
    """
    Red-Black Tree implementation of Tree.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to an absent child has the same number of
       black nodes
    """

    def _create_node(self, element: Any) -> RedBlackNode:
        return RedBlackNode(element)

    def add(self, element: Any) -> None:
        """Insert an element and restore the color properties. O(log N)"""
        self._fix_insert(self._add_element(element))

    def _fix_insert(self, node: RedBlackNode) -> None:
        """Fix Red-Black Tree properties after insert."""
        while True:
            parent = node.parent

            # Root is black
            if parent is None:
                node.color = Color.BLACK
                return

            # Black parent, nothing violated
            if parent.color == Color.BLACK:
                return

            # Red parent is never the root, so the grandparent exists and is black
            grandparent = parent.parent
            uncle = grandparent.sibling(parent)

            if _is_black(uncle):
                if not node.is_zig_zig():
                    # Straighten the zig-zag; node takes the parent's place
                    parent = self._rotate(node)

                logger.debug(f"Rotating {parent.element!r} above {grandparent.element!r}")
                self._rotate(parent)
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                return

            # Uncle is red: push blackness down from the grandparent
            logger.debug(f"Recoloring below {grandparent.element!r}")
            grandparent.color = Color.RED
            uncle.color = Color.BLACK
            parent.color = Color.BLACK
            node = grandparent

    def validate(self) -> None:
        """
        Verify BST structure plus the red-black invariants.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        super().validate()

        if self._root is not None:
            assert self._root.color == Color.BLACK, "Root is not black"

        def black_height(node: RedBlackNode | None) -> int:
            if node is None:
                return 1

            if node.color == Color.RED:
                assert _is_black(node.left), f"Red node {node.element!r} has red left child"
                assert _is_black(node.right), f"Red node {node.element!r} has red right child"

            left = black_height(node.left)
            right = black_height(node.right)
            assert left == right, f"Black-height mismatch below {node.element!r}"

            return left + (1 if node.color == Color.BLACK else 0)

        black_height(self._root)
