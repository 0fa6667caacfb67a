"""
AVL Tree implementation.

Keeps the heights of every node's subtrees within one of each other, giving
O(log N) lookups. Optimized for read-heavy workloads.
"""

import logging
from dataclasses import dataclass
from typing import Any

from balanced_trees.models.sortedcontainers.binary_search_tree import BinarySearchTree, Node

logger = logging.getLogger(__name__)


def _height(node: "AVLNode | None") -> int:
    """Height of a subtree; an absent child has height -1."""
    return -1 if node is None else node.height


@dataclass(eq=False)
class AVLNode(Node):
    """Node in the AVL Tree. A leaf has height 0."""

    height: int = 0

    def balance(self) -> int:
        """Height of the right subtree minus height of the left subtree."""
        return _height(self.right) - _height(self.left)

    def update_height(self) -> None:
        self.height = max(_height(self.left), _height(self.right)) + 1

    def __str__(self) -> str:
        return f"{super().__str__()} (height: {self.height})"


class AVLTree(BinarySearchTree):
    """
    AVL self-balancing binary search tree.

    Properties maintained:
    1. Each node's height is 1 + the larger height of its children
    2. Each node's balance factor is -1, 0 or 1
    """

    def _create_node(self, element: Any) -> AVLNode:
        return AVLNode(element)

    def add(self, element: Any) -> None:
        """Insert an element and rebalance. O(log N)"""
        self._balance(self._add_element(element))

    def _balance(self, new_node: AVLNode) -> None:
        """Walk from new_node up to the root, updating heights and rotating."""
        parent = new_node.parent

        while parent is not None:
            parent.update_height()
            balance = parent.balance()

            if balance > 1:
                # Right side too tall
                if parent.right.balance() < 0:
                    logger.debug(f"Right-left case at {parent.element!r}")
                    to_rotate = parent.right.left
                    self._rotate(to_rotate)
                    parent = self._rotate(to_rotate)
                else:
                    logger.debug(f"Right-right case at {parent.element!r}")
                    parent = self._rotate(parent.right)
            elif balance < -1:
                # Left side too tall
                if parent.left.balance() > 0:
                    logger.debug(f"Left-right case at {parent.element!r}")
                    to_rotate = parent.left.right
                    self._rotate(to_rotate)
                    parent = self._rotate(to_rotate)
                else:
                    logger.debug(f"Left-left case at {parent.element!r}")
                    parent = self._rotate(parent.left)

            parent = parent.parent

    def _rotate(self, child: AVLNode) -> AVLNode | None:
        """Rotate, then recompute the heights of both nodes involved."""
        old_parent = child.parent
        result = super()._rotate(child)

        if result is not None:
            old_parent.update_height()
            result.update_height()

        return result

    def validate(self) -> None:
        """
        Verify BST structure plus stored heights and balance factors.
        Raises ``AssertionError`` on the first violation.
        """
        super().validate()

        for node in self._in_order_nodes():
            expected = max(_height(node.left), _height(node.right)) + 1
            assert node.height == expected, (
                f"Node {node.element!r} stores height {node.height}, expected {expected}"
            )
            assert -1 <= node.balance() <= 1, (
                f"Node {node.element!r} is unbalanced ({node.balance()})"
            )
