"""
Splay Tree implementation.

Frequently accessed elements are kept close to the root, which makes them
quick to access again. Over time this gives an amortized balance.
"""

import logging
from typing import Any

from balanced_trees.models.sortedcontainers.binary_search_tree import BinarySearchTree, Node

logger = logging.getLogger(__name__)


class SplayTree(BinarySearchTree):
    """
    Splay tree: every insertion and every successful query moves the
    accessed node to the root.
    """

    def add(self, element: Any) -> None:
        self._splay(self._add_element(element))

    def contains(self, element: Any) -> bool:
        node = self._find(element)
        if node is None:
            return False

        self._splay(node)
        return True

    def find_min(self) -> Any | None:
        node = self._find_min_node()
        if node is None:
            return None

        self._splay(node)
        return node.element

    def find_max(self) -> Any | None:
        node = self._find_max_node()
        if node is None:
            return None

        self._splay(node)
        return node.element

    def _splay(self, node: Node) -> None:
        """Rotate node up until it is the root."""
        while node.parent is not None:
            if node.is_zig_zig():
                # Straight line from the grandparent: lift the parent first
                self._rotate(node.parent)
            else:
                self._rotate(node)

        # No-op once node is the root
        self._rotate(node)
        logger.debug(f"Splayed {node.element!r} to the root")
