"""
Binary search tree skeleton shared by the balanced trees.

Provides leaf insertion, single rotation, lookup, min/max retrieval,
rendering and structural validation. Subclasses add their balancing
fix-up on top of ``_add_element`` and ``_rotate``.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from balanced_trees.interfaces.tree import Tree


@dataclass(eq=False)
class Node:
    """
    Node in a binary search tree.

    Children are owned by exactly one parent slot (or by the tree, for the
    root). ``parent`` is a back-reference used for upward traversal only.
    """

    element: Any
    parent: "Node | None" = field(default=None, repr=False)
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)

    def replace_child(self, child: "Node", new_child: "Node") -> None:
        """
        Put new_child in the slot holding child and re-parent new_child.

        The old child's parent is left untouched. Does nothing if child is
        not a child of this node.
        """
        if self.left is child:
            self.left = new_child
        elif self.right is child:
            self.right = new_child
        else:
            return

        new_child.parent = self

    def is_zig_zig(self) -> bool:
        """True if this node, its parent and grandparent form a straight line."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return False

        grandparent = parent.parent
        left_line = parent.left is self and grandparent.left is parent
        right_line = parent.right is self and grandparent.right is parent
        return left_line or right_line

    def __str__(self) -> str:
        if self.parent is None:
            return str(self.element)
        return f"{self.element} p: {self.parent.element}"


class BinarySearchTree(Tree):
    """
    Skeleton of a binary search tree.

    Elements strictly less than a node go to its left; equal or greater
    elements go to its right, so duplicates are kept.
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    def _create_node(self, element: Any) -> Node:
        """Construct a detached node. Overridden by trees with node payload."""
        return Node(element)

    def contains(self, element: Any) -> bool:
        """Check if an equal element exists. O(height)"""
        return self._find(element) is not None

    def find_min(self) -> Any | None:
        node = self._find_min_node()
        return node.element if node else None

    def find_max(self) -> Any | None:
        node = self._find_max_node()
        return node.element if node else None

    def size(self) -> int:
        return self._size

    def _add_element(self, element: Any) -> Node:
        """
        Insert element as a new leaf and return the new node.

        Args:
            element: The element to insert.

        Returns:
            The node created, so callers can run their fix-up from it.
        """
        self._size += 1
        new_node = self._create_node(element)

        if self._root is None:
            self._root = new_node
            return new_node

        # Find insertion point
        parent = None
        current = self._root

        while current is not None:
            parent = current
            if element < current.element:
                current = current.left
            else:
                current = current.right

        new_node.parent = parent
        if element < parent.element:
            parent.left = new_node
        else:
            parent.right = new_node

        return new_node

    def _rotate(self, child: Node) -> Node | None:
        """
        Rotate child up around its parent.

        The in-order sequence of elements is unchanged.

        Args:
            child: The node to lift one level.

        Returns:
            The new local root (child), or None if child has no parent.
        """
        old_parent = child.parent
        if old_parent is None:
            return None

        grandparent = old_parent.parent
        if grandparent is not None:
            grandparent.replace_child(old_parent, child)
        else:
            child.parent = None
            self._root = child

        old_parent.parent = child

        # Bring the parent down, hand it the child's inner subtree
        if old_parent.left is child:
            old_parent.left = child.right
            if old_parent.left is not None:
                old_parent.left.parent = old_parent

            child.right = old_parent
        else:
            old_parent.right = child.left
            if old_parent.right is not None:
                old_parent.right.parent = old_parent

            child.left = old_parent

        return child

    def _find(self, element: Any) -> Node | None:
        """Find a node holding an element equal to element."""
        current = self._root
        while current is not None:
            if element == current.element:
                return current
            elif element < current.element:
                current = current.left
            else:
                current = current.right
        return None

    def _find_min_node(self) -> Node | None:
        node = self._root
        if node is None:
            return None

        while node.left is not None:
            node = node.left
        return node

    def _find_max_node(self) -> Node | None:
        node = self._root
        if node is None:
            return None

        while node.right is not None:
            node = node.right
        return node

    def _in_order_nodes(self) -> Iterator[Node]:
        """Yield nodes in ascending order without recursion."""
        stack: list[Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def validate(self) -> None:
        """
        Verify the structural invariants shared by every variant.

        Checks parent/child link consistency, non-decreasing in-order
        sequence and the element count. Raises ``AssertionError`` with a
        descriptive message on the first violation.
        """
        if self._root is not None:
            assert self._root.parent is None, "Root has a parent"

        count = 0
        previous: Node | None = None
        for node in self._in_order_nodes():
            count += 1
            for child in (node.left, node.right):
                if child is not None:
                    assert child.parent is node, (
                        f"Child {child.element!r} does not point back to {node.element!r}"
                    )
            if previous is not None:
                assert not node.element < previous.element, (
                    f"BST order violated ({previous.element!r} before {node.element!r})"
                )
            previous = node

        assert count == self._size, f"Size is {self._size} but tree holds {count} nodes"

    def _render(self) -> list[str]:
        """Draw one line per node or absent child, pre-order, without recursion."""
        lines: list[str] = []
        stack: list[tuple[Node | None, int]] = [(self._root, 0)]
        while stack:
            node, indent = stack.pop()
            prefix = "| " * (indent - 1) + "|-" if indent > 0 else ""
            if node is None:
                lines.append(prefix + "nil")
                continue

            lines.append(prefix + str(node))
            # Right pushed first so the left subtree is drawn first
            stack.append((node.right, indent + 1))
            stack.append((node.left, indent + 1))
        return lines

    def __str__(self) -> str:
        return "\n".join(self._render())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"


class SimpleBinarySearchTree(BinarySearchTree):
    """Binary search tree with no self-balancing."""

    def add(self, element: Any) -> None:
        """Insert an element. O(height), O(N) worst case"""
        self._add_element(element)
