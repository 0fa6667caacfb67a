"""
Tests for the shared tree skeleton: insertion, rotation, queries, rendering
and validation, plus the Tree contract across every variant.
"""

import pytest

from balanced_trees import SimpleBinarySearchTree, SplayTree
from balanced_trees.models.sortedcontainers.binary_search_tree import Node


class TestNode:
    """Tests for Node link helpers."""

    def test_replace_child(self):
        """Test replacing a child re-parents the new child."""
        parent = Node(5)
        old = Node(3, parent=parent)
        parent.left = old
        new = Node(4)

        parent.replace_child(old, new)

        assert parent.left is new
        assert new.parent is parent
        assert old.parent is parent

    def test_replace_child_ignores_strangers(self):
        """Test replacing a node that is not a child does nothing."""
        parent = Node(5)
        new = Node(4)

        parent.replace_child(Node(1), new)

        assert parent.left is None and parent.right is None
        assert new.parent is None

    def test_is_zig_zig(self):
        """Test straight and bent lines are told apart."""
        tree = SimpleBinarySearchTree()
        for element in [5, 3, 1, 4]:
            tree.add(element)

        one = tree._root.left.left
        four = tree._root.left.right

        assert one.is_zig_zig()
        assert not four.is_zig_zig()
        assert not tree._root.left.is_zig_zig()
        assert not tree._root.is_zig_zig()

    def test_str(self):
        """Test node description includes the parent element."""
        root = Node(2)
        child = Node(1, parent=root)

        assert str(root) == "2"
        assert str(child) == "1 p: 2"


class TestInsertion:
    """Tests for leaf insertion."""

    def test_empty_tree_becomes_single_node(self):
        """Test first insert sets the root."""
        tree = SimpleBinarySearchTree()
        tree.add(7)

        assert tree._root.element == 7
        assert tree._root.parent is None
        assert tree.size() == 1

    def test_descent(self):
        """Test less goes left, greater goes right."""
        tree = SimpleBinarySearchTree()
        for element in [5, 3, 8]:
            tree.add(element)

        assert tree._root.left.element == 3
        assert tree._root.right.element == 8
        assert tree._root.left.parent is tree._root

    def test_duplicates_go_right(self):
        """Test equal elements are placed to the right."""
        tree = SimpleBinarySearchTree()
        tree.add(5)
        tree.add(5)

        assert tree._root.left is None
        assert tree._root.right.element == 5
        assert tree.size() == 2

    def test_add_element_returns_new_node(self):
        """Test the new leaf is returned for fix-up."""
        tree = SimpleBinarySearchTree()
        tree.add(5)
        node = tree._add_element(9)

        assert node.element == 9
        assert node.parent is tree._root
        assert tree._root.right is node


class TestRotation:
    """Tests for the single rotation primitive."""

    def test_rotate_root_is_noop(self):
        """Test rotating a parentless node returns None."""
        tree = SimpleBinarySearchTree()
        tree.add(1)

        assert tree._rotate(tree._root) is None
        assert tree._root.element == 1

    def test_rotate_left_child(self):
        """Test lifting a left child hands its right subtree to the parent."""
        tree = SimpleBinarySearchTree()
        for element in [5, 3, 8, 1, 4]:
            tree.add(element)
        three = tree._root.left

        result = tree._rotate(three)

        assert result is three
        assert tree._root is three
        assert three.parent is None
        assert three.right.element == 5
        assert three.right.left.element == 4
        assert three.right.left.parent is three.right
        assert three.left.element == 1
        tree.validate()

    def test_rotate_right_child_under_grandparent(self):
        """Test the grandparent slot is re-pointed to the lifted node."""
        tree = SimpleBinarySearchTree()
        for element in [10, 5, 7, 6, 8]:
            tree.add(element)
        seven = tree._root.left.right

        tree._rotate(seven)

        assert tree._root.left is seven
        assert seven.parent is tree._root
        assert seven.left.element == 5
        assert seven.left.right.element == 6
        assert seven.right.element == 8
        tree.validate()

    def test_rotation_preserves_in_order(self, distinct_elements, in_order, assert_strict_order):
        """Test every possible rotation keeps the in-order sequence."""
        tree = SimpleBinarySearchTree()
        for element in distinct_elements:
            tree.add(element)
        expected = sorted(distinct_elements)

        for node in list(tree._in_order_nodes()):
            tree._rotate(node)
            assert in_order(tree) == expected
            tree.validate()
            assert_strict_order(tree)


class TestTreeContract:
    """Tests for the query operations shared by every tree variant."""

    def test_empty_queries(self, tree_class):
        """Test queries on an empty tree return absence."""
        tree = tree_class()

        assert tree.is_empty()
        assert tree.size() == 0
        assert len(tree) == 0
        assert tree.find_min() is None
        assert tree.find_max() is None
        assert not tree.contains(1)

    def test_min_max_contains(self, tree_class, sample_elements):
        """Test basic queries after inserts."""
        tree = tree_class()
        for element in sample_elements:
            tree.add(element)

        assert tree.find_min() == 0
        assert tree.find_max() == 9
        assert tree.contains(4)
        assert not tree.contains(42)
        assert tree.size() == 10
        assert not tree.is_empty()

    def test_multiset_round_trip(self, tree_class, random_elements, in_order):
        """Test in-order read-out is the sorted input, duplicates kept."""
        tree = tree_class()
        for element in random_elements:
            tree.add(element)

        assert in_order(tree) == sorted(random_elements)
        assert tree.size() == len(random_elements)
        tree.validate()

    def test_strict_order_with_distinct_elements(self, tree_class, distinct_elements, assert_strict_order):
        """Test left < node < right everywhere for distinct input."""
        tree = tree_class()
        for element in distinct_elements:
            tree.add(element)
            assert_strict_order(tree)

    def test_strings(self, tree_class):
        """Test any totally ordered element type works."""
        tree = tree_class()
        for word in ["pear", "apple", "fig", "banana"]:
            tree.add(word)

        assert tree.find_min() == "apple"
        assert tree.find_max() == "pear"
        assert tree.contains("fig")


class TestRendering:
    """Tests for the string rendering."""

    def test_empty(self):
        """Test an empty tree renders as nil."""
        assert str(SimpleBinarySearchTree()) == "nil"

    def test_shape(self):
        """Test nodes, connectors and absent children are drawn."""
        tree = SimpleBinarySearchTree()
        for element in [2, 1, 3]:
            tree.add(element)

        assert str(tree) == "\n".join([
            "2",
            "|-1 p: 2",
            "| |-nil",
            "| |-nil",
            "|-3 p: 2",
            "| |-nil",
            "| |-nil",
        ])

    @pytest.mark.parametrize("tree_class", [SimpleBinarySearchTree, SplayTree])
    def test_deep_chain(self, tree_class):
        """Test a chain deeper than the recursion limit still renders."""
        tree = tree_class()
        n = 2000
        for element in range(n):
            tree.add(element)

        lines = str(tree).splitlines()

        assert len(lines) == 2 * n + 1
        assert lines[0] == str(tree._root)
        # Children of the deepest node sit one level below it
        assert lines.count("| " * (n - 1) + "|-nil") == 2

    def test_repr(self):
        """Test repr names the class and size."""
        tree = SimpleBinarySearchTree()
        tree.add(1)
        assert repr(tree) == "SimpleBinarySearchTree(size=1)"


class TestValidate:
    """Tests for structural validation."""

    def test_detects_order_violation(self):
        """Test an out-of-order element is reported."""
        tree = SimpleBinarySearchTree()
        for element in [5, 3, 8]:
            tree.add(element)
        tree._root.left.element = 9

        with pytest.raises(AssertionError, match="BST order"):
            tree.validate()

    def test_detects_broken_parent_link(self):
        """Test a child not pointing back to its parent is reported."""
        tree = SimpleBinarySearchTree()
        for element in [5, 3, 8]:
            tree.add(element)
        tree._root.right.parent = None

        with pytest.raises(AssertionError, match="does not point back"):
            tree.validate()

    def test_detects_size_mismatch(self):
        """Test the element count is checked."""
        tree = SimpleBinarySearchTree()
        tree.add(1)
        tree._size = 2

        with pytest.raises(AssertionError, match="Size is 2"):
            tree.validate()
