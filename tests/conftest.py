"""
Shared pytest fixtures for the data structure tests.
"""

import random

import pytest

from balanced_trees import AVLTree, RedBlackTree, SimpleBinarySearchTree, SplayTree


@pytest.fixture
def sample_elements():
    """Provide the insertion order used by the balancing scenarios."""
    return [5, 3, 8, 1, 4, 7, 9, 2, 6, 0]


@pytest.fixture
def random_elements():
    """Provide a reproducible sample with duplicates."""
    rng = random.Random(12345)
    return [rng.randint(0, 200) for _ in range(500)]


@pytest.fixture
def distinct_elements():
    """Provide a reproducible sample of distinct elements."""
    rng = random.Random(54321)
    return rng.sample(range(10_000), 300)


@pytest.fixture(params=[SimpleBinarySearchTree, AVLTree, RedBlackTree, SplayTree])
def tree_class(request):
    """Provide each tree variant in turn."""
    return request.param


@pytest.fixture
def in_order():
    """Provide a function returning a tree's elements in in-order sequence."""

    def collect(tree):
        return [node.element for node in tree._in_order_nodes()]

    return collect


@pytest.fixture
def assert_strict_order():
    """
    Provide a checker that every left subtree is strictly less and every
    right subtree strictly greater than its node (distinct elements only).
    """

    def check(node, low=None, high=None):
        if node is None:
            return
        if low is not None:
            assert node.element > low
        if high is not None:
            assert node.element < high
        check(node.left, low, node.element)
        check(node.right, node.element, high)

    return lambda tree: check(tree._root)
