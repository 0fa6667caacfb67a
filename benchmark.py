#!/usr/bin/env python3
"""
Performance Test Script for the search trees

Tests:
1. Sequential insert throughput
2. Random insert throughput
3. Random lookup throughput
4. Repeated lookup of a small hot set

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
"""

import random
import statistics
import sys
import time
from typing import List

from balanced_trees import AVLTree, RedBlackTree, SimpleBinarySearchTree, SplayTree
from balanced_trees.models.sortedcontainers import BinarySearchTree

TREES = {
    "AVL": AVLTree,
    "Red-Black": RedBlackTree,
    "Splay": SplayTree,
}


class PerformanceTest:
    def __init__(self, tree_class: type[BinarySearchTree]):
        self.tree_class = tree_class
        self.name = tree_class.__name__

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_us": min(latencies) / 1_000,
            "max_us": max(latencies) / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "median_us": statistics.median(latencies) / 1_000,
            "p95_us": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000,
        }

    def _timed_inserts(self, test: str, tree: BinarySearchTree, elements: List[int]) -> dict:
        latencies = []
        start_time = time.perf_counter_ns()

        for element in elements:
            op_start = time.perf_counter_ns()
            tree.add(element)
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        return {
            "test": f"{self.name} {test}",
            "count": len(elements),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(elements) / elapsed,
            **self.calculate_stats(latencies),
        }

    def _timed_lookups(self, test: str, tree: BinarySearchTree, elements: List[int]) -> dict:
        latencies = []
        misses = 0
        start_time = time.perf_counter_ns()

        for element in elements:
            op_start = time.perf_counter_ns()
            if not tree.contains(element):
                misses += 1
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        return {
            "test": f"{self.name} {test}",
            "count": len(elements),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(elements) / elapsed,
            "misses": misses,
            **self.calculate_stats(latencies),
        }

    def test_sequential_insert(self, count: int) -> dict:
        """Ascending inserts, the worst case for an unbalanced tree."""
        return self._timed_inserts("Sequential Insert", self.tree_class(), list(range(count)))

    def test_random_insert(self, count: int) -> dict:
        elements = random.sample(range(count * 10), count)
        return self._timed_inserts("Random Insert", self.tree_class(), elements)

    def test_random_lookup(self, count: int) -> dict:
        tree = self.tree_class()
        for element in random.sample(range(count * 10), count):
            tree.add(element)

        probes = [random.randrange(count * 10) for _ in range(count)]
        return self._timed_lookups("Random Lookup", tree, probes)

    def test_hot_set_lookup(self, count: int, hot_size: int = 10) -> dict:
        """Lookups concentrated on a few elements, where splaying pays off."""
        tree = self.tree_class()
        elements = random.sample(range(count * 10), count)
        for element in elements:
            tree.add(element)

        hot = elements[:hot_size]
        probes = [random.choice(hot) for _ in range(count)]
        return self._timed_lookups("Hot Set Lookup", tree, probes)


def print_result(result: dict) -> None:
    print(f"\n{result['test']}")
    print(f"   Throughput: {result['ops_per_sec']:.2f} ops/sec")
    if "misses" in result:
        print(f"   Misses: {result['misses']}")
    if "median_us" in result:
        print(f"   Latency p50: {result['median_us']:.3f} us, p99: {result['p99_us']:.3f} us")


def run_tests(count: int) -> None:
    random.seed(42)

    print(f"\n{'#'*60}")
    print(f"# Search Tree Performance Test Suite ({count} elements)")
    print(f"{'#'*60}")

    all_results = []
    for tree_class in TREES.values():
        test = PerformanceTest(tree_class)
        all_results.append(test.test_sequential_insert(count))
        all_results.append(test.test_random_insert(count))
        all_results.append(test.test_random_lookup(count))
        all_results.append(test.test_hot_set_lookup(count))

    # Unbalanced baseline; sequential input would degrade into a list
    baseline = PerformanceTest(SimpleBinarySearchTree)
    all_results.append(baseline.test_random_insert(count))
    all_results.append(baseline.test_random_lookup(count))

    for result in all_results:
        print_result(result)

    print(f"\n{'#'*60}")
    print(f"# Test Complete!")
    print(f"{'#'*60}\n")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(count=5_000)
    else:
        run_tests(count=100_000)
