#!/usr/bin/env python3
"""
Performance script for the AA-tree container.

Tests:
1. Sequential insert throughput
2. Random insert throughput
3. Random lookup throughput
4. Ordered traversal throughput
5. Random removal throughput

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Final tree height

Usage:
    python benchmark.py [quick]
"""

import logging
import os
import random
import statistics
import sys
import time
from typing import List

from aatree import AATree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


class PerformanceTest:
    def __init__(self, count: int, seed: int = 42):
        self.count = count
        self.rng = random.Random(seed)
        self.tree: AATree | None = None

    def setup(self) -> None:
        """Start every test from an empty tree."""
        self.tree = AATree()

    @staticmethod
    def generate_key(i: int, prefix: str = "key") -> str:
        """Generate a key with zero-padding for sorting."""
        return f"{prefix}_{i:010d}"

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    def height(self) -> int:
        """Longest root-to-leaf path, counted in nodes."""
        best = 0
        stack = [(self.tree.root, 1)] if self.tree.root else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def _timed(self, name: str, keys: List[str], op) -> dict:
        latencies = []
        start = time.perf_counter()
        for key in keys:
            t0 = time.perf_counter_ns()
            op(key)
            latencies.append(time.perf_counter_ns() - t0)
        elapsed = time.perf_counter() - start

        results = {
            "test": name,
            "count": len(keys),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(keys) / elapsed if elapsed > 0 else 0.0,
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_sequential_insert(self) -> dict:
        self.setup()
        keys = [self.generate_key(i) for i in range(self.count)]
        return self._timed("Sequential Insert", keys, lambda k: self.tree.add(k, k))

    def test_random_insert(self) -> dict:
        self.setup()
        keys = [self.generate_key(i) for i in range(self.count)]
        self.rng.shuffle(keys)
        return self._timed("Random Insert", keys, lambda k: self.tree.add(k, k))

    def test_random_lookup(self) -> dict:
        keys = [self.generate_key(self.rng.randrange(self.count)) for _ in range(self.count)]
        return self._timed("Random Lookup", keys, lambda k: self.tree[k])

    def test_traversal(self) -> dict:
        start = time.perf_counter()
        visited = sum(1 for _ in self.tree)
        elapsed = time.perf_counter() - start
        results = {
            "test": "In-order Traversal",
            "count": visited,
            "elapsed_sec": elapsed,
            "ops_per_sec": visited / elapsed if elapsed > 0 else 0.0,
        }
        self.print_results(results)
        return results

    def test_random_remove(self) -> dict:
        keys = [self.generate_key(i) for i in range(self.count)]
        self.rng.shuffle(keys)
        return self._timed("Random Remove", keys, self.tree.remove)

    @staticmethod
    def print_results(results: dict) -> None:
        print(f"\n{'='*60}")
        print(f"{results['test']}")
        print(f"{'='*60}")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.2f}s")
        print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")
        if "median_ms" in results:
            print(
                f"  Latency (p50/p95/p99): {results['median_ms']:.4f}/"
                f"{results['p95_ms']:.4f}/{results['p99_ms']:.4f} ms"
            )


def run(count: int) -> None:
    logger.info(f"Running AA-tree benchmark with {count} keys")
    test = PerformanceTest(count)

    test.test_sequential_insert()
    logger.info(f"Height after sequential insert: {test.height()}")

    test.test_random_insert()
    logger.info(f"Height after random insert: {test.height()}")

    test.test_random_lookup()
    test.test_traversal()
    test.test_random_remove()

    if len(test.tree) != 0:
        logger.error(f"Tree not empty after removing every key: {len(test.tree)} left")
    else:
        logger.info("Benchmark complete")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run(10_000)
    else:
        run(200_000)
