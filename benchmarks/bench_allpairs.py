"""Benchmark Johnson's all-pairs shortest paths."""

import time
from typing import Dict

import numpy as np

from shortpaths import Graph, JohnsonConfig, johnson


def random_reweightable_graph(n: int, m: int, seed: int = 0) -> Graph:
    """Random graph with negative edges but no negative cycle.

    Args:
        n: Number of vertices.
        m: Number of edges.
        seed: RNG seed.

    Returns:
        Graph on vertices 1..n.
    """
    rng = np.random.default_rng(seed)
    tails = rng.integers(1, n + 1, size=m)
    heads = rng.integers(1, n + 1, size=m)
    base = rng.integers(0, 100, size=m)
    offsets = rng.integers(-50, 51, size=n + 1)
    triples = [
        (int(u), int(v), int(w + offsets[u] - offsets[v]))
        for u, v, w in zip(tails, heads, base)
    ]
    return Graph.from_edge_list(n, triples)


def benchmark_johnson(n: int, m: int, max_workers: int = 1) -> Dict[str, float]:
    """Benchmark Johnson on a random graph.

    Args:
        n: Number of vertices.
        m: Number of edges.
        max_workers: Threads for the Dijkstra phase.

    Returns:
        Dictionary with timing results.
    """
    graph = random_reweightable_graph(n, m)
    config = JohnsonConfig(max_workers=max_workers)

    # Warmup
    johnson(random_reweightable_graph(10, 30), config)

    start = time.perf_counter()
    result = johnson(graph, config)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n": n,
        "m": m,
        "max_workers": max_workers,
        "ok": result.ok,
        "total_time_sec": total_time,
        "time_per_source_sec": total_time / n,
    }


if __name__ == "__main__":
    print("Benchmarking Johnson...")

    for workers in (1, 4):
        results = benchmark_johnson(n=300, m=3000, max_workers=workers)
        print(f"Johnson (n=300, m=3000, max_workers={workers}):")
        print(f"  Total time: {results['total_time_sec']:.3f} s")
        print(f"  Time per source: {results['time_per_source_sec']*1e3:.2f} ms")
