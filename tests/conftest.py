"""Pytest configuration and shared fixtures for shortpaths tests.

This module provides:
- A deterministic numpy RNG fixture
- A random graph factory for property-style cross-checks
- Debug mode reset around every test
"""

import os
from typing import Callable, Optional

import numpy as np
import pytest

from shortpaths import Graph
from shortpaths.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random directed graphs on vertices 1..n.

    With ``potential_range`` set, costs are ``w + p(u) - p(v)`` for a
    non-negative base cost ``w`` and random vertex offsets ``p``. Every
    cycle then keeps its non-negative base total, so such graphs may have
    negative edges but never a negative cycle.
    """

    def make(
        n: int,
        m: int,
        max_cost: int = 20,
        potential_range: Optional[int] = None,
    ) -> Graph:
        tails = rng.integers(1, n + 1, size=m)
        heads = rng.integers(1, n + 1, size=m)
        base = rng.integers(0, max_cost + 1, size=m)
        if potential_range is None:
            offsets = np.zeros(n + 1, dtype=np.int64)
        else:
            offsets = rng.integers(-potential_range, potential_range + 1, size=n + 1)
        triples = [
            (int(u), int(v), int(w + offsets[u] - offsets[v]))
            for u, v, w in zip(tails, heads, base)
        ]
        return Graph.from_edge_list(n, triples)

    return make


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Auto-use fixture restoring the global debug flag after each test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
