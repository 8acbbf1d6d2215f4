"""shortpaths - single-source and all-pairs shortest paths on directed graphs."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_nonnegative_costs,
    assert_valid_distances,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Graph store and algorithms
from .graphs import (
    INFINITY,
    AllPairsResult,
    Edge,
    Graph,
    IndexedMinHeap,
    JohnsonConfig,
    ShortestPathResult,
    Status,
    Vertex,
    all_pairs_bellman_ford,
    bellman_ford,
    dijkstra,
    johnson,
    reconstruct_path,
    sort_edges_by_cost,
    vertex_index_map,
)

# Logging
from .logging import configure_logging, get_logger, log_progress, set_log_level

__all__ = [
    "__version__",
    # Graph store
    "Vertex",
    "Edge",
    "Graph",
    "IndexedMinHeap",
    # Results
    "INFINITY",
    "Status",
    "ShortestPathResult",
    "AllPairsResult",
    # Algorithms
    "dijkstra",
    "bellman_ford",
    "johnson",
    "JohnsonConfig",
    "all_pairs_bellman_ford",
    # Utilities
    "vertex_index_map",
    "sort_edges_by_cost",
    "reconstruct_path",
    # Diagnostics
    "assert_nonnegative_costs",
    "assert_valid_distances",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    "log_progress",
]
