"""
Shortest-path algorithms over directed graphs with integer edge costs.

This package provides:
- The directed Graph store (Graph, Vertex, Edge)
- An indexed binary min-heap with decrease-key (IndexedMinHeap)
- Single-source shortest paths (Dijkstra, Bellman-Ford)
- All-pairs shortest paths (Johnson, repeated Bellman-Ford)

All algorithms are deterministic: vertices are indexed in ascending id order
and heap ties are broken by insertion order.
"""

from .core import Edge, Graph, Vertex
from .heap import IndexedMinHeap
from .results import INFINITY, AllPairsResult, ShortestPathResult, Status
from .utils import reconstruct_path, sort_edges_by_cost, vertex_index_map
from .shortest import bellman_ford, dijkstra
from .allpairs import JohnsonConfig, all_pairs_bellman_ford, johnson

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "IndexedMinHeap",
    "INFINITY",
    "Status",
    "ShortestPathResult",
    "AllPairsResult",
    "dijkstra",
    "bellman_ford",
    "johnson",
    "JohnsonConfig",
    "all_pairs_bellman_ford",
    "vertex_index_map",
    "sort_edges_by_cost",
    "reconstruct_path",
]

# Example usage:
# from shortpaths.graphs import Graph, johnson
#
# G = Graph.from_edge_list(3, [(1, 2, 4), (2, 3, -1), (1, 3, 7)])
# result = johnson(G)
# result.dist          # array([[0, 4, 3], [1000000, 0, -1], [1000000, 1000000, 0]])
