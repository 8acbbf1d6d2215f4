"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing, edge ordering, and path reconstruction.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .core import Graph


def vertex_index_map(vertex_ids: Iterable[int]) -> Tuple[Dict[int, int], List[int]]:
    """
    Create deterministic mapping from vertex ids to positions 0..n-1.

    Vertices are ordered by ascending id, so for a graph built with
    ``Graph.from_edge_list`` vertex ``v`` lands at position ``v - 1``.

    Args:
        vertex_ids: Iterable of vertex ids.

    Returns:
        Tuple of (id_to_index dict, index_to_id list).

    Example:
        >>> id_to_idx, idx_to_id = vertex_index_map([3, 1, 2])
        >>> id_to_idx
        {1: 0, 2: 1, 3: 2}
        >>> idx_to_id
        [1, 2, 3]
    """
    ordered = sorted(set(vertex_ids))
    id_to_index = {vertex_id: idx for idx, vertex_id in enumerate(ordered)}
    return id_to_index, ordered


def sort_edges_by_cost(graph: Graph) -> List[int]:
    """
    Return edge ids sorted by ascending cost, ties broken by edge id.

    Args:
        graph: Graph whose edges are sorted.

    Returns:
        List of edge ids.

    Example:
        >>> G = Graph.from_edge_list(3, [(1, 2, 5), (2, 3, -1), (1, 3, 5)])
        >>> sort_edges_by_cost(G)
        [2, 1, 3]
    """
    return sorted(graph.edge_ids(), key=lambda e: (graph.get_edge(e).cost, e))


def reconstruct_path(
    parent: Dict[int, Optional[int]], target: int
) -> Optional[List[int]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from a shortest-path algorithm where
    parent[v] is the previous vertex on the shortest path, or None if v is
    the source or unreachable.

    Args:
        parent: Dictionary mapping vertex -> parent vertex (or None).
        target: Target vertex to reconstruct path to.

    Returns:
        List of vertices from source to target (inclusive), or None if
        target is not in the map or the parent chain loops.

    Example:
        >>> reconstruct_path({1: None, 2: 1, 3: 2}, 3)
        [1, 2, 3]
    """
    if target not in parent:
        return None

    path = []
    current: Optional[int] = target
    visited = set()
    while current is not None:
        if current in visited:
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path
