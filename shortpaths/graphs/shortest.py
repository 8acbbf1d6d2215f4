"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge costs, driven by an indexed heap
with decrease-key.
Bellman-Ford algorithm for graphs with negative costs (detects negative cycles).

Both functions are pure: they read the graph and keep all working state in
the call, so independent runs can proceed concurrently over the same graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

from typing import Dict, Optional

import numpy as np

from ..diagnostics import assert_nonnegative_costs, assert_valid_distances, is_debug_enabled
from ..logging import get_logger, log_progress
from .core import Graph
from .heap import IndexedMinHeap
from .results import INFINITY, ShortestPathResult, Status
from .utils import vertex_index_map

logger = get_logger(__name__)

# Internal marker for "not reached yet"; never mixed into arithmetic
_UNREACHED = np.iinfo(np.int64).max


def dijkstra(graph: Graph, source: int, check_nonnegative: bool = True) -> ShortestPathResult:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Vertices enter the heap when first discovered. A later, shorter path to
    an enqueued vertex lowers its key in place; once a vertex is extracted
    its distance is final and it is never revisited.

    Args:
        graph: Graph with non-negative edge costs.
        source: Source vertex id.
        check_nonnegative: Scan the graph for negative costs before running.
            Callers that already guarantee non-negativity may skip the scan.

    Returns:
        ShortestPathResult with status OK, the distance vector and the
        predecessor map.

    Raises:
        ValueError: If source is not in graph.
        ValueError: If check_nonnegative is set and a negative cost exists.

    Complexity: O(m log n) using the indexed binary heap.

    Example:
        >>> G = Graph.from_edge_list(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)])
        >>> dijkstra(G, 1).dist.tolist()
        [0, 4, 5]
    """
    if source not in graph:
        raise ValueError(f"Source vertex {source} not in graph")

    if check_nonnegative:
        assert_nonnegative_costs(graph)

    index_of, vertex_ids = vertex_index_map(graph.vertex_ids())
    n = len(vertex_ids)
    debug = is_debug_enabled()

    dist = np.full(n, INFINITY, dtype=np.int64)
    parent: Dict[int, Optional[int]] = {v: None for v in vertex_ids}
    finalized = set()

    heap = IndexedMinHeap()
    heap.push(source, 0)

    while heap:
        w, d = heap.pop()
        finalized.add(w)
        dist[index_of[w]] = d

        if debug:
            heap.validate()

        # Relax edges leaving w
        for edge in graph.edges_leaving(w):
            v = edge.head
            if v in finalized:
                continue

            candidate = d + edge.cost
            if v in heap:
                if candidate < heap.score(v):
                    heap.decrease_key(v, candidate)
                    parent[v] = w
            else:
                heap.push(v, candidate)
                parent[v] = w

    if debug:
        reached = np.array([v in finalized for v in vertex_ids], dtype=bool)
        assert_valid_distances(dist, n, INFINITY, source_index=index_of[source], reached=reached)

    logger.debug("Dijkstra from %s finalized %d of %d vertices", source, len(finalized), n)

    return ShortestPathResult(
        source=source,
        vertex_ids=vertex_ids,
        status=Status.OK,
        dist=dist,
        parent=parent,
        message="Shortest paths found.",
        nit=len(finalized),
    )


def bellman_ford(graph: Graph, source: int) -> ShortestPathResult:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Dynamic program over at most n rounds. Round i holds, for each vertex,
    the length of a shortest walk from the source using at most i edges:
    the minimum of its previous value and, over every arriving edge (u, v),
    value(u) + cost(u, v). Vertices not reached yet offer no candidate. Only
    the previous and current rounds are kept. The loop stops as soon as a
    round changes nothing; if round n still changes a value, a negative
    cycle is reachable from the source.

    Assumes no parallel edges in the classic formulation, although parallel
    edges are handled correctly here (the cheapest one wins).

    Args:
        graph: Graph (may have negative costs).
        source: Source vertex id.

    Returns:
        ShortestPathResult. On success status is OK and ``dist``/``parent``
        are set; when a negative cycle is reachable status is
        NEGATIVE_CYCLE and ``dist``/``parent`` are None.

    Raises:
        ValueError: If source is not in graph.

    Complexity: O(n m), each round vectorized over the edge arrays.

    Example:
        >>> G = Graph.from_edge_list(3, [(1, 2, 1), (2, 3, -2)])
        >>> bellman_ford(G, 1).dist.tolist()
        [0, 1, -1]
    """
    if source not in graph:
        raise ValueError(f"Source vertex {source} not in graph")

    index_of, vertex_ids = vertex_index_map(graph.vertex_ids())
    n = len(vertex_ids)
    tails, heads, costs = graph.edges_as_arrays(index_of)

    prev = np.full(n, _UNREACHED, dtype=np.int64)
    prev[index_of[source]] = 0
    parent_idx = np.full(n, -1, dtype=np.int64)

    rounds = 0
    for rounds in range(1, n + 1):
        reached = prev[tails] != _UNREACHED
        t = tails[reached]
        h = heads[reached]
        candidates = prev[t] + costs[reached]

        curr = prev.copy()
        np.minimum.at(curr, h, candidates)

        improved = curr < prev
        if not improved.any():
            break

        # Predecessor of an improved vertex: an arriving edge achieving its new value
        hit = improved[h] & (candidates == curr[h])
        parent_idx[h[hit]] = t[hit]

        prev = curr

        log_progress(logger, f"Bellman-Ford from {source} rounds", rounds, n, 200)
    else:
        logger.info("Bellman-Ford from %s: negative cycle detected after %d rounds", source, rounds)
        return ShortestPathResult(
            source=source,
            vertex_ids=vertex_ids,
            status=Status.NEGATIVE_CYCLE,
            dist=None,
            parent=None,
            message="Negative cycle reachable from source.",
            nit=rounds,
        )

    dist = np.where(prev == _UNREACHED, INFINITY, prev).astype(np.int64)
    parent: Dict[int, Optional[int]] = {
        v: (vertex_ids[p] if p >= 0 else None) for v, p in zip(vertex_ids, parent_idx.tolist())
    }

    if is_debug_enabled():
        assert_valid_distances(dist, n, INFINITY, source_index=index_of[source])

    logger.debug("Bellman-Ford from %s converged after %d rounds", source, rounds)

    return ShortestPathResult(
        source=source,
        vertex_ids=vertex_ids,
        status=Status.OK,
        dist=dist,
        parent=parent,
        message="Shortest paths found.",
        nit=rounds,
    )
