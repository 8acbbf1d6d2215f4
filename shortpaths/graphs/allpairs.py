"""
All-pairs shortest path algorithms: Johnson and repeated Bellman-Ford.

Johnson's algorithm handles negative edge costs without negative cycles in
O(n m log n). It runs in three phases, each finishing before the next starts:

1. Augment: a private copy of the graph gets a super-source ``s`` with a
   zero-cost edge to every vertex.
2. Potentials: Bellman-Ford from ``s`` yields ``pi(v)``; a negative cycle
   ends the computation here.
3. Reweight and resolve: every edge cost becomes
   ``cost + pi(u) - pi(v) >= 0``, ``s`` is dropped, Dijkstra runs from every
   vertex and distances are shifted back by ``- pi(u) + pi(v)``.

The caller's graph is never modified. The per-source Dijkstra runs of phase
3 only read the reweighted copy and each fills its own row, so they may run
in a thread pool.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.3 (Johnson's algorithm for sparse graphs).
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..diagnostics import assert_valid_distances, is_debug_enabled
from ..logging import get_logger, log_progress
from .core import Graph
from .results import INFINITY, AllPairsResult, ShortestPathResult, Status
from .shortest import bellman_ford, dijkstra
from .utils import vertex_index_map

logger = get_logger(__name__)


@dataclass
class JohnsonConfig:
    """
    Configuration for Johnson's all-pairs computation.

    Attributes:
        max_workers: Number of threads for the per-source Dijkstra phase;
            1 runs it serially.
        timeout: Wall-clock limit in seconds for the whole computation, or
            None for no limit.
        super_source: Id for the temporary super-source vertex. None picks
            ``max(vertex ids) + 1``. An id already in the graph is rejected.
        track_paths: Keep the per-source predecessor maps so that
            ``AllPairsResult.path`` can rebuild shortest paths.
    """

    max_workers: int = 1
    timeout: Optional[float] = None
    super_source: Optional[int] = None
    track_paths: bool = False

    def __post_init__(self) -> None:
        """Validate JohnsonConfig invariants."""
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}.")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}.")


def _remaining(deadline: Optional[float], phase: str) -> Optional[float]:
    """Seconds left before the deadline; raise once it has passed."""
    if deadline is None:
        return None
    left = deadline - time.monotonic()
    if left <= 0:
        raise FutureTimeoutError(f"Johnson timed out during {phase}")
    return left


def _augment(graph: Graph, super_source: Optional[int]) -> Tuple[Graph, int]:
    """Copy the graph and attach a super-source with zero-cost edges."""
    vertex_ids = graph.vertex_ids()
    if super_source is None:
        super_source = max(vertex_ids) + 1
    elif super_source in graph:
        raise ValueError(f"Super-source id {super_source} collides with an existing vertex")

    augmented = graph.copy()
    augmented.add_vertex(super_source)
    next_edge_id = max(graph.edge_ids(), default=0) + 1
    for offset, head in enumerate(vertex_ids):
        augmented.add_edge(next_edge_id + offset, super_source, head, 0)
    return augmented, super_source


def _reweight(graph: Graph, edge_ids: List[int], potentials: Dict[int, int]) -> None:
    """Replace each edge cost c(u, v) by c(u, v) + pi(u) - pi(v), in place."""
    for edge_id in edge_ids:
        edge = graph.get_edge(edge_id)
        reduced = edge.cost + potentials[edge.tail] - potentials[edge.head]
        if reduced < 0:
            raise AssertionError(
                f"Reweighted cost of edge {edge_id} ({edge.tail} -> {edge.head}) "
                f"is negative: {reduced}"
            )
        graph.set_edge_cost(edge_id, reduced)


def johnson(graph: Graph, config: Optional[JohnsonConfig] = None) -> AllPairsResult:
    """
    Johnson's algorithm for all-pairs shortest paths.

    Args:
        graph: Graph with integer edge costs, possibly negative. It is not
            modified.
        config: Optional JohnsonConfig; defaults to serial execution with no
            timeout.

    Returns:
        AllPairsResult. On success status is OK and ``dist`` is an ``n x n``
        int64 matrix with INFINITY for unreachable pairs. If the graph
        contains a negative cycle, status is NEGATIVE_CYCLE and ``dist`` is
        None.

    Raises:
        ValueError: If the configured super-source collides with a vertex.
        concurrent.futures.TimeoutError: If ``config.timeout`` elapses.

    Complexity: O(n m) for Bellman-Ford plus O(n m log n) for Dijkstra.

    Example:
        >>> G = Graph.from_edge_list(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)])
        >>> johnson(G).dist[0].tolist()
        [0, 4, 5]
    """
    if config is None:
        config = JohnsonConfig()

    deadline = time.monotonic() + config.timeout if config.timeout is not None else None

    _, vertex_ids = vertex_index_map(graph.vertex_ids())
    n = len(vertex_ids)
    if n == 0:
        return AllPairsResult(
            vertex_ids=[],
            status=Status.OK,
            dist=np.zeros((0, 0), dtype=np.int64),
            message="Empty graph.",
            parents=[] if config.track_paths else None,
        )

    # Phase 1: augment
    logger.info("Johnson: augmenting graph (%d vertices, %d edges)", n, graph.num_edges)
    augmented, super_source = _augment(graph, config.super_source)
    _remaining(deadline, "augmentation")

    # Phase 2: potentials
    logger.info("Johnson: running Bellman-Ford from super-source %s", super_source)
    potential_run = bellman_ford(augmented, super_source)
    if not potential_run.ok:
        logger.info("Johnson: negative cycle detected, no distances computed")
        return AllPairsResult(
            vertex_ids=vertex_ids,
            status=Status.NEGATIVE_CYCLE,
            dist=None,
            message="Graph contains a negative cycle.",
        )
    potentials = {v: potential_run.distance_to(v) for v in vertex_ids}
    _remaining(deadline, "potential computation")

    # Phase 3: reweight, drop the super-source, resolve every row
    logger.info("Johnson: reweighting %d edges", graph.num_edges)
    _reweight(augmented, graph.edge_ids(), potentials)
    augmented.remove_vertex(super_source)

    pi = np.array([potentials[v] for v in vertex_ids], dtype=np.int64)
    dist = np.empty((n, n), dtype=np.int64)
    parents: Optional[List[Dict[int, Optional[int]]]] = (
        [{} for _ in range(n)] if config.track_paths else None
    )
    debug = is_debug_enabled()
    solved = 0

    def store(row: int, run: ShortestPathResult) -> None:
        nonlocal solved
        # Reduced distances may sit at or above INFINITY, so reachability
        # comes from the run and not from the value.
        reached = run.reached
        dist[row] = np.where(reached, run.dist - pi[row] + pi, INFINITY)
        if debug:
            assert_valid_distances(dist[row], n, INFINITY, source_index=row, reached=reached)
        if parents is not None:
            parents[row] = run.parent
        solved += 1
        log_progress(logger, "Johnson sources solved", solved, n, 50)

    logger.info("Johnson: running Dijkstra from %d sources (max_workers=%d)", n, config.max_workers)
    if config.max_workers == 1:
        for row, u in enumerate(vertex_ids):
            _remaining(deadline, "Dijkstra phase")
            store(row, dijkstra(augmented, u, check_nonnegative=False))
    else:
        executor = ThreadPoolExecutor(max_workers=config.max_workers)
        try:
            futures = {
                executor.submit(dijkstra, augmented, u, False): row
                for row, u in enumerate(vertex_ids)
            }
            for future in as_completed(futures, timeout=_remaining(deadline, "Dijkstra phase")):
                store(futures[future], future.result())
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    logger.info("Johnson: finished all-pairs computation")
    return AllPairsResult(
        vertex_ids=vertex_ids,
        status=Status.OK,
        dist=dist,
        message="Shortest paths found.",
        parents=parents,
    )


def all_pairs_bellman_ford(graph: Graph, track_paths: bool = False) -> AllPairsResult:
    """
    All-pairs shortest paths by running Bellman-Ford from every vertex.

    Slower than Johnson (O(n^2 m)) but built from a single algorithm, which
    makes it the reference Johnson is checked against. Any negative cycle is
    reachable from its own vertices, so it is always reported.

    Args:
        graph: Graph with integer edge costs, possibly negative.
        track_paths: Keep the per-source predecessor maps.

    Returns:
        AllPairsResult with the same semantics as ``johnson``.
    """
    _, vertex_ids = vertex_index_map(graph.vertex_ids())
    n = len(vertex_ids)
    dist = np.empty((n, n), dtype=np.int64)
    parents: Optional[List[Dict[int, Optional[int]]]] = [] if track_paths else None

    for row, u in enumerate(vertex_ids):
        run = bellman_ford(graph, u)
        if not run.ok:
            return AllPairsResult(
                vertex_ids=vertex_ids,
                status=Status.NEGATIVE_CYCLE,
                dist=None,
                message=f"Negative cycle reachable from vertex {u}.",
            )
        dist[row] = run.dist
        if parents is not None:
            parents.append(run.parent)

    return AllPairsResult(
        vertex_ids=vertex_ids,
        status=Status.OK,
        dist=dist,
        message="Shortest paths found.",
        parents=parents,
    )
