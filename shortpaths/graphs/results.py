"""
Result containers shared by the shortest-path algorithms.

Distances are dense ``numpy.int64`` arrays indexed by vertex position, where
positions follow ascending vertex id (see ``vertex_ids`` on each result).
Unreachable vertices hold the ``INFINITY`` sentinel. A reachable negative
cycle is not a number: it is reported through ``Status.NEGATIVE_CYCLE`` and
the result then carries no distances at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

import numpy as np

from .utils import reconstruct_path

# Sentinel distance for "no path". Finite distances must stay below it.
INFINITY = 1_000_000


class Status(Enum):
    """Exit status of a shortest-path computation."""

    OK = "ok"
    NEGATIVE_CYCLE = "negative_cycle"


@dataclass
class ShortestPathResult:
    """
    Single-source shortest-path result.

    Attributes:
        source: Source vertex id.
        vertex_ids: Vertex ids in position order.
        status: ``Status.OK`` or ``Status.NEGATIVE_CYCLE``.
        dist: Distance vector (``None`` on a negative cycle).
        parent: Mapping vertex -> predecessor on a shortest path (``None``
            for the source and unreachable vertices); ``None`` on a negative
            cycle.
        message: Human-readable string explaining the status.
        nit: Number of rounds (Bellman-Ford) or extractions (Dijkstra).
    """

    source: int
    vertex_ids: List[int]
    status: Status
    dist: Optional[np.ndarray]
    parent: Optional[Dict[int, Optional[int]]]
    message: str
    nit: int = 0
    _index_of: Dict[int, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._index_of = {v: i for i, v in enumerate(self.vertex_ids)}

    @property
    def ok(self) -> bool:
        """True when distances are available."""
        return self.status is Status.OK

    def distance_to(self, vertex_id: int) -> int:
        """
        Return the shortest distance from the source to a vertex.

        Raises:
            ValueError: If the computation hit a negative cycle.
            KeyError: If the vertex is unknown.
        """
        if self.dist is None:
            raise ValueError(f"No distances available: {self.message}")
        try:
            return int(self.dist[self._index_of[vertex_id]])
        except KeyError:
            raise KeyError(f"Vertex {vertex_id} not in result") from None

    @property
    def reached(self) -> np.ndarray:
        """
        Boolean mask, in position order, of the vertices the run reached.

        Derived from the predecessor map rather than from ``dist``: a run over
        reweighted costs may hold finite distances at or above ``INFINITY``.

        Raises:
            ValueError: If the computation hit a negative cycle.
        """
        if self.parent is None:
            raise ValueError(f"No paths available: {self.message}")
        return np.array(
            [v == self.source or self.parent.get(v) is not None for v in self.vertex_ids],
            dtype=bool,
        )

    def is_reachable(self, vertex_id: int) -> bool:
        """Return True if the vertex is reachable from the source."""
        if self.parent is None:
            raise ValueError(f"No paths available: {self.message}")
        if vertex_id not in self._index_of:
            raise KeyError(f"Vertex {vertex_id} not in result")
        return vertex_id == self.source or self.parent.get(vertex_id) is not None

    def path_to(self, vertex_id: int) -> Optional[List[int]]:
        """Return the vertices of a shortest path to ``vertex_id``, or None."""
        if self.parent is None:
            raise ValueError(f"No paths available: {self.message}")
        if not self.is_reachable(vertex_id):
            return None
        return reconstruct_path(self.parent, vertex_id)


@dataclass
class AllPairsResult:
    """
    All-pairs shortest-path result.

    Attributes:
        vertex_ids: Vertex ids in position order (rows and columns).
        status: ``Status.OK`` or ``Status.NEGATIVE_CYCLE``.
        dist: ``n x n`` distance matrix, ``dist[i, j]`` from ``vertex_ids[i]``
            to ``vertex_ids[j]`` (``None`` on a negative cycle).
        message: Human-readable string explaining the status.
        parents: Per-source predecessor maps, in row order, when path
            tracking was requested; otherwise ``None``.
    """

    vertex_ids: List[int]
    status: Status
    dist: Optional[np.ndarray]
    message: str
    parents: Optional[List[Dict[int, Optional[int]]]] = None
    _index_of: Dict[int, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._index_of = {v: i for i, v in enumerate(self.vertex_ids)}

    @property
    def ok(self) -> bool:
        """True when the distance matrix is available."""
        return self.status is Status.OK

    def _index(self, vertex_id: int) -> int:
        try:
            return self._index_of[vertex_id]
        except KeyError:
            raise KeyError(f"Vertex {vertex_id} not in result") from None

    def distance(self, u: int, v: int) -> int:
        """
        Return the shortest distance from ``u`` to ``v``.

        Raises:
            ValueError: If the computation hit a negative cycle.
            KeyError: If either vertex is unknown.
        """
        if self.dist is None:
            raise ValueError(f"No distances available: {self.message}")
        return int(self.dist[self._index(u), self._index(v)])

    def row(self, u: int) -> np.ndarray:
        """Return the distance vector from ``u`` (a view into the matrix)."""
        if self.dist is None:
            raise ValueError(f"No distances available: {self.message}")
        return self.dist[self._index(u)]

    def path(self, u: int, v: int) -> Optional[List[int]]:
        """
        Return the vertices of a shortest ``u -> v`` path, or None if ``v`` is
        unreachable from ``u``.

        Raises:
            ValueError: If paths were not tracked or no distances exist.
        """
        if self.parents is None:
            raise ValueError("Paths were not tracked; rerun with track_paths=True")
        if self.distance(u, v) == INFINITY:
            return None
        return reconstruct_path(self.parents[self._index(u)], v)
