"""Core diagnostic checks for graphs and shortest-path results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

if TYPE_CHECKING:
    from ..graphs.core import Edge, Graph


def find_negative_edge(edges: Iterable["Edge"]) -> Optional["Edge"]:
    """
    Return the first edge with a negative cost, or None.

    Parameters
    ----------
    edges:
        Iterable of edges, in the order they should be scanned.
    """
    for edge in edges:
        if edge.cost < 0:
            return edge
    return None


def assert_nonnegative_costs(graph: "Graph") -> None:
    """
    Assert that every edge of a graph has a nonnegative cost.

    Parameters
    ----------
    graph:
        Graph whose edges are checked.

    Raises
    ------
    ValueError
        If some edge has a negative cost.
    """
    edge = find_negative_edge(graph.get_edge(e) for e in graph.edge_ids())
    if edge is not None:
        raise ValueError(
            f"Dijkstra requires non-negative costs. Found negative cost "
            f"{edge.cost} on edge {edge.id} ({edge.tail} -> {edge.head})"
        )


def assert_valid_distances(
    dist: np.ndarray,
    n: int,
    infinity: int,
    source_index: Optional[int] = None,
    reached: Optional[np.ndarray] = None,
) -> None:
    """
    Assert that a distance vector is well formed.

    A well-formed vector is a 1D integer array of length ``n`` whose
    entries do not exceed the ``infinity`` sentinel. When ``source_index``
    is given, the source entry must be exactly 0.

    When a ``reached`` mask is given, the sentinel is checked against it
    instead: every unreached entry must equal ``infinity``, and reached
    entries may take any value. Runs over reweighted costs need this form.

    Parameters
    ----------
    dist:
        Distance vector to check.
    n:
        Expected length.
    infinity:
        Sentinel used for unreachable vertices.
    source_index:
        Position of the source vertex, if the vector is single-source.
    reached:
        Optional boolean mask of the vertices the run actually reached.

    Raises
    ------
    ValueError
        If any of the conditions above is violated.
    """
    if dist.ndim != 1 or dist.shape[0] != n:
        raise ValueError(f"Expected distance vector of shape ({n},), got {dist.shape}.")

    if not np.issubdtype(dist.dtype, np.integer):
        raise ValueError(f"Distance vector must be integer, got dtype {dist.dtype}.")

    if reached is not None:
        if reached.shape != dist.shape:
            raise ValueError(f"Reached mask shape {reached.shape} does not match {dist.shape}.")
        if np.any(dist[~reached] != infinity):
            raise ValueError(f"Unreached entries must hold the sentinel {infinity}.")
    elif n and int(dist.max()) > infinity:
        raise ValueError(
            f"Distance vector has entries above the unreachable sentinel {infinity}."
        )

    if source_index is not None and int(dist[source_index]) != 0:
        raise ValueError(
            f"Source distance must be 0, got {int(dist[source_index])}."
        )
