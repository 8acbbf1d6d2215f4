"""
Core graph data structures.

Provides the directed Graph store used by every shortest-path algorithm,
together with its Vertex and Edge value types. The graph keeps two adjacency
indices (edges leaving and edges arriving at each vertex) so that both
directions can be queried in O(deg(v)).

Edges are immutable; replacing an edge stores a new Edge under the same id.
Adjacency lists preserve insertion order, which makes every traversal
deterministic.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import numpy as np

from ..logging import get_logger

logger = get_logger(__name__)


def _check_cost(cost) -> int:
    if isinstance(cost, bool) or not isinstance(cost, (int, np.integer)):
        raise ValueError(f"Edge cost must be an integer, got {cost!r}")
    return int(cost)


@dataclass(frozen=True)
class Vertex:
    """
    Vertex of a directed graph.

    Attributes:
        id: Integer identifier, unique within its graph.
    """

    id: int


@dataclass(frozen=True)
class Edge:
    """
    Directed edge ``tail -> head`` with an integer cost.

    Attributes:
        id: Integer identifier, unique within its graph.
        tail: Id of the tail vertex.
        head: Id of the head vertex.
        cost: Integer cost (may be negative).
    """

    id: int
    tail: int
    head: int
    cost: int

    def with_cost(self, cost: int) -> "Edge":
        """Return a copy of this edge carrying a different cost."""
        return Edge(self.id, self.tail, self.head, cost)


class Graph:
    """
    Directed graph with integer vertex/edge ids and integer edge costs.

    Parallel edges are permitted. Every edge must reference vertices already
    present in the graph; inserting one that does not is rejected with
    ValueError so that no algorithm ever runs over an inconsistent store.
    Looking up a missing vertex or edge raises KeyError.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge / set_edge_cost / remove_edge: O(1) amortized
        - remove_vertex: O(deg(v))
        - edges_leaving / edges_arriving: O(deg(v))
        - vertex_ids / edge_ids: O(n) / O(m)
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._vertices: Dict[int, Vertex] = {}
        self._edges: Dict[int, Edge] = {}
        # Ordered sets of edge ids (dict keys keep insertion order)
        self._leaving: Dict[int, Dict[int, None]] = {}
        self._arriving: Dict[int, Dict[int, None]] = {}

    @classmethod
    def from_edge_list(cls, n: int, edges: Iterable[Tuple[int, int, int]]) -> "Graph":
        """
        Build a graph from a vertex count and (tail, head, cost) triples.

        Vertices get ids ``1..n`` and edges get ids ``1..m`` in the order the
        triples are given.

        Args:
            n: Number of vertices.
            edges: Iterable of (tail, head, cost) triples with tail and head
                in [1, n].

        Returns:
            New Graph.

        Raises:
            ValueError: If n is negative or a triple is malformed.

        Example:
            >>> G = Graph.from_edge_list(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)])
            >>> G.num_vertices, G.num_edges
            (3, 3)
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
            raise ValueError(f"Vertex count must be a non-negative integer, got {n!r}")

        graph = cls()
        for vertex_id in range(1, int(n) + 1):
            graph.add_vertex(vertex_id)

        for edge_id, triple in enumerate(edges, start=1):
            try:
                tail, head, cost = triple
            except (TypeError, ValueError):
                raise ValueError(f"Edge {edge_id} is not a (tail, head, cost) triple: {triple!r}")
            for endpoint in (tail, head):
                if isinstance(endpoint, bool) or not isinstance(endpoint, (int, np.integer)):
                    raise ValueError(
                        f"Edge {edge_id} endpoint must be an integer vertex id, got {endpoint!r}"
                    )
                if not (1 <= endpoint <= n):
                    raise ValueError(
                        f"Edge {edge_id} ({tail} -> {head}) references vertex "
                        f"{endpoint} outside [1, {n}]"
                    )
            graph.add_edge(edge_id, int(tail), int(head), cost)

        logger.info("Built graph with %d vertices and %d edges", graph.num_vertices, graph.num_edges)
        return graph

    @property
    def num_vertices(self) -> int:
        """Number of vertices n."""
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        """Number of edges m."""
        return len(self._edges)

    def __contains__(self, vertex_id: int) -> bool:
        return vertex_id in self._vertices

    def has_vertex(self, vertex_id: int) -> bool:
        """Return True if a vertex with the given id exists."""
        return vertex_id in self._vertices

    def has_edge(self, edge_id: int) -> bool:
        """Return True if an edge with the given id exists."""
        return edge_id in self._edges

    def add_vertex(self, vertex_id: int) -> None:
        """
        Add a vertex. Adding an existing id is a no-op.

        Args:
            vertex_id: Integer vertex identifier.
        """
        if vertex_id not in self._vertices:
            self._vertices[vertex_id] = Vertex(vertex_id)
            self._leaving[vertex_id] = {}
            self._arriving[vertex_id] = {}

    def add_edge(self, edge_id: int, tail: int, head: int, cost: int) -> None:
        """
        Insert an edge, or replace the edge stored under the same id.

        When the replaced edge has the same endpoints, the update happens in
        place and the edge keeps its position in both adjacency lists.
        Otherwise the stale adjacency entries are removed and new ones are
        appended.

        Args:
            edge_id: Integer edge identifier.
            tail: Id of the tail vertex.
            head: Id of the head vertex.
            cost: Integer edge cost.

        Raises:
            ValueError: If tail or head is not in the graph, or cost is not
                an integer.
        """
        cost = _check_cost(cost)
        for endpoint in (tail, head):
            if endpoint not in self._vertices:
                raise ValueError(
                    f"Edge {edge_id} ({tail} -> {head}) references missing vertex {endpoint}"
                )

        old = self._edges.get(edge_id)
        if old is not None and (old.tail, old.head) != (tail, head):
            del self._leaving[old.tail][edge_id]
            del self._arriving[old.head][edge_id]

        self._edges[edge_id] = Edge(edge_id, tail, head, cost)
        self._leaving[tail][edge_id] = None
        self._arriving[head][edge_id] = None

    def set_edge_cost(self, edge_id: int, cost: int) -> None:
        """
        Replace the cost of an existing edge in place.

        Raises:
            KeyError: If the edge does not exist.
            ValueError: If cost is not an integer.
        """
        self._edges[edge_id] = self.get_edge(edge_id).with_cost(_check_cost(cost))

    def remove_edge(self, edge_id: int) -> Edge:
        """
        Remove an edge and return it.

        Raises:
            KeyError: If the edge does not exist.
        """
        edge = self.get_edge(edge_id)
        del self._edges[edge_id]
        del self._leaving[edge.tail][edge_id]
        del self._arriving[edge.head][edge_id]
        return edge

    def remove_vertex(self, vertex_id: int) -> None:
        """
        Remove a vertex together with every edge incident to it.

        Raises:
            KeyError: If the vertex does not exist.
        """
        self.get_vertex(vertex_id)
        incident = list(self._leaving[vertex_id]) + list(self._arriving[vertex_id])
        for edge_id in incident:
            # Self-loops appear in both lists
            if edge_id in self._edges:
                self.remove_edge(edge_id)
        del self._vertices[vertex_id]
        del self._leaving[vertex_id]
        del self._arriving[vertex_id]

    def get_vertex(self, vertex_id: int) -> Vertex:
        """
        Return the vertex with the given id.

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise KeyError(f"Vertex {vertex_id} not in graph") from None

    def get_edge(self, edge_id: int) -> Edge:
        """
        Return the edge with the given id.

        Raises:
            KeyError: If the edge is not in the graph.
        """
        try:
            return self._edges[edge_id]
        except KeyError:
            raise KeyError(f"Edge {edge_id} not in graph") from None

    def vertex_ids(self) -> List[int]:
        """Return vertex ids in insertion order."""
        return list(self._vertices)

    def edge_ids(self) -> List[int]:
        """Return edge ids in insertion order."""
        return list(self._edges)

    def edges_leaving(self, vertex_id: int) -> List[Edge]:
        """
        Return the edges whose tail is the given vertex.

        Args:
            vertex_id: Vertex to query.

        Returns:
            List of edges in insertion order (possibly empty).

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        if vertex_id not in self._leaving:
            raise KeyError(f"Vertex {vertex_id} not in graph")
        return [self._edges[e] for e in self._leaving[vertex_id]]

    def edges_arriving(self, vertex_id: int) -> List[Edge]:
        """
        Return the edges whose head is the given vertex.

        Args:
            vertex_id: Vertex to query.

        Returns:
            List of edges in insertion order (possibly empty).

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        if vertex_id not in self._arriving:
            raise KeyError(f"Vertex {vertex_id} not in graph")
        return [self._edges[e] for e in self._arriving[vertex_id]]

    def edges(self) -> List[Edge]:
        """Return all edges in insertion order."""
        return list(self._edges.values())

    def copy(self) -> "Graph":
        """
        Return an independent copy of this graph.

        Edges are immutable, so only the containers are duplicated.
        """
        other = Graph()
        other._vertices = dict(self._vertices)
        other._edges = dict(self._edges)
        other._leaving = {v: dict(ids) for v, ids in self._leaving.items()}
        other._arriving = {v: dict(ids) for v, ids in self._arriving.items()}
        return other

    def edges_as_arrays(
        self, index_of: Dict[int, int]
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Return edges as parallel ``(tails, heads, costs)`` arrays.

        Endpoints are translated to dense positions through ``index_of``.
        Edges are grouped by head vertex, in the order of ``index_of``, and
        within a group follow the arriving-adjacency order.

        Args:
            index_of: Mapping vertex id -> dense position.

        Returns:
            Three int64 arrays of length m.
        """
        tails: List[int] = []
        heads: List[int] = []
        costs: List[int] = []
        for vertex_id in index_of:
            for edge in self.edges_arriving(vertex_id):
                tails.append(index_of[edge.tail])
                heads.append(index_of[edge.head])
                costs.append(edge.cost)
        return (
            np.asarray(tails, dtype=np.int64),
            np.asarray(heads, dtype=np.int64),
            np.asarray(costs, dtype=np.int64),
        )

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"
