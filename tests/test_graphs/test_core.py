"""Tests for the Graph store."""

import pytest

from shortpaths.graphs import Edge, Graph, Vertex


class TestGraph:
    """Tests for Graph construction and queries."""

    def test_graph_add_vertex(self):
        """Test adding vertices."""
        G = Graph()
        G.add_vertex(1)
        G.add_vertex(2)
        G.add_vertex(1)  # Duplicate is a no-op

        assert G.num_vertices == 2
        assert G.vertex_ids() == [1, 2]
        assert G.get_vertex(2) == Vertex(2)

    def test_graph_add_edge(self):
        """Test adding edges updates both adjacency indices."""
        G = Graph()
        for v in (1, 2, 3):
            G.add_vertex(v)
        G.add_edge(10, 1, 2, 5)
        G.add_edge(11, 1, 3, -2)

        assert G.num_edges == 2
        assert G.edge_ids() == [10, 11]
        assert G.edges_leaving(1) == [Edge(10, 1, 2, 5), Edge(11, 1, 3, -2)]
        assert G.edges_arriving(3) == [Edge(11, 1, 3, -2)]
        assert G.edges_leaving(2) == []
        assert G.edges_arriving(1) == []

    def test_graph_edge_to_missing_vertex_rejected(self):
        """Edges must reference existing vertices."""
        G = Graph()
        G.add_vertex(1)
        with pytest.raises(ValueError, match="missing vertex 2"):
            G.add_edge(1, 1, 2, 0)
        assert G.num_edges == 0

    def test_graph_non_integer_cost_rejected(self):
        G = Graph.from_edge_list(2, [])
        with pytest.raises(ValueError, match="integer"):
            G.add_edge(1, 1, 2, 1.5)
        with pytest.raises(ValueError, match="integer"):
            G.add_edge(1, 1, 2, True)

    def test_graph_lookup_missing_raises_key_error(self):
        """Missing ids signal not-found instead of returning a sentinel."""
        G = Graph.from_edge_list(2, [(1, 2, 3)])

        with pytest.raises(KeyError):
            G.get_vertex(3)
        with pytest.raises(KeyError):
            G.get_edge(2)
        with pytest.raises(KeyError):
            G.edges_leaving(3)
        with pytest.raises(KeyError):
            G.edges_arriving(0)

    def test_graph_replace_edge_same_endpoints_in_place(self):
        """Replacing an edge's cost keeps its adjacency position."""
        G = Graph.from_edge_list(3, [(1, 2, 1), (1, 3, 2), (1, 2, 3)])
        G.add_edge(1, 1, 2, 9)

        assert G.num_edges == 3
        assert [e.id for e in G.edges_leaving(1)] == [1, 2, 3]
        assert G.get_edge(1).cost == 9
        assert [e.id for e in G.edges_arriving(2)] == [1, 3]

    def test_graph_replace_edge_new_endpoints(self):
        """Replacing an edge with new endpoints moves its adjacency entries."""
        G = Graph.from_edge_list(3, [(1, 2, 1)])
        G.add_edge(1, 3, 1, 4)

        assert G.num_edges == 1
        assert G.edges_leaving(1) == []
        assert G.edges_arriving(2) == []
        assert G.edges_leaving(3) == [Edge(1, 3, 1, 4)]
        assert G.edges_arriving(1) == [Edge(1, 3, 1, 4)]

    def test_graph_set_edge_cost(self):
        G = Graph.from_edge_list(2, [(1, 2, 1)])
        G.set_edge_cost(1, -7)
        assert G.get_edge(1) == Edge(1, 1, 2, -7)
        assert G.edges_arriving(2)[0].cost == -7

        with pytest.raises(KeyError):
            G.set_edge_cost(5, 0)

    def test_graph_remove_edge(self):
        G = Graph.from_edge_list(2, [(1, 2, 1), (2, 1, 1)])
        removed = G.remove_edge(1)

        assert removed == Edge(1, 1, 2, 1)
        assert G.num_edges == 1
        assert G.edges_leaving(1) == []
        assert G.edges_arriving(2) == []

    def test_graph_remove_vertex_drops_incident_edges(self):
        G = Graph.from_edge_list(3, [(1, 2, 1), (2, 3, 1), (3, 2, 1), (2, 2, 0), (1, 3, 4)])
        G.remove_vertex(2)

        assert G.vertex_ids() == [1, 3]
        assert G.edge_ids() == [5]
        assert G.edges_leaving(1) == [Edge(5, 1, 3, 4)]
        assert G.edges_arriving(3) == [Edge(5, 1, 3, 4)]

        with pytest.raises(KeyError):
            G.remove_vertex(2)

    def test_graph_counts_consistent_after_mutation(self):
        G = Graph.from_edge_list(3, [(1, 2, 1), (2, 3, 1)])
        G.add_edge(2, 2, 3, 5)
        G.add_edge(3, 3, 1, 0)
        G.remove_edge(1)

        assert G.num_edges == len(G.edge_ids()) == 2
        assert G.num_vertices == len(G.vertex_ids()) == 3

    def test_graph_copy_is_independent(self):
        G = Graph.from_edge_list(2, [(1, 2, 1)])
        H = G.copy()
        H.set_edge_cost(1, 100)
        H.add_vertex(3)
        H.add_edge(2, 2, 3, 1)

        assert G.get_edge(1).cost == 1
        assert G.num_vertices == 2
        assert G.edges_leaving(2) == []
        assert H.edges_leaving(2) == [Edge(2, 2, 3, 1)]

    def test_graph_contains(self):
        G = Graph.from_edge_list(2, [(1, 2, 1)])
        assert 1 in G
        assert 3 not in G
        assert G.has_edge(1)
        assert not G.has_edge(2)

    def test_graph_edges_as_arrays_grouped_by_head(self):
        G = Graph.from_edge_list(3, [(1, 3, 5), (1, 2, 4), (2, 3, 1)])
        tails, heads, costs = G.edges_as_arrays({1: 0, 2: 1, 3: 2})

        assert heads.tolist() == [1, 2, 2]
        assert tails.tolist() == [0, 0, 1]
        assert costs.tolist() == [4, 5, 1]


class TestFromEdgeList:
    """Tests for Graph.from_edge_list construction input."""

    def test_from_edge_list_ids(self):
        G = Graph.from_edge_list(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)])

        assert G.vertex_ids() == [1, 2, 3]
        assert G.edge_ids() == [1, 2, 3]
        assert G.get_edge(3) == Edge(3, 1, 3, 7)

    def test_from_edge_list_empty(self):
        G = Graph.from_edge_list(0, [])
        assert G.num_vertices == 0
        assert G.num_edges == 0

    def test_from_edge_list_parallel_edges(self):
        G = Graph.from_edge_list(2, [(1, 2, 4), (1, 2, 2)])
        assert len(G.edges_leaving(1)) == 2

    @pytest.mark.parametrize("n", [-1, 2.5, "3"])
    def test_from_edge_list_bad_vertex_count(self, n):
        with pytest.raises(ValueError, match="Vertex count"):
            Graph.from_edge_list(n, [])

    @pytest.mark.parametrize("triple", [(0, 1, 1), (1, 4, 1), (3, 3, 0, 1)])
    def test_from_edge_list_malformed_triple(self, triple):
        with pytest.raises(ValueError):
            Graph.from_edge_list(3, [triple])

    @pytest.mark.parametrize(
        "triple", [(1.7, 2.9, 5), (1, 2.0, 5), (True, 2, 1), (1, "2", 1)]
    )
    def test_from_edge_list_non_integer_endpoint_rejected(self, triple):
        with pytest.raises(ValueError, match="endpoint must be an integer"):
            Graph.from_edge_list(3, [triple])
