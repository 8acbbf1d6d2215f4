"""Tests for shortest path algorithms."""

import numpy as np
import pytest

from shortpaths.graphs import INFINITY, Graph, Status, bellman_ford, dijkstra

SCENARIO = [(1, 2, 4), (2, 3, 1), (1, 3, 7)]


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_scenario(self):
        """Test Dijkstra on the three-vertex scenario."""
        G = Graph.from_edge_list(3, SCENARIO)

        result = dijkstra(G, 1)

        assert result.status is Status.OK
        assert result.dist.tolist() == [0, 4, 5]
        assert result.dist.dtype == np.int64
        assert result.parent == {1: None, 2: 1, 3: 2}
        assert result.path_to(3) == [1, 2, 3]

    def test_dijkstra_unreachable(self):
        """Unreachable vertices get the sentinel, not an error."""
        G = Graph.from_edge_list(3, [(1, 2, 1)])

        result = dijkstra(G, 1)

        assert result.ok
        assert result.dist.tolist() == [0, 1, INFINITY]
        assert not result.is_reachable(3)
        assert result.path_to(3) is None
        assert result.parent[3] is None
        assert result.reached.tolist() == [True, True, False]

    def test_dijkstra_decrease_key_path(self):
        """A later, cheaper path replaces the first-discovered one."""
        G = Graph.from_edge_list(4, [(1, 4, 10), (1, 2, 1), (2, 3, 1), (3, 4, 1)])

        result = dijkstra(G, 1)

        assert result.distance_to(4) == 3
        assert result.path_to(4) == [1, 2, 3, 4]

    def test_dijkstra_zero_cost_edges(self):
        G = Graph.from_edge_list(3, [(1, 2, 0), (2, 3, 0), (3, 1, 0)])
        assert dijkstra(G, 2).dist.tolist() == [0, 0, 0]

    def test_dijkstra_parallel_edges(self):
        G = Graph.from_edge_list(2, [(1, 2, 9), (1, 2, 3)])
        assert dijkstra(G, 1).distance_to(2) == 3

    def test_dijkstra_negative_weights_error(self):
        """Test that Dijkstra raises error for negative costs."""
        G = Graph.from_edge_list(2, [(1, 2, -1)])

        with pytest.raises(ValueError, match="non-negative"):
            dijkstra(G, 1)

    def test_dijkstra_nonexistent_source(self):
        G = Graph.from_edge_list(2, [])
        with pytest.raises(ValueError, match="not in graph"):
            dijkstra(G, 3)

    def test_dijkstra_single_vertex(self):
        G = Graph.from_edge_list(1, [])

        result = dijkstra(G, 1)
        assert result.dist.tolist() == [0]
        assert result.nit == 1

    def test_dijkstra_sparse_vertex_ids(self):
        """Positions follow ascending vertex id."""
        G = Graph()
        for v in (30, 10, 20):
            G.add_vertex(v)
        G.add_edge(1, 10, 30, 2)
        G.add_edge(2, 30, 20, 2)

        result = dijkstra(G, 10)
        assert result.vertex_ids == [10, 20, 30]
        assert result.dist.tolist() == [0, 4, 2]

    def test_dijkstra_deterministic_tie_breaking(self):
        """Two equal-cost routes always yield the same predecessor."""
        G = Graph.from_edge_list(4, [(1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1)])

        first = dijkstra(G, 1)
        second = dijkstra(G, 1)

        assert first.dist.tolist() == [0, 1, 1, 2]
        assert first.parent == second.parent
        assert first.parent[4] == 2
        np.testing.assert_array_equal(first.dist, second.dist)


class TestBellmanFord:
    """Tests for Bellman-Ford algorithm."""

    def test_bellman_ford_scenario(self):
        G = Graph.from_edge_list(3, SCENARIO)

        result = bellman_ford(G, 1)

        assert result.status is Status.OK
        assert result.dist.tolist() == [0, 4, 5]
        assert result.path_to(3) == [1, 2, 3]

    def test_bellman_ford_negative_weights(self):
        """Test Bellman-Ford with negative costs (no cycle)."""
        G = Graph.from_edge_list(3, [(1, 2, 1), (2, 3, -2)])

        result = bellman_ford(G, 1)

        assert result.ok
        assert result.dist.tolist() == [0, 1, -1]

    def test_bellman_ford_negative_edge_beats_direct(self):
        G = Graph.from_edge_list(3, [(1, 3, 2), (1, 2, 5), (2, 3, -4)])

        result = bellman_ford(G, 1)

        assert result.distance_to(3) == 1
        assert result.path_to(3) == [1, 2, 3]

    def test_bellman_ford_negative_cycle(self):
        """Three-vertex negative cycle is reported, never as numbers."""
        G = Graph.from_edge_list(3, [(1, 2, 1), (2, 3, 1), (3, 1, -3)])

        result = bellman_ford(G, 1)

        assert result.status is Status.NEGATIVE_CYCLE
        assert not result.ok
        assert result.dist is None
        assert result.parent is None
        with pytest.raises(ValueError, match="Negative cycle"):
            result.distance_to(2)

    def test_bellman_ford_negative_self_loop(self):
        G = Graph.from_edge_list(1, [(1, 1, -1)])
        assert bellman_ford(G, 1).status is Status.NEGATIVE_CYCLE

    def test_bellman_ford_zero_cycle_is_not_negative(self):
        G = Graph.from_edge_list(3, [(1, 2, 1), (2, 3, 1), (3, 1, -2)])

        result = bellman_ford(G, 1)
        assert result.ok
        assert result.dist.tolist() == [0, 1, 2]

    def test_bellman_ford_unreachable_negative_cycle(self):
        """Test Bellman-Ford with negative cycle not reachable from source."""
        G = Graph.from_edge_list(4, [(1, 2, 1), (3, 4, 1), (4, 3, -3)])

        result = bellman_ford(G, 1)

        assert result.ok
        assert result.dist.tolist() == [0, 1, INFINITY, INFINITY]

    def test_bellman_ford_unreached_tail_offers_no_candidate(self):
        """An edge out of an unreached vertex never shortens anything."""
        G = Graph.from_edge_list(3, [(1, 2, 5), (3, 2, -100)])

        result = bellman_ford(G, 1)
        assert result.dist.tolist() == [0, 5, INFINITY]

    def test_bellman_ford_early_stop(self):
        """Rounds stop once nothing changes."""
        G = Graph.from_edge_list(5, [(1, 2, 1)])

        result = bellman_ford(G, 1)
        assert result.nit == 2

    def test_bellman_ford_nonexistent_source(self):
        G = Graph.from_edge_list(1, [])
        with pytest.raises(ValueError):
            bellman_ford(G, 2)

    def test_bellman_ford_single_vertex(self):
        G = Graph.from_edge_list(1, [])

        result = bellman_ford(G, 1)
        assert result.dist.tolist() == [0]
        assert result.parent == {1: None}


class TestCrossCheck:
    """Dijkstra and Bellman-Ford agree on non-negative graphs."""

    @pytest.mark.parametrize("n,m", [(5, 0), (6, 10), (15, 40), (30, 120)])
    def test_dijkstra_equals_bellman_ford(self, random_graph, n, m):
        G = random_graph(n, m)

        for source in G.vertex_ids():
            np.testing.assert_array_equal(
                dijkstra(G, source).dist, bellman_ford(G, source).dist
            )

    def test_repeated_runs_are_identical(self, random_graph):
        G = random_graph(25, 100, max_cost=3)

        for algorithm in (dijkstra, bellman_ford):
            first = algorithm(G, 1)
            second = algorithm(G, 1)
            np.testing.assert_array_equal(first.dist, second.dist)
            assert first.parent == second.parent

    def test_parent_paths_have_reported_length(self, random_graph):
        """Every reconstructed path's cost equals the reported distance."""
        G = random_graph(20, 80, potential_range=10)
        cheapest = {}
        for edge in G.edges():
            key = (edge.tail, edge.head)
            cheapest[key] = min(cheapest.get(key, edge.cost), edge.cost)

        result = bellman_ford(G, 1)
        assert result.ok
        for v in G.vertex_ids():
            path = result.path_to(v)
            if path is None:
                assert result.distance_to(v) == INFINITY
                continue
            length = sum(cheapest[(a, b)] for a, b in zip(path, path[1:]))
            assert length == result.distance_to(v)
