"""
Example: shortest paths with shortpaths

Builds a small directed graph with negative edge costs, runs the
single-source algorithms and Johnson's all-pairs algorithm, and shows how a
negative cycle is reported.
"""

from shortpaths import INFINITY, Graph, JohnsonConfig, Status, bellman_ford, dijkstra, johnson


def format_distance(d: int) -> str:
    return "inf" if d == INFINITY else str(d)


def example_single_source():
    """Example: Dijkstra and Bellman-Ford from one vertex."""
    print("=" * 60)
    print("Example 1: Single-source shortest paths")
    print("=" * 60)

    G = Graph.from_edge_list(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)])
    print(f"Dijkstra from 1:     {dijkstra(G, 1).dist.tolist()}")
    print(f"Bellman-Ford from 1: {bellman_ford(G, 1).dist.tolist()}")
    print()


def example_all_pairs():
    """Example: Johnson's algorithm on a graph with negative edges."""
    print("=" * 60)
    print("Example 2: All-pairs shortest paths (Johnson)")
    print("=" * 60)

    G = Graph.from_edge_list(
        5,
        [(1, 2, 3), (1, 3, 8), (2, 4, 1), (3, 2, -4), (4, 3, 7), (4, 1, 2), (5, 4, -6)],
    )
    result = johnson(G, JohnsonConfig(track_paths=True))
    print(f"Status: {result.status}")
    for u, row in zip(result.vertex_ids, result.dist.tolist()):
        print(f"  from {u}: " + " ".join(f"{format_distance(d):>4}" for d in row))
    print(f"Shortest path 5 -> 2: {result.path(5, 2)}")
    print()


def example_negative_cycle():
    """Example: a negative cycle is a status, not a matrix."""
    print("=" * 60)
    print("Example 3: Negative cycle")
    print("=" * 60)

    G = Graph.from_edge_list(3, [(1, 2, 1), (2, 3, 1), (3, 1, -3)])
    result = johnson(G)
    if result.status == Status.NEGATIVE_CYCLE:
        print(f"Johnson: {result.message}")
    print()


if __name__ == "__main__":
    example_single_source()
    example_all_pairs()
    example_negative_cycle()
