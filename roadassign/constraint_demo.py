"""A small demonstration of shortest paths with distance windows."""

from __future__ import annotations

from collections.abc import Sequence

from roadassign.constrained import ResourceGraph, r_c_shortest_paths

_EXAMPLE_EDGES = (
    (0, 1, 1.0, 1.0),
    (1, 2, 1.0, 1.0),
    (1, 3, 1.0, 1.0),
    (2, 4, 2.5, 0.0),
    (3, 4, 1.0, 1.0),
    (0, 4, 3.5, 2.5),
)


def build_example_graph() -> ResourceGraph:
    """Return the five-vertex example graph with windows 0 to 100 at every vertex."""
    graph = ResourceGraph()
    for _ in range(5):
        graph.add_vertex(0.0, 100.0)
    for tail, head, time, distance in _EXAMPLE_EDGES:
        graph.add_edge(tail, head, time, distance)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Pareto-optimal paths from A (vertex 0) to E (vertex 4)."""
    graph = build_example_graph()
    solutions = r_c_shortest_paths(graph, 0, 4)
    print("SPP with distance windows:")
    print(f"Number of optimal solutions: {len(solutions)}")
    for i, (path, resources) in enumerate(solutions):
        print(f"The {i}th shortest path from A to E is: ")
        for e in path:
            print(e)
        print(f"time: {resources.time:g}")
        print(f"distance: {resources.distance:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())