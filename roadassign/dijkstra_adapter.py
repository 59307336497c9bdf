"""Shortest paths for the all-or-nothing assignment, using Dijkstra's algorithm."""

from __future__ import annotations

from roadassign.dijkstra import Dijkstra
from roadassign.graph import Graph


class DijkstraAdapter:
    """Computes shortest paths on the current edge weights of a graph.

    The search tree of the last source is kept, so consecutive queries from
    the same source cost only the path extraction.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._search: Dijkstra | None = None
        self._current_source: int | None = None

    def preprocess(self) -> None:
        """Build the search structure for the graph."""
        self._search = Dijkstra(self._graph, self._graph.weight)
        self._current_source = None

    def customize(self) -> None:
        """Take up the current edge weights; call after they change."""
        search = self._require_search()
        self._current_source = None
        if self._graph.num_vertices() > 0:
            search.run(0)
            self._current_source = 0

    def run(self, source: int, target: int) -> list[int]:
        """Return the edges of a shortest path from source to target, in order."""
        search = self._require_search()
        if source != self._current_source:
            search.run(source)
            self._current_source = source
        try:
            edges = search.reverse_edge_path(target)
        except ValueError:
            raise ValueError(f"no path from {source} to {target}") from None
        edges.reverse()
        return edges

    def _require_search(self) -> Dijkstra:
        if self._search is None:
            raise RuntimeError("preprocess must be called first")
        return self._search