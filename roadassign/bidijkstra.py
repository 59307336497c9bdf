"""Bidirectional Dijkstra search between a source and a target."""

from __future__ import annotations

import math

from roadassign.dijkstra import Dijkstra
from roadassign.graph import Graph


class BiDijkstra:
    """Alternates a forward search from the source with a reverse search from the target.

    The reverse graph must hold every edge of the graph reversed under the
    same edge ID, as returned by Graph.reverse.
    """

    def __init__(self, graph: Graph, reverse_graph: Graph) -> None:
        self._forward = Dijkstra(graph, graph.weight)
        self._reverse = Dijkstra(reverse_graph, reverse_graph.weight)
        self._tentative = math.inf
        self._meeting = -1

    def _stop(self) -> bool:
        forward, reverse = self._forward, self._reverse
        return (
            forward.exhausted()
            or reverse.exhausted()
            or self._tentative <= forward.min_key() + reverse.min_key()
        )

    def run(self, source: int, target: int) -> None:
        """Compute a shortest path from source to target."""
        self._forward.init([source])
        self._reverse.init([target])
        self._tentative = math.inf
        self._meeting = -1
        advance_forward = False
        while not self._stop():
            advance_forward = not advance_forward
            search = self._forward if advance_forward else self._reverse
            self._update(search.settle_next_vertex())

    def _update(self, u: int) -> None:
        dist = self._forward.distance(u) + self._reverse.distance(u)
        if dist < self._tentative:
            self._tentative = dist
            self._meeting = u

    def distance(self) -> float:
        """Return the length of the shortest path, or infinity if there is none."""
        return self._tentative

    def _require_path(self) -> int:
        if self._tentative == math.inf:
            raise ValueError("no path found")
        return self._meeting

    def path(self) -> list[int]:
        """Return the vertices on the shortest path, from source to target."""
        meeting = self._require_path()
        first = self._forward.reverse_path(meeting)
        first.reverse()
        first.pop()
        return first + self._reverse.reverse_path(meeting)

    def edge_path_to_meeting_vertex(self) -> list[int]:
        """Return the edges from the source to the meeting vertex, in reverse order."""
        return self._forward.reverse_edge_path(self._require_path())

    def edge_path_from_meeting_vertex(self) -> list[int]:
        """Return the edges from the meeting vertex to the target, in order."""
        return self._reverse.reverse_edge_path(self._require_path())