"""Dijkstra's shortest-path algorithm with step-by-step control."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from roadassign.graph import Graph
from roadassign.kheap import AddressableQuadheap

_INVALID = -1

WeightFunction = Callable[[int], float]
PruningCriterion = Callable[[int, float, list], bool]


class Dijkstra:
    """Dijkstra's algorithm keeping parent vertices and edges.

    The weight of an edge is given by a callable taking an edge ID; it defaults
    to the graph's current edge weights. An optional pruning criterion
    prune(u, distance_to_u, distances) stops the search from relaxing the
    edges out of u when it returns true.
    """

    def __init__(
        self,
        graph: Graph,
        weight: WeightFunction | None = None,
        prune: PruningCriterion | None = None,
    ) -> None:
        self._graph = graph
        self._weight = weight if weight is not None else graph.weight
        self._prune = prune
        n = graph.num_vertices()
        self._dist: list[float] = [math.inf] * n
        self._parent_vertex = [_INVALID] * n
        self._parent_edge = [_INVALID] * n
        self._queue = AddressableQuadheap(n)

    def run(self, source: int, target: int | None = None) -> None:
        """Search from source until target is settled, or to all vertices."""
        self.init([source])
        while not self.exhausted():
            if self.settle_next_vertex() == target:
                break

    def init(self, sources: Iterable[int]) -> None:
        """Reset all labels and put the given sources into the queue."""
        n = self._graph.num_vertices()
        self._dist = [math.inf] * n
        self._parent_vertex = [_INVALID] * n
        self._parent_edge = [_INVALID] * n
        self._queue.clear()
        for s in sources:
            self._check_vertex(s)
            self._dist[s] = 0
            if s not in self._queue:
                self._queue.insert(s, 0)

    def exhausted(self) -> bool:
        """Return True if no vertex is left to settle."""
        return len(self._queue) == 0

    def min_key(self) -> float:
        """Return the smallest tentative distance in the queue."""
        return self._queue.min_key()

    def settle_next_vertex(self) -> int:
        """Settle the next vertex, relax its outgoing edges and return its ID."""
        if self.exhausted():
            raise IndexError("no vertex left to settle")
        u, _ = self._queue.delete_min()
        dist_u = self._dist[u]
        if self._prune is not None and self._prune(u, dist_u, self._dist):
            return u
        graph = self._graph
        for e in graph.out_edges(u):
            v = graph.head(e)
            tentative = dist_u + self._weight(e)
            if tentative < self._dist[v]:
                self._dist[v] = tentative
                self._parent_vertex[v] = u
                self._parent_edge[v] = e
                if v in self._queue:
                    self._queue.decrease_key(v, tentative)
                else:
                    self._queue.insert(v, tentative)
        return u

    def distance(self, v: int) -> float:
        """Return the tentative distance of v, or infinity if unreached."""
        self._check_vertex(v)
        return self._dist[v]

    def reverse_path(self, t: int) -> list[int]:
        """Return the vertices on the shortest path to t, from t back to its source."""
        self._check_reached(t)
        path = [t]
        v = t
        while self._parent_vertex[v] != _INVALID:
            v = self._parent_vertex[v]
            path.append(v)
        return path

    def reverse_edge_path(self, t: int) -> list[int]:
        """Return the edges on the shortest path to t, from t back to its source."""
        self._check_reached(t)
        edges = []
        v = t
        while self._parent_edge[v] != _INVALID:
            e = self._parent_edge[v]
            edges.append(e)
            v = self._parent_vertex[v]
        return edges

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._graph.num_vertices():
            raise IndexError(f"vertex ID out of range -- '{v}'")

    def _check_reached(self, t: int) -> None:
        self._check_vertex(t)
        if self._dist[t] == math.inf:
            raise ValueError(f"vertex not reached by the search -- '{t}'")