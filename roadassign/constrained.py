"""Resource-constrained shortest paths, and their use in traffic assignment.

A path carries two resources, travel time and distance. Every vertex has a
distance window: arriving with less than the minimum distance raises the
distance to the minimum, and arriving with more than the maximum makes the
path infeasible. Of all feasible paths the Pareto-optimal ones are computed.
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import NamedTuple

from roadassign.dijkstra import Dijkstra
from roadassign.graph import Graph


@dataclass(frozen=True, order=True)
class ResourceContainer:
    """The resources consumed along a path, ordered by time, then distance."""

    time: float = 0.0
    distance: float = 0.0

    def dominates(self, other: ResourceContainer) -> bool:
        """Return True if these resources are nowhere worse than the other ones."""
        return self.time <= other.time and self.distance <= other.distance


class _Arc(NamedTuple):
    tail: int
    head: int
    time: float
    distance: float


class ResourceGraph:
    """A directed graph whose edges consume time and distance.

    Vertex v has the distance window min_distance[v] to max_distance[v];
    edges are numbered in the order they are added.
    """

    def __init__(self) -> None:
        self.min_distance: list[float] = []
        self.max_distance: list[float] = []
        self.edges: list[_Arc] = []
        self._out: list[list[int]] = []

    def add_vertex(self, min_distance: float = 0.0, max_distance: float = math.inf) -> int:
        """Add a vertex with the given distance window and return its ID."""
        self.min_distance.append(min_distance)
        self.max_distance.append(max_distance)
        self._out.append([])
        return len(self._out) - 1

    def add_edge(self, tail: int, head: int, time: float, distance: float) -> int:
        """Add an edge from tail to head and return its ID."""
        for v in (tail, head):
            self._check_vertex(v)
        self.edges.append(_Arc(tail, head, time, distance))
        e = len(self.edges) - 1
        self._out[tail].append(e)
        return e

    def extend(self, resources: ResourceContainer, edge: int) -> ResourceContainer | None:
        """Return the resources after traversing edge, or None if that is infeasible."""
        if not 0 <= edge < len(self.edges):
            raise IndexError(f"edge ID out of range -- '{edge}'")
        arc = self.edges[edge]
        distance = max(resources.distance + arc.distance, self.min_distance[arc.head])
        if distance > self.max_distance[arc.head]:
            return None
        return ResourceContainer(resources.time + arc.time, distance)

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._out):
            raise IndexError(f"vertex ID out of range -- '{v}'")


@dataclass(eq=False)
class _Label:
    vertex: int
    resources: ResourceContainer
    edge: int
    pred: _Label | None
    alive: bool = True


def r_c_shortest_paths(
    graph: ResourceGraph, source: int, target: int
) -> list[tuple[list[int], ResourceContainer]]:
    """Return the Pareto-optimal feasible paths from source to target.

    Each path is a list of edge IDs from source to target, paired with its
    resources. Paths come in increasing order of their resources.
    """
    graph._check_vertex(source)
    graph._check_vertex(target)
    labels_at: list[list[_Label]] = [[] for _ in graph.min_distance]
    start = _Label(source, ResourceContainer(), -1, None)
    labels_at[source].append(start)
    counter = itertools.count()
    heap = [(start.resources.time, start.resources.distance, next(counter), start)]
    reached: list[_Label] = []

    while heap:
        *_, label = heapq.heappop(heap)
        if not label.alive:
            continue
        if label.vertex == target:
            reached.append(label)
            continue
        for e in graph._out[label.vertex]:
            resources = graph.extend(label.resources, e)
            if resources is None:
                continue
            head = graph.edges[e].head
            existing = labels_at[head]
            if any(other.resources.dominates(resources) for other in existing):
                continue
            for other in existing:
                if resources.dominates(other.resources):
                    other.alive = False
            new = _Label(head, resources, e, label)
            labels_at[head] = [other for other in existing if other.alive] + [new]
            heapq.heappush(heap, (resources.time, resources.distance, next(counter), new))

    solutions = []
    for label in reached:
        if not label.alive:
            continue
        path = []
        node: _Label | None = label
        while node is not None and node.pred is not None:
            path.append(node.edge)
            node = node.pred
        path.reverse()
        solutions.append((path, label.resources))
    return solutions


class ConstrainedAdapter:
    """Finds the fastest path whose length stays within a multiple of the shortest length.

    Travel times are the graph's current edge weights; the bound is the
    graph's normal distance multiplier times the length of a shortest path.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._multiplier = graph.normal_distance_multiplier()
        self._distances: dict[tuple[int, int], float] = {}
        self._normal: Dijkstra | None = None
        self._resource_graph: ResourceGraph | None = None

    def preprocess(self) -> None:
        """Prepare the search for shortest lengths."""
        self._normal = Dijkstra(self._graph, self._graph.length)
        self._distances.clear()

    def customize(self) -> None:
        """Take up the current edge weights; call after they change."""
        graph = self._graph
        resource_graph = ResourceGraph()
        for _ in range(graph.num_vertices()):
            resource_graph.add_vertex(0.0, math.inf)
        weights = graph.weights()
        for e in range(graph.num_edges()):
            resource_graph.add_edge(graph.tail(e), graph.head(e), weights[e], graph.length(e))
        self._resource_graph = resource_graph

    def run(self, source: int, target: int) -> list[int]:
        """Return the edges of the constrained fastest path from source to target."""
        if self._normal is None:
            raise RuntimeError("preprocess must be called first")
        if self._resource_graph is None:
            raise RuntimeError("customize must be called first")
        key = (source, target)
        if key not in self._distances:
            self._normal.run(source, target)
            distance = self._normal.distance(target)
            if distance == math.inf:
                raise ValueError(f"no path from {source} to {target}")
            self._distances[key] = distance

        resource_graph = self._resource_graph
        resource_graph.max_distance[target] = self._multiplier * self._distances[key]
        try:
            solutions = r_c_shortest_paths(resource_graph, source, target)
        finally:
            resource_graph.max_distance[target] = math.inf
        if not solutions:
            raise ValueError(f"no feasible path from {source} to {target}")
        path, _ = min(solutions, key=lambda solution: solution[1].time)
        return path