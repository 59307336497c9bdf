"""Generation of origin-destination pairs for experiments on shortest-path algorithms."""

from __future__ import annotations

import random
from dataclasses import dataclass

from roadassign.dijkstra import Dijkstra, WeightFunction
from roadassign.graph import Graph


@dataclass(frozen=True)
class OriginDestination:
    """An origin-destination pair with a travel volume."""

    origin: int
    destination: int
    volume: int = 1


class ODPairGenerator:
    """Picks O-D pairs uniformly at random, or D by Dijkstra rank or by distance."""

    def __init__(
        self,
        graph: Graph,
        rng: random.Random | None = None,
        weight: WeightFunction | None = None,
    ) -> None:
        if graph.num_vertices() == 0:
            raise ValueError("graph has no vertices")
        self._num_vertices = graph.num_vertices()
        self._rng = rng if rng is not None else random.Random()
        self._dijkstra = Dijkstra(graph, weight)

    def _random_vertex(self) -> int:
        return self._rng.randint(0, self._num_vertices - 1)

    def random_od_pair(self) -> OriginDestination:
        """Return an O-D pair with O and D picked uniformly at random."""
        origin = self._random_vertex()
        destination = self._random_vertex()
        return OriginDestination(origin, destination)

    def random_od_pair_by_dijkstra_rank(self, rank: int) -> OriginDestination:
        """Return a random O-D pair where D has the given Dijkstra rank from O."""
        if not 0 <= rank < self._num_vertices:
            raise ValueError(f"Dijkstra rank out of range -- '{rank}'")
        origin = self._random_vertex()
        destination = origin
        self._dijkstra.init([origin])
        for _ in range(rank + 1):
            if self._dijkstra.exhausted():
                raise ValueError(
                    f"fewer than {rank + 1} vertices reachable from {origin}"
                )
            destination = self._dijkstra.settle_next_vertex()
        return OriginDestination(origin, destination)

    def random_od_pair_by_distance(self, distance: float) -> OriginDestination:
        """Return a random O-D pair where D is the first vertex at least distance away."""
        if distance < 0:
            raise ValueError(f"negative distance -- '{distance}'")
        origin = self._random_vertex()
        destination = origin
        self._dijkstra.init([origin])
        while not self._dijkstra.exhausted() and self._dijkstra.distance(destination) < distance:
            destination = self._dijkstra.settle_next_vertex()
        return OriginDestination(origin, destination)

    def dijkstra_rank_for(self, od: OriginDestination) -> int:
        """Return the Dijkstra rank of the destination with respect to the origin."""
        for vertex in (od.origin, od.destination):
            if not 0 <= vertex < self._num_vertices:
                raise ValueError(f"vertex ID out of range -- '{vertex}'")
        self._dijkstra.init([od.origin])
        rank = 0
        while True:
            if self._dijkstra.exhausted():
                raise ValueError(
                    f"destination {od.destination} not reachable from {od.origin}"
                )
            if self._dijkstra.settle_next_vertex() == od.destination:
                return rank
            rank += 1