"""A directed road network read from an edge list or a CSV edge file."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from os import PathLike

_CSV_COLUMNS = ("edge_tail", "edge_head", "length", "capacity", "speed")


class Graph:
    """A directed road network.

    Each edge is given as a record (tail, head, length, capacity, speed) with
    the length in meters, the capacity in vehicles per hour and the speed in
    km/h. Vertices are numbered from 0 to the largest endpoint seen.
    """

    def __init__(
        self,
        edges: Iterable[Sequence[int]],
        ce_parameter: float,
        const_parameter: float,
    ) -> None:
        self._ce_parameter = ce_parameter
        self._const_parameter = const_parameter
        self._tail: list[int] = []
        self._head: list[int] = []
        self._length: list[int] = []
        self._capacity: list[int] = []
        self._speed: list[int] = []
        self._free_travel_time: list[float] = []
        self._weights: list[float] = []
        self._num_vertices = 0

        for record in edges:
            tail, head, length, capacity, speed = (int(value) for value in record)
            if tail < 0 or head < 0:
                raise ValueError(f"negative vertex ID in edge ({tail}, {head})")
            if length <= 0:
                raise ValueError(f"length not strictly positive -- '{length}'")
            if capacity <= 0:
                raise ValueError(f"capacity not strictly positive -- '{capacity}'")
            if speed <= 0:
                raise ValueError(f"speed not strictly positive -- '{speed}'")
            self._tail.append(tail)
            self._head.append(head)
            self._length.append(length)
            self._capacity.append(capacity)
            self._speed.append(speed)
            self._num_vertices = max(self._num_vertices, tail + 1, head + 1)
            free_flow_time = 60 * 60 * (length / 1000.0) / speed
            self._free_travel_time.append(free_flow_time)
            self._weights.append(free_flow_time)

        self._out_edges: list[list[int]] = [[] for _ in range(self._num_vertices)]
        for e, tail in enumerate(self._tail):
            self._out_edges[tail].append(e)

    @classmethod
    def from_csv(
        cls,
        filename: str | PathLike[str],
        ce_parameter: float,
        const_parameter: float,
    ) -> Graph:
        """Read a graph from a CSV file with a header naming the edge columns."""
        with open(filename, newline="") as file:
            reader = csv.reader(file)
            try:
                header = [name.strip(" \t") for name in next(reader)]
            except StopIteration:
                raise ValueError(f"missing header in edge file -- '{filename}'") from None
            missing = [name for name in _CSV_COLUMNS if name not in header]
            if missing:
                raise ValueError(f"missing column in edge file -- '{missing[0]}'")
            positions = [header.index(name) for name in _CSV_COLUMNS]
            records = []
            for row in reader:
                if not row:
                    continue
                try:
                    records.append([int(row[i].strip(" \t")) for i in positions])
                except (IndexError, ValueError):
                    raise ValueError(f"malformed row in edge file -- '{row}'") from None
        return cls(records, ce_parameter, const_parameter)

    def num_vertices(self) -> int:
        """Return the number of vertices."""
        return self._num_vertices

    def num_edges(self) -> int:
        """Return the number of edges."""
        return len(self._head)

    def head(self, e: int) -> int:
        """Return the head vertex of edge e."""
        self._check_edge(e)
        return self._head[e]

    def tail(self, e: int) -> int:
        """Return the tail vertex of edge e."""
        self._check_edge(e)
        return self._tail[e]

    def capacity(self, e: int) -> int:
        """Return the capacity of edge e in vehicles per hour."""
        self._check_edge(e)
        return self._capacity[e]

    def length(self, e: int) -> int:
        """Return the length of edge e in meters."""
        self._check_edge(e)
        return self._length[e]

    def speed(self, e: int) -> int:
        """Return the free-flow speed of edge e in km/h."""
        self._check_edge(e)
        return self._speed[e]

    def weight(self, e: int) -> float:
        """Return the current weight of edge e."""
        self._check_edge(e)
        return self._weights[e]

    def free_travel_time(self, e: int) -> float:
        """Return the travel time on edge e at free flow."""
        self._check_edge(e)
        return self._free_travel_time[e]

    def set_weight(self, e: int, value: float) -> None:
        """Set the weight of edge e used by shortest-path searches."""
        self._check_edge(e)
        self._weights[e] = value

    def weights(self) -> list[float]:
        """Return the live list of edge weights."""
        return self._weights

    def combined_equilibrium_parameter(self) -> float:
        """Return the parameter for the combined equilibrium calculation."""
        return self._ce_parameter

    def normal_distance_multiplier(self) -> float:
        """Return the multiplier of the normal distance for constrained searches."""
        return self._const_parameter

    def out_edges(self, u: int) -> list[int]:
        """Return the IDs of the edges leaving vertex u."""
        if not 0 <= u < self._num_vertices:
            raise IndexError(f"vertex ID out of range -- '{u}'")
        return list(self._out_edges[u])

    def reverse(self) -> Graph:
        """Return the graph with every edge reversed; edge IDs and weights are kept."""
        reversed_graph = Graph(
            zip(self._head, self._tail, self._length, self._capacity, self._speed),
            self._ce_parameter,
            self._const_parameter,
        )
        reversed_graph._num_vertices = self._num_vertices
        reversed_graph._out_edges = [[] for _ in range(self._num_vertices)]
        for e, tail in enumerate(reversed_graph._tail):
            reversed_graph._out_edges[tail].append(e)
        reversed_graph._weights[:] = self._weights
        return reversed_graph

    def _check_edge(self, e: int) -> None:
        if not 0 <= e < len(self._head):
            raise IndexError(f"edge ID out of range -- '{e}'")