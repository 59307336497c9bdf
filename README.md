# roadassign

Building blocks for routing and traffic assignment on road networks. It is
written in plain Python and has no third-party dependencies.

## What is inside

- `roadassign.graph`: `Graph` is a directed road network. You build it from
  records `(tail, head, length, capacity, speed)`, or with `Graph.from_csv`
  from a CSV edge file. That file has the columns `edge_tail`, `edge_head`,
  `length` (m), `capacity` (vehicles/h) and `speed` (km/h).
  - Each edge gets a free-flow travel time.
  - The edge weights that routing uses start at that value. You can change
    them with `set_weight`.
  - `reverse()` returns the graph with every edge reversed. Edge IDs stay the
    same.
- `roadassign.kheap`: addressable k-ary min-heaps, `AddressableKHeap`,
  `AddressableBinaryHeap` and `AddressableQuadheap`. They support `insert`,
  `delete_min`, `decrease_key`, `min`, `min_id`, `min_key`, `len()` and `in`.
- `roadassign.tournament`: `TournamentTree`, a loser tree for merging
  `2**log_k` sorted sequences.
- `roadassign.dijkstra`: `Dijkstra` tracks parent vertices and parent edges.
  It can run to completion with `run`, or one step at a time with `init` and
  `settle_next_vertex`. It takes an optional weight function and an optional
  pruning criterion.
- `roadassign.bidijkstra`: `BiDijkstra` runs a bidirectional search over a
  graph and its reverse. It reports the distance, the vertex path and the
  edge paths on each side of the meeting vertex.
- `roadassign.dijkstra_adapter`: `DijkstraAdapter` returns shortest paths as
  lists of edge IDs on the current edge weights. It keeps the search tree of
  the last source it was asked about.
- `roadassign.constrained`: resource-constrained shortest paths.
  - `ResourceContainer`, `ResourceGraph` and `r_c_shortest_paths` find the
    Pareto-optimal paths in time and distance. Every vertex has a distance
    window.
  - `ConstrainedAdapter` returns the fastest path whose length is at most the
    graph's normal distance multiplier times the shortest length.
- `roadassign.od_pairs`: `ODPairGenerator` and `OriginDestination`. The
  generator draws origin–destination pairs uniformly, by Dijkstra rank or by
  distance. It also computes the Dijkstra rank of a given pair.
- `roadassign.stats`: the dataclasses `AllOrNothingAssignmentStats` and
  `FrankWolfeAssignmentStats` collect figures per iteration. Each has
  `start_iteration` and `finish_iteration`.
- `roadassign.partitioning`:
  - `SeparatorTree` stores one side bit per vertex and level. From it you can
    read a partition with a maximum cell size, or a contraction order for a
    list of `(tail, head)` edges.
  - `SeparatorNode` and `SeparatorDecomposition` describe a separator tree
    together with its order.
- `roadassign.geometry`: `normal`, `orientation` and `intersection` work on
  2-D points given as `(x, y)`.
- `roadassign.kdtree`: `StaticKdTree` and `DynamicKdTree` answer circular
  range queries. `StaticKdTree` also answers k-nearest-neighbour queries. The
  `Metric` is `EUCLIDEAN` or `MANHATTAN`. `EUCLIDEAN` works with squared
  distances, so radii must be squared as well. Points can be removed from a
  `DynamicKdTree`.
- `roadassign.color`: `Color` is an RGBA colour. You build it from bytes, from
  a packed hexadecimal value (`Color.from_rgba`) or from floats
  (`Color.from_floats`). The module also has predefined colours and colour
  schemes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Quick look

Load a network and look at an edge:

```python
from roadassign.graph import Graph

graph = Graph.from_csv("edges.csv", 0.5, 1.5)
print(graph.num_vertices(), graph.num_edges())
print(graph.tail(0), graph.head(0), graph.free_travel_time(0))
```

Find a shortest path:

```python
from roadassign.dijkstra_adapter import DijkstraAdapter

adapter = DijkstraAdapter(graph)
adapter.preprocess()
print(adapter.run(0, 3))  # edge IDs from vertex 0 to vertex 3
```

Use an addressable heap:

```python
from roadassign.kheap import AddressableQuadheap

heap = AddressableQuadheap(10)
heap.insert(3, 42)
heap.insert(7, 5)
heap.decrease_key(3, 1)
print(heap.min_id(), heap.min_key())  # 3 1
```

Build a colour from a packed value:

```python
from roadassign.color import Color

red = Color.from_rgba(0xFF0000)
print(red.normalized_red)  # 1.0
```

## Command

`roadassign-constraint-demo` builds a small network with five vertices. It
solves the shortest-path problem with distance windows from vertex 0 to
vertex 4. For every Pareto-optimal path it prints the edges, the time and the
distance:

```
roadassign-constraint-demo
```

## What it does not do

- The package has no full traffic-assignment driver, such as an iterative
  all-or-nothing or Frank-Wolfe loop. It only provides the pieces such a
  driver would use.
- It has no commands for converting graph files or generating OD-pair files.
- It has no contraction hierarchies.
- It does no drawing. `roadassign.color` only defines colours.
- Separator trees and decompositions live in memory only. The package has no
  binary file format for them.