import math

import pytest

from roadassign.constrained import (
    ConstrainedAdapter,
    ResourceContainer,
    ResourceGraph,
    r_c_shortest_paths,
)
from roadassign.graph import Graph


def _example_graph():
    graph = ResourceGraph()
    for _ in range(5):
        graph.add_vertex(0.0, 100.0)
    graph.add_edge(0, 1, 1.0, 1.0)
    graph.add_edge(1, 2, 1.0, 1.0)
    graph.add_edge(1, 3, 1.0, 1.0)
    graph.add_edge(2, 4, 2.5, 0.0)
    graph.add_edge(3, 4, 1.0, 1.0)
    graph.add_edge(0, 4, 3.5, 2.5)
    return graph


def test_resource_ordering_is_time_first():
    assert ResourceContainer(1.0, 9.0) < ResourceContainer(2.0, 0.0)
    assert ResourceContainer(1.0, 1.0) < ResourceContainer(1.0, 2.0)


def test_dominates_is_reflexive_and_componentwise():
    a = ResourceContainer(1.0, 2.0)
    assert a.dominates(a)
    assert a.dominates(ResourceContainer(1.0, 3.0))
    assert not a.dominates(ResourceContainer(0.5, 3.0))


def test_extend_raises_distance_to_window_minimum():
    graph = ResourceGraph()
    graph.add_vertex()
    graph.add_vertex(5.0, 10.0)
    e = graph.add_edge(0, 1, 2.0, 1.0)
    assert graph.extend(ResourceContainer(), e) == ResourceContainer(2.0, 5.0)


def test_extend_infeasible_beyond_window_maximum():
    graph = ResourceGraph()
    graph.add_vertex()
    graph.add_vertex(0.0, 1.0)
    e = graph.add_edge(0, 1, 2.0, 3.0)
    assert graph.extend(ResourceContainer(), e) is None


def test_add_edge_rejects_unknown_vertex():
    graph = ResourceGraph()
    graph.add_vertex()
    with pytest.raises(IndexError):
        graph.add_edge(0, 3, 1.0, 1.0)


def test_example_has_three_pareto_solutions():
    solutions = r_c_shortest_paths(_example_graph(), 0, 4)
    assert len(solutions) == 3


def test_solutions_are_mutually_non_dominated_and_sorted():
    solutions = r_c_shortest_paths(_example_graph(), 0, 4)
    resources = [res for _, res in solutions]
    assert resources == sorted(resources)
    for i, a in enumerate(resources):
        for j, b in enumerate(resources):
            if i != j:
                assert not a.dominates(b)


def test_solution_paths_connect_and_sum_resources():
    graph = _example_graph()
    for path, res in r_c_shortest_paths(graph, 0, 4):
        arcs = [graph.edges[e] for e in path]
        assert arcs[0].tail == 0
        assert arcs[-1].head == 4
        for a, b in zip(arcs, arcs[1:]):
            assert a.head == b.tail
        assert res.time == pytest.approx(sum(a.time for a in arcs))
        assert res.distance == pytest.approx(sum(a.distance for a in arcs))


def test_tight_window_removes_solutions():
    graph = _example_graph()
    graph.max_distance[4] = 2.5
    solutions = r_c_shortest_paths(graph, 0, 4)
    assert all(res.distance <= 2.5 for _, res in solutions)
    assert len(solutions) == 2


def test_source_equal_target_gives_empty_path():
    solutions = r_c_shortest_paths(_example_graph(), 2, 2)
    assert solutions == [([], ResourceContainer())]


def test_unreachable_target_gives_no_solution():
    assert r_c_shortest_paths(_example_graph(), 4, 0) == []


def _road_graph(multiplier):
    edges = [
        (0, 1, 1000, 100, 10),
        (0, 2, 1000, 100, 100),
        (2, 1, 2000, 100, 100),
    ]
    return Graph(edges, 0.0, multiplier)


def test_adapter_respects_length_bound():
    adapter = ConstrainedAdapter(_road_graph(1.0))
    adapter.preprocess()
    adapter.customize()
    assert adapter.run(0, 1) == [0]


def test_adapter_takes_fastest_path_with_loose_bound():
    graph = _road_graph(5.0)
    adapter = ConstrainedAdapter(graph)
    adapter.preprocess()
    adapter.customize()
    path = adapter.run(0, 1)
    assert path == [1, 2]
    assert sum(graph.weight(e) for e in path) < graph.weight(0)


def test_adapter_follows_weight_changes_after_customize():
    graph = _road_graph(5.0)
    adapter = ConstrainedAdapter(graph)
    adapter.preprocess()
    graph.set_weight(0, 1.0)
    adapter.customize()
    assert adapter.run(0, 1) == [0]


def test_adapter_requires_preprocess():
    adapter = ConstrainedAdapter(_road_graph(1.0))
    with pytest.raises(RuntimeError):
        adapter.run(0, 1)


def test_adapter_unreachable_target():
    adapter = ConstrainedAdapter(_road_graph(1.0))
    adapter.preprocess()
    adapter.customize()
    with pytest.raises(ValueError):
        adapter.run(1, 0)


def test_adapter_restores_window_after_run():
    adapter = ConstrainedAdapter(_road_graph(1.0))
    adapter.preprocess()
    adapter.customize()
    adapter.run(0, 1)
    assert adapter.run(0, 1) == [0]
    assert math.isinf(adapter._resource_graph.max_distance[1])