from roadassign.constraint_demo import build_example_graph, main


def test_example_graph_shape():
    graph = build_example_graph()
    assert len(graph.min_distance) == 5
    assert len(graph.edges) == 6
    assert all(m == 100.0 for m in graph.max_distance)


def test_example_graph_edge_order():
    graph = build_example_graph()
    assert [(a.tail, a.head) for a in graph.edges] == [
        (0, 1), (1, 2), (1, 3), (2, 4), (3, 4), (0, 4),
    ]


def test_main_reports_solutions(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "SPP with distance windows:"
    assert lines[1] == "Number of optimal solutions: 3"
    assert sum(line.startswith("time: ") for line in lines) == 3
    assert sum(line.startswith("distance: ") for line in lines) == 3


def test_main_first_solution_is_fastest(capsys):
    main()
    out = capsys.readouterr().out
    times = [float(line[6:]) for line in out.splitlines() if line.startswith("time: ")]
    assert times == sorted(times)