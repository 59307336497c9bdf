import pytest

from roadassign.kdtree import DynamicKdTree, Metric, StaticKdTree

GRID = [(x, y) for x in range(0, 50, 5) for y in range(0, 56, 7)]
FAR = 10**9


@pytest.mark.parametrize("metric", list(Metric))
def test_large_radius_returns_all(metric):
    tree = StaticKdTree(GRID, metric)
    result = tree.circular_range_query((20, 20), FAR)
    assert sorted(idx for idx, _ in result) == list(range(len(GRID)))


@pytest.mark.parametrize("metric", list(Metric))
def test_zero_radius_finds_exact_point(metric):
    tree = StaticKdTree(GRID, metric)
    for i, p in enumerate(GRID):
        assert tree.circular_range_query(p, 0) == [(i, 0)]


@pytest.mark.parametrize("metric", list(Metric))
def test_range_results_within_radius_and_nested(metric):
    tree = StaticKdTree(GRID, metric)
    query = (13, 22)
    small = tree.circular_range_query(query, 40)
    large = tree.circular_range_query(query, 120)
    assert all(dist <= 40 for _, dist in small)
    assert all(dist <= 120 for _, dist in large)
    assert set(small) <= set(large)
    assert [d for _, d in large] == sorted(d for _, d in large)


def test_euclidean_reports_squared_distance():
    tree = StaticKdTree([(0, 0), (3, 4)], Metric.EUCLIDEAN)
    assert (1, 25) in tree.circular_range_query((0, 0), 25)
    assert [idx for idx, _ in tree.circular_range_query((0, 0), 24)] == [0]


def test_manhattan_distance_boundary():
    tree = StaticKdTree([(0, 0), (3, 4)], Metric.MANHATTAN)
    assert (1, 7) in tree.circular_range_query((0, 0), 7)
    assert [idx for idx, _ in tree.circular_range_query((0, 0), 6)] == [0]


@pytest.mark.parametrize("metric", list(Metric))
def test_nearest_neighbor_of_point_is_itself(metric):
    tree = StaticKdTree(GRID, metric)
    for i, p in enumerate(GRID):
        assert tree.nearest_neighbors(p, 1)[0][0] == i


@pytest.mark.parametrize("metric", list(Metric))
def test_nearest_neighbors_agree_with_range_query(metric):
    tree = StaticKdTree(GRID, metric)
    query = (17, 31)
    neighbors = tree.nearest_neighbors(query, 6)
    assert len(neighbors) == 6
    distances = [d for _, d in neighbors]
    assert distances == sorted(distances)
    in_range = tree.circular_range_query(query, distances[-1])
    assert set(neighbors) <= set(in_range)
    closer = tree.circular_range_query(query, distances[-1] - 1)
    assert len(closer) < 6


def test_k_larger_than_set_returns_all():
    points = GRID[:5]
    tree = StaticKdTree(points)
    assert sorted(i for i, _ in tree.nearest_neighbors((1, 1), 50)) == list(range(len(points)))


def test_non_positive_k_rejected():
    with pytest.raises(ValueError):
        StaticKdTree(GRID).nearest_neighbors((0, 0), 0)


def test_empty_tree_finds_nothing():
    tree = StaticKdTree([])
    assert tree.circular_range_query((0, 0), FAR) == tree.nearest_neighbors((0, 0), 3)
    assert len(tree.circular_range_query((0, 0), FAR)) == 0


def test_subset_restricts_results():
    subset = list(range(0, len(GRID), 3))
    tree = StaticKdTree(GRID, Metric.EUCLIDEAN, subset)
    result = tree.circular_range_query((25, 25), FAR)
    assert sorted(i for i, _ in result) == subset
    assert all(i in subset for i, _ in tree.nearest_neighbors(GRID[1], 4))


def test_subset_index_out_of_range():
    with pytest.raises(IndexError):
        StaticKdTree(GRID, Metric.EUCLIDEAN, [len(GRID)])


def test_rebuild_picks_up_changed_points():
    points = [(0, 0), (100, 100)]
    tree = StaticKdTree(points)
    points[1] = (1, 0)
    tree.rebuild()
    assert sorted(i for i, _ in tree.circular_range_query((0, 0), 1)) == [0, 1]


def test_dynamic_remove_hides_point():
    tree = DynamicKdTree(GRID)
    assert 4 in tree
    tree.remove(4)
    assert 4 not in tree
    assert tree.circular_range_query(GRID[4], 0) == []
    with pytest.raises(KeyError):
        tree.remove(4)


def test_dynamic_many_removals_keep_remaining():
    tree = DynamicKdTree(GRID, Metric.MANHATTAN)
    removed = set(range(0, len(GRID), 2)) | set(range(1, len(GRID) // 2, 2))
    for idx in sorted(removed):
        tree.remove(idx)
    remaining = sorted(set(range(len(GRID))) - removed)
    result = tree.circular_range_query((0, 0), FAR)
    assert sorted(i for i, _ in result) == remaining
    for idx in remaining:
        assert tree.circular_range_query(GRID[idx], 0) == [(idx, 0)]


def test_dynamic_rebuild_restores_points():
    tree = DynamicKdTree(GRID)
    for idx in range(10):
        tree.remove(idx)
    tree.rebuild()
    assert all(idx in tree for idx in range(len(GRID)))
    assert len(tree.circular_range_query((0, 0), FAR)) == len(GRID)


def test_dynamic_index_out_of_range():
    tree = DynamicKdTree(GRID)
    with pytest.raises(IndexError):
        len(GRID) in tree
    with pytest.raises(IndexError):
        tree.remove(-1)