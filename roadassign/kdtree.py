"""Static and dynamic kd-trees for two-dimensional integer points."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Sequence
from enum import Enum

PointLike = Sequence[int]

_LEAF_SIZE = 10


class Metric(Enum):
    """The metric used to measure distances.

    EUCLIDEAN reports squared Euclidean distances, so radii are squared too.
    """

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"


def _combine(metric: Metric, dx: int, dy: int) -> int:
    if metric is Metric.EUCLIDEAN:
        return dx * dx + dy * dy
    return abs(dx) + abs(dy)


class _Node:
    __slots__ = ("box", "indices", "left", "right")

    def __init__(self, box: tuple[int, int, int, int]) -> None:
        self.box = box
        self.indices: list[int] | None = None
        self.left: _Node | None = None
        self.right: _Node | None = None


class StaticKdTree:
    """A kd-tree over a fixed set of points, or over a subset of it.

    Query results name points by their index in the given point sequence.
    """

    def __init__(
        self,
        points: Sequence[PointLike],
        metric: Metric = Metric.EUCLIDEAN,
        subset: Iterable[int] | None = None,
    ) -> None:
        self._points = points
        self._metric = metric
        self._subset = None if subset is None else tuple(subset)
        self._root: _Node | None = None
        self.rebuild()

    def rebuild(self) -> None:
        """Rebuild the tree from the current points."""
        n = len(self._points)
        if self._subset is None:
            indices = list(range(n))
        else:
            indices = sorted(set(self._subset))
            for idx in indices:
                if not 0 <= idx < n:
                    raise IndexError(f"point index out of range -- '{idx}'")
        self._root = self._build(indices) if indices else None

    def _build(self, indices: list[int]) -> _Node:
        points = self._points
        xs = [points[i][0] for i in indices]
        ys = [points[i][1] for i in indices]
        node = _Node((min(xs), min(ys), max(xs), max(ys)))
        if len(indices) <= _LEAF_SIZE:
            node.indices = indices
            return node
        min_x, min_y, max_x, max_y = node.box
        axis = 0 if max_x - min_x >= max_y - min_y else 1
        ordered = sorted(indices, key=lambda i: points[i][axis])
        mid = len(ordered) // 2
        node.left = self._build(ordered[:mid])
        node.right = self._build(ordered[mid:])
        return node

    def _box_distance(self, p: PointLike, box: tuple[int, int, int, int]) -> int:
        min_x, min_y, max_x, max_y = box
        dx = max(min_x - p[0], 0, p[0] - max_x)
        dy = max(min_y - p[1], 0, p[1] - max_y)
        return _combine(self._metric, dx, dy)

    def _distance(self, p: PointLike, idx: int) -> int:
        q = self._points[idx]
        return _combine(self._metric, q[0] - p[0], q[1] - p[1])

    def circular_range_query(self, p: PointLike, radius: int) -> list[tuple[int, int]]:
        """Return (index, distance) of every point within radius of p, nearest first."""
        found = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if self._box_distance(p, node.box) > radius:
                continue
            if node.indices is not None:
                for idx in node.indices:
                    dist = self._distance(p, idx)
                    if dist <= radius:
                        found.append((idx, dist))
            else:
                stack.append(node.left)
                stack.append(node.right)
        found.sort(key=lambda item: (item[1], item[0]))
        return found

    def nearest_neighbors(self, p: PointLike, k: int) -> list[tuple[int, int]]:
        """Return (index, distance) of the k points closest to p, nearest first."""
        if k <= 0:
            raise ValueError(f"k not strictly positive -- '{k}'")
        if self._root is None:
            return []
        best: list[tuple[int, int]] = []  # max-heap of (-distance, -index)
        counter = itertools.count()
        frontier = [(self._box_distance(p, self._root.box), next(counter), self._root)]
        while frontier:
            box_dist, _, node = heapq.heappop(frontier)
            if len(best) == k and box_dist > -best[0][0]:
                break
            if node.indices is not None:
                for idx in node.indices:
                    entry = (-self._distance(p, idx), -idx)
                    if len(best) < k:
                        heapq.heappush(best, entry)
                    elif entry > best[0]:
                        heapq.heapreplace(best, entry)
            else:
                for child in (node.left, node.right):
                    heapq.heappush(
                        frontier,
                        (self._box_distance(p, child.box), next(counter), child),
                    )
        return sorted(((-i, -d) for d, i in best), key=lambda item: (item[1], item[0]))


class DynamicKdTree:
    """A kd-tree over a set of points from which points can be removed.

    The underlying static tree is rebuilt whenever the number of remaining
    points drops to half its size.
    """

    def __init__(self, points: Sequence[PointLike], metric: Metric = Metric.EUCLIDEAN) -> None:
        self._points = points
        self._metric = metric
        self.rebuild()

    def rebuild(self) -> None:
        """Restore all initial points and rebuild the tree."""
        n = len(self._points)
        self._valid = [True] * n
        self._num_valid = n
        self._rebuild_static(range(n))

    def _rebuild_static(self, indices: Iterable[int]) -> None:
        subset = list(indices)
        self._tree = StaticKdTree(self._points, self._metric, subset)
        self._tree_size = len(subset)

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._valid):
            raise IndexError(f"point index out of range -- '{idx}'")

    def __contains__(self, idx: int) -> bool:
        self._check_index(idx)
        return self._valid[idx]

    def circular_range_query(self, p: PointLike, radius: int) -> list[tuple[int, int]]:
        """Return (index, distance) of every remaining point within radius of p."""
        return [
            (idx, dist)
            for idx, dist in self._tree.circular_range_query(p, radius)
            if self._valid[idx]
        ]

    def remove(self, idx: int) -> None:
        """Remove the point with the given index."""
        self._check_index(idx)
        if not self._valid[idx]:
            raise KeyError(idx)
        self._valid[idx] = False
        self._num_valid -= 1
        if 2 * self._num_valid <= self._tree_size:
            self._rebuild_static(i for i, valid in enumerate(self._valid) if valid)