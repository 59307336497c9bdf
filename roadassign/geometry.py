"""Elementary geometric predicates on two-dimensional points given as (x, y)."""

from __future__ import annotations

from collections.abc import Sequence

PointLike = Sequence[float]


def normal(p: PointLike, q: PointLike) -> tuple[float, float]:
    """Return the normal vector of the line through p and q, pointing to its left."""
    return (p[1] - q[1], q[0] - p[0])


def orientation(p: PointLike, q: PointLike, r: PointLike) -> int:
    """Return 1, -1 or 0 as r lies left of, right of, or on the line through p and q."""
    nx, ny = normal(p, q)
    dot = nx * (r[0] - p[0]) + ny * (r[1] - p[1])
    return (dot > 0) - (dot < 0)


def _boxes_intersect(p: PointLike, q: PointLike, r: PointLike, s: PointLike) -> bool:
    return (
        max(min(p[0], q[0]), min(r[0], s[0])) <= min(max(p[0], q[0]), max(r[0], s[0]))
        and max(min(p[1], q[1]), min(r[1], s[1])) <= min(max(p[1], q[1]), max(r[1], s[1]))
    )


def intersection(p: PointLike, q: PointLike, r: PointLike, s: PointLike) -> bool:
    """Return True if the line segments pq and rs intersect."""
    o1 = orientation(p, q, r)
    o2 = orientation(p, q, s)
    if o1 != o2 and orientation(r, s, p) != orientation(r, s, q):
        return True
    if o1 != 0 or o2 != 0:
        return False
    return _boxes_intersect(p, q, r, s)