"""Vector products, intersections, containment and closest-pair search."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left, insort
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Optional, Union

from .edge import INF
from .geometry_struct import (
    EPS,
    Circle,
    Line,
    Plane,
    Point,
    Point3D,
    Vector,
    Vector3D,
    key_xy,
)

Planar = Union[Point, Vector]
Spatial = Union[Point3D, Vector3D]
_SPATIAL = (Point3D, Vector3D)


def cross3d(v1: Spatial, v2: Spatial) -> Vector3D:
    """Return the cross product of two space vectors."""
    return Vector3D(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def cross(v1: Planar, v2: Planar) -> float:
    """Return the z component of the cross product of two plane vectors."""
    return v1.x * v2.y - v1.y * v2.x


def det(a1: float, b1: float, a2: float, b2: float) -> float:
    """Return the determinant of the 2x2 matrix ``[[a1, b1], [a2, b2]]``."""
    return a1 * b2 - a2 * b1


def dot(p1: Union[Planar, Spatial], p2: Union[Planar, Spatial]) -> float:
    """Return the scalar product; uses z only when both operands have one."""
    total = p1.x * p2.x + p1.y * p2.y
    if isinstance(p1, _SPATIAL) and isinstance(p2, _SPATIAL):
        total += p1.z * p2.z
    return total


def intersect(l1: Line, l2: Line) -> Optional[Point]:
    """Return the crossing point of two lines, or None if they are parallel."""
    d = det(l1.a, l1.b, l2.a, l2.b)
    if d == 0:
        return None
    return Point(
        det(-l1.c, l1.b, -l2.c, l2.b) / d,
        det(l1.a, -l1.c, l2.a, -l2.c) / d,
    )


def circle_contains(circle: Circle, p: Point) -> bool:
    """True if ``p`` lies on the boundary of ``circle``."""
    dx = p.x - circle.x
    dy = p.y - circle.y
    return abs(circle.r * circle.r - (dx * dx + dy * dy)) < EPS


def plane_contains(plane: Plane, p: Point3D) -> bool:
    """True if ``p`` lies on ``plane``."""
    return abs(plane.a * p.x + plane.b * p.y + plane.c * p.z + plane.d) < EPS


def _distance(p: Point, q: Point) -> float:
    return math.hypot(p.x - q.x, p.y - q.y)


def closest(points: Iterable[Point]) -> float:
    """Smallest distance between two of ``points`` by a sweep line.

    Returns ``INF`` when fewer than two points are given.
    """
    pts = sorted(points, key=key_xy)
    best = float(INF)
    window: list[tuple[float, float]] = []
    left = 0
    for i, p in enumerate(pts):
        while left < i and pts[left].x < p.x - best:
            gone = pts[left]
            del window[bisect_left(window, (gone.y, gone.x))]
            left += 1
        start = bisect_left(window, (p.y - best, p.x))
        for y, x in islice(window, start, None):
            if y >= p.y + best:
                break
            best = min(best, math.hypot(x - p.x, y - p.y))
        insort(window, (p.y, p.x))
    return best


def _closest(pts: Sequence[Point]) -> tuple[float, list[Point]]:
    """Closest distance within x-sorted ``pts`` and the points sorted by y."""
    if len(pts) <= 1:
        return float(INF), list(pts)
    m = len(pts) // 2
    median = (pts[m].x + pts[m - 1].x) / 2
    d_left, left = _closest(pts[:m])
    d_right, right = _closest(pts[m:])
    d = min(d_left, d_right)
    strip_left = [p for p in left if median - p.x < d]
    strip_right = [p for p in right if p.x - median < d]
    r = 0
    for p in strip_left:
        while r < len(strip_right) and strip_right[r].y - p.y < d:
            d = min(d, _distance(p, strip_right[r]))
            r += 1
        r = max(r - 6, 0)
    return d, list(heapq.merge(left, right, key=lambda q: q.y))


def closest_recursive(points: Iterable[Point]) -> float:
    """Smallest distance between two of ``points`` by divide and conquer.

    Returns ``INF`` when fewer than two points are given.
    """
    return _closest(sorted(points, key=key_xy))[0]